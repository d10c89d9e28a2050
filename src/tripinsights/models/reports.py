"""Pydantic result types for the analytics reports.

Dump with ``model_dump(by_alias=True)`` to get the published field names.
"""

from pydantic import BaseModel, ConfigDict, Field

from tripinsights.models.enums import ExpenseCategory, StopKind, TripStatus

NO_TRIPS_MESSAGE = "no trips"
INSUFFICIENT_STOPS_MESSAGE = "insufficient stops"
INSUFFICIENT_GEOTAGGED_STOPS_MESSAGE = "insufficient geo-tagged stops"
ROUTE_OPTIMIZED_MESSAGE = "route looks optimized"


class Report(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class CategorySummary(Report):
    category: ExpenseCategory = Field(alias="categoria")
    total: float = Field(alias="valorTotal")
    count: int = Field(alias="quantidade")
    percentage: float = Field(alias="percentual")
    average: float = Field(alias="valorMedio")


class CostReport(Report):
    trip_id: str = Field(alias="viagemId")
    total_planned: float = Field(alias="totalPlanejado")
    total_real: float = Field(alias="totalReal")
    difference: float = Field(alias="diferenca")
    variance_percentage: float = Field(alias="percentualVariacao")
    category_summaries: list[CategorySummary] = Field(alias="resumoPorCategoria")
    average_cost_per_day: float = Field(alias="custoMedioPorDia")
    generated_at: str = Field(alias="dataGeracao")


class TripStatistics(Report):
    trip_id: str = Field(alias="viagemId")
    trip_name: str = Field(alias="nomeViagem")
    status: TripStatus
    origin: str = Field(alias="origem")
    destination: str = Field(alias="destino")
    start_date: str = Field(alias="dataInicio")
    end_date: str = Field(alias="dataFim")
    duration_days: int = Field(alias="diasViagem")
    total_distance: float = Field(alias="distanciaTotal")
    stop_count: int = Field(alias="totalParadas")
    fuel_stop_count: int = Field(alias="paradasAbastecimento")
    real_total_cost: float = Field(alias="custoTotalReal")
    average_cost_per_day: float = Field(alias="custoMedioPorDia")
    average_cost_per_stop: float = Field(alias="mediaGastoPorParada")


class InsufficientStops(Report):
    message: str = Field(default=INSUFFICIENT_STOPS_MESSAGE, alias="mensagem")
    stop_count: int = Field(alias="paradasAtuais")


class InsufficientGeoTaggedStops(Report):
    message: str = Field(default=INSUFFICIENT_GEOTAGGED_STOPS_MESSAGE, alias="mensagem")
    geotagged_count: int = Field(alias="paradasComCoordenadas")
    stop_count: int = Field(alias="totalParadas")


class AdvisoryStop(Report):
    id: str
    name: str = Field(alias="nome")
    kind: StopKind = Field(alias="tipo")
    coordinates: list[float] = Field(alias="coordenadas")


class RouteAdvisory(Report):
    trip_id: str = Field(alias="viagemId")
    stop_count: int = Field(alias="totalParadas")
    geotagged_count: int = Field(alias="paradasComCoordenadas")
    suggestions: list[str] = Field(alias="sugestoes")
    stops: list[AdvisoryStop] = Field(alias="paradas")


RouteAdvisoryResult = InsufficientStops | InsufficientGeoTaggedStops | RouteAdvisory


class TripSpending(Report):
    trip_id: str = Field(alias="viagemId")
    trip_name: str = Field(alias="nomeViagem")
    total_spent: float = Field(alias="totalGasto")
    day_count: int = Field(alias="numeroDias")
    spent_per_day: float = Field(alias="gastoPorDia")
    spent_by_category: dict[ExpenseCategory, float] = Field(alias="gastosPorCategoria")


class NoTrips(Report):
    message: str = Field(default=NO_TRIPS_MESSAGE, alias="mensagem")
    trip_count: int = Field(default=0, alias="totalViagens")


class SpendingAnalysis(Report):
    user_id: str = Field(alias="usuarioId")
    trip_count: int = Field(alias="totalViagens")
    total_spent: float = Field(alias="totalGastoGeral")
    average_per_trip: float = Field(alias="mediaGastoPorViagem")
    trips: list[TripSpending] = Field(alias="viagens")


SpendingPatternResult = NoTrips | SpendingAnalysis
