"""Pydantic models for the documents stored in the trip-management datastore.

Attribute names are snake_case; aliases match the camelCase field names the
documents are stored with.
"""

from pydantic import BaseModel, ConfigDict, Field

from tripinsights.models.enums import ExpenseCategory, ExpenseKind, StopKind, TripStatus


class Entity(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    created_at: str | None = Field(default=None, alias="createdAt")
    updated_at: str | None = Field(default=None, alias="updatedAt")


class TripStatisticsSnapshot(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    distance_travelled: float | None = Field(default=None, alias="distanciaPercorrida")
    fuel_consumed: float | None = Field(default=None, alias="combustivelConsumido")
    average_consumption: float | None = Field(default=None, alias="consumoMedio")
    average_speed: float | None = Field(default=None, alias="velocidadeMedia")
    total_time: float | None = Field(default=None, alias="tempoTotal")
    total_stops: int | None = Field(default=None, alias="totalParadas")
    real_total_cost: float | None = Field(default=None, alias="custoTotalReal")


class Trip(Entity):
    user_id: str = Field(alias="usuarioId")
    name: str = Field(alias="nome")
    description: str | None = Field(default=None, alias="descricao")
    start_date: str = Field(alias="dataInicio")
    end_date: str = Field(alias="dataFim")
    status: TripStatus
    origin: str = Field(alias="origem")
    destination: str = Field(alias="destino")
    total_distance: float | None = Field(default=None, alias="distanciaTotal")
    total_cost: float | None = Field(default=None, alias="custoTotal")
    day_count: int | None = Field(default=None, alias="numeroDias")
    photos: list[str] = Field(default_factory=list, alias="fotos")
    notes: str | None = Field(default=None, alias="observacoes")
    statistics: TripStatisticsSnapshot | None = Field(default=None, alias="estatisticas")


class Stop(Entity):
    trip_id: str = Field(alias="viagemId")
    trip_day_id: str = Field(alias="diaViagemId")
    kind: StopKind = Field(alias="tipo")
    name: str = Field(alias="nome")
    address: str | None = Field(default=None, alias="endereco")
    # Stored as [latitude, longitude]; records with any other length are not geo-tagged.
    coordinates: list[float] | None = Field(default=None, alias="coordenadas")
    arrival_time: str | None = Field(default=None, alias="horaChegada")
    departure_time: str | None = Field(default=None, alias="horaSaida")
    duration_minutes: int | None = Field(default=None, alias="duracao")
    cost: float | None = Field(default=None, alias="custo")
    notes: str | None = Field(default=None, alias="observacoes")
    photos: list[str] = Field(default_factory=list, alias="fotos")
    rating: float | None = Field(default=None, alias="avaliacao")

    @property
    def is_geotagged(self) -> bool:
        return self.coordinates is not None and len(self.coordinates) == 2


class Expense(Entity):
    user_id: str = Field(alias="usuarioId")
    trip_id: str = Field(alias="viagemId")
    trip_day_id: str | None = Field(default=None, alias="diaViagemId")
    stop_id: str | None = Field(default=None, alias="paradaId")
    category: ExpenseCategory = Field(alias="categoria")
    description: str = Field(alias="descricao")
    amount: float = Field(alias="valor", ge=0)
    date: str = Field(alias="data")
    time: str | None = Field(default=None, alias="hora")
    location: str | None = Field(default=None, alias="local")
    payment_method: str | None = Field(default=None, alias="metodoPagamento")
    notes: str | None = Field(default=None, alias="observacoes")
    receipt_url: str | None = Field(default=None, alias="comprovanteUrl")
    kind: ExpenseKind = Field(alias="tipo")
    currency: str | None = Field(default=None, alias="moeda")


class TripDay(Entity):
    trip_id: str = Field(alias="viagemId")
    user_id: str | None = Field(default=None, alias="usuarioId")
    number: int = Field(alias="numero", ge=1)
    date: str = Field(alias="data")
    title: str | None = Field(default=None, alias="titulo")
    description: str | None = Field(default=None, alias="descricao")
    distance: float | None = Field(default=None, alias="distanciaPercorrida")
    duration: float | None = Field(default=None, alias="tempoViagem")
    total_cost: float | None = Field(default=None, alias="custoTotal")
    notes: str | None = Field(default=None, alias="observacoes")
    photos: list[str] = Field(default_factory=list, alias="fotos")
