from os import environ

from pydantic import BaseModel, ConfigDict, Field


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    aws_region: str
    dynamodb_endpoint: str | None = None
    trips_table: str
    stops_table: str
    expenses_table: str
    trip_days_table: str
    owner_index: str
    trip_index: str
    route_distance_threshold_km: float = Field(default=500.0, gt=0)
    log_level: str = "INFO"
    environment: str


_cached_config: Config | None = None


def _reset_config() -> None:
    """Reset cached config. For testing only."""
    global _cached_config
    _cached_config = None


def get_config() -> Config:
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    _cached_config = Config(
        aws_region=environ.get("AWS_REGION", "us-east-1"),
        dynamodb_endpoint=environ.get("DYNAMODB_ENDPOINT"),
        trips_table=environ.get("TRIPS_TABLE", "Trips"),
        stops_table=environ.get("STOPS_TABLE", "Stops"),
        expenses_table=environ.get("EXPENSES_TABLE", "Expenses"),
        trip_days_table=environ.get("TRIP_DAYS_TABLE", "TripDays"),
        owner_index=environ.get("OWNER_INDEX", "usuarioId-index"),
        trip_index=environ.get("TRIP_INDEX", "viagemId-index"),
        route_distance_threshold_km=float(environ.get("ROUTE_DISTANCE_THRESHOLD_KM", "500")),
        log_level=environ.get("LOG_LEVEL", "INFO"),
        environment=environ.get("ENVIRONMENT", "local"),
    )
    return _cached_config
