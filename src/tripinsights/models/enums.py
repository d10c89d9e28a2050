"""Closed enumerations shared by entities and reports, plus their display labels."""

from enum import Enum


class Collection(str, Enum):
    """Document collections read by the accessor."""

    TRIPS = "viagens"
    STOPS = "paradas"
    EXPENSES = "custos"
    TRIP_DAYS = "diasViagem"


class TripStatus(str, Enum):
    PLANNED = "planned"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class StopKind(str, Enum):
    FUEL = "fuel"
    MEAL = "meal"
    LODGING = "lodging"
    POINT_OF_INTEREST = "point-of-interest"
    MAINTENANCE = "maintenance"
    OTHER = "other"


class ExpenseCategory(str, Enum):
    FUEL = "fuel"
    FOOD = "food"
    LODGING = "lodging"
    TOLL = "toll"
    PARKING = "parking"
    MAINTENANCE = "maintenance"
    LEISURE = "leisure"
    SHOPPING = "shopping"
    OTHER = "other"


class ExpenseKind(str, Enum):
    """Budgeted (planned) versus incurred (real) expense entries."""

    PLANNED = "planned"
    REAL = "real"


# Every member must have an entry; tests/unit/test_enums.py enforces it.
TRIP_STATUS_LABELS: dict[TripStatus, str] = {
    TripStatus.PLANNED: "Planned",
    TripStatus.IN_PROGRESS: "In progress",
    TripStatus.COMPLETED: "Completed",
    TripStatus.CANCELLED: "Cancelled",
}

STOP_KIND_LABELS: dict[StopKind, str] = {
    StopKind.FUEL: "Fuel",
    StopKind.MEAL: "Meal",
    StopKind.LODGING: "Lodging",
    StopKind.POINT_OF_INTEREST: "Point of interest",
    StopKind.MAINTENANCE: "Maintenance",
    StopKind.OTHER: "Other",
}

EXPENSE_CATEGORY_LABELS: dict[ExpenseCategory, str] = {
    ExpenseCategory.FUEL: "Fuel",
    ExpenseCategory.FOOD: "Food",
    ExpenseCategory.LODGING: "Lodging",
    ExpenseCategory.TOLL: "Tolls",
    ExpenseCategory.PARKING: "Parking",
    ExpenseCategory.MAINTENANCE: "Maintenance",
    ExpenseCategory.LEISURE: "Leisure",
    ExpenseCategory.SHOPPING: "Shopping",
    ExpenseCategory.OTHER: "Other",
}
