"""Typed read access to trips, stops, expenses and trip days."""

import asyncio
import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel

from tripinsights.models.entities import Expense, Stop, Trip, TripDay
from tripinsights.models.enums import Collection, ExpenseCategory, StopKind, TripStatus
from tripinsights.store.interface import DocumentStore, OrderBy

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT", bound=BaseModel)

TRIPS_ORDER = OrderBy("dataInicio", descending=True)
STOPS_ORDER = OrderBy("horaChegada")
EXPENSES_ORDER = OrderBy("data", descending=True)
TRIP_DAYS_ORDER = OrderBy("numero")


class EntityAccessor:
    """Read-only entity lookups over an injected DocumentStore.

    Store calls are blocking, so each one runs in a worker thread; callers can
    fan out several reads with asyncio.gather. Storage errors propagate as-is.
    """

    def __init__(self, store: DocumentStore) -> None:
        self._store = store

    async def _get(self, collection: Collection, key: str, model: type[EntityT]) -> EntityT | None:
        document = await asyncio.to_thread(self._store.get, collection.value, key)
        if document is None:
            logger.debug("%s/%s not found", collection.value, key)
            return None
        return model.model_validate(document)

    async def _list(
        self,
        collection: Collection,
        filters: Mapping[str, Any],
        order_by: OrderBy,
        model: type[EntityT],
    ) -> list[EntityT]:
        documents = await asyncio.to_thread(self._store.query, collection.value, filters, order_by)
        logger.debug("%s %s -> %d documents", collection.value, dict(filters), len(documents))
        return [model.model_validate(document) for document in documents]

    # --- Trips ---

    async def get_trip(self, trip_id: str) -> Trip | None:
        return await self._get(Collection.TRIPS, trip_id, Trip)

    async def list_trips(self, user_id: str) -> list[Trip]:
        return await self._list(Collection.TRIPS, {"usuarioId": user_id}, TRIPS_ORDER, Trip)

    async def find_trips_by_status(self, user_id: str, status: TripStatus) -> list[Trip]:
        filters = {"usuarioId": user_id, "status": TripStatus(status).value}
        return await self._list(Collection.TRIPS, filters, TRIPS_ORDER, Trip)

    # --- Stops ---

    async def get_stop(self, stop_id: str) -> Stop | None:
        return await self._get(Collection.STOPS, stop_id, Stop)

    async def list_stops(self, trip_id: str) -> list[Stop]:
        return await self._list(Collection.STOPS, {"viagemId": trip_id}, STOPS_ORDER, Stop)

    async def find_stops_by_kind(self, trip_id: str, kind: StopKind) -> list[Stop]:
        filters = {"viagemId": trip_id, "tipo": StopKind(kind).value}
        return await self._list(Collection.STOPS, filters, STOPS_ORDER, Stop)

    # --- Expenses ---

    async def get_expense(self, expense_id: str) -> Expense | None:
        return await self._get(Collection.EXPENSES, expense_id, Expense)

    async def list_expenses(self, trip_id: str) -> list[Expense]:
        return await self._list(Collection.EXPENSES, {"viagemId": trip_id}, EXPENSES_ORDER, Expense)

    async def find_expenses_by_category(self, trip_id: str, category: ExpenseCategory) -> list[Expense]:
        filters = {"viagemId": trip_id, "categoria": ExpenseCategory(category).value}
        return await self._list(Collection.EXPENSES, filters, EXPENSES_ORDER, Expense)

    # --- Trip days ---

    async def get_trip_day(self, day_id: str) -> TripDay | None:
        return await self._get(Collection.TRIP_DAYS, day_id, TripDay)

    async def list_trip_days(self, trip_id: str) -> list[TripDay]:
        return await self._list(Collection.TRIP_DAYS, {"viagemId": trip_id}, TRIP_DAYS_ORDER, TripDay)
