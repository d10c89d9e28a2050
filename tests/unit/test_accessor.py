"""Unit tests for EntityAccessor over the in-memory store."""

from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from tripinsights.models import ExpenseCategory, StopKind, TripStatus
from tripinsights.services.accessor import EntityAccessor


@pytest.mark.asyncio
async def test_get_trip(seed, accessor):
    seed.trip("t1", nome="Patagonia")

    trip = await accessor.get_trip("t1")

    assert trip.id == "t1"
    assert trip.name == "Patagonia"


@pytest.mark.asyncio
async def test_single_fetches_return_none_when_missing(accessor):
    assert await accessor.get_trip("ghost") is None
    assert await accessor.get_stop("ghost") is None
    assert await accessor.get_expense("ghost") is None
    assert await accessor.get_trip_day("ghost") is None


@pytest.mark.asyncio
async def test_list_fetches_return_empty_when_nothing_matches(accessor):
    assert await accessor.list_trips("nobody") == []
    assert await accessor.list_stops("ghost") == []
    assert await accessor.list_expenses("ghost") == []
    assert await accessor.list_trip_days("ghost") == []


@pytest.mark.asyncio
async def test_list_trips_newest_start_first(seed, accessor):
    seed.trip("old", dataInicio="2023-01-10", dataFim="2023-01-12")
    seed.trip("new", dataInicio="2024-06-01", dataFim="2024-06-03")
    seed.trip("mid", dataInicio="2023-09-15", dataFim="2023-09-20")
    seed.trip("other-user", usuarioId="user-2")

    trips = await accessor.list_trips("user-1")

    assert [trip.id for trip in trips] == ["new", "mid", "old"]


@pytest.mark.asyncio
async def test_find_trips_by_status(seed, accessor):
    seed.trip("a", status="completed", dataInicio="2024-01-01")
    seed.trip("b", status="planned")
    seed.trip("c", status="completed", dataInicio="2024-05-01")

    trips = await accessor.find_trips_by_status("user-1", TripStatus.COMPLETED)

    assert [trip.id for trip in trips] == ["c", "a"]


@pytest.mark.asyncio
async def test_find_trips_by_status_accepts_plain_string(seed, accessor):
    seed.trip("a", status="cancelled")

    trips = await accessor.find_trips_by_status("user-1", "cancelled")

    assert [trip.id for trip in trips] == ["a"]


@pytest.mark.asyncio
async def test_list_stops_in_arrival_order(seed, accessor):
    seed.stop("s2", "t1", horaChegada="2024-03-01T15:00:00Z")
    seed.stop("s1", "t1", horaChegada="2024-03-01T09:00:00Z")
    seed.stop("s3", "t1")
    seed.stop("x", "t2", horaChegada="2024-03-01T08:00:00Z")

    stops = await accessor.list_stops("t1")

    assert [stop.id for stop in stops] == ["s1", "s2", "s3"]


@pytest.mark.asyncio
async def test_find_stops_by_kind(seed, accessor):
    seed.stop("s1", "t1", tipo="fuel")
    seed.stop("s2", "t1", tipo="meal")

    stops = await accessor.find_stops_by_kind("t1", StopKind.FUEL)

    assert [stop.id for stop in stops] == ["s1"]


@pytest.mark.asyncio
async def test_list_expenses_newest_first(seed, accessor):
    seed.expense("e1", "t1", data="2024-03-01")
    seed.expense("e3", "t1", data="2024-03-03")
    seed.expense("e2", "t1", data="2024-03-02")

    expenses = await accessor.list_expenses("t1")

    assert [expense.id for expense in expenses] == ["e3", "e2", "e1"]


@pytest.mark.asyncio
async def test_find_expenses_by_category(seed, accessor):
    seed.expense("e1", "t1", categoria="toll", valor=12.5)
    seed.expense("e2", "t1", categoria="food", valor=40)

    expenses = await accessor.find_expenses_by_category("t1", ExpenseCategory.TOLL)

    assert [expense.amount for expense in expenses] == [12.5]


@pytest.mark.asyncio
async def test_list_trip_days_by_number(seed, accessor):
    seed.day("d10", "t1", 10)
    seed.day("d2", "t1", 2)
    seed.day("d1", "t1", 1)

    days = await accessor.list_trip_days("t1")

    assert [day.number for day in days] == [1, 2, 10]


@pytest.mark.asyncio
async def test_invalid_filter_value_raises_value_error(accessor):
    with pytest.raises(ValueError):
        await accessor.find_stops_by_kind("t1", "teleport")


@pytest.mark.asyncio
async def test_storage_error_propagates():
    store = MagicMock()
    error = ClientError({"Error": {"Code": "AccessDeniedException", "Message": "denied"}}, "GetItem")
    store.get.side_effect = error

    with pytest.raises(ClientError) as exc_info:
        await EntityAccessor(store).get_trip("t1")

    assert exc_info.value is error
    store.get.assert_called_once_with("viagens", "t1")
