"""Shared test fixtures for Trip Insights."""

import os
import sys
from pathlib import Path
from typing import Any

import pytest
from dotenv import load_dotenv

# Load .env file for test configuration
load_dotenv()

# Unset AWS_PROFILE for local testing (DynamoDB Local doesn't need it)
if "AWS_PROFILE" in os.environ:
    del os.environ["AWS_PROFILE"]

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from tripinsights.models.enums import Collection  # noqa: E402
from tripinsights.services.accessor import EntityAccessor  # noqa: E402
from tripinsights.store.memory import InMemoryDocumentStore  # noqa: E402


class Seeder:
    """Writes documents with sensible defaults into an in-memory store."""

    def __init__(self, store: InMemoryDocumentStore) -> None:
        self.store = store

    def trip(self, trip_id: str, **fields: Any) -> str:
        document = {
            "usuarioId": "user-1",
            "nome": f"Trip {trip_id}",
            "dataInicio": "2024-03-01",
            "dataFim": "2024-03-05",
            "status": "completed",
            "origem": "São Paulo",
            "destino": "Mendoza",
            **fields,
        }
        return self.store.add(Collection.TRIPS.value, document, key=trip_id)

    def stop(self, stop_id: str, trip_id: str, **fields: Any) -> str:
        document = {
            "viagemId": trip_id,
            "diaViagemId": "day-1",
            "tipo": "other",
            "nome": f"Stop {stop_id}",
            **fields,
        }
        return self.store.add(Collection.STOPS.value, document, key=stop_id)

    def expense(self, expense_id: str, trip_id: str, **fields: Any) -> str:
        document = {
            "usuarioId": "user-1",
            "viagemId": trip_id,
            "categoria": "other",
            "descricao": f"Expense {expense_id}",
            "valor": 0,
            "data": "2024-03-01",
            "tipo": "real",
            **fields,
        }
        return self.store.add(Collection.EXPENSES.value, document, key=expense_id)

    def day(self, day_id: str, trip_id: str, number: int, **fields: Any) -> str:
        document = {"viagemId": trip_id, "numero": number, "data": f"2024-03-{number:02d}", **fields}
        return self.store.add(Collection.TRIP_DAYS.value, document, key=day_id)


# In-memory fixtures
@pytest.fixture
def store():
    return InMemoryDocumentStore()


@pytest.fixture
def seed(store):
    return Seeder(store)


@pytest.fixture
def accessor(store):
    return EntityAccessor(store)


# DynamoDB fixtures
@pytest.fixture
def dynamodb_resource():
    """Provide a DynamoDB resource for integration tests."""
    import boto3
    from tripinsights.config import get_config

    config = get_config()

    resource = boto3.resource(
        "dynamodb",
        endpoint_url=config.dynamodb_endpoint,
        region_name=config.aws_region,
        aws_access_key_id="dummy",
        aws_secret_access_key="dummy",
    )

    return resource


def _clear_table(table):
    response = table.scan()
    with table.batch_writer() as batch:
        for item in response.get("Items", []):
            batch.delete_item(Key={"id": item["id"]})


@pytest.fixture
def trips_table(dynamodb_resource):
    """Provide the trips table, emptied after the test."""
    from tripinsights.config import get_config

    table = dynamodb_resource.Table(get_config().trips_table)
    yield table
    _clear_table(table)


@pytest.fixture
def expenses_table(dynamodb_resource):
    """Provide the expenses table, emptied after the test."""
    from tripinsights.config import get_config

    table = dynamodb_resource.Table(get_config().expenses_table)
    yield table
    _clear_table(table)
