"""Unit tests for DynamoDocumentStore against a mocked boto3 resource."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from boto3.dynamodb.conditions import Key
from botocore.exceptions import ClientError

from tripinsights.config import Config
from tripinsights.store.dynamo import DynamoDocumentStore
from tripinsights.store.interface import OrderBy


@pytest.fixture
def table():
    return MagicMock()


@pytest.fixture
def dynamo_store(table):
    resource = MagicMock()
    resource.Table.return_value = table
    return DynamoDocumentStore(
        resource,
        table_names={"viagens": "Trips", "custos": "Expenses"},
        index_names={"usuarioId": "usuarioId-index", "viagemId": "viagemId-index"},
    )


def test_get_existing_item_converts_decimals(dynamo_store, table):
    table.get_item.return_value = {
        "Item": {"id": "t1", "numeroDias": Decimal("5"), "distanciaTotal": Decimal("812.5")}
    }

    document = dynamo_store.get("viagens", "t1")

    table.get_item.assert_called_once_with(Key={"id": "t1"})
    assert document == {"id": "t1", "numeroDias": 5, "distanciaTotal": 812.5}
    assert isinstance(document["numeroDias"], int)


def test_get_missing_item_returns_none(dynamo_store, table):
    table.get_item.return_value = {}
    assert dynamo_store.get("viagens", "ghost") is None


def test_get_resolves_table_name(dynamo_store):
    dynamo_store._resource.Table.reset_mock()
    dynamo_store._table("custos")
    dynamo_store._resource.Table.assert_called_once_with("Expenses")


def test_query_uses_index_for_first_filter(dynamo_store, table):
    table.query.return_value = {"Items": [{"id": "t1", "usuarioId": "u1"}]}

    result = dynamo_store.query("viagens", {"usuarioId": "u1"})

    assert result == [{"id": "t1", "usuarioId": "u1"}]
    kwargs = table.query.call_args.kwargs
    assert kwargs["IndexName"] == "usuarioId-index"
    assert kwargs["KeyConditionExpression"] == Key("usuarioId").eq("u1")
    assert "FilterExpression" not in kwargs
    table.scan.assert_not_called()


def test_query_adds_filter_expression_for_extra_filters(dynamo_store, table):
    table.query.return_value = {"Items": []}

    dynamo_store.query("viagens", {"usuarioId": "u1", "status": "completed"})

    kwargs = table.query.call_args.kwargs
    assert "FilterExpression" in kwargs
    assert kwargs["FilterExpression"].get_expression()["values"][0].name == "status"


def test_query_without_index_scans(dynamo_store, table):
    table.scan.return_value = {"Items": [{"id": "x"}]}

    result = dynamo_store.query("custos", {"categoria": "fuel"})

    assert result == [{"id": "x"}]
    table.query.assert_not_called()
    assert "FilterExpression" in table.scan.call_args.kwargs


def test_query_follows_pagination(dynamo_store, table):
    table.query.side_effect = [
        {"Items": [{"id": "e1", "data": "2024-03-01"}], "LastEvaluatedKey": {"id": "e1"}},
        {"Items": [{"id": "e2", "data": "2024-03-04"}]},
    ]

    result = dynamo_store.query("custos", {"viagemId": "t1"}, OrderBy("data", descending=True))

    assert table.query.call_count == 2
    assert table.query.call_args_list[1].kwargs["ExclusiveStartKey"] == {"id": "e1"}
    assert [doc["id"] for doc in result] == ["e2", "e1"]


def test_query_converts_nested_decimals(dynamo_store, table):
    table.query.return_value = {
        "Items": [{"id": "s1", "coordenadas": [Decimal("-23.55"), Decimal("-46.63")]}]
    }

    result = dynamo_store.query("paradas", {"viagemId": "t1"})

    assert result[0]["coordenadas"] == [-23.55, -46.63]


def test_storage_errors_propagate_unchanged(dynamo_store, table):
    error = ClientError({"Error": {"Code": "ProvisionedThroughputExceededException", "Message": "slow down"}}, "Query")
    table.query.side_effect = error

    with pytest.raises(ClientError) as exc_info:
        dynamo_store.query("viagens", {"usuarioId": "u1"})

    assert exc_info.value is error


def test_from_config_maps_collections_and_indexes():
    config = Config(
        aws_region="us-east-1",
        trips_table="T",
        stops_table="S",
        expenses_table="E",
        trip_days_table="D",
        owner_index="owner-idx",
        trip_index="trip-idx",
        environment="test",
    )

    dynamo_store = DynamoDocumentStore.from_config(MagicMock(), config)

    assert dynamo_store._table_names == {"viagens": "T", "paradas": "S", "custos": "E", "diasViagem": "D"}
    assert dynamo_store._index_names == {"usuarioId": "owner-idx", "viagemId": "trip-idx"}
