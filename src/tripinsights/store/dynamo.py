"""DynamoDB implementation of DocumentStore: one table per collection, keyed by ``id``."""

import logging
from collections.abc import Mapping
from decimal import Decimal
from functools import reduce
from typing import Any

from boto3.dynamodb.conditions import Attr, Key

from tripinsights.config import Config
from tripinsights.models.enums import Collection
from tripinsights.store.interface import Document, DocumentStore, OrderBy, sort_documents

logger = logging.getLogger(__name__)


def _from_dynamo(value: Any) -> Any:
    """Convert boto3's Decimal numbers back to int/float, recursively."""
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, dict):
        return {k: _from_dynamo(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_from_dynamo(v) for v in value]
    return value


class DynamoDocumentStore(DocumentStore):
    def __init__(
        self,
        dynamodb_resource: Any,
        table_names: Mapping[str, str],
        index_names: Mapping[str, str],
    ) -> None:
        self._resource = dynamodb_resource
        self._table_names = dict(table_names)
        # attribute name -> GSI whose partition key it is
        self._index_names = dict(index_names)

    @classmethod
    def from_config(cls, dynamodb_resource: Any, config: Config) -> "DynamoDocumentStore":
        return cls(
            dynamodb_resource,
            table_names={
                Collection.TRIPS.value: config.trips_table,
                Collection.STOPS.value: config.stops_table,
                Collection.EXPENSES.value: config.expenses_table,
                Collection.TRIP_DAYS.value: config.trip_days_table,
            },
            index_names={
                "usuarioId": config.owner_index,
                "viagemId": config.trip_index,
            },
        )

    def _table(self, collection: str) -> Any:
        return self._resource.Table(self._table_names.get(collection, collection))

    def get(self, collection: str, key: str) -> Document | None:
        response = self._table(collection).get_item(Key={"id": key})
        item = response.get("Item")
        if item is None:
            return None
        return _from_dynamo(item)

    def query(
        self,
        collection: str,
        filters: Mapping[str, Any],
        order_by: OrderBy | None = None,
    ) -> list[Document]:
        table = self._table(collection)
        conditions = list(filters.items())
        read_kwargs: dict[str, Any] = {}
        use_query = False

        if conditions and conditions[0][0] in self._index_names:
            field, value = conditions.pop(0)
            read_kwargs["IndexName"] = self._index_names[field]
            read_kwargs["KeyConditionExpression"] = Key(field).eq(value)
            use_query = True
        else:
            logger.debug("No index for %s filters %s, scanning", collection, list(filters))

        if conditions:
            read_kwargs["FilterExpression"] = reduce(
                lambda left, right: left & right,
                (Attr(field).eq(value) for field, value in conditions),
            )

        read = table.query if use_query else table.scan
        items: list[Document] = []
        last_key = None

        while True:
            page_kwargs = dict(read_kwargs)
            if last_key:
                page_kwargs["ExclusiveStartKey"] = last_key

            response = read(**page_kwargs)
            items.extend(_from_dynamo(item) for item in response.get("Items", []))

            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                break

        return sort_documents(items, order_by)
