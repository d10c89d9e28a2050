"""In-memory implementation of DocumentStore."""

import copy
import uuid
from collections.abc import Mapping
from typing import Any

from tripinsights.store.interface import Document, DocumentStore, OrderBy, sort_documents


class InMemoryDocumentStore(DocumentStore):
    """Dict-backed store for tests and local runs."""

    def __init__(self) -> None:
        self._collections: dict[str, dict[str, dict[str, Any]]] = {}

    def add(self, collection: str, fields: Mapping[str, Any], key: str | None = None) -> str:
        """Insert a document, assigning a key when none is given."""
        key = key or str(fields.get("id") or uuid.uuid4())
        data = {name: value for name, value in fields.items() if name != "id"}
        self._collections.setdefault(collection, {})[key] = copy.deepcopy(data)
        return key

    def get(self, collection: str, key: str) -> Document | None:
        data = self._collections.get(collection, {}).get(key)
        if data is None:
            return None
        return {"id": key, **copy.deepcopy(data)}

    def query(
        self,
        collection: str,
        filters: Mapping[str, Any],
        order_by: OrderBy | None = None,
    ) -> list[Document]:
        matches = [
            {"id": key, **copy.deepcopy(data)}
            for key, data in self._collections.get(collection, {}).items()
            if all(data.get(name) == value for name, value in filters.items())
        ]
        return sort_documents(matches, order_by)
