from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

Document = dict[str, Any]


@dataclass(frozen=True)
class OrderBy:
    field: str
    descending: bool = False


class DocumentStore(ABC):
    """Read-only view of a document database: keyed lookups and equality queries."""

    @abstractmethod
    def get(self, collection: str, key: str) -> Document | None: ...

    @abstractmethod
    def query(
        self,
        collection: str,
        filters: Mapping[str, Any],
        order_by: OrderBy | None = None,
    ) -> list[Document]: ...


def sort_documents(documents: Iterable[Document], order_by: OrderBy | None) -> list[Document]:
    """Order documents by one field, ties broken on id.

    Documents missing the field always come last, whichever direction is requested.
    """
    by_id = sorted(documents, key=lambda doc: str(doc.get("id", "")))
    if order_by is None:
        return by_id

    present = [doc for doc in by_id if doc.get(order_by.field) is not None]
    missing = [doc for doc in by_id if doc.get(order_by.field) is None]
    # sorted() is stable, so the id order survives among equal values
    present.sort(key=lambda doc: doc[order_by.field], reverse=order_by.descending)
    return present + missing
