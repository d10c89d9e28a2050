"""Document store abstraction and its DynamoDB / in-memory implementations."""

from tripinsights.store.dynamo import DynamoDocumentStore
from tripinsights.store.interface import Document, DocumentStore, OrderBy, sort_documents
from tripinsights.store.memory import InMemoryDocumentStore

__all__ = ["Document", "DocumentStore", "DynamoDocumentStore", "InMemoryDocumentStore", "OrderBy", "sort_documents"]
