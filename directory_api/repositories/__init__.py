"""
Persistence adapters.

Services depend on the ``DocumentStore`` interface (load/save/exclusive
section) rather than touching the JSON file, so the flat file can be swapped
for the in-memory or SQL backend without changing the directory service.
"""

from .base import DocumentStore, document_defaults, empty_document
from .json_storage import JSONDocumentStore, JSONPurchaseLog
from .memory_storage import MemoryDocumentStore

__all__ = [
    "DocumentStore",
    "JSONDocumentStore",
    "JSONPurchaseLog",
    "MemoryDocumentStore",
    "document_defaults",
    "empty_document",
]
