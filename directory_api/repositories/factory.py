"""Build the configured stores from Settings."""
from __future__ import annotations

from directory_api.core.config import Settings

from .base import DocumentStore
from .json_storage import JSONDocumentStore, JSONPurchaseLog
from .memory_storage import MemoryDocumentStore


def build_document_store(settings: Settings) -> DocumentStore:
    if settings.storage_backend == "memory":
        return MemoryDocumentStore()
    if settings.storage_backend == "sql":
        from .sql_storage import SQLDocumentStore

        return SQLDocumentStore()
    return JSONDocumentStore(settings.users_file)


def build_purchase_log(settings: Settings) -> JSONPurchaseLog:
    return JSONPurchaseLog(settings.purchases_file)
