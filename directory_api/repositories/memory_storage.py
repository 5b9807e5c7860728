"""In-process document store, handy for tests and throwaway deployments."""
from __future__ import annotations

import copy

from .base import DocumentStore, document_defaults, empty_document


class MemoryDocumentStore(DocumentStore):
    def __init__(self, document: dict | None = None) -> None:
        super().__init__()
        self._document = document_defaults(copy.deepcopy(document)) if document else empty_document()

    def load(self) -> dict:
        # Callers mutate the snapshot freely; only save() publishes it.
        return copy.deepcopy(self._document)

    def save(self, document: dict) -> None:
        self._document = document_defaults(copy.deepcopy(document))
