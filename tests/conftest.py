from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Garante que o pacote directory_api seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from directory_api.repositories.json_storage import JSONDocumentStore  # noqa: E402
from directory_api.services.directory_service import DirectoryService  # noqa: E402


def make_fields(**overrides) -> dict:
    fields = {
        "firstName": "John",
        "lastName": "Doe",
        "email": "john@example.com",
        "phone": "29456789",
        "password": "secret1",
    }
    fields.update(overrides)
    return fields


@pytest.fixture()
def json_store(tmp_path):
    store = JSONDocumentStore(tmp_path / "users.json")
    store.initialize()
    return store


@pytest.fixture()
def service(json_store):
    return DirectoryService(json_store)
