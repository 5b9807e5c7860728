"""
Smoke tests for the SQLDocumentStore against a temporary SQLite database.
"""
from __future__ import annotations

import pytest

from directory_api.core import config as core_config
from directory_api.db import models
from directory_api.db import session as db_session
from directory_api.db.create_tables import count_users, create_all
from directory_api.domain.errors import ConflictError
from directory_api.repositories.sql_storage import SQLDocumentStore
from directory_api.services.directory_service import DirectoryService
from conftest import make_fields


@pytest.fixture()
def sql_store(tmp_path, monkeypatch):
    """Configura um SQLite temporário e reseta caches de settings/engine."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]

    store = SQLDocumentStore()
    store.initialize()

    yield store

    engine = db_session.get_engine()
    models.Base.metadata.drop_all(bind=engine)
    engine.dispose()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]
    core_config.get_settings.cache_clear()


def test_empty_table_loads_as_empty_document(sql_store):
    assert sql_store.load() == {"users": []}


def test_save_and_load_keep_order_and_fields(sql_store):
    document = {
        "users": [
            {"id": "2", "firstName": "Bob", "lastName": "B", "email": "b@x.io", "phone": "21111111", "password": "p", "createdAt": "t2"},
            {"id": "1", "firstName": "Ann", "lastName": "A", "email": "a@x.io", "phone": "41111111", "password": "p", "createdAt": "t1"},
        ]
    }
    sql_store.save(document)
    assert sql_store.load() == document


def test_directory_service_on_sql_backend(sql_store):
    svc = DirectoryService(sql_store)
    svc.register(make_fields())
    with pytest.raises(ConflictError):
        svc.register(make_fields(phone="49456789"))
    assert [user.email for user in svc.list_users()] == ["john@example.com"]
    assert svc.login({"email": "john@example.com", "password": "secret1"}).phone == "29456789"
    svc.clear()
    assert svc.list_users() == []


def test_create_tables_reports_row_count(sql_store):
    assert count_users() == 0
    DirectoryService(sql_store).register(make_fields())
    create_all()
    assert count_users() == 1
