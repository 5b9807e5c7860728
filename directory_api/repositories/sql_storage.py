"""Users document backed by SQLAlchemy (one row per user record)."""
from __future__ import annotations

import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError

from directory_api.db.create_tables import create_all
from directory_api.db.models import UserRow
from directory_api.db.session import get_session
from directory_api.domain.errors import StorageError

from .base import DocumentStore, document_defaults, empty_document

logger = logging.getLogger(__name__)


class SQLDocumentStore(DocumentStore):
    """
    Same load/save contract as the JSON file: ``save`` replaces every row in
    one transaction, ``load`` returns them in insertion order.
    """

    def load(self) -> dict:
        try:
            with get_session() as session:
                rows = session.execute(select(UserRow).order_by(UserRow.position)).scalars().all()
                return {"users": [row.to_record() for row in rows]}
        except SQLAlchemyError as exc:
            logger.warning("Could not read users table, using empty document: %s", exc)
            return empty_document()

    def save(self, document: dict) -> None:
        users = document_defaults(document)["users"]
        try:
            with get_session() as session:
                session.execute(delete(UserRow))
                for position, record in enumerate(users):
                    session.add(UserRow.from_record(record, position))
                session.commit()
        except SQLAlchemyError as exc:
            logger.error("Could not write users table: %s", exc)
            raise StorageError("Could not write users table") from exc

    def initialize(self) -> None:
        create_all()
