"""
Create the ``users`` table for the SQL backend.

Uso:
  DATABASE_URL=sqlite:///data/users.db python -m directory_api.db.create_tables
"""
from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from .models import UserRow
from .session import Base, get_engine, get_session


def create_all() -> None:
    Base.metadata.create_all(bind=get_engine(), tables=[UserRow.__table__])


def count_users() -> int:
    with get_session() as session:
        return session.execute(select(func.count()).select_from(UserRow)).scalar_one()


if __name__ == "__main__":
    try:
        create_all()
        total = count_users()
    except (RuntimeError, SQLAlchemyError) as exc:
        raise SystemExit(f"Could not prepare users table: {exc}") from exc
    print(f"users table ready ({total} record(s)).")
