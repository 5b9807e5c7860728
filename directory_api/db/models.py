"""SQLAlchemy model mirroring the JSON users document."""
from __future__ import annotations

from sqlalchemy import Column, Integer, String

from .session import Base


class UserRow(Base):
    __tablename__ = "users"

    id = Column(String(32), primary_key=True)
    position = Column(Integer, nullable=False, index=True)
    first_name = Column(String(64), nullable=False)
    last_name = Column(String(64), nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    phone = Column(String(16), unique=True, nullable=False)
    password = Column(String(64), nullable=False)
    created_at = Column(String(40), nullable=False)

    @classmethod
    def from_record(cls, record: dict, position: int) -> "UserRow":
        return cls(
            id=str(record.get("id", "")),
            position=position,
            first_name=record.get("firstName", ""),
            last_name=record.get("lastName", ""),
            email=record.get("email", ""),
            phone=record.get("phone", ""),
            password=record.get("password", ""),
            created_at=record.get("createdAt", ""),
        )

    def to_record(self) -> dict:
        return {
            "id": self.id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
            "phone": self.phone,
            "password": self.password,
            "createdAt": self.created_at,
        }
