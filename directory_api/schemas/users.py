"""
Pydantic models for user data.

Every request field is optional: presence and syntax are checked by
``domain.validation`` so the caller gets the complete violation list in one
response instead of the first missing key. Wire names are camelCase, as in
the persisted document.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field


class RegistrationFields(BaseModel):
    """Candidate user submitted to ``POST /api/users``."""

    model_config = ConfigDict(populate_by_name=True)

    first_name: Optional[str] = Field(None, alias="firstName", examples=["John"])
    last_name: Optional[str] = Field(None, alias="lastName", examples=["Doe"])
    email: Optional[str] = Field(None, examples=["john@example.com"])
    phone: Optional[str] = Field(None, examples=["29 45 67 89"])
    password: Optional[str] = Field(None, examples=["secret1"])


class Credentials(BaseModel):
    """Login with either an email or a phone, plus the password."""

    email: Optional[str] = None
    phone: Optional[str] = None
    password: Optional[str] = None


class PublicUser(BaseModel):
    """User record view without the password."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    email: str
    phone: str
    created_at: str = Field(alias="createdAt")

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "PublicUser":
        return cls(
            id=str(record.get("id", "")),
            first_name=str(record.get("firstName", "")),
            last_name=str(record.get("lastName", "")),
            email=str(record.get("email", "")),
            phone=str(record.get("phone", "")),
            created_at=str(record.get("createdAt", "")),
        )

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)
