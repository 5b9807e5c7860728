"""
Registration, login and listing of directory users.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Mapping

from pydantic import ValidationError as SchemaError

from directory_api.domain.errors import ConflictError, InvalidCredentials, ValidationError
from directory_api.domain.validation import normalize_email, normalize_phone, validate_registration
from directory_api.repositories.base import DocumentStore, empty_document
from directory_api.schemas.users import Credentials, PublicUser, RegistrationFields

logger = logging.getLogger(__name__)


def _field_name(error: dict) -> str:
    return ".".join(str(part) for part in error.get("loc", ())) or "input"


@dataclass
class DirectoryService:
    """Applies uniqueness and normalisation rules on top of a DocumentStore.

    Passwords are kept in clear text, exactly as submitted.
    """

    store: DocumentStore

    # -------------------------------------- helpers --------------------------------------
    def _now(self) -> datetime:
        return datetime.now(timezone.utc)

    def _next_id(self, users: list[dict], now: datetime) -> str:
        candidate = int(now.timestamp() * 1000)
        highest = 0
        for user in users:
            try:
                highest = max(highest, int(user.get("id", 0)))
            except (TypeError, ValueError):
                continue
        return str(max(candidate, highest + 1))

    @staticmethod
    def _timestamp(value: datetime) -> str:
        return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")

    # -------------------------------------- registro --------------------------------------
    def register(self, fields: RegistrationFields | Mapping[str, Any]) -> PublicUser:
        if not isinstance(fields, RegistrationFields):
            try:
                fields = RegistrationFields.model_validate(dict(fields))
            except SchemaError as exc:
                raise ValidationError([f"Invalid {_field_name(err)}" for err in exc.errors()]) from exc
        errors = validate_registration(fields)
        if errors:
            raise ValidationError(errors)

        email = normalize_email(fields.email)
        phone = normalize_phone(fields.phone)
        with self.store.exclusive():
            document = self.store.load()
            users = document["users"]
            if any(user.get("email") == email for user in users):
                logger.info("Registration rejected, email already exists")
                raise ConflictError("email")
            if any(user.get("phone") == phone for user in users):
                logger.info("Registration rejected, phone already exists")
                raise ConflictError("phone")

            now = self._now()
            record = {
                "id": self._next_id(users, now),
                "firstName": fields.first_name.strip(),
                "lastName": fields.last_name.strip(),
                "email": email,
                "phone": phone,
                "password": fields.password,
                "createdAt": self._timestamp(now),
            }
            users.append(record)
            self.store.save(document)
        logger.info("Registered user %s", record["id"])
        return PublicUser.from_record(record)

    # -------------------------------------- login --------------------------------------
    def login(self, credentials: Credentials | Mapping[str, Any]) -> PublicUser:
        if not isinstance(credentials, Credentials):
            try:
                credentials = Credentials.model_validate(dict(credentials))
            except SchemaError as exc:
                raise InvalidCredentials("missing_fields") from exc
        password = credentials.password
        if (not credentials.email and not credentials.phone) or not password:
            raise InvalidCredentials("missing_fields")

        if credentials.email:
            key, value = "email", normalize_email(credentials.email)
        else:
            key, value = "phone", normalize_phone(credentials.phone)

        known = False
        for user in self.store.load()["users"]:
            if user.get(key) != value:
                continue
            known = True
            if user.get("password") == password:
                return PublicUser.from_record(user)
        raise InvalidCredentials("password_mismatch" if known else "unknown_identifier")

    # -------------------------------------- listagem --------------------------------------
    def list_users(self) -> list[PublicUser]:
        return [PublicUser.from_record(user) for user in self.store.load()["users"]]

    def clear(self) -> None:
        with self.store.exclusive():
            self.store.save(empty_document())
        logger.info("Cleared all users")
