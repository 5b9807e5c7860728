"""Error taxonomy shared by stores, services and routers."""

from __future__ import annotations


class DirectoryError(Exception):
    """Base class for directory exceptions.

    ``code`` is machine readable so the transport can map it to a status
    without inspecting the message text.
    """

    code = "directory_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(DirectoryError):
    """One or more input fields fail the syntactic rules."""

    code = "validation_error"

    def __init__(self, errors: list[str]):
        super().__init__("; ".join(errors) or "Invalid input")
        self.errors = list(errors)


class ConflictError(DirectoryError):
    """Email or phone already registered."""

    code = "conflict"

    def __init__(self, field: str):
        super().__init__(f"{field.capitalize()} already exists")
        self.field = field


class InvalidCredentials(DirectoryError):
    """Login failed; ``reason`` tells missing fields, unknown identifier or bad password apart."""

    code = "invalid_credentials"

    MESSAGES = {
        "missing_fields": "Email / phone and password are required",
        "unknown_identifier": "Unknown email / phone",
        "password_mismatch": "Incorrect password",
    }

    def __init__(self, reason: str):
        super().__init__(self.MESSAGES.get(reason, "Invalid credentials"))
        self.reason = reason


class StorageError(DirectoryError):
    """The underlying persistence write could not complete."""

    code = "storage_error"
