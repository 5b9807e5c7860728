"""Pydantic models for request bodies and public views."""

from .purchases import PurchaseItem
from .users import Credentials, PublicUser, RegistrationFields

__all__ = ["Credentials", "PublicUser", "PurchaseItem", "RegistrationFields"]
