"""Pydantic model for purchase log entries."""

from pydantic import BaseModel, ConfigDict


class PurchaseItem(BaseModel):
    """A purchase as sent by the shop front-end; any extra keys are kept."""

    model_config = ConfigDict(extra="allow")
