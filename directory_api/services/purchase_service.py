"""Purchase log use cases (append, list)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from directory_api.domain.errors import ValidationError
from directory_api.repositories.json_storage import JSONPurchaseLog

logger = logging.getLogger(__name__)


@dataclass
class PurchaseService:
    log: JSONPurchaseLog

    def record(self, payload: Any) -> list[dict]:
        """Stamp one purchase (or a list of them) with the current date and append it."""
        items = payload if isinstance(payload, list) else [payload]
        if not all(isinstance(item, dict) for item in items):
            raise ValidationError(["Each purchase must be a JSON object"])
        stamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
        entries = [{**item, "date": stamp} for item in items]
        self.log.append(entries)
        logger.info("Saved %d purchase(s)", len(entries))
        return entries

    def list_purchases(self) -> list:
        return self.log.load()
