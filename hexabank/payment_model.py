"""The payment entity."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Payment:
    """A payment with an identifier, description, amount and creation time."""

    description: str
    amount: int
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    created_at: datetime = field(default_factory=_now)

    @classmethod
    def create(cls, description: str, amount: int) -> Payment:
        """Create a new payment with a fresh id and the current time."""
        return cls(description=description, amount=amount)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready representation of the payment."""
        return {
            "id": str(self.id),
            "description": self.description,
            "amount": self.amount,
            "created_at": self.created_at.isoformat(),
        }