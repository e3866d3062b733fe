"""Entry dataclass for memoized results."""

import time
from collections.abc import Hashable
from dataclasses import dataclass, field

from fnkit.utils import ensure_float


@dataclass
class Entry:
    """A single cached result.

    Attributes:
        key: Cache key the result is stored under
        value: The function's return value
        stored_at: Timestamp when the result was cached
    """

    key: Hashable
    value: object = None
    stored_at: float = field(default_factory=time.time)

    def to_dict(self) -> dict[str, object]:
        """Convert entry to dictionary for serialization."""
        return {
            "key": self.key,
            "value": self.value,
            "stored_at": self.stored_at,
        }

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> "Entry":
        """Create entry from dictionary."""
        if "value" not in data:
            raise KeyError("value")

        return cls(
            key=str(data["key"]),
            value=data["value"],
            stored_at=ensure_float(value=data.get("stored_at")),
        )
