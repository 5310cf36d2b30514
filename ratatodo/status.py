from enum import Enum
from typing import Dict, Final


class Status(Enum):
    UPCOMING = ("UPCOMING", "upcoming", "○")
    ACTIVE = ("ACTIVE", "active", "●")
    COMPLETED = ("COMPLETED", "completed", "✓")

    @property
    def label(self) -> str:
        return self.value[0]

    @property
    def style_suffix(self) -> str:
        return self.value[1]

    @property
    def icon(self) -> str:
        return self.value[2]

    def next(self) -> "Status":
        """Return the following status in the UPCOMING → ACTIVE → COMPLETED cycle."""
        return _CYCLE[self]

    @classmethod
    def from_string(cls, value: str) -> "Status":
        return cls[normalize_task_status(value)]


_CYCLE: Final[Dict[Status, Status]] = {
    Status.UPCOMING: Status.ACTIVE,
    Status.ACTIVE: Status.COMPLETED,
    Status.COMPLETED: Status.UPCOMING,
}

_ALIASES: Final[Dict[str, str]] = {
    "TODO": "UPCOMING",
    "IN_PROGRESS": "ACTIVE",
    "DOING": "ACTIVE",
    "DONE": "COMPLETED",
}


def normalize_task_status(value: str) -> str:
    """Normalize task status input to internal status code.

    Canonical codes: UPCOMING, ACTIVE, COMPLETED. Legacy tokens (todo, doing,
    in progress, done) map onto them.
    """
    token = (value or "").strip().upper().replace(" ", "_").replace("-", "_")
    token = _ALIASES.get(token, token)
    if token in {s.label for s in Status}:
        return token
    raise ValueError(f"Invalid task status: {value!r}")


__all__ = ["Status", "normalize_task_status"]
