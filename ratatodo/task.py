from dataclasses import dataclass

from .status import Status


@dataclass(frozen=True)
class Task:
    """A single work item shown in the list."""
    title: str
    detail: str = ""
    status: Status = Status.UPCOMING
