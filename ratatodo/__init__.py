from .status import Status, normalize_task_status
from .task import Task

__version__ = "0.3.0"

__all__ = ["Status", "Task", "normalize_task_status", "__version__"]
