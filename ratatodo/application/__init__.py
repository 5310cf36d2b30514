from .task_store import IndexOutOfRange, TaskStore
from .keymap import Action, Keymap
from .controller import EditSession, Field, InteractionController, Mode, Outcome

__all__ = [
    "Action",
    "EditSession",
    "Field",
    "IndexOutOfRange",
    "InteractionController",
    "Keymap",
    "Mode",
    "Outcome",
    "TaskStore",
]
