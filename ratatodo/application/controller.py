"""Interaction state machine: modes, edit sessions and key dispatch."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional

from ratatodo.status import Status
from ratatodo.application.keymap import Action, Keymap, is_printable
from ratatodo.application.task_store import TaskStore

logger = logging.getLogger("ratatodo.controller")


class Mode(Enum):
    VIEW = "view"
    EDIT = "edit"
    HELP = "help"


class Field(Enum):
    TITLE = "title"
    DETAIL = "detail"


class Outcome(Enum):
    """Store-visible effect of a single key press."""
    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"
    STATUS_CHANGED = "status_changed"


@dataclass
class EditSession:
    """Draft of a new task (``target is None``) or of the task at ``target``."""
    target: Optional[int] = None
    active_field: Field = Field.TITLE
    title_buffer: str = ""
    detail_buffer: str = ""

    @property
    def is_new(self) -> bool:
        return self.target is None

    def toggle_field(self) -> None:
        self.active_field = Field.DETAIL if self.active_field is Field.TITLE else Field.TITLE

    def append(self, text: str) -> None:
        if self.active_field is Field.TITLE:
            self.title_buffer += text
        else:
            self.detail_buffer += text

    def backspace(self) -> None:
        if self.active_field is Field.TITLE:
            self.title_buffer = self.title_buffer[:-1]
        else:
            self.detail_buffer = self.detail_buffer[:-1]


VIEW_ACTIONS = (
    Action.QUIT,
    Action.NEW,
    Action.DOWN,
    Action.UP,
    Action.HELP,
    Action.EDIT,
    Action.DELETE,
    Action.TOGGLE_STATUS,
)
EDIT_ACTIONS = (Action.CANCEL, Action.SWITCH_FIELD, Action.BACKSPACE, Action.CONFIRM)
HELP_ACTIONS = (Action.CANCEL,)


class InteractionController:
    """Owns the current Mode and the Edit Session; drives the TaskStore.

    ``session`` is present exactly while ``mode`` is ``Mode.EDIT``.
    """

    _DISPATCH: Dict[Mode, str] = {
        Mode.VIEW: "_handle_view",
        Mode.EDIT: "_handle_edit",
        Mode.HELP: "_handle_help",
    }

    def __init__(self, store: Optional[TaskStore] = None, keymap: Optional[Keymap] = None):
        self.store = store if store is not None else TaskStore()
        self.keymap = keymap or Keymap()
        self.exit = False
        self._mode = Mode.VIEW
        self._session: Optional[EditSession] = None

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def session(self) -> Optional[EditSession]:
        return self._session

    def handle_key(self, key: str) -> Optional[Outcome]:
        handler: Callable[[str], Optional[Outcome]] = getattr(self, self._DISPATCH[self._mode])
        return handler(key)

    # -------------------- transitions --------------------
    def _switch(self, mode: Mode, session: Optional[EditSession] = None) -> None:
        if (mode is Mode.EDIT) != (session is not None):
            raise AssertionError(f"edit session must accompany exactly Mode.EDIT, got {mode} with {session}")
        logger.debug("mode %s -> %s", self._mode.value, mode.value)
        self._mode = mode
        self._session = session

    def _begin_new(self) -> None:
        self._switch(Mode.EDIT, EditSession())

    def _begin_edit_selected(self) -> None:
        index = self.store.selection
        if index is None:
            return
        task = self.store.get(index)
        self._switch(
            Mode.EDIT,
            EditSession(target=index, title_buffer=task.title, detail_buffer=task.detail),
        )

    def _commit(self, session: EditSession) -> Optional[Outcome]:
        outcome: Optional[Outcome] = None
        if session.title_buffer:
            if session.target is not None:
                self.store.update(session.target, session.title_buffer, session.detail_buffer)
                outcome = Outcome.UPDATED
            else:
                self.store.insert(session.title_buffer, session.detail_buffer, Status.UPCOMING)
                outcome = Outcome.CREATED
        else:
            logger.debug("empty title, edit session dropped")
        self._switch(Mode.VIEW)
        return outcome

    # -------------------- per-mode handlers --------------------
    def _handle_view(self, key: str) -> Optional[Outcome]:
        action = self.keymap.action_for(key, VIEW_ACTIONS)
        if action is Action.QUIT:
            self.exit = True
        elif action is Action.NEW:
            self._begin_new()
        elif action is Action.DOWN:
            self.store.select_next()
        elif action is Action.UP:
            self.store.select_previous()
        elif action is Action.HELP:
            self._switch(Mode.HELP)
        elif action is Action.EDIT:
            self._begin_edit_selected()
        elif action is Action.DELETE:
            if self.store.selection is not None:
                self.store.delete_selected()
                return Outcome.DELETED
        elif action is Action.TOGGLE_STATUS:
            if self.store.selection is not None:
                self.store.cycle_status_selected()
                return Outcome.STATUS_CHANGED
        return None

    def _handle_edit(self, key: str) -> Optional[Outcome]:
        session = self._session
        if session is None:
            raise AssertionError("Mode.EDIT without an edit session")
        action = self.keymap.action_for(key, EDIT_ACTIONS)
        if action is Action.CANCEL:
            self._switch(Mode.VIEW)
        elif action is Action.SWITCH_FIELD:
            session.toggle_field()
        elif action is Action.BACKSPACE:
            session.backspace()
        elif action is Action.CONFIRM:
            if session.active_field is Field.TITLE:
                session.active_field = Field.DETAIL
            else:
                return self._commit(session)
        elif is_printable(key):
            session.append(key)
        return None

    def _handle_help(self, key: str) -> Optional[Outcome]:
        if self.keymap.action_for(key, HELP_ACTIONS) is Action.CANCEL:
            self._switch(Mode.VIEW)
        return None


_missing = set(Mode) - set(InteractionController._DISPATCH)
if _missing:
    raise AssertionError(f"no key handler for modes: {sorted(m.value for m in _missing)}")
del _missing


__all__ = ["EditSession", "Field", "InteractionController", "Mode", "Outcome"]
