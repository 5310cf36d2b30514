"""Abstract key names and the action → keys table."""

from enum import Enum
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

KEY_ENTER = "enter"
KEY_ESCAPE = "escape"
KEY_TAB = "tab"
KEY_BACKTAB = "s-tab"
KEY_BACKSPACE = "backspace"
KEY_DELETE = "delete"
KEY_UP = "up"
KEY_DOWN = "down"
KEY_SPACE = " "


class Action(Enum):
    QUIT = "quit"
    NEW = "new"
    DOWN = "down"
    UP = "up"
    HELP = "help"
    EDIT = "edit"
    DELETE = "delete"
    TOGGLE_STATUS = "toggle_status"
    CANCEL = "cancel"
    SWITCH_FIELD = "switch_field"
    BACKSPACE = "backspace"
    CONFIRM = "confirm"


# Letter bindings carry their RU-layout twin so the app works without switching layouts.
DEFAULT_BINDINGS: Dict[Action, Tuple[str, ...]] = {
    Action.QUIT: ("q", "й"),
    Action.NEW: ("n", "т"),
    Action.DOWN: (KEY_DOWN, "j", "о"),
    Action.UP: (KEY_UP, "k", "л"),
    Action.HELP: ("?", "h", "р"),
    Action.EDIT: ("e", "у"),
    Action.DELETE: ("d", "в", KEY_DELETE),
    Action.TOGGLE_STATUS: ("m", "ь", KEY_SPACE),
    Action.CANCEL: (KEY_ESCAPE,),
    Action.SWITCH_FIELD: (KEY_TAB, KEY_BACKTAB),
    Action.BACKSPACE: (KEY_BACKSPACE,),
    Action.CONFIRM: (KEY_ENTER,),
}


def is_printable(key: str) -> bool:
    return len(key) == 1 and key.isprintable()


class Keymap:
    def __init__(self, bindings: Optional[Mapping[Action, Iterable[str]]] = None):
        source = bindings if bindings is not None else DEFAULT_BINDINGS
        self._bindings: Dict[Action, Tuple[str, ...]] = {
            action: tuple(source.get(action, DEFAULT_BINDINGS[action])) for action in Action
        }

    @classmethod
    def from_overrides(cls, overrides: Optional[Mapping[str, Any]]) -> "Keymap":
        """Build a keymap from ``{action_name: [keys...]}`` overrides.

        Actions not mentioned keep their default keys.
        """
        bindings = dict(DEFAULT_BINDINGS)
        for name, keys in (overrides or {}).items():
            try:
                action = Action(str(name).strip().lower())
            except ValueError:
                raise ValueError(f"Unknown keymap action: {name!r}") from None
            if isinstance(keys, str) or not isinstance(keys, (list, tuple)) or not keys:
                raise ValueError(f"Keymap action {name!r} needs a non-empty list of keys")
            if not all(isinstance(k, str) and k for k in keys):
                raise ValueError(f"Keymap action {name!r} has an invalid key in {keys!r}")
            bindings[action] = tuple(keys)
        return cls(bindings)

    def keys_for(self, action: Action) -> Tuple[str, ...]:
        return self._bindings[action]

    def action_for(self, key: str, actions: Iterable[Action]) -> Optional[Action]:
        for action in actions:
            if key in self._bindings[action]:
                return action
        return None


__all__ = [
    "Action",
    "DEFAULT_BINDINGS",
    "Keymap",
    "is_printable",
    "KEY_ENTER",
    "KEY_ESCAPE",
    "KEY_TAB",
    "KEY_BACKTAB",
    "KEY_BACKSPACE",
    "KEY_DELETE",
    "KEY_UP",
    "KEY_DOWN",
    "KEY_SPACE",
]
