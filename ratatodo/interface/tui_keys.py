"""Translate prompt_toolkit key presses into the controller's key names."""

from typing import Dict, List

from prompt_toolkit.key_binding import KeyPress
from prompt_toolkit.keys import Keys

from ratatodo.application.keymap import (
    KEY_BACKSPACE,
    KEY_BACKTAB,
    KEY_ENTER,
    KEY_TAB,
    is_printable,
)

# Enter/Tab/Backspace arrive as their control-key aliases.
_SPECIAL_NAMES: Dict[str, str] = {
    Keys.ControlM.value: KEY_ENTER,
    Keys.ControlJ.value: KEY_ENTER,
    Keys.ControlI.value: KEY_TAB,
    Keys.BackTab.value: KEY_BACKTAB,
    Keys.ControlH.value: KEY_BACKSPACE,
}


def key_name(key_press: KeyPress) -> str:
    key = key_press.key
    if isinstance(key, Keys):
        return _SPECIAL_NAMES.get(key.value, key.value)
    return _SPECIAL_NAMES.get(key, key)


def key_names(key_press: KeyPress, allow_paste: bool = False) -> List[str]:
    """Key names for one press; a bracketed paste expands to its printable characters."""
    if key_press.key == Keys.BracketedPaste:
        if not allow_paste:
            return []
        return [ch for ch in key_press.data if is_printable(ch)]
    return [key_name(key_press)]


__all__ = ["key_name", "key_names"]
