import pytest
from prompt_toolkit.key_binding import KeyPress
from prompt_toolkit.keys import Keys

from ratatodo.interface.tui_keys import key_name, key_names


@pytest.mark.parametrize(
    "key, expected",
    [
        (Keys.Enter, "enter"),
        (Keys.ControlM, "enter"),
        (Keys.ControlJ, "enter"),
        (Keys.Tab, "tab"),
        (Keys.BackTab, "s-tab"),
        (Keys.Backspace, "backspace"),
        (Keys.Escape, "escape"),
        (Keys.Up, "up"),
        (Keys.Down, "down"),
        (Keys.Delete, "delete"),
        (Keys.ControlC, "c-c"),
        ("a", "a"),
        ("й", "й"),
        (" ", " "),
    ],
)
def test_key_name(key, expected):
    assert key_name(KeyPress(key)) == expected


def test_paste_expands_only_when_allowed():
    paste = KeyPress(Keys.BracketedPaste, "ab\nc\td")
    assert key_names(paste) == []
    assert key_names(paste, allow_paste=True) == ["a", "b", "c", "d"]


def test_single_key_list():
    assert key_names(KeyPress("x")) == ["x"]
    assert key_names(KeyPress(Keys.Escape), allow_paste=True) == ["escape"]
