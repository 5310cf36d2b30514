import pytest

from ratatodo.application.keymap import (
    Action,
    DEFAULT_BINDINGS,
    Keymap,
    KEY_ESCAPE,
    is_printable,
)


def test_every_action_has_default_keys():
    keymap = Keymap()
    for action in Action:
        assert keymap.keys_for(action) == DEFAULT_BINDINGS[action]
        assert keymap.keys_for(action)


def test_action_for_respects_candidate_order_and_scope():
    keymap = Keymap()
    assert keymap.action_for("q", (Action.QUIT, Action.NEW)) is Action.QUIT
    assert keymap.action_for("й", (Action.QUIT,)) is Action.QUIT
    assert keymap.action_for("q", (Action.CANCEL,)) is None
    assert keymap.action_for(KEY_ESCAPE, (Action.CANCEL,)) is Action.CANCEL


def test_overrides_replace_only_named_actions():
    keymap = Keymap.from_overrides({"Quit": ["x", "c-q"], "new": ("a",)})
    assert keymap.keys_for(Action.QUIT) == ("x", "c-q")
    assert keymap.keys_for(Action.NEW) == ("a",)
    assert keymap.keys_for(Action.HELP) == DEFAULT_BINDINGS[Action.HELP]


def test_empty_overrides_give_defaults():
    assert Keymap.from_overrides(None).keys_for(Action.EDIT) == DEFAULT_BINDINGS[Action.EDIT]
    assert Keymap.from_overrides({}).keys_for(Action.EDIT) == DEFAULT_BINDINGS[Action.EDIT]


@pytest.mark.parametrize(
    "overrides",
    [
        {"launch": ["x"]},
        {"quit": "x"},
        {"quit": []},
        {"quit": [1]},
        {"quit": [""]},
    ],
)
def test_invalid_overrides_raise(overrides):
    with pytest.raises(ValueError):
        Keymap.from_overrides(overrides)


@pytest.mark.parametrize("key, expected", [("a", True), (" ", True), ("ж", True), ("enter", False), ("\x1b", False), ("", False)])
def test_is_printable(key, expected):
    assert is_printable(key) is expected
