"""Screen builders for TodoTUI: frame, task list, editor, help and hints."""

import time
from typing import List, Optional, Sequence, Tuple

from prompt_toolkit.formatted_text import FormattedText

from ratatodo.status import Status
from ratatodo.application.controller import EditSession, Field, Mode
from ratatodo.application.keymap import Action

Fragment = Tuple[str, str]

# Thick box-drawing border around the whole screen.
BORDER = {"h": "━", "v": "┃", "tl": "┏", "tr": "┓", "bl": "┗", "br": "┛", "lt": "┣", "rt": "┫"}

KEY_LABELS = {
    " ": "Space",
    "escape": "Esc",
    "enter": "Enter",
    "tab": "Tab",
    "s-tab": "S-Tab",
    "backspace": "Bksp",
    "delete": "Del",
    "up": "↑",
    "down": "↓",
}

FOOTER_ACTIONS = {
    Mode.VIEW: (Action.NEW, Action.EDIT, Action.TOGGLE_STATUS, Action.DELETE, Action.HELP, Action.QUIT),
    Mode.EDIT: (Action.CONFIRM, Action.SWITCH_FIELD, Action.CANCEL),
    Mode.HELP: (Action.CANCEL,),
}

HELP_SECTIONS = (
    ("HELP_VIEW_TITLE", (
        Action.NEW, Action.EDIT, Action.DOWN, Action.UP, Action.TOGGLE_STATUS,
        Action.DELETE, Action.HELP, Action.QUIT,
    )),
    ("HELP_EDIT_TITLE", (Action.CONFIRM, Action.SWITCH_FIELD, Action.BACKSPACE, Action.CANCEL)),
    ("HELP_HELP_TITLE", (Action.CANCEL,)),
)

# top border, counts row, separator, bottom border
FRAME_ROWS = 4


def key_label(key: str) -> str:
    if key in KEY_LABELS:
        return KEY_LABELS[key]
    if len(key) == 1:
        return key.upper()
    return key


def status_text(tui, status: Status) -> str:
    return tui._t(f"STATUS_{status.label}")


def _action_text(tui, action: Action, mode: Mode) -> str:
    if action is Action.CANCEL and mode is Mode.HELP:
        return tui._t("ACTION_BACK")
    return tui._t(f"ACTION_{action.name}")


def visible_offset(selection: Optional[int], total: int, height: int, offset: int) -> int:
    """Scroll offset that keeps ``selection`` inside a window of ``height`` rows."""
    if height <= 0 or total <= height:
        return 0
    offset = max(0, min(offset, total - height))
    if selection is None:
        return offset
    if selection < offset:
        return selection
    if selection >= offset + height:
        return selection - height + 1
    return offset


# -------------------- frame pieces --------------------
def _border_with_label(tui, left: str, right: str, label: Sequence[Fragment], width: int) -> List[Fragment]:
    inner = max(0, width - 2)
    label_width = sum(tui._display_width(text) for _, text in label)
    if label_width > inner:
        label = [("class:header", tui._trim_display("".join(t for _, t in label), inner))]
        label_width = tui._display_width(label[0][1])
    before = (inner - label_width) // 2
    after = inner - label_width - before
    parts: List[Fragment] = [("class:border", left + BORDER["h"] * before)]
    parts.extend(label)
    parts.append(("class:border", BORDER["h"] * after + right + "\n"))
    return parts


def _row(tui, content: Sequence[Fragment], inner: int) -> List[Fragment]:
    """Wrap row fragments with side borders, trimming/padding to the inner width."""
    parts: List[Fragment] = [("class:border", BORDER["v"] + " ")]
    used = 0
    for style, text in content:
        if used >= inner:
            break
        piece = tui._trim_display(text, inner - used)
        used += tui._display_width(piece)
        parts.append((style, piece))
    parts.append(("", " " * (inner - used)))
    parts.append(("class:border", " " + BORDER["v"] + "\n"))
    return parts


def build_counts_row(tui) -> List[Fragment]:
    counts = tui.controller.store.status_counts()
    parts: List[Fragment] = []
    for status in Status:
        if parts:
            parts.append(("class:text.dimmer", "  "))
        parts.append((f"class:status.{status.style_suffix}", f"{status.icon} "))
        parts.append(("class:text.dim", f"{status_text(tui, status)} {counts[status]}"))
    parts.append(("class:text.dimmer", "  · "))
    parts.append(("class:header", tui._t(f"MODE_{tui.controller.mode.name}")))
    return parts


def build_instructions(tui) -> List[Fragment]:
    """Bottom-border hints: `` label <KEY> `` for each action of the current mode."""
    mode = tui.controller.mode
    keymap = tui.controller.keymap
    parts: List[Fragment] = []
    for action in FOOTER_ACTIONS[mode]:
        parts.append(("class:text", f" {_action_text(tui, action, mode)} "))
        parts.append(("class:key", f"<{key_label(keymap.keys_for(action)[0])}>"))
    parts.append(("", " "))
    return parts


# -------------------- content panels --------------------
def build_task_rows(tui, inner: int, height: int) -> List[List[Fragment]]:
    store = tui.controller.store
    tasks = store.tasks
    if not tasks:
        new_key = key_label(tui.controller.keymap.keys_for(Action.NEW)[0])
        return [[("class:text.dim", tui._t("LIST_EMPTY", hotkey=new_key))]]
    selection = store.selection
    tui.list_view_offset = visible_offset(selection, len(tasks), height, tui.list_view_offset)
    rows: List[List[Fragment]] = []
    for index in range(tui.list_view_offset, min(len(tasks), tui.list_view_offset + height)):
        task = tasks[index]
        prefix = f"{index + 1:>3}. "
        head = f"{task.status.icon} {task.title}"
        detail = " · " + task.detail if task.detail else ""
        if index == selection:
            style = tui._selection_style_for_status(task.status)
            text = tui._ellipsize(prefix + head + detail, inner)
            rows.append([(f"class:{style}", tui._pad_display(text, inner))])
            continue
        title_room = max(0, inner - tui._display_width(prefix))
        head = tui._ellipsize(head, title_room)
        detail_room = max(0, title_room - tui._display_width(head))
        row: List[Fragment] = [
            ("class:text.dimmer", prefix),
            (f"class:status.{task.status.style_suffix}", head[:1]),
            ("class:text", head[1:]),
        ]
        if detail and detail_room > 1:
            row.append(("class:text.dim", tui._ellipsize(detail, detail_room)))
        rows.append(row)
    return rows


def _field_row(tui, session: EditSession, field: Field, inner: int) -> List[Fragment]:
    active = session.active_field is field
    label = tui._t("FIELD_TITLE") if field is Field.TITLE else tui._t("FIELD_DETAIL")
    marker = "▸ " if active else "  "
    head = f"{marker}{label}: "
    value = session.title_buffer if field is Field.TITLE else session.detail_buffer
    room = max(1, inner - tui._display_width(head) - 1)
    row: List[Fragment] = [("class:editor.active" if active else "class:editor.label", head)]
    if active:
        row.append(("class:text", tui._tail_display(value, room)))
        row.append(("class:editor.cursor", " "))
    else:
        row.append(("class:text.dim", tui._ellipsize(value, room)))
    return row


def build_editor_rows(tui, inner: int) -> List[List[Fragment]]:
    session = tui.controller.session
    if session is None:
        return []
    if session.is_new:
        heading = tui._t("EDITOR_NEW")
    else:
        heading = tui._t("EDITOR_EXISTING", number=session.target + 1)
    return [
        [("class:header", heading)],
        [],
        _field_row(tui, session, Field.TITLE, inner),
        _field_row(tui, session, Field.DETAIL, inner),
        [],
        [("class:text.dimmer", tui._t("EDITOR_HINT"))],
    ]


def build_help_rows(tui) -> List[List[Fragment]]:
    keymap = tui.controller.keymap
    rows: List[List[Fragment]] = []
    for title_key, actions in HELP_SECTIONS:
        if rows:
            rows.append([])
        rows.append([("class:header", tui._t(title_key))])
        mode = Mode.HELP if title_key == "HELP_HELP_TITLE" else Mode.VIEW
        for action in actions:
            keys = ", ".join(key_label(k) for k in keymap.keys_for(action))
            rows.append([
                ("class:key", f"  {keys:<18}"),
                ("class:text", _action_text(tui, action, mode)),
            ])
    return rows


# -------------------- whole screen --------------------
def render_screen(tui) -> FormattedText:
    width = max(20, tui.get_terminal_width())
    height = max(FRAME_ROWS + 1, tui.get_terminal_height() - 1)
    inner = width - 4
    content_height = height - FRAME_ROWS

    mode = tui.controller.mode
    if mode is Mode.EDIT:
        rows = build_editor_rows(tui, inner)
    elif mode is Mode.HELP:
        rows = build_help_rows(tui)
    else:
        rows = build_task_rows(tui, inner, content_height)
    rows = rows[:content_height]
    while len(rows) < content_height:
        rows.append([])

    parts: List[Fragment] = []
    parts.extend(_border_with_label(tui, BORDER["tl"], BORDER["tr"], [("class:header", tui._t("APP_TITLE"))], width))
    parts.extend(_row(tui, build_counts_row(tui), inner))
    parts.append(("class:border", BORDER["lt"] + BORDER["h"] * (width - 2) + BORDER["rt"] + "\n"))
    for row in rows:
        parts.extend(_row(tui, row, inner))
    bottom = _border_with_label(tui, BORDER["bl"], BORDER["br"], build_instructions(tui), width)
    # the last line of the control carries no trailing newline
    style, text = bottom[-1]
    bottom[-1] = (style, text.rstrip("\n"))
    parts.extend(bottom)
    return FormattedText(parts)


def build_message_text(tui, now: Optional[float] = None) -> FormattedText:
    ts = now if now is not None else time.time()
    if tui.status_message and ts < tui.status_message_expires:
        return FormattedText([("class:message", " " + tui.status_message)])
    return FormattedText([])


__all__ = [
    "build_counts_row",
    "build_editor_rows",
    "build_help_rows",
    "build_instructions",
    "build_message_text",
    "build_task_rows",
    "key_label",
    "render_screen",
    "visible_offset",
]
