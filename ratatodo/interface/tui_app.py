#!/usr/bin/env python3
"""TUI application - TodoTUI class and cmd_tui command."""

import logging
import os
import time
from typing import Dict, Optional, Union

from prompt_toolkit.application import Application
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.styles import Style

from ratatodo.status import Status
from ratatodo.application.controller import InteractionController, Mode, Outcome
from ratatodo.application.keymap import Keymap
from ratatodo.application.task_store import TaskStore
from ratatodo.interface.i18n import effective_lang, translate
from ratatodo.interface.tui_display import DisplayMixin
from ratatodo.interface.tui_keys import key_names
from ratatodo.interface.tui_render import build_message_text, render_screen, status_text
from ratatodo.interface.tui_themes import DEFAULT_THEME, build_style

logger = logging.getLogger("ratatodo.tui")

OUTCOME_MESSAGES: Dict[Outcome, str] = {
    Outcome.CREATED: "STATUS_MESSAGE_CREATED",
    Outcome.UPDATED: "STATUS_MESSAGE_UPDATED",
    Outcome.DELETED: "STATUS_MESSAGE_DELETED",
    Outcome.STATUS_CHANGED: "STATUS_MESSAGE_STATUS_CHANGED",
}


class TodoTUI(DisplayMixin):
    SELECTION_STYLE_BY_STATUS: Dict[Status, str] = {
        Status.UPCOMING: "selected.upcoming",
        Status.ACTIVE: "selected.active",
        Status.COMPLETED: "selected.completed",
    }

    @staticmethod
    def get_theme_palette(theme: str) -> Dict[str, str]:
        from .tui_themes import get_theme_palette as _get_theme_palette
        return _get_theme_palette(theme)

    @classmethod
    def build_style(cls, theme: str) -> Style:
        return build_style(theme)

    def __init__(
        self,
        store: Optional[TaskStore] = None,
        theme: str = DEFAULT_THEME,
        mono_select: bool = False,
        keymap: Optional[Keymap] = None,
        language: Optional[str] = None,
        *,
        input=None,
        output=None,
    ):
        self.controller = InteractionController(store, keymap)
        self.theme_name = theme
        self.mono_select = mono_select
        self.language = effective_lang(language)
        self.status_message: str = ""
        self.status_message_expires: float = 0.0
        self.list_view_offset: int = 0
        self.style = self.build_style(theme)

        kb = KeyBindings()

        # Every key goes to the controller; it decides per mode what the key means.
        @kb.add(Keys.Any)
        def _(event):
            editing = self.controller.mode is Mode.EDIT
            for key_press in event.key_sequence:
                for name in key_names(key_press, allow_paste=editing):
                    self.dispatch_key(name)

        self.body_control = FormattedTextControl(self.get_body_content, show_cursor=False, focusable=True)
        self.main_window = Window(content=self.body_control, always_hide_cursor=True, wrap_lines=False)
        self.message_bar = Window(content=FormattedTextControl(self.get_message_text), height=1, always_hide_cursor=True)

        root = HSplit([self.main_window, self.message_bar])

        self.app = Application(
            layout=Layout(root, focused_element=self.main_window),
            key_bindings=kb,
            style=self.style,
            full_screen=True,
            mouse_support=False,
            refresh_interval=1.0,
            input=input,
            output=output,
        )
        # Esc must not wait for the default 0.5s escape-sequence timeout.
        try:
            self.app.ttimeoutlen = max(0.0, float(os.getenv("RATATODO_TUI_TTIMEOUTLEN", "0.05")))
        except ValueError:
            self.app.ttimeoutlen = 0.05

    # -------------------- sizing --------------------
    def get_terminal_width(self) -> int:
        """Get current terminal width, default to 100 if unavailable."""
        try:
            return self.app.output.get_size().columns
        except (AttributeError, ValueError, OSError):
            return 100

    def get_terminal_height(self) -> int:
        try:
            return self.app.output.get_size().rows
        except (AttributeError, ValueError, OSError):
            return 40

    # -------------------- state helpers --------------------
    def _t(self, key: str, /, **kwargs) -> str:
        return translate(key, self.language, **kwargs)

    def _selection_style_for_status(self, status: Union[Status, str, None]) -> str:
        if self.mono_select:
            return "selected"
        if isinstance(status, str):
            try:
                status = Status.from_string(status)
            except ValueError:
                return "selected"
        return self.SELECTION_STYLE_BY_STATUS.get(status, "selected")

    def set_status_message(self, message: str, ttl: float = 4.0) -> None:
        self.status_message = message
        self.status_message_expires = time.time() + ttl

    def dispatch_key(self, key: str) -> None:
        outcome = self.controller.handle_key(key)
        if outcome is not None:
            message_kwargs = {}
            if outcome is Outcome.STATUS_CHANGED:
                task = self.controller.store.selected_task()
                message_kwargs["status"] = status_text(self, task.status) if task else ""
            self.set_status_message(self._t(OUTCOME_MESSAGES[outcome], **message_kwargs))
        if self.controller.exit and self.app.is_running:
            self.app.exit()

    # -------------------- rendering --------------------
    def get_body_content(self) -> FormattedText:
        return render_screen(self)

    def get_message_text(self) -> FormattedText:
        return build_message_text(self)

    def run(self) -> None:
        logger.info("starting TUI (theme=%s, lang=%s)", self.theme_name, self.language)
        self.app.run()
        logger.info("TUI closed with %s task(s)", len(self.controller.store))


def cmd_tui(args) -> int:
    tui = TodoTUI(
        theme=getattr(args, "theme", DEFAULT_THEME),
        mono_select=getattr(args, "mono_select", False),
        keymap=getattr(args, "keymap", None),
        language=getattr(args, "lang", None),
    )
    tui.run()
    return 0


__all__ = ["TodoTUI", "cmd_tui", "OUTCOME_MESSAGES"]
