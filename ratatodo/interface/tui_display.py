"""Display utilities mixin for TUI - text width, trimming, padding."""

from wcwidth import wcwidth


def _char_width(ch: str) -> int:
    w = wcwidth(ch)
    if w is None or w < 0:
        return 0
    return w


class DisplayMixin:
    """Mixin providing text display utilities with proper Unicode width handling."""

    @staticmethod
    def _display_width(text: str) -> int:
        """Return visual width of text accounting for wide/narrow characters."""
        return sum(_char_width(ch) for ch in text)

    def _trim_display(self, text: str, width: int) -> str:
        """Trim text so visible width doesn't exceed specified width."""
        acc = []
        used = 0
        for ch in text:
            w = _char_width(ch)
            if used + w > width:
                break
            acc.append(ch)
            used += w
        return "".join(acc)

    def _pad_display(self, text: str, width: int) -> str:
        """Trim and pad with spaces to exact visible width."""
        trimmed = self._trim_display(text, width)
        trimmed_width = self._display_width(trimmed)
        if trimmed_width < width:
            trimmed += " " * (width - trimmed_width)
        return trimmed

    def _ellipsize(self, text: str, width: int) -> str:
        """Trim to width, marking the cut with an ellipsis."""
        if width <= 0:
            return ""
        if self._display_width(text) <= width:
            return text
        return self._trim_display(text, width - 1) + "…"

    def _tail_display(self, text: str, width: int) -> str:
        """Keep the end of text that fits into width (input fields follow the cursor)."""
        acc = []
        used = 0
        for ch in reversed(text):
            w = _char_width(ch)
            if used + w > width:
                break
            acc.append(ch)
            used += w
        return "".join(reversed(acc))


__all__ = ["DisplayMixin"]
