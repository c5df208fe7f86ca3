"""Text-input and scrolling sub-components used by the session controller."""

from __future__ import annotations

from typing import List

from rich.text import Text


class TextInput:
    """Single-line editable field with a cursor and a character limit."""

    def __init__(self, placeholder: str = "", char_limit: int = 32) -> None:
        self.placeholder = placeholder
        self.char_limit = char_limit
        self.value = ""
        self.cursor = 0

    def handle_key(self, key: str) -> bool:
        """Apply ``key``; return ``True`` when the input consumed it."""
        if key == "backspace":
            if self.cursor > 0:
                self.value = self.value[: self.cursor - 1] + self.value[self.cursor :]
                self.cursor -= 1
            return True
        if key == "delete":
            self.value = self.value[: self.cursor] + self.value[self.cursor + 1 :]
            return True
        if key == "left":
            self.cursor = max(0, self.cursor - 1)
            return True
        if key == "right":
            self.cursor = min(len(self.value), self.cursor + 1)
            return True
        if key == "home":
            self.cursor = 0
            return True
        if key == "end":
            self.cursor = len(self.value)
            return True
        if len(key) == 1 and key.isprintable():
            if len(self.value) >= self.char_limit:
                return True
            self.value = self.value[: self.cursor] + key + self.value[self.cursor :]
            self.cursor += 1
            return True
        return False

    def reset(self) -> None:
        self.value = ""
        self.cursor = 0

    def render(self, prompt: str = "> ") -> Text:
        text = Text(prompt)
        if not self.value:
            text.append(" ", style="reverse")
            text.append(self.placeholder, style="dim")
            return text
        text.append(self.value[: self.cursor])
        under_cursor = self.value[self.cursor : self.cursor + 1] or " "
        text.append(under_cursor, style="reverse")
        text.append(self.value[self.cursor + 1 :])
        return text


class Viewport:
    """Fixed-size window over a block of text lines."""

    def __init__(self, width: int = 80, height: int = 20) -> None:
        self.width = width
        self.height = max(1, height)
        self.offset = 0
        self.lines: List[Text] = []

    def set_content(self, content: Text) -> None:
        self.lines = list(content.split("\n", allow_blank=True))
        self.offset = min(self.offset, self.max_offset)

    def clear(self) -> None:
        self.lines = []
        self.offset = 0

    def resize(self, width: int, height: int) -> None:
        self.width = max(1, width)
        self.height = max(1, height)
        self.offset = min(self.offset, self.max_offset)

    @property
    def max_offset(self) -> int:
        return max(0, len(self.lines) - self.height)

    def scroll_up(self, count: int = 1) -> None:
        self.offset = max(0, self.offset - count)

    def scroll_down(self, count: int = 1) -> None:
        self.offset = min(self.max_offset, self.offset + count)

    def page_up(self) -> None:
        self.scroll_up(self.height)

    def page_down(self) -> None:
        self.scroll_down(self.height)

    def goto_top(self) -> None:
        self.offset = 0

    def goto_bottom(self) -> None:
        self.offset = self.max_offset

    def handle_key(self, key: str) -> bool:
        actions = {
            "up": self.scroll_up,
            "k": self.scroll_up,
            "down": self.scroll_down,
            "j": self.scroll_down,
            "pageup": self.page_up,
            "b": self.page_up,
            "pagedown": self.page_down,
            "space": self.page_down,
            " ": self.page_down,
            "f": self.page_down,
            "home": self.goto_top,
            "g": self.goto_top,
            "end": self.goto_bottom,
            "G": self.goto_bottom,
        }
        action = actions.get(key)
        if action is None:
            return False
        action()
        return True

    def visible_lines(self) -> List[Text]:
        return self.lines[self.offset : self.offset + self.height]

    def render(self) -> Text:
        view = Text("\n").join(self.visible_lines())
        view.no_wrap = True
        view.overflow = "crop"
        return view
