from __future__ import annotations

from .models import EditState


class EditBuffer:
    """
    Text plus caret behind the on-screen keypad.

    Operations whose precondition fails (deleting or moving left at the start,
    moving right at the end) leave the state untouched. The caret is clamped
    into ``[0, len(text)]`` after every mutation.
    """

    def __init__(self, text: str = "") -> None:
        self._text = text
        self._caret = len(text)

    # ---------- queries ----------
    def get_text(self) -> str:
        return self._text

    def get_caret(self) -> int:
        return self._caret

    @property
    def state(self) -> EditState:
        return EditState(text=self._text, caret=self._caret)

    def is_empty(self) -> bool:
        return not self._text

    # ---------- editing ----------
    def insert(self, ch: str) -> None:
        self._text = self._text[: self._caret] + ch + self._text[self._caret :]
        self._caret += len(ch)
        self._clamp()

    def delete_before(self) -> None:
        if self._caret <= 0:
            return
        self._text = self._text[: self._caret - 1] + self._text[self._caret :]
        self._caret -= 1
        self._clamp()

    def clear(self) -> None:
        self._text = ""
        self._caret = 0

    def set_text(self, text: str) -> None:
        self._text = text
        self._caret = len(text)

    # ---------- caret ----------
    def move_left(self) -> None:
        if self._caret > 0:
            self._caret -= 1

    def move_right(self) -> None:
        if self._caret < len(self._text):
            self._caret += 1

    def move_home(self) -> None:
        self._caret = 0

    def move_end(self) -> None:
        self._caret = len(self._text)

    # ---------- internals ----------
    def _clamp(self) -> None:
        self._caret = max(0, min(self._caret, len(self._text)))

    def __repr__(self) -> str:
        return f"EditBuffer(text={self._text!r}, caret={self._caret})"
