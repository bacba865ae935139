"""Editable search buffer with a character-indexed caret."""

from collections.abc import Iterable

from proctop.models import ProcessRecord


class SearchEditor:
    """
    Text buffer and caret used to build the process name filter.

    The caret counts characters, not bytes: Python strings index by code
    point, so multi-byte input such as "é" or "進" moves the caret by one.
    """

    def __init__(self) -> None:
        self._text = ""
        self._caret = 0

    @property
    def text(self) -> str:
        return self._text

    @property
    def caret(self) -> int:
        return self._caret

    def insert(self, char: str) -> None:
        """Insert ``char`` at the caret and move the caret past it."""
        self._text = self._text[: self._caret] + char + self._text[self._caret :]
        self._caret += len(char)

    def delete_before_caret(self) -> None:
        """Remove the character left of the caret, if any."""
        if self._caret == 0:
            return
        self._text = self._text[: self._caret - 1] + self._text[self._caret :]
        self._caret -= 1

    def move_caret_left(self) -> None:
        self._caret = max(self._caret - 1, 0)

    def move_caret_right(self) -> None:
        self._caret = min(self._caret + 1, len(self._text))

    def clear(self) -> None:
        self._text = ""
        self._caret = 0

    def matches(self, name: str) -> bool:
        """
        Case-sensitive substring test of the buffer against ``name``.

        An empty buffer matches every name.
        """
        return self._text in name

    def filter(self, records: Iterable[ProcessRecord]) -> list[ProcessRecord]:
        """Return the records whose name matches, keeping their order."""
        return [record for record in records if self.matches(record.name)]
