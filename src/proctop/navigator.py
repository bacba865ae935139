"""Selection cursor over the displayed process list."""

# Height of one table row in scroll units
ROW_HEIGHT = 4


class ListNavigator:
    """
    Selected-row index over a list of known length.

    Only the length of the list matters here. The scroll offset and extent
    are computed from the selection and length on every access, so they can
    never disagree with them. The Textual table scrolls itself to its
    cursor, so it does not read them; they describe the view for renderers
    that scroll by hand.
    """

    def __init__(self, length: int = 0) -> None:
        self._length = 0
        self._selected: int | None = None
        self.resize(length)

    @property
    def length(self) -> int:
        return self._length

    @property
    def selected(self) -> int | None:
        """Index of the selected row, or None when the list is empty."""
        return self._selected

    @property
    def scroll_offset(self) -> int:
        if self._selected is None:
            return 0
        return self._selected * ROW_HEIGHT

    @property
    def scroll_extent(self) -> int:
        """Maximum scroll offset for the current length."""
        return max(self._length - 1, 0) * ROW_HEIGHT

    def resize(self, length: int) -> None:
        """Adopt a new list length, clamping the selection into range."""
        self._length = max(length, 0)
        if self._length == 0:
            self._selected = None
        elif self._selected is None:
            self._selected = 0
        else:
            self._selected = min(self._selected, self._length - 1)

    def select(self, index: int) -> None:
        """Select ``index``, clamped into range. Ignored on an empty list."""
        if self._length == 0:
            return
        self._selected = min(max(index, 0), self._length - 1)

    def select_next(self) -> None:
        """Move down one row, wrapping from the last row to the first."""
        if self._selected is None:
            return
        self._selected = (self._selected + 1) % self._length

    def select_previous(self) -> None:
        """Move up one row, wrapping from the first row to the last."""
        if self._selected is None:
            return
        self._selected = (self._selected - 1) % self._length
