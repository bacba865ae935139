"""Interactive process list controller: snapshot, cursor, search and kill."""

import logging
from enum import Enum

from proctop.editor import SearchEditor
from proctop.models import ProcessRecord
from proctop.navigator import ListNavigator
from proctop.source import ProcessSource, ProcessSourceError
from proctop.theme import Palette

logger = logging.getLogger(__name__)


class Mode(Enum):
    """Input modes of the controller."""

    BROWSING = "browsing"
    SEARCHING = "searching"


class Action(Enum):
    """Logical user actions, independent of the keys bound to them."""

    QUIT = "quit"
    REFRESH = "refresh"
    SELECT_NEXT = "select_next"
    SELECT_PREVIOUS = "select_previous"
    KILL_SELECTED = "kill_selected"
    TOGGLE_SEARCH = "toggle_search"
    SUBMIT_SEARCH = "submit_search"
    TEXT_INSERT = "text_insert"
    TEXT_DELETE_BACKWARD = "text_delete_backward"
    CARET_LEFT = "caret_left"
    CARET_RIGHT = "caret_right"
    CYCLE_PALETTE = "cycle_palette"


class ProcessListController:
    """
    Owns all mutable state of the process list screen.

    Holds the current snapshot (sorted by PID), the selection cursor, the
    search buffer and the input mode. All mutation goes through
    :meth:`dispatch` or the operations it calls; renderers only read.
    Calls into the process source are synchronous, so a slow enumeration
    blocks the caller until it completes.
    """

    def __init__(self, source: ProcessSource, palette: Palette = Palette.BLUE) -> None:
        """
        Initialize the controller with an empty snapshot.

        Args:
            source: Where processes are listed and killed.
            palette: Initial table palette.
        """
        self._source = source
        self._records: tuple[ProcessRecord, ...] = ()
        self._mode = Mode.BROWSING
        self.navigator = ListNavigator()
        self.editor = SearchEditor()
        self.palette = palette
        self.status = ""

    @property
    def records(self) -> tuple[ProcessRecord, ...]:
        """The displayed, possibly filtered, snapshot."""
        return self._records

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def overlay_visible(self) -> bool:
        """Whether the search overlay is shown; true exactly while searching."""
        return self._mode is Mode.SEARCHING

    def selected_record(self) -> ProcessRecord | None:
        index = self.navigator.selected
        if index is None:
            return None
        return self._records[index]

    def _replace_records(self, records: list[ProcessRecord]) -> None:
        self._records = tuple(sorted(records, key=lambda r: r.pid))
        self.navigator.resize(len(self._records))

    def refresh(self) -> None:
        """Replace the snapshot with a fresh enumeration of all processes."""
        try:
            records = self._source.list_processes()
        except ProcessSourceError as exc:
            logger.warning("Process enumeration failed: %s", exc)
            self.status = "Could not read the process list"
            records = []
        self._replace_records(records)

    def kill_selected(self) -> None:
        """Kill the selected process, then refresh the snapshot."""
        record = self.selected_record()
        if record is None:
            logger.debug("Kill requested with no selection")
            return

        if self._source.terminate(record.pid):
            self.status = f"Killed {record.name} ({record.pid})"
        else:
            self.status = f"Could not kill {record.name} ({record.pid})"
        # Termination is asynchronous; let the next enumeration show the result
        self.refresh()

    def toggle_search(self) -> None:
        """Enter search mode with an empty buffer, or cancel it."""
        match self._mode:
            case Mode.BROWSING:
                self.editor.clear()
                self._mode = Mode.SEARCHING
            case Mode.SEARCHING:
                self._mode = Mode.BROWSING
        logger.debug("Mode is now %s", self._mode.value)

    def submit_search(self) -> None:
        """Narrow the current snapshot to names containing the search text."""
        self._replace_records(self.editor.filter(self._records))
        self.editor.clear()
        self._mode = Mode.BROWSING

    def dispatch(self, action: Action, char: str | None = None) -> bool:
        """
        Apply one user action in the current mode.

        Args:
            action: The action to perform.
            char: The typed character for ``Action.TEXT_INSERT``.

        Returns:
            False if the action ends the program, True otherwise.
        """
        if action is Action.QUIT:
            return False

        self.status = ""
        match self._mode:
            case Mode.BROWSING:
                self._handle_browsing(action)
            case Mode.SEARCHING:
                self._handle_searching(action, char)
        return True

    def _handle_browsing(self, action: Action) -> None:
        match action:
            case Action.REFRESH:
                self.refresh()
            case Action.SELECT_NEXT:
                self.navigator.select_next()
            case Action.SELECT_PREVIOUS:
                self.navigator.select_previous()
            case Action.KILL_SELECTED:
                self.kill_selected()
            case Action.TOGGLE_SEARCH:
                self.toggle_search()
            case Action.CYCLE_PALETTE:
                self.palette = self.palette.next()
            case _:
                logger.debug("Ignoring %s while browsing", action.value)

    def _handle_searching(self, action: Action, char: str | None) -> None:
        match action:
            case Action.TOGGLE_SEARCH:
                self.toggle_search()
            case Action.SUBMIT_SEARCH:
                self.submit_search()
            case Action.TEXT_INSERT if char:
                self.editor.insert(char)
            case Action.TEXT_DELETE_BACKWARD:
                self.editor.delete_before_caret()
            case Action.CARET_LEFT:
                self.editor.move_caret_left()
            case Action.CARET_RIGHT:
                self.editor.move_caret_right()
            case _:
                logger.debug("Ignoring %s while searching", action.value)
