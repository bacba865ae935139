"""proctop - Main Textual application."""

import logging
import sys

from rich.markup import escape
from textual import events
from textual.app import App, ComposeResult
from textual.containers import Container
from textual.logging import TextualHandler
from textual.widgets import DataTable, Static

from proctop.controller import Mode, ProcessListController
from proctop.keymap import resolve_key
from proctop.models import ProcessRecord
from proctop.source import ProcessSource, PsutilProcessSource
from proctop.theme import Palette, TableColors

logger = logging.getLogger(__name__)

DEFAULT_PALETTE = Palette.BLUE

BROWSING_HELP = "q quit  r refresh  k/j next/prev  d kill  / search  p palette"
SEARCHING_HELP = "enter filter  esc cancel  ←/→ move  backspace delete"


def format_bytes(size: int) -> str:
    """Format bytes as human-readable string."""
    for unit in ["B", "K", "M", "G", "T"]:
        if size < 1024:
            return f"{size:5.1f}{unit}" if unit != "B" else f"{size:5d}{unit}"
        size = size / 1024
    return f"{size:.1f}P"


def format_search(text: str, caret: int) -> str:
    """Render the search buffer as markup with the caret cell reversed."""
    under_caret = text[caret] if caret < len(text) else " "
    return (
        f"Search: {escape(text[:caret])}"
        f"[reverse]{escape(under_caret)}[/reverse]"
        f"{escape(text[caret + 1:])}"
    )


class ProcessGrid(DataTable):
    """Process table whose cursor is driven by the controller, not by keys."""

    can_focus = False


class ProcessTable(Container):
    """Container for the process data table."""

    DEFAULT_CSS = """
    ProcessTable {
        height: 1fr;
        border: double $table-border;
        background: $table-buffer-bg;
    }
    """

    def __init__(self, *args, **kwargs) -> None:
        """Initialize ProcessTable."""
        super().__init__(*args, **kwargs)
        self._shown: tuple[ProcessRecord, ...] | None = None

    def compose(self) -> ComposeResult:
        """Compose the process table."""
        yield ProcessGrid(id="process-table", zebra_stripes=True, cursor_type="row")

    def on_mount(self) -> None:
        """Add the column headers when mounted."""
        table = self.query_one("#process-table", DataTable)
        table.add_column("NAME", key="name", width=24)
        table.add_column("PID", key="pid", width=8)
        table.add_column("CPU USAGE", key="cpu", width=10)
        table.add_column("MEMORY", key="mem", width=10)

    def show(self, records: tuple[ProcessRecord, ...], selected: int | None) -> None:
        """
        Display ``records`` with row ``selected`` highlighted.

        Rows are rebuilt only when a different snapshot is passed in; moving
        the selection just moves the cursor.
        """
        table = self.query_one("#process-table", DataTable)
        if records is not self._shown:
            table.clear()
            for record in records:
                table.add_row(
                    record.name,
                    str(record.pid),
                    f"{record.cpu_percent:5.1f}",
                    format_bytes(record.memory_rss),
                    key=str(record.pid),
                )
            self._shown = records
        self.border_title = f"Processes ({len(records)})"
        if selected is not None:
            table.move_cursor(row=selected)


class ProctopApp(App):
    """Main proctop application."""

    TITLE = "proctop"
    SUB_TITLE = "Process list and killer"

    CSS = """
    Screen {
        layout: vertical;
        layers: base overlay;
    }

    ProcessGrid {
        background: $table-buffer-bg;
        color: $table-row-fg;
    }

    ProcessGrid > .datatable--header {
        background: $table-header-bg;
        color: $table-header-fg;
    }

    ProcessGrid > .datatable--even-row {
        background: $table-normal-row;
    }

    ProcessGrid > .datatable--odd-row {
        background: $table-alt-row;
    }

    ProcessGrid > .datatable--cursor {
        color: $table-selected-fg;
        text-style: reverse;
    }

    #search-overlay {
        layer: overlay;
        dock: bottom;
        offset-y: -2;
        width: 60;
        height: 3;
        border: round $table-border;
        background: $table-buffer-bg;
        display: none;
    }

    #status, #help {
        height: 1;
        padding: 0 1;
    }
    """

    def __init__(self, source: ProcessSource | None = None) -> None:
        """Initialize the ProctopApp."""
        super().__init__()
        self._controller = ProcessListController(
            source if source is not None else PsutilProcessSource(),
            palette=DEFAULT_PALETTE,
        )

    @property
    def controller(self) -> ProcessListController:
        return self._controller

    def get_css_variables(self) -> dict[str, str]:
        """Add the active palette's table colors to the CSS variables."""
        variables = super().get_css_variables()
        # Called from App.__init__ before the controller exists
        controller = getattr(self, "_controller", None)
        palette = controller.palette if controller is not None else DEFAULT_PALETTE
        variables.update(TableColors.from_palette(palette).css_variables())
        return variables

    def compose(self) -> ComposeResult:
        """Compose the application layout."""
        yield ProcessTable()
        yield Static(id="status")
        yield Static(BROWSING_HELP, id="help")
        yield Static(id="search-overlay")

    def on_mount(self) -> None:
        """Load the first snapshot once the widgets exist."""
        self._controller.refresh()
        self._render_view()

    def on_key(self, event: events.Key) -> None:
        """Route a key press to the controller and redraw."""
        resolved = resolve_key(self._controller.mode, event.key, event.character)
        if resolved is None:
            return
        event.stop()
        event.prevent_default()

        action, char = resolved
        palette = self._controller.palette
        if not self._controller.dispatch(action, char):
            self.exit()
            return
        if self._controller.palette is not palette:
            self.refresh_css()
        self._render_view()

    def on_data_table_row_highlighted(self, event: DataTable.RowHighlighted) -> None:
        """Follow cursor moves made by the table itself, e.g. a mouse click."""
        if event.cursor_row != self._controller.navigator.selected:
            self._controller.navigator.select(event.cursor_row)

    def _render_view(self) -> None:
        """Draw the controller's current state. Never mutates it."""
        controller = self._controller
        self.query_one(ProcessTable).show(controller.records, controller.navigator.selected)
        self.query_one("#status", Static).update(escape(controller.status))

        overlay = self.query_one("#search-overlay", Static)
        overlay.display = controller.overlay_visible
        if controller.overlay_visible:
            overlay.update(format_search(controller.editor.text, controller.editor.caret))

        help_text = SEARCHING_HELP if controller.mode is Mode.SEARCHING else BROWSING_HELP
        self.query_one("#help", Static).update(help_text)


def main() -> None:
    """Entry point for proctop application."""
    if not (sys.stdin.isatty() and sys.stdout.isatty()):
        print("proctop: an interactive terminal is required", file=sys.stderr)
        sys.exit(1)

    logging.basicConfig(level=logging.INFO, handlers=[TextualHandler()])
    app = ProctopApp()
    app.run()
    sys.exit(app.return_code or 0)


if __name__ == "__main__":
    main()
