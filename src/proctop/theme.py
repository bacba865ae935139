"""Fixed color palettes for the process table."""

from dataclasses import dataclass
from enum import Enum

# Tailwind slate shades shared by every palette
_SLATE_950 = "#020617"
_SLATE_900 = "#0f172a"
_SLATE_200 = "#e2e8f0"


class Palette(Enum):
    """Accent palettes, as (dark shade, light shade) pairs."""

    BLUE = ("#1e3a8a", "#60a5fa")
    EMERALD = ("#064e3b", "#34d399")
    INDIGO = ("#312e81", "#818cf8")
    RED = ("#7f1d1d", "#f87171")

    def next(self) -> "Palette":
        """Return the palette after this one, wrapping around."""
        members = list(Palette)
        return members[(members.index(self) + 1) % len(members)]


@dataclass(slots=True, frozen=True)
class TableColors:
    """Colors for each part of the process table."""

    buffer_bg: str
    header_bg: str
    header_fg: str
    row_fg: str
    selected_fg: str
    normal_row: str
    alt_row: str
    border: str

    @classmethod
    def from_palette(cls, palette: Palette) -> "TableColors":
        dark, light = palette.value
        return cls(
            buffer_bg=_SLATE_950,
            header_bg=dark,
            header_fg=_SLATE_200,
            row_fg=_SLATE_200,
            selected_fg=light,
            normal_row=_SLATE_950,
            alt_row=_SLATE_900,
            border=light,
        )

    def css_variables(self) -> dict[str, str]:
        """Expose the colors as Textual CSS variables."""
        return {
            "table-buffer-bg": self.buffer_bg,
            "table-header-bg": self.header_bg,
            "table-header-fg": self.header_fg,
            "table-row-fg": self.row_fg,
            "table-selected-fg": self.selected_fg,
            "table-normal-row": self.normal_row,
            "table-alt-row": self.alt_row,
            "table-border": self.border,
        }
