"""proctop - Interactive terminal process list with search and kill."""

__version__ = "0.1.0"
