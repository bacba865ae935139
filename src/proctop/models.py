"""Data models for proctop."""

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class ProcessRecord:
    """Immutable record of one process in a snapshot."""

    pid: int
    name: str
    cpu_percent: float  # Relative to the previous sample; 0.0 on the first one
    memory_rss: int  # Bytes
