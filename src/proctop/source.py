"""Process enumeration and termination backed by psutil."""

import logging
from typing import Protocol

import psutil

from proctop.models import ProcessRecord

logger = logging.getLogger(__name__)

# Attributes fetched in a single process_iter pass
_ATTRS = ["pid", "name", "cpu_percent", "memory_info"]


class ProcessSourceError(Exception):
    """Raised when the process table as a whole cannot be read."""


class ProcessSource(Protocol):
    """Anything that can list processes and terminate one by PID."""

    def list_processes(self) -> list[ProcessRecord]:
        """Return every live process, in no particular order."""
        ...

    def terminate(self, pid: int) -> bool:
        """Request termination of ``pid``; return False if that was not possible."""
        ...


class PsutilProcessSource:
    """
    ProcessSource that queries the operating system through psutil.

    Processes that vanish or deny access mid-enumeration are skipped rather
    than reported, so a snapshot only ever contains what could be read.
    """

    def __init__(self) -> None:
        """Initialize the source and take a first CPU sample."""
        # psutil reports 0.0 for the first cpu_percent call on each process
        try:
            self.list_processes()
        except ProcessSourceError:
            logger.warning("Initial CPU sample failed", exc_info=True)

    def list_processes(self) -> list[ProcessRecord]:
        """
        Collect records for all running processes.

        Raises:
            ProcessSourceError: If the process table itself cannot be read.
        """
        records: list[ProcessRecord] = []
        try:
            for proc in psutil.process_iter(attrs=_ATTRS):
                try:
                    info = proc.info
                    mem_info = info.get("memory_info")
                    records.append(
                        ProcessRecord(
                            pid=info.get("pid", proc.pid),
                            name=info.get("name") or "",
                            cpu_percent=info.get("cpu_percent") or 0.0,
                            memory_rss=mem_info.rss if mem_info else 0,
                        )
                    )
                except (psutil.NoSuchProcess, psutil.AccessDenied, psutil.ZombieProcess):
                    continue
        except (psutil.Error, OSError) as exc:
            raise ProcessSourceError(f"Cannot enumerate processes: {exc}") from exc
        return records

    def terminate(self, pid: int) -> bool:
        """
        Kill the process with the given PID.

        Returns:
            True if the signal was delivered, False if the process no longer
            exists or may not be signalled by this user.
        """
        try:
            psutil.Process(pid).kill()
        except psutil.NoSuchProcess:
            logger.info("Process %d already exited", pid)
            return False
        except psutil.AccessDenied:
            logger.info("Not permitted to kill process %d", pid)
            return False
        return True
