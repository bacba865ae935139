"""Shared fixtures for proctop tests."""

import pytest

from proctop.models import ProcessRecord
from proctop.source import ProcessSourceError


class FakeProcessSource:
    """In-memory ProcessSource that records termination requests."""

    def __init__(self, records: list[ProcessRecord] | None = None) -> None:
        self.records = list(records or [])
        self.terminated: list[int] = []
        self.fail_listing = False
        self.list_calls = 0

    def list_processes(self) -> list[ProcessRecord]:
        self.list_calls += 1
        if self.fail_listing:
            raise ProcessSourceError("enumeration failed")
        return list(self.records)

    def terminate(self, pid: int) -> bool:
        self.terminated.append(pid)
        if not any(record.pid == pid for record in self.records):
            return False
        self.records = [record for record in self.records if record.pid != pid]
        return True


def make_record(pid: int, name: str, cpu: float = 0.0, rss: int = 4096) -> ProcessRecord:
    return ProcessRecord(pid=pid, name=name, cpu_percent=cpu, memory_rss=rss)


@pytest.fixture
def sample_records() -> list[ProcessRecord]:
    # Deliberately out of PID order
    return [
        make_record(3, "alphabet"),
        make_record(1, "alpha"),
        make_record(2, "beta"),
    ]


@pytest.fixture
def fake_source(sample_records) -> FakeProcessSource:
    return FakeProcessSource(sample_records)
