"""Non-preemptive CPU scheduling: first-come-first-served and shortest-job-first."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple, Union

__all__ = ["Process", "ScheduledProcess", "ScheduleResult", "fcfs", "sjf"]


@dataclass(frozen=True)
class Process:
    """A process with an identifier, an arrival time and a CPU burst length."""

    pid: int
    arrival: int
    burst: int

    def __post_init__(self) -> None:
        if self.arrival < 0:
            raise ValueError(f"arrival time must not be negative, got {self.arrival}")
        if self.burst < 0:
            raise ValueError(f"burst time must not be negative, got {self.burst}")


@dataclass(frozen=True)
class ScheduledProcess:
    """A process together with the time it was given the CPU."""

    process: Process
    start: int

    @property
    def completion(self) -> int:
        return self.start + self.process.burst

    @property
    def turnaround(self) -> int:
        return self.completion - self.process.arrival

    @property
    def waiting(self) -> int:
        return self.turnaround - self.process.burst

    @property
    def response(self) -> int:
        return self.start - self.process.arrival


@dataclass(frozen=True)
class ScheduleResult:
    """Scheduled processes and their average times."""

    entries: Tuple[ScheduledProcess, ...]

    def __iter__(self):
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def execution_order(self) -> List[int]:
        """Process identifiers in the order they ran."""
        return [entry.process.pid for entry in sorted(self.entries, key=lambda e: e.start)]

    def _average(self, attribute: str) -> float:
        return sum(getattr(entry, attribute) for entry in self.entries) / len(self.entries)

    @property
    def average_waiting(self) -> float:
        return self._average("waiting")

    @property
    def average_turnaround(self) -> float:
        return self._average("turnaround")

    @property
    def average_response(self) -> float:
        return self._average("response")


ProcessSpec = Union[Process, Tuple[int, int]]


def _processes(processes: Iterable[ProcessSpec]) -> List[Process]:
    result = [
        item if isinstance(item, Process) else Process(pid, *item)
        for pid, item in enumerate(processes, start=1)
    ]
    if not result:
        raise ValueError("no processes to schedule")
    return result


def fcfs(processes: Iterable[ProcessSpec]) -> ScheduleResult:
    """Run processes in order of arrival; ties keep their input order.

    ``processes`` holds Process objects or ``(arrival, burst)`` pairs, which are
    numbered from 1. Entries of the result are in execution order.
    """
    time = 0
    entries = []
    for process in sorted(_processes(processes), key=lambda p: p.arrival):
        start = max(time, process.arrival)
        entries.append(ScheduledProcess(process, start))
        time = start + process.burst
    return ScheduleResult(tuple(entries))


def sjf(processes: Iterable[ProcessSpec]) -> ScheduleResult:
    """Run the shortest arrived job next; ties go to the earlier input.

    Entries of the result are in input order.
    """
    procs = _processes(processes)
    pending = list(enumerate(procs))
    starts = {}
    time = 0
    while pending:
        ready = [(pos, p) for pos, p in pending if p.arrival <= time]
        if not ready:
            time = min(p.arrival for _, p in pending)
            continue
        pos, chosen = min(ready, key=lambda item: item[1].burst)
        starts[pos] = time
        time += chosen.burst
        pending.remove((pos, chosen))
    return ScheduleResult(tuple(ScheduledProcess(p, starts[pos]) for pos, p in enumerate(procs)))