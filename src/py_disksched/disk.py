"""Disk scheduling algorithms — minimising seek time for I/O requests.

When several requests for disk I/O are pending, the disk arm must move
between tracks (cylinders) to service them.  The dominant cost is
**seek time** — how far the arm travels.  Disk scheduling algorithms
decide the *order* in which requests are serviced to minimise this.

Think of a disk arm like an elevator in a building:
    - **FCFS** — stop at every floor in the order people pressed buttons.
    - **SSTF** — always go to the nearest requested floor (greedy).
    - **SCAN** — go all the way up, then all the way down (elevator).
    - **C-SCAN** — go all the way up, jump back to bottom, go up again.

Each algorithm is a plain function returning the *seek sequence* — the
cylinders visited in order, not including the starting head position.
``run_algorithm`` resolves an ``Algorithm`` tag to one of them and
measures the result; ``compare_all`` does that for every tag.

Boundary stops:
    SCAN and C-SCAN model the arm travelling to the physical edge of the
    disk.  Those edge visits (``disk_size - 1`` and, for C-SCAN, the wrap
    to ``0``) appear in the seek sequence, but never twice in a row with
    a real request sitting on the same cylinder.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import TypeAlias


class DiskSchedulingError(Exception):
    """Raise when a disk scheduling computation cannot proceed."""


class UnsupportedAlgorithmError(DiskSchedulingError):
    """Raise when asked to run an algorithm that does not exist."""


class EmptySequenceError(DiskSchedulingError):
    """Raise when measuring a seek sequence with no visits."""


class Algorithm(StrEnum):
    """The supported scheduling policies, keyed by their wire tag."""

    FCFS = "fcfs"
    SSTF = "sstf"
    SCAN = "scan"
    CSCAN = "cscan"


@dataclass(frozen=True)
class SimulationResult:
    """The outcome of scheduling one request queue.

    Attributes:
        seek_sequence: Cylinders in the order the head visits them.
        total_seek_time: Sum of every seek distance.
        average_seek_time: ``total_seek_time`` divided by the visit count.
        max_seek_distance: The single longest seek.

    """

    seek_sequence: tuple[int, ...]
    total_seek_time: int
    average_seek_time: float
    max_seek_distance: int

    def to_dict(self) -> dict[str, object]:
        """Return the JSON-ready representation."""
        return {
            "seek_sequence": list(self.seek_sequence),
            "total_seek_time": self.total_seek_time,
            "average_seek_time": self.average_seek_time,
            "max_seek_distance": self.max_seek_distance,
        }


ComparisonResult: TypeAlias = dict[Algorithm, SimulationResult]


def fcfs(request_queue: Sequence[int]) -> list[int]:
    """First Come, First Served — service in arrival order.

    The simplest policy.  Fair (no starvation), but the arm zigzags
    wildly across the disk, producing high total seek time.
    """
    return list(request_queue)


def sstf(initial_position: int, request_queue: Sequence[int]) -> list[int]:
    """Shortest Seek Time First — always go to the nearest request.

    A greedy algorithm that minimises immediate seek time.  When two
    requests are equally close, the one that arrived first wins:
    ``min`` returns the first minimum it meets scanning left to right.
    """
    remaining = list(request_queue)
    order: list[int] = []
    current = initial_position
    while remaining:
        nearest = min(remaining, key=lambda r: abs(r - current))
        order.append(nearest)
        remaining.remove(nearest)
        current = nearest
    return order


def scan(disk_size: int, initial_position: int, request_queue: Sequence[int]) -> list[int]:
    """SCAN (elevator) — sweep up to the edge, then reverse.

    Requests at or above the head are served on the way up.  If any
    request lies below the head, the arm runs on to the last cylinder
    before turning around, then serves the rest on the way down.
    """
    up = sorted(r for r in request_queue if r >= initial_position)
    down = sorted((r for r in request_queue if r < initial_position), reverse=True)
    edge = disk_size - 1

    order = list(up)
    if down:
        if up and up[-1] < edge:
            order.append(edge)
        order.extend(down)
    return order


def cscan(disk_size: int, initial_position: int, request_queue: Sequence[int]) -> list[int]:
    """Circular SCAN — sweep up to the edge, jump to cylinder 0, sweep up again.

    The arm only ever services requests while moving upward, which gives
    more uniform wait times than SCAN: cylinders near either end are not
    penalised.  Requests below the head are reached through the wrap.
    """
    up = sorted(r for r in request_queue if r >= initial_position)
    wrapped = sorted(r for r in request_queue if r < initial_position)
    edge = disk_size - 1

    order = list(up)
    if wrapped:
        sweep_end = up[-1] if up else initial_position
        if sweep_end < edge:
            order.append(edge)
        if wrapped[0] != 0:
            order.append(0)
        order.extend(wrapped)
    return order


def calculate_metrics(
    initial_position: int, seek_sequence: Sequence[int]
) -> SimulationResult:
    """Measure the head movement of a seek sequence.

    Args:
        initial_position: Where the head starts (not itself a visit).
        seek_sequence: Cylinders visited, in order.

    Returns:
        The sequence together with total, average and maximum seek distance.

    Raises:
        EmptySequenceError: If *seek_sequence* has no visits.

    """
    if not seek_sequence:
        msg = "Cannot measure an empty seek sequence"
        raise EmptySequenceError(msg)

    total = 0
    longest = 0
    current = initial_position
    for position in seek_sequence:
        distance = abs(position - current)
        total += distance
        longest = max(longest, distance)
        current = position

    return SimulationResult(
        seek_sequence=tuple(seek_sequence),
        total_seek_time=total,
        average_seek_time=total / len(seek_sequence),
        max_seek_distance=longest,
    )


def _resolve(algorithm: Algorithm | str) -> Algorithm:
    """Turn a tag into an ``Algorithm``, rejecting unknown names."""
    try:
        return Algorithm(algorithm)
    except ValueError:
        msg = f"Unsupported algorithm: {algorithm}"
        raise UnsupportedAlgorithmError(msg) from None


def run_algorithm(
    algorithm: Algorithm | str,
    disk_size: int,
    initial_position: int,
    request_queue: Sequence[int],
) -> SimulationResult:
    """Schedule *request_queue* with one algorithm and measure the result.

    Raises:
        UnsupportedAlgorithmError: If *algorithm* is not a known tag.
        EmptySequenceError: If *request_queue* is empty.

    """
    match _resolve(algorithm):
        case Algorithm.FCFS:
            sequence = fcfs(request_queue)
        case Algorithm.SSTF:
            sequence = sstf(initial_position, request_queue)
        case Algorithm.SCAN:
            sequence = scan(disk_size, initial_position, request_queue)
        case Algorithm.CSCAN:
            sequence = cscan(disk_size, initial_position, request_queue)
    return calculate_metrics(initial_position, sequence)


def compare_all(
    disk_size: int, initial_position: int, request_queue: Sequence[int]
) -> ComparisonResult:
    """Run every algorithm against the same request queue.

    Each run gets its own copy of the queue, so no algorithm can
    influence another.
    """
    return {
        algorithm: run_algorithm(algorithm, disk_size, initial_position, list(request_queue))
        for algorithm in Algorithm
    }
