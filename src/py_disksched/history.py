"""Simulation history — a bounded log of recent runs.

Every single-algorithm simulation served over the API is recorded here
together with its inputs and a UTC timestamp.  Only the most recent
``capacity`` runs are kept; once full, the oldest record falls off the
front, the same way a ``deque(maxlen=...)`` behaves.

The history is handed to the web app rather than living at module
level, so each app (and each test) owns an independent log.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from datetime import UTC, datetime

from py_disksched.disk import SimulationResult
from py_disksched.validation import SchedulingRequest

DEFAULT_CAPACITY = 100


@dataclass(frozen=True)
class SimulationRecord:
    """One recorded simulation: inputs, results, and when it ran."""

    request: SchedulingRequest
    results: SimulationResult
    timestamp: str

    def to_dict(self) -> dict[str, object]:
        """Return the JSON-ready representation."""
        return {
            **self.request.to_dict(),
            "results": self.results.to_dict(),
            "timestamp": self.timestamp,
        }


class SimulationHistory:
    """Append-only, capacity-bounded list of simulation records.

    Args:
        capacity: Maximum number of records retained.

    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        """Create an empty history holding at most *capacity* records."""
        if capacity <= 0:
            msg = f"History capacity must be positive, got {capacity}"
            raise ValueError(msg)
        self._records: deque[SimulationRecord] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        """Return the maximum number of records kept."""
        return self._records.maxlen or 0

    def __len__(self) -> int:
        """Return the number of records currently held."""
        return len(self._records)

    def record(
        self,
        request: SchedulingRequest,
        result: SimulationResult,
        *,
        timestamp: str | None = None,
    ) -> SimulationRecord:
        """Append a simulation, evicting the oldest if at capacity.

        Args:
            request: The validated inputs that were simulated.
            result: What the scheduler produced.
            timestamp: ISO 8601 time of the run; defaults to now (UTC).

        Returns:
            The stored record.

        """
        entry = SimulationRecord(
            request=request,
            results=result,
            timestamp=timestamp or datetime.now(UTC).isoformat(),
        )
        self._records.append(entry)
        return entry

    def entries(self) -> list[SimulationRecord]:
        """Return all records, newest first."""
        return list(reversed(self._records))

    def clear(self) -> None:
        """Forget every record."""
        self._records.clear()
