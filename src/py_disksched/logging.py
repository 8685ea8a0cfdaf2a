"""Service event log — a bounded ring of what the API did.

Each simulation, comparison, rejected request and internal failure
leaves one structured entry.  The service may run for a long time, so
the log behaves like a kernel's ``dmesg`` ring buffer: it holds the
most recent ``capacity`` entries and silently drops the oldest.

- **LogLevel** — severity, ordered so ``min_level`` filtering is a compare.
- **LogEntry** — one immutable record: level, message, and source.
- **Logger** — the ring itself, with filtering and clearing.
"""

from collections import deque
from dataclasses import dataclass
from enum import IntEnum

DEFAULT_LOG_CAPACITY = 1000


class LogLevel(IntEnum):
    """Severity of a log entry (DEBUG < INFO < WARNING < ERROR)."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass(frozen=True)
class LogEntry:
    """A single structured log record.

    Attributes:
        level: How serious the event is.
        message: What happened, e.g. ``"simulate rejected: ..."``.
        source: The component that reported it (the API uses ``"api"``).

    """

    level: LogLevel
    message: str
    source: str

    def __str__(self) -> str:
        """Format as ``[LEVEL] source: message``."""
        return f"[{self.level.name}] {self.source}: {self.message}"

    def to_dict(self) -> dict[str, str]:
        """Return the JSON-ready representation."""
        return {"level": self.level.name, "message": self.message, "source": self.source}


class Logger:
    """Capacity-bounded event log, oldest entries evicted first.

    Args:
        capacity: Maximum number of entries retained.

    """

    def __init__(self, capacity: int = DEFAULT_LOG_CAPACITY) -> None:
        """Create an empty log holding at most *capacity* entries."""
        if capacity <= 0:
            msg = f"Log capacity must be positive, got {capacity}"
            raise ValueError(msg)
        self._ring: deque[LogEntry] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        """Return the maximum number of entries kept."""
        return self._ring.maxlen or 0

    @property
    def entries(self) -> list[LogEntry]:
        """Return the retained entries, oldest first."""
        return list(self._ring)

    def log(self, level: LogLevel, message: str, *, source: str) -> None:
        """Record an event, evicting the oldest entry when full."""
        self._ring.append(LogEntry(level=level, message=message, source=source))

    def filter(
        self,
        *,
        min_level: LogLevel | None = None,
        source: str | None = None,
    ) -> list[LogEntry]:
        """Return retained entries at or above *min_level* from *source*.

        Either criterion may be omitted; with neither, this is ``entries``.
        """
        return [
            entry
            for entry in self._ring
            if (min_level is None or entry.level >= min_level)
            and (source is None or entry.source == source)
        ]

    def clear(self) -> None:
        """Drop every entry."""
        self._ring.clear()
