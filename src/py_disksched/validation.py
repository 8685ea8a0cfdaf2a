"""Request validation — turn untrusted JSON into a ``SchedulingRequest``.

The scheduling algorithms assume well-formed input: a sensible disk
size, a head on the disk, and at least one in-range request.  Checking
that is the caller's job, and this module is that caller-side check.

``parse_request`` collects *every* problem it finds rather than
stopping at the first, so a client can fix all its fields in one go.
Each problem is a ``{"field": ..., "message": ...}`` dict.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from py_disksched.disk import Algorithm

MIN_DISK_SIZE = 10
MAX_DISK_SIZE = 1000


class ValidationError(Exception):
    """Raise when scheduling inputs are missing or out of range."""

    def __init__(self, errors: list[dict[str, str]]) -> None:
        """Create the error from a list of field problems."""
        super().__init__("; ".join(f"{e['field']}: {e['message']}" for e in errors))
        self.errors = errors


@dataclass(frozen=True)
class SchedulingRequest:
    """Validated inputs for one simulation.

    ``algorithm`` is ``None`` for comparison requests, which run every
    algorithm.
    """

    disk_size: int
    initial_position: int
    request_queue: tuple[int, ...]
    algorithm: Algorithm | None = None

    def to_dict(self) -> dict[str, object]:
        """Return the JSON-ready representation."""
        data: dict[str, object] = {
            "disk_size": self.disk_size,
            "initial_position": self.initial_position,
            "request_queue": list(self.request_queue),
        }
        if self.algorithm is not None:
            data["algorithm"] = str(self.algorithm)
        return data


def _is_int(value: Any) -> bool:
    """Return True for real integers (``bool`` is not a cylinder)."""
    return isinstance(value, int) and not isinstance(value, bool)


def parse_request(
    data: Any,
    *,
    require_algorithm: bool = True,
    min_disk_size: int = MIN_DISK_SIZE,
    max_disk_size: int = MAX_DISK_SIZE,
) -> SchedulingRequest:
    """Validate a decoded JSON body and build a ``SchedulingRequest``.

    Args:
        data: The decoded request body (expected to be a JSON object).
        require_algorithm: Whether ``algorithm`` must be present.
        min_disk_size: Smallest accepted ``disk_size``.
        max_disk_size: Largest accepted ``disk_size``.

    Returns:
        The validated, immutable request.

    Raises:
        ValidationError: Listing every field that failed validation.

    """
    if not isinstance(data, Mapping):
        raise ValidationError([{"field": "body", "message": "Expected a JSON object"}])

    errors: list[dict[str, str]] = []

    disk_size = data.get("disk_size")
    disk_ok = False
    if not _is_int(disk_size):
        errors.append({"field": "disk_size", "message": "Must be an integer"})
    elif not min_disk_size <= disk_size <= max_disk_size:
        errors.append(
            {
                "field": "disk_size",
                "message": f"Must be between {min_disk_size} and {max_disk_size}",
            }
        )
    else:
        disk_ok = True

    initial_position = data.get("initial_position")
    if not _is_int(initial_position):
        errors.append({"field": "initial_position", "message": "Must be an integer"})
    elif initial_position < 0 or (disk_ok and initial_position >= disk_size):
        errors.append(
            {"field": "initial_position", "message": "Must lie on the disk (0 <= position < disk_size)"}
        )

    request_queue = data.get("request_queue")
    if not isinstance(request_queue, list) or not request_queue:
        errors.append({"field": "request_queue", "message": "Must be a non-empty list of integers"})
    else:
        for index, cylinder in enumerate(request_queue):
            if not _is_int(cylinder):
                errors.append({"field": f"request_queue[{index}]", "message": "Must be an integer"})
            elif cylinder < 0 or (disk_ok and cylinder >= disk_size):
                errors.append(
                    {
                        "field": f"request_queue[{index}]",
                        "message": "Must lie on the disk (0 <= cylinder < disk_size)",
                    }
                )

    # Comparison requests run every algorithm, so the field is ignored there.
    algorithm: Algorithm | None = None
    if require_algorithm:
        raw_algorithm = data.get("algorithm")
        if raw_algorithm is None:
            errors.append({"field": "algorithm", "message": "Required"})
        elif not isinstance(raw_algorithm, str) or raw_algorithm not in set(Algorithm):
            choices = ", ".join(Algorithm)
            errors.append({"field": "algorithm", "message": f"Must be one of: {choices}"})
        else:
            algorithm = Algorithm(raw_algorithm)

    if errors:
        raise ValidationError(errors)

    return SchedulingRequest(
        disk_size=disk_size,
        initial_position=initial_position,
        request_queue=tuple(request_queue),
        algorithm=algorithm,
    )
