"""Flask application factory for the disk scheduling API.

The ``create_app`` function wires the scheduler, a simulation history
and an event log into a Flask app with four endpoints:

- ``POST /api/simulate`` — run one algorithm and record it in history.
- ``POST /api/compare`` — run every algorithm on the same inputs.
- ``GET /api/history`` — recent simulations, newest first.
- ``GET /api/log`` — the service event log, optionally filtered by level.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from flask import Flask, Response, jsonify, request

from py_disksched.disk import DiskSchedulingError, compare_all, run_algorithm
from py_disksched.history import DEFAULT_CAPACITY, SimulationHistory
from py_disksched.logging import DEFAULT_LOG_CAPACITY, Logger, LogLevel
from py_disksched.validation import (
    MAX_DISK_SIZE,
    MIN_DISK_SIZE,
    SchedulingRequest,
    ValidationError,
    parse_request,
)

_HTTP_BAD_REQUEST = 400
_HTTP_INTERNAL_SERVER_ERROR = 500
_SOURCE = "api"
_INT_SETTINGS = ("HISTORY_CAPACITY", "LOG_CAPACITY", "MIN_DISK_SIZE", "MAX_DISK_SIZE")


def _coerce_int_settings(app: Flask) -> None:
    """Turn the integer settings into ints, or fail naming the bad one.

    Raises:
        ValueError: If a setting is not an integer.

    """
    for key in _INT_SETTINGS:
        value = app.config[key]
        try:
            app.config[key] = int(value)
        except (TypeError, ValueError):
            msg = f"{key} must be an integer, got {value!r}"
            raise ValueError(msg) from None


def create_app(
    config: Mapping[str, Any] | None = None,
    *,
    history: SimulationHistory | None = None,
    logger: Logger | None = None,
) -> Flask:
    """Create and configure the Flask application.

    Configuration is layered: built-in defaults, then ``DISKSCHED_*``
    environment variables, then the explicit *config* mapping.

    Args:
        config: Overrides for ``app.config`` (e.g. ``HISTORY_CAPACITY``).
        history: Simulation history to record into; a fresh one sized
            by ``HISTORY_CAPACITY`` is created if omitted.
        logger: Event log to write to; a fresh one sized by
            ``LOG_CAPACITY`` is created if omitted.

    Returns:
        A configured Flask application ready to serve.

    Raises:
        ValueError: If an integer setting such as ``HISTORY_CAPACITY``
            is not an integer.

    """
    app = Flask(__name__)
    app.config.from_mapping(
        HISTORY_CAPACITY=DEFAULT_CAPACITY,
        LOG_CAPACITY=DEFAULT_LOG_CAPACITY,
        MIN_DISK_SIZE=MIN_DISK_SIZE,
        MAX_DISK_SIZE=MAX_DISK_SIZE,
    )
    app.config.from_prefixed_env("DISKSCHED")
    if config is not None:
        app.config.from_mapping(config)
    _coerce_int_settings(app)

    records = (
        history if history is not None else SimulationHistory(capacity=app.config["HISTORY_CAPACITY"])
    )
    events = logger if logger is not None else Logger(capacity=app.config["LOG_CAPACITY"])

    def parse(*, require_algorithm: bool) -> SchedulingRequest:
        return parse_request(
            request.get_json(silent=True),
            require_algorithm=require_algorithm,
            min_disk_size=app.config["MIN_DISK_SIZE"],
            max_disk_size=app.config["MAX_DISK_SIZE"],
        )

    def rejected(endpoint: str, error: ValidationError) -> tuple[Response, int]:
        events.log(LogLevel.WARNING, f"{endpoint} rejected: {error}", source=_SOURCE)
        body = {"message": "Invalid request parameters", "errors": error.errors}
        return jsonify(body), _HTTP_BAD_REQUEST

    @app.errorhandler(DiskSchedulingError)
    def scheduling_failed(error: DiskSchedulingError) -> tuple[Response, int]:  # pyright: ignore[reportUnusedFunction]
        """Report a core failure as a 500 and log it."""
        events.log(LogLevel.ERROR, f"{request.path} failed: {error}", source=_SOURCE)
        return jsonify({"message": "Internal server error"}), _HTTP_INTERNAL_SERVER_ERROR

    @app.route("/api/simulate", methods=["POST"])
    def simulate() -> tuple[Response, int] | Response:  # pyright: ignore[reportUnusedFunction]
        """Run a single algorithm and return its metrics.

        Expects JSON body: ``{"disk_size", "initial_position",
        "request_queue", "algorithm"}``.

        Returns:
            JSON ``SimulationResult``.

        """
        try:
            req = parse(require_algorithm=True)
        except ValidationError as e:
            return rejected("simulate", e)

        assert req.algorithm is not None
        result = run_algorithm(req.algorithm, req.disk_size, req.initial_position, req.request_queue)
        records.record(req, result)
        events.log(
            LogLevel.INFO,
            f"simulate {req.algorithm}: {len(req.request_queue)} requests, "
            f"total seek {result.total_seek_time}",
            source=_SOURCE,
        )
        return jsonify(result.to_dict())

    @app.route("/api/compare", methods=["POST"])
    def compare() -> tuple[Response, int] | Response:  # pyright: ignore[reportUnusedFunction]
        """Run every algorithm on the same inputs.

        Returns:
            JSON object mapping algorithm tag to ``SimulationResult``.

        """
        try:
            req = parse(require_algorithm=False)
        except ValidationError as e:
            return rejected("compare", e)

        results = compare_all(req.disk_size, req.initial_position, req.request_queue)
        best = min(results, key=lambda alg: results[alg].total_seek_time)
        events.log(
            LogLevel.INFO,
            f"compare: {len(req.request_queue)} requests, best {best}",
            source=_SOURCE,
        )
        return jsonify({str(alg): result.to_dict() for alg, result in results.items()})

    @app.route("/api/history")
    def simulation_history() -> Response:  # pyright: ignore[reportUnusedFunction]
        """Return recorded simulations, newest first."""
        return jsonify([entry.to_dict() for entry in records.entries()])

    @app.route("/api/log")
    def event_log() -> tuple[Response, int] | Response:  # pyright: ignore[reportUnusedFunction]
        """Return the event log, optionally from ``?level=`` upward."""
        level_name = request.args.get("level")
        min_level = None
        if level_name is not None:
            try:
                min_level = LogLevel[level_name.upper()]
            except KeyError:
                return jsonify({"message": f"Unknown log level: {level_name}"}), _HTTP_BAD_REQUEST
        entries = events.filter(min_level=min_level)
        return jsonify({"entries": [entry.to_dict() for entry in entries]})

    return app


def main() -> None:
    """Run the API development server.

    This is the ``py-disksched-web`` console entry point.
    """
    app = create_app()
    app.run(debug=True, port=8080)
