"""HTTP API for the disk scheduling simulator.

This package provides a Flask application that exposes the scheduler
over JSON.  It is an **optional** extra — install with::

    pip install py-disksched[web]

The ``create_app`` factory in ``app.py`` serves four endpoints:

- ``POST /api/simulate`` — run one algorithm and return its metrics.
- ``POST /api/compare`` — run all four algorithms on the same inputs.
- ``GET /api/history`` — the most recent simulations, newest first.
- ``GET /api/log`` — the service event log.
"""
