"""Pytest configuration for test isolation.

Settings fall back to ``STATEMENTS_*`` environment variables and the CLI
configures the package logger once per process. Both would leak between tests
(a developer's shell or ``.env`` could redirect input files, and a handler
bound to a previous ``CliRunner`` stream would outlive it), so each test starts
from a clean environment and an unconfigured package logger.
"""

from __future__ import annotations

import logging

import pytest

from account_statements import logging_setup

_ENV_VARS = (
    "STATEMENTS_ACCOUNTS_FILE",
    "STATEMENTS_TRANSACTIONS_FILE",
    "STATEMENTS_OUTPUT_FILE",
    "STATEMENTS_MAX_WORKERS",
    "ACCOUNT_STATEMENTS_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _reset_logging(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(logging_setup, "_CONFIGURED", False)
    yield
    logger = logging.getLogger("account_statements")
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
