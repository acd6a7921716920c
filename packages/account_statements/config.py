"""Run settings for the statement report.

Settings resolve, per field, from an explicit override, else an environment
variable, else a default:

==================  ===============================  ====================
field               environment variable             default
==================  ===============================  ====================
accounts_path       ``STATEMENTS_ACCOUNTS_FILE``     ``accounts.txt``
transactions_path   ``STATEMENTS_TRANSACTIONS_FILE`` ``transactions.txt``
output_path         ``STATEMENTS_OUTPUT_FILE``       ``statements.txt``
max_workers         ``STATEMENTS_MAX_WORKERS``       ``1``
==================  ===============================  ====================

The CLI loads a local ``.env`` (``python-dotenv``) before calling
:meth:`ReportSettings.from_env`, so those variables may live there too.
"""

from __future__ import annotations

import os
from os import PathLike
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_ACCOUNTS_FILE = "accounts.txt"
DEFAULT_TRANSACTIONS_FILE = "transactions.txt"
DEFAULT_OUTPUT_FILE = "statements.txt"
MAX_WORKERS_CAP = 32


def _env_path(name: str, default: str) -> Path:
    raw = os.getenv(name)
    if raw and raw.strip():
        return Path(raw.strip()).expanduser()
    return Path(default)


def _env_workers() -> int:
    raw = os.getenv("STATEMENTS_MAX_WORKERS")
    try:
        value = int(raw) if raw else 1
    except ValueError:
        value = 1
    return value if value > 0 else 1


class ReportSettings(BaseModel):
    """Validated input/output locations and reconciliation parallelism."""

    model_config = ConfigDict(strict=True, extra="forbid", frozen=True)

    accounts_path: Path
    transactions_path: Path
    output_path: Path
    max_workers: int = Field(default=1, ge=1)

    @field_validator("max_workers")
    @classmethod
    def _cap_workers(cls, v: int) -> int:
        return min(v, MAX_WORKERS_CAP)

    @classmethod
    def from_env(
        cls,
        *,
        accounts_path: str | PathLike[str] | None = None,
        transactions_path: str | PathLike[str] | None = None,
        output_path: str | PathLike[str] | None = None,
        max_workers: int | None = None,
    ) -> ReportSettings:
        """Build settings from overrides, falling back to env vars and defaults."""

        return cls(
            accounts_path=(
                Path(accounts_path)
                if accounts_path is not None
                else _env_path("STATEMENTS_ACCOUNTS_FILE", DEFAULT_ACCOUNTS_FILE)
            ),
            transactions_path=(
                Path(transactions_path)
                if transactions_path is not None
                else _env_path("STATEMENTS_TRANSACTIONS_FILE", DEFAULT_TRANSACTIONS_FILE)
            ),
            output_path=(
                Path(output_path)
                if output_path is not None
                else _env_path("STATEMENTS_OUTPUT_FILE", DEFAULT_OUTPUT_FILE)
            ),
            max_workers=max_workers if max_workers is not None else _env_workers(),
        )


__all__ = ["ReportSettings"]
