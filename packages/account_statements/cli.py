"""CLI for the ``account_statements`` package.

A Typer console interface over :func:`account_statements.api.generate_report`.
Environment variables (``STATEMENTS_*`` paths, ``ACCOUNT_STATEMENTS_LOG_LEVEL``)
are loaded from a local ``.env`` with ``python-dotenv`` before settings are
resolved. Fatal I/O problems are reported on stderr with exit status 1.
"""

from __future__ import annotations

import sys
from pathlib import Path

import typer
from dotenv import load_dotenv
from pydantic import ValidationError

from .logging_setup import configure_logging

app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help=(
        "Build per-account statements from a ledger and a tab-delimited "
        "transaction log. Loads STATEMENTS_* settings from a local .env."
    ),
)


def cmd_generate(
    *,
    accounts_path: Path | None = None,
    transactions_path: Path | None = None,
    output_path: Path | None = None,
    max_workers: int | None = None,
) -> int:
    """Run the statement pipeline and report the outcome.

    Returns ``0`` on success and ``1`` on invalid settings, unreadable input
    or a failed write; errors are written to stderr.
    """

    from .api import generate_report
    from .config import ReportSettings

    try:
        settings = ReportSettings.from_env(
            accounts_path=accounts_path,
            transactions_path=transactions_path,
            output_path=output_path,
            max_workers=max_workers,
        )
    except ValidationError as e:
        print(f"Error: invalid settings: {e}", file=sys.stderr)
        return 1

    for path in (settings.accounts_path, settings.transactions_path):
        if not path.is_file():
            print(f"Error: File not found: {path}", file=sys.stderr)
            return 1

    try:
        result = generate_report(settings)
    except FileNotFoundError as e:
        print(f"Error: File not found: {e.filename}", file=sys.stderr)
        return 1
    except PermissionError as e:
        print(f"Error: Permission denied: {e.filename}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: failed to write '{settings.output_path}': {e}", file=sys.stderr)
        return 1

    summary = f"Wrote {result.statements} statement(s) to {result.output_path}"
    if result.unmatched:
        summary += f" ({result.unmatched} transaction(s) matched no account)"
    typer.echo(summary)
    return 0


@app.command("generate")
def generate_cmd(
    *,
    accounts: Path | None = typer.Option(
        None, "--accounts", help="Ledger file (falls back to STATEMENTS_ACCOUNTS_FILE)."
    ),
    transactions: Path | None = typer.Option(
        None,
        "--transactions",
        help="Transaction log file (falls back to STATEMENTS_TRANSACTIONS_FILE).",
    ),
    output: Path | None = typer.Option(
        None, "--output", help="Report file to overwrite (falls back to STATEMENTS_OUTPUT_FILE)."
    ),
    workers: int | None = typer.Option(
        None, "--workers", help="Reconcile accounts on N threads (STATEMENTS_MAX_WORKERS)."
    ),
) -> None:
    """Generate the statement report."""

    code = cmd_generate(
        accounts_path=accounts,
        transactions_path=transactions,
        output_path=output,
        max_workers=workers,
    )
    if code:
        raise typer.Exit(code)


@app.callback()
def _root(
    log_level: str | None = typer.Option(
        None, "--log-level", help="Logging level (falls back to ACCOUNT_STATEMENTS_LOG_LEVEL)."
    ),
) -> None:
    """Load ``.env`` from the working directory and configure logging."""

    # override=False keeps variables already set in the environment
    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)
    configure_logging(log_level)


if __name__ == "__main__":  # pragma: no cover
    # Running as a module: `python -m account_statements.cli`
    app()
