"""Public API and orchestration for ``account_statements``.

The pipeline is a single pass: load accounts, parse and group transactions,
reconcile each account, render. :func:`build_report` runs it over in-memory
text; :func:`generate_report` adds the file reads and the atomic write.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from pathlib import Path

from .accounts import load_accounts
from .config import ReportSettings
from .logging_setup import get_logger, progress
from .models import Account
from .reconcile import reconcile_accounts
from .report_io import read_text, write_text_atomic
from .statement import render_report
from .transactions import group_by_account, load_transactions, unmatched_transactions

_logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ReportResult:
    """Summary of one statement run."""

    output_path: Path | None
    statements: int
    transactions: int
    unmatched: int
    report: str
    accounts: tuple[Account, ...]


def build_report(ledger_text: str, log_text: str, *, max_workers: int | None = None) -> ReportResult:
    """Produce the statement report text from ledger and transaction log text.

    Never raises on malformed content; bad ledger lines are dropped and bad
    transaction fields fall back to defaults.
    """

    accounts = load_accounts(ledger_text)
    transactions = load_transactions(log_text)
    grouped = group_by_account(transactions)
    progress("Loaded %d accounts and %d transactions", len(accounts), len(transactions))

    orphans = unmatched_transactions(grouped, accounts)
    if orphans:
        _logger.warning("%d transaction(s) match no ledger account", len(orphans))

    reconciled = reconcile_accounts(accounts, grouped, max_workers=max_workers)
    report = render_report(reconciled, grouped)
    return ReportResult(
        output_path=None,
        statements=len(reconciled),
        transactions=len(transactions),
        unmatched=len(orphans),
        report=report,
        accounts=tuple(reconciled),
    )


def generate_report(settings: ReportSettings) -> ReportResult:
    """Read both input files, build the report and write it to ``settings.output_path``.

    A missing or unreadable input raises before the output is touched; a write
    failure leaves any previous output file in place.
    """

    ledger_text = read_text(settings.accounts_path)
    log_text = read_text(settings.transactions_path)

    result = build_report(ledger_text, log_text, max_workers=settings.max_workers)
    path = write_text_atomic(settings.output_path, result.report)
    progress("Wrote %d statements to %s", result.statements, path)
    return dataclasses.replace(result, output_path=path)


__all__ = ["ReportResult", "build_report", "generate_report"]
