"""Public interface for the ``account_statements`` package.

This module only re-exports the package's API functions and record types; see
``account_statements.api`` for the pipeline itself.
"""

from .accounts import load_accounts, parse_account_line
from .amounts import format_amount, parse_amount
from .api import ReportResult, build_report, generate_report
from .config import ReportSettings
from .models import (
    Account,
    PaymentDetails,
    PaymentMethod,
    Transaction,
    TransactionType,
)
from .reconcile import reconcile_account, reconcile_accounts
from .statement import StatementTotals, compute_totals, render_report, render_statement
from .transactions import (
    group_by_account,
    load_transactions,
    parse_payment_method,
    parse_transaction_line,
)

__all__ = [
    # API
    "build_report",
    "generate_report",
    "ReportResult",
    "ReportSettings",
    # Parsing / reconciliation
    "parse_amount",
    "format_amount",
    "parse_account_line",
    "load_accounts",
    "parse_transaction_line",
    "parse_payment_method",
    "load_transactions",
    "group_by_account",
    "reconcile_account",
    "reconcile_accounts",
    # Rendering
    "compute_totals",
    "render_statement",
    "render_report",
    "StatementTotals",
    # Models / types
    "Account",
    "Transaction",
    "TransactionType",
    "PaymentMethod",
    "PaymentDetails",
]
