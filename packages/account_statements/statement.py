"""Statement rendering.

Totals shown on a statement are computed here from the same transaction group
the reconciler folds, independently of the reconciled balance; both must
agree (``starting + payments - purchases``).
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from decimal import Decimal
from typing import NamedTuple

from .amounts import ZERO, format_amount
from .models import Account, Transaction, TransactionsByAccount, TransactionType

SEPARATOR = "-" * 40


class StatementTotals(NamedTuple):
    total_purchases: Decimal
    total_payments: Decimal
    final_balance: Decimal


def compute_totals(starting_balance: Decimal, transactions: Iterable[Transaction]) -> StatementTotals:
    """Sum purchases and payments and derive the final balance.

    Transactions that are neither payments nor purchases count toward
    neither subtotal.
    """

    purchases = ZERO
    payments = ZERO
    for tx in transactions:
        if tx.type is TransactionType.PURCHASE:
            purchases += tx.amount
        elif tx.type is TransactionType.PAYMENT:
            payments += tx.amount
    return StatementTotals(purchases, payments, starting_balance + payments - purchases)


def render_transaction_line(tx: Transaction) -> str:
    parts = [tx.timestamp]
    if tx.type is TransactionType.PURCHASE:
        parts.append(tx.merchant)
    parts.append(str(tx.payment_method))
    if tx.card_or_check_number:
        parts.append(tx.card_or_check_number)
    parts.append(format_amount(tx.amount))
    return "  " + "  ".join(parts)


def render_statement(account: Account, transactions: Sequence[Transaction]) -> str:
    """Render one account's statement block (newline-terminated).

    ``transactions`` are listed in file order regardless of the order given.
    """

    ordered = sorted(transactions, key=lambda t: t.sequence_number)
    totals = compute_totals(account.starting_balance, ordered)

    lines = [
        f"Account {account.account_number}: {account.customer_info}",
        f"Starting balance: {format_amount(account.starting_balance)}",
    ]
    lines.extend(render_transaction_line(tx) for tx in ordered)
    lines.extend(
        [
            f"Total purchases: {format_amount(totals.total_purchases)}",
            f"Total payments: {format_amount(totals.total_payments)}",
            f"Final balance: {format_amount(totals.final_balance)}",
            SEPARATOR,
        ]
    )
    return "\n".join(lines) + "\n"


def render_report(accounts: Iterable[Account], transactions_by_account: TransactionsByAccount) -> str:
    """Concatenate the statements of ``accounts`` in ascending account-number order."""

    blocks = [
        render_statement(account, transactions_by_account.get(account.account_number, ()))
        for account in sorted(accounts, key=lambda a: a.account_number)
    ]
    return "".join(blocks)


__all__ = [
    "SEPARATOR",
    "StatementTotals",
    "compute_totals",
    "render_report",
    "render_statement",
    "render_transaction_line",
]
