"""Balance reconciliation.

:func:`reconcile_account` folds an account's transactions, in file order, over
its starting balance: payments add, purchases subtract, anything else leaves
the balance unchanged. It reads only its own account's group and never
mutates its inputs, so accounts can be reconciled independently (and
concurrently, see :func:`reconcile_accounts`).
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal

from .logging_setup import get_logger
from .models import Account, Transaction, TransactionsByAccount, TransactionType

_logger = get_logger(__name__)

_MAX_WORKERS_CAP = 32


def apply_transaction(balance: Decimal, tx: Transaction) -> Decimal:
    """Return ``balance`` adjusted by a single transaction."""

    if tx.type is TransactionType.PAYMENT:
        return balance + tx.amount
    if tx.type is TransactionType.PURCHASE:
        return balance - tx.amount
    return balance


def fold_balance(starting_balance: Decimal, transactions: Iterable[Transaction]) -> Decimal:
    balance = starting_balance
    for tx in transactions:
        balance = apply_transaction(balance, tx)
    return balance


def reconcile_account(account: Account, transactions_by_account: TransactionsByAccount) -> Account:
    """Return a copy of ``account`` whose ``balance`` reflects its transactions.

    The balance is always recomputed from ``starting_balance``; reconciling an
    already reconciled account gives the same result.
    """

    transactions = transactions_by_account.get(account.account_number, ())
    return dataclasses.replace(
        account, balance=fold_balance(account.starting_balance, transactions)
    )


def resolve_max_workers(requested: int | None, n_accounts: int) -> int:
    """Cap the worker count to ``n_accounts`` and to 32, with a minimum of 1."""

    if requested is None or requested < 1:
        return 1
    return max(1, min(requested, n_accounts, _MAX_WORKERS_CAP))


def reconcile_accounts(
    accounts: Mapping[int, Account],
    transactions_by_account: TransactionsByAccount,
    *,
    max_workers: int | None = None,
) -> list[Account]:
    """Reconcile every account, returned in ascending account-number order.

    With more than one worker the accounts are spread over a thread pool;
    the result is identical to the sequential run.
    """

    ordered = [accounts[k] for k in sorted(accounts)]
    workers = resolve_max_workers(max_workers, len(ordered))

    def _one(account: Account) -> Account:
        return reconcile_account(account, transactions_by_account)

    if workers <= 1:
        reconciled = [_one(a) for a in ordered]
    else:
        # Executor.map preserves input order.
        with ThreadPoolExecutor(max_workers=workers) as pool:
            reconciled = list(pool.map(_one, ordered))

    _logger.debug("reconciled %d accounts with %d worker(s)", len(reconciled), workers)
    return reconciled


__all__ = [
    "apply_transaction",
    "fold_balance",
    "reconcile_account",
    "reconcile_accounts",
    "resolve_max_workers",
]
