"""Records and tags for accounts and transactions.

Records are frozen dataclasses: an :class:`Account` is replaced, never
mutated, when its balance is reconciled, and a :class:`Transaction` never
changes after it is parsed from its log line.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from decimal import Decimal
from enum import StrEnum
from typing import NamedTuple, TypeAlias

# ---------------------------------------------------------------------------
# Tags
# ---------------------------------------------------------------------------


class TransactionType(StrEnum):
    """Kind of a transaction, taken from the first (lower-cased) log field."""

    PAYMENT = "payment"
    PURCHASE = "purchase"
    UNKNOWN = "unknown"

    @classmethod
    def from_label(cls, label: str | None) -> TransactionType:
        key = (label or "").strip().lower()
        if key == cls.PAYMENT:
            return cls.PAYMENT
        if key == cls.PURCHASE:
            return cls.PURCHASE
        return cls.UNKNOWN


class PaymentMethod(StrEnum):
    """How a transaction was settled.

    ``PURCHASE`` is the implicit method of every non-payment transaction;
    ``UNKNOWN`` covers payments whose method name is not recognized.
    """

    CASH = "Cash"
    CREDIT = "Credit"
    CHECK = "Check"
    UNKNOWN = "Unknown"
    PURCHASE = "Purchase"


class PaymentDetails(NamedTuple):
    """Result of sub-parsing a payment's method fields.

    ``amount_text`` is the raw amount token the method layout points at. It is
    informational only; the stored transaction amount comes from the record's
    field-count based selection.
    """

    method: PaymentMethod
    number: str = ""
    amount_text: str = ""


PURCHASE_DETAILS = PaymentDetails(PaymentMethod.PURCHASE, "", "")


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Account:
    """One ledger account.

    Attributes
    ----------
    account_number:
        Positive integer key of the account.
    customer_info:
        Customer name/label as it appears between quotes in the ledger.
    starting_balance:
        Balance read from the ledger; never changes.
    balance:
        Current balance. Equal to ``starting_balance`` right after loading;
        recomputed from ``starting_balance`` on every reconciliation.
    """

    account_number: int
    customer_info: str
    starting_balance: Decimal
    balance: Decimal


@dataclass(frozen=True, slots=True)
class Transaction:
    """One parsed transaction log line.

    ``account_number`` is ``None`` when the account field is missing or not an
    integer; such transactions are still grouped (under ``None``) but never
    match a ledger account. ``merchant`` is only meaningful for purchases and
    ``card_or_check_number`` is empty unless the method is credit or check.
    """

    type: TransactionType
    sequence_number: int
    account_number: int | None
    timestamp: str
    merchant: str
    payment_method: PaymentMethod
    card_or_check_number: str
    amount: Decimal


# Collections
Accounts: TypeAlias = Mapping[int, Account]
"""Ledger registry keyed by account number."""

TransactionsByAccount: TypeAlias = Mapping[int | None, Sequence[Transaction]]
"""Transactions partitioned by account number, each group in file order."""


__all__ = [
    "PURCHASE_DETAILS",
    "Account",
    "Accounts",
    "PaymentDetails",
    "PaymentMethod",
    "Transaction",
    "TransactionType",
    "TransactionsByAccount",
]
