"""Transaction log parsing and grouping.

Each log line is tab-delimited and variably shaped::

    purchase  <acct>  <timestamp>  <merchant>                 <amount>
    payment   <acct>  <timestamp>  cash                       <amount>
    payment   <acct>  <timestamp>  credit|check  <card/check> <amount>

Parsing is field-by-field and tolerant: missing fields become empty strings,
an unparsable account number becomes ``None`` and an unparsable amount becomes
``0.00``. Nothing in this module raises on malformed input.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Mapping, Sequence

from .amounts import parse_amount
from .logging_setup import get_logger
from .models import (
    PURCHASE_DETAILS,
    Account,
    PaymentDetails,
    PaymentMethod,
    Transaction,
    TransactionsByAccount,
    TransactionType,
)

_logger = get_logger(__name__)

_ACCOUNT_NUMBER_RE = re.compile(r"\d+")


# ---------------------------------------------------------------------------
# Field helpers
# ---------------------------------------------------------------------------


def _field(fields: Sequence[str], pos: int, default: str = "") -> str:
    return fields[pos] if len(fields) > pos else default


def _split_fields(line: str) -> list[str]:
    fields = line.rstrip("\r\n").split("\t")
    # A trailing tab must not change the field count used for amount selection.
    while len(fields) > 1 and fields[-1] == "":
        fields.pop()
    return fields


def _parse_account_number(raw: str) -> int | None:
    s = raw.strip()
    if not _ACCOUNT_NUMBER_RE.fullmatch(s):
        return None
    return int(s)


def _strip_quotes(raw: str) -> str:
    return raw.replace('"', "").strip()


def _select_amount_field(fields: Sequence[str]) -> str:
    if len(fields) >= 6:
        return fields[5]
    if len(fields) >= 5:
        return fields[4]
    return ""


# ---------------------------------------------------------------------------
# Parsers
# ---------------------------------------------------------------------------


def parse_payment_method(fields: Sequence[str]) -> PaymentDetails:
    """Sub-parse the method fields of a payment record.

    ``fields`` is the full field list of the line; the method name is field 3.

    - ``cash``: no number, regardless of any further fields.
    - ``credit`` / ``check``: number from field 4 (``""`` when absent) and the
      amount token from field 5 (``"0"`` when absent).
    - anything else: ``Unknown`` with amount token ``"0"``.
    """

    name = _field(fields, 3).strip().lower()
    if name == "cash":
        return PaymentDetails(PaymentMethod.CASH, "", "")
    if name in ("credit", "check"):
        method = PaymentMethod.CREDIT if name == "credit" else PaymentMethod.CHECK
        return PaymentDetails(method, _field(fields, 4), _field(fields, 5, "0"))
    return PaymentDetails(PaymentMethod.UNKNOWN, "", "0")


def parse_transaction_line(line: str, sequence_number: int) -> Transaction:
    """Parse one tab-delimited log line into a :class:`Transaction`.

    ``sequence_number`` is the zero-based line position in the log and is kept
    as the ordering key of the transaction.

    The stored amount is chosen by field count (field 5 when there are at
    least six fields, else field 4 when there are five, else nothing), which
    covers both the six-field credit/check payments and the five-field
    purchase and cash payment layouts.
    """

    fields = _split_fields(line)

    tx_type = TransactionType.from_label(_field(fields, 0))
    if tx_type is TransactionType.UNKNOWN:
        _logger.debug("line %d: unknown transaction type %r", sequence_number, _field(fields, 0))

    account_number = _parse_account_number(_field(fields, 1))
    if account_number is None:
        _logger.debug("line %d: unparsable account number %r", sequence_number, _field(fields, 1))

    if tx_type is TransactionType.PAYMENT:
        details = parse_payment_method(fields)
        if details.method is PaymentMethod.UNKNOWN:
            _logger.debug("line %d: unknown payment method %r", sequence_number, _field(fields, 3))
    else:
        details = PURCHASE_DETAILS

    return Transaction(
        type=tx_type,
        sequence_number=sequence_number,
        account_number=account_number,
        timestamp=_field(fields, 2),
        merchant=_strip_quotes(_field(fields, 3)),
        payment_method=details.method,
        card_or_check_number=details.number,
        amount=parse_amount(_select_amount_field(fields)),
    )


def iter_transactions(log_text: str) -> Iterator[Transaction]:
    """Yield a :class:`Transaction` per non-blank line of ``log_text``.

    Sequence numbers are physical line indexes, so a skipped blank line still
    consumes its index.
    """

    for idx, line in enumerate(log_text.splitlines()):
        if not line.strip():
            _logger.debug("line %d: blank, skipped", idx)
            continue
        yield parse_transaction_line(line, idx)


def load_transactions(log_text: str) -> list[Transaction]:
    """Parse the whole transaction log, in file order."""

    return list(iter_transactions(log_text))


# ---------------------------------------------------------------------------
# Grouping
# ---------------------------------------------------------------------------


def group_by_account(
    transactions: Iterable[Transaction],
) -> dict[int | None, tuple[Transaction, ...]]:
    """Partition ``transactions`` by account number.

    Each group keeps the input order (stable append) and then is sorted by
    ``sequence_number`` so groups are always in file order, even when the
    input was not. Every input transaction lands in exactly one group.
    """

    groups: dict[int | None, list[Transaction]] = {}
    for tx in transactions:
        groups.setdefault(tx.account_number, []).append(tx)
    return {
        key: tuple(sorted(items, key=lambda t: t.sequence_number))
        for key, items in groups.items()
    }


def unmatched_transactions(
    grouped: TransactionsByAccount, accounts: Mapping[int, Account]
) -> list[Transaction]:
    """Return transactions whose account key matches no ledger account, in file order."""

    orphans = [
        tx for key, items in grouped.items() if key is None or key not in accounts for tx in items
    ]
    return sorted(orphans, key=lambda t: t.sequence_number)


__all__ = [
    "group_by_account",
    "iter_transactions",
    "load_transactions",
    "parse_payment_method",
    "parse_transaction_line",
    "unmatched_transactions",
]
