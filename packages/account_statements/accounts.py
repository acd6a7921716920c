"""Ledger loading.

A ledger line looks like::

    100 "Jane Doe" 250.00

i.e. an integer account number, a double-quoted customer name and a balance
with at least one fraction digit, separated by whitespace. Lines that do not
have this shape (including integer-only balances, or lines where something
other than whitespace precedes the account number) are dropped silently.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from .amounts import parse_amount
from .logging_setup import get_logger
from .models import Account

_logger = get_logger(__name__)

_LEDGER_LINE_RE = re.compile(r'\s*(\d+)\s+"([^"]*)"\s+(\d+\.\d+)')


def parse_account_line(line: str) -> Account | None:
    """Parse one ledger line, or return ``None`` when it does not match."""

    m = _LEDGER_LINE_RE.match(line)
    if m is None:
        return None
    balance = parse_amount(m.group(3))
    return Account(
        account_number=int(m.group(1)),
        customer_info=m.group(2),
        starting_balance=balance,
        balance=balance,
    )


def build_registry(lines: Iterable[str]) -> dict[int, Account]:
    """Build the account registry from ledger lines.

    A later line with the same account number replaces the earlier one.
    """

    registry: dict[int, Account] = {}
    for idx, line in enumerate(lines):
        account = parse_account_line(line)
        if account is None:
            if line.strip():
                _logger.debug("ledger line %d dropped: %r", idx, line)
            continue
        registry[account.account_number] = account
    return registry


def load_accounts(ledger_text: str) -> dict[int, Account]:
    """Parse the full ledger text into a mapping of account number to :class:`Account`."""

    return build_registry(ledger_text.splitlines())


__all__ = ["build_registry", "load_accounts", "parse_account_line"]
