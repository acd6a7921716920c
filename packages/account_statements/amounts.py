"""Amount parsing and display helpers.

Amounts are carried as :class:`~decimal.Decimal` so that balances and
statement subtotals agree exactly, whatever order they are summed in.

Parsing is lenient: a token that is not a plain (optionally negative) decimal
number degrades to ``0.00`` instead of raising, so one damaged transaction line
never aborts a statement run.

Display goes through the shortest float rendering of the value (``40`` ->
``40.0``, ``25.000`` -> ``25.0``, ``3.10`` -> ``3.1``) and only widens a lone
trailing ``.0`` to ``.00``. Other short fractions (``3.1``) pass through as-is.
"""

from __future__ import annotations

import re
from decimal import Decimal

ZERO: Decimal = Decimal("0.00")

_AMOUNT_RE = re.compile(r"-?\d+(?:\.\d+)?")


def parse_amount(token: str | None) -> Decimal:
    """Parse ``token`` into a :class:`Decimal`, returning ``0.00`` when malformed.

    The token is trimmed first. Accepted shapes are ``123``, ``-123``,
    ``123.45`` and ``-123.45``; anything else (empty, ``abc``, ``$1``, ``1,000``,
    ``.5``) yields :data:`ZERO`.
    """

    if token is None:
        return ZERO
    s = token.strip()
    if not _AMOUNT_RE.fullmatch(s):
        return ZERO
    return Decimal(s)


def _float_text(amount: Decimal | int | float) -> str:
    s = repr(float(amount))
    if "e" in s or "E" in s:
        # repr switches to exponent form for very large/small magnitudes.
        s = f"{Decimal(s):f}"
        if "." not in s:
            s += ".0"
    return s


def format_amount(amount: Decimal | int | float) -> str:
    """Render ``amount`` for display.

    Integer-valued amounts always show ``.00``; a value rendered with a single
    ``.0`` fraction is widened, everything else is shown as the float repr.
    """

    s = _float_text(amount)
    if s.endswith(".0"):
        return s + "0"
    return s


__all__ = ["ZERO", "format_amount", "parse_amount"]
