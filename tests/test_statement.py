# ruff: noqa: E501
import textwrap
from decimal import Decimal

from account_statements import (
    Account,
    compute_totals,
    group_by_account,
    load_transactions,
    render_report,
    render_statement,
)
from account_statements.statement import SEPARATOR


def _dedent(s: str) -> str:
    return textwrap.dedent(s).lstrip("\n")


def test_render_statement_layout():
    account = Account(200, "Bob", Decimal("100.0"), Decimal("115.00"))
    txs = load_transactions(
        "purchase\t200\t2024-01-02\tMart\t25.00\n"
        "payment\t200\t2024-01-03\tcredit\t1234\t40.00\n"
        "payment\t200\t2024-01-04\tcash\t0.0\n"
    )

    expected = _dedent(
        f"""
        Account 200: Bob
        Starting balance: 100.00
          2024-01-02  Mart  Purchase  25.00
          2024-01-03  Credit  1234  40.00
          2024-01-04  Cash  0.00
        Total purchases: 25.00
        Total payments: 40.00
        Final balance: 115.00
        {SEPARATOR}
        """
    )
    assert render_statement(account, txs) == expected


def test_render_statement_lists_transactions_in_file_order():
    account = Account(1, "A", Decimal("1.00"), Decimal("1.00"))
    txs = load_transactions("purchase\t1\tt0\tFirst\t1.00\npurchase\t1\tt1\tSecond\t1.00")
    text = render_statement(account, list(reversed(txs)))
    assert text.index("First") < text.index("Second")


def test_compute_totals_ignores_unknown_types():
    txs = load_transactions(
        "purchase\t1\tts\tA\t2.50\npayment\t1\tts\tcash\t1.25\nrefund\t1\tts\tA\t100.00"
    )
    totals = compute_totals(Decimal("10.00"), txs)
    assert totals.total_purchases == Decimal("2.50")
    assert totals.total_payments == Decimal("1.25")
    assert totals.final_balance == Decimal("8.75")


def test_render_report_sorts_accounts_and_includes_empty_ones():
    accounts = [
        Account(2, "Two", Decimal("2.00"), Decimal("2.00")),
        Account(1, "One", Decimal("1.00"), Decimal("1.00")),
    ]
    grouped = group_by_account(load_transactions("purchase\t1\tts\tA\t0.50"))
    report = render_report(accounts, grouped)
    assert report.index("Account 1: One") < report.index("Account 2: Two")
    assert report.count(SEPARATOR) == 2
    assert "Total purchases: 0.00" in report


def test_integer_amount_renders_like_its_total():
    account = Account(1, "A", Decimal("50.00"), Decimal("10.00"))
    txs = load_transactions("purchase\t1\tts\tShop\t40")
    text = render_statement(account, txs)
    assert "  ts  Shop  Purchase  40.00\n" in text
    assert "Total purchases: 40.00" in text
    assert "Final balance: 10.00" in text
