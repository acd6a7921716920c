# ruff: noqa: E501
from __future__ import annotations

import textwrap
from decimal import Decimal
from pathlib import Path

import pytest

from account_statements import ReportSettings, build_report, generate_report
from account_statements.statement import SEPARATOR
from tests.helpers.samples import LEDGER, TRANSACTIONS, write_inputs


def test_bob_scenario_end_to_end():
    result = build_report(
        '200 "Bob" 100.0',
        "purchase\t200\t2024-01-02\tMart\t25.00\npayment\t200\t2024-01-03\tcredit\t1234\t40.00",
    )
    assert "Total purchases: 25.00" in result.report
    assert "Total payments: 40.00" in result.report
    assert "Final balance: 115.00" in result.report
    assert result.accounts[0].balance == Decimal("115.00")


def test_generate_report_from_files(tmp_path: Path):
    accounts_path, transactions_path = write_inputs(tmp_path)
    output = tmp_path / "statements.txt"
    output.write_text("stale\n", encoding="utf-8")

    result = generate_report(
        ReportSettings.from_env(
            accounts_path=accounts_path,
            transactions_path=transactions_path,
            output_path=output,
            max_workers=2,
        )
    )

    assert result.output_path == output
    assert result.statements == 3
    assert result.transactions == 8
    assert result.unmatched == 2

    expected = textwrap.dedent(
        f"""
        Account 100: Jane Doe
        Starting balance: 250.00
          2024-01-04 12:00  Coffee Co  Purchase  4.5
          2024-01-05 08:00  Cash  20.00
          2024-01-06 08:00  Purchase  99.00
          2024-01-07 08:00  Check  5512  30.25
        Total purchases: 4.5
        Total payments: 50.25
        Final balance: 295.75
        {SEPARATOR}
        Account 200: Bob
        Starting balance: 100.00
          2024-01-02 10:00  Mart  Purchase  25.00
          2024-01-03 09:30  Credit  1234  40.00
        Total purchases: 25.00
        Total payments: 40.00
        Final balance: 115.00
        {SEPARATOR}
        Account 400: Quiet Account
        Starting balance: 10.5
        Total purchases: 0.00
        Total payments: 0.00
        Final balance: 10.5
        {SEPARATOR}
        """
    ).lstrip("\n")
    assert output.read_text(encoding="utf-8") == expected


def test_unknown_type_matches_omitting_it():
    without_refund = "\n".join(line for line in TRANSACTIONS.splitlines() if not line.startswith("refund"))
    a = build_report(LEDGER, TRANSACTIONS)
    b = build_report(LEDGER, without_refund)
    assert [x.balance for x in a.accounts] == [x.balance for x in b.accounts]


def test_missing_input_is_fatal_and_output_untouched(tmp_path: Path):
    _, transactions_path = write_inputs(tmp_path)
    output = tmp_path / "statements.txt"
    settings = ReportSettings.from_env(
        accounts_path=tmp_path / "missing.txt",
        transactions_path=transactions_path,
        output_path=output,
    )
    with pytest.raises(FileNotFoundError):
        generate_report(settings)
    assert not output.exists()
