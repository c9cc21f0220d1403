"""
Tests for the balance engine.

The engine is pure, so these tests use plain dicts instead
of database rows.
"""

from decimal import Decimal

from account_statement.services.balance import compute_balances


def make_entry(entry_id, date, particulars, credit=0, debit=0, **extra):
    return {
        "id": entry_id,
        "date": date,
        "particulars": particulars,
        "credit": credit,
        "debit": debit,
        **extra,
    }


ALICE = make_entry(1, "2024-01-01", "Alice", credit=100)
BOB = make_entry(2, "2024-01-02", "Bob", debit=40)


class TestComputeBalances:

    def test_empty_input_gives_empty_output(self):
        assert compute_balances([]) == []

    def test_alice_then_bob(self):
        lines = compute_balances([ALICE, BOB])
        assert [line.balance for line in lines] == [Decimal("100"), Decimal("60")]

    def test_balance_is_not_historically_fixed(self):
        # Removing the first entry re-bases everything after it
        lines = compute_balances([BOB])
        assert len(lines) == 1
        assert lines[0].particulars == "Bob"
        assert lines[0].balance == Decimal("-40")

    def test_balance_is_prefix_sum_of_credit_minus_debit(self):
        entries = [
            make_entry(1, "2024-01-01", "A", credit="10.25"),
            make_entry(2, "2024-01-01", "B", debit="3.10"),
            make_entry(3, "2024-01-03", "C", credit=5, debit=2),
            make_entry(4, "2024-01-04", "D", debit="0.15"),
        ]
        lines = compute_balances(entries)

        running = Decimal("0")
        for entry, line in zip(entries, lines):
            running += Decimal(str(entry["credit"])) - Decimal(str(entry["debit"]))
            assert line.balance == running

    def test_decimal_arithmetic_has_no_float_drift(self):
        entries = [
            make_entry(i, "2024-01-01", f"E{i}", credit="0.10") for i in range(1, 11)
        ]
        lines = compute_balances(entries)
        assert lines[-1].balance == Decimal("1.00")

    def test_missing_amounts_count_as_zero(self):
        entries = [
            {"id": 1, "date": "2024-01-01", "particulars": "No amounts"},
            {"id": 2, "date": "2024-01-02", "particulars": "Nulls",
             "credit": None, "debit": None},
            make_entry(3, "2024-01-03", "Real", credit=7),
        ]
        lines = compute_balances(entries)
        assert [line.balance for line in lines] == [0, 0, Decimal("7")]

    def test_country_amounts_do_not_affect_balance(self):
        entry = make_entry(
            1, "2024-01-01", "Abroad",
            credit=50, debit_country=999, credit_country=888,
        )
        lines = compute_balances([entry])
        assert lines[0].balance == Decimal("50")
        assert lines[0].debit_country == Decimal("999")

    def test_does_not_reorder(self):
        # Out-of-order input is folded as given
        entries = [
            make_entry(1, "2024-02-01", "Later", credit=10),
            make_entry(2, "2024-01-01", "Earlier", debit=4),
        ]
        lines = compute_balances(entries)
        assert [line.id for line in lines] == [1, 2]
        assert [line.balance for line in lines] == [Decimal("10"), Decimal("6")]

    def test_is_idempotent(self):
        first = compute_balances([ALICE, BOB])
        second = compute_balances(first)
        assert first == second

    def test_input_is_not_mutated(self):
        entries = [dict(ALICE), dict(BOB)]
        compute_balances(entries)
        assert entries == [ALICE, BOB]
        assert "balance" not in entries[0]