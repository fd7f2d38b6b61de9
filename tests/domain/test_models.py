"""Tests for tally.domain.models, catalog and ledger."""

import dataclasses
from datetime import date
from decimal import Decimal

import pytest

from tally.domain.categories import is_catalog_category, list_categories
from tally.domain.ledger import Ledger
from tally.domain.models import TransactionKind, create_transaction, to_money


class TestCreateTransaction:
    """Tests for create_transaction."""

    def test_uppercases_category(self) -> None:
        """Should store the category upper-cased."""
        txn = create_transaction(TransactionKind.EXPENSE, "12.00", " food ", "Lunch", date(2024, 1, 1))

        assert txn.category == "FOOD"

    def test_float_amount_keeps_decimal_value(self) -> None:
        """Should convert floats via their shortest repr."""
        txn = create_transaction(TransactionKind.EXPENSE, 12.1, "FOOD", "", date(2024, 1, 1))

        assert txn.amount == Decimal("12.1")

    def test_amount_rounded_half_up_to_cents(self) -> None:
        """Should round amounts with more than two decimals half up."""
        assert to_money("0.125") == Decimal("0.13")
        assert to_money("-0.125") == Decimal("-0.13")
        assert to_money(Decimal("1.004")) == Decimal("1.00")
        assert str(to_money(2.675)) == "2.68"

    def test_no_validation(self) -> None:
        """Should accept zero, negative and off-catalog values."""
        txn = create_transaction(TransactionKind.INCOME, -5, "lottery", "", date(2024, 1, 1))

        assert txn.amount == Decimal("-5")
        assert txn.category == "LOTTERY"

    def test_immutable(self) -> None:
        """Should not allow field assignment."""
        txn = create_transaction(TransactionKind.INCOME, 1, "SALARY", "", date(2024, 1, 1))

        with pytest.raises(dataclasses.FrozenInstanceError):
            txn.amount = Decimal("2")  # type: ignore[misc]

    def test_equality_is_field_wise(self) -> None:
        """Should compare equal when all fields match."""
        a = create_transaction(TransactionKind.INCOME, "1.5", "SALARY", "x", date(2024, 1, 1))
        b = create_transaction(TransactionKind.INCOME, "1.50", "salary", "x", date(2024, 1, 1))

        assert a == b


class TestCategoryCatalog:
    """Tests for the category catalog."""

    def test_income_categories(self) -> None:
        """Should list income categories in presentation order."""
        assert list_categories(TransactionKind.INCOME) == ["SALARY", "BUSINESS", "FREELANCING", "INVESTMENT", "OTHER"]

    def test_expense_categories(self) -> None:
        """Should list expense categories in presentation order."""
        assert list_categories(TransactionKind.EXPENSE) == [
            "FOOD",
            "RENT",
            "TRAVEL",
            "UTILITIES",
            "ENTERTAINMENT",
            "HEALTHCARE",
            "OTHER",
        ]

    def test_returned_list_is_a_copy(self) -> None:
        """Should not let callers modify the catalog."""
        categories = list_categories(TransactionKind.INCOME)
        categories.append("MINE")

        assert "MINE" not in list_categories(TransactionKind.INCOME)

    def test_is_catalog_category(self) -> None:
        """Should check membership per kind, ignoring case."""
        assert is_catalog_category(TransactionKind.EXPENSE, "rent")
        assert not is_catalog_category(TransactionKind.INCOME, "RENT")


class TestLedger:
    """Tests for Ledger."""

    def test_append_preserves_order(self) -> None:
        """Should keep insertion order."""
        first = create_transaction(TransactionKind.INCOME, 1, "SALARY", "a", date(2024, 2, 1))
        second = create_transaction(TransactionKind.EXPENSE, 2, "FOOD", "b", date(2024, 1, 1))
        ledger = Ledger()

        ledger.append(first)
        ledger.append(second)

        assert list(ledger) == [first, second]
        assert len(ledger) == 2

    def test_empty_ledger_is_falsy(self) -> None:
        """Should be falsy when empty."""
        assert not Ledger()

    def test_snapshot_is_independent(self) -> None:
        """Should not change a snapshot when appending later."""
        ledger = Ledger()
        snapshot = ledger.snapshot()

        ledger.append(create_transaction(TransactionKind.INCOME, 1, "SALARY", "", date(2024, 1, 1)))

        assert snapshot == ()
        assert len(ledger.snapshot()) == 1
