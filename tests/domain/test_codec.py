"""Tests for tally.domain.codec encode/decode."""

from datetime import date
from decimal import Decimal

import pytest

from tally.domain.codec import decode_transaction, encode_transaction, is_data_line
from tally.domain.errors import (
    InvalidAmountError,
    InvalidDateError,
    MalformedRecordError,
    RecordError,
    UnknownKindError,
)
from tally.domain.models import CategoryName, Description, Money, Transaction, TransactionKind, create_transaction


class TestEncodeTransaction:
    """Tests for encode_transaction."""

    def test_encodes_all_fields(self) -> None:
        """Should write KIND,AMOUNT,CATEGORY,DESCRIPTION,DATE."""
        txn = create_transaction(TransactionKind.INCOME, "5000", "SALARY", "Monthly salary", date(2024, 1, 15))

        assert encode_transaction(txn) == "INCOME,5000.00,SALARY,Monthly salary,2024-01-15"

    def test_amount_has_two_decimals(self) -> None:
        """Should pad and round the amount to two decimal places."""
        txn = create_transaction(TransactionKind.EXPENSE, "1200.5", "RENT", "Rent", date(2024, 1, 1))

        assert encode_transaction(txn).split(",")[1] == "1200.50"

    def test_half_cent_rounds_up(self) -> None:
        """Should round a half cent up, matching the stored amount."""
        txn = create_transaction(TransactionKind.EXPENSE, "0.125", "FOOD", "x", date(2024, 1, 1))

        assert encode_transaction(txn) == "EXPENSE,0.13,FOOD,x,2024-01-01"
        assert txn.amount == Decimal("0.13")

    def test_unrounded_amount_rounds_half_up(self) -> None:
        """Should round half up even for a Transaction built directly."""
        txn = Transaction(
            TransactionKind.INCOME, Money(Decimal("2.675")), CategoryName("SALARY"), Description(""), date(2024, 1, 1)
        )

        assert encode_transaction(txn) == "INCOME,2.68,SALARY,,2024-01-01"

    def test_empty_description(self) -> None:
        """Should leave an empty field for an empty description."""
        txn = create_transaction(TransactionKind.EXPENSE, 3, "FOOD", "", date(2024, 2, 1))

        assert encode_transaction(txn) == "EXPENSE,3.00,FOOD,,2024-02-01"

    def test_description_is_not_escaped(self) -> None:
        """Should write commas in descriptions verbatim."""
        txn = create_transaction(TransactionKind.EXPENSE, 10, "FOOD", "Milk, eggs", date(2024, 2, 1))

        assert encode_transaction(txn) == "EXPENSE,10.00,FOOD,Milk, eggs,2024-02-01"


class TestDecodeTransaction:
    """Tests for decode_transaction."""

    def test_decodes_valid_line(self) -> None:
        """Should decode every field."""
        txn = decode_transaction("EXPENSE,1200.50,RENT,January rent,2024-01-01")

        assert txn.kind is TransactionKind.EXPENSE
        assert txn.amount == Decimal("1200.50")
        assert txn.category == "RENT"
        assert txn.description == "January rent"
        assert txn.date == date(2024, 1, 1)

    def test_strips_whitespace_and_uppercases(self) -> None:
        """Should trim fields and upper-case kind and category."""
        txn = decode_transaction("  income , 12.5 , salary ,  Bonus  , 2024-03-31 ")

        assert txn.kind is TransactionKind.INCOME
        assert txn.amount == Decimal("12.5")
        assert txn.category == "SALARY"
        assert txn.description == "Bonus"
        assert txn.date == date(2024, 3, 31)

    def test_category_not_checked_against_catalog(self) -> None:
        """Should accept categories outside the catalog."""
        txn = decode_transaction("EXPENSE,9.99,gadgets,Cable,2024-05-05")

        assert txn.category == "GADGETS"

    def test_negative_amount_accepted(self) -> None:
        """Should accept negative amounts without validation."""
        txn = decode_transaction("EXPENSE,-4.00,FOOD,Refund,2024-05-05")

        assert txn.amount == Decimal("-4.00")

    def test_extra_decimals_rounded_to_cents(self) -> None:
        """Should hold the amount as it will be written back."""
        txn = decode_transaction("EXPENSE,0.125,FOOD,x,2024-01-01")

        assert txn.amount == Decimal("0.13")
        assert str(txn.amount) == "0.13"

    def test_too_few_fields(self) -> None:
        """Should raise MalformedRecordError with fewer than five fields."""
        with pytest.raises(MalformedRecordError) as exc_info:
            decode_transaction("INCOME,5000.00,SALARY,2024-01-15")

        assert exc_info.value.line == "INCOME,5000.00,SALARY,2024-01-15"
        assert "INCOME,5000.00,SALARY,2024-01-15" in str(exc_info.value)

    def test_unknown_kind(self) -> None:
        """Should raise UnknownKindError for kinds outside the enumeration."""
        with pytest.raises(UnknownKindError):
            decode_transaction("TRANSFER,10.00,OTHER,Move,2024-01-15")

    def test_invalid_amount(self) -> None:
        """Should raise InvalidAmountError for non-numeric amounts."""
        with pytest.raises(InvalidAmountError):
            decode_transaction("INCOME,lots,SALARY,Pay,2024-01-15")

    def test_non_finite_amount(self) -> None:
        """Should reject NaN and infinity."""
        with pytest.raises(InvalidAmountError):
            decode_transaction("INCOME,NaN,SALARY,Pay,2024-01-15")
        with pytest.raises(InvalidAmountError):
            decode_transaction("INCOME,Infinity,SALARY,Pay,2024-01-15")

    def test_invalid_date(self) -> None:
        """Should raise InvalidDateError for impossible dates."""
        with pytest.raises(InvalidDateError):
            decode_transaction("INCOME,1.00,SALARY,Pay,2024-02-30")

    def test_date_must_be_zero_padded(self) -> None:
        """Should only accept the strict YYYY-MM-DD form."""
        with pytest.raises(InvalidDateError):
            decode_transaction("INCOME,1.00,SALARY,Pay,2024-1-5")
        with pytest.raises(InvalidDateError):
            decode_transaction("INCOME,1.00,SALARY,Pay,20240105")

    def test_comma_in_description_breaks_date(self) -> None:
        """Should fail on the date when the description contained a comma."""
        with pytest.raises(InvalidDateError):
            decode_transaction("EXPENSE,10.00,FOOD,Milk, eggs,2024-02-01")

    def test_errors_are_value_errors(self) -> None:
        """Should be catchable as ValueError and RecordError."""
        with pytest.raises(ValueError):
            decode_transaction("garbage")
        with pytest.raises(RecordError):
            decode_transaction("garbage")


class TestRoundTrip:
    """Tests for decode(encode(t)) == t."""

    def test_round_trip_preserves_fields(self) -> None:
        """Should reproduce an equal transaction."""
        txn = create_transaction(TransactionKind.EXPENSE, "19.99", "entertainment", "Cinema", date(2023, 12, 31))

        assert decode_transaction(encode_transaction(txn)) == txn

    def test_round_trip_compares_amount_to_two_decimals(self) -> None:
        """Should treat 1200.5 and 1200.50 as the same amount."""
        txn = create_transaction(TransactionKind.EXPENSE, "1200.5", "RENT", "Rent", date(2024, 1, 1))

        assert decode_transaction(encode_transaction(txn)) == txn


class TestIsDataLine:
    """Tests for is_data_line."""

    def test_blank_lines(self) -> None:
        """Should skip empty and whitespace-only lines."""
        assert not is_data_line("")
        assert not is_data_line("   \n")

    def test_comment_lines(self) -> None:
        """Should skip lines starting with # after whitespace."""
        assert not is_data_line("# header")
        assert not is_data_line("   # indented comment")

    def test_record_line(self) -> None:
        """Should keep record lines."""
        assert is_data_line("INCOME,5000.00,SALARY,Monthly salary,2024-01-15\n")
