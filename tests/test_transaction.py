import pytest

from desikata.core.transaction import Transaction, is_positive_amount


def test_from_record_maps_fields():
    txn = Transaction.from_record(
        {"id": "T9", "type": "Debit", "amount": 250, "to": "Ola",
         "category": "cab", "date": "2025-02-01"}
    )
    assert txn.id == "T9"
    assert txn.direction == "debit"
    assert txn.amount == 250
    assert txn.counterparty == "Ola"
    assert txn.category == "cab"
    assert txn.date == "2025-02-01"


@pytest.mark.parametrize("amount", [0, -50, "500", None, True, float("nan"), float("inf")])
def test_rejects_bad_amounts(amount):
    assert not is_positive_amount(amount)
    with pytest.raises(ValueError):
        Transaction.from_record({"type": "credit", "amount": amount})


@pytest.mark.parametrize("kind", ["refund", "", None, 5])
def test_rejects_bad_type(kind):
    with pytest.raises(ValueError):
        Transaction.from_record({"type": kind, "amount": 100})


def test_rejects_non_mapping():
    with pytest.raises(TypeError):
        Transaction.from_record(["credit", 100])


def test_is_frozen():
    txn = Transaction.from_record({"type": "credit", "amount": 1})
    with pytest.raises(AttributeError):
        txn.amount = 2


@pytest.mark.parametrize("field_name", ["to", "category"])
@pytest.mark.parametrize("value", [["Rahul"], {"k": 1}, ("ok", ["nested"])])
def test_rejects_unhashable_grouping_keys(field_name, value):
    record = {"type": "debit", "amount": 150, "to": "Rahul", "category": "food"}
    record[field_name] = value
    with pytest.raises(ValueError):
        Transaction.from_record(record)


def test_fraction_amount_is_valid():
    from fractions import Fraction

    assert is_positive_amount(Fraction(1, 3))


def test_decimal_amount_is_rejected():
    from decimal import Decimal

    assert not is_positive_amount(Decimal("500"))
