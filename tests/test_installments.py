# ARREMATO/backend/tests/test_installments.py : découpage en parcelles, sans base de données

import pytest
from datetime import date
from arremato.errors import ValidationFailed
from arremato.services.installments import add_months, split_amount, expand_installments


def test_add_months_crosses_year():
    assert add_months(date(2024, 11, 10), 3) == date(2025, 2, 10)


def test_add_months_clamps_day():
    assert add_months(date(2023, 1, 31), 1) == date(2023, 2, 28)
    assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
    assert add_months(date(2024, 3, 31), 1) == date(2024, 4, 30)


def test_add_zero_months():
    assert add_months(date(2024, 5, 17), 0) == date(2024, 5, 17)


def test_split_amount_literal():
    values = split_amount(1000, 3)
    assert values == [1000 / 3] * 3


def test_split_amount_last_absorbs_remainder():
    assert split_amount(1000, 3, "last") == [333.33, 333.33, 333.34]
    assert split_amount(1200, 12, "last") == [100.0] * 12


def test_split_amount_last_never_goes_negative():
    values = split_amount(1, 60, "last")
    assert len(values) == 60
    assert values[:-1] == [0.01] * 59
    assert values[-1] == 0.41
    assert min(values) > 0
    assert round(sum(values), 2) == 1


def test_split_amount_last_rejects_amount_below_one_cent_each():
    with pytest.raises(ValidationFailed):
        split_amount(0.5, 60, "last")


def test_split_amount_unknown_policy():
    with pytest.raises(ValidationFailed):
        split_amount(100, 2, "first")


def test_expand_installments_shape():
    records = expand_installments(
        1200, 12, date(2024, 1, 15),
        user_id=7, property_id=3, type="expense", category="Reforma", description="Cozinha"
    )
    assert len(records) == 12
    first, last = records[0], records[-1]
    assert first["current_installment"] == 1
    assert first["date"] == date(2024, 1, 15)
    assert last["current_installment"] == 12
    assert last["date"] == date(2024, 12, 15)
    for record in records:
        assert record["amount"] == 100
        assert record["installment_value"] == 100
        assert record["status"] == "pending"
        assert record["payment_method"] == "installment"
        assert record["total_installments"] == 12
        assert record["user_id"] == 7
        assert record["property_id"] == 3
        assert "parent_id" not in record


@pytest.mark.parametrize("total", [0, -1, 2.5, True])
def test_expand_installments_rejects_bad_count(total):
    with pytest.raises(ValidationFailed):
        expand_installments(100, total, date(2024, 1, 1), user_id=1)


def test_expand_installments_rejects_non_positive_amount():
    with pytest.raises(ValidationFailed):
        expand_installments(0, 3, date(2024, 1, 1), user_id=1)
