import pytest

from srm.domain.errors import ValidationError
from srm.domain.models import GramsMode, PackageMode, Product, Sale, SaleInput


def test_package_sale_has_no_grams():
    s = Sale("s1", "2024-01-01", "p", PackageMode("green", "large"), 3, 100.0)

    assert s.sale_type == "package"
    assert s.package_color == "green"
    assert s.package_size == "large"
    assert s.grams is None


def test_grams_sale_has_no_package_fields():
    s = Sale("s1", "2024-01-01", "p", GramsMode(grams=7), 7, 100.0)

    assert s.sale_type == "grams"
    assert s.grams == 7
    assert s.package_color is None
    assert s.package_size is None
    assert s.total_amount == 700.0


def test_grams_sale_quantity_must_match_grams():
    with pytest.raises(ValidationError, match="Quantity must equal grams"):
        Sale("s1", "2024-01-01", "p", GramsMode(grams=7), 3, 100.0)


def test_sale_input_normalizes_grams_quantity():
    data = SaleInput("2024-01-01", "p", GramsMode(grams=12.5), 1)

    assert data.quantity == 12.5


def test_invalid_package_values_are_rejected():
    with pytest.raises(ValidationError, match="package color"):
        PackageMode("blue", "large")
    with pytest.raises(ValidationError, match="package size"):
        PackageMode("red", "medium")
    with pytest.raises(ValidationError, match="Grams must be >= 1"):
        GramsMode(grams=0)


def test_sale_input_requires_a_mode_variant():
    with pytest.raises(ValidationError, match="Sale mode"):
        SaleInput("2024-01-01", "p", mode={"color": "red", "grams": 3}, quantity=3)


def test_sale_input_rejects_bad_dates():
    with pytest.raises(ValidationError, match="Invalid date"):
        SaleInput("01/02/2024", "p", PackageMode("red", "small"), 1)


def test_price_per_gram_only_for_herbs():
    Product("h", "Herb", "herb", 1000.0, price_per_gram=100.0)

    with pytest.raises(ValidationError, match="only allowed for herb"):
        Product("o", "Other", "other", 1000.0, price_per_gram=100.0)
    with pytest.raises(ValidationError, match="Unknown product category"):
        Product("x", "X", "tool", 10.0)


def test_datetime_input_keeps_only_the_calendar_day():
    from datetime import date, datetime

    morning = SaleInput(datetime(2024, 1, 2, 10, 30), "p", PackageMode("red", "small"), 1)
    plain = SaleInput(date(2024, 1, 2), "p", PackageMode("red", "small"), 1)

    assert morning.date == "2024-01-02"
    assert morning.date == plain.date
