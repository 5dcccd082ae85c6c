import random
from datetime import date, timedelta

from srm.application.container import build_container
from srm.services.mock_data import HERB_NAMES, generate_products, generate_sales


def test_catalog_has_18_herbs_and_105_products():
    products = generate_products(random.Random(1))

    herbs = [p for p in products if p.category == "herb"]
    assert len(products) == 105
    assert len(herbs) == len(HERB_NAMES) == 18
    assert all(p.price_per_gram is not None for p in herbs)
    assert all(p.price_per_gram is None for p in products if p.category == "other")
    assert len({p.id for p in products}) == 105


def test_sales_are_plausible_and_sorted_newest_first():
    rng = random.Random(7)
    products = generate_products(rng)
    by_id = {p.id: p for p in products}
    today = date(2024, 6, 30)

    sales = generate_sales(products, rng, today=today)

    assert len(sales) == 50
    assert [s.date for s in sales] == sorted((s.date for s in sales), reverse=True)
    oldest = (today - timedelta(days=29)).isoformat()
    for s in sales:
        prod = by_id[s.product_id]
        assert oldest <= s.date <= today.isoformat()
        assert 1 <= s.quantity <= 10
        if s.sale_type == "grams":
            assert prod.category == "herb"
            assert s.unit_price == prod.price_per_gram
        else:
            assert s.unit_price == prod.price


def test_same_seed_gives_same_demo_data():
    a = build_container(seed=42, today=date(2024, 1, 31))
    b = build_container(seed=42, today=date(2024, 1, 31))

    assert a.ledger.list_sales() == b.ledger.list_sales()
    assert a.ledger.total_revenue() == b.ledger.total_revenue()


def test_container_without_demo_is_empty():
    c = build_container(seed_demo=False)

    assert c.ledger.list_sales() == []
    assert c.ledger.list_products() == []
    assert c.reports.to_csv(c.ledger.list_sales_with_product()).count("\n") == 0
