from __future__ import annotations

import random
from datetime import date, timedelta
from typing import Optional

from srm.domain.models import (
    HERB,
    OTHER,
    PACKAGE_COLORS,
    PACKAGE_SIZES,
    GramsMode,
    PackageMode,
    Product,
    Sale,
)

HERB_NAMES = [
    "Purple Haze", "Green Dream", "Sunset Bliss", "Ocean Breeze",
    "Mountain Mist", "Forest Dew", "Valley Calm", "Desert Rose",
    "Spring Fresh", "Summer Joy", "Autumn Gold", "Winter Frost",
    "Morning Glory", "Evening Peace", "Midnight Magic", "Dawn Delight",
    "Twilight Serenity", "Moonlight Dreams",
]

CATALOG_SIZE = 105
SALES_COUNT = 50
DAYS_BACK = 30


def generate_products(rng: random.Random) -> list[Product]:
    products = []
    for i, name in enumerate(HERB_NAMES):
        products.append(Product(
            id=f"herb-{i + 1}",
            name=name,
            category=HERB,
            price=float(rng.randrange(1000, 5000)),
            price_per_gram=float(rng.randrange(100, 500)),
            stock=rng.randrange(50, 150),
        ))

    for i in range(len(HERB_NAMES), CATALOG_SIZE):
        products.append(Product(
            id=f"product-{i + 1}",
            name=f"Product {i + 1}",
            category=OTHER,
            price=float(rng.randrange(500, 3000)),
            stock=rng.randrange(50, 150),
        ))
    return products


def generate_sales(products: list[Product], rng: random.Random, today: Optional[date] = None) -> list[Sale]:
    today = today or date.today()
    sales = []
    for i in range(SALES_COUNT):
        prod = rng.choice(products)
        qty = rng.randint(1, 10)
        day = today - timedelta(days=rng.randrange(DAYS_BACK))

        if prod.category == HERB and rng.random() < 0.5:
            mode = GramsMode(grams=qty)
            unit_price = prod.price_per_gram
        else:
            mode = PackageMode(color=rng.choice(PACKAGE_COLORS), size=rng.choice(PACKAGE_SIZES))
            unit_price = prod.price

        sales.append(Sale(
            id=f"sale-{i + 1}",
            date=day.isoformat(),
            product_id=prod.id,
            mode=mode,
            quantity=qty,
            unit_price=unit_price,
        ))

    # stable sort keeps generation order within a day
    return sorted(sales, key=lambda s: s.date, reverse=True)


def seed_repository(repo, seed: Optional[int] = None, today: Optional[date] = None) -> tuple[int, int]:
    """Load a demo catalog and sales history. Stock is left as generated."""
    rng = random.Random(seed)
    products = generate_products(rng)
    sales = generate_sales(products, rng, today=today)
    repo.load(products, sales)
    return len(products), len(sales)
