from __future__ import annotations

from typing import Iterable, Optional

from srm.domain.models import Product, Sale


class InMemoryRepository:
    """Product catalog and sales list held in process memory.

    Sales are kept newest-first: new records go to the front and edits keep
    their position.
    """

    def __init__(self, products: Iterable[Product] = (), sales: Iterable[Sale] = ()):
        self._products: dict[str, Product] = {}
        self._sales: list[Sale] = []
        self.load(products, sales)

    def load(self, products: Iterable[Product], sales: Iterable[Sale]) -> None:
        self._products = {p.id: p for p in products}
        self._sales = list(sales)

    # ---------- products ----------
    def list_products(self) -> list[Product]:
        return list(self._products.values())

    def get_product_by_id(self, product_id: str) -> Optional[Product]:
        return self._products.get(product_id)

    def save_product(self, product: Product) -> None:
        self._products[product.id] = product

    # ---------- sales ----------
    def list_sales(self) -> list[Sale]:
        return list(self._sales)

    def get_sale(self, sale_id: str) -> Optional[Sale]:
        for s in self._sales:
            if s.id == sale_id:
                return s
        return None

    def has_sale_id(self, sale_id: str) -> bool:
        return self.get_sale(sale_id) is not None

    def insert_sale_first(self, sale: Sale) -> None:
        self._sales.insert(0, sale)

    def replace_sale(self, sale: Sale) -> bool:
        for i, s in enumerate(self._sales):
            if s.id == sale.id:
                self._sales[i] = sale
                return True
        return False

    def delete_sale(self, sale_id: str) -> Optional[Sale]:
        removed = self.get_sale(sale_id)
        if removed is not None:
            self._sales = [s for s in self._sales if s.id != sale_id]
        return removed

    # ---------- transactions ----------
    def snapshot(self) -> tuple[dict[str, Product], list[Sale]]:
        # records are frozen, shallow copies are enough
        return dict(self._products), list(self._sales)

    def restore(self, state: tuple[dict[str, Product], list[Sale]]) -> None:
        products, sales = state
        self._products = dict(products)
        self._sales = list(sales)
