from __future__ import annotations

from typing import Iterable, Optional, Protocol

from srm.domain.models import Product, Sale


class SalesRepository(Protocol):
    def list_products(self) -> list[Product]: ...
    def get_product_by_id(self, product_id: str) -> Optional[Product]: ...
    def save_product(self, product: Product) -> None: ...
    def list_sales(self) -> list[Sale]: ...
    def get_sale(self, sale_id: str) -> Optional[Sale]: ...
    def has_sale_id(self, sale_id: str) -> bool: ...
    def insert_sale_first(self, sale: Sale) -> None: ...
    def replace_sale(self, sale: Sale) -> bool: ...
    def delete_sale(self, sale_id: str) -> Optional[Sale]: ...
    def load(self, products: Iterable[Product], sales: Iterable[Sale]) -> None: ...
    def snapshot(self) -> object: ...
    def restore(self, state: object) -> None: ...
