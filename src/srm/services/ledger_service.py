from __future__ import annotations

import dataclasses
import logging
import time
from typing import Callable, Optional

from srm.logging_config import SALES_LOGGER
from srm.domain.errors import NotFoundError, ValidationError
from srm.domain.models import (
    DayGroup,
    OTHER,
    GramsMode,
    Product,
    Sale,
    SaleInput,
    SaleWithProduct,
)
from srm.repositories.contracts import SalesRepository
from srm.repositories.unit_of_work import RepositoryUnitOfWork, UnitOfWork

log = logging.getLogger(SALES_LOGGER)


def timestamp_sale_id() -> str:
    return f"sale-{int(time.time() * 1000)}"


class SalesLedger:
    def __init__(
        self,
        repo: SalesRepository,
        track_stock: bool = True,
        id_factory: Callable[[], str] | None = None,
        uow_factory: Callable[[], UnitOfWork] | None = None,
    ):
        self.repo = repo
        self.track_stock = track_stock
        self.id_factory = id_factory or timestamp_sale_id
        self.uow_factory = uow_factory or (lambda: RepositoryUnitOfWork(repo))

    # ---------- catalog ----------
    def list_products(self) -> list[Product]:
        return self.repo.list_products()

    def get_product(self, product_id: str) -> Product:
        prod = self.repo.get_product_by_id(product_id)
        if not prod:
            raise NotFoundError(f"Product not found: {product_id}")
        return prod

    # ---------- mutations ----------
    def add_sale(self, data: SaleInput) -> Sale:
        with self.uow_factory():
            prod, unit_price = self._validate(data)
            sale = self._build_sale(self._new_id(), data, unit_price)
            self._adjust_stock(prod.id, -sale.quantity)
            self.repo.insert_sale_first(sale)
        log.info(
            "sale_created sale_id=%s product=%s mode=%s qty=%s total=%.2f",
            sale.id, sale.product_id, sale.sale_type, sale.quantity, sale.total_amount,
        )
        return sale

    def update_sale(self, sale_id: str, data: SaleInput) -> Sale:
        old = self.get_sale(sale_id)
        with self.uow_factory():
            self._adjust_stock(old.product_id, old.quantity)
            prod, unit_price = self._validate(data)
            sale = self._build_sale(old.id, data, unit_price)
            self._adjust_stock(prod.id, -sale.quantity)
            if not self.repo.replace_sale(sale):
                raise NotFoundError(f"Sale not found: {sale_id}")
        log.info(
            "sale_updated sale_id=%s product=%s qty=%s total=%.2f",
            sale.id, sale.product_id, sale.quantity, sale.total_amount,
        )
        return sale

    def remove_sale(self, sale_id: str) -> None:
        with self.uow_factory():
            removed = self.repo.delete_sale(sale_id)
            if removed is None:
                raise NotFoundError(f"Sale not found: {sale_id}")
            self._adjust_stock(removed.product_id, removed.quantity)
        log.info("sale_removed sale_id=%s total=%.2f", removed.id, removed.total_amount)

    # ---------- reads ----------
    def get_sale(self, sale_id: str) -> Sale:
        sale = self.repo.get_sale(sale_id)
        if sale is None:
            raise NotFoundError(f"Sale not found: {sale_id}")
        return sale

    def list_sales(self) -> list[Sale]:
        return self.repo.list_sales()

    def list_sales_with_product(self) -> list[SaleWithProduct]:
        out = []
        for s in self.repo.list_sales():
            prod = self.repo.get_product_by_id(s.product_id)
            if prod is None:
                log.warning("sale_without_product sale_id=%s product=%s", s.id, s.product_id)
                prod = Product(id=s.product_id, name=s.product_id, category=OTHER, price=0.0)
            out.append(SaleWithProduct(sale=s, product=prod))
        return out

    def list_grouped_by_date(self) -> list[DayGroup]:
        """Group sales by exact date string.

        Groups come out in the order their date first appears in the sales
        list; sales inside a group keep their list order.
        """
        buckets: dict[str, list[Sale]] = {}
        for s in self.repo.list_sales():
            buckets.setdefault(s.date, []).append(s)
        return [
            DayGroup(date=d, sales=tuple(items), daily_total=sum(s.total_amount for s in items))
            for d, items in buckets.items()
        ]

    def total_revenue(self) -> float:
        return sum(s.total_amount for s in self.repo.list_sales())

    # ---------- helpers ----------
    def _validate(self, data: SaleInput) -> tuple[Product, float]:
        if not (data.product_id or "").strip():
            raise ValidationError("Select a product.")
        if data.quantity < 1:
            raise ValidationError("Qty must be >= 1.")

        prod = self.get_product(data.product_id)
        if isinstance(data.mode, GramsMode) and not prod.is_herb:
            raise ValidationError(f"{prod.name} can only be sold in packages.")

        unit_price = data.unit_price
        if unit_price is None:
            unit_price = prod.price_per_gram if isinstance(data.mode, GramsMode) else prod.price
        if unit_price is None or unit_price < 1:
            raise ValidationError("Unit price must be >= 1.")
        return prod, float(unit_price)

    def _build_sale(self, sale_id: str, data: SaleInput, unit_price: float) -> Sale:
        return Sale(
            id=sale_id,
            date=data.date,
            product_id=data.product_id,
            mode=data.mode,
            quantity=data.quantity,
            unit_price=unit_price,
            comment=(data.comment or "").strip() or None,
        )

    def _adjust_stock(self, product_id: str, delta: float) -> None:
        if not self.track_stock:
            return
        prod: Optional[Product] = self.repo.get_product_by_id(product_id)
        if prod is None or prod.stock is None:
            return
        # may go negative
        self.repo.save_product(dataclasses.replace(prod, stock=prod.stock + delta))

    def _new_id(self) -> str:
        base = self.id_factory()
        candidate, n = base, 1
        while self.repo.has_sale_id(candidate):
            candidate = f"{base}-{n}"
            n += 1
        return candidate
