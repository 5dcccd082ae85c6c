from __future__ import annotations
from dataclasses import dataclass
from datetime import date as Date, datetime
from typing import Optional, Union

from .errors import ValidationError

HERB = "herb"
OTHER = "other"
CATEGORIES = (HERB, OTHER)

PACKAGE = "package"
GRAMS = "grams"

PACKAGE_COLORS = ("red", "green", "yellow")
PACKAGE_SIZES = ("large", "small")


def normalize_date(value: Union[str, Date]) -> str:
    """Return the calendar day as an ISO string (YYYY-MM-DD)."""
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, Date):
        return value.isoformat()
    text = (value or "").strip()
    try:
        return Date.fromisoformat(text).isoformat()
    except ValueError:
        raise ValidationError(f"Invalid date: {value!r}. Expected YYYY-MM-DD.") from None


@dataclass(frozen=True)
class Product:
    id: str
    name: str
    category: str
    price: float
    price_per_gram: Optional[float] = None
    stock: Optional[float] = None

    def __post_init__(self):
        if self.category not in CATEGORIES:
            raise ValidationError(f"Unknown product category: {self.category!r}")
        if self.price_per_gram is not None and self.category != HERB:
            raise ValidationError("Price per gram is only allowed for herb products.")

    @property
    def is_herb(self) -> bool:
        return self.category == HERB


@dataclass(frozen=True)
class PackageMode:
    color: str
    size: str

    kind = PACKAGE

    def __post_init__(self):
        if self.color not in PACKAGE_COLORS:
            raise ValidationError(f"Unknown package color: {self.color!r}")
        if self.size not in PACKAGE_SIZES:
            raise ValidationError(f"Unknown package size: {self.size!r}")


@dataclass(frozen=True)
class GramsMode:
    grams: float

    kind = GRAMS

    def __post_init__(self):
        if self.grams < 1:
            raise ValidationError("Grams must be >= 1.")


SaleMode = Union[PackageMode, GramsMode]


@dataclass(frozen=True)
class SaleInput:
    """Mutable fields of a sale as submitted from the form.

    unit_price may be left out; the ledger then snapshots the product's
    current price (per gram for grams sales).
    """

    date: str
    product_id: str
    mode: SaleMode
    quantity: float
    unit_price: Optional[float] = None
    comment: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "date", normalize_date(self.date))
        if not isinstance(self.mode, (PackageMode, GramsMode)):
            raise ValidationError("Sale mode must be a package or grams selection.")
        # grams sales are counted in grams
        if isinstance(self.mode, GramsMode):
            object.__setattr__(self, "quantity", self.mode.grams)


@dataclass(frozen=True)
class Sale:
    id: str
    date: str
    product_id: str
    mode: SaleMode
    quantity: float
    unit_price: float
    comment: Optional[str] = None

    def __post_init__(self):
        if isinstance(self.mode, GramsMode) and self.quantity != self.mode.grams:
            raise ValidationError("Quantity must equal grams for grams sales.")

    @property
    def total_amount(self) -> float:
        return self.quantity * self.unit_price

    @property
    def sale_type(self) -> str:
        return self.mode.kind

    @property
    def package_color(self) -> Optional[str]:
        return self.mode.color if isinstance(self.mode, PackageMode) else None

    @property
    def package_size(self) -> Optional[str]:
        return self.mode.size if isinstance(self.mode, PackageMode) else None

    @property
    def grams(self) -> Optional[float]:
        return self.mode.grams if isinstance(self.mode, GramsMode) else None


@dataclass(frozen=True)
class SaleWithProduct:
    sale: Sale
    product: Product


@dataclass(frozen=True)
class DayGroup:
    date: str
    sales: tuple[Sale, ...]
    daily_total: float
