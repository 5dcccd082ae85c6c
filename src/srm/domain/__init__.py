from .models import (
    DayGroup,
    GramsMode,
    PackageMode,
    Product,
    Sale,
    SaleInput,
    SaleWithProduct,
)
from .errors import AppError, ValidationError, NotFoundError

__all__ = [
    "Product",
    "PackageMode",
    "GramsMode",
    "Sale",
    "SaleInput",
    "SaleWithProduct",
    "DayGroup",
    "AppError",
    "ValidationError",
    "NotFoundError",
]
