from __future__ import annotations

import math
from typing import Mapping, Optional

from srm.domain.errors import ValidationError
from srm.domain.models import GRAMS, PACKAGE, GramsMode, PackageMode, SaleInput
from srm.services.report_service import fmt_number


def parse_number(s: str, field: str, min_value: float = 1) -> float:
    try:
        v = float((s or "").strip().replace(",", "."))
    except ValueError:
        raise ValidationError(f"{field} must be a number.") from None
    if not math.isfinite(v):
        raise ValidationError(f"{field} must be a number.")
    if v < min_value:
        raise ValidationError(f"{field} must be >= {min_value:g}.")
    return v


def parse_sale_form(fields: Mapping[str, str]) -> SaleInput:
    """
    fields: {date, product_id, mode, color, size, grams, quantity, unit_price, comment}
    All values are raw strings from the dialog widgets.
    """
    product_id = (fields.get("product_id") or "").strip()
    if not product_id:
        raise ValidationError("Select a product.")

    mode_name = (fields.get("mode") or PACKAGE).strip()
    if mode_name == GRAMS:
        grams = parse_number(fields.get("grams", ""), "Grams")
        mode = GramsMode(grams=grams)
        quantity = grams
    elif mode_name == PACKAGE:
        color = (fields.get("color") or "").strip()
        size = (fields.get("size") or "").strip()
        if not color or not size:
            raise ValidationError("Select package color and size.")
        mode = PackageMode(color=color, size=size)
        quantity = parse_number(fields.get("quantity", ""), "Qty")
    else:
        raise ValidationError(f"Unknown sale mode: {mode_name!r}")

    raw_price = (fields.get("unit_price") or "").strip()
    unit_price: Optional[float] = parse_number(raw_price, "Unit price") if raw_price else None

    return SaleInput(
        date=fields.get("date", ""),
        product_id=product_id,
        mode=mode,
        quantity=quantity,
        unit_price=unit_price,
        comment=(fields.get("comment") or "").strip() or None,
    )


def sale_to_form(sale) -> dict[str, str]:
    """Inverse of parse_sale_form, used to prefill the edit dialog."""
    return {
        "date": sale.date,
        "product_id": sale.product_id,
        "mode": sale.sale_type,
        "color": sale.package_color or "",
        "size": sale.package_size or "",
        "grams": fmt_number(sale.grams),
        "quantity": fmt_number(sale.quantity),
        "unit_price": fmt_number(sale.unit_price),
        "comment": sale.comment or "",
    }
