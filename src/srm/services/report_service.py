from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Iterable, Optional

from openpyxl import Workbook
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.table import Table, TableStyleInfo

from srm.domain.models import DayGroup, SaleWithProduct

log = logging.getLogger(__name__)

CSV_HEADERS = [
    "Date",
    "Product",
    "Sale mode",
    "Package color",
    "Package size",
    "Grams",
    "Quantity",
    "Unit price",
    "Total",
    "Stock",
]

MODE_LABELS = {"package": "Package", "grams": "Grams"}
COLOR_LABELS = {"red": "Red", "green": "Green", "yellow": "Yellow"}
SIZE_LABELS = {"large": "Large", "small": "Small"}


def fmt_number(value) -> str:
    if value is None:
        return ""
    v = float(value)
    return str(int(v)) if v.is_integer() else str(v)


class ReportFormatter:
    def report_filename(self, day: Optional[date] = None) -> str:
        return f"sales-report-{(day or date.today()).isoformat()}.csv"

    def csv_row(self, item: SaleWithProduct) -> list[str]:
        s, p = item.sale, item.product
        return [
            s.date,
            p.name,
            MODE_LABELS[s.sale_type],
            COLOR_LABELS.get(s.package_color, ""),
            SIZE_LABELS.get(s.package_size, ""),
            fmt_number(s.grams),
            fmt_number(s.quantity),
            fmt_number(s.unit_price),
            fmt_number(s.total_amount),
            fmt_number(p.stock),
        ]

    def to_csv(self, sales: Iterable[SaleWithProduct]) -> str:
        """
        Plain comma-joined lines, header first, rows in the given order.
        Fields are not quoted: a comma inside a product name shifts the
        columns of that row, so it is logged instead of rewritten.
        """
        lines = [",".join(CSV_HEADERS)]
        for item in sales:
            row = self.csv_row(item)
            if any("," in field for field in row):
                log.warning("csv_field_contains_delimiter sale_id=%s product=%r", item.sale.id, item.product.name)
            lines.append(",".join(row))
        return "\n".join(lines)

    def export_csv(self, path: Path | str, sales: Iterable[SaleWithProduct]) -> Path:
        target = Path(path)
        text = self.to_csv(sales)
        target.write_text(text, encoding="utf-8")
        log.info("report_exported kind=csv path=%s rows=%s", target, text.count("\n"))
        return target

    def export_excel(self, path: Path | str, groups: list[DayGroup], products: dict, total: float) -> Path:
        """Workbook with a summary sheet and the sales table grouped by day.

        products maps product id -> Product for name lookup.
        """
        wb = Workbook()

        def money(cell):
            cell.number_format = "#,##0.00"

        def bold_row(ws, r):
            for c in ws[r]:
                c.font = Font(bold=True)

        def set_widths(ws, widths: dict[str, int]):
            for col, w in widths.items():
                ws.column_dimensions[col].width = w

        # -------- 1) Summary --------
        ws = wb.active
        ws.title = "Summary"
        ws["A1"] = "Sales report"
        ws["A1"].font = Font(bold=True, size=14)

        sales_count = sum(len(g.sales) for g in groups)
        rows = [
            ("Sales count", sales_count, "int"),
            ("Days", len(groups), "int"),
            ("Total revenue", float(total), "money"),
        ]
        for i, (label, val, kind) in enumerate(rows):
            r = 3 + i
            ws[f"A{r}"] = label
            ws[f"B{r}"] = val
            if kind == "money":
                money(ws[f"B{r}"])
        set_widths(ws, {"A": 22, "B": 18})

        # -------- 2) Sales by day --------
        ws2 = wb.create_sheet("Sales by Day")
        ws2.append(CSV_HEADERS[:-1])
        bold_row(ws2, 1)

        for g in groups:
            for s in g.sales:
                prod = products.get(s.product_id)
                ws2.append([
                    s.date,
                    prod.name if prod else s.product_id,
                    MODE_LABELS[s.sale_type],
                    COLOR_LABELS.get(s.package_color, ""),
                    SIZE_LABELS.get(s.package_size, ""),
                    s.grams,
                    s.quantity,
                    float(s.unit_price),
                    float(s.total_amount),
                ])
                money(ws2[f"H{ws2.max_row}"])
                money(ws2[f"I{ws2.max_row}"])
            ws2.append([g.date, "Daily total", None, None, None, None, None, None, float(g.daily_total)])
            bold_row(ws2, ws2.max_row)
            money(ws2[f"I{ws2.max_row}"])

        ws2.freeze_panes = "A2"
        set_widths(ws2, {
            "A": 12, "B": 30, "C": 10, "D": 14, "E": 13,
            "F": 8, "G": 10, "H": 12, "I": 14,
        })

        # -------- 3) Products --------
        ws3 = wb.create_sheet("Products")
        ws3.append(["ID", "Name", "Category", "Price", "Price per gram", "Stock"])
        bold_row(ws3, 1)
        for p in products.values():
            ws3.append([p.id, p.name, p.category, float(p.price), p.price_per_gram, p.stock])
            money(ws3[f"D{ws3.max_row}"])
        set_widths(ws3, {"A": 14, "B": 30, "C": 10, "D": 12, "E": 15, "F": 10})
        if ws3.max_row >= 2:
            ref = f"A1:{get_column_letter(6)}{ws3.max_row}"
            tab = Table(displayName="ProductCatalog", ref=ref)
            tab.tableStyleInfo = TableStyleInfo(
                name="TableStyleMedium9",
                showRowStripes=True,
                showColumnStripes=False,
            )
            ws3.add_table(tab)

        target = Path(path)
        wb.save(target)
        log.info("report_exported kind=xlsx path=%s sales=%s", target, sales_count)
        return target
