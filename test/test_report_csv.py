import logging
from datetime import date
from pathlib import Path

from conftest import make_ledger
from srm.domain.models import GramsMode, PackageMode, Product, Sale, SaleInput, SaleWithProduct
from srm.services.report_service import CSV_HEADERS, ReportFormatter

HEADER = "Date,Product,Sale mode,Package color,Package size,Grams,Quantity,Unit price,Total,Stock"


def test_empty_export_is_only_the_header():
    assert ReportFormatter().to_csv([]) == HEADER
    assert HEADER == ",".join(CSV_HEADERS)


def test_rows_follow_ledger_order_and_blank_non_applicable_fields():
    _repo, ledger = make_ledger()
    ledger.add_sale(SaleInput("2024-01-01", "product-2", PackageMode("yellow", "small"), 2, unit_price=500.0))
    ledger.add_sale(SaleInput("2024-01-02", "herb-1", GramsMode(grams=2.5), 2.5, unit_price=150.0))

    lines = ReportFormatter().to_csv(ledger.list_sales_with_product()).split("\n")

    assert lines[0] == HEADER
    assert lines[1] == "2024-01-02,Purple Haze,Grams,,,2.5,2.5,150,375,97.5"
    assert lines[2] == "2024-01-01,Rolling Papers,Package,Yellow,Small,,2,500,1000,18"
    assert len(lines) == 3


def test_commas_are_not_escaped_but_logged(caplog):
    prod = Product("p", "Salt, coarse", "other", 10.0)
    sale = Sale("s1", "2024-01-01", "p", PackageMode("red", "large"), 1, 10.0)

    with caplog.at_level(logging.WARNING, logger="srm.services.report_service"):
        text = ReportFormatter().to_csv([SaleWithProduct(sale, prod)])

    assert text.split("\n")[1] == "2024-01-01,Salt, coarse,Package,Red,Large,,1,10,10,"
    assert "csv_field_contains_delimiter" in caplog.text


def test_report_filename_uses_iso_date():
    assert ReportFormatter().report_filename(date(2024, 3, 9)) == "sales-report-2024-03-09.csv"


def test_export_csv_writes_utf8_file(tmp_path: Path):
    _repo, ledger = make_ledger()
    ledger.add_sale(SaleInput("2024-01-01", "product-2", PackageMode("red", "large"), 1, unit_price=500.0))

    target = ReportFormatter().export_csv(tmp_path / "out.csv", ledger.list_sales_with_product())

    content = target.read_text(encoding="utf-8")
    assert content.startswith(HEADER + "\n")
    assert content.count("\n") == 1


def test_sale_with_missing_product_still_gets_a_row():
    repo, ledger = make_ledger()
    ledger.add_sale(SaleInput("2024-01-01", "product-3", PackageMode("red", "large"), 1, unit_price=300.0))
    products = {p.id: p for p in repo.list_products() if p.id != "product-3"}
    repo.load(products.values(), ledger.list_sales())

    joined = ledger.list_sales_with_product()
    lines = ReportFormatter().to_csv(joined).split("\n")

    assert len(joined) == len(ledger.list_sales()) == 1
    assert lines[1] == "2024-01-01,product-3,Package,Red,Large,,1,300,300,"
