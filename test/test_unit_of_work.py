import pytest

from conftest import make_ledger
from srm.domain.models import PackageMode, SaleInput
from srm.repositories.unit_of_work import RepositoryUnitOfWork


def test_unit_of_work_restores_state_on_error():
    repo, _ledger = make_ledger()
    before_products = repo.list_products()

    with pytest.raises(RuntimeError):
        with RepositoryUnitOfWork(repo):
            repo.delete_sale("missing")
            repo.save_product(before_products[0].__class__("new", "New", "other", 1.0))
            raise RuntimeError("boom")

    assert repo.list_products() == before_products


class FailingRepo:
    """Wraps a repository and fails when a sale is inserted."""

    def __init__(self, inner):
        self.inner = inner

    def __getattr__(self, name):
        return getattr(self.inner, name)

    def insert_sale_first(self, sale):
        raise RuntimeError("boom")


def test_add_sale_rolls_back_stock_when_insert_fails():
    repo, _ = make_ledger()
    from srm.services.ledger_service import SalesLedger

    ledger = SalesLedger(FailingRepo(repo))
    with pytest.raises(RuntimeError):
        ledger.add_sale(SaleInput("2024-01-01", "product-2", PackageMode("red", "large"), 3, unit_price=10.0))

    assert repo.get_product_by_id("product-2").stock == 20
    assert repo.list_sales() == []
