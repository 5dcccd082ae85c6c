import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def make_ledger(track_stock: bool = True):
    from srm.domain.models import Product
    from srm.repositories.memory_repo import InMemoryRepository
    from srm.services.ledger_service import SalesLedger

    repo = InMemoryRepository(products=[
        Product("herb-1", "Purple Haze", "herb", 2000.0, price_per_gram=150.0, stock=100),
        Product("product-2", "Rolling Papers", "other", 500.0, stock=20),
        Product("product-3", "Lighter", "other", 300.0),
    ])
    counter = iter(range(1, 10_000))
    ledger = SalesLedger(repo, track_stock=track_stock, id_factory=lambda: f"sale-{next(counter)}")
    return repo, ledger
