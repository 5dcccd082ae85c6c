from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from srm.repositories.memory_repo import InMemoryRepository
from srm.services.ledger_service import SalesLedger
from srm.services.mock_data import seed_repository
from srm.services.report_service import ReportFormatter


@dataclass(frozen=True)
class AppContainer:
    repo: InMemoryRepository
    ledger: SalesLedger
    reports: ReportFormatter


def build_container(
    seed_demo: bool = True,
    seed: Optional[int] = None,
    today: Optional[date] = None,
    track_stock: bool = True,
) -> AppContainer:
    repo = InMemoryRepository()
    if seed_demo:
        seed_repository(repo, seed=seed, today=today)

    return AppContainer(
        repo=repo,
        ledger=SalesLedger(repo, track_stock=track_stock),
        reports=ReportFormatter(),
    )
