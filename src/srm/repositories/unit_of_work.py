from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from srm.repositories.contracts import SalesRepository


class UnitOfWork(Protocol):
    def __enter__(self) -> "UnitOfWork": ...
    def __exit__(self, exc_type, exc, tb) -> None: ...


@dataclass
class RepositoryUnitOfWork:
    """Unit of Work adapter for ledger mutations.

    Takes a snapshot of the repository on entry and puts it back if the
    block raises, so a failed mutation never leaves half-applied stock or
    sales changes behind.
    """

    repo: SalesRepository
    _state: object = field(default=None, init=False, repr=False)

    def __enter__(self) -> "RepositoryUnitOfWork":
        self._state = self.repo.snapshot()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is not None:
            self.repo.restore(self._state)
        self._state = None
        return None
