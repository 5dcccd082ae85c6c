from .ledger_service import SalesLedger
from .report_service import ReportFormatter

__all__ = [
    "SalesLedger",
    "ReportFormatter",
]
