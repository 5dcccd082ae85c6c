from .sales_view import SalesView
from .sale_dialog import SaleDialog
from .reports_view import ReportsView

__all__ = ["SalesView", "SaleDialog", "ReportsView"]
