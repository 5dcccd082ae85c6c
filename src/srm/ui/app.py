from __future__ import annotations

import tkinter as tk
from tkinter import ttk, messagebox
import logging
from pathlib import Path

from srm.domain.errors import AppError
from srm.ui.views.sales_view import SalesView
from srm.ui.views.reports_view import ReportsView
from srm.ui.views.sale_dialog import SaleDialog

log = logging.getLogger(__name__)


class App(tk.Tk):
    def __init__(self, ledger, reports, logs_dir: str, exports_dir: str):
        super().__init__()
        self.title("Sales Report")
        self.geometry("1280x720")
        self.minsize(1020, 600)

        self.ledger = ledger
        self.reports = reports
        self.logs_dir = logs_dir
        self.exports_dir = exports_dir

        self.status_var = tk.StringVar(value="")
        self.revenue_var = tk.StringVar(value="Total revenue: 0.00")
        self._toast_after_id = None

        self._build_styles()
        self._build_topbar()

        main = ttk.Frame(self)
        main.pack(fill="both", expand=True, padx=12, pady=(0, 8))

        self.sidebar = ttk.Frame(main)
        self.sidebar.pack(side="left", fill="y", padx=(0, 10))

        self.content = ttk.Frame(main)
        self.content.pack(side="right", fill="both", expand=True)

        self.nb = ttk.Notebook(self.content, style="Side.TNotebook")
        self.nb.pack(fill="both", expand=True)

        # Views (tabs hidden)
        self.sales_view = SalesView(self.nb, self)
        self.reports_view = ReportsView(self.nb, self)

        self._build_sidebar()
        self._build_status_bar()

        self.refresh_all()
        self.toast("Ready.", kind="info", ms=1200)

    def _build_styles(self):
        style = ttk.Style(self)
        style.layout("Side.TNotebook.Tab", [])
        style.configure("Side.TNotebook", tabmargins=0)
        style.configure("Big.TButton", padding=(14, 10))
        style.configure("Title.TLabel", font=("Segoe UI", 12, "bold"))
        style.configure("KPI.TLabel", font=("Segoe UI", 10))
        style.configure("KPIValue.TLabel", font=("Segoe UI", 11, "bold"))

    def _build_topbar(self):
        top = ttk.Frame(self)
        top.pack(fill="x", padx=12, pady=10)

        ttk.Label(top, text="Sales Report", style="Title.TLabel").pack(side="left")
        ttk.Label(top, textvariable=self.revenue_var, style="KPIValue.TLabel").pack(side="right")

    def _build_sidebar(self):
        box = ttk.LabelFrame(self.sidebar, text="Quick Actions")
        box.pack(fill="x", pady=(0, 10))

        ttk.Button(box, text="➕ New Sale", style="Big.TButton",
                   command=self.open_new_sale).pack(fill="x", padx=10, pady=(10, 6))

        ttk.Button(
            box, text="🧾 Sales", style="Big.TButton",
            command=lambda: self.nb.select(self.sales_view.frame)
        ).pack(fill="x", padx=10, pady=6)

        ttk.Button(
            box, text="📄 Export", style="Big.TButton",
            command=lambda: self.nb.select(self.reports_view.frame)
        ).pack(fill="x", padx=10, pady=(6, 10))

        kpi = ttk.LabelFrame(self.sidebar, text="KPIs")
        kpi.pack(fill="x")

        self.k_sales = ttk.Label(kpi, text="-", style="KPIValue.TLabel")
        self.k_days = ttk.Label(kpi, text="-", style="KPIValue.TLabel")
        self.k_products = ttk.Label(kpi, text="-", style="KPIValue.TLabel")
        self.k_revenue = ttk.Label(kpi, text="-", style="KPIValue.TLabel")

        labels = ["Sales", "Days", "Products", "Revenue"]
        widgets = [self.k_sales, self.k_days, self.k_products, self.k_revenue]
        for i, (lab, w) in enumerate(zip(labels, widgets)):
            ttk.Label(kpi, text=lab, style="KPI.TLabel").grid(
                row=i, column=0, sticky="w", padx=10, pady=(8 if i == 0 else 2, 2)
            )
            w.grid(row=i, column=1, sticky="e", padx=10, pady=(8 if i == 0 else 2, 2))

        kpi.columnconfigure(0, weight=1)
        kpi.columnconfigure(1, weight=1)

    def _build_status_bar(self):
        bar = ttk.Frame(self)
        bar.pack(fill="x", padx=12, pady=(0, 10))
        ttk.Label(bar, textvariable=self.status_var).pack(side="left")
        ttk.Label(bar, text=f"Logs: {self.logs_dir}").pack(side="right")

    def toast(self, msg: str, kind: str = "info", ms: int = 2500):
        prefix = {"info": "ℹ ", "success": "✅ ", "warn": "⚠ ", "error": "❌ "}.get(kind, "")
        self.status_var.set(prefix + msg)
        if self._toast_after_id is not None:
            self.after_cancel(self._toast_after_id)
        self._toast_after_id = self.after(ms, lambda: self.status_var.set(""))

    def handle_error(self, title: str, exc: Exception, toast_msg: str):
        if isinstance(exc, AppError):
            log.warning("%s: %s", title, exc)
            messagebox.showwarning(title, str(exc), parent=self)
        else:
            log.error("%s", title, exc_info=(type(exc), exc, exc.__traceback__))
            messagebox.showerror(title, f"Unexpected error: {exc}", parent=self)
        self.toast(toast_msg, kind="error")

    # ---------- dialogs ----------
    def open_new_sale(self):
        SaleDialog(self, title="New sale", on_submit=self._submit_new_sale)

    def open_edit_sale(self, sale_id: str):
        try:
            sale = self.ledger.get_sale(sale_id)
        except AppError as e:
            self.handle_error("Edit sale", e, "Sale not found.")
            return
        SaleDialog(
            self, title="Edit sale", initial=sale,
            on_submit=lambda data: self._submit_edit_sale(sale_id, data),
        )

    def _submit_new_sale(self, data) -> bool:
        try:
            sale = self.ledger.add_sale(data)
        except Exception as e:
            self.handle_error("Sale failed", e, "Sale failed.")
            return False
        self.toast(f"Sale added ({sale.id}).", kind="success")
        self.refresh_all()
        return True

    def _submit_edit_sale(self, sale_id: str, data) -> bool:
        try:
            self.ledger.update_sale(sale_id, data)
        except Exception as e:
            self.handle_error("Update failed", e, "Update failed.")
            return False
        self.toast("Sale updated.", kind="success")
        self.refresh_all()
        return True

    def delete_sale(self, sale_id: str):
        if not messagebox.askyesno("Delete sale", "Delete the selected sale?", parent=self):
            return
        try:
            self.ledger.remove_sale(sale_id)
        except Exception as e:
            self.handle_error("Delete failed", e, "Delete failed.")
            return
        self.toast("Sale deleted.", kind="info")
        self.refresh_all()

    # ---------- refresh ----------
    def refresh_all(self):
        self.sales_view.refresh()
        self.reports_view.refresh()
        self.refresh_kpis()

    def refresh_kpis(self):
        groups = self.ledger.list_grouped_by_date()
        revenue = self.ledger.total_revenue()
        self.k_sales.config(text=str(sum(len(g.sales) for g in groups)))
        self.k_days.config(text=str(len(groups)))
        self.k_products.config(text=str(len(self.ledger.list_products())))
        self.k_revenue.config(text=f"{revenue:,.2f}")
        self.revenue_var.set(f"Total revenue: {revenue:,.2f}")

    def default_export_path(self, filename: str) -> Path:
        return Path(self.exports_dir) / filename
