from __future__ import annotations

from tkinter import ttk, filedialog
from datetime import date


class ReportsView:
    def __init__(self, notebook: ttk.Notebook, app):
        self.app = app
        self.frame = ttk.Frame(notebook)
        notebook.add(self.frame, text="Export")

        self._build()

    def _build(self):
        tab = self.frame

        box1 = ttk.LabelFrame(tab, text="Export sales report")
        box1.pack(fill="x", padx=10, pady=10)

        ttk.Label(box1, text="CSV: one row per sale, newest first. Excel: grouped by day with daily totals.")\
            .pack(anchor="w", padx=10, pady=(8, 4))
        row = ttk.Frame(box1)
        row.pack(fill="x", padx=10, pady=(0, 10))
        ttk.Button(row, text="Export CSV", style="Big.TButton", command=self.export_csv).pack(side="left")
        ttk.Button(row, text="Export Excel", style="Big.TButton", command=self.export_excel).pack(side="left", padx=10)

        box2 = ttk.LabelFrame(tab, text="Daily totals")
        box2.pack(fill="both", expand=True, padx=10, pady=(0, 10))

        cols = ("date", "count", "total")
        self.days_tree = ttk.Treeview(box2, columns=cols, show="headings", height=16)
        heads = {"date": "Date", "count": "Sales", "total": "Daily total"}
        widths = {"date": 160, "count": 90, "total": 160}
        for c in cols:
            self.days_tree.heading(c, text=heads[c])
            self.days_tree.column(c, width=widths[c], anchor="w")
        self.days_tree.pack(fill="both", expand=True, padx=10, pady=10)

    def refresh(self):
        for item in self.days_tree.get_children():
            self.days_tree.delete(item)
        for g in self.app.ledger.list_grouped_by_date():
            self.days_tree.insert("", "end", values=(g.date, len(g.sales), f"{g.daily_total:,.2f}"))

    def export_csv(self):
        filename = self.app.reports.report_filename()
        path = filedialog.asksaveasfilename(
            title="Save report as",
            defaultextension=".csv",
            filetypes=[("CSV files", "*.csv")],
            initialdir=str(self.app.exports_dir),
            initialfile=filename,
        )
        if not path:
            return
        try:
            self.app.reports.export_csv(path, self.app.ledger.list_sales_with_product())
            self.app.toast("CSV report exported.", kind="success")
        except Exception as e:
            self.app.handle_error("Export error", e, "CSV export failed.")

    def export_excel(self):
        path = filedialog.asksaveasfilename(
            title="Save report as",
            defaultextension=".xlsx",
            filetypes=[("Excel files", "*.xlsx")],
            initialdir=str(self.app.exports_dir),
            initialfile=f"sales-report-{date.today().isoformat()}.xlsx",
        )
        if not path:
            return
        ledger = self.app.ledger
        try:
            self.app.reports.export_excel(
                path,
                ledger.list_grouped_by_date(),
                {p.id: p for p in ledger.list_products()},
                ledger.total_revenue(),
            )
            self.app.toast("Excel report exported.", kind="success")
        except Exception as e:
            self.app.handle_error("Export error", e, "Excel export failed.")
