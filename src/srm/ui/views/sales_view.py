from __future__ import annotations

from tkinter import ttk
import logging

from srm.services.report_service import COLOR_LABELS, MODE_LABELS, SIZE_LABELS, fmt_number


log = logging.getLogger(__name__)


class SalesView:
    def __init__(self, notebook: ttk.Notebook, app):
        self.app = app
        self.frame = ttk.Frame(notebook)
        notebook.add(self.frame, text="Sales")

        self._build()

    def _build(self):
        tab = self.frame

        top = ttk.Frame(tab)
        top.pack(fill="x", padx=10, pady=10)

        ttk.Button(top, text="Add sale", style="Big.TButton", command=self.app.open_new_sale).pack(side="left")
        ttk.Button(top, text="Edit selected", command=self.edit_selected).pack(side="left", padx=10)
        ttk.Button(top, text="Delete selected", command=self.delete_selected).pack(side="left")

        box = ttk.LabelFrame(tab, text="Sales by day (double click to edit)")
        box.pack(fill="both", expand=True, padx=10, pady=(0, 10))

        cols = ("product", "mode", "package", "qty", "unit", "total", "comment")
        self.tree = ttk.Treeview(box, columns=cols, show="tree headings", height=20)
        heads = {"product": "Product", "mode": "Mode", "package": "Package / Grams", "qty": "Qty",
                 "unit": "Unit price", "total": "Total", "comment": "Comment"}
        widths = {"product": 220, "mode": 90, "package": 140, "qty": 70, "unit": 110, "total": 120, "comment": 260}
        self.tree.heading("#0", text="Date")
        self.tree.column("#0", width=230, anchor="w")
        for c in cols:
            self.tree.heading(c, text=heads[c])
            self.tree.column(c, width=widths[c], anchor="w")

        sb = ttk.Scrollbar(box, orient="vertical", command=self.tree.yview)
        self.tree.configure(yscrollcommand=sb.set)
        sb.pack(side="right", fill="y", pady=10)
        self.tree.pack(fill="both", expand=True, padx=10, pady=10)
        self.tree.bind("<Double-1>", lambda _e: self.edit_selected())
        self.tree.bind("<Delete>", lambda _e: self.delete_selected())

    def refresh(self):
        for item in self.tree.get_children():
            self.tree.delete(item)

        products = {p.id: p for p in self.app.ledger.list_products()}
        for g in self.app.ledger.list_grouped_by_date():
            parent = self.tree.insert(
                "", "end", iid=f"day:{g.date}", open=True,
                text=f"{g.date}  |  Daily total: {g.daily_total:,.2f}",
            )
            for s in g.sales:
                prod = products.get(s.product_id)
                if s.sale_type == "grams":
                    package = f"{fmt_number(s.grams)} g"
                    unit = f"{s.unit_price:,.2f} /g"
                else:
                    package = f"{COLOR_LABELS[s.package_color]} / {SIZE_LABELS[s.package_size]}"
                    unit = f"{s.unit_price:,.2f}"
                self.tree.insert(parent, "end", iid=s.id, values=(
                    prod.name if prod else s.product_id,
                    MODE_LABELS[s.sale_type],
                    package,
                    fmt_number(s.quantity),
                    unit,
                    f"{s.total_amount:,.2f}",
                    (s.comment or "")[:140],
                ))

    def _selected_sale_id(self):
        sel = self.tree.selection()
        if not sel or sel[0].startswith("day:"):
            self.app.toast("Select a sale row first.", kind="warn", ms=1500)
            return None
        return sel[0]

    def edit_selected(self):
        sale_id = self._selected_sale_id()
        if sale_id:
            self.app.open_edit_sale(sale_id)

    def delete_selected(self):
        sale_id = self._selected_sale_id()
        if sale_id:
            self.app.delete_sale(sale_id)
