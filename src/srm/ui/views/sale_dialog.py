from __future__ import annotations

import tkinter as tk
from tkinter import ttk, messagebox
from datetime import date
from typing import Callable

from srm.domain.errors import ValidationError
from srm.domain.models import GRAMS, PACKAGE, PACKAGE_COLORS, PACKAGE_SIZES, SaleInput
from srm.services.report_service import fmt_number
from srm.ui.forms import parse_sale_form, sale_to_form


class SaleDialog(tk.Toplevel):
    """Modal form for creating or editing a sale.

    on_submit gets the parsed SaleInput and returns True when the ledger
    accepted it; the dialog closes only then.
    """

    def __init__(self, app, title: str, on_submit: Callable[[SaleInput], bool], initial=None):
        super().__init__(app)
        self.app = app
        self.on_submit = on_submit
        self.title(title)
        self.resizable(False, False)
        self.transient(app)

        self.products = {p.id: p for p in app.ledger.list_products()}
        self.labels = {f"{p.name} ({p.id})": p.id for p in self.products.values()}
        self.label_by_id = {pid: label for label, pid in self.labels.items()}

        values = sale_to_form(initial) if initial is not None else {}
        self.date_var = tk.StringVar(value=values.get("date", date.today().isoformat()))
        self.product_var = tk.StringVar(value=self.label_by_id.get(values.get("product_id", ""), ""))
        self.mode_var = tk.StringVar(value=values.get("mode", PACKAGE))
        self.color_var = tk.StringVar(value=values.get("color", PACKAGE_COLORS[0]))
        self.size_var = tk.StringVar(value=values.get("size", PACKAGE_SIZES[0]))
        self.grams_var = tk.StringVar(value=values.get("grams", ""))
        self.qty_var = tk.StringVar(value=values.get("quantity", "1"))
        self.price_var = tk.StringVar(value=values.get("unit_price", ""))
        self.comment_var = tk.StringVar(value=values.get("comment", ""))

        self._build()
        self._on_mode_change(reset_price=initial is None)

        self.grab_set()
        self.bind("<Return>", lambda _e: self.submit())
        self.bind("<Escape>", lambda _e: self.destroy())

    def _build(self):
        body = ttk.Frame(self)
        body.pack(fill="both", expand=True, padx=14, pady=14)

        def row(r, label, widget):
            ttk.Label(body, text=label).grid(row=r, column=0, sticky="w", padx=(0, 10), pady=4)
            widget.grid(row=r, column=1, sticky="we", pady=4)

        row(0, "Date (YYYY-MM-DD)", ttk.Entry(body, textvariable=self.date_var, width=14))

        self.product_combo = ttk.Combobox(body, textvariable=self.product_var, width=40,
                                          values=list(self.labels), state="readonly")
        self.product_combo.bind("<<ComboboxSelected>>", lambda _e: self._on_product_change())
        row(1, "Product", self.product_combo)

        modes = ttk.Frame(body)
        ttk.Radiobutton(modes, text="Package", value=PACKAGE, variable=self.mode_var,
                        command=self._on_mode_change).pack(side="left")
        self.grams_radio = ttk.Radiobutton(modes, text="Grams", value=GRAMS, variable=self.mode_var,
                                           command=self._on_mode_change)
        self.grams_radio.pack(side="left", padx=10)
        row(2, "Sale mode", modes)

        self.color_combo = ttk.Combobox(body, textvariable=self.color_var, values=PACKAGE_COLORS,
                                        state="readonly", width=12)
        row(3, "Package color", self.color_combo)
        self.size_combo = ttk.Combobox(body, textvariable=self.size_var, values=PACKAGE_SIZES,
                                       state="readonly", width=12)
        row(4, "Package size", self.size_combo)
        self.grams_entry = ttk.Entry(body, textvariable=self.grams_var, width=12)
        row(5, "Grams", self.grams_entry)
        self.qty_entry = ttk.Entry(body, textvariable=self.qty_var, width=12)
        row(6, "Qty", self.qty_entry)
        row(7, "Unit price", ttk.Entry(body, textvariable=self.price_var, width=12))
        row(8, "Comment", ttk.Entry(body, textvariable=self.comment_var, width=40))

        btns = ttk.Frame(body)
        btns.grid(row=9, column=0, columnspan=2, sticky="e", pady=(10, 0))
        ttk.Button(btns, text="Cancel", command=self.destroy).pack(side="right")
        ttk.Button(btns, text="Save", style="Big.TButton", command=self.submit).pack(side="right", padx=10)

        body.columnconfigure(1, weight=1)

    def _selected_product(self):
        return self.products.get(self.labels.get(self.product_var.get(), ""))

    def _on_product_change(self):
        prod = self._selected_product()
        if prod is None:
            return
        if not prod.is_herb and self.mode_var.get() == GRAMS:
            self.mode_var.set(PACKAGE)
        self._on_mode_change()

    def _on_mode_change(self, reset_price: bool = True):
        prod = self._selected_product()
        self.grams_radio.state(["!disabled"] if prod is None or prod.is_herb else ["disabled"])

        grams = self.mode_var.get() == GRAMS
        for w in (self.color_combo, self.size_combo, self.qty_entry):
            w.state(["disabled"] if grams else ["!disabled"])
        self.grams_entry.state(["!disabled"] if grams else ["disabled"])

        if reset_price and prod is not None:
            price = prod.price_per_gram if grams else prod.price
            if price is not None:
                self.price_var.set(fmt_number(price))

    def submit(self):
        fields = {
            "date": self.date_var.get(),
            "product_id": self.labels.get(self.product_var.get(), ""),
            "mode": self.mode_var.get(),
            "color": self.color_var.get(),
            "size": self.size_var.get(),
            "grams": self.grams_var.get(),
            "quantity": self.qty_var.get(),
            "unit_price": self.price_var.get(),
            "comment": self.comment_var.get(),
        }
        try:
            data = parse_sale_form(fields)
        except ValidationError as e:
            messagebox.showwarning("Validation", str(e), parent=self)
            return
        if self.on_submit(data):
            self.destroy()
