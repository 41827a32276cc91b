# ui.py
import logging
import tkinter as tk
from tkinter import ttk, messagebox

from pickerkit.config import LOG_FORMAT, LOG_LEVEL
from pickerkit.widgets import DateEntry, PlaceholderEntry

# Logging setup
logger = logging.getLogger("pickerkit")
logger.setLevel(LOG_LEVEL)
ch = logging.StreamHandler()
formatter = logging.Formatter(LOG_FORMAT)
ch.setFormatter(formatter)
logger.addHandler(ch)


class DemoForm:
    """A small form showing what a surrounding form receives from the pickers."""

    def __init__(self, root):
        self.root = root
        self.root.title("Date picker")
        self.root.geometry("520x220")

        frm = ttk.Frame(root, padding=(12, 12))
        frm.pack(fill=tk.BOTH, expand=True)
        frm.columnconfigure(1, weight=1)

        ttk.Label(frm, text="Nom :").grid(row=0, column=0, sticky="w", pady=4)
        self.name_entry = PlaceholderEntry(frm, placeholder="Votre nom")
        self.name_entry.grid(row=0, column=1, sticky="ew", padx=8, pady=4)

        ttk.Label(frm, text="Date de naissance :").grid(row=1, column=0, sticky="w", pady=4)
        self.birth_widget = DateEntry(frm, field_name="birth_date",
                                      on_change=lambda v: logger.info(f"birth_date -> {v!r}"))
        self.birth_widget.grid(row=1, column=1, sticky="w", padx=8, pady=4)

        ttk.Label(frm, text="Échéance :").grid(row=2, column=0, sticky="w", pady=4)
        self.due_widget = DateEntry(frm, field_name="due_date", initial_date="2024-03-15",
                                    on_change=lambda v: logger.info(f"due_date -> {v!r}"))
        self.due_widget.grid(row=2, column=1, sticky="w", padx=8, pady=4)

        bottom = ttk.Frame(root, padding=(12, 8))
        bottom.pack(fill=tk.X)
        ttk.Button(bottom, text="Envoyer", command=self.submit).pack(side=tk.RIGHT)
        ttk.Button(bottom, text="Effacer", command=self.clear).pack(side=tk.RIGHT, padx=(0, 8))

    def collect(self):
        data = {"name": self.name_entry.get_text().strip()}
        data.update(self.birth_widget.form_fields())
        data.update(self.due_widget.form_fields())
        return data

    def submit(self):
        data = self.collect()
        if not data["birth_date"]:
            messagebox.showwarning("Date manquante", "Veuillez saisir une date de naissance.")
            return
        logger.info(f"Submitted {data}")
        messagebox.showinfo("Envoyé", "\n".join(f"{k} = {v}" for k, v in data.items()))

    def clear(self):
        self.name_entry.set_text("")
        self.birth_widget.set_date("")
        self.due_widget.set_date("")
