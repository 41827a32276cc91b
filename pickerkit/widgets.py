# widgets.py
import datetime
import logging
import tkinter as tk
from tkinter import ttk

from pickerkit.codec import CalendarDate, to_storage
from pickerkit.config import MONTH_NAMES, PLACEHOLDER
from pickerkit.grid import weekday_labels, weeks
from pickerkit.picker import OutsideClickWatch, PickerMachine

logger = logging.getLogger(__name__)


def _as_storage(value):
    if isinstance(value, datetime.datetime):
        value = value.date()
    if isinstance(value, datetime.date):
        value = CalendarDate.from_date(value)
    if isinstance(value, CalendarDate):
        return to_storage(value)
    return value or None


def is_inside(path, root_path):
    """True if the tk widget path ``path`` is ``root_path`` or one of its descendants."""
    return path == root_path or path.startswith(root_path.rstrip(".") + ".")


# ---------- PlaceholderEntry ----------
class PlaceholderEntry(ttk.Entry):
    def __init__(self, master=None, placeholder="Placeholder", color="grey", **kwargs):
        super().__init__(master, **kwargs)
        self.placeholder = placeholder
        self.placeholder_color = color
        try:
            self.default_fg = self.cget("foreground")
        except tk.TclError:
            self.default_fg = "black"

        self.bind("<FocusIn>", self._clear)
        self.bind("<FocusOut>", self._restore)
        self._restore()

    def _is_placeholder(self):
        return self.get() == self.placeholder and str(self.cget("foreground")) == self.placeholder_color

    def _restore(self, event=None):
        if not self.get():
            self.insert(0, self.placeholder)
            self.configure(foreground=self.placeholder_color)

    def _clear(self, event=None):
        if self._is_placeholder():
            self.delete(0, tk.END)
            self.configure(foreground=self.default_fg)

    def get_text(self):
        return "" if self._is_placeholder() else self.get()

    def set_text(self, text):
        if text == self.get_text():
            return
        self.delete(0, tk.END)
        self.configure(foreground=self.default_fg)
        self.insert(0, text)
        self.icursor(tk.END)
        if not text and self.focus_get() is not self:
            self._restore()


# ---------- CalendarPopup ----------
class CalendarPopup(tk.Toplevel):
    """
    Month grid for a PickerMachine. It only draws and forwards clicks; every
    change goes through the owner's callbacks.
    """

    def __init__(self, parent, picker, on_day=None, on_prev=None, on_next=None, on_close=None):
        super().__init__(parent)
        self.withdraw()  # hide until positioned
        self.transient(parent.winfo_toplevel())
        self.title("")
        self.resizable(False, False)
        self.picker = picker
        self.on_day = on_day
        self.on_prev = on_prev
        self.on_next = on_next
        self.on_close = on_close

        self._build_ui()

        self.protocol("WM_DELETE_WINDOW", self._on_close)

        self.update_idletasks()
        self.deiconify()

    def _build_ui(self):
        pad = 6
        frm = ttk.Frame(self, padding=pad)
        frm.grid(row=0, column=0)

        # header (prev, month/year, next)
        hdr = ttk.Frame(frm)
        hdr.grid(row=0, column=0, sticky="ew", pady=(0, 6))
        self.prev_btn = ttk.Button(hdr, text="←", width=3, command=self._on_prev)
        self.prev_btn.pack(side="left")
        self.header_label = ttk.Label(hdr, text="", anchor="center", width=18)
        self.header_label.pack(side="left", padx=8)
        self.next_btn = ttk.Button(hdr, text="→", width=3, command=self._on_next)
        self.next_btn.pack(side="left")

        wk = ttk.Frame(frm)
        wk.grid(row=1, column=0)
        for i, name in enumerate(weekday_labels()):
            ttk.Label(wk, text=name, width=3, anchor="center").grid(row=0, column=i, padx=1)

        self.days_frame = ttk.Frame(frm)
        self.days_frame.grid(row=2, column=0, pady=(4, 0))

        self.draw()

    def caption_text(self):
        year, month = self.picker.caption
        return f"{MONTH_NAMES[month]} {year}"

    def draw(self):
        for w in self.days_frame.winfo_children():
            w.destroy()

        self.header_label.config(text=self.caption_text())

        for r, week in enumerate(weeks(self.picker.days())):
            for c, cell in enumerate(week):
                btn = ttk.Button(self.days_frame, text=str(cell.date.day), width=3,
                                 command=lambda d=cell.date: self._on_day_selected(d))
                if cell.selected:
                    btn.state(["selected"])
                elif not cell.in_current_month:
                    btn.state(["alternate"])
                btn.grid(row=r, column=c, padx=1, pady=1)

    def _on_prev(self):
        if self.on_prev:
            self.on_prev()

    def _on_next(self):
        if self.on_next:
            self.on_next()

    def _on_day_selected(self, date_obj):
        if self.on_day:
            self.on_day(date_obj)

    def _on_close(self):
        if self.on_close:
            self.on_close()


# ---------- DateEntry composite widget ----------
class DateEntry(ttk.Frame):
    """
    Editable ``jj/mm/aaaa`` entry plus a button that opens CalendarPopup.

    get_date() returns the committed value as 'YYYY-MM-DD' or an empty string.
    set_date() accepts datetime.date, CalendarDate or a date string.
    When ``field_name`` is given, form_fields() exposes the committed value
    under that name and the visible text under ``<field_name>-display``.
    """

    def __init__(self, master=None, width=12, initial_date=None, field_name=None, on_change=None, **kwargs):
        super().__init__(master, **kwargs)
        self.field_name = field_name
        self.on_change = on_change
        self._value = tk.StringVar()
        self._popup = None

        self.picker = PickerMachine(initial_value=_as_storage(initial_date), on_change=self._on_value_change)
        self._value.set(self.picker.value)

        self.entry = PlaceholderEntry(self, placeholder=PLACEHOLDER, width=width)
        self.entry.pack(side="left", fill="x", expand=True)
        self.entry.bind("<KeyRelease>", self._on_key, add="+")
        # the class binding inserts the text after this one runs
        for seq in ("<<Paste>>", "<<Cut>>"):
            self.entry.bind(seq, lambda e: self.after_idle(self._on_key), add="+")
        self.btn = ttk.Button(self, text="▾", width=2, command=self._toggle)
        self.btn.pack(side="left", padx=(3, 0))

        self._watch = OutsideClickWatch(self._subscribe_clicks, self._on_click_anywhere)
        self.bind("<Destroy>", self._on_destroy, add="+")

        self._sync()

    # ---------- events ----------
    def _on_key(self, event=None):
        raw = self.entry.get_text()
        if raw == self.picker.text:
            # cursor keys, modifiers
            return
        self.picker.on_text_input(raw)
        self._sync()

    def _toggle(self):
        self.picker.on_toggle_open()
        self._sync()

    def _on_day(self, date_obj):
        self.picker.on_day_selected(date_obj)
        self._sync()

    def _on_prev(self):
        self.picker.on_navigate_previous_month()
        self._sync()

    def _on_next(self):
        self.picker.on_navigate_next_month()
        self._sync()

    def _on_close(self):
        # closing the popup window counts as leaving the picker
        self.picker.on_outside_interaction()
        self._sync()

    def _on_click_anywhere(self, event):
        if self._contains(event.widget):
            return
        self.picker.on_outside_interaction()
        self._sync()

    def _on_value_change(self, value):
        self._value.set(value)
        logger.debug("%s changed to %r", self.field_name or self, value)
        if self.on_change:
            self.on_change(value)

    def _on_destroy(self, event):
        if event.widget is self:
            self._watch.detach()

    # ---------- outside click source ----------
    def _subscribe_clicks(self, handler):
        top = self.winfo_toplevel()
        funcid = top.bind("<ButtonPress>", handler, add="+")

        def unsubscribe():
            try:
                top.unbind("<ButtonPress>", funcid)
            except tk.TclError:
                # toplevel already gone
                pass
        return unsubscribe

    def _contains(self, widget):
        return is_inside(str(widget), str(self))

    # ---------- rendering ----------
    def _sync(self):
        self.entry.set_text(self.picker.text)
        if self.picker.is_open:
            if self._popup is None:
                self._open_popup()
            else:
                self._popup.draw()
            self._watch.attach()
        else:
            self._watch.detach()
            if self._popup is not None:
                self._popup.destroy()
                self._popup = None

    def _open_popup(self):
        x = self.winfo_rootx()
        y = self.winfo_rooty() + self.winfo_height()
        self._popup = CalendarPopup(self, self.picker, on_day=self._on_day, on_prev=self._on_prev,
                                    on_next=self._on_next, on_close=self._on_close)
        self._popup.update_idletasks()
        self._popup.geometry(f"+{x}+{y}")

    # ---------- API ----------
    @property
    def is_open(self):
        return self.picker.is_open

    def get_date(self):
        return self._value.get()

    def set_date(self, date_obj_or_str):
        if isinstance(date_obj_or_str, datetime.datetime):
            date_obj_or_str = date_obj_or_str.date()
        if isinstance(date_obj_or_str, datetime.date):
            date_obj_or_str = CalendarDate.from_date(date_obj_or_str)

        if isinstance(date_obj_or_str, CalendarDate):
            self.picker.on_day_selected(date_obj_or_str)
        else:
            self.picker.reset(date_obj_or_str or None)
            self._value.set(self.picker.value)
        self._sync()

    def form_fields(self):
        if not self.field_name:
            return {}
        return self.picker.form_fields(self.field_name)
