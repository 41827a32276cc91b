"""
Smoke tests for the tkinter widgets. Skipped when no display is available.
"""

import datetime

import pytest

tk = pytest.importorskip("tkinter")

from pickerkit.codec import CalendarDate  # noqa: E402
from pickerkit.widgets import DateEntry, is_inside  # noqa: E402


def test_is_inside_matches_own_subtree_only():
    assert is_inside(".!frame.!dateentry", ".!frame.!dateentry")
    assert is_inside(".!frame.!dateentry.!placeholderentry", ".!frame.!dateentry")
    assert is_inside(".!frame.!dateentry.!calendarpopup.!frame", ".!frame.!dateentry")
    assert not is_inside(".!frame.!dateentry2", ".!frame.!dateentry")
    assert not is_inside(".!frame", ".!frame.!dateentry")
    assert not is_inside(".!frame.!button", ".!frame.!dateentry")
    assert is_inside(".!frame", ".")


@pytest.fixture
def root():
    try:
        r = tk.Tk()
    except tk.TclError:
        pytest.skip("no display available")
    r.withdraw()
    yield r
    r.destroy()


def test_date_entry_initial_value(root):
    w = DateEntry(root, field_name="due", initial_date=datetime.date(2024, 3, 15))
    assert w.get_date() == "2024-03-15"
    assert w.entry.get_text() == "15/03/2024"
    assert w.form_fields() == {"due": "2024-03-15", "due-display": "15/03/2024"}


def test_date_entry_typing(root):
    values = []
    w = DateEntry(root, on_change=values.append)
    w.entry.set_text("31/02/2024")
    w._on_key()
    assert w.entry.get_text() == ""
    assert values == [""]

    w.entry.set_text("29022024")
    w._on_key()
    assert w.entry.get_text() == "29/02/2024"
    assert w.get_date() == "2024-02-29"
    assert values[-1] == "2024-02-29"


def test_date_entry_popup_lifecycle(root):
    w = DateEntry(root, initial_date="2024-02-14")
    w.pack()
    w._toggle()
    assert w.is_open
    assert w._popup is not None
    assert w._popup.caption_text() == "février 2024"
    w._on_prev()
    assert w._popup.caption_text() == "janvier 2024"
    w._on_day(CalendarDate(2024, 0, 3))
    assert not w.is_open
    assert w._popup is None
    assert w.get_date() == "2024-01-03"


def test_date_entry_set_date(root):
    w = DateEntry(root)
    w.set_date(datetime.date(2024, 7, 4))
    assert w.get_date() == "2024-07-04"
    w.set_date("")
    assert w.get_date() == ""
    assert w.entry.get_text() == ""


def test_outside_click_closes_and_inside_click_does_not(root):
    w = DateEntry(root)
    other = tk.Label(root, text="x")
    w._toggle()

    class Event:
        pass

    inside = Event()
    inside.widget = w.entry
    w._on_click_anywhere(inside)
    assert w.is_open

    outside = Event()
    outside.widget = other
    w._on_click_anywhere(outside)
    assert not w.is_open
    assert not w._watch.attached


def test_paste_reaches_the_picker(root):
    w = DateEntry(root)
    root.clipboard_clear()
    root.clipboard_append("15032024")
    w.entry.event_generate("<<Paste>>")
    root.update()
    assert w.get_date() == "2024-03-15"
    assert w.entry.get_text() == "15/03/2024"
