# picker.py
import datetime
import logging
from dataclasses import dataclass, replace
from typing import Callable, Optional

from pickerkit import codec, grid
from pickerkit.codec import CalendarDate
from pickerkit.config import DISPLAY_DIGITS
from pickerkit.grid import MonthCursor
from pickerkit.masks import format_input, only_digits

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PickerState:
    is_open: bool = False
    text: str = ""
    selected: Optional[CalendarDate] = None
    cursor: MonthCursor = MonthCursor(1970, 0)


class PickerMachine:
    """
    State of one date picker and the transitions external events trigger.

    ``on_change`` receives the committed value in storage format, or "" when
    the value is cleared. It is never called with half-typed text.
    """

    def __init__(self, initial_value=None, on_change: Optional[Callable[[str], None]] = None, today=None):
        self.on_change = on_change
        self._today = today or datetime.date.today

        selected = codec.from_storage(initial_value) if initial_value else None
        if selected is not None:
            self._state = PickerState(
                text=codec.to_display(selected),
                selected=selected,
                cursor=MonthCursor.of(selected),
            )
        else:
            if initial_value:
                logger.info("Ignoring unparseable initial value %r", initial_value)
            self._state = PickerState(cursor=MonthCursor.from_date(self._today()))

    # ---------- Read side ----------
    @property
    def state(self):
        # frozen dataclass, safe to hand out
        return self._state

    @property
    def is_open(self):
        return self._state.is_open

    @property
    def text(self):
        return self._state.text

    @property
    def selected(self):
        return self._state.selected

    @property
    def cursor(self):
        return self._state.cursor

    @property
    def value(self):
        sel = self._state.selected
        return codec.to_storage(sel) if sel is not None else ""

    @property
    def caption(self):
        return tuple(self._state.cursor)

    def days(self):
        return grid.generate(self._state.cursor, self._state.selected)

    def form_fields(self, name):
        """Values a surrounding form submits: the hidden field and the visible one."""
        return {name: self.value, f"{name}-display": self._state.text}

    # ---------- Transitions ----------
    def on_text_input(self, raw):
        if not (raw or "").strip():
            self._set(text="", selected=None)
            self._emit("")
            return

        text = format_input(raw)
        if len(only_digits(text)) < DISPLAY_DIGITS:
            # keep the mask so the user can finish typing
            self._set(text=text, selected=None)
            self._emit("")
            return

        date = codec.parse_display(text)
        if date is None:
            logger.info("Rejected impossible date %r", text)
            self._set(text="", selected=None)
            self._emit("")
            return

        self._set(text=text, selected=date, cursor=MonthCursor.of(date))
        self._emit(codec.to_storage(date))

    def on_day_selected(self, date: CalendarDate):
        # spill-over days past Dec 9999 have no DD/MM/YYYY form
        if codec.parse_display(codec.to_display(date)) != date:
            logger.info("Ignoring unselectable day %s", date)
            return
        self._set(text=codec.to_display(date), selected=date, is_open=False)
        self._emit(codec.to_storage(date))

    def on_toggle_open(self):
        self._set(is_open=not self._state.is_open)

    def on_outside_interaction(self):
        if self._state.is_open:
            self._set(is_open=False)

    def on_navigate_previous_month(self):
        self._set(cursor=self._state.cursor.shifted(-1))

    def on_navigate_next_month(self):
        self._set(cursor=self._state.cursor.shifted(1))

    def reset(self, value=None):
        """Reseed from an external value, as on mount. Does not notify."""
        selected = codec.from_storage(value) if value else None
        if selected is None:
            self._set(text="", selected=None)
        else:
            self._set(text=codec.to_display(selected), selected=selected, cursor=MonthCursor.of(selected))

    # ---------- helpers ----------
    def _set(self, **changes):
        self._state = replace(self._state, **changes)
        logger.debug("Picker state: %s", self._state)

    def _emit(self, value):
        if self.on_change:
            self.on_change(value)


class OutsideClickWatch:
    """
    Scoped subscription to "pointer pressed outside the picker" events.

    ``subscribe(handler)`` registers ``handler`` with whatever event source the
    UI uses and returns a callable that removes it again.
    """

    def __init__(self, subscribe, handler):
        self._subscribe = subscribe
        self._handler = handler
        self._unsubscribe = None

    @property
    def attached(self):
        return self._unsubscribe is not None

    def attach(self):
        if self._unsubscribe is None:
            self._unsubscribe = self._subscribe(self._handler)

    def detach(self):
        if self._unsubscribe is not None:
            unsubscribe, self._unsubscribe = self._unsubscribe, None
            unsubscribe()

    def __enter__(self):
        self.attach()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.detach()
        return False
