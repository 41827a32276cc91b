# grid.py
import calendar
from typing import NamedTuple, Optional

from pickerkit.codec import CalendarDate
from pickerkit.config import MAX_YEAR, MIN_YEAR, WEEKDAY_LABELS

# Monday first, whatever the process locale says
_calendar = calendar.Calendar(firstweekday=calendar.MONDAY)


class MonthCursor(NamedTuple):
    """The month shown in the grid. ``month`` is 0-based."""
    year: int
    month: int

    @classmethod
    def of(cls, d):
        return cls(d.year, d.month)

    @classmethod
    def from_date(cls, d):
        return cls(d.year, d.month - 1)

    def shifted(self, delta):
        y, m = divmod(self.year * 12 + self.month + delta, 12)
        if y < MIN_YEAR or y > MAX_YEAR:
            return self
        return MonthCursor(y, m)


class DayCell(NamedTuple):
    date: CalendarDate
    in_current_month: bool
    selected: bool


def generate(cursor: MonthCursor, selected: Optional[CalendarDate] = None):
    """
    Cells to render for ``cursor``'s month, whole weeks from the Monday on or
    before the 1st to the Sunday on or after the last day.
    """
    cells = []
    for y, m, d in _calendar.itermonthdays3(cursor.year, cursor.month + 1):
        day = CalendarDate(y, m - 1, d)
        cells.append(DayCell(
            date=day,
            in_current_month=(y, m - 1) == (cursor.year, cursor.month),
            selected=day == selected,
        ))
    return cells


def weeks(cells):
    return [cells[i:i + 7] for i in range(0, len(cells), 7)]


def weekday_labels():
    return list(WEEKDAY_LABELS)
