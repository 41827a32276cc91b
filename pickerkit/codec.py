# codec.py
import datetime
import logging
import re
from dataclasses import dataclass

from dateutil import parser as date_parser

from pickerkit.config import DISPLAY_SEPARATOR
from pickerkit.validator import is_valid_date

logger = logging.getLogger(__name__)

_re_number = re.compile(r"[0-9]+")


@dataclass(frozen=True, order=True)
class CalendarDate:
    """
    A date without time of day or timezone. ``month`` is 0-based.

    Construction validates the triple, so an instance never holds Feb 30.
    """
    year: int
    month: int
    day: int

    def __post_init__(self):
        if not is_valid_date(self.day, self.month, self.year):
            raise ValueError(f"invalid date: {self.day}/{self.month + 1}/{self.year}")

    @classmethod
    def from_date(cls, d):
        return cls(d.year, d.month - 1, d.day)

    def to_date(self):
        return datetime.date(self.year, self.month + 1, self.day)

    def weekday(self):
        # Monday=0 .. Sunday=6
        return self.to_date().weekday()


# ---------- Formatting ----------
def to_display(d: CalendarDate) -> str:
    return f"{d.day:02d}{DISPLAY_SEPARATOR}{d.month + 1:02d}{DISPLAY_SEPARATOR}{d.year:04d}"


def to_storage(d: CalendarDate) -> str:
    return f"{d.year:04d}-{d.month + 1:02d}-{d.day:02d}"


# ---------- Parsing ----------
def parse_display(text):
    """
    Parse ``DD/MM/YYYY`` into a CalendarDate, or return None.
    """
    parts = (text or "").split(DISPLAY_SEPARATOR)
    if len(parts) != 3:
        return None
    if not all(_re_number.fullmatch(p) for p in parts):
        return None
    day, month, year = int(parts[0]), int(parts[1]) - 1, int(parts[2])

    if not is_valid_date(day, month, year):
        return None

    # rebuild from the first of the month plus an offset: a day that does
    # not exist in the month would roll over into the next one
    try:
        derived = datetime.date(year, month + 1, 1) + datetime.timedelta(days=day - 1)
    except (ValueError, OverflowError):
        # past datetime.MAXYEAR
        return None
    if (derived.year, derived.month - 1, derived.day) != (year, month, day):
        return None
    return CalendarDate(year, month, day)


def from_storage(text):
    """
    Parse a storage value (``YYYY-MM-DD``) or any date string dateutil
    understands. Only the calendar date is kept. Returns None on failure.
    """
    text = (text or "").strip()
    if not text:
        return None
    try:
        return CalendarDate.from_date(datetime.date.fromisoformat(text))
    except ValueError:
        pass
    try:
        parsed = date_parser.parse(text)
    except (ValueError, OverflowError) as e:
        logger.debug("Unparseable date value %r: %s", text, e)
        return None
    return CalendarDate.from_date(parsed.date())
