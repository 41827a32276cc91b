from pickerkit.codec import CalendarDate, from_storage, parse_display, to_display, to_storage
from pickerkit.grid import DayCell, MonthCursor, generate
from pickerkit.masks import format_input, mask_date, only_digits
from pickerkit.picker import OutsideClickWatch, PickerMachine, PickerState
from pickerkit.validator import days_in_month, is_leap_year, is_valid_date

__all__ = [
    "CalendarDate",
    "DayCell",
    "MonthCursor",
    "OutsideClickWatch",
    "PickerMachine",
    "PickerState",
    "days_in_month",
    "format_input",
    "from_storage",
    "generate",
    "is_leap_year",
    "is_valid_date",
    "mask_date",
    "only_digits",
    "parse_display",
    "to_display",
    "to_storage",
]
