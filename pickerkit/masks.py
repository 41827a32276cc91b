# masks.py
import re

from pickerkit.config import DISPLAY_DIGITS, DISPLAY_SEPARATOR

# ASCII only: \D would keep fullwidth and Arabic-Indic digits
_re_digits = re.compile(r"[^0-9]+")


def only_digits(s: str) -> str:
    return _re_digits.sub("", s or "")


def mask_date(s: str) -> str:
    """
    Reformat whatever the user typed or pasted into ``DD/MM/YYYY``.

    Non-digits are dropped, at most 8 digits are kept and the separators are
    put back after the day and the month. Partial input stays partial:
    "1" -> "1", "150" -> "15/0", "15032024" -> "15/03/2024".
    """
    d = only_digits(s)[:DISPLAY_DIGITS]
    sep = DISPLAY_SEPARATOR
    if len(d) <= 2:
        return d
    if len(d) <= 4:
        return f"{d[:2]}{sep}{d[2:]}"
    return f"{d[:2]}{sep}{d[2:4]}{sep}{d[4:]}"


# the picker calls the formatter by this name
format_input = mask_date
