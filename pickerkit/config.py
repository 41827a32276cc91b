# config.py
import os

# ttkbootstrap theme used by the demo window
THEME = os.environ.get("PICKERKIT_THEME", "litera")

LOG_LEVEL = os.environ.get("PICKERKIT_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "[%(levelname)s] %(asctime)s - %(message)s"

# ---------- Display locale (fr-FR only) ----------
PLACEHOLDER = "jj/mm/aaaa"

MONTH_NAMES = (
    "janvier", "février", "mars", "avril", "mai", "juin",
    "juillet", "août", "septembre", "octobre", "novembre", "décembre",
)

# Monday first
WEEKDAY_LABELS = ("Lu", "Ma", "Me", "Je", "Ve", "Sa", "Di")

# ---------- Formats ----------
DISPLAY_SEPARATOR = "/"
DISPLAY_DIGITS = 8

# Supported year range of the month cursor
MIN_YEAR = 1
MAX_YEAR = 9999
