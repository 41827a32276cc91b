# validator.py

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year):
    return year % 400 == 0 or (year % 100 != 0 and year % 4 == 0)


def days_in_month(month, year):
    """Length of a month, ``month`` being 0-based (0 = January)."""
    if month == 1 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month]


def is_valid_date(day, month, year):
    """True if (day, 0-based month, year) names a real Gregorian date."""
    if year < 1 or month < 0 or month > 11 or day < 1:
        return False
    return day <= days_in_month(month, year)
