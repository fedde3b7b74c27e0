"""Date of Easter in the Gregorian and Julian calendars."""


def gregorian(year):
    """Return ``(month, day)`` of Easter in the Gregorian calendar."""
    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month, p = divmod(h + l - 7 * m + 114, 31)
    return month, p + 1


def julian(year):
    """Return ``(month, day)`` of Easter in the Julian calendar."""
    a = year % 4
    b = year % 7
    c = year % 19
    d = (19 * c + 15) % 30
    e = (2 * a + 4 * b - d + 34) % 7
    month, g = divmod(d + e + 114, 31)
    return month, g + 1