"""Smallest circle containing three celestial bodies."""

import math

from meeus.base import hav


def smallest(r1, d1, r2, d2, r3, d3):
    """Find the smallest circle containing three points.

    Arguments are right ascension/declination or longitude/latitude pairs in
    radians.  Returns ``(diameter, type_i)`` where ``type_i`` is true when
    two points lie on the circle and one inside, false when all three lie
    on it.
    """
    cd1 = math.cos(d1)
    cd2 = math.cos(d2)
    cd3 = math.cos(d3)
    a = 2 * math.asin(math.sqrt(hav(d2 - d1) + cd1 * cd2 * hav(r2 - r1)))
    b = 2 * math.asin(math.sqrt(hav(d3 - d2) + cd2 * cd3 * hav(r3 - r2)))
    c = 2 * math.asin(math.sqrt(hav(d1 - d3) + cd3 * cd1 * hav(r1 - r3)))
    if b > a:
        a, b = b, a
    if c > a:
        a, c = c, a
    if a * a >= b * b + c * c:
        return a, True
    diameter = 2 * a * b * c / math.sqrt(
        (a + b + c) * (a + b - c) * (b + c - a) * (a + c - b)
    )
    return diameter, False