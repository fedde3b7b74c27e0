"""Angular separation and relative position of two celestial bodies.

Coordinates are given as ``r, d`` pairs in radians.  They may be right
ascension and declination, longitude and latitude, or any similar frame.
"""

import math

from meeus.base import COS_SMALL_ANGLE, hav


def sep(r1, d1, r2, d2):
    """Angular separation between two bodies.

    The direct cosine formula is used, with a flat approximation for
    separations under 10′.  It is unstable for separations near π.
    """
    sd1, cd1 = math.sin(d1), math.cos(d1)
    sd2, cd2 = math.sin(d2), math.cos(d2)
    cd = sd1 * sd2 + cd1 * cd2 * math.cos(r1 - r2)
    if cd < COS_SMALL_ANGLE:
        return math.acos(cd)
    dm = (d1 + d2) / 2
    return math.hypot((r2 - r1) * math.cos(dm), d2 - d1)


def sep_hav(r1, d1, r2, d2):
    """Angular separation between two bodies by the haversine formula."""
    return 2 * math.asin(
        math.sqrt(hav(d2 - d1) + math.cos(d1) * math.cos(d2) * hav(r2 - r1))
    )


def sep_pauwels(r1, d1, r2, d2):
    """Angular separation between two bodies, numerically stable form."""
    sd1, cd1 = math.sin(d1), math.cos(d1)
    sd2, cd2 = math.sin(d2), math.cos(d2)
    cdr = math.cos(r2 - r1)
    x = cd1 * sd2 - sd1 * cd2 * cdr
    y = cd2 * math.sin(r2 - r1)
    z = sd1 * sd2 + cd1 * cd2 * cdr
    return math.atan2(math.hypot(x, y), z)


def relative_position(r1, d1, r2, d2):
    """Position angle of body 1 relative to body 2, counter-clockwise from north."""
    sdr, cdr = math.sin(r1 - r2), math.cos(r1 - r2)
    sd2, cd2 = math.sin(d2), math.cos(d2)
    return math.atan2(sdr, cd2 * math.tan(d1) - sd2 * cdr)