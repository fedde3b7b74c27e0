"""Constants and helper functions shared by the other modules.

Angles are plain floats in radians throughout the package.  Times given
as ``Time`` quantities are plain floats in seconds.
"""

import math

#: Gaussian gravitational constant.
K = 0.01720209895

#: One astronomical unit in km.
AU = 149597870

#: Sine and cosine of the obliquity of the ecliptic at J2000.
S_OBL_J2000 = 0.397777156
C_OBL_J2000 = 0.917482062

#: Julian date of the modified Julian date epoch.
J_MOD = 2400000.5

#: Julian date corresponding to January 1.5, year 2000.
J2000 = 2451545.0

J1900 = 2415020.0
B1900 = 2415020.3135
B1950 = 2433282.4235

JULIAN_YEAR = 365.25
JULIAN_CENTURY = 36525
BESSELIAN_YEAR = 365.2421988

TWO_PI = 2 * math.pi

#: Threshold for switching between trigonometric and Pythagorean forms: 10′.
SMALL_ANGLE = math.radians(10 / 60)
COS_SMALL_ANGLE = math.cos(SMALL_ANGLE)


def light_time(distance):
    """Return the time in days for light to travel ``distance`` AU."""
    return 0.0057755183 * distance


def julian_year_to_jde(jy):
    """Return the Julian ephemeris day for a Julian year."""
    return J2000 + JULIAN_YEAR * (jy - 2000)


def jde_to_julian_year(jde):
    """Return the Julian year for a Julian ephemeris day."""
    return 2000 + (jde - J2000) / JULIAN_YEAR


def besselian_year_to_jde(by):
    """Return the Julian ephemeris day for a Besselian year."""
    return B1900 + BESSELIAN_YEAR * (by - 1900)


def jde_to_besselian_year(jde):
    """Return the Besselian year for a Julian ephemeris day."""
    return 1900 + (jde - B1900) / BESSELIAN_YEAR


def j2000_century(jde):
    """Return the number of Julian centuries since J2000."""
    return (jde - J2000) / JULIAN_CENTURY


def hav(a):
    """Haversine of angle ``a`` (radians)."""
    return 0.5 * (1 - math.cos(a))


def horner(x, *args):
    """Evaluate the polynomial with coefficients ``args`` at ``x``.

    The constant term comes first.  At least one coefficient is required.
    """
    if not args:
        raise ValueError("horner requires at least one coefficient")
    y = 0.0
    for c in reversed(args):
        y = y * x + c
    return y


def floor_div(x, y):
    """Integer floor of ``x / y``; raises ZeroDivisionError for ``y == 0``."""
    return x // y


def cmp(a, b):
    """Return -1, 0 or 1 as ``a`` is less than, equal to or greater than ``b``."""
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def pmod(x, y):
    """Return ``x`` reduced to the range ``[0, y)`` for positive ``y``."""
    r = math.fmod(x, y)
    if r < 0:
        r += y
    return r


def angle_from_dms(negative, degrees, minutes, seconds):
    """Return an angle in radians from sexagesimal degrees, minutes, seconds."""
    deg = degrees + minutes / 60 + seconds / 3600
    if negative:
        deg = -deg
    return math.radians(deg)


def ra_from_hms(hours, minutes, seconds):
    """Return a right ascension in radians, in ``[0, 2π)``, from h, m, s."""
    hrs = hours + minutes / 60 + seconds / 3600
    return pmod(math.radians(hrs * 15), TWO_PI)


def angle_from_sec(seconds):
    """Return an angle in radians from arc seconds."""
    return math.radians(seconds / 3600)


def time_to_rad(seconds):
    """Convert a time in seconds to the equivalent angle of rotation in radians."""
    return seconds / 86400 * TWO_PI


def illuminated(i):
    """Illuminated fraction of a body's disk for phase angle ``i``."""
    return (1 + math.cos(i)) * 0.5


def limb(ra, dec, ra0, dec0):
    """Position angle of the midpoint of the illuminated limb.

    ``ra``, ``dec`` are the body's equatorial coordinates; ``ra0``, ``dec0``
    the apparent coordinates of the Sun.
    """
    sd, cd = math.sin(dec), math.cos(dec)
    sd0, cd0 = math.sin(dec0), math.cos(dec0)
    sda, cda = math.sin(ra0 - ra), math.cos(ra0 - ra)
    chi = math.atan2(cd0 * sda, sd0 * cd - cd0 * sd * cda)
    if chi < 0:
        chi += TWO_PI
    return chi