"""Illuminated fraction of a planet's disk, and planetary magnitudes.

Distances are in AU and angles in radians.  The illuminated fraction for a
given phase angle is :func:`meeus.base.illuminated`.
"""

import math

from meeus.base import horner, j2000_century


def phase_angle(r, delta, big_r):
    """Phase angle of a planet.

    ``r`` is the planet's distance to the Sun, ``delta`` its distance to the
    Earth and ``big_r`` the distance from the Sun to the Earth.
    """
    return math.acos((r * r + delta * delta - big_r * big_r) / (2 * r * delta))


def fraction(r, delta, big_r):
    """Illuminated fraction of a planet's disk from the three distances."""
    s = r + delta
    return (s * s - big_r * big_r) / (4 * r * delta)


def phase_angle2(lon, lat, r, lon0, r0, delta):
    """Phase angle from heliocentric ecliptical coordinates.

    ``lon``, ``lat``, ``r`` are the planet's coordinates, ``lon0``, ``r0``
    the Earth's longitude and radius and ``delta`` the Earth-planet distance.
    """
    return math.acos((r - r0 * math.cos(lat) * math.cos(lon - lon0)) / delta)


def phase_angle3(lon, lat, x, y, z, delta):
    """Phase angle from heliocentric longitude and latitude and the planet's
    geocentric rectangular coordinates ``x``, ``y``, ``z``."""
    sl, cl = math.sin(lon), math.cos(lon)
    sb, cb = math.sin(lat), math.cos(lat)
    return math.acos((x * cb * cl + y * cb * sl + z * sb) / delta)


def fraction_venus(jde):
    """Approximate illuminated fraction of Venus at ``jde``."""
    p = math.pi / 180
    t = j2000_century(jde)
    v = 261.51 * p + 22518.443 * p * t
    m = 177.53 * p + 35999.05 * p * t
    n = 50.42 * p + 58517.811 * p * t
    w = v + 1.91 * p * math.sin(m) + 0.78 * p * math.sin(n)
    d = math.sqrt(1.52321 + 1.44666 * math.cos(w))
    s = 0.72333 + d
    return (s * s - 1) / 2.89332 / d


def _dist_term(r, delta):
    return 5 * math.log10(r * delta)


def mercury(r, delta, i):
    """Visual magnitude of Mercury for phase angle ``i``."""
    s = math.degrees(i) - 50
    return 1.16 + _dist_term(r, delta) + (0.02838 + 0.0001023 * s) * s


def venus(r, delta, i):
    """Visual magnitude of Venus for phase angle ``i``."""
    d = math.degrees(i)
    return -4 + _dist_term(r, delta) + (0.01322 + 0.0000004247 * d * d) * d


def mars(r, delta, i):
    """Visual magnitude of Mars for phase angle ``i``."""
    return -1.3 + _dist_term(r, delta) + 0.01486 * math.degrees(i)


def jupiter(r, delta):
    """Visual magnitude of Jupiter."""
    return -8.93 + _dist_term(r, delta)


def _ring_term(b, du):
    s = abs(math.sin(b))
    return 0.044 * abs(math.degrees(du)) - 2.6 * s + 1.25 * s * s


def saturn(r, delta, b, du):
    """Visual magnitude of Saturn.

    ``b`` is the Saturnicentric latitude of the Earth referred to the ring
    plane, ``du`` the difference of the Saturnicentric longitudes of Sun and
    Earth measured in that plane.
    """
    return -8.68 + _dist_term(r, delta) + _ring_term(b, du)


def uranus(r, delta):
    """Visual magnitude of Uranus."""
    return -6.85 + _dist_term(r, delta)


def neptune(r, delta):
    """Visual magnitude of Neptune."""
    return -7.05 + _dist_term(r, delta)


def mercury84(r, delta, i):
    """Visual magnitude of Mercury, Astronomical Almanac 1984 formula."""
    return horner(
        math.degrees(i), -0.42 + _dist_term(r, delta), 0.038, -0.000273, 0.000002
    )


def venus84(r, delta, i):
    """Visual magnitude of Venus, Astronomical Almanac 1984 formula."""
    return horner(
        math.degrees(i), -4.4 + _dist_term(r, delta), 0.0009, 0.000239, -0.00000065
    )


def mars84(r, delta, i):
    """Visual magnitude of Mars, Astronomical Almanac 1984 formula."""
    return -1.52 + _dist_term(r, delta) + 0.016 * math.degrees(i)


def jupiter84(r, delta, i):
    """Visual magnitude of Jupiter, Astronomical Almanac 1984 formula."""
    return -9.4 + _dist_term(r, delta) + 0.005 * math.degrees(i)


def saturn84(r, delta, b, du):
    """Visual magnitude of Saturn, Astronomical Almanac 1984 formula."""
    return -8.88 + _dist_term(r, delta) + _ring_term(b, du)


def uranus84(r, delta):
    """Visual magnitude of Uranus, Astronomical Almanac 1984 formula."""
    return -7.19 + _dist_term(r, delta)


def neptune84(r, delta):
    """Visual magnitude of Neptune, Astronomical Almanac 1984 formula."""
    return -6.87 + _dist_term(r, delta)


def pluto84(r, delta):
    """Visual magnitude of Pluto, Astronomical Almanac 1984 formula."""
    return -1 + _dist_term(r, delta)