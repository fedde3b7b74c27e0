"""Binary stars."""

import math

from meeus.base import TWO_PI, pmod


def mean_anomaly(year, t, p):
    """Mean anomaly in radians for a date.

    ``year`` is the decimal year of the date, ``t`` the time of periastron
    as a decimal year, ``p`` the period of revolution in mean solar years.
    """
    n = TWO_PI / p
    return pmod(n * (year - t), TWO_PI)


def position(e, a, i, node, peri, ecc_anomaly):
    """Apparent position angle and angular distance of a binary's components.

    ``e`` is the eccentricity of the true orbit, ``a`` the angular apparent
    semimajor axis, ``i`` the inclination, ``node`` the position angle of the
    ascending node, ``peri`` the longitude of periastron and ``ecc_anomaly``
    the eccentric anomaly.  Returns ``(theta, rho)``.
    """
    r = a * (1 - e * math.cos(ecc_anomaly))
    nu = 2 * math.atan(math.sqrt((1 + e) / (1 - e)) * math.tan(ecc_anomaly / 2))
    s, c = math.sin(nu + peri), math.cos(nu + peri)
    num = s * math.cos(i)
    theta = pmod(math.atan2(num, c) + node, TWO_PI)
    rho = r * math.sqrt(num * num + c * c)
    return theta, rho


def apparent_eccentricity(e, i, peri):
    """Apparent eccentricity of a binary star from its true orbital elements."""
    ci = math.cos(i)
    sw, cw = math.sin(peri), math.cos(peri)
    A = (1 - e * e * cw * cw) * ci * ci
    B = e * e * sw * cw * ci
    C = 1 - e * e * sw * sw
    d = A - C
    sD = math.sqrt(d * d + 4 * B * B)
    return math.sqrt(2 * sD / (A + C + sD))