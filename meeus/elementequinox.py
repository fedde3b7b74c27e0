"""Reduction of ecliptical orbital elements from one equinox to another."""

import math
from dataclasses import dataclass

from meeus.base import TWO_PI, pmod


@dataclass(frozen=True)
class Elements:
    """Orbital elements that change with the equinox, in radians.

    ``inc`` is the inclination, ``peri`` the argument of perihelion and
    ``node`` the longitude of the ascending node.
    """

    inc: float
    peri: float
    node: float


_LP = math.radians(4.50001688)
_L = math.radians(5.19856209)
_J = math.radians(0.00651966)


def reduce_b1950_to_j2000(elements):
    """Reduce elements from equinox B1950 to J2000."""
    s = 0.0001139788
    c = 0.9999999935
    w = elements.node - math.radians(174.298782)
    si, ci = math.sin(elements.inc), math.cos(elements.inc)
    sw, cw = math.sin(w), math.cos(w)
    a = si * sw
    b = c * si * cw - s * ci
    inc = math.asin(math.hypot(a, b))
    node = pmod(math.radians(174.997194) + math.atan2(a, b), TWO_PI)
    peri = pmod(elements.peri + math.atan2(-s * sw, c * si - s * ci * cw), TWO_PI)
    return Elements(inc=inc, peri=peri, node=node)


def reduce_b1950_fk4_to_j2000_fk5(elements):
    """Reduce elements from equinox B1950 (FK4) to J2000 (FK5)."""
    w = _L + elements.node
    si, ci = math.sin(elements.inc), math.cos(elements.inc)
    sj, cj = math.sin(_J), math.cos(_J)
    sw, cw = math.sin(w), math.cos(w)
    inc = math.acos(ci * cj - si * sj * cw)
    node = pmod(math.atan2(si * sw, ci * sj + si * cj * cw) - _LP, TWO_PI)
    peri = pmod(elements.peri + math.atan2(sj * sw, si * cj + ci * sj * cw), TWO_PI)
    return Elements(inc=inc, peri=peri, node=node)