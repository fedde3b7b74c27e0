"""Aberration by the Ron-Vondrák expression.

Angles are in radians.  ``jde`` is a Julian ephemeris day.
"""

import math
from dataclasses import dataclass

from meeus.base import j2000_century

# Speed of light in units of 1e-8 AU per day.
_C = 17314463350


@dataclass(frozen=True)
class _Arguments:
    t: float
    l2: float
    l3: float
    l4: float
    l5: float
    l6: float
    l7: float
    l8: float
    lp: float
    d: float
    mp: float
    f: float

    @classmethod
    def at(cls, t):
        return cls(
            t=t,
            l2=3.1761467 + 1021.3285546 * t,
            l3=1.7534703 + 628.3075849 * t,
            l4=6.2034809 + 334.0612431 * t,
            l5=0.5995465 + 52.9690965 * t,
            l6=0.8740168 + 21.3299095 * t,
            l7=5.4812939 + 7.4781599 * t,
            l8=5.3118863 + 3.8133036 * t,
            lp=3.8103444 + 8399.6847337 * t,
            d=5.1984667 + 7771.3771486 * t,
            mp=2.3555559 + 8328.6914289 * t,
            f=1.6279052 + 8433.4661601 * t,
        )


def _sc(a):
    return math.sin(a), math.cos(a)


def _terms(r):
    """Yield the 36 velocity terms (x, y, z) in the order of the table."""
    t = r.t
    s, c = _sc(r.l3)
    yield (
        (-1719914 - 2 * t) * s - 25 * c,
        (25 - 13 * t) * s + (1578089 + 156 * t) * c,
        (10 + 32 * t) * s + (684185 - 358 * t) * c,
    )
    s, c = _sc(2 * r.l3)
    yield (
        (6434 + 141 * t) * s + (28007 - 107 * t) * c,
        (25697 - 95 * t) * s + (-5904 - 130 * t) * c,
        (11141 - 48 * t) * s + (-2559 - 55 * t) * c,
    )
    s, c = _sc(r.l5)
    yield 715 * s, 6 * s - 657 * c, -15 * s - 282 * c
    s, c = _sc(r.lp)
    yield 715 * s, -656 * c, -285 * c
    s, c = _sc(3 * r.l3)
    yield (
        (486 - 5 * t) * s + (-236 - 4 * t) * c,
        (-216 - 4 * t) * s + (-446 + 5 * t) * c,
        -94 * s - 193 * c,
    )
    s, c = _sc(r.l6)
    yield 159 * s, 2 * s - 147 * c, -6 * s - 61 * c
    c = math.cos(r.f)
    yield 0.0, 26 * c, -59 * c
    s, c = _sc(r.lp + r.mp)
    yield 39 * s, -36 * c, -16 * c
    s, c = _sc(2 * r.l5)
    yield 33 * s - 10 * c, -9 * s - 30 * c, -5 * s - 13 * c
    s, c = _sc(2 * r.l3 - r.l5)
    yield 31 * s + c, s - 28 * c, -12 * c
    s, c = _sc(3 * r.l3 - 8 * r.l4 + 3 * r.l5)
    yield 8 * s - 28 * c, 25 * s + 8 * c, 11 * s + 3 * c
    s, c = _sc(5 * r.l3 - 8 * r.l4 + 3 * r.l5)
    yield 8 * s - 28 * c, -25 * s - 8 * c, -11 * s - 3 * c
    s, c = _sc(2 * r.l2 - r.l3)
    yield 21 * s, -19 * c, -8 * c
    s, c = _sc(r.l2)
    yield -19 * s, 17 * c, 8 * c
    s, c = _sc(r.l7)
    yield 17 * s, -16 * c, -7 * c
    s, c = _sc(r.l3 - 2 * r.l5)
    yield 16 * s, 15 * c, s + 7 * c
    s, c = _sc(r.l8)
    yield 16 * s, s - 15 * c, -3 * s - 6 * c
    s, c = _sc(r.l3 + r.l5)
    yield 11 * s - c, -s - 10 * c, -s - 5 * c
    s, c = _sc(2 * r.l2 - 2 * r.l3)
    yield -11 * c, -10 * s, -4 * s
    s, c = _sc(r.l3 - r.l5)
    yield -11 * s - 2 * c, -2 * s + 9 * c, -s + 4 * c
    s, c = _sc(4 * r.l3)
    yield -7 * s - 8 * c, -8 * s + 6 * c, -3 * s + 3 * c
    s, c = _sc(3 * r.l3 - 2 * r.l5)
    yield -10 * s, 9 * c, 4 * c
    s, c = _sc(r.l2 - 2 * r.l3)
    yield -9 * s, -9 * c, -4 * c
    s, c = _sc(2 * r.l2 - 3 * r.l3)
    yield -9 * s, -8 * c, -4 * c
    s, c = _sc(2 * r.l6)
    yield -9 * c, -8 * s, -3 * s
    s, c = _sc(2 * r.l2 - 4 * r.l3)
    yield -9 * c, 8 * s, 3 * s
    s, c = _sc(3 * r.l3 - 2 * r.l4)
    yield 8 * s, -8 * c, -3 * c
    s, c = _sc(r.lp + 2 * r.d - r.mp)
    yield 8 * s, -7 * c, -3 * c
    s, c = _sc(8 * r.l2 - 12 * r.l3)
    yield -4 * s - 7 * c, -6 * s + 4 * c, -3 * s + 2 * c
    s, c = _sc(8 * r.l2 - 14 * r.l3)
    yield -4 * s - 7 * c, 6 * s - 4 * c, 3 * s - 2 * c
    s, c = _sc(2 * r.l4)
    yield -6 * s - 5 * c, -4 * s + 5 * c, -2 * s + 2 * c
    s, c = _sc(3 * r.l2 - 4 * r.l3)
    yield -s - c, -2 * s - 7 * c, s - 4 * c
    s, c = _sc(2 * r.l3 - 2 * r.l5)
    yield 4 * s - 6 * c, -5 * s - 4 * c, -2 * s - 2 * c
    s, c = _sc(3 * r.l2 - 3 * r.l3)
    yield -7 * c, -6 * s, -3 * s
    s, c = _sc(2 * r.l3 - 2 * r.l4)
    yield 5 * s - 5 * c, -4 * s - 5 * c, -2 * s - 2 * c
    s, c = _sc(r.lp - 2 * r.d)
    yield 5 * s, -5 * c, -2 * c


def aberration_ron_vondrak(ra, dec, jde):
    """Corrections due to aberration for equatorial coordinates.

    Returns ``(d_ra, d_dec)`` in radians, computed with the Ron-Vondrák
    expression.
    """
    terms = list(_terms(_Arguments.at(j2000_century(jde))))
    xp = yp = zp = 0.0
    # Smaller terms are summed first.
    for x, y, z in reversed(terms):
        xp += x
        yp += y
        zp += z
    sa, ca = math.sin(ra), math.cos(ra)
    sd, cd = math.sin(dec), math.cos(dec)
    d_ra = (yp * ca - xp * sa) / (_C * cd)
    d_dec = -((xp * ca + yp * sa) * sd - zp * cd) / _C
    return d_ra, d_dec