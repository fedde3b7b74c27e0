"""Perigee and apogee of the Moon.

Results are Julian ephemeris days; parallaxes are in radians.
"""

import math
from dataclasses import dataclass

from meeus.base import angle_from_sec, horner

_CK = 1 / 1325.55
_P = math.pi / 180

# Periodic terms: (coefficient, coefficient of T, multiples of D, M, F).
_PERIGEE_TERMS = (
    (-1.6769, 0, 2, 0, 0),
    (0.4589, 0, 4, 0, 0),
    (-0.1856, 0, 6, 0, 0),
    (0.0883, 0, 8, 0, 0),
    (-0.0773, 0.00019, 2, -1, 0),
    (0.0502, -0.00013, 0, 1, 0),
    (-0.046, 0, 10, 0, 0),
    (0.0422, -0.00011, 4, -1, 0),
    (-0.0256, 0, 6, -1, 0),
    (0.0253, 0, 12, 0, 0),
    (0.0237, 0, 1, 0, 0),
    (0.0162, 0, 8, -1, 0),
    (-0.0145, 0, 14, 0, 0),
    (0.0129, 0, 0, 0, 2),
    (-0.0112, 0, 3, 0, 0),
    (-0.0104, 0, 10, -1, 0),
    (0.0086, 0, 16, 0, 0),
    (0.0069, 0, 12, -1, 0),
    (0.0066, 0, 5, 0, 0),
    (-0.0053, 0, 2, 0, 2),
    (-0.0052, 0, 18, 0, 0),
    (-0.0046, 0, 14, -1, 0),
    (-0.0041, 0, 7, 0, 0),
    (0.004, 0, 2, 1, 0),
    (0.0032, 0, 20, 0, 0),
    (-0.0032, 0, 1, 1, 0),
    (0.0031, 0, 16, -1, 0),
    (-0.0029, 0, 4, 1, 0),
    (0.0027, 0, 9, 0, 0),
    (0.0027, 0, 4, 0, 2),
    (-0.0027, 0, 2, -2, 0),
    (0.0024, 0, 4, -2, 0),
    (-0.0021, 0, 6, -2, 0),
    (-0.0021, 0, 22, 0, 0),
    (-0.0021, 0, 18, -1, 0),
    (0.0019, 0, 6, 1, 0),
    (-0.0018, 0, 11, 0, 0),
    (-0.0014, 0, 8, 1, 0),
    (-0.0014, 0, 4, 0, -2),
    (-0.0014, 0, 6, 0, 2),
    (0.0014, 0, 3, 1, 0),
    (-0.0014, 0, 5, 1, 0),
    (0.0013, 0, 13, 0, 0),
    (0.0013, 0, 20, -1, 0),
    (0.0011, 0, 3, 2, 0),
    (-0.0011, 0, 4, -2, 2),
    (-0.001, 0, 1, 2, 0),
    (-0.0009, 0, 22, -1, 0),
    (-0.0008, 0, 0, 0, 4),
    (0.0008, 0, 6, 0, -2),
    (0.0008, 0, 2, 1, -2),
    (0.0007, 0, 0, 2, 0),
    (0.0007, 0, 0, -1, 2),
    (0.0007, 0, 2, 0, 4),
    (-0.0006, 0, 0, -2, 2),
    (-0.0006, 0, 2, 2, -2),
    (0.0006, 0, 24, 0, 0),
    (0.0005, 0, 4, 0, -4),
    (0.0005, 0, 2, 2, 0),
    (-0.0004, 0, 1, -1, 0),
)

_APOGEE_TERMS = (
    (0.4392, 0, 2, 0, 0),
    (0.0684, 0, 4, 0, 0),
    (0.0456, -0.00011, 0, 1, 0),
    (0.0426, -0.00011, 2, -1, 0),
    (0.0212, 0, 0, 0, 2),
    (-0.0189, 0, 1, 0, 0),
    (0.0144, 0, 6, 0, 0),
    (0.0113, 0, 4, -1, 0),
    (0.0047, 0, 2, 0, 2),
    (0.0036, 0, 1, 1, 0),
    (0.0035, 0, 8, 0, 0),
    (0.0034, 0, 6, -1, 0),
    (-0.0034, 0, 2, 0, -2),
    (0.0022, 0, 2, -2, 0),
    (-0.0017, 0, 3, 0, 0),
    (0.0013, 0, 4, 0, 2),
    (0.0011, 0, 8, -1, 0),
    (0.001, 0, 4, -2, 0),
    (0.0009, 0, 10, 0, 0),
    (0.0007, 0, 3, 1, 0),
    (0.0006, 0, 0, 2, 0),
    (0.0005, 0, 2, 1, 0),
    (0.0005, 0, 2, 2, 0),
    (0.0004, 0, 6, 0, 2),
    (0.0004, 0, 6, -2, 0),
    (0.0004, 0, 10, -1, 0),
    (-0.0004, 0, 5, 0, 0),
    (-0.0004, 0, 4, 0, -2),
    (0.0003, 0, 0, 1, 2),
    (0.0003, 0, 12, 0, 0),
    (0.0003, 0, 2, -1, 2),
    (-0.0003, 0, 1, -1, 0),
)

_APOGEE_PARALLAX_TERMS = (
    (-9.147, 0, 2, 0, 0),
    (-0.841, 0, 1, 0, 0),
    (0.697, 0, 0, 0, 2),
    (-0.656, 0.0016, 0, 1, 0),
    (0.355, 0, 4, 0, 0),
    (0.159, 0, 2, -1, 0),
    (0.127, 0, 1, 1, 0),
    (0.065, 0, 4, -1, 0),
    (0.052, 0, 6, 0, 0),
    (0.043, 0, 2, 1, 0),
    (0.031, 0, 2, 0, 2),
    (-0.023, 0, 2, 0, -2),
    (0.022, 0, 2, -2, 0),
    (0.019, 0, 2, 2, 0),
    (-0.016, 0, 0, 2, 0),
    (0.014, 0, 6, -1, 0),
    (0.01, 0, 8, 0, 0),
)

_PERIGEE_PARALLAX_TERMS = (
    (63.224, 0, 2, 0, 0),
    (-6.990, 0, 4, 0, 0),
    (2.834, -0.0071, 2, -1, 0),
    (1.927, 0, 6, 0, 0),
    (-1.263, 0, 1, 0, 0),
    (-0.702, 0, 8, 0, 0),
    (0.696, -0.0017, 0, 1, 0),
    (-0.690, 0, 0, 0, 2),
    (-0.629, 0.0016, 4, -1, 0),
    (-0.392, 0, 2, 0, -2),
    (0.297, 0, 10, 0, 0),
    (0.260, 0, 6, -1, 0),
    (0.201, 0, 3, 0, 0),
    (-0.161, 0, 2, 1, 0),
    (0.157, 0, 1, 1, 0),
    (-0.138, 0, 12, 0, 0),
    (-0.127, 0, 8, -1, 0),
    (0.104, 0, 2, 0, 2),
    (0.104, 0, 2, -2, 0),
    (-0.079, 0, 5, 0, 0),
    (0.068, 0, 14, 0, 0),
    (0.067, 0, 10, -1, 0),
    (0.054, 0, 4, 1, 0),
    (-0.038, 0, 12, -1, 0),
    (-0.038, 0, 4, -2, 0),
    (0.037, 0, 7, 0, 0),
    (-0.037, 0, 4, 0, 2),
    (-0.035, 0, 16, 0, 0),
    (-0.030, 0, 3, 1, 0),
    (0.029, 0, 1, -1, 0),
    (-0.025, 0, 6, 1, 0),
    (0.023, 0, 0, 2, 0),
    (0.023, 0, 14, -1, 0),
    (-0.023, 0, 2, 2, 0),
    (0.022, 0, 6, -2, 0),
    (-0.021, 0, 2, -1, -2),
    (-0.020, 0, 9, 0, 0),
    (0.019, 0, 18, 0, 0),
    (0.017, 0, 6, 0, 2),
    (0.014, 0, 0, -1, 2),
    (-0.014, 0, 16, -1, 0),
    (0.013, 0, 4, 0, -2),
    (0.012, 0, 8, 1, 0),
    (0.011, 0, 11, 0, 0),
    (0.010, 0, 5, 1, 0),
    (-0.010, 0, 20, 0, 0),
)


def _mean(t):
    return horner(
        t, 2451534.6698, 27.55454989 / _CK, -0.0006691, -0.000001098, 0.0000000052
    )


def _snap(year, half):
    """Return k at the half ``half`` nearest the decimal year."""
    k = (year - 1999.97) * 13.2555
    return math.floor(k - half + 0.5) + half


@dataclass(frozen=True)
class _Arguments:
    t: float
    d: float
    m: float
    f: float

    @classmethod
    def for_year(cls, year, half):
        t = _snap(year, half) * _CK
        d = horner(
            t,
            171.9179 * _P,
            335.9106046 * _P / _CK,
            -0.0100383 * _P,
            -0.00001156 * _P,
            0.000000055 * _P,
        )
        m = horner(
            t, 347.3477 * _P, 27.1577721 * _P / _CK, -0.000813 * _P, -0.000001 * _P
        )
        f = horner(
            t, 316.6109 * _P, 364.5287911 * _P / _CK, -0.0125053 * _P, -0.0000148 * _P
        )
        return cls(t, d, m, f)

    def series(self, terms, trig):
        return sum(
            (c + ct * self.t) * trig(kd * self.d + km * self.m + kf * self.f)
            for c, ct, kd, km, kf in terms
        )


def mean_perigee(year):
    """JDE of the mean perigee of the Moon nearest the decimal year."""
    return _mean(_snap(year, 0) * _CK)


def perigee(year):
    """JDE of perigee of the Moon nearest the decimal year."""
    a = _Arguments.for_year(year, 0)
    return _mean(a.t) + a.series(_PERIGEE_TERMS, math.sin)


def mean_apogee(year):
    """JDE of the mean apogee of the Moon nearest the decimal year."""
    return _mean(_snap(year, 0.5) * _CK)


def apogee(year):
    """JDE of apogee of the Moon nearest the decimal year."""
    a = _Arguments.for_year(year, 0.5)
    return _mean(a.t) + a.series(_APOGEE_TERMS, math.sin)


def apogee_parallax(year):
    """Equatorial horizontal parallax of the Moon at the apogee nearest the year."""
    a = _Arguments.for_year(year, 0.5)
    return angle_from_sec(3245.251 + a.series(_APOGEE_PARALLAX_TERMS, math.cos))


def perigee_parallax(year):
    """Equatorial horizontal parallax of the Moon at the perigee nearest the year."""
    a = _Arguments.for_year(year, 0)
    return angle_from_sec(3629.215 + a.series(_PERIGEE_PARALLAX_TERMS, math.cos))