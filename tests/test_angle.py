import math

import pytest

from meeus.angle import relative_position, sep, sep_hav, sep_pauwels
from meeus.base import angle_from_dms, ra_from_hms

ARCSEC = math.radians(1 / 3600)

# Example 17.a, p. 110
R1 = ra_from_hms(14, 15, 39.7)
D1 = angle_from_dms(False, 19, 10, 57)
R2 = ra_from_hms(13, 25, 11.6)
D2 = angle_from_dms(True, 11, 9, 41)
EXPECTED_17A = angle_from_dms(False, 32, 47, 35)


@pytest.mark.parametrize("func", [sep, sep_hav, sep_pauwels])
def test_example_17a(func):
    d = func(R1, D1, R2, D2)
    assert abs(d - EXPECTED_17A) < 0.5 * ARCSEC


def test_sep_exercise():
    r1 = ra_from_hms(4, 35, 55.2)
    d1 = angle_from_dms(False, 16, 30, 33)
    r2 = ra_from_hms(16, 29, 24)
    d2 = angle_from_dms(True, 26, 25, 55)
    answer = angle_from_dms(False, 169, 58, 0)
    assert abs(sep(r1, d1, r2, d2) - answer) <= 1e-4


def test_small_separation_agrees():
    r1, d1 = 1.0, 0.3
    r2, d2 = 1.0 + 1e-4, 0.3 + 5e-5
    small = sep(r1, d1, r2, d2)
    assert small == pytest.approx(sep_pauwels(r1, d1, r2, d2), rel=1e-5)
    assert small == pytest.approx(sep_hav(r1, d1, r2, d2), rel=1e-5)


def test_separation_is_symmetric():
    assert sep_pauwels(R1, D1, R2, D2) == pytest.approx(sep_pauwels(R2, D2, R1, D1))
    assert sep_hav(R1, D1, R2, D2) == pytest.approx(sep_hav(R2, D2, R1, D1))


def test_relative_position_north():
    assert relative_position(1.0, 0.2, 1.0, 0.1) == pytest.approx(0.0, abs=1e-12)


def test_relative_position_east():
    assert relative_position(0.01, 0.0, 0.0, 0.0) == pytest.approx(math.pi / 2)


def test_relative_position_south():
    assert abs(relative_position(1.0, 0.1, 1.0, 0.2)) == pytest.approx(math.pi)