import math

import pytest

from meeus import illum
from meeus.base import illuminated


def test_phase_angle():
    i = illum.phase_angle(0.724604, 0.910947, 0.983824)
    assert f"{math.cos(i):.5f}" == "0.29312"


def test_fraction():
    k = illum.fraction(0.724604, 0.910947, 0.983824)
    assert f"{k:.3f}" == "0.647"


def test_fraction_matches_illuminated_phase_angle():
    args = (0.724604, 0.910947, 0.983824)
    assert illum.fraction(*args) == pytest.approx(
        illuminated(illum.phase_angle(*args)), rel=1e-12
    )


def test_phase_angle2():
    i = illum.phase_angle2(
        math.radians(26.10588),
        math.radians(-2.62102),
        0.724604,
        math.radians(88.35704),
        0.983824,
        0.910947,
    )
    assert f"{math.cos(i):.5f}" == "0.29312"


def test_phase_angle3():
    i = illum.phase_angle3(
        math.radians(26.10588),
        math.radians(-2.62102),
        0.621794,
        -0.664905,
        -0.033138,
        0.910947,
    )
    assert f"{math.cos(i):.5f}" == "0.29312"


def test_fraction_venus():
    assert f"{illum.fraction_venus(2448976.5):.3f}" == "0.640"


def test_venus_magnitude():
    v = illum.venus(0.724604, 0.910947, math.radians(72.96))
    assert f"{v:.1f}" == "-3.8"


def test_saturn_magnitude():
    v = illum.saturn(9.867882, 10.464606, math.radians(16.442), math.radians(4.198))
    assert f"{v:+.1f}" == "+0.9"


@pytest.mark.parametrize(
    "func",
    [
        illum.jupiter,
        illum.uranus,
        illum.neptune,
        illum.uranus84,
        illum.neptune84,
        illum.pluto84,
    ],
)
def test_magnitude_distance_scaling(func):
    assert func(10.0, 1.0) - func(1.0, 1.0) == pytest.approx(5.0)


@pytest.mark.parametrize(
    "func",
    [
        illum.mercury,
        illum.venus,
        illum.mars,
        illum.mercury84,
        illum.venus84,
        illum.mars84,
        illum.jupiter84,
    ],
)
def test_phase_dependent_distance_scaling(func):
    i = math.radians(30)
    assert func(10.0, 1.0, i) - func(1.0, 1.0, i) == pytest.approx(5.0)


def test_mars_magnitude_at_zero_phase():
    assert illum.mars(1.0, 1.0, 0.0) == pytest.approx(-1.3)
    assert illum.mars84(1.0, 1.0, 0.0) == pytest.approx(-1.52)


def test_saturn84_offset_from_saturn():
    b, du = math.radians(16.442), math.radians(4.198)
    diff = illum.saturn(9.867882, 10.464606, b, du) - illum.saturn84(
        9.867882, 10.464606, b, du
    )
    assert diff == pytest.approx(0.2)