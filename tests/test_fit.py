import math

import pytest

from meeus import fit

QDATA = [(-4, -6), (-3, -1), (-2, 2), (-1, 3), (0, 2), (1, -1), (2, -6)]


def test_linear():
    data = [
        (0.2982, 10.92), (0.2969, 11.01), (0.2918, 10.99), (0.2905, 10.78),
        (0.2707, 10.87), (0.2574, 10.80), (0.2485, 10.75), (0.2287, 10.14),
        (0.2238, 10.21), (0.2156, 9.97), (0.1992, 9.69), (0.1948, 9.57),
        (0.1931, 9.66), (0.1889, 9.63), (0.1781, 9.65), (0.1772, 9.44),
        (0.1770, 9.44), (0.1755, 9.32), (0.1746, 9.20),
    ]
    a, b = fit.linear(data)
    assert f"{a:.2f}" == "13.67"
    assert f"{b:.2f}" == "7.03"


def test_correlation_coefficient():
    data = [
        (73, 90.4), (38, 125.3), (35, 161.8), (42, 143.4), (78, 52.5),
        (68, 50.8), (74, 71.5), (42, 152.8), (52, 131.3), (54, 98.5),
        (39, 144.8), (61, 78.1), (42, 89.5), (49, 63.9), (50, 112.1),
        (62, 82.0), (44, 119.8), (39, 161.2), (43, 208.4), (54, 111.6),
        (44, 167.1), (37, 162.1),
    ]
    a, b = fit.linear(data)
    assert f"{b:.2f}" == "244.18"
    assert f"{-a:.2f}" == "2.49"
    assert f"{fit.correlation_coefficient(data):.3f}" == "-0.767"


def test_quadratic():
    a, b, c = fit.quadratic(QDATA)
    assert a == pytest.approx(-1, abs=1e-12)
    assert b == pytest.approx(-2, abs=1e-12)
    assert c == pytest.approx(2, abs=1e-12)


def test_func3_quadratic_case():
    a, b, c = fit.func3(QDATA, lambda x: x * x, lambda x: x, lambda x: 1)
    assert a == pytest.approx(-1, abs=1e-12)
    assert b == pytest.approx(-2, abs=1e-12)
    assert c == pytest.approx(2, abs=1e-12)


def test_func3_sines():
    raw = [
        (3, 0.0433), (20, 0.2532), (34, 0.3386), (50, 0.3560), (75, 0.4983),
        (88, 0.7577), (111, 1.4585), (129, 1.8628), (143, 1.8264),
        (160, 1.2431), (183, -0.2043), (200, -1.2431), (218, -1.8422),
        (230, -1.8726), (248, -1.4889), (269, -0.8372), (290, -0.4377),
        (303, -0.3640), (320, -0.3508), (344, -0.2126),
    ]
    data = [(x * math.pi / 180, y) for x, y in raw]
    a, b, c = fit.func3(
        data, math.sin, lambda x: math.sin(2 * x), lambda x: math.sin(3 * x)
    )
    assert f"{a:.4f}, {b:.4f}, {c:.4f}" == "1.2000, -0.7700, 0.3900"


def test_func1():
    data = [(0, 0), (1, 1.2), (2, 1.4), (3, 1.7), (4, 2.1), (5, 2.2)]
    assert f"{fit.func1(data, math.sqrt):.3f}" == "1.016"


def test_linear_empty_raises():
    with pytest.raises(ZeroDivisionError):
        fit.linear([])