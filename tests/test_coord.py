import math

import pytest

from meeus.base import C_OBL_J2000, S_OBL_J2000, angle_from_dms, ra_from_hms
from meeus.coord import (
    Ecliptic,
    Equatorial,
    Galactic,
    Horizontal,
    Obliquity,
    ecl_to_eq,
    eq_to_ecl,
    eq_to_gal,
    eq_to_hz,
    gal_to_eq,
    hz_to_eq,
)
from meeus.globe import Coord

ARCSEC = math.radians(1 / 3600)

# Example 13.b: observer at the US Naval Observatory, apparent sidereal
# time at Greenwich 8h34m56.853s.
OBSERVER = Coord(
    lat=angle_from_dms(False, 38, 55, 17), lon=angle_from_dms(False, 77, 3, 56)
)
SIDEREAL = 8 * 3600 + 34 * 60 + 56.853


def ra_seconds(ra):
    """Right ascension in seconds of time."""
    return math.degrees(ra) / 15 * 3600


def test_ecl_to_eq():
    ra, dec = ecl_to_eq(
        math.radians(113.21563), math.radians(6.68417), S_OBL_J2000, C_OBL_J2000
    )
    assert ra_seconds(ra) == pytest.approx(7 * 3600 + 45 * 60 + 18.946, abs=0.0006)
    assert dec == pytest.approx(angle_from_dms(False, 28, 1, 34.26), abs=0.006 * ARCSEC)


def test_ecliptic_to_equatorial():
    ecl = Ecliptic(lon=math.radians(113.21563), lat=math.radians(6.68417))
    eq = ecl.to_equatorial(Obliquity.from_angle(math.radians(23.4392911)))
    assert ra_seconds(eq.ra) == pytest.approx(7 * 3600 + 45 * 60 + 18.946, abs=0.0006)
    assert eq.dec == pytest.approx(
        angle_from_dms(False, 28, 1, 34.26), abs=0.006 * ARCSEC
    )


def test_eq_to_ecl():
    lon, lat = eq_to_ecl(
        ra_from_hms(7, 45, 18.946),
        angle_from_dms(False, 28, 1, 34.26),
        S_OBL_J2000,
        C_OBL_J2000,
    )
    assert math.degrees(lon) == pytest.approx(113.21563, abs=6e-6)
    assert math.degrees(lat) == pytest.approx(6.684170, abs=6e-7)


def test_equatorial_to_ecliptic():
    eq = Equatorial(ra=ra_from_hms(7, 45, 18.946), dec=angle_from_dms(False, 28, 1, 34.26))
    ecl = eq.to_ecliptic(Obliquity.from_angle(math.radians(23.4392911)))
    assert math.degrees(ecl.lon) == pytest.approx(113.21563, abs=6e-6)
    assert math.degrees(ecl.lat) == pytest.approx(6.684170, abs=6e-7)


def test_obliquity_from_angle():
    obl = Obliquity.from_angle(math.radians(30))
    assert obl.s == pytest.approx(0.5)
    assert obl.c == pytest.approx(math.sqrt(3) / 2)


def test_eq_to_gal():
    lon, lat = eq_to_gal(ra_from_hms(17, 48, 59.74), angle_from_dms(True, 14, 43, 8.2))
    assert math.degrees(lon) == pytest.approx(12.9593, abs=6e-5)
    assert math.degrees(lat) == pytest.approx(6.0463, abs=6e-5)


def test_equatorial_to_galactic():
    eq = Equatorial(ra=ra_from_hms(17, 48, 59.74), dec=angle_from_dms(True, 14, 43, 8.2))
    g = eq.to_galactic()
    assert math.degrees(g.lon) == pytest.approx(12.9593, abs=6e-5)
    assert math.degrees(g.lat) == pytest.approx(6.0463, abs=6e-5)


def test_gal_to_eq():
    ra, dec = gal_to_eq(math.radians(12.9593), math.radians(6.0463))
    assert ra_seconds(ra) == pytest.approx(17 * 3600 + 48 * 60 + 59.7, abs=0.06)
    assert dec == pytest.approx(angle_from_dms(True, 14, 43, 8), abs=0.6 * ARCSEC)


def test_galactic_to_equatorial():
    eq = Galactic(lon=math.radians(12.9593), lat=math.radians(6.0463)).to_equatorial()
    assert ra_seconds(eq.ra) == pytest.approx(17 * 3600 + 48 * 60 + 59.7, abs=0.06)
    assert eq.dec == pytest.approx(angle_from_dms(True, 14, 43, 8), abs=0.6 * ARCSEC)


def test_galactic_round_trip():
    ra, dec = 1.234, -0.456
    back = gal_to_eq(*eq_to_gal(ra, dec))
    assert back[0] == pytest.approx(ra, abs=1e-12)
    assert back[1] == pytest.approx(dec, abs=1e-12)


def test_eq_to_hz():
    az, alt = eq_to_hz(
        ra_from_hms(23, 9, 16.641),
        angle_from_dms(True, 6, 43, 11.61),
        OBSERVER.lat,
        OBSERVER.lon,
        SIDEREAL,
    )
    assert math.degrees(az) == pytest.approx(68.034, abs=6e-4)
    assert math.degrees(alt) == pytest.approx(15.125, abs=6e-4)


def test_equatorial_to_horizontal():
    eq = Equatorial(ra=ra_from_hms(23, 9, 16.641), dec=angle_from_dms(True, 6, 43, 11.61))
    hz = eq.to_horizontal(OBSERVER, SIDEREAL)
    assert math.degrees(hz.az) == pytest.approx(68.034, abs=6e-4)
    assert math.degrees(hz.alt) == pytest.approx(15.125, abs=6e-4)


def test_hz_to_eq():
    ra, dec = hz_to_eq(
        math.radians(68.0337),
        math.radians(15.1249),
        OBSERVER.lat,
        OBSERVER.lon,
        SIDEREAL,
    )
    assert ra_seconds(ra) == pytest.approx(23 * 3600 + 9 * 60 + 16.6, abs=0.06)
    assert dec == pytest.approx(angle_from_dms(True, 6, 43, 12), abs=0.6 * ARCSEC)


def test_horizontal_to_equatorial():
    hz = Horizontal(az=math.radians(68.0337), alt=math.radians(15.1249))
    eq = hz.to_equatorial(OBSERVER, SIDEREAL)
    assert ra_seconds(eq.ra) == pytest.approx(23 * 3600 + 9 * 60 + 16.6, abs=0.06)
    assert eq.dec == pytest.approx(angle_from_dms(True, 6, 43, 12), abs=0.6 * ARCSEC)


def test_horizontal_round_trip():
    eq = Equatorial(ra=2.5, dec=0.3)
    back = eq.to_horizontal(OBSERVER, 12345.0).to_equatorial(OBSERVER, 12345.0)
    assert back.ra == pytest.approx(eq.ra, abs=1e-12)
    assert back.dec == pytest.approx(eq.dec, abs=1e-12)