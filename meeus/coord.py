"""Transformations between ecliptic, equatorial, horizontal and galactic
coordinates.

Angles are in radians.  Sidereal time is in seconds of time.  Right
ascensions returned are in the range ``[0, 2π)``.
"""

import math
from dataclasses import dataclass

from meeus.base import TWO_PI, pmod, ra_from_hms, time_to_rad


@dataclass(frozen=True)
class Obliquity:
    """Sine and cosine of the obliquity of the ecliptic."""

    s: float
    c: float

    @classmethod
    def from_angle(cls, epsilon):
        """Build from the obliquity ``epsilon`` in radians."""
        return cls(math.sin(epsilon), math.cos(epsilon))


@dataclass(frozen=True)
class Ecliptic:
    """Coordinates referenced to the plane of the ecliptic."""

    lon: float
    lat: float

    def to_equatorial(self, obliquity):
        """Convert to equatorial coordinates."""
        return Equatorial(*ecl_to_eq(self.lon, self.lat, obliquity.s, obliquity.c))


@dataclass(frozen=True)
class Equatorial:
    """Coordinates referenced to the Earth's rotational axis."""

    ra: float
    dec: float

    def to_ecliptic(self, obliquity):
        """Convert to ecliptic coordinates."""
        return Ecliptic(*eq_to_ecl(self.ra, self.dec, obliquity.s, obliquity.c))

    def to_horizontal(self, observer, sidereal_time):
        """Convert to horizontal coordinates for an observer.

        ``observer`` has ``lat`` and ``lon`` attributes; ``sidereal_time`` is
        the Greenwich sidereal time in seconds.
        """
        return Horizontal(
            *eq_to_hz(self.ra, self.dec, observer.lat, observer.lon, sidereal_time)
        )

    def to_galactic(self):
        """Convert B1950.0 equatorial coordinates to galactic coordinates."""
        return Galactic(*eq_to_gal(self.ra, self.dec))


@dataclass(frozen=True)
class Horizontal:
    """Coordinates referenced to an observer's local horizon.

    Azimuth is measured westward from the south.
    """

    az: float
    alt: float

    def to_equatorial(self, observer, sidereal_time):
        """Convert to equatorial coordinates for an observer."""
        return Equatorial(
            *hz_to_eq(self.az, self.alt, observer.lat, observer.lon, sidereal_time)
        )


@dataclass(frozen=True)
class Galactic:
    """Coordinates referenced to the plane of the Milky Way."""

    lon: float
    lat: float

    def to_equatorial(self):
        """Convert to equatorial coordinates for the equinox B1950.0."""
        return Equatorial(*gal_to_eq(self.lon, self.lat))


#: IAU B1950.0 coordinates of the galactic north pole.
GALACTIC_NORTH_1950 = Equatorial(ra=ra_from_hms(12, 49, 0), dec=math.radians(27.4))

#: Origin of galactic longitude relative to the ascending node of the
#: galactic equator.
GALACTIC0_LON_1950 = math.radians(33)


def eq_to_ecl(ra, dec, s_eps, c_eps):
    """Equatorial to ecliptic coordinates; return ``(lon, lat)``."""
    sa, ca = math.sin(ra), math.cos(ra)
    sd, cd = math.sin(dec), math.cos(dec)
    lon = math.atan2(sa * c_eps + (sd / cd) * s_eps, ca)
    lat = math.asin(sd * c_eps - cd * s_eps * sa)
    return lon, lat


def ecl_to_eq(lon, lat, s_eps, c_eps):
    """Ecliptic to equatorial coordinates; return ``(ra, dec)``."""
    sl, cl = math.sin(lon), math.cos(lon)
    sb, cb = math.sin(lat), math.cos(lat)
    ra = pmod(math.atan2(sl * c_eps - (sb / cb) * s_eps, cl), TWO_PI)
    dec = math.asin(sb * c_eps + cb * s_eps * sl)
    return ra, dec


def hz_to_eq(az, alt, lat, lon, sidereal_time):
    """Horizontal to equatorial coordinates; return ``(ra, dec)``.

    ``lat``, ``lon`` locate the observer (longitude positive west);
    ``sidereal_time`` is Greenwich sidereal time in seconds.
    """
    sa, ca = math.sin(az), math.cos(az)
    sh, ch = math.sin(alt), math.cos(alt)
    sp, cp = math.sin(lat), math.cos(lat)
    h = math.atan2(sa, ca * sp + sh / ch * cp)
    ra = pmod(time_to_rad(sidereal_time) - lon - h, TWO_PI)
    dec = math.asin(sp * sh - cp * ch * ca)
    return ra, dec


def eq_to_hz(ra, dec, lat, lon, sidereal_time):
    """Equatorial to horizontal coordinates; return ``(az, alt)``.

    Azimuth is measured westward from the south.
    """
    h = time_to_rad(sidereal_time) - lon - ra
    sh, ch = math.sin(h), math.cos(h)
    sp, cp = math.sin(lat), math.cos(lat)
    sd, cd = math.sin(dec), math.cos(dec)
    az = math.atan2(sh, ch * sp - (sd / cd) * cp)
    alt = math.asin(sp * sd + cp * cd * ch)
    return az, alt


def gal_to_eq(lon, lat):
    """Galactic to B1950.0 equatorial coordinates; return ``(ra, dec)``."""
    a = lon - GALACTIC0_LON_1950 - math.pi / 2
    sdl, cdl = math.sin(a), math.cos(a)
    sg, cg = math.sin(GALACTIC_NORTH_1950.dec), math.cos(GALACTIC_NORTH_1950.dec)
    sb, cb = math.sin(lat), math.cos(lat)
    y = math.atan2(sdl, cdl * sg - (sb / cb) * cg)
    ra = pmod(y + GALACTIC_NORTH_1950.ra - math.pi, TWO_PI)
    dec = math.asin(sb * sg + cb * cg * cdl)
    return ra, dec


def eq_to_gal(ra, dec):
    """B1950.0 equatorial to galactic coordinates; return ``(lon, lat)``."""
    da = GALACTIC_NORTH_1950.ra - ra
    sda, cda = math.sin(da), math.cos(da)
    sg, cg = math.sin(GALACTIC_NORTH_1950.dec), math.cos(GALACTIC_NORTH_1950.dec)
    sd, cd = math.sin(dec), math.cos(dec)
    x = math.atan2(sda, cda * sg - (sd / cd) * cg)
    lon = pmod(GALACTIC0_LON_1950 + 1.5 * math.pi - x, TWO_PI)
    lat = math.asin(sd * sg + cd * cg * cda)
    return lon, lat