# meeus

Astronomical algorithms for Python, following the second edition of Jean
Meeus's *Astronomical Algorithms*. Angles are plain floats in radians, and
times are Julian (ephemeris) days unless a function says otherwise; sidereal
time passed to `meeus.coord` is in seconds of time. The package depends only
on the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

| Module | Chapter | Contents |
|---|---|---|
| `meeus.base` | general | constants (`J2000`, `AU`, `K`, ...), Julian and Besselian years, `j2000_century`, `light_time`, `horner`, `hav`, `floor_div`, `cmp`, `pmod`, `angle_from_dms`, `ra_from_hms`, `angle_from_sec`, `time_to_rad`, `illuminated`, `limb` |
| `meeus.fit` | 4 | least-squares fits: `linear`, `quadratic`, `func1`, `func3`, `correlation_coefficient` |
| `meeus.easter` | 8 | `gregorian(year)` and `julian(year)` dates of Easter as `(month, day)` |
| `meeus.deltat` | 10 | polynomial approximations of ΔT in seconds |
| `meeus.globe` | 11 | `Ellipsoid`, `EARTH76`, `Coord`, parallax constants, geodesic distance |
| `meeus.coord` | 13 | `Ecliptic`, `Equatorial`, `Horizontal`, `Galactic`, `Obliquity` and the matching functions |
| `meeus.angle` | 17 | `sep`, `sep_hav`, `sep_pauwels`, `relative_position` |
| `meeus.circle` | 20 | `smallest` circle containing three bodies |
| `meeus.apparent` | 23 | `aberration_ron_vondrak` |
| `meeus.elementequinox` | 24 | `Elements`, `reduce_b1950_to_j2000`, `reduce_b1950_fk4_to_j2000_fk5` |
| `meeus.elliptic` | 33 | `velocity`, `v_perihelion`, `v_aphelion`, orbit lengths `length1`, `length2`, `length4` |
| `meeus.illum` | 41 | phase angle, illuminated fraction, planetary magnitudes |
| `meeus.apsis` | 50 | mean and true perigee and apogee of the Moon, and their parallaxes |
| `meeus.binary` | 57 | `mean_anomaly`, `position`, `apparent_eccentricity` of binary stars |

## Examples

Date of Easter:

```python
from meeus import easter

easter.gregorian(2000)   # (4, 23) -- April 23
easter.julian(1243)      # (4, 12)
```

Angular separation between two stars (Example 17.a):

```python
from meeus import angle, base

r1 = base.ra_from_hms(14, 15, 39.7)
d1 = base.angle_from_dms(False, 19, 10, 57)
r2 = base.ra_from_hms(13, 25, 11.6)
d2 = base.angle_from_dms(True, 11, 9, 41)
angle.sep_pauwels(r1, d1, r2, d2)   # about 32°47′35″, in radians
```

Equatorial to ecliptic coordinates (Example 13.a):

```python
import math
from meeus import base, coord

eq = coord.Equatorial(ra=base.ra_from_hms(7, 45, 18.946),
                      dec=base.angle_from_dms(False, 28, 1, 34.26))
ecl = eq.to_ecliptic(coord.Obliquity.from_angle(math.radians(23.4392911)))
math.degrees(ecl.lon)   # about 113.21563
```

Distance between two places on the Earth (Example 11.c):

```python
from meeus import base, globe

paris = globe.Coord(lat=base.angle_from_dms(False, 48, 50, 11),
                    lon=base.angle_from_dms(True, 2, 20, 14))
washington = globe.Coord(lat=base.angle_from_dms(False, 38, 55, 17),
                         lon=base.angle_from_dms(False, 77, 3, 56))
globe.EARTH76.distance(paris, washington)   # about 6181.63 km
```

Moon apogee nearest a date (Example 50.a):

```python
from meeus import apsis

apsis.apogee(1988.75)   # JDE 2447442.3543
```

The coordinate classes are frozen dataclasses; their conversion methods
return new objects rather than changing the one they are called on.

## What the package does not do

The package has no command-line program. It does not convert calendar dates
to Julian days, compute sidereal time, nutation, precession or solar and
planetary positions, and it does not interpolate tables. Functions that need
such quantities (for example `coord.eq_to_hz`, which takes a sidereal time)
expect the caller to supply them. `meeus.deltat` offers only the polynomial
approximations, and `meeus.apparent` only the Ron–Vondrák aberration.