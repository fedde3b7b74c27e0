"""Astronomical algorithms after Meeus: calendars, coordinates, separations,
lunar apsides, magnitudes, orbits and binary stars."""

__version__ = "0.1.0"