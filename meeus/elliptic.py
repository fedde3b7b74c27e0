"""Velocities and orbit lengths for elliptic motion.

Distances are in AU; velocities in km/s.
"""

import math


def velocity(a, r):
    """Instantaneous velocity for semimajor axis ``a`` at solar distance ``r``."""
    return 42.1219 * math.sqrt(1 / r - 0.5 / a)


def v_aphelion(a, e):
    """Velocity at aphelion for semimajor axis ``a`` and eccentricity ``e``."""
    return 29.7847 * math.sqrt((1 - e) / (1 + e) / a)


def v_perihelion(a, e):
    """Velocity at perihelion for semimajor axis ``a`` and eccentricity ``e``."""
    return 29.7847 * math.sqrt((1 + e) / (1 - e) / a)


def length1(a, e):
    """Ramanujan's approximation of the length of an elliptical orbit."""
    b = a * math.sqrt(1 - e * e)
    return math.pi * (3 * (a + b) - math.sqrt((a + 3 * b) * (3 * a + b)))


def length2(a, e):
    """An alternative approximation of the length of an elliptical orbit."""
    b = a * math.sqrt(1 - e * e)
    s = a + b
    p = a * b
    mean_a = s * 0.5
    mean_g = math.sqrt(p)
    mean_h = 2 * p / s
    return math.pi * (21 * mean_a - 2 * mean_g - 3 * mean_h) * 0.125


def length4(a, e):
    """Length of an elliptical orbit by a series summed to convergence."""
    b = a * math.sqrt(1 - e * e)
    m = (a - b) / (a + b)
    m2 = m * m
    sum0 = 1.0
    term = m2 * 0.25
    sum1 = 1.0 + term
    nf = -1.0
    df = 2.0
    while sum1 != sum0:
        nf += 2
        df += 2
        term *= nf * nf * m2 / (df * df)
        sum0 = sum1
        sum1 += term
    return 2 * math.pi * a * sum0 / (1 + m)