"""Curve fitting by least squares.

Sample data is any iterable of ``(x, y)`` pairs.  Every fit solves the
normal equations of a linear combination of basis functions.
"""

import math


def _points(points):
    return [(float(x), float(y)) for x, y in points]


def _normal_equations(pts, basis):
    """Return the Gram matrix and right-hand side for the given basis."""
    rows = [[f(x) for f in basis] for x, _ in pts]
    ys = [y for _, y in pts]
    size = len(basis)
    gram = [
        [sum(row[i] * row[j] for row in rows) for j in range(size)]
        for i in range(size)
    ]
    rhs = [sum(y * row[i] for row, y in zip(rows, ys)) for i in range(size)]
    return gram, rhs


def _det(m):
    if len(m) == 2:
        (a, b), (c, d) = m
        return a * d - b * c
    (a, b, c), (d, e, f), (g, h, k) = m
    return a * (e * k - f * h) - b * (d * k - f * g) + c * (d * h - e * g)


def _cramer(gram, rhs):
    """Solve ``gram @ v = rhs`` by Cramer's rule."""
    d = _det(gram)

    def replaced(col):
        return [
            [rhs[r] if c == col else value for c, value in enumerate(row)]
            for r, row in enumerate(gram)
        ]

    return tuple(_det(replaced(col)) / d for col in range(len(gram)))


def linear(points):
    """Fit ``y = a*x + b`` to the data; return ``(a, b)``."""
    gram, rhs = _normal_equations(_points(points), (lambda x: x, lambda x: 1.0))
    return _cramer(gram, rhs)


def correlation_coefficient(points):
    """Return the correlation coefficient of the data."""
    pts = _points(points)
    n = float(len(pts))
    xs = [x for x, _ in pts]
    ys = [y for _, y in pts]
    sx, sy = math.fsum(xs), math.fsum(ys)
    sxx = math.fsum(x * x for x in xs)
    syy = math.fsum(y * y for y in ys)
    sxy = math.fsum(x * y for x, y in pts)
    spread_x = math.sqrt(n * sxx - sx * sx)
    spread_y = math.sqrt(n * syy - sy * sy)
    return (n * sxy - sx * sy) / (spread_x * spread_y)


def quadratic(points):
    """Fit ``y = a*x² + b*x + c`` to the data; return ``(a, b, c)``."""
    return func3(points, lambda x: x * x, lambda x: x, lambda x: 1.0)


def func3(points, f0, f1, f2):
    """Fit ``y = a*f0(x) + b*f1(x) + c*f2(x)``; return ``(a, b, c)``."""
    gram, rhs = _normal_equations(_points(points), (f0, f1, f2))
    return _cramer(gram, rhs)


def func1(points, f):
    """Fit ``y = a*f(x)``; return ``a``."""
    values = [(f(x), y) for x, y in _points(points)]
    return sum(y * fx for fx, y in values) / sum(fx * fx for fx, _ in values)