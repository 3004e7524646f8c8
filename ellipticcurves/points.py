#!/usr/bin/env python3

"""
G, 2G, 3G, ... by repeated point addition
this is very slow (k additions instead of log k), use only small k for plotting
"""

# packages
from numpy import array

from .curve import point_sum

# parameters
MAX_POINTS = 10000


def _check_count(k):
    if not isinstance(k, int):
        raise TypeError("number of points must be an int")
    if k < 1:
        raise ValueError("number of points must be a positive int")


def iter_points(p, a, g, k):
    """yield at most k points, stopping before the sum reaches infinity"""
    _check_count(k)
    yield g
    acc = None
    for _ in range(k - 1):
        acc = point_sum(g, acc, a, p)
        if acc.inf:
            return
        yield acc


def enumerate_points(p, a, g, k):
    return list(iter_points(p, a, g, k))


def slow_multiply(p, a, g, k):
    """k * g by k - 1 additions"""
    _check_count(k)
    acc = None
    for _ in range(k - 1):
        acc = point_sum(g, acc, a, p)
    return g if acc is None else acc


def to_canvas(points, prime, width, height):
    """scale the finite points into a width x height drawing surface, one row per point"""
    coords = [(pt.x / prime, pt.y / prime) for pt in points if not pt.inf]
    return array(coords, dtype=float).reshape(-1, 2) * array([width, height], dtype=float)
