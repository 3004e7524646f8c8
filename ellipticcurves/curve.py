#!/usr/bin/env python3

"""
affine point arithmetic on y^2 = x^3 + a * x + b (mod p)
the point at infinity is the group identity
"""

# packages
from .errors import CompositeModulusError, PointNotOnCurveError, SingularCurveError
from .modular import is_probable_prime, mod_inv


class EcPoint(object):

    def __init__(self, x=None, y=None):
        if (x is None) != (y is None):
            raise ValueError("ec point needs both coordinates or none (infinity)")
        if x is not None:
            if not isinstance(x, int) or not isinstance(y, int):
                raise TypeError("ec point coordinate must be int")
            if x < 0 or y < 0:
                raise ValueError("ec point coordinate must be non negative")
        self.x = x
        self.y = y
        self.inf = x is None

    def __eq__(self, other):
        if not isinstance(other, EcPoint):
            return False
        return self.x == other.x and self.y == other.y

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash((self.x, self.y))

    def __str__(self):
        if self.inf:
            return "Point @ Infinity"
        return "(" + hex(self.x) + "," + hex(self.y) + ")"

    def __repr__(self):
        if self.inf:
            return "EcPoint()"
        return "EcPoint(" + hex(self.x) + ", " + hex(self.y) + ")"


INF = EcPoint()


def point_neg(point, p):
    if point.inf:
        return point
    return EcPoint(point.x % p, -point.y % p)


def point_double(point, a, p):
    # vertical tangent when y == 0
    if point.inf or point.y % p == 0:
        return INF
    lam = ((3 * point.x * point.x + a) * mod_inv(2 * point.y, p)) % p
    x = (lam * lam - 2 * point.x) % p
    y = (lam * (point.x - x) - point.y) % p
    return EcPoint(x, y)


def point_add(pt_p, pt_q, a, p):
    if pt_p.inf:
        return pt_q
    if pt_q.inf:
        return pt_p
    if (pt_q.x - pt_p.x) % p == 0:
        if (pt_q.y - pt_p.y) % p == 0:
            return point_double(pt_p, a, p)
        if (pt_q.y + pt_p.y) % p == 0:
            return INF
        raise PointNotOnCurveError("points " + str(pt_p) + " and " + str(pt_q) +
                                   " share x but are not opposite")
    lam = ((pt_q.y - pt_p.y) * mod_inv(pt_q.x - pt_p.x, p)) % p
    x = (lam * lam - pt_p.x - pt_q.x) % p
    y = (lam * (pt_p.x - x) - pt_p.y) % p
    return EcPoint(x, y)


def point_sum(point, acc, a, p):
    """naive step: 2P when there is no accumulator yet, P + acc otherwise"""
    if acc is None:
        return point_double(point, a, p)
    return point_add(point, acc, a, p)


def scalar_multiply(k, point, a, p):
    """k * point by double-and-add, most significant bit first"""
    if not isinstance(k, int):
        raise TypeError("multiplication only with int")
    if k < 0:
        return scalar_multiply(-k, point_neg(point, p), a, p)
    result = INF
    for bit in bin(k)[2:]:
        result = point_double(result, a, p)
        if bit == "1":
            result = point_add(result, point, a, p)
    return result


class Curve(object):

    def __init__(self, param):
        prime, a, b, (gx, gy), order = param
        self.prime = prime
        self.a = a
        self.b = b
        self.G = EcPoint(gx, gy)
        self.order = order

    @property
    def param(self):
        return self.prime, self.a, self.b, (self.G.x, self.G.y), self.order

    def discriminant(self):
        return (4 * self.a ** 3 + 27 * self.b ** 2) % self.prime

    def is_singular(self):
        return self.discriminant() == 0

    def check(self, certainty=None):
        """raise if the curve is singular, and if given a certainty, if p is not prime"""
        if self.is_singular():
            raise SingularCurveError("4a^3 + 27b^2 is zero mod " + str(self.prime))
        if certainty is not None and not is_probable_prime(self.prime, certainty):
            raise CompositeModulusError(str(self.prime) + " is not prime")

    def contains(self, point):
        if point.inf:
            return True
        if point.x >= self.prime or point.y >= self.prime:
            return False
        return (point.y ** 2 - point.x ** 3 - self.a * point.x - self.b) % self.prime == 0

    def neg(self, point):
        return point_neg(point, self.prime)

    def add(self, pt_p, pt_q):
        return point_add(pt_p, pt_q, self.a, self.prime)

    def double(self, point):
        return point_double(point, self.a, self.prime)

    def multiply(self, k, point=None):
        return scalar_multiply(k, self.G if point is None else point, self.a, self.prime)

    def __eq__(self, other):
        if not isinstance(other, Curve):
            return False
        return self.param == other.param

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash(self.param)

    def __str__(self):
        return "y^2 = x^3 + " + str(self.a) + " * x + " + str(self.b) + " mod (" + str(self.prime) + ")"
