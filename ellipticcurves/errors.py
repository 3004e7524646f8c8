"""
failures raised by the curve and modular arithmetic
each exception carries an ErrorKind, attempt() turns a failure into a Result
"""

from collections import namedtuple
from enum import Enum


class ErrorKind(Enum):
    NOT_INVERTIBLE = "not invertible"
    NOT_QUADRATIC_RESIDUE = "not a quadratic residue"
    INVALID_SECRET_KEY = "invalid secret key"
    SINGULAR_CURVE = "singular curve"
    POINT_NOT_ON_CURVE = "point not on curve"
    COMPOSITE_MODULUS = "composite modulus"


class EllipticCurveError(ValueError):
    kind = None


class NotInvertibleError(EllipticCurveError):
    kind = ErrorKind.NOT_INVERTIBLE


class NotQuadraticResidueError(EllipticCurveError):
    kind = ErrorKind.NOT_QUADRATIC_RESIDUE


class InvalidSecretKeyError(EllipticCurveError):
    kind = ErrorKind.INVALID_SECRET_KEY


class SingularCurveError(EllipticCurveError):
    kind = ErrorKind.SINGULAR_CURVE


class PointNotOnCurveError(EllipticCurveError):
    kind = ErrorKind.POINT_NOT_ON_CURVE


class CompositeModulusError(EllipticCurveError):
    kind = ErrorKind.COMPOSITE_MODULUS


class Result(namedtuple("Result", ["value", "error", "message"])):
    """value on success, error kind and message on failure"""

    __slots__ = ()

    @property
    def ok(self):
        return self.error is None


def attempt(func, *args, **kwargs):
    try:
        return Result(func(*args, **kwargs), None, None)
    except EllipticCurveError as e:
        return Result(None, e.kind, str(e))
