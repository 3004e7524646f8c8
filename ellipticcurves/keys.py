#!/usr/bin/env python3

"""
elliptic curve key pairs: the public key is sk * G
"""

# packages
from secrets import token_bytes

from .curve import Curve, EcPoint, scalar_multiply
from .errors import InvalidSecretKeyError, SingularCurveError
from .secp256k1 import secp256k1_preset

default_curve = secp256k1_preset()


def generate_key_pair(p, a, b, g, n, sk):
    """public key of the secret sk on y^2 = x^3 + a * x + b mod p, with generator g of order n"""
    if not isinstance(sk, int):
        raise TypeError("secret key must be an int")
    if sk < 1 or sk >= n:
        raise InvalidSecretKeyError("secret key must be in [1..order)")
    if (4 * a ** 3 + 27 * b ** 2) % p == 0:
        raise SingularCurveError("4a^3 + 27b^2 is zero mod " + str(p) + ", the curve is singular")
    if not isinstance(g, EcPoint):
        g = EcPoint(*g)
    return scalar_multiply(sk, g, a, p)


def curve_key_pair(curve, sk):
    return generate_key_pair(curve.prime, curve.a, curve.b, curve.G, curve.order, sk)


def secp256k1_key_pair(sk):
    return curve_key_pair(default_curve, sk)


class PrivateKey(object):

    def __init__(self, prv, curve=default_curve):
        if not isinstance(curve, Curve):
            raise TypeError("curve must be a Curve")
        if not isinstance(prv, int):
            raise TypeError("prv must be an int")
        if prv < 1 or prv >= curve.order:
            raise InvalidSecretKeyError("prv must be in [1..order)")
        self.prv = prv
        self.curve = curve

    def public_key(self):
        return curve_key_pair(self.curve, self.prv)

    def __eq__(self, other):
        if not isinstance(other, PrivateKey):
            return False
        return self.prv == other.prv and self.curve == other.curve

    def __ne__(self, other):
        return not self.__eq__(other)

    def __str__(self):
        return "\nprivate key in hex:\n" + hex(self.prv)[2:]


def generate_prv(curve=default_curve, randbytes=token_bytes):
    """uniform private key in [1..order), draws too high or zero are thrown away"""
    n_bits = curve.order.bit_length()
    mask = (1 << n_bits) - 1
    while True:
        prv = int.from_bytes(randbytes((n_bits + 7) // 8), "big") & mask
        if 0 < prv < curve.order:
            return PrivateKey(prv, curve)
