#!/usr/bin/env python3

"""
modular arithmetic over a prime field
 - inverse by extended euclid
 - square root by tonelli-shanks
 - miller-rabin probabilistic primality test
"""

# packages
from collections import namedtuple
from math import ceil
from secrets import token_bytes

from numpy import log

from .errors import NotInvertibleError, NotQuadraticResidueError

# parameters
DEFAULT_CERTAINTY = 20

# per-modulus working state of tonelli-shanks: p - 1 = q * 2**s, z non residue
TonelliShanksParams = namedtuple("TonelliShanksParams", ["p", "q", "s", "z"])


def mod_inv(a, p):
    t, new_t = 0, 1
    r, new_r = p, a % p
    while new_r != 0:
        quot = r // new_r
        t, new_t = new_t, t - quot * new_t
        r, new_r = new_r, r - quot * new_r
    if r > 1:
        raise NotInvertibleError(str(a) + " is not invertible mod " + str(p))
    return t % p


def legendre(a, p):
    """Euler's criterion: 1 for residues, -1 for non residues, 0 if p divides a"""
    check = pow(a, (p - 1) // 2, p)
    return -1 if check == p - 1 else check


def tonelli_shanks_params(p):
    if p < 3 or p % 2 == 0:
        raise ValueError("modulus must be an odd prime")
    q = p - 1
    s = 0
    while q % 2 == 0:
        q //= 2
        s += 1
    z = 2
    while legendre(z, p) != -1:
        z += 1
        if z >= p:
            raise ValueError("no quadratic non residue mod " + str(p) + ", is it prime?")
    return TonelliShanksParams(p, q, s, z)


def mod_sqrt(a, p, params=None):
    """square root r of a mod p, the other one is p - r

    params may carry the tonelli-shanks state already derived for p,
    otherwise it is derived for this call only
    """
    if p == 2:
        return a % 2
    if legendre(a, p) != 1:
        raise NotQuadraticResidueError(str(a) + " is not a quadratic residue mod " + str(p))
    if params is None:
        params = tonelli_shanks_params(p)
    elif params.p != p:
        raise ValueError("tonelli-shanks params derived for a different modulus")

    m = params.s
    c = pow(params.z, params.q, p)
    t = pow(a, params.q, p)
    r = pow(a, (params.q + 1) // 2, p)
    while t not in (0, 1):
        # smallest k with t**(2**k) == 1
        k = 1
        t2 = t * t % p
        while t2 != 1:
            t2 = t2 * t2 % p
            k += 1
        b = pow(c, 1 << (m - k - 1), p)
        m = k
        c = b * b % p
        t = t * c % p
        r = r * b % p
    return r


def _random_witness(n, randbytes):
    # rejection sampling in [2, n - 2] over draws as long as n
    n_bits = n.bit_length()
    mask = (1 << n_bits) - 1
    while True:
        a = int.from_bytes(randbytes((n_bits + 7) // 8), "big") & mask
        if 2 <= a <= n - 2:
            return a


def is_probable_prime(n, certainty=DEFAULT_CERTAINTY, randbytes=token_bytes):
    """Miller-Rabin test, a composite passes with probability at most 4**-certainty

    randbytes(k) must return k random bytes
    """
    if not isinstance(n, int) or not isinstance(certainty, int):
        raise TypeError("n and certainty must be int")
    if n in (2, 3):
        return True
    if n < 2 or n % 2 == 0:
        return False

    d = n - 1
    s = 0
    while d % 2 == 0:
        d //= 2
        s += 1

    for _ in range(certainty):
        x = pow(_random_witness(n, randbytes), d, n)
        if x in (1, n - 1):
            continue
        for _ in range(s - 1):
            x = x * x % n
            if x == 1:
                return False
            if x == n - 1:
                break
        else:
            return False
    return True


def rounds_for_error(probability):
    """number of miller-rabin rounds keeping the error below probability"""
    if not 0 < probability < 1:
        raise ValueError("probability must be in (0, 1)")
    return max(1, int(ceil(-log(probability) / log(4))))
