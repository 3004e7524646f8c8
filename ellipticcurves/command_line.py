#!/usr/bin/env python3

"""
command line tools
$ ecpubkey SECRET
$ ecpoints 100
$ ecisprime 7919
$ ecmodsqrt 2 17
$ ecmodinv 3 17
"""

# packages
import sys
from argparse import ArgumentParser, ArgumentTypeError

from pytictoc import TicToc

from .errors import attempt
from .keys import default_curve, generate_prv, secp256k1_key_pair
from .modular import DEFAULT_CERTAINTY, is_probable_prime, mod_inv, mod_sqrt, rounds_for_error
from .points import MAX_POINTS, enumerate_points, to_canvas


def str_to_int(s):
    try:
        if s[:2] in ("0x", "0X"):
            return int(s[2:], 16)
        return int(s)
    except ValueError:
        raise ArgumentTypeError("expected a decimal or 0x prefixed hex integer, got " + repr(s))


def loop_count(s):
    try:
        k = int(s)
    except ValueError:
        raise ArgumentTypeError("insert a correct value for loop count")
    if k < 1 or k > MAX_POINTS:
        raise ArgumentTypeError("loop count must be in [1.." + str(MAX_POINTS) + "]")
    return k


def rounds_count(s):
    try:
        k = int(s)
    except ValueError:
        raise ArgumentTypeError("insert a correct value for the number of rounds")
    if k < 1:
        raise ArgumentTypeError("number of rounds must be a positive int")
    return k


def _elapsed(t):
    return "\nelapsed:\n" + str(round(t.tocvalue(), 6)) + " s"


def _error(result):
    print("error: " + result.message)
    return 1


def pub_from_prv(argv=None):
    parser = ArgumentParser(description="Obtain the secp256k1 public key of a secret key")
    parser.add_argument("secret", nargs="?", type=str_to_int,
                        help="secret key in decimal or 0x hex, random if omitted")
    parser.add_argument("-v", "--verbose", help="print more output", action="store_true")
    args = parser.parse_args(argv)
    t = TicToc()
    t.tic()
    secret = generate_prv().prv if args.secret is None else args.secret
    result = attempt(secp256k1_key_pair, secret)
    if not result.ok:
        return _error(result)
    if args.verbose or args.secret is None:
        print("\nsecret key in hex:\n" + hex(secret)[2:])
    print("\npublic key:\nx: " + hex(result.value.x) + "\ny: " + hex(result.value.y))
    if args.verbose:
        print(_elapsed(t))
    return 0


def curve_points(argv=None):
    parser = ArgumentParser(description="List G, 2G, 3G, ... on secp256k1 by repeated addition")
    parser.add_argument("loops", type=loop_count, help="number of points, at most " + str(MAX_POINTS))
    parser.add_argument("-x", "--canvas", help="print drawing surface coordinates", action="store_true")
    parser.add_argument("-W", "--width", type=int, default=500, help="drawing surface width (default 500)")
    parser.add_argument("-H", "--height", type=int, default=500, help="drawing surface height (default 500)")
    parser.add_argument("-v", "--verbose", help="print more output", action="store_true")
    args = parser.parse_args(argv)
    t = TicToc()
    t.tic()
    points = enumerate_points(default_curve.prime, default_curve.a, default_curve.G, args.loops)
    if args.canvas:
        for x, y in to_canvas(points, default_curve.prime, args.width, args.height):
            print("%.3f %.3f" % (x, y))
    else:
        padding = len(str(len(points)))
        for i, point in enumerate(points, 1):
            print(str(i).rjust(padding) + " " + str(point))
    if args.verbose:
        print("\npoints:\n" + str(len(points)) + _elapsed(t))
    return 0


def prime_test(argv=None):
    parser = ArgumentParser(description="Miller-Rabin probabilistic primality test")
    parser.add_argument("n", type=str_to_int, help="number to test, in decimal or 0x hex")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("-c", "--certainty", type=rounds_count, default=DEFAULT_CERTAINTY,
                       help="number of rounds (default " + str(DEFAULT_CERTAINTY) + ")")
    group.add_argument("-e", "--error", type=float, help="accepted error probability, sets the rounds")
    parser.add_argument("-v", "--verbose", help="print more output", action="store_true")
    args = parser.parse_args(argv)
    certainty = args.certainty if args.error is None else rounds_for_error(args.error)
    t = TicToc()
    t.tic()
    prime = is_probable_prime(args.n, certainty)
    print(str(args.n) + (" is probably prime" if prime else " is composite"))
    if args.verbose:
        print("\nrounds:\n" + str(certainty) + _elapsed(t))
    return 0


def sqrt_mod(argv=None):
    parser = ArgumentParser(description="Square roots of A mod the prime P (Tonelli-Shanks)")
    parser.add_argument("a", type=str_to_int, help="quadratic residue")
    parser.add_argument("p", type=str_to_int, help="prime modulus")
    parser.add_argument("-v", "--verbose", help="print more output", action="store_true")
    args = parser.parse_args(argv)
    if not is_probable_prime(args.p):
        print("error: " + str(args.p) + " is not prime")
        return 1
    t = TicToc()
    t.tic()
    result = attempt(mod_sqrt, args.a, args.p)
    if not result.ok:
        return _error(result)
    r = result.value
    print(str(r) + "\n" + str((args.p - r) % args.p))
    if args.verbose:
        print(_elapsed(t))
    return 0


def inv_mod(argv=None):
    parser = ArgumentParser(description="Inverse of A mod P (extended Euclid)")
    parser.add_argument("a", type=str_to_int, help="number to invert")
    parser.add_argument("p", type=str_to_int, help="modulus")
    parser.add_argument("-v", "--verbose", help="print more output", action="store_true")
    args = parser.parse_args(argv)
    if args.p < 2:
        parser.error("modulus must be greater than 1")
    t = TicToc()
    t.tic()
    result = attempt(mod_inv, args.a, args.p)
    if not result.ok:
        return _error(result)
    print(str(result.value))
    if args.verbose:
        print(_elapsed(t))
    return 0


def cmd_ecpubkey():
    sys.exit(pub_from_prv())


def cmd_ecpoints():
    sys.exit(curve_points())


def cmd_ecisprime():
    sys.exit(prime_test())


def cmd_ecmodsqrt():
    sys.exit(sqrt_mod())


def cmd_ecmodinv():
    sys.exit(inv_mod())
