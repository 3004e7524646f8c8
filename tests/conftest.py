import pytest

from ellipticcurves.curve import EcPoint

# y^2 = x^3 + 2x + 2 mod 17, G = (5, 1) of order 19
SMALL_PRIME = 17
SMALL_A = 2
SMALL_B = 2
SMALL_ORDER = 19
SMALL_MULTIPLES = {
    1: (5, 1), 2: (6, 3), 3: (10, 6), 4: (3, 1), 5: (9, 16), 6: (16, 13),
    7: (0, 6), 8: (13, 7), 9: (7, 6), 10: (7, 11), 11: (13, 10), 12: (0, 11),
    13: (16, 4), 14: (9, 1), 15: (3, 16), 16: (10, 11), 17: (6, 14), 18: (5, 16),
}

G2_X = 0xc6047f9441ed7d6d3045406e95c07cd85c778e4b8cef3ca7abac09b95c709ee5
G2_Y = 0x1ae168fea63dc339a3c58419466ceaeef7f632653266d0e1236431a950cfe52a
G3_X = 0xf9308a019258c31049344f85f89d5229b531c845836f99b08601f113bce036f9
G3_Y = 0x388f7b0f632de8140fe337e62a37f3566500a99934c2231b6cb9fd7584b8e672


@pytest.fixture
def small_g():
    return EcPoint(*SMALL_MULTIPLES[1])


def replay(*draws):
    """randbytes stand-in returning the given byte strings in order"""
    it = iter(draws)

    def randbytes(k):
        data = next(it)
        assert len(data) == k
        return data

    randbytes.remaining = it
    return randbytes
