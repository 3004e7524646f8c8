"""
Tests for keys.py and secp256k1.py - key pair generation
"""

import pytest

from conftest import G2_X, G2_Y, G3_X, G3_Y, SMALL_MULTIPLES, SMALL_ORDER, replay
from ellipticcurves import keys
from ellipticcurves.curve import Curve, EcPoint
from ellipticcurves.errors import InvalidSecretKeyError, SingularCurveError
from ellipticcurves.secp256k1 import (ec_G, ec_a, ec_b, ec_gx, ec_gy, ec_order, ec_prime,
                                      secp256k1_param, secp256k1_preset)

SMALL_CURVE = Curve((17, 2, 2, SMALL_MULTIPLES[1], SMALL_ORDER))


class TestSecp256k1Preset:
    """Tests for the secp256k1 parameters."""

    def test_preset(self):
        """Test the preset carries the standard constants."""
        c = secp256k1_preset()
        assert isinstance(c, Curve)
        assert (c.prime, c.a, c.b, c.order) == (ec_prime, 0, 7, ec_order)
        assert c.G == EcPoint(ec_gx, ec_gy)
        assert c.param == secp256k1_param
        assert not c.is_singular()
        assert c.contains(c.G)

    def test_constants(self):
        """Test the decimal values of p and n."""
        assert ec_prime == 2 ** 256 - 2 ** 32 - 977
        assert ec_order == 115792089237316195423570985008687907852837564279074904382605163141518161494337
        assert ec_G == (ec_gx, ec_gy)
        assert (ec_a, ec_b) == (0, 7)

    def test_default_curve(self):
        """Test keys default to secp256k1."""
        assert keys.default_curve == secp256k1_preset()


class TestGenerateKeyPair:
    """Tests for public key derivation."""

    @pytest.mark.parametrize(
        "sk,x,y",
        [(1, ec_gx, ec_gy), (2, G2_X, G2_Y), (3, G3_X, G3_Y), (ec_order - 1, ec_gx, ec_prime - ec_gy)],
    )
    def test_secp256k1_vectors(self, sk, x, y):
        """Test published secp256k1 public keys."""
        assert keys.secp256k1_key_pair(sk) == EcPoint(x, y)

    def test_generator_as_tuple_or_point(self):
        """Test the generator may be given as a coordinate pair."""
        g = SMALL_MULTIPLES[1]
        assert keys.generate_key_pair(17, 2, 2, g, SMALL_ORDER, 7) == EcPoint(0, 6)
        assert keys.generate_key_pair(17, 2, 2, EcPoint(*g), SMALL_ORDER, 7) == EcPoint(0, 6)

    @pytest.mark.parametrize("sk", range(1, SMALL_ORDER))
    def test_small_curve(self, sk):
        """Test every secret of the small curve."""
        assert keys.curve_key_pair(SMALL_CURVE, sk) == EcPoint(*SMALL_MULTIPLES[sk])

    @pytest.mark.parametrize("sk", [0, -1, SMALL_ORDER, SMALL_ORDER + 1])
    def test_invalid_secret(self, sk):
        """Test secrets outside [1, n)."""
        with pytest.raises(InvalidSecretKeyError, match="secret key must be in"):
            keys.curve_key_pair(SMALL_CURVE, sk)

    @pytest.mark.parametrize("sk", [0, ec_order])
    def test_invalid_secp256k1_secret(self, sk):
        """Test secrets outside [1, n) on secp256k1."""
        with pytest.raises(InvalidSecretKeyError):
            keys.secp256k1_key_pair(sk)

    def test_secret_type(self):
        """Test non int secrets."""
        with pytest.raises(TypeError):
            keys.secp256k1_key_pair("1")

    def test_singular_curve(self):
        """Test a curve with zero discriminant is refused."""
        with pytest.raises(SingularCurveError, match="singular"):
            keys.generate_key_pair(17, 0, 0, (1, 1), 17, 1)

    def test_secret_checked_before_curve(self):
        """Test an invalid secret on a singular curve reports the secret."""
        with pytest.raises(InvalidSecretKeyError):
            keys.generate_key_pair(17, 0, 0, (1, 1), 17, 0)


class TestPrivateKey:
    """Tests for the PrivateKey holder."""

    def test_public_key(self):
        """Test the public key of a private key."""
        assert keys.PrivateKey(2).public_key() == EcPoint(G2_X, G2_Y)
        assert keys.PrivateKey(4, SMALL_CURVE).public_key() == EcPoint(3, 1)

    def test_equality_and_str(self):
        """Test comparison and hex printing."""
        assert keys.PrivateKey(255) == keys.PrivateKey(255)
        assert keys.PrivateKey(3) != keys.PrivateKey(3, SMALL_CURVE)
        assert str(keys.PrivateKey(255)) == "\nprivate key in hex:\nff"

    @pytest.mark.parametrize("prv", [0, ec_order])
    def test_out_of_range(self, prv):
        """Test secrets outside [1, n)."""
        with pytest.raises(InvalidSecretKeyError):
            keys.PrivateKey(prv)

    def test_types(self):
        """Test non int secrets and non Curve curves."""
        with pytest.raises(TypeError, match="prv must be an int"):
            keys.PrivateKey("1")
        with pytest.raises(TypeError, match="curve must be a Curve"):
            keys.PrivateKey(1, secp256k1_param)


class TestGeneratePrv:
    """Tests for random private keys."""

    def test_rejects_high_and_zero(self):
        """Test draws >= n or == 0 are thrown away."""
        randbytes = replay(b"\x1f", b"\x13", b"\x00", b"\x07")
        prv = keys.generate_prv(SMALL_CURVE, randbytes)
        assert prv.prv == 7
        assert prv.curve == SMALL_CURVE
        assert prv.public_key() == EcPoint(0, 6)
        assert next(randbytes.remaining, None) is None

    def test_high_bits_masked(self):
        """Test bits above the order length are ignored."""
        prv = keys.generate_prv(SMALL_CURVE, replay(b"\xe5"))
        assert prv.prv == 5

    def test_secp256k1(self):
        """Test a default random key is in range."""
        prv = keys.generate_prv()
        assert 1 <= prv.prv < ec_order
        assert keys.default_curve.contains(prv.public_key())
