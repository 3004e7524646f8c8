from .curve import INF, Curve, EcPoint, point_add, point_double, point_neg, point_sum, scalar_multiply
from .errors import (CompositeModulusError, EllipticCurveError, ErrorKind, InvalidSecretKeyError, NotInvertibleError,
                     NotQuadraticResidueError, PointNotOnCurveError, Result, SingularCurveError, attempt)
from .keys import PrivateKey, curve_key_pair, generate_key_pair, generate_prv, secp256k1_key_pair
from .modular import (DEFAULT_CERTAINTY, TonelliShanksParams, is_probable_prime, legendre, mod_inv, mod_sqrt,
                      rounds_for_error, tonelli_shanks_params)
from .points import MAX_POINTS, enumerate_points, iter_points, slow_multiply, to_canvas
from .secp256k1 import secp256k1_param, secp256k1_preset
