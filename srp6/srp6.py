import logging
import os

from .errors import (
    SRPError,
    ParameterError,
    RandomnessFailure,
    IdentityHashError,
    InvalidPublicKey,
    InvalidScrambler,
    OnlyCallComputeOnce,
)
from .groups import Params2048, check_positive_int
from .util import number_to_hex, random_nonzero_number

logger = logging.getLogger(__name__)

DefaultParams = Params2048

SALT_BITS = 256
SCRAMBLER_BITS = 128
SERVER_PRIVATE_KEY_BITS = 256
CLIENT_PRIVATE_KEY_BITS = 128

# s = random(salt_bits)
# x = H(hex(s) + user + ":" + password)
# v = exp(g, x)
#  b = random, u = random
#  B = k*v + exp(g, b)
# a = random
# A = exp(g, a)
#  S = exp(A * exp(v, u), b)                   (server)
# S = exp(B - k * exp(g, x), a + u*x)          (client)
# both equal exp(g, b*(a + u*x)), all mod N


def _to_bytes(name, value):
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    raise ParameterError("%s must be str or bytes, got %s" % (name, type(value).__name__))


def identity_hash(salt, user, password, params):
    """x = H(hex(salt) || user || ":" || password), read as a big-endian int.

    user and password may be str (UTF-8 encoded) or bytes.
    """
    message = b"".join(
        [
            number_to_hex(salt).encode("ascii"),
            _to_bytes("user", user),
            b":",
            _to_bytes("password", password),
        ]
    )
    x = params.hash_function.to_number(message)
    if x <= 0:
        raise IdentityHashError("identity hash is zero")
    return x


def random_scalar(num_bits, entropy_f, what):
    check_positive_int(what + " bits", num_bits)
    try:
        return random_nonzero_number(num_bits, entropy_f)
    except Exception as e:
        raise RandomnessFailure("could not generate %s: %s" % (what, e)) from e


class SRPIdentity:
    """Salt, identity hash and verifier for one user and password.

    Only the salt is public. The identity hash and the verifier stay with
    whoever computed them.
    """

    def __init__(self, user, password, salt, params=DefaultParams):
        if isinstance(salt, bool) or not isinstance(salt, int) or salt <= 0:
            raise ParameterError("salt must be a positive integer")
        self._salt = salt
        self._params = params
        self._identity_hash = identity_hash(salt, user, password, params)
        self._verifier = None

    @classmethod
    def create(cls, user, password, params=DefaultParams, salt_bits=SALT_BITS,
               entropy_f=os.urandom):
        "Enrollment: draw a fresh salt."
        salt = random_scalar(salt_bits, entropy_f, "salt")
        return cls(user, password, salt, params)

    @property
    def salt(self):
        return self._salt

    @property
    def params(self):
        return self._params

    @property
    def identity_hash(self):
        return self._identity_hash

    @property
    def verifier(self):
        # v = g^x mod N, computed on first use
        if self._verifier is None:
            p = self._params
            self._verifier = pow(p.generator, self._identity_hash, p.modulus)
        return self._verifier


class _SRP6Agent:
    role = None

    def __init__(self, user, params):
        self._user = user
        self._params = params

        self._private_key = None
        self._public_key = None
        self._scrambler = None
        self._session_key = None
        self._computed = False

    @property
    def user(self):
        return self._user

    @property
    def params(self):
        return self._params

    @property
    def modulus(self):
        return self._params.modulus

    @property
    def generator(self):
        return self._params.generator

    @property
    def multiplier(self):
        return self._params.multiplier

    @property
    def salt(self):
        return self._identity.salt

    @property
    def identity_hash(self):
        return self._identity.identity_hash

    @property
    def private_key(self):
        return self._private_key

    @property
    def public_key(self):
        return self._public_key

    @property
    def scrambler(self):
        return self._scrambler

    @property
    def session_key(self):
        return self._session_key

    def _start_compute(self):
        if self._computed:
            raise OnlyCallComputeOnce(
                "compute_session_key() can only be called once")
        self._computed = True

    def _check_public_key(self, public_key):
        if isinstance(public_key, bool) or not isinstance(public_key, int):
            raise InvalidPublicKey("public key must be an integer")
        if public_key <= 0:
            raise InvalidPublicKey("public key must be positive")
        if public_key % self.modulus == 0:
            raise InvalidPublicKey("public key is zero modulo N")
        return public_key


class SRP6Server(_SRP6Agent):
    "This class manages the server side of an SRP6 key agreement."

    role = "server"

    def __init__(
        self,
        user,
        password,
        params=DefaultParams,
        salt_bits=SALT_BITS,
        scrambler_bits=SCRAMBLER_BITS,
        private_key_bits=SERVER_PRIVATE_KEY_BITS,
        entropy_f=os.urandom,
    ):
        super().__init__(user, params)

        self._identity = SRPIdentity.create(
            user, password, params, salt_bits=salt_bits, entropy_f=entropy_f)

        N = params.modulus
        self._private_key = random_scalar(private_key_bits, entropy_f, "private key")
        self._scrambler = random_scalar(scrambler_bits, entropy_f, "scrambler")

        # B = k*v + g^b (mod N)
        self._public_key = (params.multiplier * self.verifier
                            + pow(params.generator, self._private_key, N)) % N

        logger.debug("server agent created for %r (%d-bit modulus)",
                     user, params.modulus_size_bits)

    @property
    def verifier(self):
        return self._identity.verifier

    def compute_session_key(self, client_public_key):
        self._start_compute()
        A = self._check_public_key(client_public_key)

        N = self.modulus
        temp = (A * pow(self.verifier, self._scrambler, N)) % N
        self._session_key = pow(temp, self._private_key, N)

        logger.debug("server session key computed for %r", self._user)
        return self._session_key


class SRP6Client(_SRP6Agent):
    "This class manages the client side of an SRP6 key agreement."

    role = "client"

    def __init__(
        self,
        user,
        password,
        salt,
        params=DefaultParams,
        private_key_bits=CLIENT_PRIVATE_KEY_BITS,
        entropy_f=os.urandom,
    ):
        super().__init__(user, params)

        # same hash, same concatenation as the server; x is never sent
        self._identity = SRPIdentity(user, password, salt, params)

        self._private_key = random_scalar(private_key_bits, entropy_f, "private key")
        # A = g^a (mod N)
        self._public_key = pow(params.generator, self._private_key, params.modulus)

        logger.debug("client agent created for %r (%d-bit modulus)",
                     user, params.modulus_size_bits)

    def compute_session_key(self, server_public_key, scrambler):
        self._start_compute()
        B = self._check_public_key(server_public_key)
        if isinstance(scrambler, bool) or not isinstance(scrambler, int) \
                or scrambler <= 0:
            raise InvalidScrambler("scrambler must be a positive integer")
        self._scrambler = scrambler

        p = self._params
        N = p.modulus
        x = self.identity_hash
        exponent = self._private_key + scrambler * x
        # B - k*g^x can go negative; take the residue
        base = (B - p.multiplier * pow(p.generator, x, N)) % N
        self._session_key = pow(base, exponent, N)

        logger.debug("client session key computed for %r", self._user)
        return self._session_key


__all__ = [
    "SRPError",
    "ParameterError",
    "RandomnessFailure",
    "IdentityHashError",
    "InvalidPublicKey",
    "InvalidScrambler",
    "OnlyCallComputeOnce",
    "DefaultParams",
    "identity_hash",
    "SRPIdentity",
    "SRP6Server",
    "SRP6Client",
]
