from .errors import ParameterError
from .hashes import DefaultHash, IdentityHash
from .util import (
    size_bits,
    size_bytes,
    hex_to_number,
    number_to_hex,
)

"""Description of the group an SRP6 exchange runs in.

Both sides must hold identical parameters:

* N, the modulus, a large (ideally safe) prime
* g, a generator of the multiplicative group modulo N
* k, the multiplier mixed into the server's public key (3 for SRP6)
* H, the hash that turns salt, user and password into the identity hash

Nothing here checks that N is prime or that g generates the group. Whoever
picks the parameters is responsible for that. Mismatched parameters do not
raise: the two sides simply end up with different session keys.
"""

SRP6_MULTIPLIER = 3


def check_positive_int(name, value):
    # bool is an int subclass, but True is not a generator
    if isinstance(value, bool) or not isinstance(value, int):
        raise ParameterError("%s must be an integer, got %r" % (name, value))
    if value <= 0:
        raise ParameterError("%s must be positive, got %d" % (name, value))
    return value


class SRPParameters:
    def __init__(self, modulus, generator, multiplier=SRP6_MULTIPLIER,
                 hash_function=None):
        try:
            N = hex_to_number(modulus)
        except ValueError as e:
            raise ParameterError("modulus: %s" % e) from e
        if N <= 1:
            raise ParameterError("modulus must be greater than 1")

        self._N = N
        self._g = check_positive_int("generator", generator)
        self._k = check_positive_int("multiplier", multiplier)

        if hash_function is None:
            hash_function = DefaultHash
        if not isinstance(hash_function, IdentityHash):
            raise ParameterError(
                "hash_function must be an IdentityHash, got %r" % (hash_function,)
            )
        self._hash = hash_function

        # sizes of the public values, for fixed-width encodings
        self._size_bits = size_bits(self._N)
        self._size_bytes = size_bytes(self._N)

    @property
    def modulus(self):
        return self._N

    @property
    def generator(self):
        return self._g

    @property
    def multiplier(self):
        return self._k

    @property
    def hash_function(self):
        return self._hash

    @property
    def modulus_size_bits(self):
        return self._size_bits

    @property
    def modulus_size_bytes(self):
        return self._size_bytes

    def modulus_hex(self):
        return number_to_hex(self._N)

    def __eq__(self, other):
        if not isinstance(other, SRPParameters):
            return NotImplemented
        return (self._N, self._g, self._k, self._hash.name) == (
            other._N, other._g, other._k, other._hash.name)

    def __hash__(self):
        return hash((self._N, self._g, self._k, self._hash.name))

    def __repr__(self):
        return "<SRPParameters %d-bit g=%d k=%d %s>" % (
            self.modulus_size_bits, self._g, self._k, self._hash.name)


# The 257-bit modulus and generator 3 come from the TypeScript demo of this
# protocol. Far too small for real use, but quick in tests.
Params256Demo = SRPParameters(
    "115b8b692e0e045692cf280b436735c77a5a9e8a9e7ed56c965f87db5b2a2ece3",
    generator=3,
)

# 256-bit modulus with generator 10, from the C# demo. Also a toy.
Params256 = SRPParameters(
    "20E176988FD33DE7AE0D296BF805A49F3F45B92FB59036DCC9F0624B89B2DB67",
    generator=0x0A,
)

# RFC 5054, appendix A, 2048-bit group.
Params2048 = SRPParameters(
    "ac6bdb41324a9a9bf166de5e1389582faf72b6651987ee07fc3192943db56050"
    "a37329cbb4a099ed8193e0757767a13dd52312ab4b03310dcd7f48a9da04fd50"
    "e8083969edb767b0cf6095179a163ab3661a05fbd5faaae82918a9962f0b93b8"
    "55f97993ec975eeaa80d740adbf4ff747359d041d5c33ea71d281e446b14773b"
    "ca97b43a23fb801676bd207a436c6481f1d2b9078717461a5b9d32e688f87748"
    "544523b524b0d57d5ea77a2775d2ecfa032cfbdbf52fb3786160279004e57ae6"
    "af874e7303ce53299ccc041c7bc308d82a5698f3a8d0c38271ae35f8e9dbfbb6"
    "94b5c803d89f7ae435de236d525f54759b65e372fcd68ef20fa7111f9e4aff73",
    generator=2,
)

NAMED_PARAMS = {
    "demo256": Params256Demo,
    "256": Params256,
    "2048": Params2048,
}
