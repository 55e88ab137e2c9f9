import hashlib

from .errors import IdentityHashError
from .sha3 import sha3_256
from .util import bytes_to_number


def hash_to_number(digest):
    # big-endian, which is the same number as int(hexdigest, 16)
    if not isinstance(digest, (bytes, bytearray)):
        raise IdentityHashError(
            "hash function returned %s, expected bytes" % type(digest).__name__
        )
    if not digest:
        raise IdentityHashError("hash function returned an empty digest")
    return bytes_to_number(bytes(digest))


class IdentityHash:
    "A hash function used to turn salt, user and password into an exponent."

    name = None

    def __call__(self, data):
        raise NotImplementedError

    def to_number(self, data):
        return hash_to_number(self(data))

    def __repr__(self):
        return "<%s %s>" % (type(self).__name__, self.name)


class SHA3_256Hash(IdentityHash):
    name = "sha3-256"

    def __call__(self, data):
        return sha3_256(data)


class HashlibHash(IdentityHash):
    """Any algorithm hashlib knows about, e.g. HashlibHash("sha256")."""

    def __init__(self, name):
        # fail here rather than on first use
        hashlib.new(name)
        self.name = name

    def __call__(self, data):
        return hashlib.new(self.name, data).digest()


DefaultHash = SHA3_256Hash()
