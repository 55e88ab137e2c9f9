import binascii
import math

# integers <-> bytes/hex, and random numbers drawn from an entropy function

def size_bits(maxval):
    if hasattr(maxval, "bit_length"):
        return maxval.bit_length()
    return int(math.ceil(math.log(maxval, 2)))


def size_bytes(maxval):
    return int(math.ceil(size_bits(maxval) / 8))


def number_to_bytes(num, maxval):
    # fixed width, so both sides agree on the encoding of a group element
    num_bytes = size_bytes(maxval)
    return num.to_bytes(num_bytes, "big")


def bytes_to_number(s):
    return int(binascii.hexlify(s), 16) if s else 0


def hex_to_number(s):
    """Parse a hex string (optional 0x prefix, any case) into an int.

    Raises ValueError for anything that is not hexadecimal.
    """
    if not isinstance(s, str):
        raise ValueError("expected a hex string, got %r" % type(s).__name__)
    text = s.strip()
    if text[:2].lower() == "0x":
        text = text[2:]
    if not text or any(c not in "0123456789abcdefABCDEF" for c in text):
        raise ValueError("not a hexadecimal string: %r" % s)
    return int(text, 16)


def number_to_hex(num):
    # lowercase, no prefix, no padding
    return format(num, "x")


def random_number(num_bits, entropy_f):
    """Return a uniformly distributed integer in [0, 2**num_bits).

    entropy_f(n) must return exactly n bytes, like os.urandom.
    """
    num_bytes = (num_bits + 7) // 8
    data = entropy_f(num_bytes)
    if not isinstance(data, bytes) or len(data) != num_bytes:
        raise ValueError("entropy function returned %r bytes, wanted %d"
                         % (len(data) if isinstance(data, bytes) else data,
                            num_bytes))
    excess_bits = num_bytes * 8 - num_bits
    return bytes_to_number(data) >> excess_bits


def random_nonzero_number(num_bits, entropy_f):
    while True:
        n = random_number(num_bits, entropy_f)
        if n:
            return n
