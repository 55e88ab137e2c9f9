"""SHA3-256 built directly on the Keccak-f[1600] permutation (FIPS 202).

The sponge has a 1088-bit rate and a 512-bit capacity. The whole message is
buffered, padded with the SHA3 domain suffix and absorbed block by block;
32 bytes are then squeezed out of the first four lanes.

    >>> sha3_256_hex(b"abc")
    '3a985da74fe225b2045c172d6bd390bd855f086e3e9d525b46bfe24511431532'
"""

ROUNDS = 24
RATE = 1088  # bits
CAPACITY = 512  # bits
OUTPUT_LENGTH = 256  # bits

RATE_BYTES = RATE // 8
OUTPUT_BYTES = OUTPUT_LENGTH // 8
LANE_BYTES = 8

SHA3_SUFFIX = 0x06

MASK64 = 0xFFFFFFFFFFFFFFFF

ROUND_CONSTANTS = [
    0x0000000000000001, 0x0000000000008082, 0x800000000000808A, 0x8000000080008000,
    0x000000000000808B, 0x0000000080000001, 0x8000000080008081, 0x8000000000008009,
    0x000000000000008A, 0x0000000000000088, 0x0000000080008009, 0x000000008000000A,
    0x000000008000808B, 0x800000000000008B, 0x8000000000008089, 0x8000000000008003,
    0x8000000000008002, 0x8000000000000080, 0x000000000000800A, 0x800000008000000A,
    0x8000000080008081, 0x8000000000008080, 0x0000000080000001, 0x8000000080008008,
]

# rotation offsets, indexed by 5*y + x
RHO_OFFSETS = [
    0, 1, 62, 28, 27,
    36, 44, 6, 55, 20,
    3, 10, 43, 25, 39,
    41, 45, 15, 21, 8,
    18, 2, 61, 56, 14,
]


def rotate_left(value, positions):
    positions %= 64
    if positions == 0:
        return value
    return ((value << positions) | (value >> (64 - positions))) & MASK64


def bytes_to_lane(data):
    return int.from_bytes(data, "little")


def lane_to_bytes(lane):
    return lane.to_bytes(LANE_BYTES, "little")


def pad(message, suffix=SHA3_SUFFIX, rate_bytes=RATE_BYTES):
    """Multi-rate padding: suffix byte, zeros, then 0x80 ORed into the last byte.

    Always adds at least one byte, so a message that already fills whole
    blocks gets a complete extra block.
    """
    padded = bytearray(message)
    padded.append(suffix)
    padded.extend(b"\x00" * (-len(padded) % rate_bytes))
    padded[-1] |= 0x80
    return bytes(padded)


class SHA3_256:
    "One-shot SHA3-256. The state is cleared at the start of every digest."

    def __init__(self):
        self.state = self._empty_state()

    @staticmethod
    def _empty_state():
        return [[0] * 5 for _ in range(5)]

    @classmethod
    def hash(cls, message):
        """Hash bytes or text (UTF-8) and return the lowercase hex digest."""
        return cls().hexdigest(message)

    def digest(self, message):
        if isinstance(message, str):
            message = message.encode("utf-8")
        self.state = self._empty_state()

        padded = pad(message)
        for offset in range(0, len(padded), RATE_BYTES):
            self.absorb(padded[offset:offset + RATE_BYTES])
            self.keccak_f()

        return self.squeeze()

    def hexdigest(self, message):
        return self.digest(message).hex()

    def absorb(self, block):
        state = self.state
        for i in range(len(block) // LANE_BYTES):
            lane = bytes_to_lane(block[i * LANE_BYTES:(i + 1) * LANE_BYTES])
            x, y = i % 5, i // 5
            if y < 5:
                state[y][x] ^= lane

    def squeeze(self):
        output = bytearray()
        for y in range(5):
            for x in range(5):
                if len(output) >= OUTPUT_BYTES:
                    return bytes(output[:OUTPUT_BYTES])
                output += lane_to_bytes(self.state[y][x])
        return bytes(output[:OUTPUT_BYTES])

    ########################################
    # Keccak-f[1600]

    def keccak_f(self):
        for round_index in range(ROUNDS):
            self.theta()
            self.rho_pi()
            self.chi()
            self.iota(round_index)

    def theta(self):
        state = self.state
        c = [state[0][x] ^ state[1][x] ^ state[2][x] ^ state[3][x] ^ state[4][x]
             for x in range(5)]
        d = [c[(x + 4) % 5] ^ rotate_left(c[(x + 1) % 5], 1) for x in range(5)]
        for y in range(5):
            row = state[y]
            for x in range(5):
                row[x] ^= d[x]

    def rho_pi(self):
        state = self.state
        new_state = self._empty_state()
        for y in range(5):
            for x in range(5):
                new_state[(2 * x + 3 * y) % 5][y] = rotate_left(
                    state[y][x], RHO_OFFSETS[5 * y + x]
                )
        self.state = new_state

    def chi(self):
        new_state = self._empty_state()
        for y in range(5):
            row = self.state[y]
            for x in range(5):
                new_state[y][x] = row[x] ^ (
                    (~row[(x + 1) % 5] & MASK64) & row[(x + 2) % 5]
                )
        self.state = new_state

    def iota(self, round_index):
        self.state[0][0] ^= ROUND_CONSTANTS[round_index]


def sha3_256(message):
    return SHA3_256().digest(message)


def sha3_256_hex(message):
    return SHA3_256().hexdigest(message)
