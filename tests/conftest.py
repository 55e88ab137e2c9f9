import random

import pytest


def seeded_entropy(seed):
    rng = random.Random(seed)

    def entropy_f(num_bytes):
        return bytes(rng.getrandbits(8) for _ in range(num_bytes))

    return entropy_f


@pytest.fixture
def entropy():
    return seeded_entropy
