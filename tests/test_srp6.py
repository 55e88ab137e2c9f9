import hashlib

import pytest

from srp6 import (
    HashlibHash,
    IdentityHash,
    IdentityHashError,
    InvalidPublicKey,
    InvalidScrambler,
    OnlyCallComputeOnce,
    ParameterError,
    RandomnessFailure,
    SRP6Client,
    SRP6Server,
    SRPIdentity,
    SRPParameters,
    identity_hash,
    sha3_256_hex,
)
from srp6.groups import Params256, Params256Demo, Params2048


def handshake(server, client):
    client.compute_session_key(server.public_key, server.scrambler)
    server.compute_session_key(client.public_key)
    return server.session_key, client.session_key


@pytest.mark.parametrize("params", [Params256Demo, Params256, Params2048])
def test_session_keys_match(params):
    server = SRP6Server("TEST", "test", params=params)
    client = SRP6Client("TEST", "test", server.salt, params=params)
    server_key, client_key = handshake(server, client)
    assert server_key == client_key
    assert 0 < server_key < params.modulus


def test_session_keys_match_with_sha256_identity_hash():
    params = SRPParameters(Params2048.modulus_hex(), generator=2,
                           hash_function=HashlibHash("sha256"))
    server = SRP6Server("alice", "correct horse", params=params)
    client = SRP6Client("alice", "correct horse", server.salt, params=params)
    server_key, client_key = handshake(server, client)
    assert server_key == client_key


def test_session_keys_match_with_bytes_credentials():
    server = SRP6Server(b"alice", b"pw", params=Params256)
    client = SRP6Client("alice", "pw", server.salt, params=Params256)
    server_key, client_key = handshake(server, client)
    assert server_key == client_key


def test_wrong_password_on_client():
    server = SRP6Server("TEST", "test", params=Params256)
    client = SRP6Client("TEST", "wrong", server.salt, params=Params256)
    server_key, client_key = handshake(server, client)
    assert server_key != client_key


def test_wrong_password_on_server():
    server = SRP6Server("TEST", "wrong", params=Params256)
    client = SRP6Client("TEST", "test", server.salt, params=Params256)
    server_key, client_key = handshake(server, client)
    assert server_key != client_key


def test_wrong_user():
    server = SRP6Server("TEST", "test", params=Params256)
    client = SRP6Client("OTHER", "test", server.salt, params=Params256)
    server_key, client_key = handshake(server, client)
    assert server_key != client_key


def test_corrupted_salt():
    server = SRP6Server("TEST", "test", params=Params256)
    client = SRP6Client("TEST", "test", server.salt ^ 1, params=Params256)
    server_key, client_key = handshake(server, client)
    assert server_key != client_key


def test_corrupted_scrambler():
    server = SRP6Server("TEST", "test", params=Params256)
    client = SRP6Client("TEST", "test", server.salt, params=Params256)
    client.compute_session_key(server.public_key, server.scrambler + 1)
    server.compute_session_key(client.public_key)
    assert server.session_key != client.session_key


def test_mismatched_generator():
    other = SRPParameters(Params256Demo.modulus_hex(), generator=5)
    server = SRP6Server("TEST", "test", params=Params256Demo)
    client = SRP6Client("TEST", "test", server.salt, params=other)
    server_key, client_key = handshake(server, client)
    assert server_key != client_key


def test_identity_hash_is_sha3_of_salt_user_password():
    server = SRP6Server("TEST", "test", params=Params256)
    expected = int(sha3_256_hex("%xTEST:test" % server.salt), 16)
    assert server.identity_hash == expected
    assert server.verifier == pow(10, expected, Params256.modulus)


def test_identity_hash_with_hashlib():
    params = SRPParameters("ff" * 32, generator=2, hash_function=HashlibHash("sha256"))
    x = identity_hash(0xABC, "user", "pw", params)
    assert x == int(hashlib.sha256(b"abcuser:pw").hexdigest(), 16)


def test_client_and_server_agree_on_identity_hash():
    server = SRP6Server("TEST", "test", params=Params2048)
    client = SRP6Client("TEST", "test", server.salt, params=Params2048)
    assert client.identity_hash == server.identity_hash


def test_public_values():
    server = SRP6Server("TEST", "test", params=Params2048)
    client = SRP6Client("TEST", "test", server.salt, params=Params2048)
    N = Params2048.modulus
    assert 0 <= server.public_key < N
    assert server.public_key == (3 * server.verifier + pow(2, server.private_key, N)) % N
    assert client.public_key == pow(2, client.private_key, N)
    assert server.scrambler > 0
    assert client.scrambler is None
    assert server.session_key is None and client.session_key is None


def test_bit_lengths_are_respected():
    server = SRP6Server("TEST", "test", params=Params256, salt_bits=64,
                        scrambler_bits=32, private_key_bits=100)
    assert server.salt < 2 ** 64
    assert server.scrambler < 2 ** 32
    assert server.private_key < 2 ** 100

    client = SRP6Client("TEST", "test", server.salt, params=Params256,
                        private_key_bits=40)
    assert client.private_key < 2 ** 40


def test_scripted_entropy_is_reproducible(entropy):
    def run(seed):
        server = SRP6Server("TEST", "test", params=Params256,
                            entropy_f=entropy(seed))
        client = SRP6Client("TEST", "test", server.salt, params=Params256,
                            entropy_f=entropy(seed + 1))
        handshake(server, client)
        return (server.salt, server.private_key, server.scrambler,
                client.private_key, server.session_key)

    assert run(7) == run(7)
    assert run(7) != run(8)


def test_client_subtraction_is_reduced_mod_n():
    params = Params256
    N, g, k = params.modulus, params.generator, params.multiplier
    client = SRP6Client("TEST", "test", 0x1234, params=params)
    x = client.identity_hash
    # B = 1 makes B - k*g^x negative
    client.compute_session_key(1, 5)
    base = (1 - k * pow(g, x, N)) % N
    assert client.session_key == pow(base, client.private_key + 5 * x, N)


def test_accessors_are_read_only():
    server = SRP6Server("TEST", "test", params=Params256)
    with pytest.raises(AttributeError):
        server.session_key = 1
    with pytest.raises(AttributeError):
        server.private_key = 1


def test_identity_is_read_only():
    identity = SRPIdentity("TEST", "test", 5, Params256)
    for field in ("salt", "identity_hash", "params", "verifier"):
        with pytest.raises(AttributeError):
            setattr(identity, field, 6)
    assert identity.identity_hash == SRPIdentity("TEST", "test", 5, Params256).identity_hash


@pytest.mark.parametrize("user, password", [(3, "pw"), ("TEST", 3), (None, "pw"),
                                            ("TEST", None), ("TEST", 1.5)])
def test_credentials_must_be_text_or_bytes(user, password):
    with pytest.raises(ParameterError):
        identity_hash(1, user, password, Params256)


def test_bytearray_credentials_hash_like_bytes():
    assert identity_hash(1, bytearray(b"TEST"), "pw", Params256) == \
        identity_hash(1, b"TEST", b"pw", Params256)


def test_public_key_error_messages():
    server = SRP6Server("TEST", "test", params=Params256)
    with pytest.raises(InvalidPublicKey, match="must be positive"):
        server.compute_session_key(-1)
    server = SRP6Server("TEST", "test", params=Params256)
    with pytest.raises(InvalidPublicKey, match="zero modulo N"):
        server.compute_session_key(Params256.modulus)


def test_agents_do_not_keep_the_entropy_function():
    server = SRP6Server("TEST", "test", params=Params256)
    client = SRP6Client("TEST", "test", server.salt, params=Params256)
    assert not hasattr(server, "entropy_f")
    assert not hasattr(client, "entropy_f")


@pytest.mark.parametrize("public_key", [0, Params256.modulus, 2 * Params256.modulus, -1, "12", None])
def test_server_rejects_bad_client_public_key(public_key):
    server = SRP6Server("TEST", "test", params=Params256)
    with pytest.raises(InvalidPublicKey):
        server.compute_session_key(public_key)


def test_client_rejects_bad_server_public_key():
    client = SRP6Client("TEST", "test", 1, params=Params256)
    with pytest.raises(InvalidPublicKey):
        client.compute_session_key(Params256.modulus, 1)


@pytest.mark.parametrize("scrambler", [0, -1, None, 1.5])
def test_client_rejects_bad_scrambler(scrambler):
    client = SRP6Client("TEST", "test", 1, params=Params256)
    with pytest.raises(InvalidScrambler):
        client.compute_session_key(2, scrambler)


def test_compute_only_once():
    server = SRP6Server("TEST", "test", params=Params256)
    client = SRP6Client("TEST", "test", server.salt, params=Params256)
    handshake(server, client)
    with pytest.raises(OnlyCallComputeOnce):
        server.compute_session_key(client.public_key)
    with pytest.raises(OnlyCallComputeOnce):
        client.compute_session_key(server.public_key, server.scrambler)


def test_entropy_failure_aborts_construction():
    def broken(num_bytes):
        raise OSError("no entropy")

    with pytest.raises(RandomnessFailure):
        SRP6Server("TEST", "test", params=Params256, entropy_f=broken)
    with pytest.raises(RandomnessFailure):
        SRP6Client("TEST", "test", 1, params=Params256, entropy_f=broken)


def test_short_entropy_aborts_construction():
    with pytest.raises(RandomnessFailure):
        SRP6Server("TEST", "test", params=Params256, entropy_f=lambda n: b"\x01")


@pytest.mark.parametrize("kwargs", [{"salt_bits": 0}, {"scrambler_bits": -1},
                                    {"private_key_bits": 0}])
def test_bad_bit_lengths(kwargs):
    with pytest.raises(ParameterError):
        SRP6Server("TEST", "test", params=Params256, **kwargs)


@pytest.mark.parametrize("salt", [0, -1, "abc", None, True])
def test_bad_salt(salt):
    with pytest.raises(ParameterError):
        SRP6Client("TEST", "test", salt, params=Params256)


class _BrokenHash(IdentityHash):
    name = "broken"

    def __init__(self, result):
        self.result = result

    def __call__(self, data):
        return self.result


@pytest.mark.parametrize("result", [b"", "abcd", None, b"\x00" * 32])
def test_unusable_identity_hash_fails_fast(result):
    params = SRPParameters("ff" * 32, generator=2, hash_function=_BrokenHash(result))
    with pytest.raises(IdentityHashError):
        SRPIdentity("TEST", "test", 1, params)


def test_identity_create_draws_salt(entropy):
    identity = SRPIdentity.create("TEST", "test", Params256, salt_bits=64,
                                  entropy_f=entropy(3))
    again = SRPIdentity("TEST", "test", identity.salt, Params256)
    assert identity.salt > 0
    assert identity.identity_hash == again.identity_hash
    assert identity.verifier == again.verifier
