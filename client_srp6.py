#!/usr/bin/env python
import argparse
import logging
import time

USERNAME = "TEST"
PASSWORD = "test"

SALT_BITS = 512
SCRAMBLER_BITS = 256

SHA3_VECTORS = [
    (b"", "a7ffc6f8bf1ed76651c14756a061d662f580ff4de43b49fa82d80a4b80f8434a",
     "Empty string"),
    (b"abc", "3a985da74fe225b2045c172d6bd390bd855f086e3e9d525b46bfe24511431532",
     "Short ASCII input"),
    (b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq",
     "41c0dba2a9d6240849100376a8235e2c82e1b9998a999e21db32dd97496d3376",
     "Longer ASCII input"),
    (b"a" * 1000000,
     "5c8875ae474a3634ba4fd55ec85bffd661f32aca75c6d699d0cdcb6c115891c1",
     "1 million 'a' characters"),
]


def run_sha3_tests():
    from srp6 import sha3_256_hex

    print("=== SHA3-256 tests ===")
    all_passed = True
    for i, (message, expected, description) in enumerate(SHA3_VECTORS):
        start_time = time.time()
        result = sha3_256_hex(message)
        elapsed_time = time.time() - start_time

        passed = result == expected
        all_passed = all_passed and passed
        print()
        print("Test %d: %s" % (i + 1, description))
        print("Input length: %d bytes" % len(message))
        print("Expected: " + expected)
        print("Got:      " + result)
        print("Result:   " + ("PASS" if passed else "FAIL"))
        print("Time:     %.1fms" % (elapsed_time * 1000))

    print()
    print("Overall result: " + ("ALL TESTS PASSED" if all_passed else "SOME TESTS FAILED"))
    return all_passed


def run_handshake(params):
    from srp6 import SRP6Client, SRP6Server, session_box

    start_time = time.time()

    # server generates (and sends to client) salt, public key and scrambler
    s_time1 = time.time()
    server = SRP6Server(USERNAME, PASSWORD, params=params,
                        salt_bits=SALT_BITS, scrambler_bits=SCRAMBLER_BITS)
    s_time1_res = time.time() - s_time1

    # client generates (and sends to server) its public key
    c_time1 = time.time()
    client = SRP6Client(USERNAME, PASSWORD, server.salt, params=params)
    c_time1_res = time.time() - c_time1

    # this is what would normally travel over the network
    c_time2 = time.time()
    client.compute_session_key(server.public_key, server.scrambler)
    c_time2_res = time.time() - c_time2

    s_time2 = time.time()
    server.compute_session_key(client.public_key)
    s_time2_res = time.time() - s_time2

    starting_text = "Hello"
    encrypted_text = session_box(server).encrypt(starting_text)
    decrypted_text = session_box(client).decrypt(encrypted_text)

    elapsed_time = time.time() - start_time

    print("=== SRP6 Demo ===")
    print("Modulus = %x" % server.modulus)
    print("Multiplier = %x" % server.multiplier)
    print("Generator = %x" % server.generator)
    print("Salt = %x" % server.salt)
    print("IdentityHash = %x" % server.identity_hash)
    print("Verifier = %x" % server.verifier)
    print()
    print("ServerPrivateKey (b) = %x" % server.private_key)
    print("ServerPublicKey (B) = %x" % server.public_key)
    print("Scrambler (u) = %x" % server.scrambler)
    print()
    print("ClientPrivateKey (a) = %x" % client.private_key)
    print("ClientPublicKey (A) = %x" % client.public_key)
    print("ClientIdentityHash (x) = %x" % client.identity_hash)
    print()
    print("ServerSessionKey = %x" % server.session_key)
    print("ClientSessionKey = %x" % client.session_key)
    print()
    print("Starting Text = " + starting_text)
    print("Encrypted Text = " + encrypted_text)
    print("Decrypted Text = " + decrypted_text)
    print()
    print("Time: ", elapsed_time)
    print("Client time: ", c_time1_res + c_time2_res)
    print("Server time: ", s_time1_res + s_time2_res)

    passed = server.session_key == client.session_key and decrypted_text == starting_text
    print("Test Results: " + ("PASSED!" if passed else "FAILED!"))
    return passed


def main(argv=None):
    from srp6.groups import NAMED_PARAMS

    parser = argparse.ArgumentParser(description="SRP6 demo with a custom SHA3-256")
    parser.add_argument("mode", nargs="?", choices=["srp", "sha3test"], default="srp")
    parser.add_argument("--params", choices=sorted(NAMED_PARAMS), default="256")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.mode == "sha3test":
        return 0 if run_sha3_tests() else 1
    return 0 if run_handshake(NAMED_PARAMS[args.params]) else 1


if __name__ == "__main__":
    raise SystemExit(main())
