import hashlib

import nacl.exceptions
import nacl.secret
from hkdf import Hkdf

from .errors import SRPError, SessionDecryptionError
from .util import number_to_bytes

# Once both sides hold the same session key they can talk privately without
# the key ever having crossed the wire. The raw key is a group element, so it
# goes through HKDF before being used as a SecretBox key.

SESSION_INFO = b"SRP6 session encryption"


def session_key_to_box_key(session_key, params):
    ikm = number_to_bytes(session_key, params.modulus)
    h = Hkdf(salt=b"", input_key_material=ikm, hash=hashlib.sha256)
    return h.expand(SESSION_INFO, nacl.secret.SecretBox.KEY_SIZE)


class SessionBox:
    "Encrypts text with a key derived from an SRP6 session key."

    def __init__(self, session_key, params):
        self._box = nacl.secret.SecretBox(
            session_key_to_box_key(session_key, params))

    def encrypt(self, text):
        if isinstance(text, str):
            text = text.encode("utf-8")
        return bytes(self._box.encrypt(text)).hex()

    def decrypt(self, hex_text):
        try:
            ciphertext = bytes.fromhex(hex_text)
        except ValueError as e:
            raise SessionDecryptionError("ciphertext is not hex") from e
        try:
            return self._box.decrypt(ciphertext).decode("utf-8")
        except nacl.exceptions.CryptoError as e:
            raise SessionDecryptionError("could not decrypt message") from e


def session_box(agent):
    if agent.session_key is None:
        raise SRPError("session key has not been computed yet")
    return SessionBox(agent.session_key, agent.params)
