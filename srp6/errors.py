# Exceptions
class SRPError(Exception):
    pass


class ParameterError(SRPError, ValueError):
    """The group description is unusable: the modulus is not hexadecimal, or
    the generator, multiplier or a bit length is not a positive integer."""


class RandomnessFailure(SRPError):
    """The entropy function could not supply random bytes. The agent was not
    created."""


class IdentityHashError(SRPError, ValueError):
    """The identity hash could not be turned into an integer."""


class InvalidPublicKey(SRPError):
    """The other side's public key is zero modulo N. Accepting it would fix
    the session key regardless of the password."""


class InvalidScrambler(SRPError):
    """The scrambler must be a positive integer."""


class OnlyCallComputeOnce(SRPError):
    """compute_session_key() may only be called once. Agents are single-use:
    start a new one for every authentication attempt."""


class SessionDecryptionError(SRPError):
    """The ciphertext was not produced with this session key, or was
    tampered with."""
