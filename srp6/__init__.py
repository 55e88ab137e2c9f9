from .srp6 import (
    SRPError,
    ParameterError,
    RandomnessFailure,
    IdentityHashError,
    InvalidPublicKey,
    InvalidScrambler,
    OnlyCallComputeOnce,
    DefaultParams,
    identity_hash,
    SRPIdentity,
    SRP6Server,
    SRP6Client,
)
from .groups import SRPParameters, Params256Demo, Params256, Params2048
from .hashes import IdentityHash, SHA3_256Hash, HashlibHash
from .sha3 import SHA3_256, sha3_256, sha3_256_hex
from .session import SessionBox, SessionDecryptionError, session_box

__version__ = "0.1.0"
