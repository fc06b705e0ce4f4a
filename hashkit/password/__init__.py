"""
hashkit - Password Hashing
==========================
Argon2id password hashing with self-describing PHC string encoding.

Encoded hashes carry the algorithm, Argon2 version, memory/time/lane costs,
salt and key:

    $argon2id$v=19$m=65536,t=3,p=2$<salt>$<key>

Verification always re-derives with the parameters stored in the hash, so
hashes created under older settings keep verifying after the defaults change.
"""

from .models import ALGORITHM_TAG, ARGON2_VERSION, DEFAULT_PARAMETERS, ParameterSet
from .codec import DecodedHash, decode_hash, encode_hash
from .hasher import PasswordHasher, derive_key, get_default_hasher, random_bytes
from .async_ops import hash_password, verify_password
from .sync_ops import hash_password_sync, verify_password_sync

__all__ = [
    # Models
    "ALGORITHM_TAG",
    "ARGON2_VERSION",
    "DEFAULT_PARAMETERS",
    "ParameterSet",
    # Codec
    "DecodedHash",
    "decode_hash",
    "encode_hash",
    # Hasher
    "PasswordHasher",
    "derive_key",
    "get_default_hasher",
    "random_bytes",
    # Async Operations
    "hash_password",
    "verify_password",
    # Sync Operations
    "hash_password_sync",
    "verify_password_sync",
]
