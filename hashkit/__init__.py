"""
hashkit
=======
Argon2id password hashing with PHC string encoding, plus content digests.
"""

__version__ = "0.1.0"

# Errors
from hashkit.errors import (
    HashError,
    MalformedHash,
    IncompatibleVersion,
    RandomSourceFailure,
    KeyDerivationFailure,
    InvalidParameters,
)

# Password Hashing
from hashkit.password import (
    ALGORITHM_TAG,
    ARGON2_VERSION,
    DEFAULT_PARAMETERS,
    ParameterSet,
    DecodedHash,
    decode_hash,
    encode_hash,
    PasswordHasher,
    get_default_hasher,
    hash_password,
    verify_password,
    hash_password_sync,
    verify_password_sync,
)

# Configuration
from hashkit.config import HashConfig

# Content Digests
from hashkit.digest import digest, digest_file, sha1_hex

__all__ = [
    # Errors
    "HashError",
    "MalformedHash",
    "IncompatibleVersion",
    "RandomSourceFailure",
    "KeyDerivationFailure",
    "InvalidParameters",
    # Password Hashing
    "ALGORITHM_TAG",
    "ARGON2_VERSION",
    "DEFAULT_PARAMETERS",
    "ParameterSet",
    "DecodedHash",
    "decode_hash",
    "encode_hash",
    "PasswordHasher",
    "get_default_hasher",
    "hash_password",
    "verify_password",
    "hash_password_sync",
    "verify_password_sync",
    # Configuration
    "HashConfig",
    # Content Digests
    "digest",
    "digest_file",
    "sha1_hex",
]
