"""
Password Hasher
===============
Argon2id hashing and verification on top of the encoded hash codec.

The KDF itself is argon2-cffi's ``hash_secret_raw``; this module only picks
the salt, runs the KDF with the right parameters and compares keys in
constant time.
"""

import hmac
import secrets
from functools import lru_cache
from typing import Callable, Optional, Union

import structlog
from argon2.exceptions import HashingError
from argon2.low_level import Type, hash_secret_raw

from ..errors import KeyDerivationFailure, RandomSourceFailure
from .codec import decode_hash, encode_hash
from .models import ARGON2_VERSION, DEFAULT_PARAMETERS, ParameterSet

logger = structlog.get_logger(__name__)

RandomSource = Callable[[int], bytes]
Plaintext = Union[str, bytes]


def _to_bytes(plaintext: Plaintext) -> bytes:
    if isinstance(plaintext, str):
        return plaintext.encode("utf-8")
    if isinstance(plaintext, (bytes, bytearray)):
        return bytes(plaintext)
    raise TypeError(
        f"plaintext must be str or bytes, got {type(plaintext).__name__}"
    )


def random_bytes(n: int, source: RandomSource = secrets.token_bytes) -> bytes:
    """
    Read ``n`` bytes from a cryptographically secure random source.

    Raises:
        RandomSourceFailure: The source failed or returned the wrong amount
    """
    try:
        data = source(n)
    except (OSError, NotImplementedError) as e:
        raise RandomSourceFailure(f"Random source failed: {e}") from e

    if not isinstance(data, (bytes, bytearray)) or len(data) != n:
        raise RandomSourceFailure(f"Random source did not return {n} bytes")
    return bytes(data)


def derive_key(password: bytes, salt: bytes, params: ParameterSet) -> bytes:
    """
    Derive ``params.key_length`` bytes with Argon2id.

    Args:
        password: Secret bytes
        salt: Salt bytes
        params: Memory, time and lane costs plus output length

    Returns:
        Raw derived key

    Raises:
        KeyDerivationFailure: Argon2 rejected the parameters
    """
    try:
        return hash_secret_raw(
            secret=password,
            salt=salt,
            time_cost=params.iterations,
            memory_cost=params.memory_kib,
            parallelism=params.parallelism,
            hash_len=params.key_length,
            type=Type.ID,
            version=ARGON2_VERSION,
        )
    except HashingError as e:
        raise KeyDerivationFailure(f"Argon2 rejected the parameters: {e}") from e


class PasswordHasher:
    """
    Hash and verify passwords as self-describing Argon2id strings.

    Instances hold no mutable state and are safe to share between threads.
    """

    def __init__(
        self,
        params: ParameterSet = DEFAULT_PARAMETERS,
        random_source: RandomSource = secrets.token_bytes,
    ):
        self.params = params
        self.random_source = random_source

    def hash(self, plaintext: Plaintext) -> str:
        """
        Hash a password with a fresh random salt.

        Returns:
            Encoded hash (algorithm, version, parameters, salt and key)
        """
        secret = _to_bytes(plaintext)
        salt = random_bytes(self.params.salt_length, self.random_source)
        key = derive_key(secret, salt, self.params)

        logger.debug(
            "password.hashed",
            memory_kib=self.params.memory_kib,
            iterations=self.params.iterations,
            parallelism=self.params.parallelism,
        )
        return encode_hash(ARGON2_VERSION, self.params, salt, key)

    def verify(self, plaintext: Plaintext, encoded: str) -> bool:
        """
        Check a password against an encoded hash.

        The key is re-derived with the parameters stored in ``encoded``,
        not with this hasher's own parameters.

        Returns:
            True if the password matches, False otherwise

        Raises:
            MalformedHash: ``encoded`` is not a valid hash
            IncompatibleVersion: ``encoded`` uses another Argon2 version
        """
        secret = _to_bytes(plaintext)
        decoded = decode_hash(encoded)
        candidate = derive_key(secret, decoded.salt, decoded.params)

        match = hmac.compare_digest(candidate, decoded.key)
        logger.debug("password.verified", match=match)
        return match


@lru_cache(maxsize=1)
def get_default_hasher() -> PasswordHasher:
    """Get cached hasher configured from ``HASHKIT_*`` environment variables."""
    from ..config import HashConfig

    return PasswordHasher(HashConfig.from_env().to_parameters())


def get_hasher(params: Optional[ParameterSet] = None) -> PasswordHasher:
    """Hasher for explicit parameters, or the cached default one."""
    if params is None:
        return get_default_hasher()
    return PasswordHasher(params)
