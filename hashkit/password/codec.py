"""
Encoded Hash Codec
==================
Serializes Argon2id results into the PHC string format and parses them back.

Format:
    $argon2id$v=<version>$m=<memory>,t=<iterations>,p=<parallelism>$<salt>$<key>

Salt and key are standard base64 without padding. Their decoded byte
lengths become ``salt_length`` and ``key_length``; there is no separate
length field, so a truncation that still decodes as valid base64 cannot be
detected here.
"""

import base64
import binascii
import re
from dataclasses import dataclass

from ..errors import IncompatibleVersion, InvalidParameters, MalformedHash
from .models import (
    ALGORITHM_TAG,
    ARGON2_VERSION,
    UINT8_MAX,
    UINT32_MAX,
    ParameterSet,
)

FIELD_SEPARATOR = "$"
FIELD_COUNT = 6

# Canonical decimals: no leading zeros, at most 10 digits (enough for uint32).
_DECIMAL = r"(0|[1-9][0-9]{0,9})"
_VERSION_RE = re.compile(rf"v={_DECIMAL}", re.ASCII)
_PARAMS_RE = re.compile(rf"m={_DECIMAL},t={_DECIMAL},p={_DECIMAL}", re.ASCII)
_B64_RE = re.compile(r"[A-Za-z0-9+/]+", re.ASCII)


@dataclass(frozen=True)
class DecodedHash:
    """Fields recovered from an encoded hash."""
    version: int
    params: ParameterSet
    salt: bytes
    key: bytes


def _b64encode(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii").rstrip("=")


def _b64decode(value: str, name: str) -> bytes:
    # Unpadded standard alphabet only; len % 4 == 1 can never be produced.
    if not _B64_RE.fullmatch(value) or len(value) % 4 == 1:
        raise MalformedHash(f"Invalid base64 in {name} field")
    try:
        return base64.b64decode(value + "=" * (-len(value) % 4), validate=True)
    except binascii.Error as e:
        raise MalformedHash(f"Invalid base64 in {name} field") from e


def encode_hash(version: int, params: ParameterSet, salt: bytes, key: bytes) -> str:
    """
    Encode an Argon2id result as a PHC string.

    Args:
        version: Argon2 version the key was derived with
        params: Parameters the key was derived with
        salt: Raw salt bytes
        key: Raw derived key bytes

    Returns:
        Encoded hash with exactly six ``$``-separated fields
    """
    if isinstance(version, bool) or not isinstance(version, int) or version < 0:
        raise ValueError(f"version must be a non-negative integer, got {version!r}")
    if not isinstance(salt, (bytes, bytearray, memoryview)):
        raise TypeError("salt must be bytes")
    if not isinstance(key, (bytes, bytearray, memoryview)):
        raise TypeError("key must be bytes")

    return (
        f"${ALGORITHM_TAG}"
        f"$v={version}"
        f"$m={params.memory_kib},t={params.iterations},p={params.parallelism}"
        f"${_b64encode(bytes(salt))}"
        f"${_b64encode(bytes(key))}"
    )


def decode_hash(encoded: str) -> DecodedHash:
    """
    Parse and validate an encoded hash.

    The input is treated as untrusted. Every field is checked; nothing is
    defaulted or silently truncated.

    Args:
        encoded: Encoded hash as produced by ``encode_hash``

    Returns:
        DecodedHash with lengths derived from the decoded salt and key

    Raises:
        MalformedHash: Structure, number or base64 violation
        IncompatibleVersion: Well-formed hash from another Argon2 version
    """
    if not isinstance(encoded, str):
        raise MalformedHash("Encoded hash must be a string")

    parts = encoded.split(FIELD_SEPARATOR)
    if len(parts) != FIELD_COUNT:
        raise MalformedHash(
            f"Expected {FIELD_COUNT} '$'-separated fields, got {len(parts)}"
        )

    marker, algorithm, version_field, params_field, salt_field, key_field = parts
    if marker:
        raise MalformedHash("Encoded hash must start with '$'")
    if algorithm != ALGORITHM_TAG:
        raise MalformedHash(f"Unsupported algorithm tag {algorithm!r}")

    match = _VERSION_RE.fullmatch(version_field)
    if not match:
        raise MalformedHash("Version field must look like 'v=<integer>'")
    version = int(match.group(1))
    if version != ARGON2_VERSION:
        raise IncompatibleVersion(version, ARGON2_VERSION)

    match = _PARAMS_RE.fullmatch(params_field)
    if not match:
        raise MalformedHash("Parameter field must look like 'm=<int>,t=<int>,p=<int>'")
    memory_kib, iterations, parallelism = (int(g) for g in match.groups())
    if memory_kib > UINT32_MAX or iterations > UINT32_MAX or parallelism > UINT8_MAX:
        raise MalformedHash("Parameter value out of range")

    salt = _b64decode(salt_field, "salt")
    key = _b64decode(key_field, "key")

    try:
        params = ParameterSet(
            memory_kib=memory_kib,
            iterations=iterations,
            parallelism=parallelism,
            salt_length=len(salt),
            key_length=len(key),
        )
    except InvalidParameters as e:
        raise MalformedHash(str(e)) from e

    return DecodedHash(version=version, params=params, salt=salt, key=key)
