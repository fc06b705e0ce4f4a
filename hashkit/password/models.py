"""
Password Hashing Models
=======================
Argon2id parameter set and the constants of the encoded hash format.
"""

from dataclasses import dataclass, fields, replace as _replace

from argon2.low_level import ARGON2_VERSION

from ..errors import InvalidParameters

ALGORITHM_TAG = "argon2id"

UINT8_MAX = 0xFF
UINT32_MAX = 0xFFFFFFFF

__all__ = [
    "ALGORITHM_TAG",
    "ARGON2_VERSION",
    "DEFAULT_PARAMETERS",
    "ParameterSet",
    "UINT8_MAX",
    "UINT32_MAX",
]

_LIMITS = {
    "memory_kib": UINT32_MAX,
    "iterations": UINT32_MAX,
    "parallelism": UINT8_MAX,
    "salt_length": UINT32_MAX,
    "key_length": UINT32_MAX,
}


@dataclass(frozen=True)
class ParameterSet:
    """
    Tunable Argon2id parameters.

    ``salt_length`` and ``key_length`` of a decoded set always come from the
    decoded byte lengths; the encoded format carries no separate length field.
    """
    memory_kib: int      # Memory cost in KiB
    iterations: int      # Time cost (passes)
    parallelism: int     # Lanes, fits in one byte
    salt_length: int     # Salt size in bytes
    key_length: int      # Derived key size in bytes

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidParameters(
                    f"{f.name} must be an integer, got {type(value).__name__}"
                )
            limit = _LIMITS[f.name]
            if not 0 < value <= limit:
                raise InvalidParameters(
                    f"{f.name} must be between 1 and {limit}, got {value}"
                )

    def replace(self, **changes) -> "ParameterSet":
        """Return a validated copy with the given fields changed."""
        return _replace(self, **changes)


# 64 MiB, 3 passes, 2 lanes, 16-byte salt, 32-byte key
DEFAULT_PARAMETERS = ParameterSet(
    memory_kib=64 * 1024,
    iterations=3,
    parallelism=2,
    salt_length=16,
    key_length=32,
)
