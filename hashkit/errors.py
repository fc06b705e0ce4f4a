"""
Hashing Errors
==============
Exception classes raised by password hashing, verification and decoding.

Errors are always raised to the caller. Nothing in hashkit retries or
swallows them, so a caller can tell "wrong password" (``verify`` returns
False) apart from "corrupted stored hash" (``MalformedHash``).
"""


class HashError(Exception):
    """Base class for all hashkit errors."""
    pass


class MalformedHash(HashError, ValueError):
    """Raised when an encoded hash is structurally invalid."""
    pass


class IncompatibleVersion(HashError):
    """Raised when an encoded hash was produced by another Argon2 version."""

    def __init__(self, found: int, expected: int):
        self.found = found
        self.expected = expected
        super().__init__(
            f"Incompatible argon2 version: got v={found}, supported v={expected}"
        )


class RandomSourceFailure(HashError):
    """Raised when the random source cannot produce a salt."""
    pass


class KeyDerivationFailure(HashError):
    """Raised when Argon2 rejects the requested parameters."""
    pass


class InvalidParameters(HashError, ValueError):
    """Raised when hashing parameters are out of range."""
    pass
