"""
Sync Password Operations
========================
Synchronous password operations for non-async contexts.
"""

from typing import Optional

from .hasher import Plaintext, PasswordHasher, get_hasher
from .models import ParameterSet


def hash_password_sync(plaintext: Plaintext, params: Optional[ParameterSet] = None) -> str:
    """Synchronous version of hash_password."""
    return get_hasher(params).hash(plaintext)


def verify_password_sync(plaintext: Plaintext, encoded: str) -> bool:
    """
    Synchronous version of verify_password.

    Only the parameters stored in ``encoded`` are used, so HASHKIT_* settings
    are never read here.
    """
    return PasswordHasher().verify(plaintext, encoded)
