"""
Async Password Hashing
======================
Async-safe password hashing and verification using Argon2id.
"""

import asyncio
from typing import Optional

from .hasher import Plaintext
from .models import ParameterSet
from .sync_ops import hash_password_sync, verify_password_sync


async def hash_password(plaintext: Plaintext, params: Optional[ParameterSet] = None) -> str:
    """
    Hash a password using Argon2id.

    Args:
        plaintext: Password to hash
        params: Parameters to use instead of the configured defaults

    Returns:
        Encoded hash (includes algorithm, version, parameters, salt and key)
    """
    loop = asyncio.get_running_loop()

    # Run in executor to avoid blocking the event loop
    return await loop.run_in_executor(None, hash_password_sync, plaintext, params)


async def verify_password(plaintext: Plaintext, encoded: str) -> bool:
    """
    Verify a password against an encoded Argon2id hash.

    Decoding errors propagate unchanged, so a corrupted stored hash raises
    instead of returning False.

    Args:
        plaintext: Password to check
        encoded: Stored encoded hash

    Returns:
        True if password matches, False otherwise
    """
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, verify_password_sync, plaintext, encoded)
