"""
Content Digests
===============
Plain SHA-1 digests of streams, files and strings, returned as hex.

These carry no salt or parameters and are not suitable for passwords.
"""

import hashlib
from typing import BinaryIO

DEFAULT_CHUNK_SIZE = 64 * 1024


def digest(stream: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> str:
    """
    Hash a binary stream with SHA-1.

    Args:
        stream: Readable binary stream, consumed to EOF
        chunk_size: Bytes read per call

    Returns:
        40-character hex string (lowercase)
    """
    h = hashlib.sha1()
    for chunk in iter(lambda: stream.read(chunk_size), b""):
        h.update(chunk)
    return h.hexdigest()


def digest_file(path) -> str:
    """Hash a file's contents with SHA-1. ``OSError`` propagates."""
    with open(path, "rb") as f:
        return digest(f)


def sha1_hex(*parts: str) -> str:
    """
    Hash strings with SHA-1, in order.

    The parts are fed to one digest as UTF-8, so ``sha1_hex("a", "b")``
    differs from ``sha1_hex("b", "a")``.
    """
    h = hashlib.sha1()
    for part in parts:
        h.update(part.encode("utf-8"))
    return h.hexdigest()
