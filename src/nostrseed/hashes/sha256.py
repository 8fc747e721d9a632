"""
SHA-256 and BIP-340 tagged hashes.
"""

from __future__ import annotations

import hashlib


def sha256(data: bytes) -> bytes:
    """
    Single SHA-256 digest.

    Args:
        data: Bytes to hash.

    Returns:
        32-byte digest.
    """
    return hashlib.sha256(data).digest()


def tagged_hash(tag: str, data: bytes) -> bytes:
    """
    BIP-340 tagged hash: SHA256(SHA256(tag) || SHA256(tag) || data).

    Args:
        tag: Domain tag, e.g. "BIP0340/challenge".
        data: Message bytes.

    Returns:
        32-byte digest.
    """
    tag_hash = hashlib.sha256(tag.encode("utf-8")).digest()
    return hashlib.sha256(tag_hash + tag_hash + data).digest()


__all__: tuple[str, ...] = ("sha256", "tagged_hash")
