"""Hash functions: SHA-256, BIP-340 tagged hash."""

from .sha256 import sha256, tagged_hash

__all__: tuple[str, ...] = ("sha256", "tagged_hash")
