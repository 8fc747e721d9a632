"""Error kinds. Construction-style calls raise these; verifiers return them inside a ValidationResult."""

from __future__ import annotations


class NostrSeedError(ValueError):
    """Base class for every error raised by nostrseed."""


class InvalidMnemonic(NostrSeedError):
    """Bad word count, unknown word or checksum mismatch."""


class InvalidEntropyLength(NostrSeedError):
    pass


class InvalidPrivateKey(NostrSeedError):
    """Zero, out-of-range or malformed secp256k1 scalar."""


class InvalidPublicKey(NostrSeedError):
    """Bytes that do not encode a point on secp256k1."""


class Bech32Error(NostrSeedError):
    pass


class InvalidFormat(Bech32Error):
    """Separator, charset, case, length or padding problem in checksummed text."""


class InvalidChecksum(Bech32Error):
    pass


class HashMismatch(NostrSeedError):
    """Stored event id disagrees with the id recomputed from the event fields."""


class InvalidSignature(NostrSeedError):
    pass


class TimeWindowViolation(NostrSeedError):
    """Delegation checked outside its created_at window."""


class StructuralValidation(NostrSeedError):
    """Shape or type error found before any cryptographic check."""


__all__: tuple[str, ...] = (
    "Bech32Error",
    "HashMismatch",
    "InvalidChecksum",
    "InvalidEntropyLength",
    "InvalidFormat",
    "InvalidMnemonic",
    "InvalidPrivateKey",
    "InvalidPublicKey",
    "InvalidSignature",
    "NostrSeedError",
    "StructuralValidation",
    "TimeWindowViolation",
)
