"""
Key derivation: seed phrase -> entropy -> private key -> public key projections.

The private key is SHA-256 of the BIP-39 entropy (not the BIP-32 / NIP-06
path), which keeps the phrase-to-key mapping a single hash.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Optional, Union

from .bips import generate_mnemonic, mnemonic_to_entropy, normalize_mnemonic
from .constants import DEFAULT_STRENGTH
from .curves import compress_pubkey, decode_pubkey, is_valid_privkey, privkey_to_pubkey
from .errors import InvalidPrivateKey, InvalidPublicKey, NostrSeedError
from .hashes import sha256
from .nips.nip19 import npub_encode, nsec_encode
from .types import KeyPair, PublicKey

_log = logging.getLogger(__name__)


@contextmanager
def wiped(buf: bytearray) -> Iterator[bytearray]:
    """Yield buf and overwrite it with zeros on exit, whatever the exit path."""
    try:
        yield buf
    finally:
        buf[:] = bytes(len(buf))


def _strip_hex(value: str) -> str:
    return value[2:] if value.startswith(("0x", "0X")) else value


def _privkey_from_hex(privkey_hex: str) -> bytes:
    if not isinstance(privkey_hex, str):
        raise InvalidPrivateKey("private key must be a hex string")
    value = _strip_hex(privkey_hex)
    if len(value) != 64:
        raise InvalidPrivateKey("private key must be 64 hex characters")
    try:
        return bytes.fromhex(value)
    except ValueError:
        raise InvalidPrivateKey("private key is not valid hex") from None


def parse_private_key(privkey: Union[bytes, str]) -> bytes:
    """32-byte private key from bytes or hex; raises InvalidPrivateKey on a malformed value."""
    if isinstance(privkey, (bytes, bytearray)):
        if len(privkey) != 32:
            raise InvalidPrivateKey("private key must be 32 bytes")
        return bytes(privkey)
    return _privkey_from_hex(privkey)


def private_key_from_entropy(entropy: Union[bytes, bytearray]) -> bytes:
    """
    Hash entropy to a 32-byte private key.

    The result is not range-checked here; public_key_from_private rejects
    zero and values >= n.
    """
    return sha256(bytes(entropy))


def public_key_from_private(privkey: bytes) -> PublicKey:
    """
    Derive the public key projections.

    Raises:
        InvalidPrivateKey: zero scalar, scalar >= n, or wrong length.
    """
    compressed = privkey_to_pubkey(privkey)
    schnorr = compressed[1:]
    return PublicKey(compressed=compressed, schnorr=schnorr, npub=npub_encode(schnorr))


def to_nsec(privkey: bytes) -> str:
    return nsec_encode(privkey)


def to_npub(pubkey: Union[PublicKey, bytes]) -> str:
    """npub text for a PublicKey or a 32-byte x-only key."""
    if isinstance(pubkey, PublicKey):
        return pubkey.npub
    return npub_encode(pubkey)


def keypair_from_private_key(privkey: bytes, seed_phrase: Optional[str] = None) -> KeyPair:
    public_key = public_key_from_private(privkey)
    return KeyPair(
        private_key=privkey.hex(),
        public_key=public_key,
        nsec=to_nsec(privkey),
        seed_phrase=seed_phrase,
    )


def keypair_from_private_hex(privkey_hex: str) -> KeyPair:
    """
    Key pair from a 64-char hex private key (optional 0x prefix). seed_phrase is None.

    Raises:
        InvalidPrivateKey
    """
    return keypair_from_private_key(_privkey_from_hex(privkey_hex))


def keypair_from_mnemonic(mnemonic: str, log: Optional[logging.Logger] = None) -> KeyPair:
    """
    Key pair from a BIP-39 phrase. The entropy buffer is zeroed before returning or raising.

    Raises:
        InvalidMnemonic, InvalidPrivateKey
    """
    log = log or _log
    try:
        with wiped(mnemonic_to_entropy(mnemonic)) as entropy:
            privkey = private_key_from_entropy(entropy)
        return keypair_from_private_key(privkey, seed_phrase=normalize_mnemonic(mnemonic))
    except NostrSeedError as e:
        log.debug("Failed to derive key pair from seed phrase: %s", e)
        raise


def generate_keypair(strength: int = DEFAULT_STRENGTH) -> KeyPair:
    """Fresh seed phrase and the key pair derived from it."""
    return keypair_from_mnemonic(generate_mnemonic(strength))


def is_valid_private_key(privkey_hex: str) -> bool:
    try:
        return is_valid_privkey(_privkey_from_hex(privkey_hex))
    except InvalidPrivateKey:
        return False


def _pubkey_bytes(pubkey_hex: str) -> bytes:
    if not isinstance(pubkey_hex, str):
        raise InvalidPublicKey("public key must be a hex string")
    try:
        return bytes.fromhex(_strip_hex(pubkey_hex))
    except ValueError:
        raise InvalidPublicKey("public key is not valid hex") from None


def is_valid_public_key(pubkey_hex: str) -> bool:
    """True for an on-curve x-only (32), compressed (33) or uncompressed (65) key."""
    try:
        decode_pubkey(_pubkey_bytes(pubkey_hex))
    except InvalidPublicKey:
        return False
    return True


def compress_public_key(pubkey_hex: str) -> str:
    """Hex of the 33-byte compressed form. x-only input is lifted to even y."""
    return compress_pubkey(_pubkey_bytes(pubkey_hex)).hex()


def x_only_public_key(pubkey_hex: str) -> str:
    return compress_public_key(pubkey_hex)[2:]


__all__: tuple[str, ...] = (
    "compress_public_key",
    "generate_keypair",
    "is_valid_private_key",
    "is_valid_public_key",
    "keypair_from_mnemonic",
    "keypair_from_private_hex",
    "keypair_from_private_key",
    "parse_private_key",
    "private_key_from_entropy",
    "public_key_from_private",
    "to_npub",
    "to_nsec",
    "wiped",
    "x_only_public_key",
)
