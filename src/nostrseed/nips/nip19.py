"""
NIP-19: bech32-encoded entities (npub public keys, nsec private keys, note event ids).
"""

from __future__ import annotations

from ..constants import NOTE_PREFIX, NPUB_PREFIX, NSEC_PREFIX
from ..errors import InvalidFormat
from ..serde import bech32_decode, bech32_encode

_PREFIXES = (NPUB_PREFIX, NSEC_PREFIX, NOTE_PREFIX)


def _hex32(value: str) -> bytes:
    try:
        data = bytes.fromhex(value)
    except (TypeError, ValueError):
        raise InvalidFormat("expected 64 hex characters") from None
    if len(data) != 32:
        raise InvalidFormat(f"expected 32 bytes, got {len(data)}")
    return data


def encode(prefix: str, data: bytes) -> str:
    """bech32 of a 32-byte key or id under one of the NIP-19 prefixes."""
    if prefix not in _PREFIXES:
        raise InvalidFormat(f"unsupported NIP-19 prefix {prefix!r}")
    if len(data) != 32:
        raise InvalidFormat(f"{prefix} payload must be 32 bytes, got {len(data)}")
    return bech32_encode(prefix, data)


def decode(text: str) -> tuple[str, str]:
    """
    Decode npub/nsec/note text.

    Returns:
        (prefix, 64-char hex payload).

    Raises:
        InvalidFormat, InvalidChecksum
    """
    prefix, data = bech32_decode(text)
    if prefix not in _PREFIXES:
        raise InvalidFormat(f"unsupported NIP-19 prefix {prefix!r}")
    if len(data) != 32:
        raise InvalidFormat(f"{prefix} payload must be 32 bytes, got {len(data)}")
    return prefix, data.hex()


def _decode_as(text: str, expected: str) -> str:
    prefix, data = decode(text)
    if prefix != expected:
        raise InvalidFormat(f"expected {expected}, got {prefix}")
    return data


def npub_encode(pubkey: bytes) -> str:
    return encode(NPUB_PREFIX, pubkey)


def nsec_encode(privkey: bytes) -> str:
    return encode(NSEC_PREFIX, privkey)


def note_encode(event_id: bytes) -> str:
    return encode(NOTE_PREFIX, event_id)


def hex_to_npub(pubkey_hex: str) -> str:
    return npub_encode(_hex32(pubkey_hex))


def hex_to_nsec(privkey_hex: str) -> str:
    return nsec_encode(_hex32(privkey_hex))


def hex_to_note(event_id_hex: str) -> str:
    return note_encode(_hex32(event_id_hex))


def npub_to_hex(npub: str) -> str:
    return _decode_as(npub, NPUB_PREFIX)


def nsec_to_hex(nsec: str) -> str:
    return _decode_as(nsec, NSEC_PREFIX)


def note_to_hex(note: str) -> str:
    return _decode_as(note, NOTE_PREFIX)


__all__: tuple[str, ...] = (
    "decode",
    "encode",
    "hex_to_note",
    "hex_to_npub",
    "hex_to_nsec",
    "note_encode",
    "note_to_hex",
    "npub_encode",
    "npub_to_hex",
    "nsec_encode",
    "nsec_to_hex",
)
