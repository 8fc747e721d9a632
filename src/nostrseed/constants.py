"""
Protocol constants and library defaults.
"""

from __future__ import annotations

from enum import IntEnum

# BIP-39
WORDLIST_LANGUAGE = "english"
DEFAULT_STRENGTH = 128  # bits -> 12 words
VALID_STRENGTHS = (128, 160, 192, 224, 256)

# NIP-19
NPUB_PREFIX = "npub"
NSEC_PREFIX = "nsec"
NOTE_PREFIX = "note"
BECH32_MAX_LENGTH = 1000

# NIP-26
DELEGATION_DOMAIN = "nostr"
DELEGATION_TAG = "delegation"


class EventKind(IntEnum):
    """Standard event kinds (NIP-01 and friends)."""

    SET_METADATA = 0
    TEXT_NOTE = 1
    RECOMMEND_SERVER = 2
    CONTACT_LIST = 3
    ENCRYPTED_DIRECT_MESSAGE = 4
    DELETE = 5
    REPOST = 6
    REACTION = 7
    BADGE_AWARD = 8
    CHANNEL_CREATE = 40
    CHANNEL_METADATA = 41
    CHANNEL_MESSAGE = 42
    CHANNEL_HIDE_MESSAGE = 43
    CHANNEL_MUTE_USER = 44
    ZAP_REQUEST = 9734
    ZAP = 9735
    CLIENT_AUTH = 22242
    NWC_WALLET_REQUEST = 23194


DEFAULT_KIND = EventKind.TEXT_NOTE
MAX_KIND = 65535

__all__: tuple[str, ...] = (
    "BECH32_MAX_LENGTH",
    "DEFAULT_KIND",
    "DEFAULT_STRENGTH",
    "DELEGATION_DOMAIN",
    "DELEGATION_TAG",
    "EventKind",
    "MAX_KIND",
    "NOTE_PREFIX",
    "NPUB_PREFIX",
    "NSEC_PREFIX",
    "VALID_STRENGTHS",
    "WORDLIST_LANGUAGE",
)
