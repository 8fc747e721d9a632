"""Nostr implementation possibilities: NIP-19 bech32 entities."""

from . import nip19

__all__: tuple[str, ...] = ("nip19",)
