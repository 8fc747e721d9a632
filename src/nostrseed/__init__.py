"""
Nostr keys from BIP-39 seed phrases: NIP-19 bech32 entities, NIP-01 event
signing (BIP-340 Schnorr), NIP-26 delegation, NIP-13 proof of work.
Pure Python curve arithmetic.
"""

import logging

from .__about__ import __version__
from .bips import generate_mnemonic, mnemonic_to_entropy, validate_mnemonic
from .errors import (HashMismatch, InvalidChecksum, InvalidEntropyLength,
                     InvalidFormat, InvalidMnemonic, InvalidPrivateKey,
                     InvalidPublicKey, InvalidSignature, NostrSeedError,
                     StructuralValidation, TimeWindowViolation)
from .keys import (compress_public_key, generate_keypair, is_valid_private_key,
                   is_valid_public_key, keypair_from_mnemonic,
                   keypair_from_private_hex, private_key_from_entropy,
                   public_key_from_private, to_npub, to_nsec)
from .nips.nip19 import (hex_to_note, hex_to_npub, hex_to_nsec, note_to_hex,
                         npub_to_hex, nsec_to_hex)
from .serde import bech32_decode, bech32_encode
from .signing import (create_delegation, create_unsigned_event,
                      delegation_expiry, delegation_string, get_event_hash,
                      has_valid_proof_of_work, mine_event, sign_event,
                      sign_message, validate_event_structure,
                      verify_delegation, verify_event, verify_message)
from .types import (DelegationConditions, DelegationToken, KeyPair, PublicKey,
                    SignedEvent, UnsignedEvent, ValidationResult)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: tuple[str, ...] = (
    # About
    "__version__",
    # Mnemonics: BIP-39
    "generate_mnemonic",
    "mnemonic_to_entropy",
    "validate_mnemonic",
    # Keys
    "compress_public_key",
    "generate_keypair",
    "is_valid_private_key",
    "is_valid_public_key",
    "keypair_from_mnemonic",
    "keypair_from_private_hex",
    "private_key_from_entropy",
    "public_key_from_private",
    "to_npub",
    "to_nsec",
    # Serde: bech32 / NIP-19
    "bech32_decode",
    "bech32_encode",
    "hex_to_note",
    "hex_to_npub",
    "hex_to_nsec",
    "note_to_hex",
    "npub_to_hex",
    "nsec_to_hex",
    # Signing: NIP-01 events, text messages
    "create_unsigned_event",
    "get_event_hash",
    "sign_event",
    "sign_message",
    "validate_event_structure",
    "verify_event",
    "verify_message",
    # Signing: NIP-26 delegation
    "create_delegation",
    "delegation_expiry",
    "delegation_string",
    "verify_delegation",
    # Signing: NIP-13 proof of work
    "has_valid_proof_of_work",
    "mine_event",
    # Types
    "DelegationConditions",
    "DelegationToken",
    "KeyPair",
    "PublicKey",
    "SignedEvent",
    "UnsignedEvent",
    "ValidationResult",
    # Errors
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
