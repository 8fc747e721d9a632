"""Signing schemas: NIP-01 events, free-text messages, NIP-26 delegation, NIP-13 proof of work."""

from .delegation import (conditions_query, create_delegation, delegation_expiry,
                         delegation_string, delegation_tag,
                         event_satisfies_delegation, is_valid_delegation,
                         parse_delegation, verify_delegation)
from .events import (canonical_bytes, create_unsigned_event, event_hash,
                     finish_event, get_event_hash, sign_event,
                     validate_event_structure, verify_event)
from .messages import message_hash, sign_message, verify_message
from .pow import (committed_difficulty, count_leading_zero_bits,
                  has_valid_proof_of_work, mine_event)

__all__: tuple[str, ...] = (
    "canonical_bytes",
    "committed_difficulty",
    "conditions_query",
    "count_leading_zero_bits",
    "create_delegation",
    "create_unsigned_event",
    "delegation_expiry",
    "delegation_string",
    "delegation_tag",
    "event_hash",
    "event_satisfies_delegation",
    "finish_event",
    "get_event_hash",
    "has_valid_proof_of_work",
    "is_valid_delegation",
    "message_hash",
    "mine_event",
    "parse_delegation",
    "sign_event",
    "sign_message",
    "validate_event_structure",
    "verify_delegation",
    "verify_event",
    "verify_message",
)
