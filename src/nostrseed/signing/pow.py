"""
NIP-13 proof of work: difficulty is the number of leading zero bits of the
event id, raised by mining a ["nonce", <counter>, <target>] tag.
"""

from __future__ import annotations

import dataclasses
import itertools
import logging
from typing import Optional, Union

from ..types import SignedEvent, UnsignedEvent
from .events import event_hash

_log = logging.getLogger(__name__)

NONCE_TAG = "nonce"


def count_leading_zero_bits(event_id: Union[bytes, str]) -> int:
    """Leading zero bits of an id given as raw bytes or hex."""
    if isinstance(event_id, str):
        event_id = bytes.fromhex(event_id)
    count = 0
    for byte in event_id:
        if byte:
            return count + 8 - byte.bit_length()
        count += 8
    return count


def committed_difficulty(event: UnsignedEvent) -> Optional[int]:
    """Target from the nonce tag's third element, or None if the event commits to none."""
    for tag in event.tags:
        if len(tag) >= 3 and tag[0] == NONCE_TAG and tag[2].isdigit():
            return int(tag[2])
    return None


def has_valid_proof_of_work(event: UnsignedEvent, difficulty: int) -> bool:
    return count_leading_zero_bits(event_hash(event)) >= difficulty


def mine_event(
    event: UnsignedEvent,
    difficulty: int,
    max_attempts: Optional[int] = None,
    log: Optional[logging.Logger] = None,
) -> UnsignedEvent:
    """
    Search nonce values until the event id has `difficulty` leading zero bits.

    Any existing nonce tag is replaced. The result is unsigned; sign it afterwards,
    since the id changes with every nonce.

    Args:
        event: Event to mine. A SignedEvent is mined from its unsigned fields.
        difficulty: Required leading zero bits, 0..256.
        max_attempts: Give up after this many nonces; unbounded when None.

    Returns:
        UnsignedEvent carrying ["nonce", <n>, <difficulty>].

    Raises:
        ValueError: difficulty out of range.
        RuntimeError: no nonce found within max_attempts.
    """
    log = log or _log
    if isinstance(difficulty, bool) or not isinstance(difficulty, int) or not 0 <= difficulty <= 256:
        raise ValueError("difficulty must be an integer in 0..256")
    if isinstance(event, SignedEvent):
        event = event.unsigned()
    base = tuple(tag for tag in event.tags if not (tag and tag[0] == NONCE_TAG))
    target = str(difficulty)
    attempts = itertools.count() if max_attempts is None else range(max_attempts)
    for nonce in attempts:
        candidate = dataclasses.replace(event, tags=base + ((NONCE_TAG, str(nonce), target),))
        if has_valid_proof_of_work(candidate, difficulty):
            log.debug("Mined difficulty %d after %d attempts", difficulty, nonce + 1)
            return candidate
    raise RuntimeError(f"no nonce reaching difficulty {difficulty} in {max_attempts} attempts")


__all__: tuple[str, ...] = (
    "committed_difficulty",
    "count_leading_zero_bits",
    "has_valid_proof_of_work",
    "mine_event",
)
