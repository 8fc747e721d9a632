"""
NIP-01 events: canonical serialization, id hash, structural validation, Schnorr sign/verify.
"""

from __future__ import annotations

import logging
import re
import time
from typing import Any, Mapping, Optional, Sequence, Union

from ..constants import DEFAULT_KIND, MAX_KIND
from ..curves import privkey_to_xonly, schnorr_sign, schnorr_verify
from ..errors import HashMismatch, InvalidSignature, StructuralValidation
from ..hashes import sha256
from ..keys import parse_private_key
from ..serde import json_pack
from ..types import SignedEvent, UnsignedEvent, ValidationResult

_log = logging.getLogger(__name__)

_HEX64 = re.compile(r"[0-9a-f]{64}")
_HEX128 = re.compile(r"[0-9a-f]{128}")
_FIELDS = ("id", "pubkey", "created_at", "kind", "tags", "content", "sig")


def canonical_bytes(event: UnsignedEvent) -> bytes:
    """UTF-8 of [0,pubkey,created_at,kind,tags,content] as compact JSON."""
    return json_pack(
        [
            0,
            event.pubkey,
            event.created_at,
            event.kind,
            [list(tag) for tag in event.tags],
            event.content,
        ]
    )


def event_hash(event: UnsignedEvent) -> bytes:
    """32-byte SHA-256 of the canonical serialization."""
    return sha256(canonical_bytes(event))


def get_event_hash(event: UnsignedEvent) -> str:
    """Event id as 64 lower-case hex chars."""
    return event_hash(event).hex()


def create_unsigned_event(
    pubkey: str,
    content: str,
    kind: int = DEFAULT_KIND,
    tags: Sequence[Sequence[str]] = (),
    created_at: Optional[int] = None,
) -> UnsignedEvent:
    """Unsigned event; created_at defaults to the current unix time."""
    return UnsignedEvent(
        pubkey=pubkey,
        created_at=int(time.time()) if created_at is None else created_at,
        kind=kind,
        tags=tags,
        content=content,
    )


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _unsigned_errors(d: Mapping[str, Any]) -> list[str]:
    errors = []
    if not isinstance(d["pubkey"], str) or not _HEX64.fullmatch(d["pubkey"]):
        errors.append("pubkey must be 64 lower-case hex chars")
    if not _is_int(d["created_at"]) or d["created_at"] < 0:
        errors.append("created_at must be a non-negative integer")
    if not _is_int(d["kind"]) or not 0 <= d["kind"] <= MAX_KIND:
        errors.append(f"kind must be an integer in 0..{MAX_KIND}")
    tags = d["tags"]
    if not isinstance(tags, (list, tuple)):
        errors.append("tags must be an array")
    else:
        for i, tag in enumerate(tags):
            if not isinstance(tag, (list, tuple)) or not all(isinstance(v, str) for v in tag):
                errors.append(f"tag {i} must be an array of strings")
    if not isinstance(d["content"], str):
        errors.append("content must be a string")
    return errors


def _shape_errors(d: Mapping[str, Any]) -> list[str]:
    errors = [f"missing {name}" for name in _FIELDS if name not in d]
    if errors:
        return errors
    if not isinstance(d["id"], str) or not _HEX64.fullmatch(d["id"]):
        errors.append("id must be 64 lower-case hex chars")
    if not isinstance(d["sig"], str) or not _HEX128.fullmatch(d["sig"]):
        errors.append("sig must be 128 lower-case hex chars")
    return errors + _unsigned_errors(d)


def validate_event_structure(event: Union[SignedEvent, Mapping[str, Any]]) -> ValidationResult:
    """
    Shape check of a signed event, before any hashing or curve work.

    Args:
        event: SignedEvent or a wire dict (e.g. from json.loads).

    Returns:
        ValidationResult; failures carry StructuralValidation listing every problem.
    """
    if isinstance(event, SignedEvent):
        d: Mapping[str, Any] = {name: getattr(event, name) for name in _FIELDS}
    elif isinstance(event, Mapping):
        d = event
    else:
        return ValidationResult.fail(StructuralValidation("event must be a mapping or SignedEvent"))
    errors = _shape_errors(d)
    if errors:
        return ValidationResult.fail(StructuralValidation("; ".join(errors)))
    return ValidationResult.ok()


def sign_event(
    event: UnsignedEvent,
    privkey: Union[bytes, str],
    aux_rand: Optional[bytes] = None,
    log: Optional[logging.Logger] = None,
) -> SignedEvent:
    """
    Hash and sign an event.

    Args:
        event: Event to sign. Its pubkey should match privkey.
        privkey: 32-byte private key, or its hex.
        aux_rand: Optional BIP-340 auxiliary randomness.

    Returns:
        SignedEvent with id and sig.

    Raises:
        StructuralValidation: a field has the wrong type or range; nothing is coerced.
        InvalidPrivateKey
    """
    log = log or _log
    errors = _unsigned_errors(
        {name: getattr(event, name, None) for name in ("pubkey", "created_at", "kind", "tags", "content")}
    )
    if errors:
        raise StructuralValidation("; ".join(errors))
    privkey = parse_private_key(privkey)
    digest = event_hash(event)
    sig = schnorr_sign(digest, privkey, aux_rand)
    log.debug("Event %s signed", digest.hex())
    return SignedEvent(
        pubkey=event.pubkey,
        created_at=event.created_at,
        kind=event.kind,
        tags=event.tags,
        content=event.content,
        id=digest.hex(),
        sig=sig.hex(),
    )


def finish_event(
    content: str,
    privkey: Union[bytes, str],
    kind: int = DEFAULT_KIND,
    tags: Sequence[Sequence[str]] = (),
    created_at: Optional[int] = None,
) -> SignedEvent:
    """Build an event authored by privkey's public key and sign it."""
    privkey = parse_private_key(privkey)
    event = create_unsigned_event(privkey_to_xonly(privkey).hex(), content, kind, tags, created_at)
    return sign_event(event, privkey)


def verify_event(
    event: Union[SignedEvent, Mapping[str, Any]],
    log: Optional[logging.Logger] = None,
) -> ValidationResult:
    """
    Verify a signed event: shape, then id, then signature.

    Returns:
        ValidationResult with StructuralValidation, HashMismatch or InvalidSignature on failure.
    """
    log = log or _log
    shape = validate_event_structure(event)
    if not shape:
        return shape
    if not isinstance(event, SignedEvent):
        event = SignedEvent.from_dict(event)
    digest = event_hash(event)
    if digest.hex() != event.id:
        return ValidationResult.fail(HashMismatch("Event hash mismatch"))
    log.debug("Verifying event signature %s", event.id)
    if not schnorr_verify(digest, bytes.fromhex(event.pubkey), bytes.fromhex(event.sig)):
        return ValidationResult.fail(InvalidSignature("Invalid signature"))
    return ValidationResult.ok()


__all__: tuple[str, ...] = (
    "canonical_bytes",
    "create_unsigned_event",
    "event_hash",
    "finish_event",
    "get_event_hash",
    "sign_event",
    "validate_event_structure",
    "verify_event",
)
