"""
NIP-26 delegated event signing: a delegator's Schnorr signature over a
condition string authorizes a delegatee key to publish on its behalf.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Mapping, Optional, Union

from ..constants import DELEGATION_DOMAIN, DELEGATION_TAG
from ..curves import privkey_to_xonly, schnorr_sign, schnorr_verify
from ..errors import (InvalidPublicKey, InvalidSignature, StructuralValidation,
                      TimeWindowViolation)
from ..hashes import sha256
from ..keys import parse_private_key
from ..types import (DelegationConditions, DelegationToken, UnsignedEvent,
                     ValidationResult)

_log = logging.getLogger(__name__)

_HEX64 = re.compile(r"[0-9a-f]{64}")
_HEX128 = re.compile(r"[0-9a-f]{128}")


def delegation_string(delegator: str, delegatee: str, conditions: DelegationConditions) -> str:
    """
    The signed string, e.g. "nostr:delegation:<delegator>:<delegatee>:kinds=1,7:created_at>1000:created_at<2000".

    Suffixes appear only when the condition is set, always in the order kinds, since, until.
    A zero since or until counts as unset.
    """
    parts = [DELEGATION_DOMAIN, "delegation", delegator, delegatee]
    if conditions.kinds is not None:
        parts.append("kinds=" + ",".join(str(k) for k in conditions.kinds))
    if conditions.since:
        parts.append(f"created_at>{conditions.since}")
    if conditions.until:
        parts.append(f"created_at<{conditions.until}")
    return ":".join(parts)


def conditions_query(conditions: DelegationConditions) -> str:
    """NIP-26 query-string form of the conditions: "kind=1&created_at>1000&created_at<2000"."""
    parts = []
    if conditions.kinds is not None:
        parts.extend(f"kind={k}" for k in conditions.kinds)
    if conditions.since:
        parts.append(f"created_at>{conditions.since}")
    if conditions.until:
        parts.append(f"created_at<{conditions.until}")
    return "&".join(parts)


def _token_hash(token: DelegationToken) -> bytes:
    return sha256(
        delegation_string(token.delegator, token.delegatee, token.conditions).encode("utf-8")
    )


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _conditions_errors(cond: Any) -> list[str]:
    if not isinstance(cond, Mapping):
        return ["conditions must be an object"]
    errors = []
    kinds = cond.get("kinds")
    if kinds is not None and (
        not isinstance(kinds, (list, tuple)) or not all(_is_int(k) for k in kinds)
    ):
        errors.append("conditions.kinds must be an array of integers")
    for name in ("since", "until"):
        if cond.get(name) is not None and not _is_int(cond[name]):
            errors.append(f"conditions.{name} must be an integer")
    return errors


def _shape_errors(d: Any) -> list[str]:
    if not isinstance(d, Mapping):
        return ["token must be an object"]
    errors = []
    for name in ("delegator", "delegatee"):
        if not isinstance(d.get(name), str) or not _HEX64.fullmatch(d[name]):
            errors.append(f"{name} must be 64 lower-case hex chars")
    if not isinstance(d.get("signature"), str) or not _HEX128.fullmatch(d["signature"]):
        errors.append("signature must be 128 lower-case hex chars")
    return errors + _conditions_errors(d.get("conditions", {}))


def create_delegation(
    delegatee: str,
    conditions: Optional[DelegationConditions],
    delegator_privkey: Union[bytes, str],
    aux_rand: Optional[bytes] = None,
    log: Optional[logging.Logger] = None,
) -> DelegationToken:
    """
    Create a delegation token signed by the delegator.

    Args:
        delegatee: 64-hex x-only public key of the key receiving authority.
        conditions: Kinds and time window; None means unconditional.
        delegator_privkey: Delegator's 32-byte private key, or its hex.

    Returns:
        DelegationToken.

    Raises:
        InvalidPrivateKey, InvalidPublicKey
        StructuralValidation: conditions are not integers, or until is 0
            (a zero bound is left out of the signed string).
    """
    log = log or _log
    if not isinstance(delegatee, str) or not _HEX64.fullmatch(delegatee):
        raise InvalidPublicKey("delegatee must be 64 lower-case hex chars")
    if conditions is None:
        conditions = DelegationConditions()
    if not isinstance(conditions, DelegationConditions):
        raise StructuralValidation("conditions must be DelegationConditions")
    errors = _conditions_errors(conditions.to_dict())
    if conditions.until == 0:
        errors.append("conditions.until must be positive")
    if errors:
        raise StructuralValidation("; ".join(errors))
    privkey = parse_private_key(delegator_privkey)
    delegator = privkey_to_xonly(privkey).hex()
    unsigned = DelegationToken(delegator, delegatee, conditions, signature="")
    signature = schnorr_sign(_token_hash(unsigned), privkey, aux_rand)
    log.debug("Created delegation token for %s", delegatee)
    return DelegationToken(delegator, delegatee, conditions, signature.hex())


def parse_delegation(token: Union[DelegationToken, str]) -> DelegationToken:
    """
    Accept a token object or its JSON text; shape-check either.

    Raises:
        StructuralValidation
    """
    if isinstance(token, DelegationToken):
        if not isinstance(token.conditions, DelegationConditions):
            raise StructuralValidation("conditions must be DelegationConditions")
        d: Any = token.to_dict()
    elif isinstance(token, str):
        try:
            d = json.loads(token)
        except ValueError:
            raise StructuralValidation("delegation token is not valid JSON") from None
    else:
        raise StructuralValidation("delegation token must be a DelegationToken or JSON text")
    errors = _shape_errors(d)
    if errors:
        raise StructuralValidation("; ".join(errors))
    return token if isinstance(token, DelegationToken) else DelegationToken.from_dict(d)


def verify_delegation(
    token: Union[DelegationToken, str],
    now: Optional[int] = None,
    log: Optional[logging.Logger] = None,
) -> ValidationResult:
    """
    Verify a delegation token.

    Args:
        token: DelegationToken or its JSON text.
        now: Unix time to check the since/until window against; skipped when None or 0.

    Returns:
        ValidationResult with StructuralValidation, TimeWindowViolation or InvalidSignature on failure.
    """
    log = log or _log
    if now is not None and not _is_int(now):
        return ValidationResult.fail(StructuralValidation("now must be an integer"))
    try:
        token = parse_delegation(token)
    except StructuralValidation as e:
        return ValidationResult.fail(e)
    cond = token.conditions
    # zero bounds are unset, matching delegation_string
    if now:
        if cond.since and now < cond.since:
            return ValidationResult.fail(
                TimeWindowViolation("Event timestamp before delegation validity period")
            )
        if cond.until and now > cond.until:
            return ValidationResult.fail(
                TimeWindowViolation("Event timestamp after delegation validity period")
            )
    log.debug("Verifying delegation from %s to %s", token.delegator, token.delegatee)
    if not schnorr_verify(
        _token_hash(token), bytes.fromhex(token.delegator), bytes.fromhex(token.signature)
    ):
        return ValidationResult.fail(InvalidSignature("Invalid delegation signature"))
    return ValidationResult.ok()


def is_valid_delegation(token: Union[DelegationToken, str], now: Optional[int] = None) -> bool:
    return verify_delegation(token, now).is_valid


def delegation_expiry(token: Union[DelegationToken, str]) -> Optional[int]:
    """conditions.until, read without checking the signature. None when unset or 0."""
    return parse_delegation(token).conditions.until or None


def delegation_tag(token: DelegationToken) -> list[str]:
    """["delegation", delegator, conditions query, signature] for the delegatee's events."""
    return [DELEGATION_TAG, token.delegator, conditions_query(token.conditions), token.signature]


def event_satisfies_delegation(event: UnsignedEvent, token: DelegationToken) -> bool:
    """
    True iff the event is authored by the delegatee and meets the token's kind
    and created_at conditions (strict bounds, as the condition string reads).
    Does not check the token signature; use verify_delegation for that.
    """
    cond = token.conditions
    if event.pubkey != token.delegatee:
        return False
    if cond.kinds is not None and event.kind not in cond.kinds:
        return False
    if cond.since and not event.created_at > cond.since:
        return False
    if cond.until and not event.created_at < cond.until:
        return False
    return True


__all__: tuple[str, ...] = (
    "conditions_query",
    "create_delegation",
    "delegation_expiry",
    "delegation_string",
    "delegation_tag",
    "event_satisfies_delegation",
    "is_valid_delegation",
    "parse_delegation",
    "verify_delegation",
)
