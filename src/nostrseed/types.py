"""
Value types shared across modules. All are frozen; tags are stored as tuples.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Optional

from .errors import NostrSeedError, StructuralValidation


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a verifier. The error's class names the failure kind."""

    is_valid: bool
    error: Optional[NostrSeedError] = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(True)

    @classmethod
    def fail(cls, error: NostrSeedError) -> "ValidationResult":
        return cls(False, error)

    @property
    def reason(self) -> Optional[str]:
        return str(self.error) if self.error is not None else None

    def __bool__(self) -> bool:
        return self.is_valid


@dataclass(frozen=True)
class PublicKey:
    """A secp256k1 public key in its three projections."""

    compressed: bytes
    schnorr: bytes
    npub: str

    @property
    def hex(self) -> str:
        """x-only key as 64 lower-case hex chars (the form used in events)."""
        return self.schnorr.hex()


@dataclass(frozen=True)
class KeyPair:
    private_key: str = field(repr=False)
    public_key: PublicKey
    nsec: str = field(repr=False)
    seed_phrase: Optional[str] = field(default=None, repr=False)


def _freeze_tags(tags) -> tuple[tuple[str, ...], ...]:
    """Tags as nested tuples. A flat string tag is an error, never split into characters."""
    if not isinstance(tags, (list, tuple)):
        raise StructuralValidation("tags must be an array")
    for i, tag in enumerate(tags):
        if not isinstance(tag, (list, tuple)) or not all(isinstance(v, str) for v in tag):
            raise StructuralValidation(f"tag {i} must be an array of strings")
    return tuple(tuple(tag) for tag in tags)


@dataclass(frozen=True)
class UnsignedEvent:
    pubkey: str
    created_at: int
    kind: int
    tags: tuple[tuple[str, ...], ...]
    content: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "tags", _freeze_tags(self.tags))

    def to_dict(self) -> dict[str, Any]:
        return {
            "pubkey": self.pubkey,
            "created_at": self.created_at,
            "kind": int(self.kind),
            "tags": [list(tag) for tag in self.tags],
            "content": self.content,
        }


@dataclass(frozen=True)
class SignedEvent(UnsignedEvent):
    id: str
    sig: str

    def unsigned(self) -> UnsignedEvent:
        return UnsignedEvent(
            pubkey=self.pubkey,
            created_at=self.created_at,
            kind=self.kind,
            tags=self.tags,
            content=self.content,
        )

    def to_dict(self) -> dict[str, Any]:
        d = super().to_dict()
        return {"id": self.id, **d, "sig": self.sig}

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "SignedEvent":
        """Build from a wire dict. Run validate_event_structure on untrusted input first."""
        return cls(
            pubkey=d["pubkey"],
            created_at=d["created_at"],
            kind=d["kind"],
            tags=d["tags"],
            content=d["content"],
            id=d["id"],
            sig=d["sig"],
        )


@dataclass(frozen=True)
class DelegationConditions:
    kinds: Optional[tuple[int, ...]] = None
    since: Optional[int] = None
    until: Optional[int] = None

    def __post_init__(self) -> None:
        if isinstance(self.kinds, list):
            object.__setattr__(self, "kinds", tuple(self.kinds))

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {}
        if self.kinds is not None:
            d["kinds"] = list(self.kinds) if isinstance(self.kinds, (list, tuple)) else self.kinds
        if self.since is not None:
            d["since"] = self.since
        if self.until is not None:
            d["until"] = self.until
        return d


@dataclass(frozen=True)
class DelegationToken:
    delegator: str
    delegatee: str
    conditions: DelegationConditions
    signature: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "delegator": self.delegator,
            "delegatee": self.delegatee,
            "conditions": self.conditions.to_dict(),
            "signature": self.signature,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"))

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "DelegationToken":
        cond = d.get("conditions") or {}
        return cls(
            delegator=d["delegator"],
            delegatee=d["delegatee"],
            conditions=DelegationConditions(
                kinds=cond.get("kinds"),
                since=cond.get("since"),
                until=cond.get("until"),
            ),
            signature=d["signature"],
        )


__all__: tuple[str, ...] = (
    "DelegationConditions",
    "DelegationToken",
    "KeyPair",
    "PublicKey",
    "SignedEvent",
    "UnsignedEvent",
    "ValidationResult",
)
