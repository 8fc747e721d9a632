"""
Ad hoc text authentication: Schnorr over SHA-256(UTF-8 message), outside the event format.
"""

from __future__ import annotations

import logging
import re
from typing import Optional, Union

from ..curves import schnorr_sign, schnorr_verify
from ..errors import InvalidSignature, StructuralValidation
from ..hashes import sha256
from ..keys import parse_private_key
from ..types import ValidationResult

_log = logging.getLogger(__name__)

_HEX64 = re.compile(r"[0-9a-fA-F]{64}")
_HEX128 = re.compile(r"[0-9a-fA-F]{128}")


def message_hash(message: str) -> bytes:
    """32-byte SHA-256 of the UTF-8 message."""
    return sha256(message.encode("utf-8"))


def sign_message(
    message: str,
    privkey: Union[bytes, str],
    aux_rand: Optional[bytes] = None,
    log: Optional[logging.Logger] = None,
) -> str:
    """
    Sign free text.

    Args:
        message: Text to sign.
        privkey: 32-byte private key, or its hex.

    Returns:
        128 hex chars (64-byte BIP-340 signature).
    """
    log = log or _log
    sig = schnorr_sign(message_hash(message), parse_private_key(privkey), aux_rand)
    log.debug("Message signed")
    return sig.hex()


def verify_message(message: str, signature: str, pubkey: str) -> ValidationResult:
    """
    Verify a sign_message signature against a 64-hex x-only public key.

    Returns:
        ValidationResult; StructuralValidation for malformed hex, InvalidSignature otherwise.
    """
    if not isinstance(message, str):
        return ValidationResult.fail(StructuralValidation("message must be a string"))
    if not isinstance(signature, str) or not _HEX128.fullmatch(signature):
        return ValidationResult.fail(StructuralValidation("signature must be 128 hex chars"))
    if not isinstance(pubkey, str) or not _HEX64.fullmatch(pubkey):
        return ValidationResult.fail(StructuralValidation("public key must be 64 hex chars"))
    if not schnorr_verify(message_hash(message), bytes.fromhex(pubkey), bytes.fromhex(signature)):
        return ValidationResult.fail(InvalidSignature("Invalid signature"))
    return ValidationResult.ok()


__all__: tuple[str, ...] = ("message_hash", "sign_message", "verify_message")
