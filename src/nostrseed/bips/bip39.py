"""
BIP-39 mnemonics: entropy <-> word list with an embedded SHA-256 checksum.

The wordlist itself comes from the `mnemonic` distribution; bit grouping and
checksum handling are done here.
"""

from __future__ import annotations

import hashlib
import secrets
import unicodedata
from functools import lru_cache

from mnemonic import Mnemonic

from ..constants import DEFAULT_STRENGTH, VALID_STRENGTHS, WORDLIST_LANGUAGE
from ..errors import InvalidEntropyLength, InvalidMnemonic

_VALID_WORD_COUNTS = tuple(s * 33 // 352 for s in VALID_STRENGTHS)  # 12, 15, ..., 24


@lru_cache(maxsize=None)
def wordlist(language: str = WORDLIST_LANGUAGE) -> tuple[str, ...]:
    """The 2048-word BIP-39 list for language, as an immutable tuple."""
    words = tuple(Mnemonic(language).wordlist)
    if len(words) != 2048:
        raise ValueError(f"wordlist {language!r} has {len(words)} words, expected 2048")
    return words


@lru_cache(maxsize=None)
def _word_index(language: str = WORDLIST_LANGUAGE) -> dict[str, int]:
    return {w: i for i, w in enumerate(wordlist(language))}


def normalize_mnemonic(phrase: str) -> str:
    """NFKD, lower-case, single-spaced."""
    return " ".join(unicodedata.normalize("NFKD", phrase).lower().split())


def entropy_to_mnemonic(entropy: bytes, language: str = WORDLIST_LANGUAGE) -> str:
    """
    Encode entropy as a mnemonic.

    Args:
        entropy: 16, 20, 24, 28 or 32 bytes.

    Returns:
        Space-separated words (12..24).
    """
    if len(entropy) * 8 not in VALID_STRENGTHS:
        raise InvalidEntropyLength(f"entropy must be 16..32 bytes in steps of 4, got {len(entropy)}")
    ent_bits = len(entropy) * 8
    cs_bits = ent_bits // 32
    checksum = hashlib.sha256(entropy).digest()[0] >> (8 - cs_bits)
    bits = (int.from_bytes(entropy, "big") << cs_bits) | checksum
    n_words = (ent_bits + cs_bits) // 11
    words = wordlist(language)
    return " ".join(
        words[(bits >> (11 * (n_words - 1 - i))) & 0x7FF] for i in range(n_words)
    )


def generate_mnemonic(strength: int = DEFAULT_STRENGTH, language: str = WORDLIST_LANGUAGE) -> str:
    """
    Fresh mnemonic from the OS CSPRNG.

    Args:
        strength: Entropy bits: 128, 160, 192, 224 or 256.

    Returns:
        Space-separated words.
    """
    if strength not in VALID_STRENGTHS:
        raise InvalidEntropyLength(f"strength must be one of {VALID_STRENGTHS}, got {strength}")
    entropy = bytearray(secrets.token_bytes(strength // 8))
    try:
        return entropy_to_mnemonic(bytes(entropy), language)
    finally:
        entropy[:] = bytes(len(entropy))


def _decode(candidate: str, language: str) -> bytearray:
    """Words -> entropy; raises InvalidMnemonic on any defect."""
    if not isinstance(candidate, str):
        raise InvalidMnemonic("mnemonic must be a string")
    words = normalize_mnemonic(candidate).split(" ")
    if len(words) not in _VALID_WORD_COUNTS:
        raise InvalidMnemonic(f"invalid word count {len(words)}")
    index = _word_index(language)
    bits = 0
    for word in words:
        i = index.get(word)
        if i is None:
            raise InvalidMnemonic("unknown word in mnemonic")
        bits = (bits << 11) | i
    cs_bits = len(words) * 11 // 33
    ent_bits = len(words) * 11 - cs_bits
    entropy = bytearray((bits >> cs_bits).to_bytes(ent_bits // 8, "big"))
    checksum = bits & ((1 << cs_bits) - 1)
    if hashlib.sha256(entropy).digest()[0] >> (8 - cs_bits) != checksum:
        entropy[:] = bytes(len(entropy))
        raise InvalidMnemonic("mnemonic checksum mismatch")
    return entropy


def validate_mnemonic(candidate: str, language: str = WORDLIST_LANGUAGE) -> bool:
    """True iff candidate has a valid word count, known words and a matching checksum."""
    try:
        entropy = _decode(candidate, language)
    except InvalidMnemonic:
        return False
    entropy[:] = bytes(len(entropy))
    return True


def mnemonic_to_entropy(candidate: str, language: str = WORDLIST_LANGUAGE) -> bytearray:
    """
    Recover the entropy behind a mnemonic.

    Returns:
        Mutable buffer so the caller can wipe it when done.

    Raises:
        InvalidMnemonic: wherever validate_mnemonic would return False.
    """
    return _decode(candidate, language)


__all__: tuple[str, ...] = (
    "entropy_to_mnemonic",
    "generate_mnemonic",
    "mnemonic_to_entropy",
    "normalize_mnemonic",
    "validate_mnemonic",
    "wordlist",
)
