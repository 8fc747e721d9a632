"""
Bech32 (BIP-173) checksummed text: prefix + "1" + base32 words + 6-word BCH checksum.
"""

from __future__ import annotations

from ..constants import BECH32_MAX_LENGTH
from ..errors import InvalidChecksum, InvalidFormat

CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
SEPARATOR = "1"

_CHARSET_REV = {c: i for i, c in enumerate(CHARSET)}
_GENERATOR = (0x3B6A57B2, 0x26508E6D, 0x1EA119FA, 0x3D4233DD, 0x2A1462B3)
_CHECKSUM_CONST = 1
_CHECKSUM_WORDS = 6


def _polymod(values) -> int:
    """BCH checksum over GF(32) values."""
    chk = 1
    for v in values:
        top = chk >> 25
        chk = (chk & 0x1FFFFFF) << 5 ^ v
        for i in range(5):
            if (top >> i) & 1:
                chk ^= _GENERATOR[i]
    return chk


def _hrp_expand(hrp: str) -> list[int]:
    """High bits of each prefix char, a zero, then the low bits."""
    return [ord(c) >> 5 for c in hrp] + [0] + [ord(c) & 31 for c in hrp]


def _create_checksum(hrp: str, words: list[int]) -> list[int]:
    pm = _polymod(_hrp_expand(hrp) + words + [0] * _CHECKSUM_WORDS) ^ _CHECKSUM_CONST
    return [(pm >> 5 * (5 - i)) & 31 for i in range(_CHECKSUM_WORDS)]


def _verify_checksum(hrp: str, words: list[int]) -> bool:
    return _polymod(_hrp_expand(hrp) + words) == _CHECKSUM_CONST


def convertbits(data, frombits: int, tobits: int, pad: bool = True) -> list[int]:
    """
    Regroup a sequence of frombits-wide integers into tobits-wide integers.

    Args:
        data: Iterable of ints, each < 2**frombits.
        frombits, tobits: Group widths (8 -> 5 to encode, 5 -> 8 to decode).
        pad: Zero-pad the last group. When False, leftover bits must be fewer
            than frombits and all zero.

    Returns:
        List of tobits-wide ints.

    Raises:
        InvalidFormat: value out of range, or bad padding when pad is False.
    """
    acc = 0
    bits = 0
    out = []
    maxv = (1 << tobits) - 1
    max_acc = (1 << (frombits + tobits - 1)) - 1
    for value in data:
        if value < 0 or value >> frombits:
            raise InvalidFormat(f"value {value} does not fit in {frombits} bits")
        acc = ((acc << frombits) | value) & max_acc
        bits += frombits
        while bits >= tobits:
            bits -= tobits
            out.append((acc >> bits) & maxv)
    if pad:
        if bits:
            out.append((acc << (tobits - bits)) & maxv)
    elif bits >= frombits:
        raise InvalidFormat("excess padding")
    elif (acc << (tobits - bits)) & maxv:
        raise InvalidFormat("non-zero padding")
    return out


def bech32_encode(prefix: str, payload: bytes) -> str:
    """
    Encode payload bytes under a human-readable prefix.

    Args:
        prefix: 1..83 printable ASCII characters, e.g. "npub".
        payload: Raw bytes.

    Returns:
        Lower-case bech32 string.
    """
    if not 1 <= len(prefix) <= 83 or any(not 33 <= ord(c) <= 126 for c in prefix):
        raise InvalidFormat(f"invalid prefix {prefix!r}")
    hrp = prefix.lower()
    words = convertbits(payload, 8, 5)
    text = hrp + SEPARATOR + "".join(CHARSET[w] for w in words + _create_checksum(hrp, words))
    if len(text) > BECH32_MAX_LENGTH:
        raise InvalidFormat(f"encoded length {len(text)} exceeds {BECH32_MAX_LENGTH}")
    return text


def bech32_decode(text: str) -> tuple[str, bytes]:
    """
    Decode a bech32 string.

    Args:
        text: Bech32 string (all lower- or all upper-case).

    Returns:
        (prefix, payload) with prefix lower-cased.

    Raises:
        InvalidFormat: case mixing, bad characters, missing separator, short data, bad padding.
        InvalidChecksum: checksum does not match.
    """
    if not isinstance(text, str):
        raise InvalidFormat("bech32 input must be a string")
    if len(text) > BECH32_MAX_LENGTH:
        raise InvalidFormat(f"length {len(text)} exceeds {BECH32_MAX_LENGTH}")
    if any(not 33 <= ord(c) <= 126 for c in text):
        raise InvalidFormat("character out of range")
    if text.lower() != text and text.upper() != text:
        raise InvalidFormat("mixed case")
    text = text.lower()
    pos = text.rfind(SEPARATOR)
    if pos < 0:
        raise InvalidFormat("missing separator")
    if pos == 0:
        raise InvalidFormat("empty prefix")
    if len(text) - pos - 1 < _CHECKSUM_WORDS:
        raise InvalidFormat("data part too short")
    hrp = text[:pos]
    try:
        words = [_CHARSET_REV[c] for c in text[pos + 1 :]]
    except KeyError as e:
        raise InvalidFormat(f"invalid character {e.args[0]!r}") from None
    if not _verify_checksum(hrp, words):
        raise InvalidChecksum(f"invalid checksum for {hrp!r} string")
    payload = convertbits(words[:-_CHECKSUM_WORDS], 5, 8, pad=False)
    return hrp, bytes(payload)


__all__: tuple[str, ...] = (
    "CHARSET",
    "SEPARATOR",
    "bech32_decode",
    "bech32_encode",
    "convertbits",
)
