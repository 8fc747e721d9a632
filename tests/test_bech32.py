"""Bech32 codec and NIP-19 entity tests. Vectors from the NIP-19 document."""

from __future__ import annotations

import pytest

from nostrseed import (InvalidChecksum, InvalidFormat, bech32_decode, bech32_encode,
                       hex_to_note, hex_to_npub, hex_to_nsec, note_to_hex,
                       npub_to_hex, nsec_to_hex)
from nostrseed.nips import nip19
from nostrseed.serde import convertbits
from nostrseed.serde.bech32 import CHARSET

NIP19_NPUB = "npub10elfcs4fr0l0r8af98jlmgdh9c8tcxjvz9qkw038js35mp4dma8qzvjptg"
NIP19_NPUB_HEX = "7e7e9c42a91bfef19fa929e5fda1b72e0ebc1a4c1141673e2794234d86addf4e"
NIP19_NSEC = "nsec1vl029mgpspedva04g90vltkh6fvh240zqtv9k0t9af8935ke9laqsnlfe5"
NIP19_NSEC_HEX = "67dea2ed018072d675f5415ecfaed7d2597555e202d85b3d65ea4e58d2d92ffa"


def test_nip19_npub_vector() -> None:
    assert hex_to_npub(NIP19_NPUB_HEX) == NIP19_NPUB
    assert npub_to_hex(NIP19_NPUB) == NIP19_NPUB_HEX


def test_nip19_nsec_vector() -> None:
    assert hex_to_nsec(NIP19_NSEC_HEX) == NIP19_NSEC
    assert nsec_to_hex(NIP19_NSEC) == NIP19_NSEC_HEX


def test_nip19_note_roundtrip() -> None:
    event_id = "ab" * 32
    note = hex_to_note(event_id)
    assert note.startswith("note1")
    assert note_to_hex(note) == event_id
    assert nip19.decode(note) == ("note", event_id)


def test_nip19_wrong_family_rejected() -> None:
    with pytest.raises(InvalidFormat):
        nsec_to_hex(NIP19_NPUB)
    with pytest.raises(InvalidFormat):
        npub_to_hex(NIP19_NSEC)


def test_nip19_rejects_wrong_payload_length() -> None:
    with pytest.raises(InvalidFormat):
        nip19.decode(bech32_encode("npub", bytes(33)))
    with pytest.raises(InvalidFormat):
        hex_to_npub("ab" * 31)
    with pytest.raises(InvalidFormat):
        nip19.decode(bech32_encode("nprofile", bytes(32)))


@pytest.mark.parametrize(
    "prefix,payload",
    [
        ("npub", bytes(32)),
        ("nsec", b"\xff" * 32),
        ("note", bytes(range(32))),
        ("a", b""),
        ("x", b"\x01"),
        ("custom", bytes(range(200))),
    ],
)
def test_bech32_roundtrip(prefix: str, payload: bytes) -> None:
    assert bech32_decode(bech32_encode(prefix, payload)) == (prefix, payload)


def test_bech32_uppercase_accepted() -> None:
    assert bech32_decode(NIP19_NPUB.upper()) == ("npub", bytes.fromhex(NIP19_NPUB_HEX))


def test_bech32_single_substitution_detected() -> None:
    """Replacing any one character (sampled positions) must not decode."""
    for pos in range(0, len(NIP19_NPUB), 3):
        original = NIP19_NPUB[pos]
        replacement = next(c for c in CHARSET if c != original)
        corrupted = NIP19_NPUB[:pos] + replacement + NIP19_NPUB[pos + 1 :]
        with pytest.raises((InvalidChecksum, InvalidFormat)):
            bech32_decode(corrupted)


def test_bech32_data_corruption_is_checksum_error() -> None:
    corrupted = NIP19_NPUB[:-1] + ("q" if NIP19_NPUB[-1] != "q" else "p")
    with pytest.raises(InvalidChecksum):
        bech32_decode(corrupted)


def test_bech32_missing_separator() -> None:
    with pytest.raises(InvalidFormat):
        bech32_decode(NIP19_NPUB.replace("1", "", 1))


@pytest.mark.parametrize(
    "text",
    [
        "1qqqqqqqq",  # empty prefix
        "npub1qqqqq",  # data part too short
        "npub1" + "b" * 58,  # 'b' not in charset
        "Npub10elfcs4fr0l0r8af98jlmgdh9c8tcxjvz9qkw038js35mp4dma8qzvjptg",  # mixed case
        "np ub1qqqqqqqq",  # space
        "npub1" + "q" * 1000,  # too long
    ],
)
def test_bech32_invalid_format(text: str) -> None:
    with pytest.raises(InvalidFormat):
        bech32_decode(text)


def test_bech32_rejects_non_string() -> None:
    with pytest.raises(InvalidFormat):
        bech32_decode(b"npub1")


def test_convertbits_padding_rules() -> None:
    assert convertbits([0xFF], 8, 5) == [31, 28]
    assert convertbits([31, 28], 5, 8, pad=False) == [0xFF]
    with pytest.raises(InvalidFormat):
        convertbits([31, 29], 5, 8, pad=False)  # non-zero padding bits
    with pytest.raises(InvalidFormat):
        convertbits([31, 28, 0], 5, 8, pad=False)  # a whole extra group of padding
    with pytest.raises(InvalidFormat):
        convertbits([256], 8, 5)


def test_bech32_encode_rejects_bad_prefix() -> None:
    with pytest.raises(InvalidFormat):
        bech32_encode("", b"\x00")
    with pytest.raises(InvalidFormat):
        bech32_encode("bad prefix", b"\x00")
