"""BIP-39 mnemonic tests (vectors from the BIP-39 reference test set)."""

from __future__ import annotations

import pytest

from nostrseed import (InvalidEntropyLength, InvalidMnemonic, generate_mnemonic,
                       mnemonic_to_entropy, validate_mnemonic)
from nostrseed.bips import entropy_to_mnemonic, normalize_mnemonic, wordlist

BIP39_VECTORS = [
    (
        "00000000000000000000000000000000",
        "abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon about",
    ),
    (
        "7f7f7f7f7f7f7f7f7f7f7f7f7f7f7f7f",
        "legal winner thank year wave sausage worth useful legal winner thank yellow",
    ),
    (
        "80808080808080808080808080808080",
        "letter advice cage absurd amount doctor acoustic avoid letter advice cage above",
    ),
    (
        "ffffffffffffffffffffffffffffffff",
        "zoo zoo zoo zoo zoo zoo zoo zoo zoo zoo zoo wrong",
    ),
    (
        "00" * 32,
        " ".join(["abandon"] * 23 + ["art"]),
    ),
]


def test_wordlist_shape() -> None:
    words = wordlist()
    assert len(words) == 2048
    assert len(set(words)) == 2048
    assert words[0] == "abandon"
    assert words[-1] == "zoo"


@pytest.mark.parametrize("entropy_hex,phrase", BIP39_VECTORS)
def test_entropy_to_mnemonic_vectors(entropy_hex: str, phrase: str) -> None:
    assert entropy_to_mnemonic(bytes.fromhex(entropy_hex)) == phrase


@pytest.mark.parametrize("entropy_hex,phrase", BIP39_VECTORS)
def test_mnemonic_to_entropy_vectors(entropy_hex: str, phrase: str) -> None:
    assert validate_mnemonic(phrase) is True
    assert bytes(mnemonic_to_entropy(phrase)) == bytes.fromhex(entropy_hex)


def test_generate_mnemonic_is_valid() -> None:
    for _ in range(20):
        phrase = generate_mnemonic()
        assert len(phrase.split()) == 12
        assert validate_mnemonic(phrase)


@pytest.mark.parametrize("strength,count", [(128, 12), (160, 15), (192, 18), (224, 21), (256, 24)])
def test_generate_mnemonic_strengths(strength: int, count: int) -> None:
    phrase = generate_mnemonic(strength)
    assert len(phrase.split()) == count
    assert len(mnemonic_to_entropy(phrase)) == strength // 8


def test_generate_mnemonic_bad_strength() -> None:
    with pytest.raises(InvalidEntropyLength):
        generate_mnemonic(100)
    with pytest.raises(InvalidEntropyLength):
        entropy_to_mnemonic(bytes(15))


def test_generated_mnemonics_differ() -> None:
    assert generate_mnemonic() != generate_mnemonic()


def test_unknown_word_rejected() -> None:
    words = BIP39_VECTORS[1][1].split()
    for i in (0, 5, 11):
        broken = words.copy()
        broken[i] = "notaword"
        assert validate_mnemonic(" ".join(broken)) is False


def test_checksum_mismatch_rejected() -> None:
    phrase = " ".join(["abandon"] * 12)
    assert validate_mnemonic(phrase) is False
    with pytest.raises(InvalidMnemonic):
        mnemonic_to_entropy(phrase)


@pytest.mark.parametrize("candidate", ["", "abandon", " ".join(["abandon"] * 11 + ["about", "about"]), None, 12])
def test_malformed_mnemonic_never_raises(candidate) -> None:
    assert validate_mnemonic(candidate) is False


def test_normalization() -> None:
    phrase = "  Legal WINNER thank year wave sausage\tworth useful legal winner thank yellow "
    assert normalize_mnemonic(phrase) == BIP39_VECTORS[1][1]
    assert validate_mnemonic(phrase)
