"""Bitcoin improvement proposals used for key material: BIP-39 mnemonics."""

from .bip39 import (entropy_to_mnemonic, generate_mnemonic, mnemonic_to_entropy,
                    normalize_mnemonic, validate_mnemonic, wordlist)

__all__: tuple[str, ...] = (
    "entropy_to_mnemonic",
    "generate_mnemonic",
    "mnemonic_to_entropy",
    "normalize_mnemonic",
    "validate_mnemonic",
    "wordlist",
)
