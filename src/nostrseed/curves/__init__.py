"""Elliptic-curve crypto: secp256k1 keys and BIP-340 Schnorr signatures."""

from .secp256k1 import (compress_pubkey, decode_pubkey, is_valid_privkey,
                        privkey_to_pubkey, privkey_to_xonly, schnorr_sign,
                        schnorr_verify)

__all__: tuple[str, ...] = (
    "compress_pubkey",
    "decode_pubkey",
    "is_valid_privkey",
    "privkey_to_pubkey",
    "privkey_to_xonly",
    "schnorr_sign",
    "schnorr_verify",
)
