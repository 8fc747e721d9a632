"""Stability tests for the secp256k1 / BIP-340 implementation.

Lock in exact outputs for fixed inputs so that any change in curve code
(optimizations, refactors) is detected. Schnorr vectors are from the BIP-340
test-vectors.csv. Run with PYTHONPATH=src.
"""

from __future__ import annotations

import pytest

from nostrseed.curves import (compress_pubkey, decode_pubkey, privkey_to_pubkey,
                              privkey_to_xonly, schnorr_sign, schnorr_verify)
from nostrseed.errors import InvalidPrivateKey, InvalidPublicKey

# --- secp256k1: generator point for privkey 1 ---
SECP_PRIV_ONE = bytes(31) + bytes([1])
SECP_G_COMPRESSED = bytes.fromhex(
    "0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
)
SECP_G_UNCOMPRESSED = bytes.fromhex(
    "0479be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
    "483ada7726a3c4655da4fbfc0e1108a8fd17b448a68554199c47d08ffb10d4b8"
)
SECP_N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141

# --- BIP-340 vector 0 ---
BIP340_0_SECRET = bytes(31) + bytes([3])
BIP340_0_PUBLIC = bytes.fromhex(
    "f9308a019258c31049344f85f89d5229b531c845836f99b08601f113bce036f9"
)
BIP340_0_AUX = bytes(32)
BIP340_0_MSG = bytes(32)
BIP340_0_SIG = bytes.fromhex(
    "e907831f80848d1069a5371b402410364bdf1c5f8307b0084c55f1ce2dca8215"
    "25f66a4a85ea8b71e482a74f382d2ce5ebeee8fdb2172f477df4900d310536c0"
)

# --- BIP-340 vector 1 ---
BIP340_1_SECRET = bytes.fromhex(
    "b7e151628aed2a6abf7158809cf4f3c762e7160f38b4da56a784d9045190cfef"
)
BIP340_1_PUBLIC = bytes.fromhex(
    "dff1d77f2a671c5f36183726db2341be58feae1da2deced843240f7b502ba659"
)
BIP340_1_AUX = bytes(31) + bytes([1])
BIP340_1_MSG = bytes.fromhex(
    "243f6a8885a308d313198a2e03707344a4093822299f31d0082efa98ec4e6c89"
)
BIP340_1_SIG = bytes.fromhex(
    "6896bd60eeae296db48a229ff71dfe071bde413e6d43f917dc8dcf8c78de3341"
    "8906d11ac976abccb20b091292bff4ea897efcb639ea871cfa95f6de339e4b0a"
)


def test_secp256k1_generator_stable() -> None:
    """privkey 1 must map to the generator point in both encodings."""
    assert privkey_to_pubkey(SECP_PRIV_ONE) == SECP_G_COMPRESSED
    assert privkey_to_pubkey(SECP_PRIV_ONE, compressed=False) == SECP_G_UNCOMPRESSED


def test_secp256k1_xonly_is_compressed_tail() -> None:
    for priv in (SECP_PRIV_ONE, BIP340_0_SECRET, BIP340_1_SECRET):
        assert privkey_to_xonly(priv) == privkey_to_pubkey(priv)[1:]


@pytest.mark.parametrize(
    "priv",
    [bytes(32), SECP_N.to_bytes(32, "big"), (SECP_N + 1).to_bytes(32, "big"), b"\xff" * 32, bytes(31)],
)
def test_secp256k1_rejects_invalid_privkey(priv: bytes) -> None:
    with pytest.raises(InvalidPrivateKey):
        privkey_to_pubkey(priv)


def test_secp256k1_max_privkey_accepted() -> None:
    assert len(privkey_to_pubkey((SECP_N - 1).to_bytes(32, "big"))) == 33


def test_compress_pubkey_roundtrip() -> None:
    """Uncompressed, compressed and x-only (even y) forms decode to consistent points."""
    assert compress_pubkey(SECP_G_UNCOMPRESSED) == SECP_G_COMPRESSED
    assert compress_pubkey(SECP_G_COMPRESSED) == SECP_G_COMPRESSED
    assert compress_pubkey(SECP_G_COMPRESSED[1:]) == SECP_G_COMPRESSED
    assert decode_pubkey(SECP_G_UNCOMPRESSED) == decode_pubkey(SECP_G_COMPRESSED)


def test_decode_pubkey_rejects_garbage() -> None:
    with pytest.raises(InvalidPublicKey):
        decode_pubkey(b"\x05" + SECP_G_COMPRESSED[1:])
    with pytest.raises(InvalidPublicKey):
        decode_pubkey(SECP_G_UNCOMPRESSED[:-1] + bytes([SECP_G_UNCOMPRESSED[-1] ^ 1]))
    with pytest.raises(InvalidPublicKey):
        decode_pubkey(bytes(20))


def test_bip340_public_keys_stable() -> None:
    assert privkey_to_xonly(BIP340_0_SECRET) == BIP340_0_PUBLIC
    assert privkey_to_xonly(BIP340_1_SECRET) == BIP340_1_PUBLIC


def test_bip340_sign_vector_0() -> None:
    """Exact signature for BIP-340 vector 0 must not change."""
    assert schnorr_sign(BIP340_0_MSG, BIP340_0_SECRET, BIP340_0_AUX) == BIP340_0_SIG


def test_bip340_sign_vector_1() -> None:
    assert schnorr_sign(BIP340_1_MSG, BIP340_1_SECRET, BIP340_1_AUX) == BIP340_1_SIG


def test_bip340_verify_vectors() -> None:
    assert schnorr_verify(BIP340_0_MSG, BIP340_0_PUBLIC, BIP340_0_SIG) is True
    assert schnorr_verify(BIP340_1_MSG, BIP340_1_PUBLIC, BIP340_1_SIG) is True


def test_bip340_verify_rejects_tampered() -> None:
    bad_msg = bytes([BIP340_1_MSG[0] ^ 1]) + BIP340_1_MSG[1:]
    assert schnorr_verify(bad_msg, BIP340_1_PUBLIC, BIP340_1_SIG) is False
    bad_sig = BIP340_1_SIG[:63] + bytes([BIP340_1_SIG[63] ^ 1])
    assert schnorr_verify(BIP340_1_MSG, BIP340_1_PUBLIC, bad_sig) is False
    assert schnorr_verify(BIP340_1_MSG, BIP340_0_PUBLIC, BIP340_1_SIG) is False


def test_bip340_verify_rejects_malformed() -> None:
    not_on_curve = bytes.fromhex(
        "eefdea4cdb677750a420fee807eacf21eb9898ae79b9768766e4faa04a2d4a34"
    )
    assert schnorr_verify(BIP340_1_MSG, not_on_curve, BIP340_1_SIG) is False
    assert schnorr_verify(BIP340_1_MSG, BIP340_1_PUBLIC, BIP340_1_SIG[:63]) is False
    assert schnorr_verify(BIP340_1_MSG, BIP340_1_PUBLIC[:31], BIP340_1_SIG) is False
    # s >= n
    assert schnorr_verify(
        BIP340_1_MSG, BIP340_1_PUBLIC, BIP340_1_SIG[:32] + SECP_N.to_bytes(32, "big")
    ) is False


def test_schnorr_sign_random_aux_verifies() -> None:
    """Default (random) aux gives different, equally valid signatures."""
    sig_a = schnorr_sign(BIP340_1_MSG, BIP340_1_SECRET)
    sig_b = schnorr_sign(BIP340_1_MSG, BIP340_1_SECRET)
    assert sig_a != sig_b
    assert schnorr_verify(BIP340_1_MSG, BIP340_1_PUBLIC, sig_a)
    assert schnorr_verify(BIP340_1_MSG, BIP340_1_PUBLIC, sig_b)
