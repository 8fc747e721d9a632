"""
secp256k1 (Bitcoin/Nostr curve): key derivation, point compression, BIP-340 Schnorr.
"""

from __future__ import annotations

import secrets

from ..errors import InvalidPrivateKey, InvalidPublicKey
from ..hashes import tagged_hash

_P = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
_N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
_Gx = 0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798
_Gy = 0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8


def _mod_inv(a: int, n: int) -> int:
    """Modular inverse via extended gcd."""
    if a < 0:
        a = (a % n + n) % n
    t, r = 0, n
    new_t, new_r = 1, a
    while new_r:
        q = r // new_r
        t, new_t = new_t, t - q * new_t
        r, new_r = new_r, r - q * new_r
    if r != 1:
        raise ValueError("no inverse")
    return t % n


def _point_add(px: int, py: int, qx: int, qy: int) -> tuple[int, int]:
    """Add two secp256k1 points in affine coords; (0,0) is identity. Returns (rx, ry)."""
    if (px, py) == (0, 0):
        return (qx, qy)
    if (qx, qy) == (0, 0):
        return (px, py)
    if px == qx:
        if py == qy and py != 0:
            lam = (3 * px * px) * _mod_inv(2 * py, _P) % _P
        else:
            return (0, 0)
    else:
        lam = (qy - py) * _mod_inv(qx - px, _P) % _P
    rx = (lam * lam - px - qx) % _P
    ry = (lam * (px - rx) - py) % _P
    return (rx, ry)


def _point_mul(d: int, x: int, y: int) -> tuple[int, int]:
    """Scalar multiplication d * (x, y) on secp256k1; returns (rx, ry)."""
    d = d % _N
    rx, ry = 0, 0
    while d:
        if d & 1:
            rx, ry = _point_add(rx, ry, x, y)
        x, y = _point_add(x, y, x, y)
        d >>= 1
    return (rx, ry)


def _scalar(privkey: bytes) -> int:
    """Parse and range-check a 32-byte private key."""
    if len(privkey) != 32:
        raise InvalidPrivateKey("privkey must be 32 bytes")
    d = int.from_bytes(privkey, "big")
    if d == 0 or d >= _N:
        raise InvalidPrivateKey("privkey out of range")
    return d


def _lift_x(x: int) -> tuple[int, int]:
    """Point with the given x coordinate and even y (BIP-340 lift_x)."""
    if x >= _P:
        raise InvalidPublicKey("x coordinate not in field")
    c = (pow(x, 3, _P) + 7) % _P
    y = pow(c, (_P + 1) // 4, _P)
    if (y * y) % _P != c:
        raise InvalidPublicKey("x coordinate not on curve")
    return (x, y if y % 2 == 0 else _P - y)


def is_valid_privkey(privkey: bytes) -> bool:
    """True iff privkey is 32 bytes and 1 <= d < n."""
    try:
        _scalar(privkey)
    except InvalidPrivateKey:
        return False
    return True


def privkey_to_pubkey(privkey: bytes, compressed: bool = True) -> bytes:
    """
    Derive a public key from a 32-byte private key.

    Args:
        privkey: 32-byte secp256k1 private key.
        compressed: 33-byte (0x02/0x03 || x) when True, 65-byte (0x04 || x || y) otherwise.

    Returns:
        Encoded public key.
    """
    x, y = _point_mul(_scalar(privkey), _Gx, _Gy)
    if compressed:
        return bytes([0x02 | (y & 1)]) + x.to_bytes(32, "big")
    return bytes([0x04]) + x.to_bytes(32, "big") + y.to_bytes(32, "big")


def privkey_to_xonly(privkey: bytes) -> bytes:
    """32-byte x-only (BIP-340) public key for privkey."""
    return privkey_to_pubkey(privkey)[1:]


def decode_pubkey(pubkey: bytes) -> tuple[int, int]:
    """
    Parse an x-only (32), compressed (33) or uncompressed (65) public key to an affine point.

    Raises:
        InvalidPublicKey: bad length, prefix, or point not on the curve.
    """
    if len(pubkey) == 32:
        return _lift_x(int.from_bytes(pubkey, "big"))
    if len(pubkey) == 33 and pubkey[0] in (0x02, 0x03):
        x, y = _lift_x(int.from_bytes(pubkey[1:], "big"))
        if (y & 1) != (pubkey[0] & 1):
            y = _P - y
        return (x, y)
    if len(pubkey) == 65 and pubkey[0] == 0x04:
        x = int.from_bytes(pubkey[1:33], "big")
        y = int.from_bytes(pubkey[33:], "big")
        if x >= _P or y >= _P or (y * y - x * x * x - 7) % _P != 0:
            raise InvalidPublicKey("point not on curve")
        return (x, y)
    raise InvalidPublicKey(f"unsupported public key encoding ({len(pubkey)} bytes)")


def compress_pubkey(pubkey: bytes) -> bytes:
    """Any supported public key encoding -> 33-byte compressed form."""
    x, y = decode_pubkey(pubkey)
    return bytes([0x02 | (y & 1)]) + x.to_bytes(32, "big")


def schnorr_sign(msg: bytes, privkey: bytes, aux_rand: bytes | None = None) -> bytes:
    """
    BIP-340 Schnorr signature.

    Args:
        msg: Message to sign (Nostr always signs a 32-byte hash).
        privkey: 32-byte private key.
        aux_rand: 32 bytes of auxiliary randomness; fresh from `secrets` when None.

    Returns:
        64-byte signature R.x || s.
    """
    d0 = _scalar(privkey)
    if aux_rand is None:
        aux_rand = secrets.token_bytes(32)
    if len(aux_rand) != 32:
        raise ValueError("aux_rand must be 32 bytes")
    px, py = _point_mul(d0, _Gx, _Gy)
    d = d0 if py % 2 == 0 else _N - d0
    pk = px.to_bytes(32, "big")
    t = bytes(a ^ b for a, b in zip(d.to_bytes(32, "big"), tagged_hash("BIP0340/aux", aux_rand)))
    k0 = int.from_bytes(tagged_hash("BIP0340/nonce", t + pk + msg), "big") % _N
    if k0 == 0:
        raise ValueError("schnorr_sign: nonce is zero")
    rx, ry = _point_mul(k0, _Gx, _Gy)
    k = k0 if ry % 2 == 0 else _N - k0
    r = rx.to_bytes(32, "big")
    e = int.from_bytes(tagged_hash("BIP0340/challenge", r + pk + msg), "big") % _N
    sig = r + ((k + e * d) % _N).to_bytes(32, "big")
    if not schnorr_verify(msg, pk, sig):
        raise ValueError("schnorr_sign: produced signature does not verify")
    return sig


def schnorr_verify(msg: bytes, pubkey: bytes, sig: bytes) -> bool:
    """
    Verify a BIP-340 Schnorr signature against a 32-byte x-only public key.

    Returns:
        True iff the signature is valid; malformed inputs give False.
    """
    if len(pubkey) != 32 or len(sig) != 64:
        return False
    try:
        px, py = _lift_x(int.from_bytes(pubkey, "big"))
    except InvalidPublicKey:
        return False
    r = int.from_bytes(sig[:32], "big")
    s = int.from_bytes(sig[32:], "big")
    if r >= _P or s >= _N:
        return False
    e = int.from_bytes(tagged_hash("BIP0340/challenge", sig[:32] + pubkey + msg), "big") % _N
    sx, sy = _point_mul(s, _Gx, _Gy)
    ex, ey = _point_mul(_N - e, px, py)
    rx, ry = _point_add(sx, sy, ex, ey)
    if (rx, ry) == (0, 0) or ry % 2 != 0:
        return False
    return rx == r


__all__: tuple[str, ...] = (
    "compress_pubkey",
    "decode_pubkey",
    "is_valid_privkey",
    "privkey_to_pubkey",
    "privkey_to_xonly",
    "schnorr_sign",
    "schnorr_verify",
)
