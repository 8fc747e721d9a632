"""
Benchmark Nostr key derivation and signing (pure Python secp256k1).
Reports time per call and peak memory (tracemalloc) per run.

Run from repo root:

  PYTHONPATH=src python benchmarks/signing.py

Or after pip install -e .:

  python benchmarks/signing.py
"""

from __future__ import annotations

import os
import sys
import time
import tracemalloc

_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
_src = os.path.join(_root, "src")
if _src not in sys.path:
    sys.path.insert(0, _src)

from nostrseed import (DelegationConditions, bech32_decode, create_delegation,
                       create_unsigned_event, keypair_from_mnemonic, sign_event,
                       verify_delegation, verify_event)
from nostrseed.curves import privkey_to_pubkey, schnorr_sign, schnorr_verify

N_TIME = 50
N_MEM = 20
PHRASE = "legal winner thank year wave sausage worth useful legal winner thank yellow"
PAIR = keypair_from_mnemonic(PHRASE)
PRIV = bytes.fromhex(PAIR.private_key)
MSG = bytes(32)
AUX = bytes(32)
SIG = schnorr_sign(MSG, PRIV, AUX)
EVENT = create_unsigned_event(PAIR.public_key.hex, "bench note", tags=[["t", "bench"]], created_at=1700000000)
SIGNED = sign_event(EVENT, PRIV, AUX)
TOKEN = create_delegation("ab" * 32, DelegationConditions(kinds=[1], since=0, until=2**31), PRIV, AUX)


def _time_per_call(fn, *args, n: int = N_TIME, **kwargs) -> float:
    for _ in range(5):
        fn(*args, **kwargs)
    start = time.perf_counter()
    for _ in range(n):
        fn(*args, **kwargs)
    return (time.perf_counter() - start) / n


def _peak_kb(fn, *args, n: int = N_MEM, **kwargs) -> float:
    tracemalloc.start()
    if hasattr(tracemalloc, "reset_peak"):
        tracemalloc.reset_peak()
    for _ in range(n):
        fn(*args, **kwargs)
    _, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()
    return peak / 1024.0


CASES = [
    ("keypair_from_mnemonic", keypair_from_mnemonic, (PHRASE,)),
    ("privkey_to_pubkey", privkey_to_pubkey, (PRIV,)),
    ("schnorr_sign", schnorr_sign, (MSG, PRIV, AUX)),
    ("schnorr_verify", schnorr_verify, (MSG, PAIR.public_key.schnorr, SIG)),
    ("sign_event", sign_event, (EVENT, PRIV, AUX)),
    ("verify_event", verify_event, (SIGNED,)),
    ("verify_delegation", verify_delegation, (TOKEN, 1700000000)),
    ("bech32_decode (npub)", bech32_decode, (PAIR.public_key.npub,)),
]


def main() -> None:
    print("Benchmark: nostrseed key derivation and signing (pure Python)")
    print(f"  n = {N_TIME} (time), {N_MEM} (memory)")
    print()
    assert schnorr_verify(MSG, PAIR.public_key.schnorr, SIG)
    assert verify_event(SIGNED).is_valid
    for name, fn, args in CASES:
        t = _time_per_call(fn, *args)
        kb = _peak_kb(fn, *args)
        print(f"  {name:<24} {t*1e3:8.3f} ms   peak {kb:8.1f} KB")


if __name__ == "__main__":
    main()
