#!/usr/bin/env python3
"""Example: sign, verify and mine a NIP-01 text note."""

import dataclasses
import json

from nostrseed import (create_unsigned_event, has_valid_proof_of_work,
                       keypair_from_private_hex, mine_event, sign_event,
                       verify_event)

pair = keypair_from_private_hex("b7e151628aed2a6abf7158809cf4f3c762e7160f38b4da56a784d9045190cfef")

event = create_unsigned_event(pair.public_key.hex, "hello nostr", tags=[["t", "python"]])
signed = sign_event(event, pair.private_key)
print("Event id:", signed.id)
print("Signature:", signed.sig[:32] + "...")
print("Wire JSON:", json.dumps(signed.to_dict())[:72] + "...")

print("Verify:", verify_event(signed).is_valid)

tampered = verify_event(dataclasses.replace(signed, content="hello nostr!"))
print("Verify tampered:", tampered.is_valid, "-", type(tampered.error).__name__, tampered.reason)

mined = sign_event(mine_event(event, 12), pair.private_key)
print("Mined id:", mined.id, "nonce tag:", list(mined.tags[-1]))
print("Proof of work >= 12 bits:", has_valid_proof_of_work(mined, 12))
