#!/usr/bin/env python3
"""Example: NIP-26 delegation token and a delegated event."""

import time

from nostrseed import (DelegationConditions, create_delegation, create_unsigned_event,
                       keypair_from_private_hex, sign_event, verify_delegation)
from nostrseed.signing import delegation_tag, event_satisfies_delegation

delegator = keypair_from_private_hex("ee35e8bb71131c02c1d7e73231daa48e9953d329a4b701f7133c8f46dd21139c")
delegatee = keypair_from_private_hex("777e4f60b4aa87937e13acc84f7abcc3c93cc035cb4c1e9f7a9086dd78fffce1")

now = int(time.time())
conditions = DelegationConditions(kinds=[1], since=now - 3600, until=now + 30 * 86400)
token = create_delegation(delegatee.public_key.hex, conditions, delegator.private_key)
print("Token:", token.to_json()[:72] + "...")
print("Verify now:", verify_delegation(token, now=now).is_valid)
result = verify_delegation(token, now=now + 60 * 86400)
print("Verify in 60 days:", result.is_valid, "-", result.reason)

event = create_unsigned_event(
    delegatee.public_key.hex, "posted on behalf of the delegator", tags=[delegation_tag(token)]
)
print("Event meets conditions:", event_satisfies_delegation(event, token))
signed = sign_event(event, delegatee.private_key)
print("Delegated event id:", signed.id)
