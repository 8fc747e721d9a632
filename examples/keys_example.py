#!/usr/bin/env python3
"""Example: seed phrase to Nostr keys (nsec / npub)."""

from nostrseed import (generate_keypair, keypair_from_mnemonic,
                       keypair_from_private_hex, npub_to_hex, validate_mnemonic)

phrase = "abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon about"
print("Seed phrase valid:", validate_mnemonic(phrase))

pair = keypair_from_mnemonic(phrase)
print("Private key (hex):", pair.private_key[:16] + "...")
print("nsec:", pair.nsec[:16] + "...")
print("Public key (x-only hex):", pair.public_key.hex)
print("Public key (compressed):", pair.public_key.compressed.hex())
print("npub:", pair.public_key.npub)
print("npub decodes back:", npub_to_hex(pair.public_key.npub) == pair.public_key.hex)

same = keypair_from_private_hex(pair.private_key)
print("Same key from hex:", same.public_key == pair.public_key)

fresh = generate_keypair()
print("Fresh 12-word phrase:", len(fresh.seed_phrase.split()), "words, npub", fresh.public_key.npub[:20] + "...")
