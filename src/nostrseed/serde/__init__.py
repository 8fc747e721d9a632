"""Serialization / deserialization (serde): bech32 text and compact canonical JSON."""

from .bech32 import bech32_decode, bech32_encode, convertbits
from .json_pack import json_pack

__all__: tuple[str, ...] = (
    "bech32_decode",
    "bech32_encode",
    "convertbits",
    "json_pack",
)
