"""SimpleSerialize (SSZ) types: encoding, decoding and hash tree roots."""

__version__ = "0.1.0"

__all__ = ["basic", "bitlist", "bitvector", "composite", "container", "errors", "merkle", "union"]