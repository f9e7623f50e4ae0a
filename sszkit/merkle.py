"""Merkle tree helpers: zero hashes, chunk packing, merkleization and mix-ins."""

from __future__ import annotations

import hashlib

from sszkit.errors import MerkleizationError

BYTES_PER_CHUNK = 32
MAX_MERKLE_TREE_DEPTH = 64


def hash_nodes(left: bytes, right: bytes) -> bytes:
    """Return the SHA-256 digest of two concatenated nodes."""
    return hashlib.sha256(bytes(left) + bytes(right)).digest()


def _compute_zero_hashes() -> tuple[bytes, ...]:
    hashes = [bytes(BYTES_PER_CHUNK)]
    for _ in range(MAX_MERKLE_TREE_DEPTH - 1):
        hashes.append(hash_nodes(hashes[-1], hashes[-1]))
    return tuple(hashes)


_ZERO_HASHES = _compute_zero_hashes()


def zero_hash(depth: int) -> bytes:
    """Return the root of a tree of zero chunks with the given depth."""
    if not 0 <= depth < MAX_MERKLE_TREE_DEPTH:
        raise ValueError(
            f"depth must be in 0..{MAX_MERKLE_TREE_DEPTH - 1}, got {depth}"
        )
    return _ZERO_HASHES[depth]


def pack_bytes(data: bytes) -> bytes:
    """Pad ``data`` with zero bytes up to a whole number of chunks."""
    data = bytes(data)
    remainder = len(data) % BYTES_PER_CHUNK
    if remainder:
        data += bytes(BYTES_PER_CHUNK - remainder)
    return data


def _next_power_of_two(n: int) -> int:
    return 1 if n <= 1 else 1 << (n - 1).bit_length()


def merkleize(chunks: bytes, limit: int | None = None) -> bytes:
    """Return the Merkle root of ``chunks``, padded virtually to ``limit`` leaves."""
    data = bytes(chunks)
    if len(data) % BYTES_PER_CHUNK:
        raise ValueError(
            f"chunk data must be a multiple of {BYTES_PER_CHUNK} bytes, got {len(data)}"
        )
    chunk_count = len(data) // BYTES_PER_CHUNK
    leaf_count = _next_power_of_two(chunk_count)
    if limit is not None:
        if limit < chunk_count:
            raise MerkleizationError(
                f"{chunk_count} chunks given but the limit is {limit}"
            )
        leaf_count = _next_power_of_two(limit)
    depth = leaf_count.bit_length() - 1
    if depth >= MAX_MERKLE_TREE_DEPTH:
        raise MerkleizationError(f"tree depth {depth} is too large")

    layer = [
        data[start : start + BYTES_PER_CHUNK]
        for start in range(0, len(data), BYTES_PER_CHUNK)
    ]
    if not layer:
        return zero_hash(depth)
    for level in range(depth):
        if len(layer) % 2:
            layer.append(zero_hash(level))
        layer = [hash_nodes(left, right) for left, right in zip(layer[::2], layer[1::2])]
    return layer[0]


def mix_in_length(root: bytes, length: int) -> bytes:
    """Mix a length into a root, as done for lists and bitlists."""
    return hash_nodes(root, length.to_bytes(BYTES_PER_CHUNK, "little"))


def mix_in_selector(root: bytes, selector: int) -> bytes:
    """Mix a union selector into a root."""
    return hash_nodes(root, selector.to_bytes(BYTES_PER_CHUNK, "little"))