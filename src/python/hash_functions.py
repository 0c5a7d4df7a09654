"""Hash function implementations for Bloom filter.

Every function maps a byte string to an unsigned 32-bit integer and is a pure
function of its input, so filter contents are reproducible across processes.
"""
from typing import Callable, List

MASK_32 = 0xFFFFFFFF

# Fixed auxiliary seed for the Murmur-style block hash
MURMUR_SEED = 4

HashFunction = Callable[[bytes], int]


def hash_djb2(data: bytes) -> int:
    """DJB2 hash function: h = h * 33 + byte, seeded with 5381."""
    hash_val = 5381
    for byte in data:
        hash_val = ((hash_val << 5) + hash_val + byte) & MASK_32
    return hash_val


def hash_sdbm(data: bytes) -> int:
    """SDBM hash function."""
    hash_val = 0
    for byte in data:
        hash_val = (byte + (hash_val << 6) + (hash_val << 16) - hash_val) & MASK_32
    return hash_val


def hash_murmur2(data: bytes, seed: int = MURMUR_SEED) -> int:
    """MurmurHash2 over little-endian 4-byte blocks.

    Trailing 1-3 bytes are folded in and multiplied before the final
    avalanche shifts.
    """
    m = 0x5bd1e995
    r = 24
    length = len(data)
    hash_val = (seed ^ length) & MASK_32

    block_end = length - (length % 4)
    for offset in range(0, block_end, 4):
        k = int.from_bytes(data[offset:offset + 4], 'little')
        k = (k * m) & MASK_32
        k ^= k >> r
        k = (k * m) & MASK_32
        hash_val = (hash_val * m) & MASK_32
        hash_val ^= k

    remaining = length - block_end
    if remaining >= 3:
        hash_val ^= data[block_end + 2] << 16
    if remaining >= 2:
        hash_val ^= data[block_end + 1] << 8
    if remaining >= 1:
        hash_val ^= data[block_end]
        hash_val = (hash_val * m) & MASK_32

    hash_val ^= hash_val >> 13
    hash_val = (hash_val * m) & MASK_32
    hash_val ^= hash_val >> 15
    return hash_val


def hash_multiplicative(data: bytes) -> int:
    """Multiplicative hash: h = h * 44 + byte, seeded with 4444.

    Shares the shape of DJB2 but with a different multiplier and seed, so the
    two do not collide on the same inputs.
    """
    hash_val = 4444
    for byte in data:
        hash_val = (44 * hash_val + byte) & MASK_32
    return hash_val


# Order matters: insert and lookup walk this list identically
HASH_FAMILY: List[HashFunction] = [
    hash_djb2,
    hash_murmur2,
    hash_sdbm,
    hash_multiplicative,
]
