"""Bloom filter implementation."""
from typing import Iterable, List
from bloom_config import BloomConfig, SizingParameters
from hash_functions import HASH_FAMILY


class InvalidSizeError(ValueError):
    """Raised when the configured bit array length resolves to zero or less."""


class BloomFilter:
    """Bloom filter for efficient set membership testing.

    The bit array is sized once from the config and never resized; bits are
    only ever set, so anything inserted is always reported as present.
    """

    def __init__(self, config: BloomConfig):
        size_bits = config.size_bits
        if size_bits <= 0:
            raise InvalidSizeError(
                f"bit array length resolved to {size_bits} for "
                f"n={config.expected_items}, p={config.target_probability}")
        if not 1 <= config.num_hash_functions <= len(HASH_FAMILY):
            raise ValueError(
                f"num_hash_functions must be between 1 and {len(HASH_FAMILY)}, "
                f"got {config.num_hash_functions}")

        self.parameters: SizingParameters = config.parameters
        self._size_bits = size_bits
        self._hash_functions = HASH_FAMILY[:config.num_hash_functions]
        self.data = bytearray((size_bits + 7) // 8)
        self.update(config.items)

    @classmethod
    def from_items(cls, items: Iterable[str], target_probability: float,
                   num_hash_functions: int) -> 'BloomFilter':
        return cls(BloomConfig(list(items), target_probability,
                               num_hash_functions))

    @property
    def size_bits(self) -> int:
        return self._size_bits

    @property
    def num_hash_functions(self) -> int:
        return len(self._hash_functions)

    def _get_bit_positions(self, item: str) -> List[int]:
        """Calculate bit positions for an item using all hash functions."""
        data = item.encode('utf-8')
        return [hash_func(data) % self._size_bits
                for hash_func in self._hash_functions]

    def _is_set(self, bit_pos: int) -> bool:
        return (self.data[bit_pos // 8] & (1 << (bit_pos % 8))) != 0

    def insert(self, item: str) -> bool:
        """Add an item; return True if at least one new bit was set."""
        changed = False
        for bit_pos in self._get_bit_positions(item):
            byte_idx = bit_pos // 8
            mask = 1 << (bit_pos % 8)
            if not self.data[byte_idx] & mask:
                self.data[byte_idx] |= mask
                changed = True
        return changed

    def update(self, items: Iterable[str]) -> int:
        """Insert all items, returning how many of them changed the filter."""
        return sum(1 for item in items if self.insert(item))

    def contains(self, item: str) -> bool:
        """Check if an item might be in the filter."""
        return all(self._is_set(bit_pos)
                   for bit_pos in self._get_bit_positions(item))

    def __contains__(self, item: str) -> bool:
        return self.contains(item)

    def bit_string(self) -> str:
        """Dump the bit array as a string of '0' and '1' in index order."""
        return ''.join('1' if self._is_set(i) else '0'
                       for i in range(self._size_bits))

    @property
    def bits_set(self) -> int:
        """Count number of bits set in the filter."""
        return sum(bin(byte).count('1') for byte in self.data)

    @property
    def fill_rate(self) -> float:
        """Calculate actual fill rate (proportion of bits set)."""
        return self.bits_set / self._size_bits

    @property
    def is_saturated(self) -> bool:
        """True once every bit is set and lookups can no longer say no."""
        return self.bits_set == self._size_bits
