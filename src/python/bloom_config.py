"""Bloom filter configuration and sizing."""
import math
from dataclasses import dataclass, field
from typing import List

DEFAULT_TARGET_PROBABILITY = 0.05
DEFAULT_NUM_HASH_FUNCTIONS = 4


def optimal_bit_array_length(n: int, p: float) -> int:
    """Bits needed for n items at false positive rate p: -(n ln p) / (ln 2)^2.

    An empty item set still gets a single bit. Probabilities of 1 or more,
    infinity included, yield a non-positive length, which the filter rejects.
    """
    if n < 0:
        raise ValueError(f"expected item count must be non-negative, got {n}")
    if math.isnan(p) or p <= 0:
        raise ValueError(f"target probability must be positive, got {p}")
    if n == 0:
        return 1
    if math.isinf(p):
        return 0
    return math.ceil(-(n * math.log(p)) / (math.log(2) ** 2))


def optimal_hash_count(m: int, n: int) -> float:
    """Optimal number of hash functions: (m/n) × ln(2)."""
    if n == 0:
        return math.inf
    return (m / n) * math.log(2)


@dataclass(frozen=True)
class SizingParameters:
    """Sizing inputs recorded at construction, kept for reporting only."""

    expected_items: int
    target_probability: float
    num_hash_functions: int


@dataclass
class BloomConfig:
    """Seed items plus the target false positive rate and hash count."""

    items: List[str] = field(default_factory=list)
    target_probability: float = DEFAULT_TARGET_PROBABILITY
    num_hash_functions: int = DEFAULT_NUM_HASH_FUNCTIONS

    @property
    def expected_items(self) -> int:
        """Number of seed items the filter is sized for."""
        return len(self.items)

    @property
    def size_bits(self) -> int:
        """Bloom filter size in bits."""
        return optimal_bit_array_length(self.expected_items,
                                        self.target_probability)

    @property
    def parameters(self) -> SizingParameters:
        return SizingParameters(
            expected_items=self.expected_items,
            target_probability=self.target_probability,
            num_hash_functions=self.num_hash_functions,
        )

    def optimal_k(self) -> float:
        """Calculate optimal number of hash functions for the seed items."""
        return optimal_hash_count(self.size_bits, self.expected_items)

    def print_summary(self):
        """Print configuration summary."""
        n = self.expected_items
        p = self.target_probability
        print("=" * 80)
        print("BLOOM FILTER SIZING")
        print("=" * 80)
        print(f"Seed items (n): {n:,}")
        print(f"Target false positive rate (p): {p}")
        print(f"Bits: -(n × ln p) / (ln 2)² = {self.size_bits:,}")
        print(f"Hash functions: {self.num_hash_functions}")
        print(f"Optimal k: (m/n) × ln(2) = {self.optimal_k():.2f}")
        print("=" * 80)
        print()
