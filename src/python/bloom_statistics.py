"""Bloom filter statistics calculation and display."""
import math
from dataclasses import dataclass
from typing import List
from bloom_config import optimal_hash_count
from bloom_filter import BloomFilter


def estimate_cardinality(bits_set: int, m: int, k: int) -> float:
    """Estimate items inserted from set bits: -(m/k) × ln(1 - X/m).

    A saturated filter (X == m) has no finite estimate; math.inf is returned.
    """
    if bits_set >= m:
        return math.inf
    return -(m / k) * math.log(1 - bits_set / m)


def estimate_false_positive_probability(n: int, m: int, k: int) -> float:
    """False positive rate for n items: (1 - e^(-kn/m))^k."""
    return (1 - math.exp(-k * n / m)) ** k


@dataclass(frozen=True)
class BloomReport:
    """Read-only snapshot of a filter's diagnostics."""

    target_probability: float
    estimated_probability: float
    num_hash_functions: int
    optimal_k: float
    expected_items: int
    estimated_items: float
    saturated: bool
    bits_set: int
    size_bits: int
    bits: str

    def format_lines(self) -> List[str]:
        if self.saturated:
            estimate = "saturated (cannot be estimated)"
        else:
            estimate = f"{self.estimated_items:.2f}"
        return [
            "*" * 32,
            f"Desired probability of false positives: {self.target_probability}",
            f"Actual probability of false positives: "
            f"{self.estimated_probability:.6f}",
            f"Actual number of hash functions: {self.num_hash_functions}",
            f"Optimal number of hash functions: {self.optimal_k:.2f}",
            f"Number of items in bloom filter at start: {self.expected_items}",
            f"Current estimate of number of items in bloom filter: {estimate}",
            f"Bits set: {self.bits_set:,} / {self.size_bits:,}",
            "Bloom filter:",
            self.bits,
            "*" * 32,
        ]


class BloomStatistics:
    """Calculate and display Bloom filter statistics."""

    def __init__(self, bloom_filter: BloomFilter):
        self.filter = bloom_filter

    @property
    def _k(self) -> int:
        return self.filter.num_hash_functions

    @property
    def _m(self) -> int:
        return self.filter.size_bits

    @property
    def _n(self) -> int:
        return self.filter.parameters.expected_items

    def theoretical_fill_rate(self) -> float:
        """Calculate theoretical fill rate: 1 - e^(-kn/m)."""
        return 1 - math.exp(-self._k * self._n / self._m)

    def false_positive_rate(self) -> float:
        """False positive rate expected for the configured item count."""
        return estimate_false_positive_probability(self._n, self._m, self._k)

    def estimated_items(self) -> float:
        return estimate_cardinality(self.filter.bits_set, self._m, self._k)

    def optimal_k(self) -> float:
        """Calculate optimal k for minimum FP rate."""
        return optimal_hash_count(self._m, self._n)

    def hash_count_gap(self) -> float:
        """Configured k minus optimal k; negative means too few hashes."""
        return self._k - self.optimal_k()

    def report(self) -> BloomReport:
        return BloomReport(
            target_probability=self.filter.parameters.target_probability,
            estimated_probability=self.false_positive_rate(),
            num_hash_functions=self._k,
            optimal_k=self.optimal_k(),
            expected_items=self._n,
            estimated_items=self.estimated_items(),
            saturated=self.filter.is_saturated,
            bits_set=self.filter.bits_set,
            size_bits=self._m,
            bits=self.filter.bit_string(),
        )

    def print_statistics(self, title: str = ""):
        """Print comprehensive statistics."""
        report = self.report()
        if title:
            print("*" * 32)
            print(title)
        for line in report.format_lines():
            print(line)
        gap = self.hash_count_gap()
        if abs(gap) > 1:
            print(f"Note: k={report.num_hash_functions} is {abs(gap):.2f} "
                  f"{'above' if gap > 0 else 'below'} the optimum")
