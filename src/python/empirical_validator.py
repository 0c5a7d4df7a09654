"""Measured false positive rate of a live filter, compared with its estimates."""
import math
import random
import string
from dataclasses import dataclass
from typing import Iterable, List, Optional
from bloom_filter import BloomFilter
from bloom_statistics import BloomStatistics

# Measured rates further than this many standard errors from the
# expectation are flagged
TOLERANCE_SIGMAS = 3.0


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of probing a filter with strings it never saw."""

    probes: int
    false_positives: int
    design_probability: float
    fill_probability: float

    @property
    def measured_probability(self) -> float:
        return self.false_positives / self.probes if self.probes else 0.0

    @property
    def standard_error(self) -> float:
        """Binomial standard error around the fill-based expectation."""
        if not self.probes:
            return 0.0
        p = self.fill_probability
        return math.sqrt(p * (1 - p) / self.probes)

    @property
    def consistent(self) -> bool:
        """True when the measured rate sits within tolerance of (X/m)^k."""
        deviation = abs(self.measured_probability - self.fill_probability)
        # One stray hit still counts as consistent for a near-empty filter
        slack = max(TOLERANCE_SIGMAS * self.standard_error,
                    1 / self.probes if self.probes else 0.0)
        return deviation <= slack

    @property
    def exceeds_design(self) -> bool:
        """True when the filter now answers worse than it was sized for."""
        return self.measured_probability > self.design_probability

    def format_lines(self) -> List[str]:
        lines = [
            f"Probes (never inserted): {self.probes:,}",
            f"False positives: {self.false_positives:,}",
            f"Measured probability of false positives: "
            f"{self.measured_probability:.6f}",
            f"Design estimate: {self.design_probability:.6f}",
            f"Fill-based estimate (X/m)^k: {self.fill_probability:.6f}",
        ]
        if not self.consistent:
            lines.append("Measured rate is outside tolerance of the fill-based estimate")
        if self.exceeds_design:
            lines.append("Filter is past its design load; rebuild with a larger n")
        return lines


class EmpiricalValidator:
    """Probe a filter with random strings absent from the known items."""

    def __init__(self, bloom_filter: BloomFilter, known_items: Iterable[str],
                 rng: Optional[random.Random] = None):
        self.filter = bloom_filter
        self.known = set(known_items)
        self.rng = rng or random.Random()

    def fill_probability(self) -> float:
        """Chance a never-inserted item hits k set bits given the current fill."""
        return self.filter.fill_rate ** self.filter.num_hash_functions

    def _probe(self, min_len: int = 3, max_len: int = 15) -> str:
        while True:
            length = self.rng.randint(min_len, max_len)
            probe = ''.join(self.rng.choices(string.ascii_lowercase, k=length))
            if probe not in self.known:
                return probe

    def run(self, num_probes: int) -> ValidationResult:
        """Query num_probes unseen strings; the filter is not modified."""
        false_positives = sum(1 for _ in range(num_probes)
                              if self.filter.contains(self._probe()))
        report = BloomStatistics(self.filter).report()
        return ValidationResult(
            probes=num_probes,
            false_positives=false_positives,
            design_probability=report.estimated_probability,
            fill_probability=self.fill_probability(),
        )
