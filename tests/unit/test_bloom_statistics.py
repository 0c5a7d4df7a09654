import math

import pytest

from best_pictures import BEST_PICTURE_WINNERS
from bloom_config import BloomConfig
from bloom_filter import BloomFilter
from bloom_statistics import (BloomReport, BloomStatistics,
                              estimate_cardinality,
                              estimate_false_positive_probability)


@pytest.fixture
def pictures_filter():
    return BloomFilter(BloomConfig(list(BEST_PICTURE_WINNERS), 0.05, 4))


class TestEstimators:
    def test_cardinality_empty(self) -> None:
        assert estimate_cardinality(0, 100, 4) == 0

    def test_cardinality_formula(self) -> None:
        assert estimate_cardinality(40, 100, 4) == pytest.approx(-(100 / 4) * math.log(0.6))

    def test_cardinality_saturated(self) -> None:
        assert estimate_cardinality(100, 100, 4) == math.inf
        assert estimate_cardinality(1, 1, 4) == math.inf

    def test_false_positive_closed_form(self) -> None:
        expected = (1 - math.exp(-4 * 90 / 562)) ** 4
        assert estimate_false_positive_probability(90, 562, 4) == pytest.approx(expected)
        assert expected == pytest.approx(0.05, abs=0.005)

    def test_false_positive_no_items(self) -> None:
        assert estimate_false_positive_probability(0, 1, 4) == 0


class TestBloomStatistics:
    def test_estimates_near_seed_count(self, pictures_filter) -> None:
        stats = BloomStatistics(pictures_filter)
        assert stats.estimated_items() == pytest.approx(90, rel=0.35)

    def test_optimal_k_and_gap(self, pictures_filter) -> None:
        stats = BloomStatistics(pictures_filter)
        assert stats.optimal_k() == pytest.approx((562 / 90) * math.log(2))
        assert stats.hash_count_gap() == pytest.approx(4 - stats.optimal_k())

    def test_theoretical_fill_rate(self, pictures_filter) -> None:
        stats = BloomStatistics(pictures_filter)
        assert stats.theoretical_fill_rate() == pytest.approx(pictures_filter.fill_rate, abs=0.15)

    def test_report_fields(self, pictures_filter) -> None:
        report = BloomStatistics(pictures_filter).report()
        assert isinstance(report, BloomReport)
        assert report.target_probability == 0.05
        assert report.num_hash_functions == 4
        assert report.expected_items == 90
        assert report.size_bits == 562
        assert report.bits_set == report.bits.count("1")
        assert len(report.bits) == 562
        assert report.saturated is False

    def test_report_is_read_only(self, pictures_filter) -> None:
        before = bytes(pictures_filter.data)
        BloomStatistics(pictures_filter).report()
        assert bytes(pictures_filter.data) == before

    def test_saturated_report(self, single_bit_filter) -> None:
        single_bit_filter.insert("wings")
        report = BloomStatistics(single_bit_filter).report()
        assert report.saturated
        assert report.estimated_items == math.inf
        assert "saturated (cannot be estimated)" in "\n".join(report.format_lines())

    def test_print_statistics(self, greek_filter, capsys) -> None:
        BloomStatistics(greek_filter).print_statistics("STARTING BLOOM FILTER INFO:")
        out = capsys.readouterr().out
        assert "STARTING BLOOM FILTER INFO:" in out
        assert "Desired probability of false positives: 0.05" in out
        assert "Number of items in bloom filter at start: 3" in out
        assert greek_filter.bit_string() in out
