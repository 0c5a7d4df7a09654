#!/usr/bin/env python3
"""
Interactive Bloom filter membership checker.

Loads seed items (Best Picture winners by default), prints filter statistics,
then lets the user check or add items until they stop.
"""
import argparse
import sys
from pathlib import Path
from typing import List, Optional, TextIO

import requests

from best_pictures import BEST_PICTURE_WINNERS
from bloom_config import (BloomConfig, DEFAULT_NUM_HASH_FUNCTIONS,
                          DEFAULT_TARGET_PROBABILITY)
from bloom_filter import BloomFilter
from bloom_statistics import BloomStatistics
from empirical_validator import EmpiricalValidator
from seed_downloader import SeedDownloader
from seed_parser import SeedParser, normalize_item

CACHE_DIR = Path('build') / 'cache'


class PromptSession:
    """Line-oriented check/add loop around a single filter."""

    def __init__(self, bloom_filter: BloomFilter, stdin: Optional[TextIO] = None,
                 stdout: Optional[TextIO] = None):
        self.filter = bloom_filter
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def _say(self, text: str):
        print(text, file=self.stdout)

    def _ask(self, prompt: str) -> Optional[str]:
        """Print a prompt and read one normalized line; None on EOF."""
        self._say(prompt)
        line = self.stdin.readline()
        if not line:
            return None
        return normalize_item(line)

    def run(self) -> int:
        """Run until the user declines to continue; return commands handled."""
        handled = 0
        while True:
            answer = self._ask("Check if item is present or add an item [check/add]:")
            if answer is None:
                break

            if answer == "check":
                item = self._ask("Enter item to check:")
                if item is None:
                    break
                self._say("Most likely!" if self.filter.contains(item) else "Nope!")
                handled += 1
            elif answer == "add":
                item = self._ask("Enter item to add:")
                if item is None:
                    break
                self._say("Done!" if self.filter.insert(item) else "Already present.")
                handled += 1
            else:
                self._say(f"Unknown command: {answer!r}")

            answer = self._ask("Would you like to continue checking or adding? [yes/no]")
            if answer != "yes":
                break
        return handled


def load_items(args: argparse.Namespace) -> List[str]:
    """Resolve seed items from a URL, a file, or the built-in list."""
    parser = SeedParser()
    if args.items_url:
        downloader = SeedDownloader(Path(args.cache_dir))
        return parser.parse(downloader.download(args.items_url))
    if args.items_file:
        return parser.parse(Path(args.items_file))
    return list(BEST_PICTURE_WINNERS)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Bloom filter membership checker",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--items-file", help="Seed item list, one item per line"
    )
    source.add_argument(
        "--items-url", help="Download the seed item list from this URL"
    )
    parser.add_argument(
        "--cache-dir", default=str(CACHE_DIR),
        help="Where downloaded item lists are cached"
    )
    parser.add_argument(
        "--probability", type=float, default=DEFAULT_TARGET_PROBABILITY,
        help="Target false positive probability"
    )
    parser.add_argument(
        "--hashes", type=int, default=DEFAULT_NUM_HASH_FUNCTIONS,
        help="Number of hash functions (1-4)"
    )
    parser.add_argument(
        "--validate", type=int, default=0, metavar="N",
        help="Measure the false positive rate with N random strings"
    )
    parser.add_argument(
        "--no-prompt", action="store_true",
        help="Print statistics and exit without the interactive loop"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        items = load_items(args)
    except (OSError, requests.RequestException) as e:
        print(f"Error: could not load items: {e}", file=sys.stderr)
        return 1

    config = BloomConfig(items, args.probability, args.hashes)
    try:
        bloom = BloomFilter(config)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    config.print_summary()
    stats = BloomStatistics(bloom)
    stats.print_statistics("STARTING BLOOM FILTER INFO:")

    if args.validate > 0:
        result = EmpiricalValidator(bloom, items).run(args.validate)
        for line in result.format_lines():
            print(line)

    if not args.no_prompt:
        PromptSession(bloom).run()
        stats.print_statistics("ENDING BLOOM FILTER INFO:")

    return 0


if __name__ == '__main__':
    sys.exit(main())
