"""
Seed item list parser.

Copyright (c) 2025 John Byrd
https://github.com/johnwbyrd/bloomer

SPDX-License-Identifier: BSD-3-Clause
"""
from pathlib import Path
from typing import List


def normalize_item(item: str) -> str:
    """Normalize an item the way lookups see it: trimmed and lowercase."""
    return item.strip().lower()


class SeedParser:
    """Parse item list files, one item per line."""

    SEPARATOR = "---"
    COMMENT = "#"

    def parse(self, file_path: Path) -> List[str]:
        """Load items from file, skipping an optional header and comments."""
        with open(file_path, 'r', encoding='utf-8') as f:
            lines = f.readlines()

        separator_index = self._find_separator(lines)
        if separator_index != -1:
            print(f"Found separator at line {separator_index + 1}, skipping header")
            lines = lines[separator_index + 1:]

        items = [normalize_item(line) for line in lines
                 if line.strip() and not line.lstrip().startswith(self.COMMENT)]

        print(f"Loaded {len(items)} items from {file_path}")
        return items

    def _find_separator(self, lines: List[str]) -> int:
        """Find the separator line index."""
        for i, line in enumerate(lines):
            if line.strip() == self.SEPARATOR:
                return i
        return -1
