"""Seed item list downloader with caching."""
import hashlib
from pathlib import Path
from typing import Optional
import requests


class SeedDownloader:
    """Download item lists over HTTP with local caching."""

    TIMEOUT = 30

    def __init__(self, cache_dir: Path):
        self.cache_dir = cache_dir
        self.cache_dir.mkdir(parents=True, exist_ok=True)

    def cache_path(self, url: str) -> Path:
        """Cache file name derived from the URL."""
        digest = hashlib.sha1(url.encode('utf-8')).hexdigest()[:16]
        return self.cache_dir / f"items-{digest}.txt"

    def download(self, url: str, cache_file: Optional[Path] = None) -> Path:
        """Download item list if not cached, return path to file."""
        if cache_file is None:
            cache_file = self.cache_path(url)

        if cache_file.exists():
            print(f"Using cached item list: {cache_file}")
            return cache_file

        print(f"Downloading item list from {url}...")
        response = requests.get(url, timeout=self.TIMEOUT)
        response.raise_for_status()

        with open(cache_file, 'wb') as f:
            f.write(response.content)

        print(f"Item list downloaded and cached to {cache_file}")
        return cache_file
