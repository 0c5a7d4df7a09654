import pytest
import requests

import seed_downloader
from best_pictures import BEST_PICTURE_WINNERS
from seed_downloader import SeedDownloader
from seed_parser import SeedParser, normalize_item


class FakeResponse:
    def __init__(self, content: bytes, status: int = 200) -> None:
        self.content = content
        self.status = status

    def raise_for_status(self) -> None:
        if self.status >= 400:
            raise requests.HTTPError(f"{self.status} error")


class TestBestPictures:
    def test_ninety_lowercase_titles(self) -> None:
        assert len(BEST_PICTURE_WINNERS) == 90
        assert len(set(BEST_PICTURE_WINNERS)) == 90
        assert all(title == title.lower() for title in BEST_PICTURE_WINNERS)
        assert BEST_PICTURE_WINNERS[0] == "wings"
        assert BEST_PICTURE_WINNERS[-1] == "the shape of water"


class TestSeedParser:
    def test_normalize(self) -> None:
        assert normalize_item("  Casablanca \n") == "casablanca"

    def test_plain_list(self, tmp_path) -> None:
        path = tmp_path / "items.txt"
        path.write_text("Rocky\n\n# a comment\nGandhi\n", encoding="utf-8")
        assert SeedParser().parse(path) == ["rocky", "gandhi"]

    def test_header_skipped(self, tmp_path) -> None:
        path = tmp_path / "items.txt"
        path.write_text("Custom list\nversion 2\n---\nMarty\nGigi\n", encoding="utf-8")
        assert SeedParser().parse(path) == ["marty", "gigi"]

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(OSError):
            SeedParser().parse(tmp_path / "missing.txt")


class TestSeedDownloader:
    def test_downloads_and_caches(self, tmp_path, monkeypatch) -> None:
        calls = []

        def fake_get(url, timeout):
            calls.append(url)
            return FakeResponse(b"Platoon\nAmadeus\n")

        monkeypatch.setattr(seed_downloader.requests, "get", fake_get)
        downloader = SeedDownloader(tmp_path / "cache")

        path = downloader.download("http://example.com/items.txt")
        assert path.read_bytes() == b"Platoon\nAmadeus\n"
        assert path.parent == tmp_path / "cache"

        assert downloader.download("http://example.com/items.txt") == path
        assert calls == ["http://example.com/items.txt"]

    def test_http_error_propagates(self, tmp_path, monkeypatch) -> None:
        monkeypatch.setattr(seed_downloader.requests, "get",
                            lambda url, timeout: FakeResponse(b"", 404))
        downloader = SeedDownloader(tmp_path)
        with pytest.raises(requests.HTTPError):
            downloader.download("http://example.com/missing.txt")
        assert not downloader.cache_path("http://example.com/missing.txt").exists()

    def test_cache_path_per_url(self, tmp_path) -> None:
        downloader = SeedDownloader(tmp_path)
        assert downloader.cache_path("http://a") != downloader.cache_path("http://b")
