"""Tests for waymark.widgets.banner module."""

from waymark.widgets.banner import _build_banner


class TestBuildBanner:
    def test_title_rows_then_tagline(self):
        lines = _build_banner().plain.split("\n")
        assert len(lines) == 4
        assert lines[0].startswith("╦ ╦╔═╗")
        assert lines[3].startswith("Browsing History Tracker")

    def test_signpost_follows_title(self):
        lines = _build_banner().plain.split("\n")
        assert lines[0].endswith("╔═══╗▸ ")
        assert lines[2].rstrip().endswith("│")
