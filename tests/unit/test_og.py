"""
Unit tests for social preview cards and the Pillow renderer.
"""
from io import BytesIO

import httpx
import pytest
from PIL import Image

from hackresults.data.awards import AwardsRepository
from hackresults.data.sponsors import SponsorDirectory
from hackresults.og.cards import format_usd, project_card, sponsor_card, track_card
from hackresults.og.renderer import (
    ImageCache,
    OgAvatar,
    OgImageOptions,
    OgImageRenderer,
    OgStat,
    title_font_size,
    truncate_subtitle,
)


def png_bytes(size=(32, 32), color=(255, 0, 0, 255)):
    buffer = BytesIO()
    Image.new("RGBA", size, color).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def image_server():
    """MockTransport serving /ok.png and 404 for everything else; records request paths."""
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request.url.path)
        if request.url.path == "/ok.png":
            return httpx.Response(200, content=png_bytes())
        return httpx.Response(404)

    client = httpx.Client(transport=httpx.MockTransport(handler))
    return client, requests


class TestLayoutHelpers:

    @pytest.mark.parametrize("length,size", [(10, 96), (25, 96), (26, 80), (36, 64), (51, 52)])
    def test_title_font_size(self, length, size):
        assert title_font_size("x" * length) == size

    def test_truncate_subtitle(self):
        assert truncate_subtitle("short") == "short"
        assert truncate_subtitle("y" * 100) == "y" * 90 + "..."


class TestImageCache:
    """Tests for ImageCache."""

    def test_fetches_once_per_url_and_size(self, image_server):
        client, requests = image_server
        cache = ImageCache(http_client=client)

        first = cache.get("https://img.example/ok.png", 64)
        cache.get("https://img.example/ok.png", 64)
        cache.get("https://img.example/ok.png", 16)

        assert first.size == (64, 64)
        assert first.mode == "RGBA"
        assert requests == ["/ok.png", "/ok.png"]
        assert len(cache) == 2
        assert ("https://img.example/ok.png", 64) in cache

    def test_failures_are_not_cached(self, image_server):
        client, requests = image_server
        cache = ImageCache(http_client=client)

        assert cache.get("https://img.example/missing.png", 64) is None
        assert cache.get("https://img.example/missing.png", 64) is None

        assert len(cache) == 0
        assert len(requests) == 2

    def test_empty_url(self, image_server):
        client, requests = image_server
        assert ImageCache(http_client=client).get(None, 64) is None
        assert requests == []

    def test_clear(self, image_server):
        client, _ = image_server
        cache = ImageCache(http_client=client)
        cache.get("https://img.example/ok.png", 8)

        cache.clear()

        assert len(cache) == 0


class TestRenderer:
    """Tests for OgImageRenderer.render()."""

    def test_renders_png(self, image_server):
        client, _ = image_server
        renderer = OgImageRenderer(image_cache=ImageCache(http_client=client))

        data = renderer.render(OgImageOptions(
            title="A fairly long project title that needs wrapping across lines",
            subtitle="Tagline " * 20,
            badge="Zypherpunk Winner",
            favicon_url="https://img.example/ok.png",
            avatars=[
                OgAvatar("https://img.example/ok.png", "Ada"),
                OgAvatar(None, "grace"),
                OgAvatar("https://img.example/missing.png", ""),
            ],
            stats=[OgStat("Total Prize", "$8,000", is_gold=True), OgStat("Awards", "2")],
        ))

        assert data.startswith(b"\x89PNG")
        assert Image.open(BytesIO(data)).size == (1200, 630)

    def test_minimal_card(self):
        renderer = OgImageRenderer(width=600, height=315)

        data = renderer.render(OgImageOptions(title="Track"))

        assert Image.open(BytesIO(data)).size == (600, 315)

    def test_missing_fonts_fall_back(self, tmp_path):
        renderer = OgImageRenderer(fonts_dir=tmp_path)
        assert renderer.font("serif", 40) is renderer.font("serif", 40)


class TestCards:
    """Tests for project / sponsor / track card content."""

    def test_format_usd(self):
        assert format_usd(12500) == "$12,500"

    def test_project_card(self, awards_data, project_factory):
        award_record = awards_data.projects[0]
        project = project_factory("ShieldSwap", tagline="Private swaps", builders=[("Ada", "L", "adal")])

        options = project_card("shieldswap", award_record, project, badge_prefix="Demo")

        assert options.title == "ShieldSwap"
        assert options.subtitle == "Private swaps"
        assert options.badge == "Demo Winner"
        assert [(s.label, s.value) for s in options.stats] == [
            ("Total Prize", "$8,000"), ("Awards", "2"), ("Sponsors", "2"),
        ]
        assert options.avatars[0].name == "Ada"

    def test_project_card_without_devfolio(self, awards_data):
        options = project_card("private-memos", awards_data.projects[2], None)

        assert options.title == "Private Memos"
        assert options.subtitle is None
        assert options.favicon_url is None

    def test_sponsor_card(self, awards_data, sponsors_data):
        near = sponsors_data.sponsors[0]

        options = sponsor_card(near, AwardsRepository(awards_data))

        assert options.badge == "Zypherpunk Sponsor"
        assert [(s.label, s.value) for s in options.stats] == [
            ("Prize Pool", "$20,000"), ("Winners", "2"), ("Awarded", "$9,000"),
        ]

    def test_track_card(self, awards_data, sponsors_data):
        options = track_card(
            "Private Payments & Transactions",
            AwardsRepository(awards_data),
            SponsorDirectory(sponsors_data),
        )

        assert options.title == "Private Payments & Transactions"
        assert [(s.label, s.value) for s in options.stats] == [
            ("Winners", "2"), ("Sponsors", "2"), ("Awarded", "$3,500"),
        ]
