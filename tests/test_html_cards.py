"""Tests for the HTML card renderer and display formatting."""

from datetime import date

from nasadash.i18n import t
from nasadash.models import (
    CloseApproach,
    GalleryItem,
    NearEarthObjectRecord,
    NearEarthObjectSummary,
)
from nasadash.renderers.html_cards import (
    format_diameter_range,
    format_whole,
    render_gallery_grid,
    render_neo_card,
    render_neo_stats,
)


def _neo(hazardous: bool = False, name: str = "(2026 AB1)") -> NearEarthObjectRecord:
    return NearEarthObjectRecord(
        id="3000001",
        name=name,
        is_hazardous=hazardous,
        diameter_m_min=12.4,
        diameter_m_max=27.8,
        close_approach=CloseApproach(
            date=date(2026, 10, 19),
            relative_velocity_kmh=45000.6,
            miss_distance_km=7512345.2,
        ),
        reference_url="https://ssd.jpl.nasa.gov/tools/sbdb_lookup.html#/?sstr=3000001",
    )


class TestFormatting:

    def test_whole_numbers_are_grouped(self):
        assert format_whole(7512345.2) == "7,512,345"
        assert format_whole(45000.6) == "45,001"

    def test_diameter_range(self):
        assert format_diameter_range(_neo()) == "12 - 28"


class TestGalleryGrid:

    def test_one_tile_per_item(self):
        items = tuple(
            GalleryItem(f"T{i}", None, date(2015, 12, 3), f"https://x.test/{i}.jpg", "GSFC")
            for i in range(4)
        )
        out = render_gallery_grid(items)
        assert out.count("class='gallery-tile'") == 4
        assert "GSFC" in out
        assert "2015-12-03" in out

    def test_text_is_escaped(self):
        item = GalleryItem("<b>Mars</b>", None, date(2015, 12, 3), "https://x.test/a.jpg", "JPL")
        out = render_gallery_grid((item,))
        assert "<b>Mars</b>" not in out
        assert "&lt;b&gt;Mars&lt;/b&gt;" in out

    def test_empty_grid(self):
        assert render_gallery_grid(()) == "<div class='gallery-grid'></div>"


class TestNeoCards:

    def test_hazard_badge_only_when_hazardous(self):
        badge = t("neo_hazard_badge", "en")
        assert badge in render_neo_card(_neo(hazardous=True))
        assert badge not in render_neo_card(_neo(hazardous=False))

    def test_card_fields(self):
        out = render_neo_card(_neo())
        assert "45,001" in out
        assert "7,512,345" in out
        assert "2026-10-19" in out
        assert "sstr=3000001" in out
        assert "noopener" in out

    def test_korean_labels(self):
        assert t("neo_velocity", "ko") in render_neo_card(_neo(), lang="ko")

    def test_stats(self):
        summary = NearEarthObjectSummary(
            query_date=date(2026, 10, 19),
            total_count=15,
            hazardous_count=4,
            records=(),
        )
        out = render_neo_stats(summary)
        assert ">15<" in out
        assert ">4<" in out
        assert "2026-10-19" in out
