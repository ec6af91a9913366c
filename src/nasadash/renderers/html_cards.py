"""HTML card renderer for gallery items and near-earth objects.

Produces HTML fragments for st.markdown(..., unsafe_allow_html=True).
All feed-supplied text is escaped; nothing here touches Streamlit.
"""

import html
from datetime import date

from nasadash.i18n import t
from nasadash.models import GalleryItem, NearEarthObjectRecord, NearEarthObjectSummary

_PLACEHOLDER_IMG = "https://via.placeholder.com/400x400?text=Image+Loading"


def format_whole(value: float) -> str:
    """Round to the nearest integer, thousands separated ("1,234,567")."""
    return f"{round(value):,}"


def format_diameter_range(record: NearEarthObjectRecord) -> str:
    return f"{round(record.diameter_m_min)} - {round(record.diameter_m_max)}"


def format_date(value: date) -> str:
    return value.strftime("%Y-%m-%d")


def render_gallery_grid(items: tuple[GalleryItem, ...]) -> str:
    """Three-column grid of image tiles with a title/centre/date caption."""
    tiles: list[str] = []
    for item in items:
        title = html.escape(item.title)
        tiles.append(
            "<div class='gallery-tile'>"
            f"<img src='{html.escape(item.thumbnail_url, quote=True)}' alt='{title}'"
            f" onerror=\"this.src='{_PLACEHOLDER_IMG}'\"/>"
            "<div class='gallery-caption'>"
            f"<p class='gallery-title'>{title}</p>"
            f"<p class='gallery-center'>{html.escape(item.center)}</p>"
            f"<p class='gallery-date'>{format_date(item.created)}</p>"
            "</div></div>"
        )
    return f"<div class='gallery-grid'>{''.join(tiles)}</div>"


def render_neo_stats(summary: NearEarthObjectSummary, lang: str = "en") -> str:
    """Total / hazardous / date-range stat cards."""
    cards = [
        ("stat-total", t("stat_total", lang), str(summary.total_count)),
        ("stat-hazardous", t("stat_hazardous", lang), str(summary.hazardous_count)),
        ("stat-date", t("stat_date", lang), format_date(summary.query_date)),
    ]
    parts = [
        f"<div class='neo-stat {cls}'><p class='neo-stat-label'>{label}</p>"
        f"<p class='neo-stat-value'>{value}</p></div>"
        for cls, label, value in cards
    ]
    return f"<div class='neo-stats'>{''.join(parts)}</div>"


def render_neo_card(record: NearEarthObjectRecord, lang: str = "en") -> str:
    """One object: name, hazard badge, four measurements, JPL link."""
    badge = (
        f"<span class='neo-badge'>{t('neo_hazard_badge', lang)}</span>"
        if record.is_hazardous
        else ""
    )
    approach = record.close_approach
    fields = [
        (t("neo_diameter", lang), format_diameter_range(record)),
        (t("neo_velocity", lang), format_whole(approach.relative_velocity_kmh)),
        (t("neo_miss_distance", lang), format_whole(approach.miss_distance_km)),
        (t("neo_approach_date", lang), format_date(approach.date)),
    ]
    grid = "".join(
        f"<div><p class='neo-field-label'>{label}</p><p class='neo-field-value'>{value}</p></div>"
        for label, value in fields
    )
    link = ""
    if record.reference_url:
        link = (
            f"<a href='{html.escape(record.reference_url, quote=True)}' target='_blank'"
            f" rel='noopener noreferrer'>{t('neo_details', lang)} ↗</a>"
        )
    return (
        "<div class='neo-card'>"
        f"<div class='neo-card-head'><h3>{html.escape(record.name)}</h3>{badge}</div>"
        f"<div class='neo-fields'>{grid}</div>"
        f"{link}</div>"
    )
