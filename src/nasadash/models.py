"""Data model definitions — explicit boundaries between feed, state, and render layers."""

from dataclasses import dataclass
from datetime import date
from enum import Enum


class MediaKind(Enum):
    """Media type of the picture of the day."""

    IMAGE = "image"
    VIDEO = "video"


class View(Enum):
    """The three switchable dashboard views."""

    DAILY_FEATURE = "apod"
    GALLERY = "images"
    NEAR_EARTH_OBJECTS = "neo"


class Phase(Enum):
    LOADING = "loading"
    READY = "ready"


class GalleryStatus(Enum):
    """What the gallery view should show in place of (or alongside) the grid."""

    NOT_SEARCHED = "not_searched"
    SEARCHING = "searching"
    RESULTS = "results"
    EMPTY = "empty"
    FAILED = "failed"


@dataclass(frozen=True)
class DailyFeatureRecord:
    """Astronomy Picture of the Day. Replaced wholesale, never edited."""

    title: str
    date: date
    explanation: str
    media_kind: MediaKind
    media_url: str  # Image URL, or embeddable player URL for videos
    copyright: str | None  # None for public-domain entries


@dataclass(frozen=True)
class GalleryItem:
    """One matched entry from the image archive search."""

    title: str
    description: str | None
    created: date
    thumbnail_url: str  # Always non-empty
    center: str  # NASA centre code ("JPL", "GSFC", ...) or "NASA"


GalleryResultSet = tuple[GalleryItem, ...]


@dataclass(frozen=True)
class CloseApproach:
    """First close-approach entry of a near-earth object."""

    date: date
    relative_velocity_kmh: float
    miss_distance_km: float


@dataclass(frozen=True)
class NearEarthObjectRecord:
    id: str
    name: str
    is_hazardous: bool
    diameter_m_min: float
    diameter_m_max: float
    close_approach: CloseApproach
    reference_url: str  # JPL small-body database page


@dataclass(frozen=True)
class NearEarthObjectSummary:
    """Single-day NEO feed, flattened. Counts cover every object in the feed."""

    query_date: date
    total_count: int
    hazardous_count: int
    records: tuple[NearEarthObjectRecord, ...]  # First valid records, display-capped
    reported_count: int | None = None  # Feed's own element_count
