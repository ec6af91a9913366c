"""Dashboard state and action routing.

The controller owns every piece of view state. The UI reads it through
properties and changes it only through the action methods below.
"""

import asyncio
from collections.abc import Callable
from datetime import date

import httpx
from loguru import logger

from nasadash.client import RemoteDataClient
from nasadash.config import Settings
from nasadash.feeds.apod import DailyFeatureFeed
from nasadash.feeds.images import DEFAULT_QUERY, MediaArchiveSearch
from nasadash.feeds.neo import NearEarthObjectFeed, utc_today
from nasadash.models import (
    DailyFeatureRecord,
    GalleryItem,
    GalleryStatus,
    NearEarthObjectSummary,
    Phase,
    View,
)
from nasadash.paginator import GalleryPaginator


class DashboardController:
    def __init__(
        self,
        daily_feed: DailyFeatureFeed,
        archive: MediaArchiveSearch,
        neo_feed: NearEarthObjectFeed,
        paginator: GalleryPaginator | None = None,
        uses_demo_key: bool = False,
    ) -> None:
        self._daily_feed = daily_feed
        self._archive = archive
        self._neo_feed = neo_feed
        self._paginator = paginator or GalleryPaginator()
        self._uses_demo_key = uses_demo_key

        self._phase = Phase.LOADING
        self._view = View.DAILY_FEATURE
        self._daily_feature: DailyFeatureRecord | None = None
        self._neo_summary: NearEarthObjectSummary | None = None
        self._query = ""

        # Search bookkeeping: last issued token, and how the latest search ended
        self._search_seq = 0
        self._searching = False
        self._search_attempted = False
        self._search_failed = False

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
        clock: Callable[[], date] = utc_today,
    ) -> "DashboardController":
        """Wire all three feeds against one RemoteDataClient."""
        client = RemoteDataClient(timeout=settings.timeout, transport=transport)
        return cls(
            daily_feed=DailyFeatureFeed(client, settings.api_key),
            archive=MediaArchiveSearch(client),
            neo_feed=NearEarthObjectFeed(client, settings.api_key, clock=clock),
            uses_demo_key=settings.uses_demo_key,
        )

    # --- Read-only state ---

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def view(self) -> View:
        return self._view

    @property
    def daily_feature(self) -> DailyFeatureRecord | None:
        return self._daily_feature

    @property
    def neo_summary(self) -> NearEarthObjectSummary | None:
        return self._neo_summary

    @property
    def query(self) -> str:
        """Last submitted search term (empty until the user searches)."""
        return self._query

    @property
    def uses_demo_key(self) -> bool:
        return self._uses_demo_key

    @property
    def gallery_status(self) -> GalleryStatus:
        if self._searching:
            return GalleryStatus.SEARCHING
        if not self._search_attempted:
            return GalleryStatus.NOT_SEARCHED
        if self._search_failed:
            return GalleryStatus.FAILED
        if self._paginator.total == 0:
            return GalleryStatus.EMPTY
        return GalleryStatus.RESULTS

    @property
    def visible_gallery_items(self) -> tuple[GalleryItem, ...]:
        return self._paginator.visible_items()

    @property
    def gallery_total(self) -> int:
        return self._paginator.total

    @property
    def gallery_has_more(self) -> bool:
        return self._paginator.has_more

    # --- Actions ---

    async def initialize(self) -> None:
        """Load all three feeds concurrently; READY once every one has settled."""
        self._phase = Phase.LOADING
        outcomes = await asyncio.gather(
            self._load_daily_feature(),
            self._run_search(DEFAULT_QUERY),
            self._load_neo(),
            return_exceptions=True,
        )
        for name, outcome in zip(("apod", "images", "neo"), outcomes):
            if isinstance(outcome, Exception):
                logger.opt(exception=outcome).error("Unexpected failure loading {}", name)
        self._phase = Phase.READY
        logger.info(
            "Dashboard ready: apod={}, images={}, neo={}",
            self._daily_feature is not None,
            self.gallery_status.value,
            self._neo_summary is not None,
        )

    def select_view(self, view: View) -> None:
        self._view = view

    async def submit_search(self, query: str) -> None:
        """Search the archive for query. Blank input is ignored."""
        term = query.strip()
        if not term:
            return
        self._query = term
        await self._run_search(term)

    def load_more_gallery(self) -> bool:
        """Reveal the next gallery page. Returns False when not applicable."""
        if self._view is not View.GALLERY or not self._paginator.has_more:
            logger.debug("load_more ignored (view={}, more={})", self._view, self._paginator.has_more)
            return False
        self._paginator.load_more()
        return True

    # --- Internals ---

    async def _load_daily_feature(self) -> None:
        self._daily_feature = await self._daily_feed.fetch_today()

    async def _load_neo(self) -> None:
        self._neo_summary = await self._neo_feed.fetch_for_today()

    async def _run_search(self, term: str) -> None:
        self._search_seq += 1
        token = self._search_seq
        self._searching = True
        self._search_attempted = True

        try:
            results = await self._archive.search(term)
        except Exception:
            logger.exception("Image search for {!r} raised", term)
            results = None

        if token != self._search_seq:
            logger.debug("Discarding stale results for {!r} (token {} < {})", term, token, self._search_seq)
            return
        self._searching = False
        if results is None:
            self._search_failed = True
            self._paginator.clear()
        else:
            self._search_failed = False
            self._paginator.install(results)
