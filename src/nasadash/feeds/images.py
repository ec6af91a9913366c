"""NASA Image and Video Library search feed (images-api.nasa.gov)."""

from datetime import date, datetime
from typing import Any

from loguru import logger

from nasadash.client import FetchError, ParseError, RemoteDataClient
from nasadash.models import GalleryItem, GalleryResultSet

IMAGES_SEARCH_URL = "https://images-api.nasa.gov/search"
DEFAULT_QUERY = "space"
MAX_RESULTS = 50
FALLBACK_CENTER = "NASA"


def _thumbnail_href(item: Any) -> str | None:
    """href of the item's first link, or None if there is no usable one."""
    if not isinstance(item, dict):
        return None
    links = item.get("links")
    if not isinstance(links, list) or not links or not isinstance(links[0], dict):
        return None
    return links[0].get("href") or None


def _parse_created(value: Any) -> date:
    """Date part of an ISO-8601 timestamp such as '2015-12-03T00:00:00Z'."""
    if not isinstance(value, str):
        raise ParseError(f"date_created is {type(value).__name__}")
    try:
        return datetime.strptime(value[:10], "%Y-%m-%d").date()
    except ValueError as e:
        raise ParseError(f"date_created not ISO-8601: {value!r}") from e


def _to_gallery_item(item: dict, href: str) -> GalleryItem:
    data = item.get("data")
    if not isinstance(data, list) or not data or not isinstance(data[0], dict):
        raise ParseError("item has no data[0] metadata")
    meta = data[0]
    return GalleryItem(
        title=meta.get("title") or "",
        description=meta.get("description") or None,
        created=_parse_created(meta.get("date_created")),
        thumbnail_url=href,
        center=meta.get("center") or FALLBACK_CENTER,
    )


def normalize_search_results(raw: Any, limit: int = MAX_RESULTS) -> GalleryResultSet:
    """Map a search response to at most `limit` renderable gallery items.

    Items without a first link href are discarded before truncation, so a
    page of 60 valid matches still yields `limit` items. Items whose metadata
    cannot be read are dropped after truncation.

    Raises:
        ParseError: Response lacks collection.items.
    """
    try:
        items = raw["collection"]["items"]
    except (KeyError, TypeError) as e:
        raise ParseError("search response missing collection.items") from e
    if not isinstance(items, list):
        raise ParseError("collection.items is not a list")

    linked: list[tuple[dict, str]] = []
    for item in items:
        href = _thumbnail_href(item)
        if href:
            linked.append((item, href))

    results: list[GalleryItem] = []
    for item, href in linked[:limit]:
        try:
            results.append(_to_gallery_item(item, href))
        except ParseError as e:
            logger.warning("Skipping archive item {}: {}", href, e)
    return tuple(results)


class MediaArchiveSearch:
    def __init__(self, client: RemoteDataClient) -> None:
        self._client = client

    async def search(self, query: str = DEFAULT_QUERY) -> GalleryResultSet | None:
        """Image-only search. Empty tuple for no matches, None on failure."""
        logger.debug("Searching image archive for {!r}", query)
        try:
            raw = await self._client.fetch_json(
                IMAGES_SEARCH_URL, params={"q": query, "media_type": "image"}
            )
            results = normalize_search_results(raw)
        except FetchError as e:
            logger.warning("Image search for {!r} failed: {}", query, e)
            return None
        logger.info("Image search {!r}: {} items", query, len(results))
        return results
