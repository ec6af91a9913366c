"""Astronomy Picture of the Day feed."""

from datetime import date, datetime
from typing import Any

from loguru import logger

from nasadash.client import FetchError, ParseError, RemoteDataClient
from nasadash.models import DailyFeatureRecord, MediaKind

APOD_URL = "https://api.nasa.gov/planetary/apod"


def _parse_iso_date(value: Any) -> date:
    try:
        return datetime.strptime(str(value), "%Y-%m-%d").date()
    except ValueError as e:
        raise ParseError(f"APOD date not YYYY-MM-DD: {value!r}") from e


def parse_daily_feature(raw: Any) -> DailyFeatureRecord:
    """Map an APOD response object to a DailyFeatureRecord.

    Raises:
        ParseError: A required field is missing, or media_type is neither
            'image' nor 'video'.
    """
    if not isinstance(raw, dict):
        raise ParseError(f"APOD response is {type(raw).__name__}, expected object")

    missing = [k for k in ("title", "date", "explanation", "media_type", "url") if not raw.get(k)]
    if missing:
        raise ParseError(f"APOD response missing {', '.join(missing)}")

    try:
        media_kind = MediaKind(raw["media_type"])
    except ValueError as e:
        raise ParseError(f"Unsupported APOD media_type: {raw['media_type']!r}") from e

    # Copyright strings often carry stray newlines from the source page
    copyright_ = (raw.get("copyright") or "").strip() or None

    return DailyFeatureRecord(
        title=raw["title"],
        date=_parse_iso_date(raw["date"]),
        explanation=raw["explanation"],
        media_kind=media_kind,
        media_url=raw["url"],
        copyright=copyright_,
    )


class DailyFeatureFeed:
    def __init__(self, client: RemoteDataClient, api_key: str) -> None:
        self._client = client
        self._api_key = api_key

    async def fetch_today(self) -> DailyFeatureRecord | None:
        """Today's picture (server's notion of today). None on any failure."""
        logger.debug("Fetching APOD")
        try:
            raw = await self._client.fetch_json(APOD_URL, params={"api_key": self._api_key})
            record = parse_daily_feature(raw)
        except FetchError as e:
            logger.warning("APOD unavailable: {}", e)
            return None
        logger.info("APOD loaded: {} ({})", record.title, record.date)
        return record
