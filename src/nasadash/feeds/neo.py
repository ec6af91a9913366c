"""Near Earth Object Web Service (NeoWs) daily feed."""

import math
from collections.abc import Callable
from datetime import date, datetime, timezone
from typing import Any

from loguru import logger

from nasadash.client import FetchError, ParseError, RemoteDataClient
from nasadash.models import CloseApproach, NearEarthObjectRecord, NearEarthObjectSummary

NEO_FEED_URL = "https://api.nasa.gov/neo/rest/v1/feed"
MAX_DISPLAYED = 10


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def _to_float(value: Any, field: str) -> float:
    """Parse a numeric field; the feed sends most of them as strings."""
    if isinstance(value, bool):
        raise ParseError(f"{field} is a boolean")
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError) as e:
        raise ParseError(f"{field} not numeric: {value!r}") from e
    if not math.isfinite(number):
        raise ParseError(f"{field} not finite: {value!r}")
    return number


def parse_neo_record(raw: dict) -> NearEarthObjectRecord:
    """Map one NeoWs object to a NearEarthObjectRecord.

    Raises:
        ParseError: Any numeric field is unreadable, or there is no
            close-approach entry.
    """
    try:
        meters = raw["estimated_diameter"]["meters"]
        approach = raw["close_approach_data"][0]
        velocity = approach["relative_velocity"]["kilometers_per_hour"]
        miss = approach["miss_distance"]["kilometers"]
        approach_date = approach["close_approach_date"]
    except (KeyError, IndexError, TypeError) as e:
        raise ParseError(f"missing field {e}") from e
    if not isinstance(meters, dict):
        raise ParseError("estimated_diameter.meters is not an object")

    try:
        parsed_date = datetime.strptime(str(approach_date), "%Y-%m-%d").date()
    except ValueError as e:
        raise ParseError(f"close_approach_date not YYYY-MM-DD: {approach_date!r}") from e

    return NearEarthObjectRecord(
        id=str(raw.get("id", "")),
        name=raw.get("name") or "",
        is_hazardous=bool(raw.get("is_potentially_hazardous_asteroid")),
        diameter_m_min=_to_float(meters.get("estimated_diameter_min"), "estimated_diameter_min"),
        diameter_m_max=_to_float(meters.get("estimated_diameter_max"), "estimated_diameter_max"),
        close_approach=CloseApproach(
            date=parsed_date,
            relative_velocity_kmh=_to_float(velocity, "kilometers_per_hour"),
            miss_distance_km=_to_float(miss, "miss_distance"),
        ),
        reference_url=raw.get("nasa_jpl_url") or "",
    )


def summarize_feed(
    raw: Any, query_date: date, limit: int = MAX_DISPLAYED
) -> NearEarthObjectSummary:
    """Flatten the date-keyed feed and compute counts over every object.

    Objects are taken in the order the mapping yields them. Counts include
    objects whose numeric fields fail to parse; those objects are left out
    of `records` only.

    Raises:
        ParseError: Response lacks a near_earth_objects mapping.
    """
    grouped = raw.get("near_earth_objects") if isinstance(raw, dict) else None
    if not isinstance(grouped, dict):
        raise ParseError("NEO response missing near_earth_objects mapping")

    flattened: list[dict] = []
    for objects in grouped.values():
        if isinstance(objects, list):
            flattened.extend(o for o in objects if isinstance(o, dict))

    hazardous = sum(1 for o in flattened if o.get("is_potentially_hazardous_asteroid"))

    records: list[NearEarthObjectRecord] = []
    for obj in flattened:
        if len(records) >= limit:
            break
        try:
            records.append(parse_neo_record(obj))
        except ParseError as e:
            logger.warning("Dropping NEO {} ({}): {}", obj.get("id"), obj.get("name"), e)

    reported = raw.get("element_count")
    return NearEarthObjectSummary(
        query_date=query_date,
        total_count=len(flattened),
        hazardous_count=hazardous,
        records=tuple(records),
        reported_count=reported if isinstance(reported, int) else None,
    )


class NearEarthObjectFeed:
    def __init__(
        self,
        client: RemoteDataClient,
        api_key: str,
        clock: Callable[[], date] = utc_today,
    ) -> None:
        self._client = client
        self._api_key = api_key
        self._clock = clock

    async def fetch_for_today(self) -> NearEarthObjectSummary | None:
        """Objects approaching today (single-day window). None on failure."""
        today = self._clock()
        params = {
            "start_date": today.isoformat(),
            "end_date": today.isoformat(),
            "api_key": self._api_key,
        }
        logger.debug("Fetching NEO feed for {}", today)
        try:
            raw = await self._client.fetch_json(NEO_FEED_URL, params=params)
            summary = summarize_feed(raw, today)
        except FetchError as e:
            logger.warning("NEO feed unavailable: {}", e)
            return None
        logger.info(
            "NEO feed {}: {} objects, {} hazardous",
            today,
            summary.total_count,
            summary.hazardous_count,
        )
        return summary
