"""Shared payload builders and a routing mock transport.

Payload shapes mirror the live NASA endpoints closely enough for the
normalizers; only the fields the dashboard reads are filled in.
"""

from collections.abc import Callable

import httpx
import pytest


def _archive_item(i: int, href: str | None = "default", center: str | None = "JPL") -> dict:
    item: dict = {
        "data": [
            {
                "title": f"Image {i}",
                "description": f"Description {i}",
                "date_created": "2015-12-03T00:00:00Z",
                "nasa_id": f"PIA{i:05d}",
            }
        ],
    }
    if center is not None:
        item["data"][0]["center"] = center
    if href is not None:
        if href == "default":
            href = f"https://images-assets.nasa.gov/image/PIA{i:05d}/PIA{i:05d}~thumb.jpg"
        item["links"] = [{"href": href, "rel": "preview", "render": "image"}]
    return item


def _neo_object(
    i: int,
    hazardous: bool = False,
    velocity: str = "45000.123",
    miss: str = "7500000.9",
    approach_date: str = "2026-10-19",
) -> dict:
    return {
        "id": str(3000000 + i),
        "name": f"(2026 AB{i})",
        "nasa_jpl_url": f"https://ssd.jpl.nasa.gov/tools/sbdb_lookup.html#/?sstr={3000000 + i}",
        "is_potentially_hazardous_asteroid": hazardous,
        "estimated_diameter": {
            "meters": {"estimated_diameter_min": 12.4, "estimated_diameter_max": 27.8},
        },
        "close_approach_data": [
            {
                "close_approach_date": approach_date,
                "relative_velocity": {"kilometers_per_hour": velocity},
                "miss_distance": {"kilometers": miss},
            }
        ],
    }


@pytest.fixture
def archive_item() -> Callable[..., dict]:
    return _archive_item


@pytest.fixture
def archive_payload() -> Callable[[list[dict]], dict]:
    def build(items: list[dict]) -> dict:
        return {"collection": {"version": "1.0", "items": items}}

    return build


@pytest.fixture
def neo_object() -> Callable[..., dict]:
    return _neo_object


@pytest.fixture
def neo_payload() -> Callable[[dict[str, list[dict]]], dict]:
    def build(grouped: dict[str, list[dict]]) -> dict:
        return {
            "element_count": sum(len(v) for v in grouped.values()),
            "near_earth_objects": grouped,
        }

    return build


@pytest.fixture
def apod_payload() -> dict:
    return {
        "title": "The Pillars of Creation",
        "date": "2026-10-19",
        "explanation": "Towers of cool interstellar gas and dust.",
        "media_type": "image",
        "url": "https://apod.nasa.gov/apod/image/2610/pillars.jpg",
        "copyright": "\nJane Astronomer\n",
        "service_version": "v1",
    }


class RoutedTransport:
    """httpx.MockTransport that dispatches on URL path and records requests."""

    def __init__(self, routes: dict[str, Callable[[httpx.Request], httpx.Response]]):
        self.routes = routes
        self.requests: list[httpx.Request] = []
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.routes.get(request.url.path)
        if handler is None:
            return httpx.Response(404, json={"error": "no route"})
        return handler(request)

    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]


@pytest.fixture
def routed() -> Callable[..., RoutedTransport]:
    return RoutedTransport
