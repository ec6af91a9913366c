"""HTTP transport — fetch JSON from a URL, or fail with a typed error."""

from typing import Any

import httpx
from loguru import logger


class FetchError(Exception):
    """A feed could not be fetched or understood."""


class TransportError(FetchError):
    """Network, DNS, timeout, or HTTP status failure."""


class ParseError(FetchError):
    """Response body is not JSON, or not the shape a feed expects."""


def _redact(url: httpx.URL | str) -> str:
    """URL without its query string, so API keys never reach the logs."""
    return str(url).split("?", 1)[0]


class RemoteDataClient:
    """Async JSON fetcher.

    A fresh httpx.AsyncClient is opened per call, so one instance can be
    used from successive asyncio.run() event loops.
    """

    def __init__(
        self,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout = timeout
        self._transport = transport

    async def fetch_json(self, url: str, params: dict[str, str] | None = None) -> Any:
        """GET url and decode the JSON body.

        Raises:
            TransportError: Request failed or returned a non-2xx status.
            ParseError: Body is not valid JSON.
        """
        headers = {"User-Agent": "nasadash/0.1 (NASA open data dashboard)"}
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport, headers=headers
            ) as client:
                resp = await client.get(url, params=params)
                resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TransportError(
                f"HTTP {e.response.status_code} from {_redact(e.request.url)}"
            ) from e
        except httpx.HTTPError as e:
            raise TransportError(f"{type(e).__name__} requesting {_redact(url)}") from e

        logger.debug("GET {} -> {}", _redact(resp.request.url), resp.status_code)
        try:
            return resp.json()
        except (ValueError, RecursionError) as e:
            raise ParseError(f"Invalid JSON from {_redact(resp.request.url)}") from e
