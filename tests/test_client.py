"""Tests for the JSON transport client (nasadash/client.py)."""

import asyncio

import httpx
import pytest

from nasadash.client import FetchError, ParseError, RemoteDataClient, TransportError

URL = "https://api.nasa.gov/planetary/apod"


def _client(handler) -> RemoteDataClient:
    return RemoteDataClient(transport=httpx.MockTransport(handler))


class TestFetchJson:

    def test_returns_decoded_body(self):
        client = _client(lambda r: httpx.Response(200, json={"ok": [1, 2]}))
        assert asyncio.run(client.fetch_json(URL)) == {"ok": [1, 2]}

    def test_passes_params(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={})

        asyncio.run(_client(handler).fetch_json(URL, params={"api_key": "abc"}))
        assert seen[0].url.params["api_key"] == "abc"

    def test_status_error_is_transport_error(self):
        client = _client(lambda r: httpx.Response(503))
        with pytest.raises(TransportError, match="HTTP 503"):
            asyncio.run(client.fetch_json(URL, params={"api_key": "secret-key"}))

    def test_error_message_hides_api_key(self):
        client = _client(lambda r: httpx.Response(403))
        with pytest.raises(TransportError) as info:
            asyncio.run(client.fetch_json(URL, params={"api_key": "secret-key"}))
        assert "secret-key" not in str(info.value)
        assert URL in str(info.value)

    def test_timeout_is_transport_error(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(TransportError, match="ReadTimeout"):
            asyncio.run(_client(handler).fetch_json(URL))

    def test_invalid_json_is_parse_error(self):
        client = _client(lambda r: httpx.Response(200, text="not json"))
        with pytest.raises(ParseError):
            asyncio.run(client.fetch_json(URL))

    def test_deeply_nested_json_is_parse_error(self):
        body = "[" * 200000 + "]" * 200000
        client = _client(lambda r: httpx.Response(200, text=body))
        with pytest.raises(ParseError):
            asyncio.run(client.fetch_json(URL))

    def test_errors_share_base_class(self):
        assert issubclass(TransportError, FetchError)
        assert issubclass(ParseError, FetchError)

    def test_reusable_across_event_loops(self):
        client = _client(lambda r: httpx.Response(200, json={"n": 1}))
        assert asyncio.run(client.fetch_json(URL)) == {"n": 1}
        assert asyncio.run(client.fetch_json(URL)) == {"n": 1}
