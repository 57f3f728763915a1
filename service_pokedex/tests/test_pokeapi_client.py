"""
Unit tests for the PokeAPI client.
"""

import pytest
import httpx

from service_pokedex.app.adapters.pokeapi_client import PokeApiClient
from shared.errors import (
    ErrorKind,
    NotFoundError,
    UnexpectedError,
    UpstreamUnavailableError,
)
from shared.metrics import MetricsCollector


BASE_URL = "https://pokeapi.test/api/v2"


def make_client(handler, metrics=None):
    transport = httpx.MockTransport(handler)
    http_client = httpx.AsyncClient(transport=transport)
    return PokeApiClient(BASE_URL, metrics=metrics, http_client=http_client)


class TestPokeApiClient:
    """Test cases for PokeApiClient."""

    @pytest.fixture
    def metrics(self):
        return MetricsCollector("pokedex")

    @pytest.mark.asyncio
    async def test_fetch_success_lowercases_identifier(self, metrics):
        """The request path uses the lower-cased identifier."""
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"id": 25, "name": "pikachu"})

        client = make_client(handler, metrics)
        payload = await client.fetch("PikaChu")

        assert payload == {"id": 25, "name": "pikachu"}
        assert len(seen) == 1
        assert seen[0].method == "GET"
        assert seen[0].url.path == "/api/v2/pokemon/pikachu"
        assert metrics.sample_value(
            "upstream_requests_total", upstream="pokeapi", outcome="success"
        ) == 1.0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [400, 404, 410, 429])
    async def test_fetch_client_error_is_not_found(self, status_code):
        """Any 4xx from upstream is reported as NotFound."""
        client = make_client(lambda request: httpx.Response(status_code, text="nope"))

        with pytest.raises(NotFoundError) as exc_info:
            await client.fetch("missingno")

        assert exc_info.value.kind is ErrorKind.NOT_FOUND
        assert exc_info.value.message == "Pokémon 'missingno' was not found"
        assert exc_info.value.details["status_code"] == status_code

    @pytest.mark.asyncio
    async def test_not_found_message_keeps_caller_spelling(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.url.path)
            return httpx.Response(404)

        client = make_client(handler)

        with pytest.raises(NotFoundError) as exc_info:
            await client.fetch("MissingNo")

        assert exc_info.value.message == "Pokémon 'MissingNo' was not found"
        assert seen == ["/api/v2/pokemon/missingno"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [500, 502, 503])
    async def test_fetch_server_error_is_unavailable(self, status_code, metrics):
        """Any 5xx from upstream is reported as UpstreamUnavailable."""
        client = make_client(lambda request: httpx.Response(status_code, text="boom"), metrics)

        with pytest.raises(UpstreamUnavailableError) as exc_info:
            await client.fetch("pikachu")

        assert exc_info.value.kind is ErrorKind.UPSTREAM_UNAVAILABLE
        assert exc_info.value.details["status_code"] == status_code
        assert metrics.sample_value(
            "upstream_requests_total", upstream="pokeapi", outcome="server_error"
        ) == 1.0

    @pytest.mark.asyncio
    async def test_fetch_timeout_is_unavailable(self):
        """A client timeout surfaces as UpstreamUnavailable."""
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        client = make_client(handler)

        with pytest.raises(UpstreamUnavailableError) as exc_info:
            await client.fetch("pikachu")

        assert "ReadTimeout" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_fetch_connection_error_is_unavailable(self):
        """Connection failures surface as UpstreamUnavailable."""
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        client = make_client(handler)

        with pytest.raises(UpstreamUnavailableError):
            await client.fetch("pikachu")

    @pytest.mark.asyncio
    async def test_fetch_makes_single_attempt(self):
        """Failures are not retried."""
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(503)

        client = make_client(handler)

        with pytest.raises(UpstreamUnavailableError):
            await client.fetch("pikachu")

        assert len(calls) == 1

    @pytest.mark.asyncio
    async def test_fetch_non_json_body_is_unexpected(self):
        """A 200 with a malformed body is an UnexpectedError."""
        client = make_client(lambda request: httpx.Response(200, text="<html>oops</html>"))

        with pytest.raises(UnexpectedError) as exc_info:
            await client.fetch("pikachu")

        assert exc_info.value.kind is ErrorKind.UNEXPECTED

    @pytest.mark.asyncio
    async def test_fetch_non_object_body_is_unexpected(self):
        """A JSON array body is rejected."""
        client = make_client(lambda request: httpx.Response(200, json=["pikachu"]))

        with pytest.raises(UnexpectedError):
            await client.fetch("pikachu")

    @pytest.mark.asyncio
    async def test_close_leaves_injected_client_open(self):
        """Injected HTTP clients are owned by the caller."""
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(200, json={})))
        client = PokeApiClient(BASE_URL, http_client=http_client)

        await client.close()

        assert not http_client.is_closed
        await http_client.aclose()
