"""
PokeAPI client for the Pokedex service.
"""

from typing import Any, Dict, Optional, TYPE_CHECKING
from urllib.parse import quote

import httpx

from shared.logging import get_logger
from shared.errors import NotFoundError, UnexpectedError, UpstreamUnavailableError

if TYPE_CHECKING:  # pragma: no cover - imported for typing only
    from shared.metrics import MetricsCollector


DEFAULT_TIMEOUT_SECONDS = 10.0
UPSTREAM_NAME = "pokeapi"


class PokeApiClient:
    """Client for fetching raw Pokémon payloads from PokeAPI.

    Every call issues exactly one GET; failures are classified here and
    surfaced immediately, never retried.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        metrics: Optional["MetricsCollector"] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.metrics = metrics
        self.logger = get_logger("pokedex.pokeapi_client")
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            timeout=timeout,
            follow_redirects=True,
            headers={"Accept": "application/json"},
        )

    async def close(self) -> None:
        """Close the pooled HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    def _record(self, outcome: str) -> None:
        if self.metrics:
            self.metrics.increment_counter(
                "upstream_requests_total", upstream=UPSTREAM_NAME, outcome=outcome
            )

    async def fetch(self, identifier: str) -> Dict[str, Any]:
        """Fetch the raw /pokemon/{identifier} body.

        Raises NotFoundError on any 4xx, UpstreamUnavailableError on any 5xx
        or transport failure (including the client timeout), and
        UnexpectedError when the body is not a JSON object.
        """
        name = identifier.lower()
        url = f"{self.base_url}/pokemon/{quote(name, safe='')}"

        try:
            if self.metrics:
                with self.metrics.time_operation("upstream_request_duration_seconds", upstream=UPSTREAM_NAME):
                    response = await self._client.get(url)
            else:
                response = await self._client.get(url)
        except httpx.HTTPError as exc:
            self._record("transport_error")
            self.logger.error(
                "PokeAPI transport error",
                url=url,
                error_type=type(exc).__name__,
                error=str(exc)
            )
            raise UpstreamUnavailableError(
                service=UPSTREAM_NAME,
                message=f"Transport error: {type(exc).__name__}",
                details={"url": url, "error": str(exc)}
            ) from exc

        status_code = response.status_code

        if 400 <= status_code < 500:
            self._record("not_found")
            self.logger.info("Pokémon not found upstream", url=url, status_code=status_code)
            raise NotFoundError(identifier, details={"status_code": status_code})

        if status_code >= 500:
            self._record("server_error")
            self.logger.error(
                "PokeAPI server error",
                url=url,
                status_code=status_code,
                response=response.text[:200]
            )
            raise UpstreamUnavailableError(
                service=UPSTREAM_NAME,
                message=f"Unexpected status {status_code}",
                details={"status_code": status_code}
            )

        if not 200 <= status_code < 300:
            self._record("unexpected_status")
            raise UnexpectedError(
                f"PokeAPI returned unexpected status {status_code}",
                details={"status_code": status_code, "url": url}
            )

        try:
            payload = response.json()
        except ValueError as exc:
            self._record("invalid_body")
            self.logger.error("PokeAPI returned a non-JSON body", url=url)
            raise UnexpectedError(
                "PokeAPI returned a malformed response body",
                details={"url": url}
            ) from exc

        if not isinstance(payload, dict):
            self._record("invalid_body")
            raise UnexpectedError(
                "PokeAPI response body is not a JSON object",
                details={"url": url, "type": type(payload).__name__}
            )

        self._record("success")
        self.logger.debug("PokeAPI payload retrieved", url=url)
        return payload
