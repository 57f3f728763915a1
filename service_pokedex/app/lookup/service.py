"""
Lookup service responsible for resolving Pokémon summaries.
"""

from __future__ import annotations

import re

from shared.logging import get_logger
from shared.errors import InvalidInputError

from service_pokedex.app.adapters.pokeapi_client import PokeApiClient
from service_pokedex.app.caching.lookup_cache import LookupCache
from service_pokedex.app.domain.mapper import map_payload
from service_pokedex.app.domain.models import PokemonSummary


_IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z0-9-]+$")


def validate_identifier(identifier: object) -> str:
    """Return the identifier unchanged or raise InvalidInputError.

    Whitespace is not stripped: it falls outside the allowed characters.
    """
    if not isinstance(identifier, str) or not identifier.strip():
        raise InvalidInputError("name is required", details={"field": "name"})
    if not _IDENTIFIER_PATTERN.fullmatch(identifier):
        raise InvalidInputError("name must be alphanumeric or dash", details={"field": "name"})
    return identifier


class PokemonLookupService:
    """Coordinates the lookup cache and PokeAPI fetches for summaries."""

    def __init__(self, client: PokeApiClient, cache: LookupCache) -> None:
        self.client = client
        self.cache = cache
        self.logger = get_logger("pokedex.lookup")

    async def lookup(self, identifier: str) -> PokemonSummary:
        """
        Resolve a summary by name.

        Raises InvalidInputError for identifiers outside [A-Za-z0-9-],
        NotFoundError or UpstreamUnavailableError from the client; errors from
        the fetch path are propagated untouched and never cached.
        """
        identifier = validate_identifier(identifier)
        key = identifier.lower()

        async def _fetch_and_map() -> PokemonSummary:
            # The client lower-cases; the caller's spelling is kept for messages
            payload = await self.client.fetch(identifier)
            return map_payload(payload)

        return await self.cache.get_or_compute(key, _fetch_and_map)

    async def close(self) -> None:
        await self.client.close()
