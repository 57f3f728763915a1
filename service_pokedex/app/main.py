"""
Pokedex lookup service.
"""

from typing import Any, Dict, Optional

from fastapi import Query

from shared.base_service import BaseService
from shared.config import ServiceConfig
from service_pokedex.app.adapters.pokeapi_client import PokeApiClient
from service_pokedex.app.caching.lookup_cache import LookupCache
from service_pokedex.app.lookup.service import PokemonLookupService, validate_identifier


class PokedexService(BaseService):
    """Pokedex service implementation."""

    def __init__(
        self,
        config: Optional[ServiceConfig] = None,
        *,
        client: Optional[PokeApiClient] = None,
        cache: Optional[LookupCache] = None,
    ):
        super().__init__("pokedex", 8080, config=config)
        self.client = client or PokeApiClient(
            self.config.pokeapi_base_url,
            timeout=self.config.upstream_timeout_seconds,
            metrics=self.metrics,
        )
        self.cache = cache or LookupCache(
            self.config.cache_max_entries,
            self.config.cache_ttl_seconds,
            metrics=self.metrics,
        )
        self.lookup_service = PokemonLookupService(self.client, self.cache)

        self.logger.info(
            "Pokedex service configured",
            upstream=self.config.pokeapi_base_url,
            cache_max_entries=self.cache.max_entries,
            cache_ttl_seconds=self.cache.ttl_seconds
        )

        @self.app.on_event("shutdown")
        async def _shutdown():
            await self.lookup_service.close()

        self._setup_pokedex_routes()

        # Expose service instance via app state for introspection/testing
        self.app.state.pokedex_service = self

    def _setup_pokedex_routes(self):
        """Set up lookup routes."""

        @self.app.get("/api/pokemon")
        async def get_pokemon(name: Optional[str] = Query(default=None)):
            """Look up a Pokémon summary by name."""
            identifier = validate_identifier(name)
            summary = await self.lookup_service.lookup(identifier)
            return summary.to_dict()

    async def _check_dependencies(self) -> Dict[str, Any]:
        """Report lookup cache state."""
        return {"lookup_cache": await self.cache.stats()}


def create_app(config: Optional[ServiceConfig] = None):
    """Create FastAPI application."""
    service = PokedexService(config)
    return service.app


if __name__ == "__main__":
    service = PokedexService()
    service.run()
