"""
Pokedex lookup service package.

The service fronts PokeAPI for a single lookup, enforcing:
- Input validation: names must match [A-Za-z0-9-]
- Caching: bounded in-memory LRU with a fixed TTL and single-flight misses
- Error classification: upstream 4xx/5xx/transport failures mapped to shared errors

Structure:
- app.main: FastAPI app, routes, and middleware wiring.
- app.adapters: HTTP client for PokeAPI.
- app.caching: Lookup cache.
- app.domain: Summary records and payload mapping.
- app.lookup: Orchestration of cache, client and mapper.
"""
