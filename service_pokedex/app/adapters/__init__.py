"""
Adapters package for the Pokedex service.

Contains the HTTP client wrapper for PokeAPI. Adapters encapsulate:

- Base URLs and request shapes
- Client-level timeouts
- Error handling that maps to shared errors

Keep adapters thin and side-effect free outside of explicit calls.
"""

from .pokeapi_client import PokeApiClient

__all__ = ["PokeApiClient"]
