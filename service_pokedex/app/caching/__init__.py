"""
Pokedex caching package.

Provides the in-memory lookup cache used to avoid repeated PokeAPI calls.
Entries are short-lived and never persisted; a cold start means a cold cache.
"""

from .lookup_cache import LookupCache

__all__ = ["LookupCache"]
