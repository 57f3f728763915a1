"""
Lookup service layer for the Pokedex API.
"""

from .service import PokemonLookupService, validate_identifier

__all__ = ["PokemonLookupService", "validate_identifier"]
