"""
Domain layer for the Pokedex service: summary records and payload mapping.
"""

from .models import PokemonAbility, PokemonStat, PokemonSummary
from .mapper import MOVE_DISPLAY_LIMIT, map_payload

__all__ = [
    "PokemonAbility",
    "PokemonStat",
    "PokemonSummary",
    "MOVE_DISPLAY_LIMIT",
    "map_payload",
]
