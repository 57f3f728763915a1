"""
Normalized Pokémon records served by the lookup API.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class PokemonAbility:
    """An ability and whether it is the hidden one."""

    name: str = ""
    hidden: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "hidden": self.hidden}


@dataclass(frozen=True)
class PokemonStat:
    """A base stat (hp, attack, ...) and its value."""

    name: str = ""
    value: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "value": self.value}


@dataclass(frozen=True)
class PokemonSummary:
    """Structured representation of a Pokémon as returned by the API."""

    id: int = 0
    name: str = ""
    height: int = 0
    weight: int = 0
    base_experience: int = 0
    order: int = 0
    sprite: str = ""
    types: Tuple[str, ...] = field(default_factory=tuple)
    held_items: Tuple[str, ...] = field(default_factory=tuple)
    abilities: Tuple[PokemonAbility, ...] = field(default_factory=tuple)
    stats: Tuple[PokemonStat, ...] = field(default_factory=tuple)
    moves: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the summary to the camelCase JSON shape clients consume."""
        return {
            "id": self.id,
            "name": self.name,
            "height": self.height,
            "weight": self.weight,
            "baseExperience": self.base_experience,
            "order": self.order,
            "sprite": self.sprite,
            "types": list(self.types),
            "heldItems": list(self.held_items),
            "abilities": [ability.to_dict() for ability in self.abilities],
            "stats": [stat.to_dict() for stat in self.stats],
            "moves": list(self.moves),
        }
