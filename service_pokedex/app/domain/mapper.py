"""
Translation of raw PokeAPI payloads into PokemonSummary records.

The mapping is total: any field that is missing, null or of the wrong type
resolves to its zero value (0, "", False or an empty tuple) instead of
raising. List entries that are not objects still occupy their position so
the output order always mirrors the upstream order.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional

from .models import PokemonAbility, PokemonStat, PokemonSummary


MOVE_DISPLAY_LIMIT = 6


def _path(node: Any, *keys: str) -> Optional[Any]:
    """Walk nested mappings, returning None as soon as a step is missing."""
    current = node
    for key in keys:
        if not isinstance(current, Mapping):
            return None
        current = current.get(key)
    return current


def _as_int(value: Any) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        try:
            return int(value)
        except (ValueError, OverflowError):
            return 0
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            return int(float(text))
        except (ValueError, OverflowError):
            return 0
    return 0


def _as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return ""


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return False


def _items(node: Any, key: str) -> List[Any]:
    value = _path(node, key)
    return value if isinstance(value, list) else []


def extract_sprite(root: Any) -> str:
    """Prefer the official artwork, then the default front sprite, then ""."""
    artwork = _path(root, "sprites", "other", "official-artwork", "front_default")
    if isinstance(artwork, str):
        return artwork
    return _as_text(_path(root, "sprites", "front_default"))


def map_payload(payload: Any) -> PokemonSummary:
    """Map an upstream /pokemon/{name} body onto a PokemonSummary."""
    return PokemonSummary(
        id=_as_int(_path(payload, "id")),
        name=_as_text(_path(payload, "name")),
        height=_as_int(_path(payload, "height")),
        weight=_as_int(_path(payload, "weight")),
        base_experience=_as_int(_path(payload, "base_experience")),
        order=_as_int(_path(payload, "order")),
        sprite=extract_sprite(payload),
        types=tuple(
            _as_text(_path(entry, "type", "name")) for entry in _items(payload, "types")
        ),
        held_items=tuple(
            _as_text(_path(entry, "item", "name")) for entry in _items(payload, "held_items")
        ),
        abilities=tuple(
            PokemonAbility(
                name=_as_text(_path(entry, "ability", "name")),
                hidden=_as_bool(_path(entry, "is_hidden")),
            )
            for entry in _items(payload, "abilities")
        ),
        stats=tuple(
            PokemonStat(
                name=_as_text(_path(entry, "stat", "name")),
                value=_as_int(_path(entry, "base_stat")),
            )
            for entry in _items(payload, "stats")
        ),
        # Display-size cap, not an error condition
        moves=tuple(
            _as_text(_path(entry, "move", "name"))
            for entry in _items(payload, "moves")[:MOVE_DISPLAY_LIMIT]
        ),
    )
