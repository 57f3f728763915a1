"""
Unit tests for PokeAPI payload mapping.
"""

import pytest

from service_pokedex.app.domain import (
    MOVE_DISPLAY_LIMIT,
    PokemonAbility,
    PokemonStat,
    PokemonSummary,
    map_payload,
)


OFFICIAL_ART = "https://img.test/official-artwork/25.png"
FRONT_DEFAULT = "https://img.test/sprites/25.png"


@pytest.fixture
def pikachu_payload():
    """Trimmed /pokemon/pikachu body."""
    return {
        "id": 25,
        "name": "pikachu",
        "height": 4,
        "weight": 60,
        "base_experience": 112,
        "order": 35,
        "sprites": {
            "front_default": FRONT_DEFAULT,
            "other": {"official-artwork": {"front_default": OFFICIAL_ART}},
        },
        "types": [{"slot": 1, "type": {"name": "electric", "url": "https://pokeapi.test/type/13/"}}],
        "held_items": [
            {"item": {"name": "oran-berry"}, "version_details": []},
            {"item": {"name": "light-ball"}, "version_details": []},
        ],
        "abilities": [
            {"ability": {"name": "static"}, "is_hidden": False, "slot": 1},
            {"ability": {"name": "lightning-rod"}, "is_hidden": True, "slot": 3},
        ],
        "stats": [
            {"base_stat": 35, "effort": 0, "stat": {"name": "hp"}},
            {"base_stat": 55, "effort": 0, "stat": {"name": "attack"}},
            {"base_stat": 90, "effort": 2, "stat": {"name": "speed"}},
        ],
        "moves": [{"move": {"name": f"move-{i}"}} for i in range(10)],
    }


def test_maps_full_payload(pikachu_payload):
    summary = map_payload(pikachu_payload)

    assert summary.id == 25
    assert summary.name == "pikachu"
    assert summary.height == 4
    assert summary.weight == 60
    assert summary.base_experience == 112
    assert summary.order == 35
    assert summary.sprite == OFFICIAL_ART
    assert summary.types == ("electric",)
    assert summary.held_items == ("oran-berry", "light-ball")
    assert summary.abilities == (
        PokemonAbility("static", False),
        PokemonAbility("lightning-rod", True),
    )
    assert summary.stats == (
        PokemonStat("hp", 35),
        PokemonStat("attack", 55),
        PokemonStat("speed", 90),
    )


def test_moves_truncated_to_first_six_in_order(pikachu_payload):
    summary = map_payload(pikachu_payload)

    assert MOVE_DISPLAY_LIMIT == 6
    assert summary.moves == tuple(f"move-{i}" for i in range(6))


def test_fewer_moves_than_limit_are_kept(pikachu_payload):
    pikachu_payload["moves"] = pikachu_payload["moves"][:2]

    assert map_payload(pikachu_payload).moves == ("move-0", "move-1")


def test_empty_payload_resolves_to_defaults():
    summary = map_payload({})

    assert summary == PokemonSummary()
    assert summary.id == 0
    assert summary.name == ""
    assert summary.sprite == ""
    assert summary.types == ()
    assert summary.held_items == ()
    assert summary.abilities == ()
    assert summary.stats == ()
    assert summary.moves == ()


def test_null_and_mistyped_fields_resolve_to_defaults():
    summary = map_payload({
        "id": None,
        "name": None,
        "height": "not-a-number",
        "weight": [],
        "base_experience": None,
        "sprites": None,
        "types": None,
        "moves": {"move": {"name": "tackle"}},
    })

    assert summary == PokemonSummary()


def test_numeric_strings_are_coerced():
    summary = map_payload({"id": "25", "height": "4", "weight": 60.0})

    assert summary.id == 25
    assert summary.height == 4
    assert summary.weight == 60


def test_sprite_falls_back_to_front_default(pikachu_payload):
    del pikachu_payload["sprites"]["other"]

    assert map_payload(pikachu_payload).sprite == FRONT_DEFAULT


def test_sprite_falls_back_when_official_artwork_is_null(pikachu_payload):
    pikachu_payload["sprites"]["other"]["official-artwork"]["front_default"] = None

    assert map_payload(pikachu_payload).sprite == FRONT_DEFAULT


def test_sprite_empty_when_no_image_present():
    payload = {"sprites": {"front_default": None, "other": {"official-artwork": {}}}}

    assert map_payload(payload).sprite == ""


def test_partial_list_entries_keep_their_position():
    summary = map_payload({
        "types": [{"type": {"name": "grass"}}, {}, {"type": {"name": "poison"}}],
        "abilities": [{"ability": {"name": "overgrow"}}, "garbage"],
        "stats": [{"stat": {"name": "hp"}}, {"base_stat": 49}],
    })

    assert summary.types == ("grass", "", "poison")
    assert summary.abilities == (PokemonAbility("overgrow", False), PokemonAbility("", False))
    assert summary.stats == (PokemonStat("hp", 0), PokemonStat("", 49))


def test_summary_is_immutable(pikachu_payload):
    summary = map_payload(pikachu_payload)

    with pytest.raises(AttributeError):
        summary.name = "raichu"


def test_to_dict_uses_client_field_names(pikachu_payload):
    body = map_payload(pikachu_payload).to_dict()

    assert body["baseExperience"] == 112
    assert body["heldItems"] == ["oran-berry", "light-ball"]
    assert body["abilities"][1] == {"name": "lightning-rod", "hidden": True}
    assert body["stats"][0] == {"name": "hp", "value": 35}
    assert len(body["moves"]) == 6
