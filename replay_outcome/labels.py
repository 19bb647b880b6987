"""
Static label tables for Melee replays.

Keyed by the integer ids found in a replay's game start block.
Unknown or sentinel ids resolve to None.
"""
from typing import Any, Dict, Optional


TEAM_COLORS: Dict[int, str] = {
    0: "RED",
    1: "BLUE",
    2: "GREEN",
}

# external (character select screen) ids
CHARACTERS: Dict[int, str] = {
    0: "CAPTAIN_FALCON",
    1: "DONKEY_KONG",
    2: "FOX",
    3: "GAME_AND_WATCH",
    4: "KIRBY",
    5: "BOWSER",
    6: "LINK",
    7: "LUIGI",
    8: "MARIO",
    9: "MARTH",
    10: "MEWTWO",
    11: "NESS",
    12: "PEACH",
    13: "PIKACHU",
    14: "ICE_CLIMBERS",
    15: "JIGGLYPUFF",
    16: "SAMUS",
    17: "YOSHI",
    18: "ZELDA",
    19: "SHEIK",
    20: "FALCO",
    21: "YOUNG_LINK",
    22: "DR_MARIO",
    23: "ROY",
    24: "PICHU",
    25: "GANONDORF",
    26: "MASTER_HAND",
    27: "WIREFRAME_MALE",
    28: "WIREFRAME_FEMALE",
    29: "GIGA_BOWSER",
    30: "CRAZY_HAND",
    31: "SANDBAG",
    32: "POPO",
}

STAGES: Dict[int, str] = {
    2: "FOUNTAIN_OF_DREAMS",
    3: "POKEMON_STADIUM",
    4: "PRINCESS_PEACHS_CASTLE",
    5: "KONGO_JUNGLE",
    6: "BRINSTAR",
    7: "CORNERIA",
    8: "YOSHIS_STORY",
    9: "ONETT",
    10: "MUTE_CITY",
    11: "RAINBOW_CRUISE",
    12: "JUNGLE_JAPES",
    13: "GREAT_BAY",
    14: "HYRULE_TEMPLE",
    15: "BRINSTAR_DEPTHS",
    16: "YOSHIS_ISLAND",
    17: "GREEN_GREENS",
    18: "FOURSIDE",
    19: "MUSHROOM_KINGDOM_I",
    20: "MUSHROOM_KINGDOM_II",
    22: "VENOM",
    23: "POKE_FLOATS",
    24: "BIG_BLUE",
    25: "ICICLE_MOUNTAIN",
    26: "ICETOP",
    27: "FLAT_ZONE",
    28: "DREAM_LAND_N64",
    29: "YOSHIS_ISLAND_N64",
    30: "KONGO_JUNGLE_N64",
    31: "BATTLEFIELD",
    32: "FINAL_DESTINATION",
}


def _lookup(table: Dict[int, str], key: Any) -> Optional[str]:
    if key is None or isinstance(key, bool):
        return None
    try:
        return table.get(key)
    except TypeError:
        # unhashable ids
        return None


def team_label(color: Optional[int]) -> Optional[str]:
    return _lookup(TEAM_COLORS, color)


def character_label(char_id: Optional[int]) -> Optional[str]:
    return _lookup(CHARACTERS, char_id)


def stage_name(stage_id: Optional[int]) -> Optional[str]:
    return _lookup(STAGES, stage_id)
