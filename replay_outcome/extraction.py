import logging
from typing import Any, List, Mapping, Optional

from replay_outcome.config import (
    MAX_SLOTS,
    METADATA_CODE_KEY,
    METADATA_NAMES_KEY,
    METADATA_PLAYERS_KEY,
    METADATA_TAG_KEY,
)
from replay_outcome.labels import character_label, team_label
from replay_outcome.models import NetplayNames, PlayerState
from replay_outcome.replay_contract import DecodedReplay, PostFrame

logger = logging.getLogger(__name__)


def last_post_frame(replay: DecodedReplay, slot: int) -> Optional[PostFrame]:
    """Game state of `slot` on the last frame, None if the port never played."""
    port = replay.port(slot)
    if port is None:
        return None
    return port.last()


def lookup_netplay_names(metadata: Any, slot: int) -> Optional[NetplayNames]:
    """
    Read metadata players -> "<slot>" -> names -> {code, netplay}.

    Returns None as soon as a step is missing or is not the expected type.
    """
    node = metadata
    for key in (METADATA_PLAYERS_KEY, str(slot), METADATA_NAMES_KEY):
        if not isinstance(node, Mapping):
            return None
        node = node.get(key)

    if not isinstance(node, Mapping):
        return None

    code = node.get(METADATA_CODE_KEY)
    tag = node.get(METADATA_TAG_KEY)
    if not isinstance(code, str) or not isinstance(tag, str):
        return None

    return NetplayNames(code=code, tag=tag)


def team_for_slot(replay: DecodedReplay, slot: int) -> Optional[str]:
    start = replay.start.player(slot)
    if start is None:
        return None
    return team_label(start.team_color)


def character_for_slot(replay: DecodedReplay, slot: int) -> Optional[str]:
    start = replay.start.player(slot)
    if start is None:
        return None
    return character_label(start.character)


def extract_player_states(replay: DecodedReplay) -> List[PlayerState]:
    """
    State of every human competitor on the last frame, in port order.

    Ports without frames or without netplay code/tag are left out.
    """
    players: List[PlayerState] = []

    for slot in range(MAX_SLOTS):
        post = last_post_frame(replay, slot)
        if post is None:
            logger.debug("port %d skipped: no frames", slot)
            continue

        names = lookup_netplay_names(replay.metadata, slot)
        if names is None:
            logger.debug("port %d skipped: no netplay code/tag in metadata", slot)
            continue

        players.append(
            PlayerState(
                identity_code=names.code,
                display_tag=names.tag,
                slot_index=slot,
                stocks_remaining=post.stocks,
                damage_accumulated=post.damage,
                team=team_for_slot(replay, slot),
                character=character_for_slot(replay, slot),
            )
        )

    return players
