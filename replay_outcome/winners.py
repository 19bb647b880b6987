import logging
from dataclasses import dataclass
from typing import Dict, List, Sequence

import numpy as np

from replay_outcome.exceptions import AmbiguousTeamsError, InvalidPlayerStateError
from replay_outcome.models import PlayerState

logger = logging.getLogger(__name__)


@dataclass
class TeamTotals:
    team: str
    stocks: int = 0
    damage: np.float32 = np.float32(0.0)


# =========================================================
# PUBLIC API
# =========================================================

def determine_winners(players: Sequence[PlayerState], is_teams: bool) -> List[PlayerState]:
    """
    Mark the winners of a finished match.

    Steps:
    1. Drop players with 0 stocks.
    2. One player left, or only members of one team left:
       that player and all of their teammates win.
    3. Otherwise compare stocks, then damage (lower wins),
       per team in a teams match, per player otherwise.

    Sets `is_winner` on the winning elements of `players` and returns them.
    Nothing is mutated when InvalidPlayerStateError is raised.
    """
    living = [p for p in players if p.is_alive()]

    if not living:
        raise InvalidPlayerStateError("invalid player state: no player has stocks left")

    if len(living) == 1 or (len(living) > 2 and on_same_team(living)):
        leader = living[0]
        logger.debug("port %d decided the match (team=%s)", leader.slot_index, leader.team)
        winners = [p for p in players if p is leader or leader.is_teammate_of(p)]
    elif is_teams:
        team = doubles_tiebreak(living)
        logger.debug("team %s won on tiebreak", team)
        winners = [p for p in players if p.team == team]
    else:
        winner = singles_tiebreak(living)
        logger.debug("port %d won on tiebreak", winner.slot_index)
        winners = [winner]

    for player in winners:
        player.is_winner = True

    return winners


# =========================================================
# TEAM CHECKS
# =========================================================

def on_same_team(living: Sequence[PlayerState]) -> bool:
    """True if every living player shares one team. False if any has no team."""
    if not living:
        return False
    first = living[0]
    return all(first.is_teammate_of(p) for p in living)


# =========================================================
# TIEBREAKS
# =========================================================

def team_totals(living: Sequence[PlayerState]) -> List[TeamTotals]:
    """Summed stocks and damage per team, in order of first appearance."""
    totals: Dict[str, TeamTotals] = {}

    for p in living:
        if p.team is None:
            raise InvalidPlayerStateError(
                f"invalid player state: port {p.slot_index} is alive in a teams match without a team"
            )
        entry = totals.setdefault(p.team, TeamTotals(team=p.team))
        entry.stocks += p.stocks_remaining
        entry.damage = np.float32(entry.damage + p.damage_accumulated)

    return list(totals.values())


def doubles_tiebreak(living: Sequence[PlayerState]) -> str:
    """
    Winning team: most stocks, then least damage.
    A full tie goes to the team seen first.
    """
    totals = team_totals(living)

    if len(totals) > 2:
        teams = ", ".join(t.team for t in totals)
        raise AmbiguousTeamsError(f"cannot break tie between more than two teams: {teams}")

    # sorted() is stable, so equal teams keep port order
    ranked = sorted(totals, key=lambda t: (-t.stocks, t.damage))
    return ranked[0].team


def singles_tiebreak(living: Sequence[PlayerState]) -> PlayerState:
    """
    Winning player: most stocks, then least damage.
    A full tie goes to the lowest living port.
    """
    # min() keeps the first of equal keys
    return min(living, key=lambda p: (-p.stocks_remaining, p.damage_accumulated))
