import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple

from replay_outcome.exceptions import OutcomeError
from replay_outcome.extraction import extract_player_states
from replay_outcome.labels import stage_name
from replay_outcome.models import PlayerState
from replay_outcome.replay_contract import DecodedReplay
from replay_outcome.winners import determine_winners

logger = logging.getLogger(__name__)


@dataclass
class MatchResult:
    """
    Outcome of one replay: who played, on which stage, who won.
    """
    source: str
    stage: Optional[str]
    is_teams: bool
    players: List[PlayerState] = field(default_factory=list)

    @property
    def winners(self) -> List[PlayerState]:
        return [p for p in self.players if p.is_winner]

    @property
    def winner_slots(self) -> List[int]:
        return [p.slot_index for p in self.winners]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source,
            "stage": self.stage,
            "is_teams": self.is_teams,
            "winners": self.winner_slots,
            "players": [p.to_dict() for p in self.players],
        }


def summarize_replay(replay: DecodedReplay, source: str = "") -> MatchResult:
    """
    Extract player states from the last frame and decide the winners.
    Raises InvalidPlayerStateError if no winner can be decided.
    """
    players = extract_player_states(replay)
    determine_winners(players, replay.start.is_teams)

    return MatchResult(
        source=source,
        stage=stage_name(replay.start.stage),
        is_teams=replay.start.is_teams,
        players=players,
    )


def summarize_replays(
    items: Iterable[Tuple[str, DecodedReplay]],
) -> Tuple[List[MatchResult], List[Tuple[str, OutcomeError]]]:
    """
    Summarize many replays. Each replay is independent:
    one that cannot be decided is logged and reported, the rest go on.
    """
    results: List[MatchResult] = []
    failures: List[Tuple[str, OutcomeError]] = []

    for source, replay in items:
        try:
            results.append(summarize_replay(replay, source=source))
        except OutcomeError as e:
            logger.warning("skipping %s: %s", source, e)
            failures.append((source, e))

    return results, failures
