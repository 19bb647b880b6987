from dataclasses import dataclass
from typing import Optional, Dict, Any

import numpy as np


@dataclass(frozen=True)
class NetplayNames:
    code: str
    tag: str


@dataclass
class PlayerState:
    """
    State of one competitor slot on the last frame of a replay.
    """
    identity_code: str
    display_tag: str
    slot_index: int
    stocks_remaining: int
    damage_accumulated: np.float32
    team: Optional[str] = None
    character: Optional[str] = None
    is_winner: bool = False

    def __post_init__(self):
        self.damage_accumulated = np.float32(self.damage_accumulated)

    def is_alive(self) -> bool:
        return self.stocks_remaining > 0

    def is_teammate_of(self, other: "PlayerState") -> bool:
        # players without a team are never teammates
        if self.team is None or other.team is None:
            return False
        return self.team == other.team

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.identity_code,
            "tag": self.display_tag,
            "port": self.slot_index,
            "stocks": self.stocks_remaining,
            "damage": float(self.damage_accumulated),
            "team": self.team,
            "character": self.character,
            "winner": self.is_winner,
        }
