# replay_outcome/replay_contract.py
from __future__ import annotations

import json
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from replay_outcome.config import MAX_SLOTS, MAX_STOCKS
from replay_outcome.exceptions import ReplayFormatError


def _to_int(value: Any, name: str) -> int:
    # bool is an int subclass; floats would truncate silently
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    return value


def _to_optional_int(value: Any, name: str) -> Optional[int]:
    if value is None:
        return None
    return _to_int(value, name)


def _to_bool(value: Any, name: str) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"{name} must be true or false, got {value!r}")
    return value


@dataclass
class PostFrame:
    """
    Post-frame state of one port: what the game reports after a frame is processed.
    """
    stocks: int
    damage: float

    def to_dict(self) -> Dict[str, Any]:
        return {"stocks": self.stocks, "damage": self.damage}

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "PostFrame":
        return PostFrame(stocks=_to_int(d["stocks"], "stocks"), damage=float(d["damage"]))


@dataclass
class PortFrames:
    post: List[PostFrame] = field(default_factory=list)

    def last(self) -> Optional[PostFrame]:
        if not self.post:
            return None
        return self.post[-1]

    def to_dict(self) -> Dict[str, Any]:
        return {"post": [f.to_dict() for f in self.post]}

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "PortFrames":
        return PortFrames(post=[PostFrame.from_dict(x) for x in (d.get("post", []) or [])])


@dataclass
class StartPlayer:
    character: Optional[int] = None
    team_color: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"character": self.character, "team_color": self.team_color}

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "StartPlayer":
        return StartPlayer(
            character=_to_optional_int(d.get("character"), "character"),
            team_color=_to_optional_int(d.get("team_color"), "team_color"),
        )


@dataclass
class GameStart:
    is_teams: bool = False
    stage: Optional[int] = None
    players: List[Optional[StartPlayer]] = field(default_factory=list)

    def player(self, slot: int) -> Optional[StartPlayer]:
        if 0 <= slot < len(self.players):
            return self.players[slot]
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_teams": self.is_teams,
            "stage": self.stage,
            "players": [p.to_dict() if p is not None else None for p in self.players],
        }

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "GameStart":
        players = [
            StartPlayer.from_dict(x) if x is not None else None
            for x in (d.get("players", []) or [])
        ]
        return GameStart(
            is_teams=_to_bool(d.get("is_teams", False), "is_teams"),
            stage=_to_optional_int(d.get("stage"), "stage"),
            players=players,
        )


@dataclass
class DecodedReplay:
    """
    Output of a replay decoder, reduced to what outcome detection reads.

    - start: game start block (teams flag, stage, per-port start records)
    - ports: per-port frame history, None for an empty port
    - metadata: free-form metadata tree (netplay names live here)
    """
    start: GameStart = field(default_factory=GameStart)
    ports: List[Optional[PortFrames]] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)

    def port(self, slot: int) -> Optional[PortFrames]:
        if 0 <= slot < len(self.ports):
            return self.ports[slot]
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "start": self.start.to_dict(),
            "ports": [p.to_dict() if p is not None else None for p in self.ports],
            "metadata": self.metadata,
        }

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "DecodedReplay":
        ports = [
            PortFrames.from_dict(x) if x is not None else None
            for x in (d.get("ports", []) or [])
        ]
        metadata = d.get("metadata", {})
        return DecodedReplay(
            start=GameStart.from_dict(d.get("start", {}) or {}),
            ports=ports,
            metadata=metadata if metadata is not None else {},
        )


# =============================================================================
# Validation
# =============================================================================

def validate_replay(replay: DecodedReplay) -> List[str]:
    """
    Return list of problems (empty == valid).
    """
    problems: List[str] = []

    if len(replay.ports) > MAX_SLOTS:
        problems.append(f"too many ports: {len(replay.ports)} > {MAX_SLOTS}")

    if len(replay.start.players) > MAX_SLOTS:
        problems.append(f"too many start players: {len(replay.start.players)} > {MAX_SLOTS}")

    if not isinstance(replay.metadata, dict):
        problems.append("metadata must be a mapping")

    for slot, port in enumerate(replay.ports):
        if port is None:
            continue
        for i, frame in enumerate(port.post):
            if frame.stocks < 0 or frame.stocks > MAX_STOCKS:
                problems.append(f"ports[{slot}].post[{i}]: stocks out of range: {frame.stocks}")
            if not math.isfinite(frame.damage):
                problems.append(f"ports[{slot}].post[{i}]: damage not finite")
            elif frame.damage < 0:
                problems.append(f"ports[{slot}].post[{i}]: damage < 0")

    return problems


# =============================================================================
# IO
# =============================================================================

def load_replay(path: Path) -> DecodedReplay:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ReplayFormatError(f"{path}: decoded replay JSON must be an object")
    try:
        replay = DecodedReplay.from_dict(data)
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise ReplayFormatError(f"{path}: malformed decoded replay: {e}") from e
    problems = validate_replay(replay)
    if problems:
        msg = f"{path}: decoded replay validation failed:\n" + "\n".join(f"- {p}" for p in problems[:50])
        raise ReplayFormatError(msg)
    return replay


def save_replay(path: Path, replay: DecodedReplay) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(replay.to_dict(), f, ensure_ascii=False, indent=2)
