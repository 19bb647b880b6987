import json
from pathlib import Path
from typing import Any, Dict, List

from replay_outcome.config import SCHEMA_VERSION
from replay_outcome.match_result import MatchResult


def save_results(path: Path, results: List[MatchResult]):
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump({
            "schema_version": SCHEMA_VERSION,
            "matches": [r.to_dict() for r in results],
        }, f, ensure_ascii=False, indent=4)


def load_results(path: Path) -> List[Dict[str, Any]]:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError("Results JSON must be an object")

    if data.get("schema_version") != SCHEMA_VERSION:
        raise ValueError(f"Unsupported schema_version: {data.get('schema_version')}")

    matches = data.get("matches")
    if not isinstance(matches, list):
        raise ValueError("Results JSON must contain a 'matches' list")

    return matches
