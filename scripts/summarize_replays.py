# scripts/summarize_replays.py
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional, Tuple

from replay_outcome.config import DEFAULT_LOG_LEVEL, LOG_FORMAT
from replay_outcome.exceptions import OutcomeError
from replay_outcome.match_result import summarize_replays
from replay_outcome.replay_contract import DecodedReplay, load_replay
from replay_outcome.storage import save_results

logger = logging.getLogger("summarize_replays")


def _load_all(paths: List[str]) -> Tuple[List[Tuple[str, DecodedReplay]], List[str]]:
    loaded: List[Tuple[str, DecodedReplay]] = []
    failed: List[str] = []
    for raw in paths:
        try:
            loaded.append((raw, load_replay(Path(raw))))
        except (OSError, ValueError, OutcomeError) as e:
            logger.warning("cannot load %s: %s", raw, e)
            failed.append(raw)
    return loaded, failed


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Decide match winners from decoded replay JSON dumps"
    )
    p.add_argument("replays", nargs="+", help="Decoded replay JSON files")
    p.add_argument("--out", type=str, default="", help="Write a JSON report of all matches")
    p.add_argument("--log-level", type=str, default=DEFAULT_LOG_LEVEL)
    p.add_argument("--strict", action="store_true", help="Exit with 1 if any replay fails")
    args = p.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format=LOG_FORMAT)

    loaded, load_failures = _load_all(args.replays)
    results, failures = summarize_replays(loaded)

    for r in results:
        winners = ", ".join(f"{w.display_tag} ({w.identity_code})" for w in r.winners)
        logger.info("%s: %s on %s -> %s", r.source, "teams" if r.is_teams else "singles", r.stage, winners)

    if args.out:
        out_path = Path(args.out)
        save_results(out_path, results)
        logger.info("Saved %d match(es) to %s", len(results), out_path)

    failed = len(load_failures) + len(failures)
    if failed:
        logger.warning("%d replay(s) could not be decided", failed)

    if args.strict and failed:
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
