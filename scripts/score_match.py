#!/usr/bin/env python3
"""Score a team match described in a JSON file and print the scorecard."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from pydantic import ValidationError

from league_scoring.completion import ScoringState, finalize
from league_scoring.errors import ScoringError
from league_scoring.scorecard import build_scorecard
from league_scoring.schemas import MatchPayload
from league_scoring.scoring import ScoringOptions, StrokeMode, compute_match
from league_scoring.settings import load_settings


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Compute net match-play points for a two-player team match."
    )
    parser.add_argument("match_file", type=Path, help="JSON file with team_a, team_b and holes.")
    parser.add_argument(
        "--finalize",
        action="store_true",
        help="Fail unless every player has a score on every hole.",
    )
    parser.add_argument(
        "--stroke-mode",
        choices=[mode.value for mode in StrokeMode],
        help="Give every player their full strokes, or only the handicap difference.",
    )
    parser.add_argument("--team-point", action="store_true", help="Award the extra team net point.")
    parser.add_argument(
        "--no-par-three-strokes",
        action="store_true",
        help="Do not give handicap strokes on par 3 holes.",
    )
    return parser.parse_args(argv)


def _options(args: argparse.Namespace, payload: MatchPayload) -> ScoringOptions:
    options = payload.scoring_options(load_settings().scoring_options())
    return ScoringOptions(
        stroke_mode=StrokeMode(args.stroke_mode) if args.stroke_mode else options.stroke_mode,
        par_three_strokes=options.par_three_strokes and not args.no_par_three_strokes,
        team_point=options.team_point or args.team_point,
    )


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    try:
        with args.match_file.open("r", encoding="utf-8") as handle:
            payload = MatchPayload.model_validate(json.load(handle))
    except (OSError, json.JSONDecodeError) as exc:
        print(f"Could not read {args.match_file}: {exc}", file=sys.stderr)
        return 1
    except ValidationError as exc:
        print(f"Invalid match file {args.match_file}:\n{exc}", file=sys.stderr)
        return 1

    team_a, team_b = payload.teams()
    result = compute_match(team_a, team_b, payload.course(), _options(args, payload))
    state = ScoringState.DRAFT
    if args.finalize:
        try:
            state = finalize(result)
        except ScoringError as exc:
            print(str(exc), file=sys.stderr)
            for player_id, hole_id in result.missing_scores():
                print(f"  missing: player {player_id} hole {hole_id}", file=sys.stderr)
            return 1

    print(json.dumps(build_scorecard(result, state), indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
