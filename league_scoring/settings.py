import logging
import os
from dataclasses import dataclass
from typing import Optional

from league_scoring.scoring import ScoringOptions, StrokeMode

logger = logging.getLogger(__name__)

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    stroke_mode: StrokeMode = StrokeMode.FULL
    par_three_strokes: bool = True
    team_point: bool = False
    log_level: str = "INFO"

    def scoring_options(self) -> ScoringOptions:
        return ScoringOptions(
            stroke_mode=self.stroke_mode,
            par_three_strokes=self.par_three_strokes,
            team_point=self.team_point,
        )


def _normalize_stroke_mode(value: Optional[str]) -> StrokeMode:
    if not value:
        return StrokeMode.FULL
    normalized = value.strip().lower()
    try:
        return StrokeMode(normalized)
    except ValueError:
        logger.warning("Ignoring LEAGUE_STROKE_MODE=%s (expected full or difference)", value)
        return StrokeMode.FULL


def _env_flag(key: str, default: bool) -> bool:
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    normalized = value.strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    logger.warning("Ignoring %s=%s (not a boolean)", key, value)
    return default


def load_settings() -> Settings:
    stroke_mode = _normalize_stroke_mode(os.getenv("LEAGUE_STROKE_MODE"))
    par_three_strokes = _env_flag("LEAGUE_PAR_THREE_STROKES", True)
    team_point = _env_flag("LEAGUE_TEAM_POINT", False)
    log_level = os.getenv("LEAGUE_LOG_LEVEL", "INFO").upper()
    return Settings(
        stroke_mode=stroke_mode,
        par_three_strokes=par_three_strokes,
        team_point=team_point,
        log_level=log_level,
    )
