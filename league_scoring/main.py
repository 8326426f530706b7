import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from league_scoring.completion import finalize
from league_scoring.errors import IncompleteMatchError, MatchAlreadyFinalizedError
from league_scoring.scorecard import build_scorecard
from league_scoring.schemas import FinalizePayload, MatchPayload
from league_scoring.scoring import compute_match
from league_scoring.settings import load_settings

logger = logging.getLogger(__name__)

app = FastAPI(title="League Scoring")
settings = load_settings()


async def _read_payload(request: Request, model: type[MatchPayload]):
    try:
        body = await request.json()
    except ValueError:
        return None, JSONResponse({"error": "Request body must be JSON"}, status_code=400)
    try:
        return model.model_validate(body), None
    except ValidationError as exc:
        details = exc.errors(include_url=False, include_context=False, include_input=False)
        return None, JSONResponse({"error": "Invalid payload", "details": details}, status_code=422)


def _score(payload: MatchPayload):
    team_a, team_b = payload.teams()
    options = payload.scoring_options(settings.scoring_options())
    return compute_match(team_a, team_b, payload.course(), options)


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.post("/api/matches/score")
async def api_score(request: Request):
    payload, error = await _read_payload(request, MatchPayload)
    if error:
        return error
    result = _score(payload)
    logger.info(
        "Scored match: %s-%s (%s)",
        result.team_a_points,
        result.team_b_points,
        "complete" if result.is_complete else f"{len(result.missing_scores())} scores missing",
    )
    return build_scorecard(result)


@app.post("/api/matches/finalize")
async def api_finalize(request: Request):
    payload, error = await _read_payload(request, FinalizePayload)
    if error:
        return error
    result = _score(payload)
    try:
        state = finalize(result, payload.state)
    except MatchAlreadyFinalizedError as exc:
        return JSONResponse({"error": str(exc)}, status_code=409)
    except IncompleteMatchError as exc:
        missing = [{"player_id": player_id, "hole_id": hole_id} for player_id, hole_id in exc.missing]
        return JSONResponse({"error": str(exc), "missing": missing}, status_code=409)
    logger.info("Finalized match: %s-%s", result.team_a_points, result.team_b_points)
    return build_scorecard(result, state)
