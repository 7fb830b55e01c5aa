"""Round API endpoints: player setup, hole entry, scorecard edits and results.

The API keeps no round state. Clients send the current player records with
every request and store the records that come back.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field
from typing import Dict, List, Optional

import config
from courses import JsonCourseRepository
from api.dependencies import get_courses, load_course
from api.schemas import PlayersResponse
from models import Player, Team
from scoring import session
from scoring.exceptions import PlayerNotFoundError, ScoringError
from scoring.results import RoundResults, ScorecardTotals
from scoring.stableford import scorecard_totals

logger = logging.getLogger(__name__)

router = APIRouter()


class AddPlayerRequest(BaseModel):
    name: str
    handicap_index: float
    tee: str
    course_id: str = config.DEFAULT_COURSE_ID
    player_id: Optional[str] = None
    players: List[Player] = []


class ConfirmHoleRequest(BaseModel):
    players: List[Player]
    hole_index: int = Field(..., ge=0, le=17)
    scores: Dict[str, int]  # player id -> raw strokes; missing or 0 = not entered
    start_hole_index: int = Field(0, ge=0, le=17)
    course_id: str = config.DEFAULT_COURSE_ID


class EditScoreRequest(BaseModel):
    players: List[Player]
    player_id: str
    hole_index: int = Field(..., ge=0, le=17)
    score: int = Field(..., ge=0)
    start_hole_index: int = Field(0, ge=0, le=17)
    course_id: str = config.DEFAULT_COURSE_ID


class RoundRequest(BaseModel):
    players: List[Player]
    holes_played: int = Field(18, ge=0, le=18)
    start_hole_index: int = Field(0, ge=0, le=17)
    course_id: str = config.DEFAULT_COURSE_ID


def _players_response(players: List[Player], start_hole_index: int = 0) -> PlayersResponse:
    return PlayersResponse(
        players=players,
        scoring_format=session.scoring_format(players),
        holes_completed=session.holes_completed(players, start_hole_index),
    )


@router.post("/players", response_model=PlayersResponse)
async def add_player(req: AddPlayerRequest, courses: JsonCourseRepository = Depends(get_courses)):
    course = load_course(courses, req.course_id)
    tee = course.get_tee(req.tee)
    if not tee:
        raise HTTPException(404, "Tee not found")
    try:
        player = session.new_player(req.name, req.handicap_index, tee, req.players, req.player_id)
    except ScoringError as e:
        raise HTTPException(422, str(e))
    return _players_response([*req.players, player])


@router.post("/confirm", response_model=PlayersResponse)
async def confirm_hole(req: ConfirmHoleRequest, courses: JsonCourseRepository = Depends(get_courses)):
    course = load_course(courses, req.course_id)
    try:
        players = session.confirm_hole(
            req.players, req.hole_index, req.scores, course.holes, req.start_hole_index,
        )
    except PlayerNotFoundError as e:
        raise HTTPException(404, str(e))
    except ScoringError as e:
        raise HTTPException(422, str(e))
    except Exception as e:
        logger.exception("Confirm hole failed")
        raise HTTPException(500, f"Confirm failed: {type(e).__name__}: {str(e)}")
    return _players_response(players, req.start_hole_index)


@router.post("/edit", response_model=PlayersResponse)
async def edit_score(req: EditScoreRequest, courses: JsonCourseRepository = Depends(get_courses)):
    """Correct one score from the full scorecard."""
    course = load_course(courses, req.course_id)
    try:
        players = session.edit_score(
            req.players, req.player_id, req.hole_index, req.score,
            course.holes, req.start_hole_index,
        )
    except PlayerNotFoundError as e:
        raise HTTPException(404, str(e))
    except ScoringError as e:
        raise HTTPException(422, str(e))
    except Exception as e:
        logger.exception("Edit score failed")
        raise HTTPException(500, f"Edit failed: {type(e).__name__}: {str(e)}")
    return _players_response(players, req.start_hole_index)


@router.post("/reset", response_model=PlayersResponse)
async def reset_round(req: RoundRequest):
    return _players_response(session.reset_round(req.players), req.start_hole_index)


@router.post("/scorecard", response_model=List[ScorecardTotals])
async def scorecard(req: RoundRequest, courses: JsonCourseRepository = Depends(get_courses)):
    course = load_course(courses, req.course_id)
    return [scorecard_totals(p, course.holes) for p in req.players]


@router.post("/results", response_model=RoundResults)
async def round_results(req: RoundRequest, courses: JsonCourseRepository = Depends(get_courses)):
    course = load_course(courses, req.course_id)
    return session.round_results(req.players, course.holes, req.holes_played, req.start_hole_index)


class ChangeTeeRequest(BaseModel):
    players: List[Player]
    tee: str
    start_hole_index: int = Field(0, ge=0, le=17)
    course_id: str = config.DEFAULT_COURSE_ID


class AssignTeamRequest(BaseModel):
    players: List[Player]
    player_id: str
    team: Optional[Team] = None
    start_hole_index: int = Field(0, ge=0, le=17)


@router.post("/tee", response_model=PlayersResponse)
async def change_tee(req: ChangeTeeRequest, courses: JsonCourseRepository = Depends(get_courses)):
    """Switch tees: course handicaps and points are recomputed."""
    course = load_course(courses, req.course_id)
    tee = course.get_tee(req.tee)
    if not tee:
        raise HTTPException(404, "Tee not found")
    return _players_response(session.change_tee(req.players, tee, course.holes), req.start_hole_index)


@router.post("/teams", response_model=PlayersResponse)
async def assign_team(req: AssignTeamRequest):
    try:
        players = session.assign_team(req.players, req.player_id, req.team)
    except PlayerNotFoundError as e:
        raise HTTPException(404, str(e))
    return _players_response(players, req.start_hole_index)
