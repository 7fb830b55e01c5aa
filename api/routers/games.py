"""Head-to-head game endpoints: match play, four-ball and six points."""

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field
from typing import List

import config
from courses import JsonCourseRepository
from api.dependencies import get_courses, load_course
from models import Player
from scoring import match_play, six_points
from scoring.exceptions import ScoringError
from scoring.results import HoleResult, MatchStatus, SixPointsHoleResult, SixPointsStatus

router = APIRouter()


class HoleRequest(BaseModel):
    players: List[Player]
    hole_index: int = Field(..., ge=0, le=17)
    course_id: str = config.DEFAULT_COURSE_ID


class StatusRequest(BaseModel):
    players: List[Player]
    holes_played: int = Field(..., ge=0, le=18)
    start_hole_index: int = Field(0, ge=0, le=17)
    course_id: str = config.DEFAULT_COURSE_ID


def _run(fn, *args):
    """Call an engine helper, turning bad group shapes into a 422."""
    try:
        return fn(*args)
    except ScoringError as e:
        raise HTTPException(422, str(e))


@router.post("/match/hole", response_model=HoleResult)
async def match_hole(req: HoleRequest, courses: JsonCourseRepository = Depends(get_courses)):
    course = load_course(courses, req.course_id)
    return _run(match_play.hole_winner, req.players, req.hole_index, course.holes)


@router.post("/match/status", response_model=MatchStatus)
async def match_status(req: StatusRequest, courses: JsonCourseRepository = Depends(get_courses)):
    course = load_course(courses, req.course_id)
    return match_play.match_status(req.players, course.holes, req.holes_played, req.start_hole_index)


@router.post("/team-match/hole", response_model=HoleResult)
async def team_match_hole(req: HoleRequest, courses: JsonCourseRepository = Depends(get_courses)):
    course = load_course(courses, req.course_id)
    return _run(match_play.team_hole_winner, req.players, req.hole_index, course.holes)


@router.post("/team-match/status", response_model=MatchStatus)
async def team_match_status(req: StatusRequest, courses: JsonCourseRepository = Depends(get_courses)):
    course = load_course(courses, req.course_id)
    return match_play.team_match_status(req.players, course.holes, req.holes_played, req.start_hole_index)


@router.post("/six-points/hole", response_model=SixPointsHoleResult)
async def six_points_hole(req: HoleRequest, courses: JsonCourseRepository = Depends(get_courses)):
    course = load_course(courses, req.course_id)
    return _run(six_points.six_points_for_hole, req.players, req.hole_index, course.holes)


@router.post("/six-points/status", response_model=SixPointsStatus)
async def six_points_status(req: StatusRequest):
    return six_points.six_points_status(req.players, req.holes_played)
