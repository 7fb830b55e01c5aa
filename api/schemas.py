"""API-specific response models."""

from pydantic import BaseModel
from typing import Dict, List, Optional

from models import Player
from scoring.results import ScoringFormat


class CourseSummaryResponse(BaseModel):
    """Course for card/list views."""
    id: str
    name: Optional[str] = None
    location: Optional[str] = None
    par: Optional[int] = None
    total_holes: int = 0
    tee_count: int = 0
    tees: List[str] = []


class HandicapResponse(BaseModel):
    """Course handicap and the strokes it gives on each hole of a course."""
    course_id: str
    tee: str
    handicap_index: float
    course_handicap: int
    strokes_by_hole: Dict[int, int]
    max_score_by_hole: Dict[int, int]


class PlayersResponse(BaseModel):
    """Updated player records after a scoring action."""
    players: List[Player]
    scoring_format: ScoringFormat
    holes_completed: int = 0
