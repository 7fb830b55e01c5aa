from pydantic import Field, field_validator
from typing import List, Literal, Optional

from .base import BaseGolfModel

ROUND_HOLES = 18

Team = Literal["A", "B"]


def empty_card() -> List[int]:
    return [0] * ROUND_HOLES


class Player(BaseGolfModel):
    """A golfer's scoring state for one round.

    `scores` holds capped strokes per hole, with 0 meaning the hole has not been
    played. `points` and `six_points` run parallel to it and the two totals are
    always recomputed together with the list they summarise.
    """

    id: str
    name: str
    handicap_index: float = Field(0.0, ge=-10, le=54)
    course_handicap: int = 0
    scores: List[int] = Field(default_factory=empty_card)
    points: List[int] = Field(default_factory=empty_card)
    total_points: int = 0
    team: Optional[Team] = None
    six_points: List[int] = Field(default_factory=empty_card)
    total_six_points: int = 0

    @field_validator('scores', 'points', 'six_points')
    @classmethod
    def validate_card_length(cls, v):
        if len(v) != ROUND_HOLES:
            raise ValueError(f"Expected {ROUND_HOLES} entries, got {len(v)}")
        return v

    @field_validator('scores')
    @classmethod
    def validate_scores(cls, v):
        for index, score in enumerate(v):
            if score < 0:
                raise ValueError(f"Score on hole {index + 1} cannot be negative")
        return v

    def has_score(self, hole_index: int) -> bool:
        """True once a score has been entered for the hole (0-based index)."""
        return 0 <= hole_index < ROUND_HOLES and self.scores[hole_index] > 0

    @property
    def holes_played(self) -> int:
        return sum(1 for s in self.scores if s > 0)
