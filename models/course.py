from pydantic import Field, model_validator
from typing import List, Optional

from .base import BaseGolfModel
from .hole import Hole
from .tee import TeeBox


class Course(BaseGolfModel):
    """Golf course with its holes and tee options. Read-only input to scoring."""

    id: Optional[str] = None
    name: Optional[str] = None
    location: Optional[str] = None
    par: Optional[int] = Field(None, ge=54, le=80)
    tee_boxes: List[TeeBox] = Field(default_factory=list)
    holes: List[Hole] = Field(default_factory=list)

    @model_validator(mode='after')
    def validate_stroke_indexes(self):
        """Each stroke index may only be used once across the holes."""
        seen = set()
        for hole in self.holes:
            if hole.stroke_index in seen:
                raise ValueError(
                    f"Stroke index {hole.stroke_index} used more than once (hole {hole.number})"
                )
            seen.add(hole.stroke_index)
        return self

    def get_tee(self, name: str) -> Optional[TeeBox]:
        """Get a tee box by its name."""
        for tee in self.tee_boxes:
            if tee.name.lower() == name.lower():
                return tee
        return None

    def get_hole(self, number: int) -> Optional[Hole]:
        """Get a hole by its number (1-18)."""
        if 1 <= number <= len(self.holes):
            return self.holes[number - 1]
        return None

    @property
    def calculated_par(self) -> Optional[int]:
        if not self.holes:
            return None
        return sum(h.par for h in self.holes)

    @property
    def front_nine_par(self) -> Optional[int]:
        """Calculate par for holes 1-9."""
        front = [h for h in self.holes if 1 <= h.number <= 9]
        if not front:
            return None
        return sum(h.par for h in front)

    @property
    def back_nine_par(self) -> Optional[int]:
        """Calculate par for holes 10-18."""
        back = [h for h in self.holes if 10 <= h.number <= 18]
        if not back:
            return None
        return sum(h.par for h in back)

    def get_par(self) -> Optional[int]:
        """Declared par when set, otherwise the sum of the hole pars."""
        if self.par is not None:
            return self.par
        return self.calculated_par
