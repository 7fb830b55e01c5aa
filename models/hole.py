from pydantic import Field, field_validator
from typing import Dict, Optional

from .base import BaseGolfModel

DEFAULT_YARDAGE_TEE = "white"


class Hole(BaseGolfModel):
    """A single hole from the course table: par, stroke index and yardage per tee."""

    number: int = Field(..., ge=1, le=18)
    name: Optional[str] = None
    par: int = Field(..., ge=3, le=6)
    stroke_index: int = Field(..., ge=1, le=18)  # 1 = hardest, receives strokes first
    yardages: Dict[str, int] = Field(default_factory=dict)  # {"yellow": 184, "white": 203}

    @field_validator('yardages')
    @classmethod
    def validate_yardages(cls, v):
        normalized = {}
        for tee_name, yardage in v.items():
            if yardage < 0:
                raise ValueError(f"Yardage for tee '{tee_name}' cannot be negative")
            if yardage > 700:
                raise ValueError(f"Yardage {yardage} for tee '{tee_name}' seems too high. Please verify.")
            normalized[tee_name.lower()] = yardage
        return normalized

    def get_yardage(self, tee_name: str) -> Optional[int]:
        """Yardage from the named tee, falling back to the white tee when that tee has none."""
        yardage = self.yardages.get(tee_name.lower())
        if yardage is None:
            return self.yardages.get(DEFAULT_YARDAGE_TEE)
        return yardage
