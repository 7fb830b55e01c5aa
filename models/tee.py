from pydantic import Field
from typing import Optional

from .base import BaseGolfModel


class TeeBox(BaseGolfModel):
    """A tee box option with the ratings used to derive course handicaps."""

    name: str
    color: Optional[str] = None  # "yellow", "white", "blue", "red"
    course_rating: Optional[float] = Field(None, ge=55.0, le=85.0)
    slope_rating: float = Field(113, ge=55, le=155)
