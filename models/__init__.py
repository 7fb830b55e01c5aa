from .base import BaseGolfModel
from .course import Course
from .hole import Hole
from .player import ROUND_HOLES, Player, Team
from .tee import TeeBox

__all__ = ["BaseGolfModel", "Course", "Hole", "Player", "ROUND_HOLES", "Team", "TeeBox"]
