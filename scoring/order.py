"""Playing order for rounds that start away from the first tee."""
from typing import List

from models.player import ROUND_HOLES


def hole_order(start_hole_index: int = 0) -> List[int]:
    """The 18 hole indexes in the order they are played."""
    return [(start_hole_index + offset) % ROUND_HOLES for offset in range(ROUND_HOLES)]


def last_hole_index(start_hole_index: int = 0) -> int:
    return (start_hole_index + ROUND_HOLES - 1) % ROUND_HOLES


def holes_played_order(holes_played: int, start_hole_index: int = 0) -> List[int]:
    """Indexes of the first `holes_played` holes of the round, in playing order."""
    played = max(0, min(holes_played, ROUND_HOLES))
    return hole_order(start_hole_index)[:played]
