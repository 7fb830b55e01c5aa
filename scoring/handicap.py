"""Handicap stroke allocation and the net double bogey cap."""
from __future__ import annotations

import math

from models.hole import Hole

STANDARD_SLOPE = 113
NET_DOUBLE_BOGEY_ALLOWANCE = 2
HOLES_PER_ALLOCATION = 18


def course_handicap(handicap_index: float, slope_rating: float) -> int:
    """Scale a handicap index by the tee's slope, rounding halves up."""
    return math.floor(handicap_index * slope_rating / STANDARD_SLOPE + 0.5)


def strokes_for_hole(course_handicap: int, hole_stroke_index: int) -> int:
    """
    Handicap strokes a player receives on a hole.

    One stroke once the course handicap reaches the hole's stroke index, plus
    one more for every further 18. Negative course handicaps receive nothing.
    """
    if course_handicap >= hole_stroke_index:
        return 1 + (course_handicap - hole_stroke_index) // HOLES_PER_ALLOCATION
    return 0


def strokes_on(hole: Hole, course_handicap_value: int) -> int:
    return strokes_for_hole(course_handicap_value, hole.stroke_index)


def max_score(par: int, strokes_received: int) -> int:
    """Net double bogey: the most strokes that count on a hole."""
    return par + strokes_received + NET_DOUBLE_BOGEY_ALLOWANCE


def cap_score(raw_score: int, par: int, strokes_received: int) -> int:
    """Cap an entered score at net double bogey. 0 (unplayed) passes through."""
    if raw_score == 0:
        return 0
    return min(raw_score, max_score(par, strokes_received))


def net_score(gross_score: int, strokes_received: int) -> int:
    return gross_score - strokes_received
