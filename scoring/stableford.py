"""Stableford points per hole and per round."""
from __future__ import annotations

from typing import List, Sequence

from models.hole import Hole
from models.player import ROUND_HOLES, Player

from .handicap import cap_score, net_score, strokes_on
from .results import NineTotals, ScorecardTotals

# Points by net score relative to par; anything better than -3 scores as -3.
POINTS_BY_DIFF = {
    -3: 5,  # albatross or better
    -2: 4,  # eagle
    -1: 3,  # birdie
    0: 2,   # par
    1: 1,   # bogey
}


def stableford_points(raw_score: int, par: int, strokes_received: int) -> int:
    """Points for one hole. The score is capped at net double bogey first."""
    if raw_score == 0:
        return 0
    capped = cap_score(raw_score, par, strokes_received)
    diff = net_score(capped, strokes_received) - par
    if diff <= -3:
        return POINTS_BY_DIFF[-3]
    return POINTS_BY_DIFF.get(diff, 0)


def hole_points(player: Player, hole_index: int, holes: Sequence[Hole]) -> int:
    hole = holes[hole_index]
    return stableford_points(
        player.scores[hole_index], hole.par, strokes_on(hole, player.course_handicap)
    )


def points_card(player: Player, holes: Sequence[Hole]) -> List[int]:
    """Recompute the per-hole points list from the player's scores."""
    return [
        hole_points(player, i, holes) if i < len(holes) else 0
        for i in range(ROUND_HOLES)
    ]


def total_points(points: Sequence[int]) -> int:
    return sum(points)


def _nine_totals(player: Player, holes: Sequence[Hole], indexes: range) -> NineTotals:
    gross = 0
    strokes = 0
    points = 0
    for i in indexes:
        if i >= len(holes):
            break
        score = player.scores[i]
        points += player.points[i]
        if score > 0:
            gross += score
            strokes += strokes_on(holes[i], player.course_handicap)
    return NineTotals(
        gross=gross,
        strokes_received=strokes,
        net=gross - strokes if gross > 0 else 0,
        points=points,
    )


def scorecard_totals(player: Player, holes: Sequence[Hole]) -> ScorecardTotals:
    """Gross, strokes received, net and points for each nine and the round.

    Strokes received only count on holes that have a score.
    """
    front = _nine_totals(player, holes, range(0, 9))
    back = _nine_totals(player, holes, range(9, ROUND_HOLES))
    total_gross = front.gross + back.gross
    total_strokes = front.strokes_received + back.strokes_received
    return ScorecardTotals(
        player_id=player.id,
        player_name=player.name,
        front_nine=front,
        back_nine=back,
        total=NineTotals(
            gross=total_gross,
            strokes_received=total_strokes,
            net=total_gross - total_strokes if total_gross > 0 else 0,
            points=player.total_points,
        ),
    )
