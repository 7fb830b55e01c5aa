"""
Six points: a three-player game splitting exactly 6 points on every hole.

Points go by net-score placement. Running totals are re-based after every hole
so the player at the bottom of the ladder always stands on 0. That makes the
totals depend on hole order: `apply_hole_and_reset_six_points` must be called
once per confirmed hole in playing order, and any correction to an earlier hole
is handled by `replay_six_points` from the first hole.
"""
from __future__ import annotations

import logging
from typing import Dict, List, Sequence

from models.hole import Hole
from models.player import ROUND_HOLES, Player, empty_card

from .exceptions import InvalidPlacesError, InvalidPlayerCountError
from .match_play import player_net_score
from .order import hole_order
from .results import NetScore, SixPointsHoleResult, SixPointsStatus, Standing

logger = logging.getLogger(__name__)

SIX_POINTS_PLAYERS = 3
SIX_POINTS_PER_HOLE = 6


def _require_three_players(players: Sequence[Player]) -> None:
    if len(players) != SIX_POINTS_PLAYERS:
        raise InvalidPlayerCountError(
            f"Six points needs exactly {SIX_POINTS_PLAYERS} players, got {len(players)}"
        )


# --- Placement table ---

def places_from_net_scores(net_scores: Sequence[int]) -> List[int]:
    """Placements (1 = best) for three net scores. Tied scores share a place."""
    if len(net_scores) != SIX_POINTS_PLAYERS:
        raise InvalidPlacesError(f"Expected 3 net scores, got {len(net_scores)}")
    distinct = sorted(set(net_scores))
    return [distinct.index(score) + 1 for score in net_scores]


def allocate_six_points_from_places(places: Sequence[int]) -> List[int]:
    """
    Map three placements to points, always totalling 6.

    [1,1,1] -> 2/2/2, [1,1,2] -> 3/3/0, [1,2,2] -> 4/1/1, [1,2,3] -> 4/2/0.
    """
    if len(places) != SIX_POINTS_PLAYERS:
        raise InvalidPlacesError(f"places must have exactly 3 entries, got {len(places)}")

    counts = {place: list(places).count(place) for place in (1, 2, 3)}

    if counts[1] == 3:
        return [2, 2, 2]
    if counts[1] == 2:
        return [3 if p == 1 else 0 for p in places]
    if counts[1] == 1:
        if counts[2] == 2:
            return [4 if p == 1 else 1 for p in places]
        by_place = {1: 4, 2: 2, 3: 0}
        return [by_place.get(p, 0) for p in places]

    # Not produced by places_from_net_scores; split evenly.
    return [2, 2, 2]


def normalize_totals(totals: Sequence[int]) -> List[int]:
    """Re-base totals so the lowest becomes 0."""
    if not totals:
        return []
    lowest = min(totals)
    return [t - lowest for t in totals]


# --- Per hole ---

def six_points_for_hole(players: Sequence[Player], hole_index: int, holes: Sequence[Hole]) -> SixPointsHoleResult:
    """Points each of the three players earns on one hole."""
    _require_three_players(players)
    player_points: Dict[str, int] = {p.id: 0 for p in players}
    if hole_index >= len(holes):
        return SixPointsHoleResult(player_points=player_points)

    hole = holes[hole_index]
    net_scores: List[NetScore] = []
    for player in players:
        net = player_net_score(player, hole, hole_index)
        if net is not None:
            net_scores.append(NetScore(
                player_id=player.id,
                player_name=player.name,
                net_score=net,
                gross_score=player.scores[hole_index],
            ))

    if len(net_scores) == SIX_POINTS_PLAYERS:
        places = places_from_net_scores([ns.net_score for ns in net_scores])
        for ns, points in zip(net_scores, allocate_six_points_from_places(places)):
            player_points[ns.player_id] = points
    elif len(net_scores) == 2:
        low, high = sorted(net_scores, key=lambda ns: ns.net_score)
        if low.net_score == high.net_score:
            player_points[low.player_id] = 3
            player_points[high.player_id] = 3
        else:
            player_points[low.player_id] = 4
            player_points[high.player_id] = 2
    elif len(net_scores) == 1:
        player_points[net_scores[0].player_id] = SIX_POINTS_PER_HOLE

    return SixPointsHoleResult(player_points=player_points, net_scores=net_scores)


# --- Round ladder ---

def apply_hole_and_reset_six_points(
    players: Sequence[Player], hole_index: int, holes: Sequence[Hole]
) -> List[Player]:
    """
    Fold one confirmed hole into the running six-points totals.

    Returns new player records with `six_points[hole_index]` set, the hole's
    points added to each total, and all totals re-based so the lowest is 0.
    """
    _require_three_players(players)
    result = six_points_for_hole(players, hole_index, holes)

    raw_totals = []
    cards = []
    for player in players:
        card = list(player.six_points)
        if 0 <= hole_index < ROUND_HOLES:
            card[hole_index] = result.player_points[player.id]
        cards.append(card)
        raw_totals.append(player.total_six_points + result.player_points[player.id])

    totals = normalize_totals(raw_totals)
    logger.debug(
        "Six points hole %d: points=%s before=%s after=%s",
        hole_index + 1, result.player_points, raw_totals, totals,
    )

    return [
        player.with_updates(six_points=card, total_six_points=total)
        for player, card, total in zip(players, cards, totals)
    ]


def replay_six_points(
    players: Sequence[Player], holes: Sequence[Hole], start_hole_index: int = 0
) -> List[Player]:
    """Rebuild six-points cards and totals from scratch over every scored hole, in playing order."""
    _require_three_players(players)
    current = [
        p.with_updates(six_points=empty_card(), total_six_points=0)
        for p in players
    ]
    for hole_index in hole_order(start_hole_index):
        if any(p.has_score(hole_index) for p in current):
            current = apply_hole_and_reset_six_points(current, hole_index, holes)
    return current


def six_points_status(players: Sequence[Player], holes_played: int) -> SixPointsStatus:
    """Ladder standings; not applicable unless three players."""
    if len(players) != SIX_POINTS_PLAYERS:
        return SixPointsStatus(
            leader_name="Not 3-Player Game",
            holes_played=holes_played,
            is_applicable=False,
        )

    standings = sorted(
        (Standing(player_id=p.id, player_name=p.name, points=p.total_six_points) for p in players),
        key=lambda s: s.points,
        reverse=True,
    )
    top = standings[0].points
    tied = [s for s in standings if s.points == top]
    is_three_way_tie = len(tied) == 3
    is_two_way_tie = len(tied) == 2

    after = f"after {holes_played} hole{'' if holes_played == 1 else 's'}"
    if is_three_way_tie:
        summary = f"All players tied with {top} points {after}"
    elif is_two_way_tie:
        summary = f"{' & '.join(s.player_name for s in tied)} tied with {top} points {after}"
    else:
        summary = f"{standings[0].player_name} leading with {top} six points {after}"

    leader = standings[0] if len(tied) == 1 else None
    return SixPointsStatus(
        leader_id=leader.player_id if leader else None,
        leader_name=leader.player_name if leader else "Tied",
        total_six_points=top,
        standings=standings,
        is_three_way_tie=is_three_way_tie,
        is_two_way_tie=is_two_way_tie,
        tied_player_names=[s.player_name for s in tied] if len(tied) > 1 else [],
        holes_played=holes_played,
        summary=summary,
    )
