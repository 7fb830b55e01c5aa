"""
Round bookkeeping over a group of player records.

Every function returns new `Player` records. A score change always recomputes
that player's points list and total in the same copy, and three-player groups
keep their six-points ladder in step.
"""
from __future__ import annotations

import logging
import uuid
from typing import Dict, List, Optional, Sequence

from models.hole import Hole
from models.player import ROUND_HOLES, Player, Team, empty_card
from models.tee import TeeBox

from .exceptions import PlayerNotFoundError, PlayerSetupError, ScoringError
from .handicap import cap_score, course_handicap, strokes_on
from .match_play import has_balanced_teams, match_status, team_match_status
from .order import holes_played_order
from .results import RoundResults, ScoringFormat, Standing
from .six_points import (
    SIX_POINTS_PLAYERS,
    apply_hole_and_reset_six_points,
    replay_six_points,
    six_points_status,
)
from .stableford import points_card, stableford_points, total_points

logger = logging.getLogger(__name__)

MAX_PLAYERS = 4
MIN_HANDICAP_INDEX = 0
MAX_HANDICAP_INDEX = 54


def scoring_format(players: Sequence[Player]) -> ScoringFormat:
    """The game the group is playing alongside Stableford."""
    if len(players) == 2:
        return ScoringFormat.MATCH_PLAY
    if len(players) == SIX_POINTS_PLAYERS:
        return ScoringFormat.SIX_POINTS
    if has_balanced_teams(players):
        return ScoringFormat.TEAM_MATCH_PLAY
    return ScoringFormat.STABLEFORD


# --- Setup ---

def new_player(
    name: str,
    handicap_index: float,
    tee: TeeBox,
    players: Sequence[Player] = (),
    player_id: Optional[str] = None,
) -> Player:
    """Build a zeroed player for the group, enforcing the setup rules."""
    name = (name or "").strip()
    if not name:
        raise PlayerSetupError("Please enter a player name")
    if len(players) >= MAX_PLAYERS:
        raise PlayerSetupError(f"Maximum {MAX_PLAYERS} players allowed")
    if not MIN_HANDICAP_INDEX <= handicap_index <= MAX_HANDICAP_INDEX:
        raise PlayerSetupError(
            f"Handicap index must be between {MIN_HANDICAP_INDEX} and {MAX_HANDICAP_INDEX}"
        )
    if any(p.name.lower() == name.lower() for p in players):
        raise PlayerSetupError("Player name already exists")

    return Player(
        id=player_id or uuid.uuid4().hex,
        name=name,
        handicap_index=handicap_index,
        course_handicap=course_handicap(handicap_index, tee.slope_rating),
    )


def change_tee(
    players: Sequence[Player], tee: TeeBox, holes: Optional[Sequence[Hole]] = None
) -> List[Player]:
    """
    Recompute course handicaps for a new tee. Entered scores are untouched;
    when the holes are given, points are recomputed against the new strokes.
    """
    updated = []
    for p in players:
        p = p.with_updates(course_handicap=course_handicap(p.handicap_index, tee.slope_rating))
        if holes is not None:
            points = points_card(p, holes)
            p = p.with_updates(points=points, total_points=total_points(points))
        updated.append(p)
    return updated


def assign_team(players: Sequence[Player], player_id: str, team: Optional[Team]) -> List[Player]:
    """Put a player on team A or B, or clear their team with None."""
    _find(players, player_id)
    return [
        p.with_updates(team=team) if p.id == player_id else p
        for p in players
    ]


def _find(players: Sequence[Player], player_id: str) -> Player:
    for p in players:
        if p.id == player_id:
            return p
    raise PlayerNotFoundError(f"No player with id {player_id!r}")


# --- Scoring ---

def record_score(player: Player, hole_index: int, raw_score: int, hole: Hole) -> Player:
    """Store one hole's capped score and recompute the player's points in one copy."""
    strokes = strokes_on(hole, player.course_handicap)
    capped = cap_score(raw_score, hole.par, strokes)

    scores = list(player.scores)
    points = list(player.points)
    scores[hole_index] = capped
    points[hole_index] = stableford_points(capped, hole.par, strokes)
    return player.with_updates(scores=scores, points=points, total_points=total_points(points))


def confirm_hole(
    players: Sequence[Player],
    hole_index: int,
    raw_scores: Dict[str, int],
    holes: Sequence[Hole],
    start_hole_index: int = 0,
) -> List[Player]:
    """
    Record the scores entered for one hole.

    Players without an entry keep their current card. Three-player groups then
    fold the hole into the six-points ladder. A hole that was already scored is
    confirmed again by replaying the ladder from the start hole.
    """
    if not 0 <= hole_index < len(holes):
        raise ScoringError(f"Hole index {hole_index} is outside the course")
    unknown = set(raw_scores) - {p.id for p in players}
    if unknown:
        raise PlayerNotFoundError(f"No player with id {sorted(unknown)[0]!r}")
    if not any(score > 0 for score in raw_scores.values()):
        raise ScoringError("Enter at least one score to confirm the hole")

    hole = holes[hole_index]
    rescored = any(p.has_score(hole_index) or p.six_points[hole_index] for p in players)
    updated = []
    for player in players:
        raw = raw_scores.get(player.id, 0)
        updated.append(record_score(player, hole_index, raw, hole) if raw > 0 else player)

    if len(updated) == SIX_POINTS_PLAYERS:
        if rescored:
            updated = replay_six_points(updated, holes, start_hole_index)
        else:
            updated = apply_hole_and_reset_six_points(updated, hole_index, holes)

    logger.info(
        "Confirmed hole %d for %d player(s)",
        hole.number, sum(1 for s in raw_scores.values() if s > 0),
    )
    return updated


def edit_score(
    players: Sequence[Player],
    player_id: str,
    hole_index: int,
    raw_score: int,
    holes: Sequence[Hole],
    start_hole_index: int = 0,
) -> List[Player]:
    """Correct one entry from the scorecard; 0 clears the hole."""
    if not 0 <= hole_index < len(holes):
        raise ScoringError(f"Hole index {hole_index} is outside the course")
    if raw_score < 0:
        raise ScoringError("Score cannot be negative")
    _find(players, player_id)

    updated = [
        record_score(p, hole_index, raw_score, holes[hole_index]) if p.id == player_id else p
        for p in players
    ]
    if len(updated) == SIX_POINTS_PLAYERS:
        updated = replay_six_points(updated, holes, start_hole_index)

    logger.info("Edited hole %d for player %s", holes[hole_index].number, player_id)
    return updated


def reset_round(players: Sequence[Player]) -> List[Player]:
    """Clear every card and total, keeping identity, handicap and team."""
    return [
        p.with_updates(
            scores=empty_card(),
            points=empty_card(),
            total_points=0,
            six_points=empty_card(),
            total_six_points=0,
        )
        for p in players
    ]


# --- Results ---

def stableford_standings(players: Sequence[Player]) -> List[Standing]:
    return sorted(
        (Standing(player_id=p.id, player_name=p.name, points=p.total_points) for p in players),
        key=lambda s: s.points,
        reverse=True,
    )


def round_results(
    players: Sequence[Player],
    holes: Sequence[Hole],
    holes_played: int = ROUND_HOLES,
    start_hole_index: int = 0,
) -> RoundResults:
    """Stableford ranking plus whichever head-to-head game the group size allows."""
    fmt = scoring_format(players)
    standings = stableford_standings(players)
    winner = None
    winner_name = None
    if standings:
        tied = len(standings) > 1 and standings[1].points == standings[0].points
        winner = None if tied else standings[0]
        winner_name = "Tied" if tied else winner.player_name

    results = RoundResults(
        scoring_format=fmt,
        stableford_standings=standings,
        winner_id=winner.player_id if winner else None,
        winner_name=winner_name,
    )
    if fmt == ScoringFormat.MATCH_PLAY:
        results.match = match_status(players, holes, holes_played, start_hole_index)
    elif fmt == ScoringFormat.TEAM_MATCH_PLAY:
        results.team_match = team_match_status(players, holes, holes_played, start_hole_index)
    elif fmt == ScoringFormat.SIX_POINTS:
        results.six_points = six_points_status(players, holes_played)
    return results


def holes_completed(players: Sequence[Player], start_hole_index: int = 0) -> int:
    """Number of holes, in playing order from the start hole, before the first one nobody has scored."""
    count = 0
    for hole_index in holes_played_order(ROUND_HOLES, start_hole_index):
        if not any(p.has_score(hole_index) for p in players):
            break
        count += 1
    return count
