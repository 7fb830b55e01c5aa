"""
Match play: individual (two players) and four-ball better-ball (two teams of two).

Hole winners are decided on net scores after the net double bogey cap. A hole
only produces a result when both sides have a score to compare.
"""
from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

from models.hole import Hole
from models.player import ROUND_HOLES, Player

from .exceptions import InvalidPlayerCountError, InvalidTeamsError
from .handicap import cap_score, net_score, strokes_on
from .order import holes_played_order
from .results import HoleResult, MatchStatus


def player_net_score(player: Player, hole: Hole, hole_index: int) -> Optional[int]:
    """Capped net score for the hole, or None while the hole is unplayed."""
    gross = player.scores[hole_index]
    if gross <= 0:
        return None
    strokes = strokes_on(hole, player.course_handicap)
    return net_score(cap_score(gross, hole.par, strokes), strokes)


def format_status(margin: int, holes_remaining: int) -> Tuple[str, bool]:
    """Conventional status text and whether the match is already decided."""
    can_end = margin > holes_remaining and holes_remaining > 0
    if margin == 0:
        return "All Square", False
    if can_end:
        return f"{margin} & {holes_remaining}", True
    if margin == 1:
        return "1 Up", False
    return f"{margin} Up", False


# --- Individual match play ---

def hole_winner(players: Sequence[Player], hole_index: int, holes: Sequence[Hole]) -> HoleResult:
    """Result of one hole between exactly two players."""
    if len(players) != 2:
        raise InvalidPlayerCountError(
            f"Match play needs exactly 2 players, got {len(players)}"
        )
    if hole_index >= len(holes):
        return HoleResult()

    hole = holes[hole_index]
    net_scores: Dict[str, int] = {}
    for player in players:
        net = player_net_score(player, hole, hole_index)
        if net is not None:
            net_scores[player.id] = net

    # Nothing to compare until both players have scored.
    if len(net_scores) < 2:
        return HoleResult(net_scores=net_scores)

    first, second = players
    diff = net_scores[second.id] - net_scores[first.id]
    if diff == 0:
        return HoleResult(net_scores=net_scores)
    winner = first if diff > 0 else second
    return HoleResult(
        winner_ids=[winner.id],
        is_halved=False,
        margin=abs(diff),
        net_scores=net_scores,
    )


def match_status(
    players: Sequence[Player],
    holes: Sequence[Hole],
    holes_played: int,
    start_hole_index: int = 0,
) -> MatchStatus:
    """Running status after `holes_played` holes; not applicable unless two players."""
    holes_remaining = max(0, ROUND_HOLES - holes_played)
    if len(players) != 2:
        return MatchStatus(
            leader_name="Multiple Players",
            status="Stableford Only",
            holes_remaining=holes_remaining,
            is_applicable=False,
        )

    wins = {player.id: 0 for player in players}
    for hole_index in holes_played_order(holes_played, start_hole_index):
        result = hole_winner(players, hole_index, holes)
        if not result.is_halved and len(result.winner_ids) == 1:
            wins[result.winner_ids[0]] += 1

    first, second = players
    margin = abs(wins[first.id] - wins[second.id])
    leader: Optional[Player] = None
    if wins[first.id] > wins[second.id]:
        leader = first
    elif wins[second.id] > wins[first.id]:
        leader = second

    status, can_end = format_status(margin, holes_remaining)
    return MatchStatus(
        leader_id=leader.id if leader else None,
        leader_name=leader.name if leader else "All Square",
        margin=margin,
        is_all_square=margin == 0,
        status=status,
        can_end=can_end,
        holes_remaining=holes_remaining,
    )


# --- Four-ball team match play ---

def split_teams(players: Sequence[Player]) -> Tuple[List[Player], List[Player]]:
    """Teams A and B, raising unless four players are split two and two."""
    if len(players) != 4:
        raise InvalidPlayerCountError(
            f"Team match play needs exactly 4 players, got {len(players)}"
        )
    team_a = [p for p in players if p.team == "A"]
    team_b = [p for p in players if p.team == "B"]
    if len(team_a) != 2 or len(team_b) != 2:
        raise InvalidTeamsError(
            f"Teams must be 2 and 2, got A={len(team_a)} B={len(team_b)}"
        )
    return team_a, team_b


def has_balanced_teams(players: Sequence[Player]) -> bool:
    if len(players) != 4:
        return False
    return sum(1 for p in players if p.team == "A") == 2 and sum(1 for p in players if p.team == "B") == 2


def _team_best(team: Sequence[Player], hole: Hole, hole_index: int) -> Optional[Tuple[str, int]]:
    best: Optional[Tuple[str, int]] = None
    for player in team:
        net = player_net_score(player, hole, hole_index)
        if net is None:
            continue
        if best is None or net < best[1]:
            best = (player.id, net)
    return best


def team_hole_winner(players: Sequence[Player], hole_index: int, holes: Sequence[Hole]) -> HoleResult:
    """Better-ball result of one hole. Each team counts its lowest net score."""
    team_a, team_b = split_teams(players)
    if hole_index >= len(holes):
        return HoleResult()

    hole = holes[hole_index]
    net_scores: Dict[str, int] = {}
    for player in players:
        net = player_net_score(player, hole, hole_index)
        if net is not None:
            net_scores[player.id] = net

    best_a = _team_best(team_a, hole, hole_index)
    best_b = _team_best(team_b, hole, hole_index)

    if best_a is None and best_b is None:
        return HoleResult(net_scores=net_scores)
    # A team with nobody scoring loses the hole by one.
    if best_b is None:
        return HoleResult(winner_ids=[best_a[0]], is_halved=False, margin=1,
                          team_winner="A", net_scores=net_scores)
    if best_a is None:
        return HoleResult(winner_ids=[best_b[0]], is_halved=False, margin=1,
                          team_winner="B", net_scores=net_scores)

    if best_a[1] < best_b[1]:
        return HoleResult(winner_ids=[best_a[0]], is_halved=False, margin=best_b[1] - best_a[1],
                          team_winner="A", net_scores=net_scores)
    if best_b[1] < best_a[1]:
        return HoleResult(winner_ids=[best_b[0]], is_halved=False, margin=best_a[1] - best_b[1],
                          team_winner="B", net_scores=net_scores)
    return HoleResult(net_scores=net_scores)


def team_match_status(
    players: Sequence[Player],
    holes: Sequence[Hole],
    holes_played: int,
    start_hole_index: int = 0,
) -> MatchStatus:
    """Running four-ball status; not applicable unless four players in two teams of two."""
    holes_remaining = max(0, ROUND_HOLES - holes_played)
    if len(players) != 4:
        return MatchStatus(
            leader_name="Not Team Play",
            status="Individual Play",
            holes_remaining=holes_remaining,
            is_applicable=False,
        )
    if not has_balanced_teams(players):
        return MatchStatus(
            leader_name="Invalid Teams",
            status="Check Team Setup",
            holes_remaining=holes_remaining,
            is_applicable=False,
        )

    team_a, team_b = split_teams(players)
    wins = {"A": 0, "B": 0}
    for hole_index in holes_played_order(holes_played, start_hole_index):
        result = team_hole_winner(players, hole_index, holes)
        if not result.is_halved and result.team_winner:
            wins[result.team_winner] += 1

    margin = abs(wins["A"] - wins["B"])
    leading_team = None
    if wins["A"] > wins["B"]:
        leading_team = "A"
    elif wins["B"] > wins["A"]:
        leading_team = "B"

    team_a_names = [p.name for p in team_a]
    team_b_names = [p.name for p in team_b]
    if leading_team == "A":
        leader_name = f"Team A ({', '.join(team_a_names)})"
    elif leading_team == "B":
        leader_name = f"Team B ({', '.join(team_b_names)})"
    else:
        leader_name = "All Square"

    status, can_end = format_status(margin, holes_remaining)
    return MatchStatus(
        leader_name=leader_name,
        margin=margin,
        is_all_square=margin == 0,
        status=status,
        can_end=can_end,
        holes_remaining=holes_remaining,
        is_team_play=True,
        leading_team=leading_team,
        team_a_names=team_a_names,
        team_b_names=team_b_names,
    )
