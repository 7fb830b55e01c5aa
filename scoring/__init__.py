"""Scoring engine: handicap strokes, Stableford, match play and six points."""

from .exceptions import (
    InvalidPlacesError,
    InvalidPlayerCountError,
    InvalidTeamsError,
    PlayerNotFoundError,
    PlayerSetupError,
    ScoringError,
)
from .handicap import cap_score, course_handicap, strokes_for_hole
from .match_play import hole_winner, match_status, team_hole_winner, team_match_status
from .order import hole_order, last_hole_index
from .results import (
    HoleResult,
    MatchStatus,
    RoundResults,
    ScorecardTotals,
    ScoringFormat,
    SixPointsHoleResult,
    SixPointsStatus,
    Standing,
)
from .session import (
    assign_team,
    change_tee,
    confirm_hole,
    edit_score,
    new_player,
    reset_round,
    round_results,
    scoring_format,
)
from .six_points import (
    allocate_six_points_from_places,
    apply_hole_and_reset_six_points,
    replay_six_points,
    six_points_for_hole,
    six_points_status,
)
from .stableford import scorecard_totals, stableford_points

__all__ = [
    "strokes_for_hole",
    "cap_score",
    "course_handicap",
    "stableford_points",
    "scorecard_totals",
    "hole_winner",
    "match_status",
    "team_hole_winner",
    "team_match_status",
    "six_points_for_hole",
    "six_points_status",
    "apply_hole_and_reset_six_points",
    "allocate_six_points_from_places",
    "replay_six_points",
    "hole_order",
    "last_hole_index",
    "new_player",
    "change_tee",
    "assign_team",
    "confirm_hole",
    "edit_score",
    "reset_round",
    "round_results",
    "scoring_format",
    "HoleResult",
    "MatchStatus",
    "RoundResults",
    "ScorecardTotals",
    "ScoringFormat",
    "SixPointsHoleResult",
    "SixPointsStatus",
    "Standing",
    "ScoringError",
    "InvalidPlayerCountError",
    "InvalidTeamsError",
    "InvalidPlacesError",
    "PlayerSetupError",
    "PlayerNotFoundError",
]
