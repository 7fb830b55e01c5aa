from enum import Enum
from pydantic import Field
from typing import Dict, List, Optional

from models.base import BaseGolfModel
from models.player import Team


class ScoringFormat(str, Enum):
    """Which game is played, decided by the size and shape of the group."""
    STABLEFORD = "stableford"            # any group; always scored
    MATCH_PLAY = "match_play"            # 2 players
    SIX_POINTS = "six_points"            # 3 players
    TEAM_MATCH_PLAY = "team_match_play"  # 4 players split A/B


class HoleResult(BaseGolfModel):
    """Outcome of one match-play hole."""
    winner_ids: List[str] = Field(default_factory=list)
    is_halved: bool = True
    margin: int = 0  # net strokes the hole was won by
    team_winner: Optional[Team] = None
    net_scores: Dict[str, int] = Field(default_factory=dict)


class MatchStatus(BaseGolfModel):
    """Running match status, individual or team."""
    leader_id: Optional[str] = None
    leader_name: str = "All Square"
    margin: int = 0
    is_all_square: bool = True
    status: str = "All Square"  # "All Square", "2 Up", "4 & 3"
    can_end: bool = False
    holes_remaining: int = 0
    is_applicable: bool = True

    is_team_play: bool = False
    leading_team: Optional[Team] = None
    team_a_names: List[str] = Field(default_factory=list)
    team_b_names: List[str] = Field(default_factory=list)


class NetScore(BaseGolfModel):
    player_id: str
    player_name: str
    net_score: int
    gross_score: int


class SixPointsHoleResult(BaseGolfModel):
    """Six points handed out on one hole."""
    player_points: Dict[str, int] = Field(default_factory=dict)
    net_scores: List[NetScore] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(self.player_points.values())


class Standing(BaseGolfModel):
    player_id: str
    player_name: str
    points: int


class SixPointsStatus(BaseGolfModel):
    """Six-points ladder after the holes played so far."""
    leader_id: Optional[str] = None
    leader_name: str = ""
    total_six_points: int = 0
    standings: List[Standing] = Field(default_factory=list)
    is_three_way_tie: bool = False
    is_two_way_tie: bool = False
    tied_player_names: List[str] = Field(default_factory=list)
    holes_played: int = 0
    summary: str = ""
    is_applicable: bool = True


class NineTotals(BaseGolfModel):
    gross: int = 0
    strokes_received: int = 0
    net: int = 0
    points: int = 0


class ScorecardTotals(BaseGolfModel):
    """Front nine, back nine and overall totals for one player."""
    player_id: str
    player_name: str
    front_nine: NineTotals
    back_nine: NineTotals
    total: NineTotals


class RoundResults(BaseGolfModel):
    """End-of-round summary for the whole group."""
    scoring_format: ScoringFormat
    stableford_standings: List[Standing] = Field(default_factory=list)
    winner_id: Optional[str] = None
    winner_name: Optional[str] = None
    match: Optional[MatchStatus] = None
    team_match: Optional[MatchStatus] = None
    six_points: Optional[SixPointsStatus] = None
