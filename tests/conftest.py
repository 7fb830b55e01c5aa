import pytest

from models import Hole, Player


@pytest.fixture
def holes():
    """18 par 4s where the stroke index equals the hole number."""
    return [Hole(number=i, par=4, stroke_index=i) for i in range(1, 19)]


@pytest.fixture
def make_player():
    """Build a player with scores given as {hole_number: strokes}."""
    def _make(player_id, course_handicap=0, scores=None, team=None, name=None):
        card = [0] * 18
        for number, strokes in (scores or {}).items():
            card[number - 1] = strokes
        return Player(
            id=player_id,
            name=name or player_id.title(),
            course_handicap=course_handicap,
            scores=card,
            team=team,
        )
    return _make
