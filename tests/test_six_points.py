import itertools

import pytest

from scoring.exceptions import InvalidPlacesError, InvalidPlayerCountError
from scoring.six_points import (
    allocate_six_points_from_places,
    apply_hole_and_reset_six_points,
    normalize_totals,
    places_from_net_scores,
    replay_six_points,
    six_points_for_hole,
    six_points_status,
)


def _trio(make_player, a=None, b=None, c=None):
    return [
        make_player("a", name="Ann", scores=a),
        make_player("b", name="Bob", scores=b),
        make_player("c", name="Cat", scores=c),
    ]


# ================================================================
# Placement table
# ================================================================

def test_allocation_by_placement_pattern():
    assert allocate_six_points_from_places([1, 1, 1]) == [2, 2, 2]
    assert allocate_six_points_from_places([1, 1, 2]) == [3, 3, 0]
    assert allocate_six_points_from_places([2, 1, 1]) == [0, 3, 3]
    assert allocate_six_points_from_places([1, 2, 2]) == [4, 1, 1]
    assert allocate_six_points_from_places([1, 2, 3]) == [4, 2, 0]
    assert allocate_six_points_from_places([3, 1, 2]) == [0, 4, 2]


def test_allocation_fallback_splits_evenly():
    assert allocate_six_points_from_places([2, 2, 3]) == [2, 2, 2]


def test_allocation_requires_three_places():
    with pytest.raises(InvalidPlacesError):
        allocate_six_points_from_places([1, 2])
    with pytest.raises(InvalidPlacesError):
        places_from_net_scores([3, 4, 5, 6])


def test_places_share_ties():
    assert places_from_net_scores([4, 4, 4]) == [1, 1, 1]
    assert places_from_net_scores([4, 4, 5]) == [1, 1, 2]
    assert places_from_net_scores([3, 4, 4]) == [1, 2, 2]
    assert places_from_net_scores([5, 3, 4]) == [3, 1, 2]


def test_every_net_score_combination_splits_six():
    for nets in itertools.product(range(2, 6), repeat=3):
        points = allocate_six_points_from_places(places_from_net_scores(list(nets)))
        assert sum(points) == 6


def test_normalize_totals():
    assert normalize_totals([4, 2, 3]) == [2, 0, 1]
    assert normalize_totals([0, 0, 0]) == [0, 0, 0]
    assert normalize_totals([]) == []


# ================================================================
# One hole
# ================================================================

def test_three_distinct_scores(make_player, holes):
    result = six_points_for_hole(_trio(make_player, a={1: 5}, b={1: 3}, c={1: 4}), 0, holes)
    assert result.player_points == {"a": 0, "b": 4, "c": 2}
    assert result.total == 6
    assert [ns.player_id for ns in result.net_scores] == ["a", "b", "c"]


def test_two_tied_for_first(make_player, holes):
    result = six_points_for_hole(_trio(make_player, a={1: 4}, b={1: 4}, c={1: 6}), 0, holes)
    assert result.player_points == {"a": 3, "b": 3, "c": 0}


def test_net_scores_use_handicap_strokes(make_player, holes):
    players = _trio(make_player, a={1: 5}, b={1: 4}, c={1: 6})
    players[0] = players[0].model_copy(update={"course_handicap": 1})  # net 4 ties Bob
    result = six_points_for_hole(players, 0, holes)
    assert result.player_points == {"a": 3, "b": 3, "c": 0}
    assert result.net_scores[0].net_score == 4
    assert result.net_scores[0].gross_score == 5


def test_fewer_than_three_scorers(make_player, holes):
    one = six_points_for_hole(_trio(make_player, b={1: 7}), 0, holes)
    assert one.player_points == {"a": 0, "b": 6, "c": 0}

    tied = six_points_for_hole(_trio(make_player, a={1: 4}, c={1: 4}), 0, holes)
    assert tied.player_points == {"a": 3, "b": 0, "c": 3}

    split = six_points_for_hole(_trio(make_player, a={1: 5}, c={1: 4}), 0, holes)
    assert split.player_points == {"a": 2, "b": 0, "c": 4}

    none = six_points_for_hole(_trio(make_player), 0, holes)
    assert none.player_points == {"a": 0, "b": 0, "c": 0}
    assert none.total == 0


def test_six_points_needs_three_players(make_player, holes):
    with pytest.raises(InvalidPlayerCountError):
        six_points_for_hole([make_player("a"), make_player("b")], 0, holes)
    with pytest.raises(InvalidPlayerCountError):
        apply_hole_and_reset_six_points([make_player("a")], 0, holes)


# ================================================================
# Running ladder
# ================================================================

def test_apply_hole_normalizes_totals(make_player, holes):
    players = _trio(make_player, a={1: 3, 2: 4}, b={1: 4, 2: 5}, c={1: 5, 2: 3})

    after_one = apply_hole_and_reset_six_points(players, 0, holes)
    assert [p.total_six_points for p in after_one] == [4, 2, 0]
    assert [p.six_points[0] for p in after_one] == [4, 2, 0]

    # Hole 2 gives 2/0/4 -> raw 6/2/4 -> re-based by 2
    after_two = apply_hole_and_reset_six_points(after_one, 1, holes)
    assert [p.total_six_points for p in after_two] == [4, 0, 2]
    assert [p.six_points[1] for p in after_two] == [2, 0, 4]
    assert min(p.total_six_points for p in after_two) == 0

    # Inputs are left untouched
    assert [p.total_six_points for p in players] == [0, 0, 0]
    assert after_one[0].six_points[1] == 0


def test_replay_matches_sequential_application(make_player, holes):
    players = _trio(
        make_player,
        a={1: 3, 2: 4, 3: 4},
        b={1: 4, 2: 5, 3: 4},
        c={1: 5, 2: 3, 3: 6},
    )
    sequential = players
    for hole_index in range(3):
        sequential = apply_hole_and_reset_six_points(sequential, hole_index, holes)

    replayed = replay_six_points(players, holes)
    assert [p.total_six_points for p in replayed] == [p.total_six_points for p in sequential]
    assert [p.six_points for p in replayed] == [p.six_points for p in sequential]


def test_replay_discards_stale_totals(make_player, holes):
    players = _trio(make_player, a={1: 3}, b={1: 4}, c={1: 5})
    stale = [p.model_copy(update={"total_six_points": 9}) for p in players]
    replayed = replay_six_points(stale, holes)
    assert [p.total_six_points for p in replayed] == [4, 2, 0]


# ================================================================
# Standings
# ================================================================

def _with_totals(make_player, totals):
    return [
        p.model_copy(update={"total_six_points": t})
        for p, t in zip(_trio(make_player), totals)
    ]


def test_status_clear_leader(make_player):
    status = six_points_status(_with_totals(make_player, [4, 0, 2]), 2)
    assert status.leader_id == "a"
    assert status.total_six_points == 4
    assert [s.player_id for s in status.standings] == ["a", "c", "b"]
    assert not status.is_two_way_tie
    assert not status.is_three_way_tie
    assert status.summary == "Ann leading with 4 six points after 2 holes"


def test_status_two_way_tie(make_player):
    status = six_points_status(_with_totals(make_player, [3, 3, 0]), 1)
    assert status.is_two_way_tie
    assert status.leader_id is None
    assert status.tied_player_names == ["Ann", "Bob"]
    assert status.summary == "Ann & Bob tied with 3 points after 1 hole"


def test_status_three_way_tie(make_player):
    status = six_points_status(_with_totals(make_player, [0, 0, 0]), 0)
    assert status.is_three_way_tie
    assert not status.is_two_way_tie
    assert status.summary.startswith("All players tied with 0 points")


def test_status_not_applicable(make_player):
    status = six_points_status([make_player("a"), make_player("b")], 4)
    assert status.is_applicable is False
    assert status.leader_name == "Not 3-Player Game"
    assert status.standings == []
