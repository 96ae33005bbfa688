import pytest
from conftest import ScriptedRandomSource, make_opponent

from inazumatournament.constants import PLAYER_ID
from inazumatournament.controllers.tournament import (
    level_bonus,
    resolve_computer_matches,
    resolve_match,
    stronger_win_rate,
)
from inazumatournament.exceptions import PlayerMatchException, TournamentStateException
from inazumatournament.models.tournament import Match
from inazumatournament.utils.random_source import RandomSource


def _participant(team, level):
    opponent = make_opponent(team, level)
    return opponent.with_tier(opponent.difficulties[0])


@pytest.fixture
def participants():
    weak = _participant("Weak", 40)
    strong = _participant("Strong", 60)
    return {weak.id: weak, strong.id: strong}


@pytest.fixture
def weak_id(participants):
    return next(k for k, v in participants.items() if v.level == 40)


@pytest.fixture
def strong_id(participants):
    return next(k for k, v in participants.items() if v.level == 60)


@pytest.mark.parametrize(
    "level_a, level_b, modifier, expected",
    [
        (40, 60, 1, 20),
        (60, 40, 1, 20),
        (40, 60, 2, 40),
        (40, 60, 5, 50),
        (10, 200, 100, 50),
        (50, 50, 10, 0),
        (40, 60, 0, 0),
    ],
)
def test_level_bonus(level_a, level_b, modifier, expected):
    assert level_bonus(level_a, level_b, modifier) == expected


def test_win_rate_bounds():
    assert stronger_win_rate(40, 60, 1) == pytest.approx(0.70)
    assert stronger_win_rate(50, 50, 3) == pytest.approx(0.5)
    assert stronger_win_rate(0, 255, 100) == pytest.approx(1.0)


def test_successful_roll_goes_to_stronger_team(participants, weak_id, strong_id):
    rng = ScriptedRandomSource([True])
    match = Match(weak_id, strong_id)

    assert resolve_match(match, participants, 1, rng) == strong_id
    assert match.winner == strong_id
    assert rng.probabilities == [pytest.approx(0.70)]


def test_failed_roll_goes_to_weaker_team(participants, weak_id, strong_id):
    rng = ScriptedRandomSource([False])
    match = Match(strong_id, weak_id)

    assert resolve_match(match, participants, 1, rng) == weak_id
    assert match.winner == weak_id


def test_equal_levels_roll_fifty_fifty():
    first = _participant("First", 50)
    second = _participant("Second", 50)
    participants = {first.id: first, second.id: second}
    rng = ScriptedRandomSource([True])

    assert resolve_match(Match(first.id, second.id), participants, 3, rng) == first.id
    assert rng.probabilities == [pytest.approx(0.5)]


def test_decided_match_is_left_alone(participants, weak_id, strong_id):
    rng = ScriptedRandomSource()
    match = Match(weak_id, strong_id, winner=weak_id)

    assert resolve_match(match, participants, 1, rng) is None
    assert match.winner == weak_id
    assert rng.probabilities == []


def test_player_match_is_refused(participants, weak_id):
    with pytest.raises(PlayerMatchException):
        resolve_match(Match(weak_id, PLAYER_ID), participants, 1, ScriptedRandomSource())


def test_unknown_participant(participants, weak_id):
    with pytest.raises(TournamentStateException):
        resolve_match(Match(weak_id, "Ghost"), participants, 1, ScriptedRandomSource())


def test_resolve_computer_matches_skips_player_and_decided(
    participants, weak_id, strong_id
):
    extra = _participant("Extra", 45)
    participants[extra.id] = extra
    matches = [
        Match(weak_id, strong_id),
        Match(extra.id, PLAYER_ID),
        Match(strong_id, weak_id, winner=weak_id),
    ]

    resolved = resolve_computer_matches(matches, participants, 1, ScriptedRandomSource())

    assert resolved == 1
    assert matches[0].winner == strong_id
    assert matches[1].winner is None
    assert matches[2].winner == weak_id


def test_stronger_team_wins_about_seventy_percent(participants, weak_id, strong_id):
    rng = RandomSource(seed=1234)
    trials = 10000

    wins = 0
    for _ in range(trials):
        match = Match(weak_id, strong_id)
        if resolve_match(match, participants, 1, rng) == strong_id:
            wins += 1

    assert abs(wins / trials - 0.70) < 0.03


def test_capped_bonus_always_favours_stronger_team():
    weak = _participant("Weak", 0)
    strong = _participant("Strong", 255)
    participants = {weak.id: weak, strong.id: strong}
    rng = RandomSource(seed=7)

    for _ in range(200):
        assert resolve_match(Match(weak.id, strong.id), participants, 100, rng) == strong.id
