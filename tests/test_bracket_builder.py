import pytest
from conftest import make_opponent

from inazumatournament.constants import PLAYER_ID
from inazumatournament.controllers.tournament import (
    build_bracket,
    draw_opponents,
    filter_eligible_opponents,
    pair_teams,
)
from inazumatournament.exceptions import InsufficientOpponentsException
from inazumatournament.models.settings import TournamentSettings
from inazumatournament.models.tournament import TournamentPhase


def _eligible(count, level=50):
    opponents = [make_opponent(f"Team {i}", level) for i in range(count)]
    settings = TournamentSettings(
        player_team_level=level, unlocked_opponents=[o.id for o in opponents]
    )
    return filter_eligible_opponents(settings, opponents)


def test_pair_teams_even(scripted_rng):
    matches, byes = pair_teams(["a", "b", "c", "d"], scripted_rng)

    assert [(m.team1, m.team2) for m in matches] == [("a", "b"), ("c", "d")]
    assert byes == []


def test_pair_teams_odd_gives_head_the_bye(scripted_rng):
    matches, byes = pair_teams(["a", "b", "c"], scripted_rng)

    assert byes == ["a"]
    assert [(m.team1, m.team2) for m in matches] == [("b", "c")]


def test_pair_teams_single_team(scripted_rng):
    assert pair_teams(["a"], scripted_rng) == ([], ["a"])


def test_pair_teams_does_not_touch_input(seeded_rng):
    teams = ["a", "b", "c", "d", "e"]
    pair_teams(teams, seeded_rng)
    assert teams == ["a", "b", "c", "d", "e"]


def test_draw_opponents_raises_when_pool_too_small(scripted_rng):
    with pytest.raises(InsufficientOpponentsException) as exc_info:
        draw_opponents(_eligible(2), 4, scripted_rng)

    assert exc_info.value.required == 3
    assert exc_info.value.available == 2


def test_draw_opponents_is_distinct(seeded_rng):
    eligible = _eligible(10)
    drawn = draw_opponents(eligible, 8, seeded_rng)

    assert len(drawn) == 7
    assert len({o.id for o in drawn}) == 7


@pytest.mark.parametrize("team_count", [2, 3, 4, 5, 8, 16])
def test_first_round_covers_every_team_once(team_count, seeded_rng):
    tournament = build_bracket(_eligible(20), team_count, 2, seeded_rng)

    seen = [t for m in tournament.rounds[0] for t in (m.team1, m.team2)]
    seen.extend(tournament.bye_teams)

    assert len(seen) == team_count
    assert len(set(seen)) == team_count
    assert PLAYER_ID in seen
    assert len(tournament.rounds[0]) == team_count // 2
    assert len(tournament.bye_teams) == team_count % 2
    assert len(tournament.participants) == team_count - 1
    assert PLAYER_ID not in tournament.participants
    assert tournament.status == "Round 1"
    assert tournament.phase is TournamentPhase.IN_PROGRESS


def test_player_is_appended_after_opponents(scripted_rng):
    tournament = build_bracket(_eligible(3), 4, 2, scripted_rng)

    pairs = [(m.team1, m.team2) for m in tournament.rounds[0]]
    assert pairs == [
        ("Team 0 (IE1) - Story", "Team 1 (IE1) - Story"),
        ("Team 2 (IE1) - Story", PLAYER_ID),
    ]
    assert tournament.level_win_rate_modifier == 2


def test_odd_bracket_stores_bye(scripted_rng):
    tournament = build_bracket(_eligible(2), 3, 0, scripted_rng)

    assert tournament.bye_teams == ["Team 0 (IE1) - Story"]
    assert [(m.team1, m.team2) for m in tournament.rounds[0]] == [
        ("Team 1 (IE1) - Story", PLAYER_ID)
    ]


def test_participants_carry_selected_tier(scripted_rng):
    tournament = build_bracket(_eligible(1, level=77), 2, 1, scripted_rng)

    (opponent,) = tournament.participants.values()
    assert opponent.level == 77
    assert opponent.difficulty_name == "Normal"


@pytest.mark.parametrize("team_count", [0, 1])
def test_lone_player_wins_immediately(team_count, scripted_rng):
    tournament = build_bracket([], team_count, 2, scripted_rng)

    assert tournament.rounds == []
    assert tournament.participants == {}
    assert tournament.champion == PLAYER_ID
    assert tournament.phase is TournamentPhase.CHAMPION
    assert tournament.status == "Player Wins the Tournament!"


def test_insufficient_opponents_for_worked_example(
    worked_example_opponents, scripted_rng
):
    settings = TournamentSettings(
        player_team_level=50,
        team_count=4,
        unlocked_opponents=[o.id for o in worked_example_opponents],
    )
    eligible = filter_eligible_opponents(settings, worked_example_opponents)

    with pytest.raises(InsufficientOpponentsException):
        build_bracket(eligible, settings.team_count, 1, scripted_rng)
