import asyncio

import pytest
from conftest import ScriptedRandomSource, make_opponent, make_settings

from inazumatournament.catalog import OpponentCatalog, StaticOpponentCatalog
from inazumatournament.constants import PLAYER_ID
from inazumatournament.exceptions import (
    DataUnavailableException,
    InsufficientOpponentsException,
)
from inazumatournament.tournament import (
    Tournament,
    TournamentPhase,
    generate_tournament,
    get_playable_opponents_info,
    simulate_round,
    update_match_result,
)
from inazumatournament.utils.random_source import RandomSource


class CancelledCatalog(OpponentCatalog):
    async def fetch_opponents(self):
        raise asyncio.CancelledError()


class BrokenCatalog(OpponentCatalog):
    async def fetch_opponents(self):
        raise DataUnavailableException("backend down")


def test_generate_three_team_tournament(worked_example_opponents, static_catalog):
    settings = make_settings(worked_example_opponents, team_count=3)

    tournament = asyncio.run(
        generate_tournament(settings, static_catalog, ScriptedRandomSource())
    )

    assert isinstance(tournament, Tournament)
    assert tournament.status == "Round 1"
    assert sorted(o.team_name for o in tournament.participants.values()) == ["A", "B"]
    assert tournament.bye_teams == ["A (IE1) - Story"]
    assert [(m.team1, m.team2) for m in tournament.rounds[0]] == [
        ("B (IE1) - Story", PLAYER_ID)
    ]
    assert tournament.level_win_rate_modifier == settings.level_win_rate_modifier


def test_generate_worked_example_is_insufficient(worked_example_opponents, static_catalog):
    settings = make_settings(worked_example_opponents, team_count=4)

    with pytest.raises(InsufficientOpponentsException) as exc_info:
        asyncio.run(generate_tournament(settings, static_catalog))

    assert exc_info.value.required == 3
    assert exc_info.value.available == 2


def test_generate_single_team_crowns_player(static_catalog):
    settings = make_settings([], team_count=1)

    tournament = asyncio.run(generate_tournament(settings, static_catalog))

    assert tournament.rounds == []
    assert tournament.champion == PLAYER_ID
    assert tournament.status == "Player Wins the Tournament!"


def test_playable_info(worked_example_opponents, static_catalog):
    settings = make_settings(worked_example_opponents)

    info = asyncio.run(get_playable_opponents_info(settings, static_catalog))

    assert info.count == 2
    assert info.opponents == ["A (IE1) - Story (Lv.48)", "B (IE1) - Story (Lv.52)"]


def test_cancelled_fetch_is_data_unavailable(worked_example_opponents):
    settings = make_settings(worked_example_opponents)

    with pytest.raises(DataUnavailableException):
        asyncio.run(get_playable_opponents_info(settings, CancelledCatalog()))
    with pytest.raises(DataUnavailableException):
        asyncio.run(generate_tournament(settings, CancelledCatalog()))


def test_fetch_failure_propagates(worked_example_opponents):
    settings = make_settings(worked_example_opponents)

    with pytest.raises(DataUnavailableException, match="backend down"):
        asyncio.run(generate_tournament(settings, BrokenCatalog()))


def test_catalog_is_not_mutated_by_generation(worked_example_opponents):
    catalog = StaticOpponentCatalog(worked_example_opponents)
    settings = make_settings(worked_example_opponents, team_count=3)

    asyncio.run(generate_tournament(settings, catalog, RandomSource(seed=3)))

    fetched = asyncio.run(catalog.fetch_opponents())
    assert all(o.level == 0 and o.difficulty_name == "" for o in fetched)


def test_play_to_the_end_with_seeded_source(eight_opponents):
    catalog = StaticOpponentCatalog(eight_opponents)
    settings = make_settings(eight_opponents, team_count=8, level_tolerance_upper=10)
    rng = RandomSource(seed=42)
    tournament = asyncio.run(generate_tournament(settings, catalog, rng))

    rounds_played = 0
    while not tournament.is_finished:
        round_index = tournament.current_round_index
        match_index = tournament.find_player_match(round_index)
        tournament = update_match_result(
            tournament, round_index, match_index, PLAYER_ID, rng
        )
        rounds_played += 1

    assert rounds_played == 3
    assert tournament.phase is TournamentPhase.CHAMPION
    assert tournament.champion == PLAYER_ID
    assert [len(r) for r in tournament.rounds] == [4, 2, 1]


def test_update_match_result_uses_fresh_source_by_default():
    opponent = make_opponent("A", 50)
    tournament = asyncio.run(
        generate_tournament(
            make_settings([opponent], team_count=2),
            StaticOpponentCatalog([opponent]),
        )
    )

    updated = update_match_result(tournament, 0, 0, PLAYER_ID)

    assert updated.champion == PLAYER_ID


def test_simulate_round_defaults_to_latest_round():
    a = make_opponent("A", 48)
    b = make_opponent("B", 52)
    settings = make_settings([a, b], team_count=3)
    # identity shuffle puts A on the bye; move the player there instead
    tournament = asyncio.run(
        generate_tournament(settings, StaticOpponentCatalog([a, b]), ScriptedRandomSource())
    )
    tournament.rounds[0][0].team2 = a.id
    tournament.bye_teams = [PLAYER_ID]

    updated = simulate_round(tournament, rng=ScriptedRandomSource([True]))

    assert updated.rounds[0][0].winner == b.id
    assert [(m.team1, m.team2) for m in updated.rounds[1]] == [(b.id, PLAYER_ID)]
