import argparse
import json

import pytest
from conftest import ScriptedRandomSource, make_opponent

from inazumatournament import APP_VERSION
from inazumatournament.cli import (
    create_parser,
    main,
    parse_level,
    parse_non_negative,
    play_tournament,
    render_tournament,
)
from inazumatournament.constants import PLAYER_ID
from inazumatournament.models.tournament import Match, Tournament


@pytest.fixture
def catalog_csv(write_csv):
    return write_csv(
        "A,IE1,Inazuma Eleven,Story,Normal,48,,,,,,",
        "B,IE1,Inazuma Eleven,Story,Normal,52,,,,,,",
        "C,IE1,Inazuma Eleven,Story,Normal,70,,,,,,",
    )


def _two_team_tournament():
    opponent = make_opponent("A", 50)
    opponent = opponent.with_tier(opponent.difficulties[0])
    tournament = Tournament(participants={opponent.id: opponent})
    tournament.start_round([Match(opponent.id, PLAYER_ID)], [])
    return tournament


def _answers(*replies):
    queue = list(replies)
    return lambda _prompt: queue.pop(0)


def test_parse_level():
    assert parse_level("0") == 0
    assert parse_level("255") == 255
    for bad in ("256", "-1", "ten"):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_level(bad)


def test_parse_non_negative():
    assert parse_non_negative("7") == 7
    with pytest.raises(argparse.ArgumentTypeError):
        parse_non_negative("-3")


def test_parser_reads_settings_flags():
    args = create_parser().parse_args(
        ["play", "--level", "60", "--teams", "16", "--source", "Story",
         "--source", "Extra", "--seed", "5"]
    )

    assert args.command == "play"
    assert args.player_team_level == 60
    assert args.team_count == 16
    assert args.source == ["Story", "Extra"]
    assert args.seed == 5
    assert args.series == "ALL"
    assert args.level_tolerance_lower is None


def test_parser_rejects_bad_level():
    with pytest.raises(SystemExit):
        create_parser().parse_args(["info", "--level", "300"])


def test_version(capsys):
    with pytest.raises(SystemExit):
        main(["--version"])
    assert APP_VERSION in capsys.readouterr().out


def test_info_lists_playable_opponents(catalog_csv, capsys):
    code = main(["info", "--catalog", str(catalog_csv), "--teams", "3"])

    out = capsys.readouterr().out
    assert code == 0
    assert "Playable opponents: 2" in out
    assert "A (IE1) - Story (Lv.48)" in out
    assert "C (IE1) - Story" not in out


def test_info_reports_insufficient_opponents(catalog_csv, capsys):
    code = main(["info", "--catalog", str(catalog_csv), "--teams", "4"])

    assert code == 1
    assert "3 required" in capsys.readouterr().err


def test_info_json(catalog_csv, capsys):
    code = main(
        ["info", "--catalog", str(catalog_csv), "--teams", "2", "--upper", "20", "--json"]
    )

    data = json.loads(capsys.readouterr().out)
    assert code == 0
    assert data["count"] == 3
    assert data["opponents"][-1] == "C (IE1) - Story (Lv.70)"


def test_info_with_explicit_unlocks(catalog_csv, capsys):
    main(["info", "--catalog", str(catalog_csv), "--teams", "2", "--unlock", "B (IE1) - Story"])

    out = capsys.readouterr().out
    assert "Playable opponents: 1" in out
    assert "B (IE1) - Story (Lv.52)" in out


def test_info_with_settings_file(catalog_csv, tmp_path, capsys):
    settings_path = tmp_path / "settings.json"
    settings_path.write_text(
        json.dumps({"player_team_level": 70, "level_tolerance": 0, "team_count": 2}),
        encoding="utf-8",
    )

    code = main(["info", "--catalog", str(catalog_csv), "--settings", str(settings_path)])

    assert code == 0
    assert "Playable opponents: 1" in capsys.readouterr().out


def test_settings_file_with_nothing_unlocked_is_respected(catalog_csv, tmp_path, capsys):
    settings_path = tmp_path / "locked.json"
    settings_path.write_text(
        json.dumps({"unlocked_opponents": [], "team_count": 2}), encoding="utf-8"
    )

    code = main(["info", "--catalog", str(catalog_csv), "--settings", str(settings_path)])

    assert code == 1
    assert "Playable opponents: 0" in capsys.readouterr().out


def test_unlock_flag_overrides_settings_file(catalog_csv, tmp_path, capsys):
    settings_path = tmp_path / "locked.json"
    settings_path.write_text(
        json.dumps({"unlocked_opponents": [], "team_count": 2}), encoding="utf-8"
    )

    code = main(
        ["info", "--catalog", str(catalog_csv), "--settings", str(settings_path),
         "--unlock", "A (IE1) - Story"]
    )

    assert code == 0
    assert "Playable opponents: 1" in capsys.readouterr().out


def test_missing_catalog_exits_with_error(tmp_path):
    assert main(["info", "--catalog", str(tmp_path / "missing.csv")]) == 1


def test_missing_settings_file_exits_with_error(catalog_csv, tmp_path):
    code = main(
        ["info", "--catalog", str(catalog_csv), "--settings", str(tmp_path / "no.json")]
    )
    assert code == 1


def test_play_with_no_opponents_wins_at_once(catalog_csv, capsys):
    code = main(["play", "--catalog", str(catalog_csv), "--teams", "1", "--seed", "1"])

    assert code == 0
    assert "Player Wins the Tournament!" in capsys.readouterr().out


def test_play_tournament_player_wins():
    lines = []

    final = play_tournament(
        _two_team_tournament(),
        ScriptedRandomSource(),
        input_func=_answers("maybe", "y"),
        output_func=lines.append,
    )

    assert final.champion == PLAYER_ID
    assert lines[-1].startswith("=== Player Wins the Tournament! ===")


def test_play_tournament_player_loses():
    final = play_tournament(
        _two_team_tournament(),
        ScriptedRandomSource(),
        input_func=_answers("no"),
        output_func=lambda _line: None,
    )

    assert final.is_game_over
    assert final.status == "Game Over"


def test_play_tournament_simulates_bye_rounds():
    a = make_opponent("A", 48)
    b = make_opponent("B", 52)
    participants = {
        o.id: o.with_tier(o.difficulties[0]) for o in (a, b)
    }
    tournament = Tournament(participants=participants, level_win_rate_modifier=1)
    tournament.start_round([Match(a.id, b.id)], [PLAYER_ID])
    lines = []

    final = play_tournament(
        tournament,
        ScriptedRandomSource([True]),
        input_func=_answers("y"),
        output_func=lines.append,
    )

    assert "Player has a bye this round." in lines
    assert final.rounds[0][0].winner == b.id
    assert final.champion == PLAYER_ID


def test_render_tournament_shows_rounds_and_byes():
    a = make_opponent("A", 48)
    a = a.with_tier(a.difficulties[0])
    tournament = Tournament(participants={a.id: a})
    tournament.start_round([Match(a.id, PLAYER_ID)], ["Bye Team"])

    text = render_tournament(tournament)

    assert text.splitlines() == [
        "=== Round 1 ===",
        "-- Round 1 --",
        "  [1] A (IE1) - Story (Lv.48, Normal) vs Player",
        "Bye: Bye Team",
    ]
