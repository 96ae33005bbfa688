"""Command-line interface for Inazuma Tournament.

This module lets the tournament be inspected and played from a terminal,
and launches the desktop window.
"""

# Inazuma Tournament
# Copyright (C) 2025  Inazuma Tournament developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import argparse
import asyncio
import json
import logging
import sys
from typing import Callable, List, Optional

from inazumatournament import APP_NAME, APP_VERSION
from inazumatournament.catalog import (
    CsvOpponentCatalog,
    OpponentCatalog,
    StaticOpponentCatalog,
    default_catalog,
    filter_catalog,
)
from inazumatournament.constants import ALL_SERIES, PLAYER_ID
from inazumatournament.exceptions import InazumaTournamentException
from inazumatournament.models.settings import TournamentSettings, read_settings_file
from inazumatournament.models.tournament import Tournament
from inazumatournament.tournament import (
    generate_tournament,
    get_playable_opponents_info,
    simulate_round,
    update_match_result,
)
from inazumatournament.utils import set_log_level, setup_logger
from inazumatournament.utils.random_source import RandomSource

logger = setup_logger(__name__)


def parse_level(value: str) -> int:
    """Parse a team level argument (0-255).

    Raises:
        argparse.ArgumentTypeError: If the value is not an integer in range
    """
    try:
        level = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid level '{value}'. Must be an integer")
    if not 0 <= level <= 255:
        raise argparse.ArgumentTypeError(f"Level {level} must be between 0 and 255")
    return level


def parse_non_negative(value: str) -> int:
    """Parse a non-negative integer argument."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid value '{value}'. Must be an integer")
    if number < 0:
        raise argparse.ArgumentTypeError(f"Value {number} must not be negative")
    return number


def build_catalog(args: argparse.Namespace) -> OpponentCatalog:
    """Catalog selected on the command line (the bundled roster by default)."""
    if args.catalog:
        return CsvOpponentCatalog(args.catalog)
    return default_catalog()


async def build_settings(
    args: argparse.Namespace, catalog: OpponentCatalog
) -> tuple:
    """Combine the settings file and command-line flags.

    When neither the settings file nor ``--unlock`` lists the unlocked
    opponents, every opponent of the allowed sources (and series, if given)
    is unlocked. An explicit empty list in the file is kept as is.

    Returns:
        Tuple of (settings, catalog) where the catalog is a static snapshot
        of what was fetched
    """
    file_data = read_settings_file(args.settings) if args.settings else {}
    settings = TournamentSettings.from_dict(file_data)
    for name in (
        "player_team_level",
        "team_count",
        "level_tolerance_lower",
        "level_tolerance_upper",
        "level_win_rate_modifier",
    ):
        value = getattr(args, name, None)
        if value is not None:
            setattr(settings, name, value)
    if args.source:
        settings.allowed_sources = list(args.source)

    opponents = await catalog.fetch_opponents()
    if args.unlock:
        settings.unlocked_opponents = list(args.unlock)
    elif "unlocked_opponents" not in file_data:
        visible = filter_catalog(opponents, settings.allowed_sources, args.series)
        settings.unlocked_opponents = [o.id for o in visible]
    return settings, StaticOpponentCatalog(opponents)


# ========== Rendering ==========


def format_team(tournament: Tournament, team_id: str) -> str:
    """Display name of a team with its level and difficulty."""
    opponent = tournament.participants.get(team_id)
    if opponent is None:
        return team_id
    return f"{opponent.id} (Lv.{opponent.level}, {opponent.difficulty_name})"


def render_tournament(tournament: Tournament) -> str:
    """Plain-text rendering of the bracket."""
    lines = [f"=== {tournament.status} ==="]
    for round_index, matches in enumerate(tournament.rounds):
        lines.append(f"-- Round {round_index + 1} --")
        for match_index, match in enumerate(matches):
            line = (
                f"  [{match_index + 1}] {format_team(tournament, match.team1)} vs "
                f"{format_team(tournament, match.team2)}"
            )
            if match.winner:
                line += f"  -> Winner: {match.winner}"
            lines.append(line)
    if tournament.bye_teams and not tournament.is_finished:
        byes = ", ".join(format_team(tournament, t) for t in tournament.bye_teams)
        lines.append(f"Bye: {byes}")
    return "\n".join(lines)


# ========== Commands ==========


def run_info(args: argparse.Namespace) -> int:
    """List the opponents playable under the given settings."""

    async def _info():
        settings, catalog = await build_settings(args, build_catalog(args))
        return settings, await get_playable_opponents_info(settings, catalog)

    settings, info = asyncio.run(_info())
    if args.json:
        print(json.dumps(info.to_dict(), ensure_ascii=False, indent=2))
    else:
        print(f"Playable opponents: {info.count}")
        for label in info.opponents:
            print(f"  {label}")
    if not info.is_sufficient_for(settings.team_count):
        print(
            f"Not enough opponents for {settings.team_count} teams "
            f"({settings.required_opponents} required).",
            file=sys.stderr,
        )
        return 1
    return 0


def ask_player_won(
    tournament: Tournament, opponent_id: str, input_func: Callable[[str], str]
) -> bool:
    """Ask whether the player beat ``opponent_id``."""
    while True:
        answer = input_func(
            f"Did you beat {format_team(tournament, opponent_id)}? [y/n] "
        )
        answer = answer.strip().lower()
        if answer in ("y", "yes"):
            return True
        if answer in ("n", "no"):
            return False


def play_tournament(
    tournament: Tournament,
    rng: Optional[RandomSource] = None,
    input_func: Callable[[str], str] = input,
    output_func: Callable[[str], None] = print,
) -> Tournament:
    """Play a tournament to the end, asking the player for their results."""
    output_func(render_tournament(tournament))
    while not tournament.is_finished:
        round_index = tournament.current_round_index
        match_index = tournament.find_player_match(round_index)
        match = (
            tournament.get_match(round_index, match_index)
            if match_index is not None
            else None
        )
        if match is None or match.is_decided:
            output_func(f"{PLAYER_ID} has a bye this round.")
            tournament = simulate_round(tournament, round_index, rng)
        else:
            opponent = match.team2 if match.team1 == PLAYER_ID else match.team1
            won = ask_player_won(tournament, opponent, input_func)
            tournament = update_match_result(
                tournament,
                round_index,
                match_index,
                PLAYER_ID if won else opponent,
                rng,
            )
        output_func(render_tournament(tournament))
    return tournament


def run_play(args: argparse.Namespace) -> int:
    """Generate a tournament and play it in the terminal."""
    rng = RandomSource(args.seed) if args.seed is not None else None

    async def _generate():
        settings, catalog = await build_settings(args, build_catalog(args))
        return await generate_tournament(settings, catalog, rng)

    tournament = asyncio.run(_generate())
    tournament = play_tournament(tournament, rng)
    return 0 if tournament.champion == PLAYER_ID else 2


def run_gui(args: argparse.Namespace) -> int:
    """Launch the desktop window."""
    from inazumatournament.gui.mainwindow import run_app

    return run_app(build_catalog(args))


# ========== Parser ==========


def _add_settings_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--settings", help="JSON settings file")
    parser.add_argument(
        "--catalog", help="Opponent CSV file (defaults to the bundled roster)"
    )
    parser.add_argument(
        "--level",
        dest="player_team_level",
        type=parse_level,
        help="Level of your team",
    )
    parser.add_argument(
        "--teams",
        dest="team_count",
        type=parse_non_negative,
        help="Number of teams in the bracket, you included",
    )
    parser.add_argument(
        "--lower",
        dest="level_tolerance_lower",
        type=parse_non_negative,
        help="Allowed levels below yours",
    )
    parser.add_argument(
        "--upper",
        dest="level_tolerance_upper",
        type=parse_non_negative,
        help="Allowed levels above yours",
    )
    parser.add_argument(
        "--modifier",
        dest="level_win_rate_modifier",
        type=parse_non_negative,
        help="Win rate points per level of difference in computer matches",
    )
    parser.add_argument(
        "--source",
        action="append",
        help="Allowed opponent source (repeatable)",
    )
    parser.add_argument(
        "--series",
        default=ALL_SERIES,
        help="Only unlock opponents of this series (e.g. IE1)",
    )
    parser.add_argument(
        "--unlock",
        action="append",
        help=(
            "Unlocked opponent id (repeatable). Default: the settings file's "
            "list, or every opponent of the allowed sources and series"
        ),
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="inazumatournament",
        description=f"{APP_NAME} - single-elimination tournament mini-game",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {APP_VERSION}"
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    info_parser = subparsers.add_parser("info", help="List playable opponents")
    _add_settings_arguments(info_parser)
    info_parser.add_argument("--json", action="store_true", help="Print JSON")
    info_parser.set_defaults(func=run_info)

    play_parser = subparsers.add_parser("play", help="Play a tournament in the terminal")
    _add_settings_arguments(play_parser)
    play_parser.add_argument("--seed", type=int, help="Seed for reproducible draws")
    play_parser.set_defaults(func=run_play)

    gui_parser = subparsers.add_parser("gui", help="Open the desktop window")
    gui_parser.add_argument(
        "--catalog", help="Opponent CSV file (defaults to the bundled roster)"
    )
    gui_parser.set_defaults(func=run_gui)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        set_log_level(logging.DEBUG)

    try:
        return args.func(args)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except InazumaTournamentException as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
