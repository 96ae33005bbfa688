"""Result submission and round progression.

This module records match results, auto-resolves the remaining computer
matches of a round and moves the tournament to its next state:

    Round k in progress -> Round k+1 in progress
                        -> Champion declared
                        -> Game over (player lost; checked first)

Every public function takes the tournament and returns the updated value.
A changed tournament is always a new copy; no-op calls return the input.
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

import copy

from inazumatournament.constants import PLAYER_ID
from inazumatournament.controllers.tournament.bracket_builder import pair_teams
from inazumatournament.controllers.tournament.match_resolver import (
    resolve_computer_matches,
)
from inazumatournament.exceptions import (
    IndexOutOfRangeException,
    InvalidResultException,
)
from inazumatournament.models.tournament import Tournament
from inazumatournament.type_hints import TeamId
from inazumatournament.utils import setup_logger
from inazumatournament.utils.random_source import RandomSource

logger = setup_logger(__name__)


def _check_round_index(tournament: Tournament, round_index: int) -> None:
    if not 0 <= round_index < len(tournament.rounds):
        raise IndexOutOfRangeException(
            f"Round index {round_index} out of range "
            f"(tournament has {len(tournament.rounds)} rounds)"
        )


def advance_if_complete(tournament: Tournament, rng: RandomSource) -> bool:
    """Move to the next round or crown a champion once the round is over.

    Mutates ``tournament`` in place. Winners of the latest round are joined
    by the stored bye teams, shuffled and paired again. A single survivor is
    champion.

    Returns:
        True if the tournament state advanced
    """
    if tournament.is_finished or not tournament.rounds:
        return False
    round_index = tournament.current_round_index
    if not tournament.is_round_complete(round_index):
        return False

    survivors = [m.winner for m in tournament.current_round]
    survivors.extend(tournament.bye_teams)
    tournament.bye_teams = []

    if len(survivors) == 1:
        tournament.declare_champion(survivors[0])
        logger.info("Champion: %s", survivors[0])
        return True

    matches, byes = pair_teams(survivors, rng)
    if not matches:
        # a lone bye holder is the champion as well
        tournament.declare_champion(byes[0])
        logger.info("Champion: %s", byes[0])
        return True

    tournament.start_round(matches, byes)
    logger.info(
        "Round %d complete; %s with %d matches, bye: %s",
        round_index + 1,
        tournament.status,
        len(matches),
        byes[0] if byes else "None",
    )
    return True


def submit_match_result(
    tournament: Tournament,
    round_index: int,
    match_index: int,
    winner_id: TeamId,
    rng: RandomSource,
    player_id: TeamId = PLAYER_ID,
) -> Tournament:
    """Record the winner of a match and advance the tournament.

    If the player lost the match the tournament ends at once and no other
    match is resolved. Otherwise the remaining computer matches of the round
    are auto-resolved and the round-completion check runs.

    Args:
        tournament: Current tournament state
        round_index: Round index (0-indexed)
        match_index: Match index within the round (0-indexed)
        winner_id: Identifier of the winning team
        rng: Random source for auto-resolution and pairing
        player_id: Identifier of the human participant

    Returns:
        Updated tournament, or the input unchanged if the match was already
        decided or the tournament is finished

    Raises:
        IndexOutOfRangeException: If either index is invalid
        InvalidResultException: If ``winner_id`` did not play in the match
    """
    _check_round_index(tournament, round_index)
    match = tournament.get_match(round_index, match_index)
    if match is None:
        raise IndexOutOfRangeException(
            f"Match index {match_index} out of range for round {round_index + 1}"
        )

    if tournament.is_finished:
        logger.debug("Ignoring result for finished tournament (%s)", tournament.status)
        return tournament
    if match.is_decided:
        logger.debug(
            "Match %d of round %d already decided, ignoring",
            match_index + 1,
            round_index + 1,
        )
        return tournament
    if not match.involves(winner_id):
        raise InvalidResultException(
            f"{winner_id} did not play in {match.team1} vs {match.team2}"
        )

    updated = copy.deepcopy(tournament)
    match = updated.rounds[round_index][match_index]
    match.set_winner(winner_id)
    logger.info(
        "Round %d, match %d: %s wins", round_index + 1, match_index + 1, winner_id
    )

    if match.involves(player_id) and winner_id != player_id:
        updated.declare_game_over()
        logger.info("%s was knocked out by %s", match.loser, winner_id)
        return updated

    resolve_computer_matches(
        updated.rounds[round_index],
        updated.participants,
        updated.level_win_rate_modifier,
        rng,
        player_id,
    )
    advance_if_complete(updated, rng)
    return updated


def simulate_round(
    tournament: Tournament,
    round_index: int,
    rng: RandomSource,
    player_id: TeamId = PLAYER_ID,
) -> Tournament:
    """Auto-resolve the computer matches of a round and advance.

    Used when the player has no match to report, e.g. while holding a bye.
    The player's own match, if any, is left untouched.

    Returns:
        Updated tournament, or the input unchanged if nothing was resolved
        and the tournament did not advance

    Raises:
        IndexOutOfRangeException: If the round does not exist
    """
    _check_round_index(tournament, round_index)
    if tournament.is_finished:
        return tournament

    updated = copy.deepcopy(tournament)
    resolved = resolve_computer_matches(
        updated.rounds[round_index],
        updated.participants,
        updated.level_win_rate_modifier,
        rng,
        player_id,
    )
    advanced = advance_if_complete(updated, rng)
    if not resolved and not advanced:
        return tournament
    logger.info("Simulated %d matches of round %d", resolved, round_index + 1)
    return updated
