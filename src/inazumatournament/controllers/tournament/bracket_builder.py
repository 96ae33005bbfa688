"""Bracket construction for single-elimination tournaments.

This module draws the opponents for a new tournament and pairs teams into
matches. The pairing step is shared with round advancement.
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

from typing import List, Sequence

from inazumatournament.constants import PLAYER_ID
from inazumatournament.exceptions import InsufficientOpponentsException
from inazumatournament.models.opponent import Opponent
from inazumatournament.models.tournament import Match, Tournament
from inazumatournament.type_hints import Pairings, TeamId
from inazumatournament.utils import setup_logger
from inazumatournament.utils.random_source import RandomSource

logger = setup_logger(__name__)


def pair_teams(teams: Sequence[TeamId], rng: RandomSource) -> Pairings:
    """Shuffle teams and pair them two at a time.

    With an odd count the head of the shuffled list gets the bye.

    Args:
        teams: Team identifiers to pair
        rng: Random source used for the shuffle

    Returns:
        Tuple of (matches, bye teams); the bye list holds at most one team
    """
    pool = list(teams)
    rng.shuffle(pool)

    byes: List[TeamId] = []
    if len(pool) % 2 == 1:
        byes.append(pool.pop(0))

    matches = [Match(team1=pool[i], team2=pool[i + 1]) for i in range(0, len(pool), 2)]
    return matches, byes


def draw_opponents(
    eligible: Sequence[Opponent], team_count: int, rng: RandomSource
) -> List[Opponent]:
    """Draw ``team_count - 1`` distinct opponents from the eligible pool.

    Raises:
        InsufficientOpponentsException: If the pool is too small
    """
    required = max(team_count - 1, 0)
    if len(eligible) < required:
        raise InsufficientOpponentsException(required=required, available=len(eligible))
    return rng.choose_without_replacement(eligible, required)


def build_bracket(
    eligible: Sequence[Opponent],
    team_count: int,
    level_win_rate_modifier: int,
    rng: RandomSource,
    player_id: TeamId = PLAYER_ID,
) -> Tournament:
    """Create a tournament with its first round paired.

    Args:
        eligible: Eligible opponents, each with a tier selected
        team_count: Number of teams in the bracket, player included
        level_win_rate_modifier: Win-rate modifier carried into the tournament
        rng: Random source for the draw and the shuffle
        player_id: Identifier of the human participant

    Returns:
        Tournament in round 1, or already won by the player when there is
        nobody to play against

    Raises:
        InsufficientOpponentsException: If fewer eligible opponents exist
            than the bracket needs
    """
    selected = draw_opponents(eligible, team_count, rng)
    tournament = Tournament(
        participants={o.id: o for o in selected},
        level_win_rate_modifier=level_win_rate_modifier,
    )

    teams = [o.id for o in selected] + [player_id]
    matches, byes = pair_teams(teams, rng)

    if not matches:
        logger.info("No opponents drawn; %s wins by default", player_id)
        tournament.declare_champion(player_id)
        return tournament

    tournament.start_round(matches, byes)
    logger.info(
        "Built bracket: %d teams, %d matches, bye: %s",
        len(teams),
        len(matches),
        byes[0] if byes else "None",
    )
    return tournament
