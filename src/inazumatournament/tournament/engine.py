"""Public tournament operations.

These are the calls presentation layers make. The engine keeps no state of
its own: every operation receives the full tournament value and returns the
updated one, and each call draws from a fresh random source unless the
caller injects one.
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

import asyncio
from typing import List, Optional

from inazumatournament.catalog import OpponentCatalog
from inazumatournament.constants import PLAYER_ID
from inazumatournament.controllers.tournament import (
    PlayableOpponentsInfo,
    build_bracket,
    filter_eligible_opponents,
    playable_opponents_info,
)
from inazumatournament.controllers.tournament import round_advancer
from inazumatournament.exceptions import DataUnavailableException
from inazumatournament.models.opponent import Opponent
from inazumatournament.models.settings import TournamentSettings
from inazumatournament.models.tournament import Tournament
from inazumatournament.type_hints import TeamId
from inazumatournament.utils import setup_logger
from inazumatournament.utils.random_source import RandomSource, ensure_random_source

logger = setup_logger(__name__)


async def _fetch(catalog: OpponentCatalog) -> List[Opponent]:
    try:
        return await catalog.fetch_opponents()
    except asyncio.CancelledError as e:
        raise DataUnavailableException("Opponent fetch was cancelled") from e


async def generate_tournament(
    settings: TournamentSettings,
    catalog: OpponentCatalog,
    rng: Optional[RandomSource] = None,
    player_id: TeamId = PLAYER_ID,
) -> Tournament:
    """Generate a new tournament from the settings.

    Args:
        settings: Tournament settings
        catalog: Opponent catalog, fetched once
        rng: Optional random source (a fresh one is used if None)
        player_id: Identifier of the human participant

    Returns:
        Tournament with its first round paired

    Raises:
        DataUnavailableException: If the catalog cannot be fetched
        InsufficientOpponentsException: If too few opponents are eligible
    """
    opponents = await _fetch(catalog)
    eligible = filter_eligible_opponents(settings, opponents)
    logger.info(
        "Generating %d-team tournament from %d eligible opponents",
        settings.team_count,
        len(eligible),
    )
    return build_bracket(
        eligible,
        settings.team_count,
        settings.level_win_rate_modifier,
        ensure_random_source(rng),
        player_id,
    )


async def get_playable_opponents_info(
    settings: TournamentSettings, catalog: OpponentCatalog
) -> PlayableOpponentsInfo:
    """Count and list the opponents eligible under the settings.

    Raises:
        DataUnavailableException: If the catalog cannot be fetched
    """
    opponents = await _fetch(catalog)
    return playable_opponents_info(settings, opponents)


def update_match_result(
    tournament: Tournament,
    round_index: int,
    match_index: int,
    winner_id: TeamId,
    rng: Optional[RandomSource] = None,
    player_id: TeamId = PLAYER_ID,
) -> Tournament:
    """Submit a match result and return the advanced tournament.

    See :func:`round_advancer.submit_match_result`.
    """
    return round_advancer.submit_match_result(
        tournament,
        round_index,
        match_index,
        winner_id,
        ensure_random_source(rng),
        player_id,
    )


def simulate_round(
    tournament: Tournament,
    round_index: Optional[int] = None,
    rng: Optional[RandomSource] = None,
    player_id: TeamId = PLAYER_ID,
) -> Tournament:
    """Auto-play the computer matches of a round (the latest by default)."""
    if round_index is None:
        round_index = tournament.current_round_index
    return round_advancer.simulate_round(
        tournament, round_index, ensure_random_source(rng), player_id
    )
