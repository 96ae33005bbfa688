"""Automatic resolution of computer-versus-computer matches.

The higher-level team wins with probability ``0.5 + bonus / 100``, where the
bonus is the level difference times the tournament's win-rate modifier,
capped at 50 percentage points. Matches involving the player are never
resolved here; their result always comes from the player.
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

from typing import Dict, Optional

from inazumatournament.constants import BASE_WIN_RATE, MAX_LEVEL_BONUS, PLAYER_ID
from inazumatournament.exceptions import PlayerMatchException, TournamentStateException
from inazumatournament.models.opponent import Opponent
from inazumatournament.models.tournament import Match
from inazumatournament.type_hints import Round, TeamId
from inazumatournament.utils import setup_logger
from inazumatournament.utils.random_source import RandomSource

logger = setup_logger(__name__)


def level_bonus(level_a: int, level_b: int, modifier: int) -> int:
    """Win-rate bonus in percentage points for the higher-level team."""
    return min(abs(level_a - level_b) * max(modifier, 0), MAX_LEVEL_BONUS)


def stronger_win_rate(level_a: int, level_b: int, modifier: int) -> float:
    """Probability that the higher-level team wins, in [0.5, 1.0]."""
    return BASE_WIN_RATE + level_bonus(level_a, level_b, modifier) / 100


def resolve_match(
    match: Match,
    participants: Dict[TeamId, Opponent],
    modifier: int,
    rng: RandomSource,
    player_id: TeamId = PLAYER_ID,
) -> Optional[TeamId]:
    """Decide the winner of a computer match and record it.

    Args:
        match: Match to resolve
        participants: Tournament participants by id
        modifier: Win-rate modifier of the tournament
        rng: Random source for the roll
        player_id: Identifier of the human participant

    Returns:
        The new winner, or None if the match already had one

    Raises:
        PlayerMatchException: If the player plays in the match
        TournamentStateException: If a team is not a tournament participant
    """
    if match.is_decided:
        return None
    if match.involves(player_id):
        raise PlayerMatchException(
            f"Match {match.team1} vs {match.team2} must be decided by the player"
        )

    try:
        team1 = participants[match.team1]
        team2 = participants[match.team2]
    except KeyError as e:
        raise TournamentStateException(f"Unknown participant: {e.args[0]}") from e

    # team1 counts as stronger on equal levels; the roll is 50/50 then anyway
    if team1.level >= team2.level:
        stronger, weaker = team1, team2
    else:
        stronger, weaker = team2, team1

    win_rate = stronger_win_rate(stronger.level, weaker.level, modifier)
    winner = stronger.id if rng.chance(win_rate) else weaker.id
    match.set_winner(winner)
    logger.debug(
        "Auto-resolved %s (Lv.%d) vs %s (Lv.%d) at %.2f: %s wins",
        stronger.id,
        stronger.level,
        weaker.id,
        weaker.level,
        win_rate,
        winner,
    )
    return winner


def resolve_computer_matches(
    matches: Round,
    participants: Dict[TeamId, Opponent],
    modifier: int,
    rng: RandomSource,
    player_id: TeamId = PLAYER_ID,
) -> int:
    """Resolve every undecided match of a round that the player is not in.

    Returns:
        Number of matches resolved
    """
    resolved = 0
    for match in matches:
        if match.is_decided or match.involves(player_id):
            continue
        resolve_match(match, participants, modifier, rng, player_id)
        resolved += 1
    return resolved
