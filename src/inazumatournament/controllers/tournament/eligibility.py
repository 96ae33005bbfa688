"""Opponent eligibility for a tournament.

This module decides which catalog opponents may be drawn for a tournament
and at which difficulty tier each of them is faced.
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

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from inazumatournament.models.opponent import DifficultyTier, Opponent
from inazumatournament.models.settings import TournamentSettings
from inazumatournament.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class PlayableOpponentsInfo:
    """Read-only summary of the eligible opponents.

    Attributes
    ----------
    count : int
        Number of eligible opponents.
    opponents : list of str
        One ``"<id> (Lv.<level>)"`` label per eligible opponent.
    """

    count: int = 0
    opponents: List[str] = field(default_factory=list)

    def is_sufficient_for(self, team_count: int) -> bool:
        """Whether a bracket of ``team_count`` teams can be drawn."""
        return self.count >= max(team_count - 1, 0)

    def to_dict(self) -> dict:
        return {"count": self.count, "opponents": list(self.opponents)}


def level_range(player_level: int, lower: int, upper: int) -> tuple:
    """Inclusive (min, max) level window around the player's level."""
    return max(player_level - lower, 0), player_level + upper


def select_difficulty(
    tiers: Iterable[DifficultyTier],
    player_level: int,
    lower_tolerance: int,
    upper_tolerance: int,
) -> Optional[DifficultyTier]:
    """Pick the tier closest to the player's level within the tolerance window.

    Ties go to the tier that comes first.

    Returns:
        The selected tier, or None if no tier is inside the window
    """
    min_level, max_level = level_range(player_level, lower_tolerance, upper_tolerance)
    best: Optional[DifficultyTier] = None
    best_distance = 0
    for tier in tiers:
        if not min_level <= tier.level <= max_level:
            continue
        distance = abs(player_level - tier.level)
        # strict comparison keeps the first tier on ties
        if best is None or distance < best_distance:
            best = tier
            best_distance = distance
    return best


def filter_eligible_opponents(
    settings: TournamentSettings, opponents: Iterable[Opponent]
) -> List[Opponent]:
    """Select the opponents that can be drawn under ``settings``.

    An opponent is eligible when it is unlocked, its source is allowed and
    at least one of its tiers is within the level tolerance. Each result is a
    copy with the chosen tier fixed; the inputs are left untouched.

    Args:
        settings: Tournament settings
        opponents: Catalog opponents with their full tier lists

    Returns:
        Eligible opponent copies in catalog order
    """
    unlocked = set(settings.unlocked_opponents)
    allowed_sources = set(settings.allowed_sources)

    eligible = []
    for opponent in opponents:
        if opponent.id not in unlocked or opponent.source not in allowed_sources:
            continue
        tier = select_difficulty(
            opponent.difficulties,
            settings.player_team_level,
            settings.level_tolerance_lower,
            settings.level_tolerance_upper,
        )
        if tier is None:
            logger.debug("No tier of %s fits the level window, skipping", opponent.id)
            continue
        logger.debug("Selected %s (Lv.%d) for %s", tier.name, tier.level, opponent.id)
        eligible.append(opponent.with_tier(tier))

    logger.debug("%d eligible opponents", len(eligible))
    return eligible


def playable_opponents_info(
    settings: TournamentSettings, opponents: Iterable[Opponent]
) -> PlayableOpponentsInfo:
    """Summarize the eligible opponents for display."""
    eligible = filter_eligible_opponents(settings, opponents)
    return PlayableOpponentsInfo(
        count=len(eligible),
        opponents=[o.display_label for o in eligible],
    )
