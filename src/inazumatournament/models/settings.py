"""TournamentSettings data class and settings file loading."""

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

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Union

from inazumatournament.constants import (
    DEFAULT_LEVEL_TOLERANCE_LOWER,
    DEFAULT_LEVEL_TOLERANCE_UPPER,
    DEFAULT_PLAYER_LEVEL,
    DEFAULT_SOURCES,
    DEFAULT_TEAM_COUNT,
    DEFAULT_WIN_RATE_MODIFIER,
)
from inazumatournament.exceptions import (
    InvalidConfigurationException,
    MissingConfigurationException,
)
from inazumatournament.utils import setup_logger

logger = setup_logger(__name__)

_INT_FIELDS = (
    "player_team_level",
    "team_count",
    "level_tolerance_lower",
    "level_tolerance_upper",
    "level_win_rate_modifier",
)


@dataclass
class TournamentSettings:
    """Settings a tournament is generated from.

    Attributes
    ----------
    player_team_level : int
        Level of the player's own team.
    team_count : int
        Number of teams in the bracket, player included.
    level_tolerance_lower : int
        How far below the player's level an opponent tier may be.
    level_tolerance_upper : int
        How far above the player's level an opponent tier may be.
    level_win_rate_modifier : int
        Percentage points of win rate granted per level of difference
        in computer matches (0-100).
    allowed_sources : list of str
        Opponent sources (game modes) allowed in the draw.
    unlocked_opponents : list of str
        Ids of the opponents the player has unlocked.
    """

    player_team_level: int = DEFAULT_PLAYER_LEVEL
    team_count: int = DEFAULT_TEAM_COUNT
    level_tolerance_lower: int = DEFAULT_LEVEL_TOLERANCE_LOWER
    level_tolerance_upper: int = DEFAULT_LEVEL_TOLERANCE_UPPER
    level_win_rate_modifier: int = DEFAULT_WIN_RATE_MODIFIER
    allowed_sources: List[str] = field(default_factory=lambda: list(DEFAULT_SOURCES))
    unlocked_opponents: List[str] = field(default_factory=list)

    @property
    def required_opponents(self) -> int:
        """Number of opponents a bracket of ``team_count`` teams needs."""
        return max(self.team_count - 1, 0)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize settings to dictionary."""
        return {
            "player_team_level": self.player_team_level,
            "team_count": self.team_count,
            "level_tolerance_lower": self.level_tolerance_lower,
            "level_tolerance_upper": self.level_tolerance_upper,
            "level_win_rate_modifier": self.level_win_rate_modifier,
            "allowed_sources": list(self.allowed_sources),
            "unlocked_opponents": list(self.unlocked_opponents),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentSettings":
        """Deserialize settings from dictionary.

        Missing keys fall back to defaults. A single ``level_tolerance`` key,
        as written by older front-ends, applies to both directions unless the
        split keys are given.

        Raises:
            InvalidConfigurationException: If a value has the wrong type
        """
        values = dict(data)
        if "level_tolerance" in values:
            legacy = values.pop("level_tolerance")
            values.setdefault("level_tolerance_lower", legacy)
            values.setdefault("level_tolerance_upper", legacy)

        kwargs: Dict[str, Any] = {}
        for name in _INT_FIELDS:
            if name in values:
                try:
                    kwargs[name] = int(values[name])
                except (TypeError, ValueError) as e:
                    raise InvalidConfigurationException(
                        f"Setting '{name}' must be an integer, got {values[name]!r}"
                    ) from e
        for name in ("allowed_sources", "unlocked_opponents"):
            if name in values:
                if not isinstance(values[name], list):
                    raise InvalidConfigurationException(
                        f"Setting '{name}' must be a list of strings"
                    )
                kwargs[name] = [str(v) for v in values[name]]
        return cls(**kwargs)


def read_settings_file(path: Union[str, Path]) -> Dict[str, Any]:
    """Read the raw settings object from a JSON file.

    Callers that need to know which keys the file sets (rather than which
    fell back to defaults) use this instead of :func:`load_settings`.

    Args:
        path: Path to the settings file

    Returns:
        The decoded JSON object

    Raises:
        MissingConfigurationException: If the file does not exist
        InvalidConfigurationException: If the file is not a valid settings object
    """
    settings_path = Path(path)
    if not settings_path.exists():
        raise MissingConfigurationException(f"Settings file not found: {settings_path}")

    try:
        with open(settings_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise InvalidConfigurationException(
            f"Settings file {settings_path} is not valid JSON: {e}"
        ) from e

    if not isinstance(data, dict):
        raise InvalidConfigurationException(
            f"Settings file {settings_path} must contain a JSON object"
        )

    logger.info("Loaded settings from: %s", settings_path)
    return data


def load_settings(path: Union[str, Path]) -> TournamentSettings:
    """Load tournament settings from a JSON file.

    Raises:
        MissingConfigurationException: If the file does not exist
        InvalidConfigurationException: If the file is not a valid settings object
    """
    return TournamentSettings.from_dict(read_settings_file(path))
