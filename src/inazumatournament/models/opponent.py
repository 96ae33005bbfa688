"""Opponent team and difficulty tier data classes."""

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

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class DifficultyTier:
    """One (difficulty name, level) option for facing an opponent.

    Attributes
    ----------
    name : str
        Difficulty name as shown in game (e.g. "Normal", "Hard").
    level : int
        Team level for this difficulty, between 0 and 255.
    """

    name: str
    level: int

    def to_dict(self) -> Dict[str, Any]:
        """Serialize tier to dictionary."""
        return {"name": self.name, "level": self.level}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DifficultyTier":
        """Deserialize tier from dictionary."""
        return cls(name=data["name"], level=int(data["level"]))


def make_opponent_id(team_name: str, series_short: str, source: str) -> str:
    """Build the catalog-unique opponent id ``"<team> (<series>) - <source>"``."""
    return f"{team_name} ({series_short}) - {source}"


@dataclass
class Opponent:
    """An opponent team that can be entered into a tournament.

    The catalog creates one instance per team and mode with every difficulty
    tier available. A per-tournament copy is produced by :meth:`with_tier`,
    which fixes ``level`` and ``difficulty_name`` to the chosen tier.

    Attributes
    ----------
    id : str
        Unique identifier, ``"<team> (<series>) - <source>"``.
    team_name : str
        Team name.
    series_short : str
        Abbreviated series name, used by the series filter.
    series_full : str
        Full series title.
    source : str
        Game mode the opponent comes from.
    difficulties : list of DifficultyTier
        Tiers in catalog order.
    level : int
        Level of the tier selected for this tournament (0 until selected).
    difficulty_name : str
        Name of the tier selected for this tournament ("" until selected).
    """

    id: str
    team_name: str
    series_short: str
    series_full: str
    source: str
    difficulties: List[DifficultyTier] = field(default_factory=list)
    level: int = 0
    difficulty_name: str = ""

    @property
    def has_selected_tier(self) -> bool:
        """Whether a tier has been fixed for a tournament."""
        return bool(self.difficulty_name)

    @property
    def display_label(self) -> str:
        """Label used by opponent listings, e.g. ``"Raimon (IE1) - Story (Lv.48)"``."""
        return f"{self.id} (Lv.{self.level})"

    def with_tier(self, tier: DifficultyTier) -> "Opponent":
        """Return a copy with ``tier`` selected.

        Raises:
            ValueError: If ``tier`` is not one of this opponent's tiers
        """
        if tier not in self.difficulties:
            raise ValueError(f"{tier!r} is not a difficulty of {self.id}")
        return replace(
            self,
            difficulties=list(self.difficulties),
            level=tier.level,
            difficulty_name=tier.name,
        )

    def find_tier(self, name: str) -> Optional[DifficultyTier]:
        """Look up a tier by difficulty name."""
        for tier in self.difficulties:
            if tier.name == name:
                return tier
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize opponent to dictionary."""
        return {
            "id": self.id,
            "team_name": self.team_name,
            "series_short": self.series_short,
            "series_full": self.series_full,
            "source": self.source,
            "difficulties": [t.to_dict() for t in self.difficulties],
            "level": self.level,
            "difficulty_name": self.difficulty_name,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Opponent":
        """Deserialize opponent from dictionary."""
        return cls(
            id=data["id"],
            team_name=data.get("team_name", ""),
            series_short=data.get("series_short", ""),
            series_full=data.get("series_full", ""),
            source=data.get("source", ""),
            difficulties=[
                DifficultyTier.from_dict(t) for t in data.get("difficulties", [])
            ],
            level=data.get("level", 0),
            difficulty_name=data.get("difficulty_name", ""),
        )
