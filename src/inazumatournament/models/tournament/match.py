"""Match data class."""

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

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class Match:
    """A single bracket match between two teams.

    Attributes
    ----------
    team1 : str
        Identifier of the first team.
    team2 : str
        Identifier of the second team.
    winner : str or None
        Identifier of the winner. Set once; later writes are ignored.
    """

    team1: str
    team2: str
    winner: Optional[str] = None

    @property
    def is_decided(self) -> bool:
        """Whether the match has a winner."""
        return self.winner is not None

    @property
    def loser(self) -> Optional[str]:
        """Identifier of the losing team, or None while undecided."""
        if self.winner is None:
            return None
        return self.team2 if self.winner == self.team1 else self.team1

    def involves(self, team_id: str) -> bool:
        """Whether ``team_id`` plays in this match."""
        return team_id in (self.team1, self.team2)

    def set_winner(self, team_id: str) -> bool:
        """Record the winner if none is recorded yet.

        Returns:
            True if recorded, False if the match was already decided
        """
        if self.winner is not None:
            return False
        self.winner = team_id
        return True

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary."""
        return {"team1": self.team1, "team2": self.team2, "winner": self.winner}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Match":
        """Deserialize match from dictionary."""
        return cls(team1=data["team1"], team2=data["team2"], winner=data.get("winner"))
