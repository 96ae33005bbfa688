"""Tournament state data class.

The Tournament value is the complete state of one bracket. Engine operations
take it as input and hand back an updated copy; nothing else holds on to it.
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
from enum import Enum
from typing import Any, Dict, Optional

from inazumatournament.constants import (
    PLAYER_ID,
    STATUS_CHAMPION,
    STATUS_GAME_OVER,
    STATUS_ROUND,
)
from inazumatournament.models.opponent import Opponent
from inazumatournament.type_hints import ByeTeams, MaybeTeamId, Round, Rounds

from .match import Match


class TournamentPhase(Enum):
    """Phase of the round-completion state machine."""

    IN_PROGRESS = "in_progress"
    CHAMPION = "champion"
    GAME_OVER = "game_over"


@dataclass
class Tournament:
    """Complete state of a single-elimination tournament.

    Attributes
    ----------
    participants : dict of str to Opponent
        Opponents in the bracket keyed by id. The player is not included.
    level_win_rate_modifier : int
        Win-rate modifier carried over from the settings.
    rounds : list of list of Match
        Rounds in play order; each round is an ordered list of matches.
    bye_teams : list of str
        Teams exempt from the latest round, folded back in when it completes.
    status : str
        Human-readable phase, e.g. "Round 2" or "Game Over".
    phase : TournamentPhase
        Machine-readable phase.
    champion : str or None
        Identifier of the champion once declared.
    """

    participants: Dict[str, Opponent] = field(default_factory=dict)
    level_win_rate_modifier: int = 0
    rounds: Rounds = field(default_factory=list)
    bye_teams: ByeTeams = field(default_factory=list)
    status: str = ""
    phase: TournamentPhase = TournamentPhase.IN_PROGRESS
    champion: MaybeTeamId = None

    # ========== Properties ==========

    @property
    def is_finished(self) -> bool:
        """Whether a champion was declared or the player was knocked out."""
        return self.phase is not TournamentPhase.IN_PROGRESS

    @property
    def is_game_over(self) -> bool:
        """Whether the player lost a match."""
        return self.phase is TournamentPhase.GAME_OVER

    @property
    def current_round_index(self) -> int:
        """Index of the latest round, or -1 if no round exists."""
        return len(self.rounds) - 1

    @property
    def current_round(self) -> Round:
        """Matches of the latest round."""
        return self.rounds[-1] if self.rounds else []

    # ========== State transitions ==========

    def start_round(self, matches: Round, bye_teams: ByeTeams) -> None:
        """Append a new round and mark it in progress."""
        self.rounds.append(matches)
        self.bye_teams = list(bye_teams)
        self.status = STATUS_ROUND.format(number=len(self.rounds))
        self.phase = TournamentPhase.IN_PROGRESS

    def declare_champion(self, team_id: str) -> None:
        """Finish the tournament with ``team_id`` as champion."""
        self.bye_teams = []
        self.champion = team_id
        self.status = STATUS_CHAMPION.format(team=team_id)
        self.phase = TournamentPhase.CHAMPION

    def declare_game_over(self) -> None:
        """Finish the tournament after a player defeat."""
        self.status = STATUS_GAME_OVER
        self.phase = TournamentPhase.GAME_OVER

    # ========== Queries ==========

    def get_match(self, round_index: int, match_index: int) -> Optional[Match]:
        """Get a match by 0-based indices, or None if either is invalid."""
        if not 0 <= round_index < len(self.rounds):
            return None
        round_matches = self.rounds[round_index]
        if not 0 <= match_index < len(round_matches):
            return None
        return round_matches[match_index]

    def is_round_complete(self, round_index: int) -> bool:
        """Whether every match of a round has a winner."""
        return all(m.is_decided for m in self.rounds[round_index])

    def find_player_match(
        self, round_index: int, player_id: str = PLAYER_ID
    ) -> Optional[int]:
        """Index of the player's match in a round, or None (e.g. on a bye)."""
        for index, match in enumerate(self.rounds[round_index]):
            if match.involves(player_id):
                return index
        return None

    # ========== Serialization ==========

    def to_dict(self) -> Dict[str, Any]:
        """Serialize tournament to dictionary."""
        return {
            "participants": {k: v.to_dict() for k, v in self.participants.items()},
            "level_win_rate_modifier": self.level_win_rate_modifier,
            "rounds": [[m.to_dict() for m in r] for r in self.rounds],
            "bye_teams": list(self.bye_teams),
            "status": self.status,
            "phase": self.phase.value,
            "champion": self.champion,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Tournament":
        """Deserialize tournament from dictionary."""
        return cls(
            participants={
                k: Opponent.from_dict(v)
                for k, v in data.get("participants", {}).items()
            },
            level_win_rate_modifier=data.get("level_win_rate_modifier", 0),
            rounds=[
                [Match.from_dict(m) for m in r] for r in data.get("rounds", [])
            ],
            bye_teams=list(data.get("bye_teams", [])),
            status=data.get("status", ""),
            phase=TournamentPhase(data.get("phase", TournamentPhase.IN_PROGRESS.value)),
            champion=data.get("champion"),
        )
