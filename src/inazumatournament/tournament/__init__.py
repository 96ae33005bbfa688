"""Tournament engine for Inazuma Tournament.

This package is the entry point presentation layers use to generate
tournaments, submit results and list eligible opponents.
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

from inazumatournament.controllers.tournament import PlayableOpponentsInfo
from inazumatournament.models.tournament import Match, Tournament, TournamentPhase
from inazumatournament.tournament.engine import (
    generate_tournament,
    get_playable_opponents_info,
    simulate_round,
    update_match_result,
)

__all__ = [
    "Tournament",
    "TournamentPhase",
    "Match",
    "PlayableOpponentsInfo",
    "generate_tournament",
    "get_playable_opponents_info",
    "update_match_result",
    "simulate_round",
]
