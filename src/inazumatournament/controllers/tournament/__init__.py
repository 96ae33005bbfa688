"""Tournament controllers: eligibility, bracket building, matches and rounds."""

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

from inazumatournament.controllers.tournament.bracket_builder import (
    build_bracket,
    draw_opponents,
    pair_teams,
)
from inazumatournament.controllers.tournament.eligibility import (
    PlayableOpponentsInfo,
    filter_eligible_opponents,
    playable_opponents_info,
    select_difficulty,
)
from inazumatournament.controllers.tournament.match_resolver import (
    level_bonus,
    resolve_computer_matches,
    resolve_match,
    stronger_win_rate,
)
from inazumatournament.controllers.tournament.round_advancer import (
    advance_if_complete,
    simulate_round,
    submit_match_result,
)

__all__ = [
    "PlayableOpponentsInfo",
    "filter_eligible_opponents",
    "playable_opponents_info",
    "select_difficulty",
    "build_bracket",
    "draw_opponents",
    "pair_teams",
    "level_bonus",
    "stronger_win_rate",
    "resolve_match",
    "resolve_computer_matches",
    "advance_if_complete",
    "submit_match_result",
    "simulate_round",
]
