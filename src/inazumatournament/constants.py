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

# --- Constants ---
CSV_FILTER = "CSV Files (*.csv);;Text Files (*.txt)"
SETTINGS_FILE_EXTENSION = ".json"

# Reserved identifier of the human participant
PLAYER_ID = "Player"

# Tournament status strings (shown to the player as-is)
STATUS_ROUND = "Round {number}"
STATUS_GAME_OVER = "Game Over"
STATUS_CHAMPION = "{team} Wins the Tournament!"

# Difficulty tiers
MIN_TIER_LEVEL = 0
MAX_TIER_LEVEL = 255
MAX_TIERS_PER_OPPONENT = 4

# Win probability model
BASE_WIN_RATE = 0.5
MAX_LEVEL_BONUS = 50  # percentage points
MAX_WIN_RATE_MODIFIER = 100

# Opponent sources (game modes an opponent can be met in)
SOURCE_STORY = "Story"
SOURCE_FOOTBALL_FRONTIER = "Football Frontier"
SOURCE_EXTRA = "Extra"
DEFAULT_SOURCES = [SOURCE_STORY, SOURCE_FOOTBALL_FRONTIER, SOURCE_EXTRA]

# Series filter value meaning "every series"
ALL_SERIES = "ALL"

# Catalog CSV columns
CSV_COLUMN_TEAM = "team"
CSV_COLUMN_SERIES = "series"
CSV_COLUMN_SERIES_FULL = "series_full"
CSV_COLUMN_SOURCE = "source"
CSV_TIER_NAME_COLUMN = "difficulty_{index}"
CSV_TIER_LEVEL_COLUMN = "level_{index}"
CSV_REQUIRED_COLUMNS = [
    CSV_COLUMN_TEAM,
    CSV_COLUMN_SERIES,
    CSV_COLUMN_SOURCE,
]

# Default settings (initial values of the settings form)
DEFAULT_PLAYER_LEVEL = 50
DEFAULT_TEAM_COUNT = 8
DEFAULT_LEVEL_TOLERANCE_LOWER = 5
DEFAULT_LEVEL_TOLERANCE_UPPER = 5
DEFAULT_WIN_RATE_MODIFIER = 2
TEAM_COUNT_CHOICES = [2, 4, 8, 16, 32]

# Bundled opponent roster
DEFAULT_CATALOG_FILE = "opponents.csv"
