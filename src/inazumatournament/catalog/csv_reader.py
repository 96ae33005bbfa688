"""CSV parsing for the opponent catalog.

Each row describes one team in one source (game mode) with up to four
difficulty tiers::

    team,series,series_full,source,difficulty_1,level_1,...,difficulty_4,level_4
    Raimon,IE1,Inazuma Eleven,Story,Normal,12,Hard,30,,,,
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

import csv
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from inazumatournament.constants import (
    CSV_COLUMN_SERIES,
    CSV_COLUMN_SERIES_FULL,
    CSV_COLUMN_SOURCE,
    CSV_COLUMN_TEAM,
    CSV_REQUIRED_COLUMNS,
    CSV_TIER_LEVEL_COLUMN,
    CSV_TIER_NAME_COLUMN,
    MAX_TIER_LEVEL,
    MAX_TIERS_PER_OPPONENT,
    MIN_TIER_LEVEL,
)
from inazumatournament.exceptions import DataUnavailableException
from inazumatournament.models.opponent import (
    DifficultyTier,
    Opponent,
    make_opponent_id,
)
from inazumatournament.utils import setup_logger

logger = setup_logger(__name__)


def parse_tier_level(value: str) -> Optional[int]:
    """Parse a tier level cell; None if it is not an integer in 0-255."""
    try:
        level = int(value.strip())
    except ValueError:
        return None
    if MIN_TIER_LEVEL <= level <= MAX_TIER_LEVEL:
        return level
    return None


def parse_tiers(row: Dict[str, Optional[str]], team_id: str = "") -> List[DifficultyTier]:
    """Extract the difficulty tiers of one CSV row.

    A (name, level) pair is kept only when both cells are filled in and the
    level is a valid integer. Malformed levels are skipped.
    """
    tiers = []
    for index in range(1, MAX_TIERS_PER_OPPONENT + 1):
        name = (row.get(CSV_TIER_NAME_COLUMN.format(index=index)) or "").strip()
        raw_level = (row.get(CSV_TIER_LEVEL_COLUMN.format(index=index)) or "").strip()
        if not name or not raw_level:
            continue
        level = parse_tier_level(raw_level)
        if level is None:
            logger.warning(
                "Skipping tier '%s' of %s: invalid level %r", name, team_id, raw_level
            )
            continue
        tiers.append(DifficultyTier(name=name, level=level))
    return tiers


def opponents_from_rows(rows: Iterable[Dict[str, Optional[str]]]) -> List[Opponent]:
    """Build deduplicated opponents from CSV rows.

    Rows without a team name are ignored. When two rows produce the same id
    the first one wins.
    """
    opponents: Dict[str, Opponent] = {}
    for row in rows:
        team = (row.get(CSV_COLUMN_TEAM) or "").strip()
        if not team:
            continue
        series = (row.get(CSV_COLUMN_SERIES) or "").strip()
        source = (row.get(CSV_COLUMN_SOURCE) or "").strip()
        opponent_id = make_opponent_id(team, series, source)
        if opponent_id in opponents:
            logger.debug("Ignoring duplicate opponent row for %s", opponent_id)
            continue
        opponents[opponent_id] = Opponent(
            id=opponent_id,
            team_name=team,
            series_short=series,
            series_full=(row.get(CSV_COLUMN_SERIES_FULL) or "").strip(),
            source=source,
            difficulties=parse_tiers(row, opponent_id),
        )
    return list(opponents.values())


def read_opponents_csv(path: Path) -> List[Opponent]:
    """Read the opponent catalog from a CSV file.

    Args:
        path: CSV file to read

    Returns:
        Opponents in file order

    Raises:
        DataUnavailableException: If the file cannot be read or lacks required columns
    """
    try:
        with open(path, "r", encoding="utf-8-sig", newline="") as f:
            reader = csv.DictReader(f)
            columns = reader.fieldnames or []
            missing = [c for c in CSV_REQUIRED_COLUMNS if c not in columns]
            if missing:
                raise DataUnavailableException(
                    f"Opponent file {path} is missing columns: {', '.join(missing)}"
                )
            opponents = opponents_from_rows(reader)
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise DataUnavailableException(f"Could not read opponent file {path}: {e}") from e

    logger.info("Loaded %d opponents from %s", len(opponents), path)
    return opponents
