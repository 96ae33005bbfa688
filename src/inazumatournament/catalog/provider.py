"""Opponent catalog providers.

A catalog supplies every opponent the game knows about, each with its full
list of difficulty tiers. The tournament engine awaits one fetch per bracket.
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

import asyncio
import copy
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, List, Optional, Union

from inazumatournament.catalog.csv_reader import read_opponents_csv
from inazumatournament.constants import ALL_SERIES, DEFAULT_CATALOG_FILE
from inazumatournament.models.opponent import Opponent
from inazumatournament.resources.resource_utils import get_resource_path
from inazumatournament.utils import setup_logger

logger = setup_logger(__name__)


class OpponentCatalog(ABC):
    """Source of opponent records."""

    @abstractmethod
    async def fetch_opponents(self) -> List[Opponent]:
        """Fetch every opponent with its full tier list.

        Raises:
            DataUnavailableException: If the data cannot be read or parsed
        """


class StaticOpponentCatalog(OpponentCatalog):
    """Catalog backed by an in-memory list of opponents."""

    def __init__(self, opponents: Iterable[Opponent]):
        self._opponents = list(opponents)

    async def fetch_opponents(self) -> List[Opponent]:
        # Callers get their own copies so the catalog cannot be mutated through them
        return copy.deepcopy(self._opponents)


class CsvOpponentCatalog(OpponentCatalog):
    """Catalog read from a CSV file.

    The file is parsed on a worker thread so the event loop is not blocked.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    async def fetch_opponents(self) -> List[Opponent]:
        logger.debug("Fetching opponents from %s", self.path)
        return await asyncio.to_thread(read_opponents_csv, self.path)

    def __repr__(self) -> str:
        return f"CsvOpponentCatalog({str(self.path)!r})"


def default_catalog() -> CsvOpponentCatalog:
    """Catalog of the opponent roster bundled with the application."""
    return CsvOpponentCatalog(get_resource_path(DEFAULT_CATALOG_FILE))


# ========== Listing helpers ==========


def filter_catalog(
    opponents: Iterable[Opponent],
    sources: Optional[Iterable[str]] = None,
    series: Optional[str] = None,
) -> List[Opponent]:
    """Filter opponents for display by source and series.

    Args:
        opponents: Opponents to filter
        sources: Allowed sources; None allows every source
        series: Short series name; None or "ALL" allows every series

    Returns:
        Matching opponents in their original order
    """
    allowed = set(sources) if sources is not None else None
    result = []
    for opponent in opponents:
        if allowed is not None and opponent.source not in allowed:
            continue
        if series not in (None, ALL_SERIES) and opponent.series_short != series:
            continue
        result.append(opponent)
    return result


def list_series(opponents: Iterable[Opponent]) -> List[str]:
    """Distinct short series names in catalog order."""
    seen: List[str] = []
    for opponent in opponents:
        if opponent.series_short and opponent.series_short not in seen:
            seen.append(opponent.series_short)
    return seen


def sort_by_id(opponents: Iterable[Opponent]) -> List[Opponent]:
    """Opponents sorted alphabetically by id."""
    return sorted(opponents, key=lambda o: o.id)
