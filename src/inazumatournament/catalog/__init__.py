"""Opponent catalog: where tournament opponents come from."""

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

from inazumatournament.catalog.csv_reader import (
    opponents_from_rows,
    parse_tiers,
    read_opponents_csv,
)
from inazumatournament.catalog.provider import (
    CsvOpponentCatalog,
    OpponentCatalog,
    StaticOpponentCatalog,
    default_catalog,
    filter_catalog,
    list_series,
    sort_by_id,
)

__all__ = [
    "OpponentCatalog",
    "CsvOpponentCatalog",
    "StaticOpponentCatalog",
    "default_catalog",
    "filter_catalog",
    "list_series",
    "sort_by_id",
    "opponents_from_rows",
    "parse_tiers",
    "read_opponents_csv",
]
