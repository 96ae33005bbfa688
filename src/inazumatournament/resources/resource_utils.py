"""Locate files bundled with the package."""

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

from pathlib import Path
from typing import Optional

RESOURCES_DIR = Path(__file__).resolve().parent


def get_resource_path(name: str, subpackage: Optional[str] = None) -> Path:
    """Path of a bundled resource file.

    Args:
        name: File name
        subpackage: Optional sub-directory of the resources package

    Returns:
        Absolute path to the resource (not checked for existence)
    """
    base = RESOURCES_DIR / subpackage if subpackage else RESOURCES_DIR
    return base / name
