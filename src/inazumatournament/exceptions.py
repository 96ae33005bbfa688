"""Exceptions for use in Inazuma Tournament"""

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


# ========== Base Application Exception ==========


class InazumaTournamentException(Exception):
    """Base exception for all Inazuma Tournament errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Catalog Exceptions ==========


class CatalogException(InazumaTournamentException):
    """Base exception for opponent catalog errors."""

    pass


class DataUnavailableException(CatalogException):
    """Raised when the opponent catalog cannot be fetched or parsed."""

    pass


# ========== Tournament Exceptions ==========


class TournamentException(InazumaTournamentException):
    """Base exception for tournament-related errors."""

    pass


class TournamentStateException(TournamentException):
    """Raised when tournament is in an invalid state for the requested operation."""

    pass


class InsufficientOpponentsException(TournamentException):
    """Raised when too few eligible opponents exist for the requested team count.

    Attributes
    ----------
    required : int
        Number of opponents the bracket needs.
    available : int
        Number of eligible opponents found.
    """

    def __init__(self, required: int, available: int):
        self.required = required
        self.available = available
        super().__init__(
            f"Not enough opponents: {required} required but only "
            f"{available} available. Lower the team count or broaden the settings."
        )


class IndexOutOfRangeException(TournamentException, IndexError):
    """Raised when a round or match index does not exist."""

    pass


class PlayerMatchException(TournamentException):
    """Raised when a player match is handed to the automatic resolver."""

    pass


# ========== Result Exceptions ==========


class ResultException(InazumaTournamentException):
    """Base exception for result recording errors."""

    pass


class InvalidResultException(ResultException):
    """Raised when a submitted winner did not play in the match."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(InazumaTournamentException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass


class MissingConfigurationException(ConfigurationException):
    """Raised when required configuration is missing."""

    pass
