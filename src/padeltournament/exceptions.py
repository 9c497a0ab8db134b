"""Exceptions for use in Padel Tournament"""

# Padel Tournament
# Copyright (C) 2025  Padel Tournament developers
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


class PadelTournamentException(Exception):
    """Base exception for all Padel Tournament errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Validation Exceptions ==========


class ValidationError(PadelTournamentException):
    """Raised for malformed or out-of-range input.

    Negative, tied or sub-threshold scores, a team paired with itself, a
    blank name. Nothing is mutated when this is raised.
    """

    pass


class TeamAlreadyAssignedError(ValidationError):
    """Raised when assigning a team that already belongs to another group."""

    def __init__(self, team_id: int, group_id: int):
        super().__init__(f"Team {team_id} is already assigned to group {group_id}")
        self.team_id = team_id
        self.group_id = group_id


# ========== Tournament State Exceptions ==========


class TournamentStateException(PadelTournamentException):
    """Raised when the tournament is in an invalid state for the requested operation."""

    pass


class AlreadyInitializedError(TournamentStateException):
    """Raised when standings are initialized while records already exist."""

    pass


class NoAssignmentsError(TournamentStateException):
    """Raised when an operation needs at least one team-to-group assignment."""

    pass


# ========== Result Exceptions ==========


class ResultException(PadelTournamentException):
    """Base exception for result recording errors."""

    pass


class DuplicateResultError(ResultException):
    """Raised when a score is submitted for an already completed match."""

    pass


class RecordNotFoundError(ResultException):
    """Raised when a team playing a match has no standing record in its group.

    This means the store and the ledger have diverged and is treated as an
    integrity failure rather than a user error.
    """

    def __init__(self, group_id: int, team_ids):
        team_list = ", ".join(str(t) for t in team_ids)
        super().__init__(
            f"No standing record for team(s) {team_list} in group {group_id}"
        )
        self.group_id = group_id
        self.team_ids = tuple(team_ids)


# ========== Store Exceptions ==========


class EntityNotFoundError(PadelTournamentException):
    """Raised when a requested player, team, group, match or final does not exist."""

    def __init__(self, entity: str, entity_id):
        super().__init__(f"{entity} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class StoreException(PadelTournamentException):
    """Base exception for persistence errors."""

    pass


class FileLoadException(StoreException):
    """Raised when a tournament file cannot be loaded."""

    pass


class FileSaveException(StoreException):
    """Raised when a tournament file cannot be saved."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(PadelTournamentException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass


class MissingConfigurationException(ConfigurationException):
    """Raised when required configuration is missing."""

    pass
