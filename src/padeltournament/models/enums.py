"""Enumerations shared by the tournament models."""

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

from enum import Enum

from padeltournament.constants import (
    FINAL_FINAL,
    FINAL_QUARTER,
    FINAL_SEMIS,
    FINAL_STAGE_NAMES,
    FINAL_STAGE_ORDER,
    STATUS_COMPLETED,
    STATUS_IN_PROGRESS,
    STATUS_PENDING,
)
from padeltournament.exceptions import ValidationError


class MatchStatus(str, Enum):
    """Lifecycle of a group-stage match."""

    PENDING = STATUS_PENDING
    IN_PROGRESS = STATUS_IN_PROGRESS
    COMPLETED = STATUS_COMPLETED

    @classmethod
    def parse(cls, value) -> "MatchStatus":
        """Coerce a raw status string, raising ValidationError when unknown."""
        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join(s.value for s in cls)
            raise ValidationError(
                f"Invalid match status {value!r} (expected one of: {allowed})"
            ) from None


class FinalType(str, Enum):
    """Bracket stage of a final match."""

    QUARTER = FINAL_QUARTER
    SEMIS = FINAL_SEMIS
    FINAL = FINAL_FINAL

    @property
    def display_name(self) -> str:
        return FINAL_STAGE_NAMES[self.value]

    @property
    def stage_index(self) -> int:
        """Position in play order (quarter first)."""
        return FINAL_STAGE_ORDER.index(self.value)

    @classmethod
    def parse(cls, value) -> "FinalType":
        """Coerce a raw stage string, raising ValidationError when unknown."""
        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join(s.value for s in cls)
            raise ValidationError(
                f"Invalid final type {value!r} (expected one of: {allowed})"
            ) from None
