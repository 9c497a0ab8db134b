"""Ranking projection for group standings.

This module turns standing records into the ordered table shown to players.
"""

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

from dataclasses import replace
from typing import Dict, Iterable, List, Tuple

from padeltournament.models import RankedRow, StandingRecord


class RankingProjector:
    """Orders standing records into a ranking table.

    Criteria, in priority order:
    - Matches won (more is better)
    - Game difference, games won minus games lost (more is better)
    - Input order; there is no further tie-break

    Projection is pure. Records are copied before they are placed in rows,
    and Python's sort is stable, so equal teams keep their relative input
    order and two calls on the same input give equal output.
    """

    @staticmethod
    def sort_key(record: StandingRecord) -> Tuple[int, int]:
        return (-record.matches_won, -record.game_difference)

    def project(self, records: Iterable[StandingRecord]) -> List[RankedRow]:
        """Rank the records of one group.

        Args:
            records: Standing records of a single group

        Returns:
            Rows with 1-based positions, best team first
        """
        ordered = sorted(records, key=self.sort_key)
        return [
            RankedRow(
                position=index,
                record=replace(record),
                game_difference=record.game_difference,
            )
            for index, record in enumerate(ordered, start=1)
        ]

    def project_by_group(
        self, records: Iterable[StandingRecord]
    ) -> Dict[int, List[RankedRow]]:
        """Rank records of several groups, each group on its own.

        Groups appear in first-seen order of the input.
        """
        by_group: Dict[int, List[StandingRecord]] = {}
        for record in records:
            by_group.setdefault(record.group_id, []).append(record)
        return {group_id: self.project(rows) for group_id, rows in by_group.items()}
