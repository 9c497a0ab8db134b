"""
Unified printing utilities for tournament views.
This module renders standings, matches, finals and the assignment grid as plain-text tables.
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

from typing import Dict, Iterable, List, Mapping, Sequence

from padeltournament.models import (
    FinalMatch,
    FinalType,
    Group,
    GroupWithTeams,
    Match,
    RankedRow,
)


def format_table(headers: Sequence[str], rows: Iterable[Sequence]) -> str:
    """Render rows as a left-aligned text table with a header rule."""
    rows = [[str(cell) for cell in row] for row in rows]
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    def line(cells: Sequence[str]) -> str:
        return "  ".join(cell.ljust(widths[i]) for i, cell in enumerate(cells)).rstrip()

    out = [line(headers), line(["-" * w for w in widths])]
    out.extend(line(row) for row in rows)
    return "\n".join(out)


def format_difference(value: int) -> str:
    """Game difference with an explicit sign, e.g. ``+5``."""
    return f"+{value}" if value > 0 else str(value)


def format_standings(
    group: Group, rows: Sequence[RankedRow], labels: Mapping[int, str]
) -> str:
    """Standings table of one group."""
    body = [
        [
            row.position,
            labels.get(row.team_id, f"Team {row.team_id}"),
            row.record.matches_played,
            row.record.matches_won,
            row.record.matches_lost,
            row.record.games_won,
            row.record.games_lost,
            format_difference(row.game_difference),
        ]
        for row in rows
    ]
    table = format_table(["#", "Team", "P", "W", "L", "GW", "GL", "Diff"], body)
    return f"{group.name}\n{table}"


def format_matches(
    matches: Sequence[Match],
    labels: Mapping[int, str],
    group_names: Mapping[int, str],
) -> str:
    body = [
        [
            m.id,
            group_names.get(m.group_id, m.group_id),
            labels.get(m.team1_id, m.team1_id),
            labels.get(m.team2_id, m.team2_id),
            m.score_display(),
            m.status.value,
            labels.get(m.winner_id, "") if m.winner_id is not None else "",
        ]
        for m in matches
    ]
    return format_table(["ID", "Group", "Team 1", "Team 2", "Score", "Status", "Winner"], body)


def format_finals(
    stages: Dict[FinalType, List[FinalMatch]], labels: Mapping[int, str]
) -> str:
    sections = []
    for stage, finals in stages.items():
        if not finals:
            continue
        body = [
            [
                f.id,
                labels.get(f.team1_id, f.team1_id),
                labels.get(f.team2_id, f.team2_id),
                f.score_display(),
                labels.get(f.winner_id, "") if f.winner_id is not None else "",
            ]
            for f in finals
        ]
        table = format_table(["ID", "Team 1", "Team 2", "Score", "Winner"], body)
        sections.append(f"{stage.display_name}\n{table}")
    return "\n\n".join(sections)


def format_assignment_grid(grid: Sequence[GroupWithTeams]) -> str:
    sections = []
    for entry in grid:
        lines = [f"{entry.group.name} ({len(entry.assigned_team_ids)} teams)"]
        for cell in entry.teams:
            mark = "[x]" if cell.assigned else "[ ]"
            lines.append(f"  {mark} {cell.team_id:>3}  {cell.label}")
        sections.append("\n".join(lines))
    return "\n\n".join(sections)
