"""Type hints used in Padel Tournament."""

from typing import Dict, List, Literal, Mapping, Sequence, Tuple, Union

# Store-assigned identifiers
TeamId = int
GroupId = int

# Status and bracket literals (for type hints)
MatchStatusValue = Literal["pending", "in_progress", "completed"]
FinalTypeValue = Literal["quarter", "semis", "final"]

# One (group_id, team_id) row of the assignment table
AssignmentRow = Tuple[GroupId, TeamId]
# Ordered team ids per group, the pairing generator input
AssignmentsByGroup = Mapping[GroupId, Sequence[TeamId]]
TeamsByGroup = Dict[GroupId, List[TeamId]]
# Score line as entered (team1_score, team2_score)
ScoreLine = Tuple[int, int]
