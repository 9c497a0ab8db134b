"""Main Tournament class - orchestrates all tournament operations.

This is the primary interface for tournament management, coordinating the
specialized services to provide one API for the command line tool.
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

from typing import Any, Dict, List, Optional, Tuple

from padeltournament.config import TournamentSettings
from padeltournament.controllers import (
    AssignmentService,
    FinalsService,
    MatchService,
    PairingGenerator,
    RankingProjector,
    RosterService,
    StandingsLedger,
)
from padeltournament.models import Group, Match, RankedRow, StandingRecord
from padeltournament.storage import InMemoryStore, TournamentStore
from padeltournament.utils import setup_logger

logger = setup_logger(__name__)


class Tournament:
    """Main tournament management class.

    This class coordinates all tournament operations through specialized services:
    - RosterService: players, teams and groups
    - AssignmentService: which team plays in which group
    - StandingsLedger: per-group standing records
    - MatchService: round-robin generation and score entry
    - FinalsService: the bracket stage
    - RankingProjector: ordered standings for display
    """

    def __init__(
        self,
        store: Optional[TournamentStore] = None,
        settings: Optional[TournamentSettings] = None,
    ) -> None:
        """Initialize a tournament over a store.

        Args
        ----
        store: Persistence backend; a fresh in-memory store when omitted
        settings: Tournament settings; defaults when omitted
        """
        self.settings = settings or TournamentSettings()
        self.store = store if store is not None else InMemoryStore()

        self.roster = RosterService(self.store)
        self.assignments = AssignmentService(self.store, self.roster)
        self.ledger = StandingsLedger(self.store)
        self.pairing_generator = PairingGenerator()
        self.matches = MatchService(
            self.store,
            self.ledger,
            pairing_generator=self.pairing_generator,
            min_games_to_win=self.settings.min_games_to_win,
        )
        self.finals = FinalsService(
            self.store, min_games_to_win=self.settings.min_games_to_win
        )
        self.projector = RankingProjector()

    # ========== Properties ==========

    @property
    def name(self) -> str:
        """Get tournament name."""
        return self.settings.name

    @property
    def is_started(self) -> bool:
        """Has the group stage been started (standings initialized)?"""
        return self.ledger.is_initialized()

    # ========== Group stage ==========

    def start(self) -> Tuple[List[StandingRecord], List[Match]]:
        """Start the group stage.

        Initializes the standings and generates the round-robin matches in
        one transaction; if either step fails nothing is created.

        Returns:
            Tuple of (created standing records, created matches)
        """
        with self.store.transaction():
            records = self.ledger.initialize()
            try:
                matches = self.matches.generate_round_robin()
            except Exception:
                self.ledger.clear()
                raise
        logger.info(
            f"Tournament '{self.name}' started: {len(records)} standings, "
            f"{len(matches)} matches"
        )
        return records, matches

    def reset_group_stage(self) -> Dict[str, int]:
        """Delete all standings and group matches so the stage can restart."""
        with self.store.transaction():
            standings = self.ledger.clear()
            matches = self.matches.clear_matches()
        return {"standings": standings, "matches": matches}

    def standings(self) -> List[Tuple[Group, List[RankedRow]]]:
        """Ranked standings of every group, groups sorted by name."""
        ranked = self.projector.project_by_group(self.store.list_standing_records())
        return [
            (group, ranked.get(group.id, []))
            for group in self.roster.list_groups()
            if group.id in ranked
        ]

    def summary(self) -> Dict[str, Any]:
        """Counts for the dashboard view."""
        counts = self.matches.match_counts()
        return {
            "name": self.name,
            "players": len(self.store.list_players()),
            "teams": len(self.store.list_teams()),
            "groups": len(self.store.list_groups()),
            "assigned_teams": len(self.store.list_assignments()),
            "started": self.is_started,
            "matches": counts["total"],
            "matches_pending": counts["pending"],
            "matches_completed": counts["completed"],
            "finals": len(self.store.list_finals()),
        }
