"""
Elimination engine: trivial check, max-flow check and per-team memoization.
"""

import logging
import threading
from typing import List, Optional

from .division import Division, TeamRef
from .flow_network import build_network
from .maxflow import FordFulkerson
from .models import EliminationResult, TRIVIAL, FLOW


logger = logging.getLogger(__name__)


class EliminationEngine:
    """
    Answers elimination queries for a division.

    Each team's result is computed on its first query and kept for the
    lifetime of the engine. Queries for the same team from several threads
    compute it once; different teams never block each other.
    """

    def __init__(self, division: Division):
        self.division = division
        n = division.team_count()
        self._computed: List[bool] = [False] * n
        self._results: List[Optional[EliminationResult]] = [None] * n
        self._locks = [threading.Lock() for _ in range(n)]

    def is_eliminated(self, team: TeamRef) -> bool:
        return self.result(team).eliminated

    def certificate_of_elimination(self, team: TeamRef) -> Optional[List[str]]:
        """
        Subset of teams whose results prove that team is eliminated.

        Names come back in division order. Returns None if the team is not
        eliminated.
        """
        result = self.result(team)
        if not result.eliminated:
            return None
        return list(result.certificate)

    def result(self, team: TeamRef) -> EliminationResult:
        index = self.division.team(team).index
        if self._computed[index]:
            return self._results[index]

        with self._locks[index]:
            if not self._computed[index]:
                self._results[index] = self._compute_elimination(index)
                self._computed[index] = True
        return self._results[index]

    def results(self) -> List[EliminationResult]:
        """Results for every team, in division order."""
        return [self.result(index) for index in range(self.division.team_count())]

    def _compute_elimination(self, index: int) -> EliminationResult:
        name = self.division.name(index)

        certificate = self._trivial_elimination(index)
        if certificate:
            logger.debug("%s trivially eliminated by %s", name, certificate)
            return EliminationResult(team=name, eliminated=True, certificate=tuple(certificate), method=TRIVIAL)

        setup = build_network(self.division, index)
        maxflow = FordFulkerson(setup.network, setup.source, setup.sink)
        logger.debug(
            "%s: max flow %d of %d remaining games (%d game vertices)",
            name, maxflow.value(), setup.total_other_remaining, setup.game_vertices
        )

        if maxflow.value() < setup.total_other_remaining:
            certificate = [
                self.division.name(other)
                for other in range(self.division.team_count())
                if other != index and maxflow.in_cut(other)
            ]
            logger.debug("%s eliminated by %s", name, certificate)
            return EliminationResult(team=name, eliminated=True, certificate=tuple(certificate), method=FLOW)

        return EliminationResult(team=name)

    def _trivial_elimination(self, index: int) -> List[str]:
        """Every team that already has more wins than this team can possibly reach."""
        best_possible = self.division.team(index).max_wins
        return [
            other.name
            for other in (self.division.team(i) for i in range(self.division.team_count()))
            if other.index != index and best_possible < other.wins
        ]
