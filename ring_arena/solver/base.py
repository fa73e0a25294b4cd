"""
Base Strategy Module - Abstract base class for solving strategies.
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import List, Optional

from .context import SolutionContext
from .move import Move
from .planner import SearchCancelled, SearchStats, solve, solve_iteratively
from .solution import Solution, SolutionMetrics

logger = logging.getLogger(__name__)


class SolverStrategy(ABC):
    """
    Abstract base class for all solving strategies.

    Subclasses must implement the solve() method and define
    name and description class attributes.

    Attributes:
        name: Short identifier for the strategy
        description: Human-readable description for UI
        timeout_sec: Time limit used when the caller does not set one
    """
    name: str = "base"
    description: str = "Base strategy"
    timeout_sec: float = 20.0

    @abstractmethod
    def solve(self, context: SolutionContext) -> Solution:
        """
        Compute a move sequence for the arena in the context.

        Must stop when context.is_cancelled() returns True and report
        the solution as cancelled.

        Args:
            context: Solution context with arena, turns, cancellation

        Returns:
            Solution with moves and metrics
        """
        pass

    def _plan(self, context: SolutionContext, fast: bool) -> Solution:
        """
        Run the move planner with the budget from the context.

        Uses the fixed turn budget when one is given, otherwise searches
        with growing budgets up to context.max_turns.
        """
        start_time = time.perf_counter()
        stats = SearchStats()
        moves: Optional[List[Move]] = None
        turns = context.turns or 0

        try:
            if context.turns is not None:
                moves = solve(context.board, context.turns, fast, context=context, stats=stats)
            else:
                found = solve_iteratively(
                    context.board, context.max_turns, fast, context=context, stats=stats
                )
                if found is not None:
                    turns, moves = found
        except SearchCancelled:
            logger.warning(
                f"{self.name}: search cancelled after {context.elapsed_time():.1f}s "
                f"({stats.nodes} arenas explored)"
            )
            return self._build_solution(None, context, turns, stats, start_time, was_cancelled=True)

        return self._build_solution(moves, context, turns, stats, start_time, was_cancelled=False)

    def _build_solution(
        self,
        moves: Optional[List[Move]],
        context: SolutionContext,
        turns: int,
        stats: SearchStats,
        start_time: float,
        was_cancelled: bool
    ) -> Solution:
        """Build Solution object from computation results."""
        elapsed_ms = (time.perf_counter() - start_time) * 1000
        metrics = SolutionMetrics(
            computation_time_ms=elapsed_ms,
            states_explored=stats.nodes,
            cache_hits=stats.cache_hits,
            strategy_name=self.name
        )

        if moves is None:
            logger.info(f"{self.name}: no solution ({stats.nodes} arenas, {elapsed_ms:.0f}ms)")
            return Solution(
                was_cancelled=was_cancelled,
                turns_searched=turns,
                metrics=metrics,
                board_states=[context.board.copy()],
            )

        solution = Solution.from_moves(
            context.board, moves, turns_searched=turns, metrics=metrics
        )
        logger.info(
            f"{self.name}: {solution.move_count} moves [{solution.describe()}] "
            f"({stats.nodes} arenas, {elapsed_ms:.0f}ms)"
        )
        return solution
