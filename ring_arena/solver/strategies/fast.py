"""
Fast Strategy - Returns the first move sequence that solves the arena.
"""

from ..base import SolverStrategy
from ..context import SolutionContext
from ..solution import Solution
from ..factory import register_strategy


@register_strategy
class FastStrategy(SolverStrategy):
    """
    Depth-first strategy that stops at the first solution.

    Moves are tried in the fixed search order, so the result is
    deterministic, but it may use larger rotations than needed.
    Without a fixed turn budget the budget grows one turn at a time,
    so the solution still has the fewest possible moves.
    """
    name = "fast"
    description = "Fast - First solution found in search order"
    timeout_sec = 60.0

    def solve(self, context: SolutionContext) -> Solution:
        """
        Compute the first solution in search order.

        Args:
            context: Solution context with arena and cancellation

        Returns:
            Solution with moves and metrics
        """
        return self._plan(context, fast=True)
