"""
Best Strategy - Exhaustive search for the smallest move sequence.
"""

from ..base import SolverStrategy
from ..context import SolutionContext
from ..solution import Solution
from ..factory import register_strategy


@register_strategy
class BestStrategy(SolverStrategy):
    """
    Exhaustive strategy that compares every solution within the budget.

    Prefers fewer moves, then smaller rotations and pushes (sum of the
    normalized amounts). Explores the whole search tree for the budget,
    so it is roughly the branching factor (96) slower per turn than
    the fast strategy.
    """
    name = "best"
    description = "Best (thorough) - Fewest moves, smallest turns"
    timeout_sec = 120.0

    def solve(self, context: SolutionContext) -> Solution:
        """
        Compute the best solution within the turn budget.

        Args:
            context: Solution context with arena and cancellation

        Returns:
            Solution with moves and metrics
        """
        return self._plan(context, fast=False)
