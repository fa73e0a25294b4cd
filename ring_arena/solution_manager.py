"""
Solution Manager Module - State machine for playing back a cached solution.

The manager computes a full move sequence once and then hands out one
move at a time. Before each move it checks that the arena still looks
the way the plan expects; any manual change invalidates the cache.

For the core solving logic, see the ring_arena.solver package.
"""

from enum import Enum, auto
from typing import List, Optional
import logging

from .solver import (
    CachedSolution, DEFAULT_MAX_TURNS, Move, Solution, SolutionContext,
    SolvableArena, SolverStrategy, create_strategy
)

logger = logging.getLogger(__name__)


__all__ = [
    "SolutionState",
    "SolutionManager",
]


class SolutionState(Enum):
    """
    State machine states for cached solution flow.

    States:
        NO_SOLUTION: Nothing cached (never solved, invalidated or unsolvable)
        MOVE_READY: A cached move is waiting to be played
        EXHAUSTED: Every cached move has been played
    """
    NO_SOLUTION = auto()
    MOVE_READY = auto()
    EXHAUSTED = auto()


class SolutionManager:
    """
    Cached solution manager.

    State Flow:
        NO_SOLUTION -> compute() -> MOVE_READY -> next_move() ... -> EXHAUSTED
              ^                         |
              |__ arena changed / invalidate_cache() __|
    """

    def __init__(self, strategy_name: str = "best", timeout_sec: Optional[float] = None,
                 max_turns: int = DEFAULT_MAX_TURNS):
        """
        Initialize solution manager.

        Args:
            strategy_name: Name of solving strategy to use (default "best")
            timeout_sec: Time limit for one computation, None for the
                strategy's own limit
            max_turns: Largest turn budget tried without a fixed budget
        """
        self.timeout_sec = timeout_sec
        self.max_turns = max_turns

        self._strategy: SolverStrategy = create_strategy(strategy_name)
        self._state = SolutionState.NO_SOLUTION
        self._cached_solution: Optional[CachedSolution] = None
        self._last_solution: Optional[Solution] = None

    @property
    def strategy(self) -> SolverStrategy:
        """Get current solving strategy."""
        return self._strategy

    @property
    def strategy_name(self) -> str:
        """Get current strategy name."""
        return self._strategy.name

    def set_strategy(self, strategy_name: str) -> None:
        """
        Change the solving strategy.

        Raises:
            ValueError: If the strategy is unknown
        """
        self._strategy = create_strategy(strategy_name)
        logger.info(f"Strategy changed to: {strategy_name}")

    @property
    def state(self) -> SolutionState:
        """Get current state machine state."""
        return self._state

    @property
    def cached_solution(self) -> Optional[CachedSolution]:
        """Get current cached solution."""
        return self._cached_solution

    @property
    def last_solution(self) -> Optional[Solution]:
        """Get the result of the last computation, solved or not."""
        return self._last_solution

    @property
    def moves_remaining(self) -> int:
        """Number of moves remaining in cached solution."""
        if self._cached_solution is None:
            return 0
        return self._cached_solution.moves_remaining

    def timeout_for(self, strategy: SolverStrategy) -> float:
        """Time limit for a computation with the given strategy."""
        if self.timeout_sec is not None:
            return self.timeout_sec
        return strategy.timeout_sec

    def compute(self, arena: SolvableArena, turns: Optional[int] = None,
                strategy_name: Optional[str] = None) -> Solution:
        """
        Compute and cache a solution for the arena.

        Args:
            arena: Arena to solve (not modified)
            turns: Fixed turn budget, or None for the fewest turns
            strategy_name: Strategy for this computation only

        Returns:
            The computed Solution (check is_complete / was_cancelled)
        """
        strategy = self._strategy
        if strategy_name is not None:
            strategy = create_strategy(strategy_name)

        context = SolutionContext(
            board=arena.copy(),
            turns=turns,
            max_turns=self.max_turns,
            timeout_sec=self.timeout_for(strategy),
        )
        logger.info(f"Computing solution with {strategy.name} (turns={turns})")
        solution = strategy.solve(context)
        self._last_solution = solution

        if solution.is_complete:
            self._cached_solution = CachedSolution(solution=solution)
            self._update_state()
        else:
            self._cached_solution = None
            self._state = SolutionState.NO_SOLUTION
        return solution

    def next_move(self, arena: SolvableArena) -> Optional[Move]:
        """
        Take the next cached move if the arena still matches the plan.

        Args:
            arena: The arena as it is now

        Returns:
            Move to play next, or None if nothing is cached, the cache is
            exhausted or it was invalidated by a change to the arena
        """
        cached = self._cached_solution
        if cached is None or cached.is_exhausted:
            return None

        if not cached.validate_board_match(arena):
            logger.info("Arena differs from the plan, invalidating cached solution")
            self.invalidate_cache()
            return None

        move = cached.advance()
        self._update_state()
        logger.debug(f"Next move: {move} ({cached.moves_remaining} remaining)")
        return move

    def peek_next_moves(self, count: int = 3) -> List[Move]:
        """Preview upcoming moves without advancing."""
        if self._cached_solution is None:
            return []
        return self._cached_solution.peek_moves(count)

    def invalidate_cache(self) -> None:
        """Drop the cached solution."""
        self._cached_solution = None
        self._state = SolutionState.NO_SOLUTION

    def reset(self) -> None:
        """Forget everything except the strategy."""
        self.invalidate_cache()
        self._last_solution = None

    def _update_state(self) -> None:
        if self._cached_solution is None:
            self._state = SolutionState.NO_SOLUTION
        elif self._cached_solution.is_exhausted:
            self._state = SolutionState.EXHAUSTED
        else:
            self._state = SolutionState.MOVE_READY
