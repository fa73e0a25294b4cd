"""
Solution Module - Result of strategy computation and cached solution management.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .board import SolvableArena
from .coverage import Coverage
from .move import Move


@dataclass
class SolutionMetrics:
    """
    Performance metrics for solution computation.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        states_explored: Number of arenas visited
        cache_hits: Number of arenas answered from the solved cache
        strategy_name: Name of strategy that computed this solution
    """
    computation_time_ms: float = 0.0
    states_explored: int = 0
    cache_hits: int = 0
    strategy_name: str = ""


@dataclass
class Solution:
    """
    Result of a strategy computation.

    Attributes:
        moves: Ordered sequence of moves to execute
        is_complete: True if the moves lead to a solved arena
        was_cancelled: True if stopped before completion
        turns_searched: Turn budget the solution was found with
        metrics: Performance statistics
        board_states: Arena after each move (first is initial)
        coverage: Attack areas for the final arena, if solved
    """
    moves: List[Move] = field(default_factory=list)
    is_complete: bool = False
    was_cancelled: bool = False
    turns_searched: int = 0
    metrics: SolutionMetrics = field(default_factory=SolutionMetrics)
    board_states: List[SolvableArena] = field(default_factory=list)
    coverage: Optional[Coverage] = None

    @property
    def move_count(self) -> int:
        """Number of moves in solution."""
        return len(self.moves)

    @property
    def has_moves(self) -> bool:
        """Check if solution has any moves."""
        return len(self.moves) > 0

    @property
    def final_board(self) -> Optional[SolvableArena]:
        """Arena after the last move."""
        return self.board_states[-1] if self.board_states else None

    def describe(self) -> str:
        """Moves in text form, comma separated."""
        return ", ".join(str(move) for move in self.moves)

    @classmethod
    def from_moves(cls, initial: SolvableArena, moves: List[Move], **kwargs) -> "Solution":
        """
        Build a complete solution by replaying moves on a copy of the arena.

        Args:
            initial: Arena before the first move (not modified)
            moves: Moves to replay
            **kwargs: Other Solution fields

        Returns:
            Solution with board states and final coverage filled in
        """
        board = initial.copy()
        board_states = [board.copy()]
        for move in moves:
            board.apply_move(move)
            board_states.append(board.copy())

        coverage = Coverage.find(board)
        return cls(
            moves=list(moves),
            is_complete=coverage is not None,
            board_states=board_states,
            coverage=coverage,
            **kwargs
        )


@dataclass
class CachedSolution:
    """
    Full solution with move queue and expected arenas for move-by-move playback.

    Wraps a Solution object and tracks progress through the move sequence,
    enabling validation that the arena still matches the plan.

    Attributes:
        solution: The complete solution from the planner
        move_index: Current position in move sequence (0 = first move)
    """
    solution: Solution
    move_index: int = 0

    @property
    def current_move(self) -> Optional[Move]:
        """Get next move to play, or None if exhausted."""
        if self.move_index < len(self.solution.moves):
            return self.solution.moves[self.move_index]
        return None

    @property
    def expected_board_before(self) -> Optional[SolvableArena]:
        """Get expected arena before current move executes."""
        if self.move_index < len(self.solution.board_states):
            return self.solution.board_states[self.move_index]
        return None

    @property
    def is_exhausted(self) -> bool:
        """True if all moves have been consumed."""
        return self.move_index >= len(self.solution.moves)

    @property
    def moves_remaining(self) -> int:
        """Number of moves left in the solution."""
        return max(0, len(self.solution.moves) - self.move_index)

    def advance(self) -> Optional[Move]:
        """
        Move to next move in sequence.

        Returns:
            The move that was just completed, or None if exhausted
        """
        if self.is_exhausted:
            return None
        completed_move = self.current_move
        self.move_index += 1
        return completed_move

    def peek_moves(self, count: int = 3) -> List[Move]:
        """
        Preview upcoming moves without advancing.

        Args:
            count: Number of moves to preview

        Returns:
            List of upcoming moves (may be shorter than count)
        """
        start = self.move_index
        end = min(start + count, len(self.solution.moves))
        return self.solution.moves[start:end]

    def validate_board_match(self, actual: SolvableArena) -> bool:
        """
        Check if the arena still matches the plan before the current move.

        Args:
            actual: The arena as it is now

        Returns:
            True if the arena equals the expected arena before the move
        """
        expected = self.expected_board_before
        if expected is None:
            return False
        return expected.key() == actual.key()
