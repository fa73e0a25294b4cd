"""
Planner Module - Turn-limited search for moves that solve the arena.

The search tries every move in a fixed order, depth first, and remembers
which arenas are already solved so that sibling branches can skip them.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Hashable, Iterator, List, Optional, Sequence, Tuple

from .board import SolvableArena
from .context import SolutionContext
from .move import Move
from .position import Axis

logger = logging.getLogger(__name__)

# Upper bound for iterative deepening when no turn budget is given
DEFAULT_MAX_TURNS = 100

SolvedCache = Dict[Hashable, bool]


class SearchCancelled(Exception):
    """Raised inside the search when the context asks it to stop."""


@dataclass
class SearchStats:
    """
    Counters collected during one search.

    Attributes:
        nodes: Arenas visited
        cache_hits: Arenas found in the solved cache
        evaluations: Coverage searches run
    """
    nodes: int = 0
    cache_hits: int = 0
    evaluations: int = 0


def iter_moves() -> Iterator[Move]:
    """
    Enumerate the move alphabet in search order.

    Ring moves come before slot moves, coordinates ascend, and amounts run
    from 1 up to the size of the other axis. Only positive moves are
    listed: every negative move reaches the same arena as some positive one.
    """
    for axis in (Axis.RING, Axis.SLOT):
        for coordinate in range(axis.size):
            for amount in range(1, axis.changes.size + 1):
                yield Move(axis=axis, coordinate=coordinate, amount=amount, positive=True)


def _move_weight(moves: Sequence[Move]) -> int:
    return sum(move.normalized().amount for move in moves)


def is_better(candidate: Sequence[Move], current: Optional[Sequence[Move]]) -> bool:
    """
    Compare two solutions.

    Fewer moves win; on equal length the smaller total of normalized
    amounts wins. Ties keep the current solution.
    """
    if current is None:
        return True
    if len(candidate) != len(current):
        return len(candidate) < len(current)
    return _move_weight(candidate) < _move_weight(current)


def solve(arena: SolvableArena, turns: int, fast: bool = False,
          cache: Optional[SolvedCache] = None,
          context: Optional[SolutionContext] = None,
          stats: Optional[SearchStats] = None) -> Optional[List[Move]]:
    """
    Find moves that turn the arena into a solved one.

    Args:
        arena: Arena to solve (not modified)
        turns: Maximum number of moves
        fast: Return the first solution found instead of the best one
        cache: Solved flags per arena, shared across calls
        context: Optional context polled for cancellation
        stats: Optional counters updated during the search

    Returns:
        Moves to make (empty if already solved), or None if the arena
        cannot be solved within the given turns

    Raises:
        SearchCancelled: If the context was cancelled or timed out
    """
    if cache is None:
        cache = {}
    if stats is None:
        stats = SearchStats()
    return _solve(arena, arena.key(), turns, fast, cache, context, stats)


def _solve(arena: SolvableArena, key: Hashable, turns: int, fast: bool, cache: SolvedCache,
           context: Optional[SolutionContext], stats: SearchStats) -> Optional[List[Move]]:
    if context is not None and context.is_cancelled():
        raise SearchCancelled()

    stats.nodes += 1
    solved = cache.get(key)
    if solved is not None:
        stats.cache_hits += 1
        if solved:
            return []
    else:
        stats.evaluations += 1
        solved = arena.is_solved()
        cache[key] = solved
        if solved:
            return []

    if turns == 0:
        return None

    best: Optional[List[Move]] = None
    for move in iter_moves():
        next_arena = arena.moved(move)
        next_key = next_arena.key()
        # a move that changes nothing never shortens the best plan
        if not fast and next_key == key:
            continue

        solution = _solve(next_arena, next_key, turns - 1, fast, cache, context, stats)
        if solution is None:
            continue

        solution.insert(0, move)
        if fast:
            return solution
        if is_better(solution, best):
            best = solution

    return best


def solve_iteratively(arena: SolvableArena, max_turns: int = DEFAULT_MAX_TURNS,
                      fast: bool = False,
                      context: Optional[SolutionContext] = None,
                      stats: Optional[SearchStats] = None) -> Optional[Tuple[int, List[Move]]]:
    """
    Find a solution with as few turns as possible.

    Tries turn budgets 1, 2, ... max_turns with one shared cache and stops
    at the first budget that yields a solution.

    Args:
        arena: Arena to solve
        max_turns: Largest budget to try
        fast: Passed on to solve()
        context: Optional context polled for cancellation and progress
        stats: Optional counters updated during the search

    Returns:
        (turn budget, moves) of the first solution, or None

    Raises:
        SearchCancelled: If the context was cancelled or timed out
    """
    cache: SolvedCache = {}
    if stats is None:
        stats = SearchStats()

    for turns in range(1, max_turns + 1):
        if context is not None:
            context.report_progress(turns / max_turns, f"searching {turns} turns")
        logger.debug(f"Searching with {turns} turns ({stats.nodes} nodes so far)")

        solution = solve(arena, turns, fast, cache, context, stats)
        if solution is not None:
            return turns, solution

    return None
