"""
Solver Package - Ring arena model, coverage search and move planner.

This package models the ring arena (4 rotating rings crossed by 12
push/pull spokes), decides whether the enemies on it can all be defeated
by the available attack groups, and searches for short move sequences
that bring the arena into such a state.

Public API:
    - Axis, Position: Board coordinates
    - Move: Ring rotation or spoke push
    - Arena: Generic position-keyed container
    - Enemy, RequiredAttack, AvailableEquipment, SolvableArena: Board state
    - Coverage: Attack area assignment (Coverage.find)
    - solve(), solve_iteratively(): Move planner
    - Solution, SolutionContext, SolverStrategy: Strategy framework
    - create_strategy(): Factory function

Usage:
    from ring_arena.solver import SolvableArena, Enemy, Position, solve

    arena = SolvableArena()
    arena.add(Enemy(Position.at(0, 1)))
    moves = solve(arena, turns=2)
    print(", ".join(str(move) for move in moves))
"""

# Core data structures
from .position import Axis, OutOfRangeError, Position, RING_COUNT, SLOT_COUNT
from .move import Move, MoveParseError, MoveParseErrorKind
from .arena import Arena, Placeable
from .board import (
    ALL_ATTACKS,
    Attack,
    AvailableEquipment,
    Enemy,
    RequiredAttack,
    SolvableArena,
    enemies_in_slot,
)
from .coverage import Coverage, EnemyArea, LongArea, WideArea
from .context import SolutionContext
from .planner import (
    DEFAULT_MAX_TURNS,
    SearchCancelled,
    SearchStats,
    is_better,
    iter_moves,
    solve,
    solve_iteratively,
)
from .solution import CachedSolution, Solution, SolutionMetrics

# Strategy framework
from .base import SolverStrategy
from .factory import (
    create_strategy,
    get_strategy_names,
    get_strategy_info,
    get_default_strategy_name,
    register_strategy,
)

# Import strategies to register them
from . import strategies

__all__ = [
    # Board model
    "Axis",
    "OutOfRangeError",
    "Position",
    "RING_COUNT",
    "SLOT_COUNT",
    "Move",
    "MoveParseError",
    "MoveParseErrorKind",
    "Arena",
    "Placeable",
    "ALL_ATTACKS",
    "Attack",
    "AvailableEquipment",
    "Enemy",
    "RequiredAttack",
    "SolvableArena",
    "enemies_in_slot",
    # Solving
    "Coverage",
    "EnemyArea",
    "LongArea",
    "WideArea",
    "DEFAULT_MAX_TURNS",
    "SearchCancelled",
    "SearchStats",
    "is_better",
    "iter_moves",
    "solve",
    "solve_iteratively",
    # Strategy framework
    "CachedSolution",
    "Solution",
    "SolutionMetrics",
    "SolutionContext",
    "SolverStrategy",
    "create_strategy",
    "get_strategy_names",
    "get_strategy_info",
    "get_default_strategy_name",
    "register_strategy",
]
