"""
Tests for the command interpreter, the arena diagram and the solution manager.
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from ring_arena.commands import CommandError, CommandInterpreter, HELP_TEXT
from ring_arena.display import render_arena
from ring_arena.solution_manager import SolutionManager, SolutionState
from ring_arena.solver import Move, Position, RequiredAttack, Solution, SolvableArena


def run(interpreter: CommandInterpreter, *lines: str) -> str:
    output = ""
    for line in lines:
        output = interpreter.execute(line)
    return output


def test_add_enemies():
    interpreter = CommandInterpreter()

    run(interpreter, "c2 124", "c3 3 J")

    arena = interpreter.arena
    assert len(arena) == 4
    assert arena.get_at(Position.at(3, 1)).required_attack is None
    assert arena.get_at(Position.at(2, 2)).required_attack is RequiredAttack.JUMP


def test_add_replaces_requirement():
    interpreter = CommandInterpreter()

    run(interpreter, "c1 1", "c1 1 h")

    assert len(interpreter.arena) == 1
    assert interpreter.arena.get_at(Position.at(0, 0)).required_attack is RequiredAttack.HAMMER


def test_remove_enemies():
    interpreter = CommandInterpreter()

    run(interpreter, "c2 1234", "- c2 24", "undo c2 1")

    assert interpreter.arena.positions() == [Position.at(2, 1)]


def test_groups_and_equipment():
    interpreter = CommandInterpreter()

    assert run(interpreter, "g 3") == "set enemy groups to 3"
    run(interpreter, "-hammer", "-boots")
    assert interpreter.arena.num_groups == 3
    assert not interpreter.arena.available_equipment.throwing_hammer
    assert not interpreter.arena.available_equipment.iron_boots

    run(interpreter, "+hammer")
    assert interpreter.arena.available_equipment.throwing_hammer


def test_execute_move():
    interpreter = CommandInterpreter()

    run(interpreter, "c3 3", "e r3 -1")

    assert interpreter.arena.positions() == [Position.at(2, 1)]


def test_clear():
    interpreter = CommandInterpreter()
    run(interpreter, "c2 124", "g 5")

    assert run(interpreter, "clear") == "arena has been cleared"
    assert len(interpreter.arena) == 0
    assert interpreter.arena.num_groups is None


def test_help_and_empty_line():
    interpreter = CommandInterpreter()
    assert run(interpreter, "?") == HELP_TEXT
    assert run(interpreter, "   ") == ""


@pytest.mark.parametrize("line", [
    "x1 2",
    "c2",
    "c13 1",
    "c2 5",
    "c2 1a",
    "c2 1 X",
    "g",
    "g many",
    "e r9 1",
    "e r1",
    "solve quickly",
    "solve in",
    "solve in x",
    "- c2",
])
def test_bad_commands(line):
    interpreter = CommandInterpreter()
    run(interpreter, "c2 124")
    before = interpreter.arena.key()

    with pytest.raises(CommandError):
        interpreter.execute(line)

    assert interpreter.arena.key() == before


def test_solve_in_turns():
    interpreter = CommandInterpreter()
    run(interpreter, "c2 124", "c3 3")

    output = run(interpreter, "solve in 1")

    assert output == "Solution: r3 -1 (c2)"


def test_solve_fast_without_budget():
    interpreter = CommandInterpreter()
    run(interpreter, "c2 124", "c3 3")

    output = run(interpreter, "solve fast")

    assert output == "solution was found in 1 turns: r3 -1 (c2)"


def test_solve_already_solved():
    interpreter = CommandInterpreter()
    run(interpreter, "c2 1234")
    assert run(interpreter, "solve in 2") == "Arena is already solved! (c2)"


def test_solve_without_solution():
    interpreter = CommandInterpreter()
    run(interpreter, "c6 3 J", "c6 4 H")
    assert run(interpreter, "solve in 1") == "no solution was found :("


def test_next_plays_solution():
    interpreter = CommandInterpreter()
    run(interpreter, "c2 124", "c3 3")
    assert run(interpreter, "next") == "no solution available, use solve first"

    run(interpreter, "solve in 1")
    output = run(interpreter, "next")

    assert output.startswith("executed r3 -1")
    assert interpreter.arena.is_solved()
    assert run(interpreter, "next") == "all moves have been played"


def test_next_after_manual_change_invalidates():
    interpreter = CommandInterpreter()
    run(interpreter, "c2 124", "c3 3", "solve in 1", "c7 1")

    assert run(interpreter, "next") == "no solution available, use solve first"
    assert interpreter.manager.state is SolutionState.NO_SOLUTION


def test_render_arena():
    arena = SolvableArena()
    interpreter = CommandInterpreter(arena)
    run(interpreter, "c1 4", "c12 1 J", "c3 1 H", "c5 2 P")

    lines = render_arena(interpreter.arena).split("\n")

    assert len(lines) == 10
    assert lines[0] == "  .       . E       .  (4 enemies)"
    assert lines[3] == "        . J . .      "
    assert lines[4] == ". . . .         H . . ."
    assert lines[7] == "      .   . .   P    "


def test_manager_compute_and_playback():
    arena = SolvableArena()
    CommandInterpreter(arena).execute("c2 124")
    CommandInterpreter(arena).execute("c3 3")
    manager = SolutionManager(strategy_name="fast", max_turns=2)

    solution = manager.compute(arena)

    assert solution.is_complete
    assert manager.state is SolutionState.MOVE_READY
    assert manager.moves_remaining == 1
    assert manager.peek_next_moves() == solution.moves

    move = manager.next_move(arena)
    assert isinstance(move, Move)
    assert manager.state is SolutionState.EXHAUSTED
    assert manager.next_move(arena) is None


def test_manager_strategy_switch():
    manager = SolutionManager()
    assert manager.strategy_name == "best"

    manager.set_strategy("fast")
    assert manager.strategy_name == "fast"

    with pytest.raises(ValueError):
        manager.set_strategy("beam")


def test_manager_timeout_defaults_to_strategy_limit():
    strategy_default = SolutionManager(strategy_name="fast")
    configured = SolutionManager(strategy_name="fast", timeout_sec=5.0)

    assert strategy_default.timeout_for(strategy_default.strategy) == 60.0
    assert configured.timeout_for(configured.strategy) == 5.0


def test_manager_passes_timeout_to_search(monkeypatch):
    manager = SolutionManager(strategy_name="best")
    contexts = []

    def record(context):
        contexts.append(context)
        return Solution()

    monkeypatch.setattr(manager.strategy, "solve", record)
    manager.compute(SolvableArena())

    assert contexts[0].timeout_sec == manager.strategy.timeout_sec
    assert manager.state is SolutionState.NO_SOLUTION
