"""
Commands Module - Text command interpreter for the ring arena.

Turns typed commands into arena mutations and queries. Every command
either succeeds and returns the text to show, or raises CommandError and
leaves the arena untouched.
"""

import logging
from typing import Callable, Dict, List, Optional

from .display import render_arena
from .solution_manager import SolutionManager, SolutionState
from .solver import (
    Axis, Enemy, Move, MoveParseError, OutOfRangeError, Position,
    RequiredAttack, SolvableArena
)

logger = logging.getLogger(__name__)

HELP_TEXT = "\n".join([
    "set enemy positions: c1 124 [H/J/P]",
    "remove enemies: - c1 3",
    "set number of enemy groups: g 4",
    "solve: solve [fast] [in 3]",
    "play the next move of the last solution: next",
    "whether you have a throw hammer: +hammer / -hammer",
    "whether you have iron boots: +boots / -boots",
    "manually execute turns: e r2 5",
    "show the arena: show",
    "clear arena: clear",
])


class CommandError(ValueError):
    """Raised for commands that cannot be executed."""


class CommandInterpreter:
    """
    Interpreter for the arena command language.

    Attributes:
        arena: Arena the commands act on
        manager: Solution manager used by 'solve' and 'next'
    """

    def __init__(self, arena: Optional[SolvableArena] = None,
                 manager: Optional[SolutionManager] = None):
        self.arena = arena if arena is not None else SolvableArena()
        self.manager = manager if manager is not None else SolutionManager()
        self._commands: Dict[str, Callable[[List[str]], str]] = {}
        for names, handler in [
            (("help", "h", "?"), self._help),
            (("show",), self._show),
            (("clear",), self._clear),
            (("g", "groups"), self._groups),
            (("e", "execute", "run"), self._execute),
            (("solve",), self._solve),
            (("next",), self._next),
            (("-", "undo"), self._remove),
            (("+hammer",), lambda args: self._equipment("hammer", True)),
            (("-hammer",), lambda args: self._equipment("hammer", False)),
            (("+boots",), lambda args: self._equipment("boots", True)),
            (("-boots",), lambda args: self._equipment("boots", False)),
        ]:
            for name in names:
                self._commands[name] = handler

    def execute(self, line: str) -> str:
        """
        Execute one command line.

        Args:
            line: Command text

        Returns:
            Text to show to the user (may be empty)

        Raises:
            CommandError: If the command is unknown or malformed
        """
        args = line.split()
        if not args:
            return ""

        command, rest = args[0], args[1:]
        handler = self._commands.get(command)
        if handler is None:
            return self._add(args)

        logger.debug(f"Executing command: {line.strip()}")
        return handler(rest)

    def _help(self, args: List[str]) -> str:
        return HELP_TEXT

    def _show(self, args: List[str]) -> str:
        return render_arena(self.arena)

    def _clear(self, args: List[str]) -> str:
        self.arena = SolvableArena()
        self.manager.reset()
        return "arena has been cleared"

    def _groups(self, args: List[str]) -> str:
        if not args:
            raise CommandError("Missing argument: number of groups")
        arg = args[0]
        if not (arg.isascii() and arg.isdecimal()):
            raise CommandError(f"'{arg}': not a number")
        self.arena.num_groups = int(arg)
        return f"set enemy groups to {self.arena.num_groups}"

    def _execute(self, args: List[str]) -> str:
        try:
            move = Move.parse(" ".join(args[:2]))
        except MoveParseError as e:
            raise CommandError(f"invalid move: {e}") from e
        self.arena.apply_move(move)
        return render_arena(self.arena)

    def _solve(self, args: List[str]) -> str:
        fast = False
        if args and args[0] == "fast":
            fast = True
            args = args[1:]

        turns = None
        if args:
            if args[0] != "in":
                raise CommandError(f"'{args[0]}': expected in")
            if len(args) < 2:
                raise CommandError("Missing argument: number of turns")
            if not (args[1].isascii() and args[1].isdecimal()):
                raise CommandError(f"'{args[1]}': not a number")
            turns = int(args[1])

        solution = self.manager.compute(
            self.arena, turns=turns, strategy_name="fast" if fast else None
        )
        if solution.was_cancelled:
            seconds = solution.metrics.computation_time_ms / 1000
            return f"search was stopped after {seconds:.1f}s without a solution"
        if not solution.is_complete:
            return "no solution was found :("
        if not solution.has_moves:
            return f"Arena is already solved! ({solution.coverage})"
        if turns is None:
            return (f"solution was found in {solution.turns_searched} turns: "
                    f"{solution.describe()} ({solution.coverage})")
        return f"Solution: {solution.describe()} ({solution.coverage})"

    def _next(self, args: List[str]) -> str:
        move = self.manager.next_move(self.arena)
        if move is None:
            if self.manager.state is SolutionState.EXHAUSTED:
                return "all moves have been played"
            return "no solution available, use solve first"
        self.arena.apply_move(move)
        return f"executed {move}\n{render_arena(self.arena)}"

    def _remove(self, args: List[str]) -> str:
        if len(args) < 2:
            raise CommandError("Missing argument: column and rings")
        for position in self._parse_positions(args[0], args[1]):
            self.arena.remove(position)
        return render_arena(self.arena)

    def _equipment(self, item: str, available: bool) -> str:
        if item == "hammer":
            self.arena.set_hammer_available(available)
        else:
            self.arena.set_boots_available(available)
        return f"{item} {'available' if available else 'unavailable'}"

    def _add(self, args: List[str]) -> str:
        if not args[0].startswith(Axis.SLOT.letter):
            raise CommandError(f"Unknown command: {args[0]}")
        if len(args) < 2:
            raise CommandError("Missing argument: rings")

        required_attack = None
        if len(args) > 2:
            try:
                required_attack = RequiredAttack.from_symbol(args[2])
            except ValueError:
                raise CommandError(f"'{args[2]}': expected H, J or P") from None

        positions = self._parse_positions(args[0], args[1])
        for position in positions:
            self.arena.add(Enemy(position, required_attack))
        return render_arena(self.arena)

    @staticmethod
    def _parse_positions(slot_arg: str, rings_arg: str) -> List[Position]:
        """
        Parse 'c<slot>' and a string of ring digits into positions.

        Both are 1-indexed, e.g. 'c2' and '124' for rings 1, 2 and 4 of slot 2.
        """
        if not slot_arg.startswith(Axis.SLOT.letter):
            raise CommandError(f"Unknown command: {slot_arg}")
        number = slot_arg[1:]
        if not (number.isascii() and number.isdecimal()):
            raise CommandError(f"'{slot_arg}': invalid column number")
        if not (rings_arg.isascii() and rings_arg.isdecimal()):
            raise CommandError(f"'{rings_arg}': rings have to be numbers")

        try:
            return [Position.at(int(digit) - 1, int(number) - 1) for digit in rings_arg]
        except OutOfRangeError as e:
            raise CommandError(f"'{slot_arg} {rings_arg}': out of bounds: {e}") from e
