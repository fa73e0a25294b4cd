"""
Ring Arena Solver - Entry Point

Runs the interactive command prompt for building an arena and solving it.

Example:
    python main.py
    python main.py --strategy fast --timeout 5
    python main.py -c "c2 124" -c "c3 3" -c "solve in 1"
"""

import sys
import logging
import argparse
from typing import List, Optional

from ring_arena.commands import CommandError, CommandInterpreter
from ring_arena.display import render_arena
from ring_arena.settings import load_settings, save_settings
from ring_arena.solution_manager import SolutionManager
from ring_arena.solver import get_strategy_names

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(debug: bool, log_file: Optional[str] = None) -> None:
    """
    Configure logging - output to console and optionally to a file.

    Args:
        debug: Log DEBUG messages instead of WARNING and above
        log_file: Optional path of a log file (overwritten)
    """
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        handlers=handlers,
    )


class Application:
    """
    Main application controller.

    Owns the settings, the command interpreter and the prompt loop.
    """

    def __init__(self, strategy_name: Optional[str] = None, timeout_sec: Optional[float] = None,
                 max_turns: Optional[int] = None, debug_mode: bool = False):
        """
        Initialize the application.

        Args:
            strategy_name: Strategy override (saved for next time)
            timeout_sec: Search time limit override
            max_turns: Turn limit override for solving without a budget
            debug_mode: Enable debug mode via CLI (overrides saved setting)
        """
        self.settings = load_settings()
        self.debug_mode = debug_mode or self.settings.get("debug_enabled", False)

        if strategy_name is not None and strategy_name != self.settings.get("strategy_name"):
            self.settings["strategy_name"] = strategy_name
            save_settings(self.settings)

        manager = SolutionManager(
            strategy_name=self.settings["strategy_name"],
            timeout_sec=timeout_sec if timeout_sec is not None else self.settings["timeout_sec"],
            max_turns=max_turns if max_turns is not None else self.settings["max_turns"],
        )
        self.interpreter = CommandInterpreter(manager=manager)
        logger.info(f"Application initialized, strategy: {manager.strategy_name}")

    def run_command(self, line: str) -> bool:
        """
        Run one command and print its result.

        Returns:
            False if the command failed
        """
        try:
            output = self.interpreter.execute(line)
        except CommandError as e:
            print(e, file=sys.stderr)
            return False
        if output:
            print(output)
        return True

    def run(self) -> int:
        """
        Run the interactive prompt until end of input.

        Returns:
            Exit code
        """
        print(render_arena(self.interpreter.arena))
        while True:
            try:
                line = input("> ")
            except (EOFError, KeyboardInterrupt):
                print()
                return 0

            if line.strip() in ("quit", "exit"):
                return 0
            self.run_command(line)


def parse_args(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Ring Arena Solver - Find moves that line up every enemy"
    )
    parser.add_argument(
        "--strategy", "-s",
        choices=get_strategy_names(),
        help="Solving strategy (saved for next time)"
    )
    parser.add_argument(
        "--timeout", "-t",
        type=float,
        help="Search time limit in seconds"
    )
    parser.add_argument(
        "--max-turns",
        type=int,
        help="Largest number of turns tried by 'solve' without 'in'"
    )
    parser.add_argument(
        "--command", "-c",
        action="append",
        default=[],
        help="Run a command and exit (repeatable)"
    )
    parser.add_argument(
        "--log-file",
        help="Also write the log to this file"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Initialize and run the Ring Arena Solver."""
    args = parse_args(argv)
    setup_logging(args.debug, args.log_file)

    application = Application(
        strategy_name=args.strategy,
        timeout_sec=args.timeout,
        max_turns=args.max_turns,
        debug_mode=args.debug,
    )
    if application.debug_mode:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.command:
        ok = all([application.run_command(line) for line in args.command])
        return 0 if ok else 1
    return application.run()


if __name__ == "__main__":
    sys.exit(main())
