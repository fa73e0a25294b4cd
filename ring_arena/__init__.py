"""
Ring Arena Solver - Coverage check and move planner for ring puzzle arenas.

Subpackages:
    - solver: Board model, coverage search, move planner and strategies

Modules:
    - commands: Text command interpreter
    - display: Plain-text arena diagram
    - solution_manager: Move-by-move playback of a solution
    - settings: Persistent user preferences
"""

__version__ = "0.1.0"
