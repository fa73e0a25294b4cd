"""
Display Module - Plain-text drawing of the ring arena.

The disc is drawn as a 10-line diagram, one character per cell: slots run
clockwise starting top right, rings grow outward from the hub.
"""

from typing import List, Tuple

from .solver import Arena, Position

EMPTY_SYMBOL = "."

# (line template, [(slot, ring), ...]) from top to bottom
_LAYOUT: List[Tuple[str, List[Tuple[int, int]]]] = [
    ("  {}       {} {}       {}", [(10, 3), (11, 3), (0, 3), (1, 3)]),
    ("    {}     {} {}     {}  ", [(10, 2), (11, 2), (0, 2), (1, 2)]),
    ("      {}   {} {}   {}    ", [(10, 1), (11, 1), (0, 1), (1, 1)]),
    ("        {} {} {} {}      ", [(10, 0), (11, 0), (0, 0), (1, 0)]),
    ("{} {} {} {}         {} {} {} {}", [(9, 3), (9, 2), (9, 1), (9, 0),
                                        (2, 0), (2, 1), (2, 2), (2, 3)]),
    ("{} {} {} {}         {} {} {} {}", [(8, 3), (8, 2), (8, 1), (8, 0),
                                        (3, 0), (3, 1), (3, 2), (3, 3)]),
    ("        {} {} {} {}      ", [(7, 0), (6, 0), (5, 0), (4, 0)]),
    ("      {}   {} {}   {}    ", [(7, 1), (6, 1), (5, 1), (4, 1)]),
    ("    {}     {} {}     {}  ", [(7, 2), (6, 2), (5, 2), (4, 2)]),
    ("  {}       {} {}       {}", [(7, 3), (6, 3), (5, 3), (4, 3)]),
]


def cell_symbol(arena: Arena, slot: int, ring: int) -> str:
    """Symbol of the entity on a cell, or the empty symbol."""
    entity = arena.get_at(Position(ring=ring, slot=slot))
    if entity is None:
        return EMPTY_SYMBOL
    return getattr(entity, "symbol", "?")


def render_arena(arena: Arena) -> str:
    """
    Draw the arena as text.

    Args:
        arena: Arena of entities with a `symbol` attribute

    Returns:
        Multi-line diagram, the first line ending with the entity count
    """
    lines = []
    for template, cells in _LAYOUT:
        lines.append(template.format(*(cell_symbol(arena, slot, ring) for slot, ring in cells)))
    lines[0] += f"  ({len(arena)} enemies)"
    return "\n".join(lines)
