"""
Arena Module - Generic position-keyed container of things on the board.
"""

from typing import Generic, Iterator, List, Optional, Protocol, TypeVar

from .move import Move
from .position import Position


class Placeable(Protocol):
    """Anything that stands on a cell and can be moved to another one."""

    @property
    def position(self) -> Position:
        ...

    def moved_to(self, position: Position) -> "Placeable":
        ...


E = TypeVar("E", bound=Placeable)


class Arena(Generic[E]):
    """
    Small collection of entities with at most one entity per position.

    The board has only 48 cells, so entities are kept in a list and looked
    up by linear scan.

    Attributes:
        entities: Entities in insertion order
    """

    def __init__(self, entities: Optional[List[E]] = None):
        self.entities: List[E] = []
        for entity in entities or []:
            self.add(entity)

    def add(self, entity: E) -> None:
        """
        Place an entity, replacing whatever stands on its position.

        Args:
            entity: Entity to add
        """
        index = self._index_of(entity.position)
        if index is None:
            self.entities.append(entity)
        else:
            self.entities[index] = entity

    def remove(self, position: Position) -> None:
        """Remove the entity at a position (no-op if the cell is empty)."""
        self.entities = [e for e in self.entities if e.position != position]

    def get_at(self, position: Position) -> Optional[E]:
        """Get the entity at a position, or None if the cell is empty."""
        index = self._index_of(position)
        return None if index is None else self.entities[index]

    def apply_move(self, move: Move) -> None:
        """
        Apply a move to every entity in place.

        Args:
            move: Move to broadcast; entities it does not touch stay put
        """
        self.entities = [e.moved_to(e.position.moved(move)) for e in self.entities]

    def positions(self) -> List[Position]:
        """Positions of all entities, in insertion order."""
        return [e.position for e in self.entities]

    def _index_of(self, position: Position) -> Optional[int]:
        for index, entity in enumerate(self.entities):
            if entity.position == position:
                return index
        return None

    def __len__(self) -> int:
        return len(self.entities)

    def __iter__(self) -> Iterator[E]:
        return iter(self.entities)

    def __contains__(self, position: Position) -> bool:
        return self._index_of(position) is not None
