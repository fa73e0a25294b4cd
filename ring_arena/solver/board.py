"""
Board Module - Enemies, equipment and the solvable arena.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import FrozenSet, Hashable, Optional, Tuple

from .arena import Arena
from .move import Move
from .position import Position

# Enemies that fit into one attack group
ENEMIES_PER_GROUP = 4


class Attack(Enum):
    """Concrete attacks that can hit an enemy."""
    JUMP = "jump"
    HAMMER = "hammer"
    IRON_BOOTS = "iron_boots"


ALL_ATTACKS: FrozenSet[Attack] = frozenset(Attack)


class RequiredAttack(Enum):
    """
    What an enemy must be hit with.

    Each requirement maps to a fixed set of attacks that satisfy it.
    """
    BOOTS_OR_HAMMER = "P"
    JUMP = "J"
    HAMMER = "H"

    @property
    def symbol(self) -> str:
        """Single-character symbol used on the board diagram."""
        return self.value

    @property
    def attacks(self) -> FrozenSet[Attack]:
        """Attacks that satisfy this requirement."""
        return _REQUIRED_ATTACKS[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> "RequiredAttack":
        """
        Look up a requirement by its symbol.

        Raises:
            ValueError: If the symbol is unknown
        """
        return cls(symbol.upper())


_REQUIRED_ATTACKS = {
    RequiredAttack.BOOTS_OR_HAMMER: frozenset({Attack.IRON_BOOTS, Attack.HAMMER}),
    RequiredAttack.JUMP: frozenset({Attack.JUMP, Attack.IRON_BOOTS}),
    RequiredAttack.HAMMER: frozenset({Attack.HAMMER}),
}


@dataclass(frozen=True)
class Enemy:
    """
    An enemy standing on the arena.

    Attributes:
        position: Cell the enemy stands on
        required_attack: What it must be hit with, or None for anything
    """
    position: Position
    required_attack: Optional[RequiredAttack] = None

    @property
    def attacks(self) -> FrozenSet[Attack]:
        """Attacks that can defeat this enemy."""
        if self.required_attack is None:
            return ALL_ATTACKS
        return self.required_attack.attacks

    @property
    def symbol(self) -> str:
        """Single-character symbol used on the board diagram."""
        if self.required_attack is None:
            return "E"
        return self.required_attack.symbol

    def moved_to(self, position: Position) -> "Enemy":
        """Get a copy of this enemy standing on another cell."""
        return replace(self, position=position)


@dataclass(frozen=True)
class AvailableEquipment:
    """
    Equipment the player has for this fight.

    Attributes:
        throwing_hammer: Hammer can be thrown along long areas
        iron_boots: Iron boots can stomp
    """
    throwing_hammer: bool = True
    iron_boots: bool = True

    def can_defeat_outer(self, enemy: Enemy) -> bool:
        """
        Check if an enemy on an outer ring can be hit at all.

        Outer rings are only reachable by thrown attacks along a long area.
        """
        required = enemy.required_attack
        if required is RequiredAttack.HAMMER:
            return self.throwing_hammer
        if required is RequiredAttack.BOOTS_OR_HAMMER:
            return self.throwing_hammer or self.iron_boots
        return True


class SolvableArena(Arena[Enemy]):
    """
    Arena of enemies plus the constraints that decide if it is solved.

    Attributes:
        num_groups: Manual override of the number of attack groups
        available_equipment: Equipment available to the player
    """

    def __init__(self, enemies=None, num_groups: Optional[int] = None,
                 available_equipment: Optional[AvailableEquipment] = None):
        super().__init__(enemies)
        self.num_groups = num_groups
        self.available_equipment = available_equipment or AvailableEquipment()

    def group_count(self) -> int:
        """
        Number of attack areas allowed.

        Returns:
            Manual override, or one group per 4 enemies (rounded up)
        """
        if self.num_groups is not None:
            return self.num_groups
        return -(-len(self) // ENEMIES_PER_GROUP)

    def set_hammer_available(self, available: bool) -> None:
        self.available_equipment = replace(self.available_equipment, throwing_hammer=available)

    def set_boots_available(self, available: bool) -> None:
        self.available_equipment = replace(self.available_equipment, iron_boots=available)

    def is_solved(self) -> bool:
        """Check if every enemy can be defeated in the current layout."""
        from .coverage import Coverage
        return Coverage.find(self) is not None

    def copy(self) -> "SolvableArena":
        """Get an independent copy of this arena."""
        return SolvableArena(
            enemies=list(self.entities),
            num_groups=self.num_groups,
            available_equipment=self.available_equipment,
        )

    def moved(self, move: Move) -> "SolvableArena":
        """Get a copy of this arena with the move applied."""
        return SolvableArena(
            enemies=[e.moved_to(e.position.moved(move)) for e in self.entities],
            num_groups=self.num_groups,
            available_equipment=self.available_equipment,
        )

    def key(self) -> Hashable:
        """
        Hashable snapshot of the arena, independent of insertion order.

        Used as the memoization key while planning.
        """
        return ArenaKey(
            enemies=frozenset(self.entities),
            num_groups=self.num_groups,
            available_equipment=self.available_equipment,
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, SolvableArena):
            return NotImplemented
        return self.key() == other.key()

    __hash__ = None


@dataclass(frozen=True)
class ArenaKey:
    """Immutable snapshot of a SolvableArena."""
    enemies: FrozenSet[Enemy]
    num_groups: Optional[int]
    available_equipment: AvailableEquipment


def enemies_in_slot(slot: int, rings: Tuple[int, ...],
                    required_attack: Optional[RequiredAttack] = None) -> Tuple[Enemy, ...]:
    """
    Build one enemy per ring on a slot.

    Args:
        slot: Slot index
        rings: Ring indices
        required_attack: Requirement shared by all created enemies

    Returns:
        Tuple of Enemy instances

    Raises:
        OutOfRangeError: If any coordinate is invalid
    """
    return tuple(Enemy(Position.at(ring, slot), required_attack) for ring in rings)
