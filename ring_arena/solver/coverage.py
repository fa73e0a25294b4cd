"""
Coverage Module - Assignment of attack areas that defeats every enemy.

A coverage is found by a backtracking search. Enemies on the outer rings
can only be reached by long areas, so they are placed first without any
choice. Each remaining inner enemy is either already inside an area or
gets a new wide or long area; the first complete assignment wins.
"""

import logging
from dataclasses import dataclass, replace
from typing import FrozenSet, Iterator, List, Optional, Sequence, Tuple, Union

from .board import Attack, AvailableEquipment, Enemy, RequiredAttack, SolvableArena
from .position import Axis, Position, RING_COUNT

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LongArea:
    """Attack along a whole spoke, hitting every ring of one slot."""
    slot: int

    def covers(self, position: Position) -> bool:
        return position.slot == self.slot

    def slots(self) -> Tuple[int, ...]:
        return (self.slot,)

    def __str__(self) -> str:
        return f"c{self.slot + 1}"


@dataclass(frozen=True)
class WideArea:
    """Attack across two neighbouring slots, hitting the inner rings only."""
    left_slot: int

    @property
    def right_slot(self) -> int:
        return Axis.SLOT.next(self.left_slot)

    def covers(self, position: Position) -> bool:
        return (position.ring < RING_COUNT // 2
                and position.slot in (self.left_slot, self.right_slot))

    def slots(self) -> Tuple[int, ...]:
        return (self.left_slot, self.right_slot)

    def __str__(self) -> str:
        return f"h{self.left_slot + 1}{self.right_slot + 1}"


TargetArea = Union[LongArea, WideArea]


@dataclass(frozen=True)
class EnemyArea:
    """
    An attack area together with the attacks still allowed inside it.

    Attributes:
        target: Cells the attack hits
        whitelist: Attacks that defeat every enemy assigned to this area
    """
    target: TargetArea
    whitelist: FrozenSet[Attack]

    @classmethod
    def for_enemy(cls, target: TargetArea, enemy: Enemy) -> "EnemyArea":
        """Create an area seeded with the attacks an enemy accepts."""
        return cls(target=target, whitelist=enemy.attacks)

    def limited(self, enemy: Enemy) -> Optional["EnemyArea"]:
        """
        Restrict the whitelist to the attacks an enemy accepts.

        Returns:
            Restricted area, or None if no attack is left
        """
        whitelist = self.whitelist & enemy.attacks
        if not whitelist:
            return None
        return replace(self, whitelist=whitelist)

    def covers(self, position: Position) -> bool:
        return self.target.covers(position)

    def __str__(self) -> str:
        return str(self.target)


def _hammer_can_reach(enemy: Enemy, target: TargetArea, equipment: AvailableEquipment) -> bool:
    # hammer enemies on a long area need the hammer to be thrown
    return not (isinstance(target, LongArea)
                and enemy.required_attack is RequiredAttack.HAMMER
                and not equipment.throwing_hammer)


def _sort_key(enemy: Enemy) -> Tuple[int, int, int]:
    position = enemy.position
    return (0 if position.is_outer else 1, position.ring, position.slot)


class Coverage:
    """
    Ordered list of attack areas that together defeat every enemy.

    Attributes:
        areas: Areas in the order they were placed
    """

    def __init__(self, areas: Optional[Sequence[EnemyArea]] = None):
        self.areas: List[EnemyArea] = list(areas or [])

    @classmethod
    def find(cls, arena: SolvableArena) -> Optional["Coverage"]:
        """
        Search for a coverage of the arena.

        Args:
            arena: Arena to cover

        Returns:
            First coverage found, or None if the arena cannot be solved
            with the available groups and equipment
        """
        enemies = sorted(arena, key=_sort_key)
        group_count = arena.group_count()
        equipment = arena.available_equipment

        outer = [e for e in enemies if e.position.is_outer]
        inner = [e for e in enemies if not e.position.is_outer]

        coverage = cls()
        for enemy in outer:
            if not equipment.can_defeat_outer(enemy):
                logger.debug(f"No equipment can reach outer enemy at {enemy.position}")
                return None

            index = coverage._covering_index(enemy.position)
            if index is not None:
                area = coverage.areas[index].limited(enemy)
                if area is None:
                    return None
                coverage.areas[index] = area
                continue

            if len(coverage) >= group_count:
                return None
            coverage.areas.append(EnemyArea.for_enemy(LongArea(enemy.position.slot), enemy))

        return coverage._cover_inner(inner, 0, equipment, group_count)

    def _cover_inner(self, enemies: List[Enemy], start: int,
                     equipment: AvailableEquipment, group_count: int) -> Optional["Coverage"]:
        """
        Cover the inner enemies from `start` on, branching on new areas.

        Mutates self; every branch works on its own copy.
        """
        for index in range(start, len(enemies)):
            enemy = enemies[index]

            covering = self._covering_index(enemy.position)
            if covering is not None:
                area = self.areas[covering]
                if not _hammer_can_reach(enemy, area.target, equipment):
                    return None
                area = area.limited(enemy)
                if area is None:
                    return None
                self.areas[covering] = area
                continue

            if len(self) >= group_count:
                return None

            for target in self._candidates(enemy):
                if not self.can_hold(target):
                    continue
                if not _hammer_can_reach(enemy, target, equipment):
                    continue

                branch = Coverage(self.areas)
                branch.areas.append(EnemyArea.for_enemy(target, enemy))
                found = branch._cover_inner(enemies, index + 1, equipment, group_count)
                if found is not None:
                    return found
            return None

        return self

    @staticmethod
    def _candidates(enemy: Enemy) -> List[TargetArea]:
        slot = enemy.position.slot
        long_area = LongArea(slot)
        # wide areas are hammer and boots only, no jumping
        if enemy.required_attack is RequiredAttack.JUMP:
            return [long_area]
        return [
            WideArea((slot - 1) % Axis.SLOT.size),
            WideArea(slot),
            long_area,
        ]

    def can_hold(self, target: TargetArea) -> bool:
        """
        Check if an area can be added without sharing a slot.

        Args:
            target: Area to check

        Returns:
            True if none of its slots is claimed by a placed area
        """
        claimed = {slot for area in self.areas for slot in area.target.slots()}
        return claimed.isdisjoint(target.slots())

    def get_covering_area(self, position: Position) -> Optional[EnemyArea]:
        """Get the area that hits a position, or None."""
        index = self._covering_index(position)
        return None if index is None else self.areas[index]

    def covers(self, position: Position) -> bool:
        return self._covering_index(position) is not None

    def _covering_index(self, position: Position) -> Optional[int]:
        for index, area in enumerate(self.areas):
            if area.covers(position):
                return index
        return None

    def __len__(self) -> int:
        return len(self.areas)

    def __iter__(self) -> Iterator[EnemyArea]:
        return iter(self.areas)

    def __str__(self) -> str:
        return ", ".join(str(area) for area in self.areas)
