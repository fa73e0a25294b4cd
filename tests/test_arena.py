"""
Tests for the generic arena container and the solvable arena.
"""

import sys
from dataclasses import dataclass, replace
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from ring_arena.solver import (
    Arena,
    Attack,
    AvailableEquipment,
    Axis,
    Enemy,
    Move,
    Position,
    RequiredAttack,
    SolvableArena,
    enemies_in_slot,
)


@dataclass(frozen=True)
class Tile:
    """Cosmetic tile, only here to show the arena is generic."""
    position: Position
    color: str

    def moved_to(self, position: Position) -> "Tile":
        return replace(self, position=position)


def test_add_appends_and_replaces():
    arena = Arena()
    arena.add(Tile(Position.at(0, 0), "red"))
    arena.add(Tile(Position.at(1, 0), "blue"))
    arena.add(Tile(Position.at(0, 0), "green"))

    assert len(arena) == 2
    assert arena.get_at(Position.at(0, 0)).color == "green"
    # replaced in place, insertion order kept
    assert [t.color for t in arena] == ["green", "blue"]


def test_remove():
    arena = Arena([Tile(Position.at(0, 0), "red"), Tile(Position.at(1, 0), "blue")])

    arena.remove(Position.at(0, 0))
    arena.remove(Position.at(3, 3))

    assert len(arena) == 1
    assert arena.get_at(Position.at(0, 0)) is None
    assert Position.at(1, 0) in arena


def test_apply_move_broadcasts():
    arena = Arena([
        Tile(Position.at(2, 7), "a"),
        Tile(Position.at(1, 7), "b"),
    ])

    arena.apply_move(Move.create(Axis.RING, 2, 1, positive=False))

    assert arena.positions() == [Position.at(2, 6), Position.at(1, 7)]


def test_apply_move_keeps_positions_unique():
    arena = SolvableArena(list(enemies_in_slot(1, (0, 1, 2, 3))) + list(enemies_in_slot(7, (0, 2))))

    arena.apply_move(Move.create(Axis.SLOT, 1, 3))

    assert len(set(arena.positions())) == len(arena) == 6


def test_group_count_defaults_to_quarter_rounded_up():
    arena = SolvableArena()
    assert arena.group_count() == 0

    for count, expected in [(1, 1), (4, 1), (5, 2), (8, 2), (9, 3)]:
        arena = SolvableArena([Enemy(Position.at(i // 12, i % 12)) for i in range(count)])
        assert arena.group_count() == expected

    arena.num_groups = 7
    assert arena.group_count() == 7


def test_required_attacks():
    assert RequiredAttack.BOOTS_OR_HAMMER.attacks == {Attack.IRON_BOOTS, Attack.HAMMER}
    assert RequiredAttack.JUMP.attacks == {Attack.JUMP, Attack.IRON_BOOTS}
    assert RequiredAttack.HAMMER.attacks == {Attack.HAMMER}
    assert Enemy(Position.at(0, 0)).attacks == set(Attack)
    assert RequiredAttack.from_symbol("j") is RequiredAttack.JUMP


def test_copy_is_independent():
    arena = SolvableArena(list(enemies_in_slot(1, (0, 1))))
    clone = arena.copy()

    clone.apply_move(Move.create(Axis.RING, 0, 1))
    clone.set_hammer_available(False)

    assert arena.get_at(Position.at(0, 1)) is not None
    assert arena.available_equipment.throwing_hammer
    assert clone != arena


def test_key_ignores_insertion_order():
    a = Enemy(Position.at(0, 1))
    b = Enemy(Position.at(1, 2), RequiredAttack.JUMP)

    assert SolvableArena([a, b]).key() == SolvableArena([b, a]).key()
    assert SolvableArena([a, b]) == SolvableArena([b, a])
    assert SolvableArena([a], num_groups=2).key() != SolvableArena([a]).key()
    assert (SolvableArena([a], available_equipment=AvailableEquipment(iron_boots=False)).key()
            != SolvableArena([a]).key())


def test_moved_returns_new_arena():
    arena = SolvableArena(list(enemies_in_slot(1, (0, 1))), num_groups=3)
    move = Move.create(Axis.RING, 0, 2)

    moved = arena.moved(move)
    expected = arena.copy()
    expected.apply_move(move)

    assert moved == expected
    assert moved.num_groups == 3
    assert arena.get_at(Position.at(0, 1)) is not None
    assert moved.get_at(Position.at(0, 3)) is not None
