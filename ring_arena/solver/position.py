"""
Position Module - Board axes and validated (ring, slot) coordinates.

The arena is a disc of 4 concentric rings cut by 12 spokes. A cell is
addressed by its ring (0 = innermost) and its slot (angular index).
"""

import operator
from dataclasses import dataclass
from enum import Enum
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .move import Move

# Largest value a coordinate may hold (one byte)
MAX_COORDINATE_VALUE = 255


class Axis(Enum):
    """
    The two axes of the arena.

    RING moves rotate a whole ring around the hub, SLOT moves push a spoke
    through the hub. Each axis knows its size and the axis its moves change.
    """
    RING = "r"
    SLOT = "c"

    @property
    def size(self) -> int:
        """Number of valid coordinates on this axis."""
        return _AXIS_SIZES[self]

    @property
    def label(self) -> str:
        """Human-readable axis name."""
        return _AXIS_LABELS[self]

    @property
    def letter(self) -> str:
        """Single-letter prefix used in the move text form."""
        return self.value

    @property
    def changes(self) -> "Axis":
        """The axis whose coordinate a move along this axis changes."""
        return Axis.SLOT if self is Axis.RING else Axis.RING

    def next(self, coordinate: int) -> int:
        """Get the next coordinate in the positive direction."""
        return (coordinate + 1) % self.size

    def opposite(self, coordinate: int) -> int:
        """Get the coordinate half a turn away."""
        return (coordinate + self.size // 2) % self.size

    def validate(self, raw) -> int:
        """
        Range-check a raw value and narrow it to a coordinate.

        Args:
            raw: Value to check

        Returns:
            The coordinate as a plain int

        Raises:
            OutOfRangeError: If raw is not a byte-sized integer or is not
                smaller than the axis size
        """
        if isinstance(raw, bool):
            raise OutOfRangeError(self, raw, conversion_error="booleans are not coordinates")

        try:
            value = operator.index(raw)
        except TypeError as e:
            raise OutOfRangeError(self, raw, conversion_error=str(e)) from e

        if value < 0 or value > MAX_COORDINATE_VALUE:
            raise OutOfRangeError(
                self, raw,
                conversion_error=f"out of range integral type conversion attempted (0..{MAX_COORDINATE_VALUE})"
            )

        if value >= self.size:
            raise OutOfRangeError(self, raw)

        return value

    def __str__(self) -> str:
        return self.label


_AXIS_SIZES = {Axis.RING: 4, Axis.SLOT: 12}
_AXIS_LABELS = {Axis.RING: "Ring", Axis.SLOT: "Slot"}

RING_COUNT = Axis.RING.size
SLOT_COUNT = Axis.SLOT.size


class OutOfRangeError(ValueError):
    """
    Raised when a value is not a valid coordinate on an axis.

    Attributes:
        axis: Axis the value was checked against
        value: The rejected value
        conversion_error: Why the value could not be read as a coordinate,
            or None if it was simply too large for the axis
    """

    def __init__(self, axis: Axis, value, conversion_error: Optional[str] = None):
        self.axis = axis
        self.value = value
        self.conversion_error = conversion_error
        super().__init__(self._describe())

    def _describe(self) -> str:
        if self.conversion_error is not None:
            return f"Can't convert {self.value!r} to a coordinate: {self.conversion_error}"
        return f"{self.value} is too large for {self.axis} (0..{self.axis.size})"


@dataclass(frozen=True)
class Position:
    """
    A validated cell of the arena.

    Attributes:
        ring: Ring index, 0 (innermost) to 3 (outermost)
        slot: Slot index, 0 to 11
    """
    ring: int
    slot: int

    @classmethod
    def at(cls, ring, slot) -> "Position":
        """
        Create a Position from raw coordinates.

        Args:
            ring: Raw ring value
            slot: Raw slot value

        Returns:
            Position instance

        Raises:
            OutOfRangeError: For the first axis that fails validation
        """
        return cls(ring=Axis.RING.validate(ring), slot=Axis.SLOT.validate(slot))

    @property
    def is_outer(self) -> bool:
        """True for the two outer rings, which only long areas reach."""
        return self.ring >= RING_COUNT // 2

    def moved(self, move: "Move") -> "Position":
        """
        Apply a move to this position.

        Ring moves rotate the cells of one ring. Slot moves push a spoke
        through the hub: the opposite spoke moves with it in the inverted
        direction, and cells pushed past the hub fold onto the other side.

        Args:
            move: Move to apply

        Returns:
            Position after the move (self if the move does not touch it)
        """
        if move.axis is Axis.RING:
            if self.ring != move.coordinate:
                return self

            if move.positive:
                offset = move.amount
            else:
                offset = SLOT_COUNT - move.amount % SLOT_COUNT
            return Position(ring=self.ring, slot=(self.slot + offset) % SLOT_COUNT)

        positive = move.positive
        if self.slot == Axis.SLOT.opposite(move.coordinate):
            positive = not positive
        elif self.slot != move.coordinate:
            return self

        span = 2 * RING_COUNT
        if positive:
            offset = move.amount
        else:
            offset = span - move.amount % span

        mirror = (self.ring + offset) % span
        slot = self.slot
        if mirror >= RING_COUNT:
            # pushed through the hub
            slot = Axis.SLOT.opposite(slot)
        return Position(ring=min(mirror, span - 1 - mirror), slot=slot)

    def __str__(self) -> str:
        return f"c{self.slot + 1} ring {self.ring + 1}"
