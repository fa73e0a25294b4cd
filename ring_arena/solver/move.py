"""
Move Module - Ring rotations and spoke pushes.
"""

from dataclasses import dataclass
from enum import Enum, auto

from .position import Axis, MAX_COORDINATE_VALUE, RING_COUNT, SLOT_COUNT


class MoveParseErrorKind(Enum):
    """Reason a move could not be parsed."""
    INVALID_FORMAT = auto()
    INVALID_AXIS = auto()
    NOT_A_NUMBER = auto()
    INVALID_COORDINATE = auto()


class MoveParseError(ValueError):
    """
    Raised when text is not a valid move.

    Attributes:
        value: The text that failed to parse
        kind: Which part of the text was wrong
        details: Human-readable explanation
    """

    def __init__(self, value: str, kind: MoveParseErrorKind, details: str = ""):
        self.value = value
        self.kind = kind
        self.details = details
        super().__init__(f"{_PARSE_ERROR_DESCRIPTIONS[kind]} for '{value}': {details}")


_PARSE_ERROR_DESCRIPTIONS = {
    MoveParseErrorKind.INVALID_FORMAT: "Invalid format",
    MoveParseErrorKind.INVALID_AXIS: "Invalid dimension identifier",
    MoveParseErrorKind.NOT_A_NUMBER: "Not a number",
    MoveParseErrorKind.INVALID_COORDINATE: "Invalid coordinate",
}


def _parse_number(text: str, value: str, argument_name: str) -> int:
    """Parse an unsigned byte-sized decimal number."""
    if not (text.isascii() and text.isdecimal()):
        raise MoveParseError(
            value, MoveParseErrorKind.NOT_A_NUMBER,
            f"{argument_name} '{text}' is not a number"
        )
    number = int(text)
    if number > MAX_COORDINATE_VALUE:
        raise MoveParseError(
            value, MoveParseErrorKind.NOT_A_NUMBER,
            f"{argument_name} {number} is too large (max {MAX_COORDINATE_VALUE})"
        )
    return number


@dataclass(frozen=True)
class Move:
    """
    A single turn on the arena.

    A RING move rotates ring `coordinate` by `amount` slots (clockwise when
    positive). A SLOT move pushes spoke `coordinate` by `amount` rings
    (outward when positive), pulling the opposite spoke along with it.

    Attributes:
        axis: Which axis the move is made along
        coordinate: Ring or slot index being moved
        amount: Distance, in units of the other axis
        positive: Direction of the move
    """
    axis: Axis
    coordinate: int
    amount: int
    positive: bool = True

    @classmethod
    def create(cls, axis: Axis, coordinate, amount, positive: bool = True) -> "Move":
        """
        Create a Move from raw values.

        Args:
            axis: Axis of the move
            coordinate: Raw ring/slot index, validated against the axis
            amount: Distance, must fit in one byte
            positive: Direction of the move

        Returns:
            Move instance

        Raises:
            OutOfRangeError: If the coordinate is invalid for the axis
            ValueError: If the amount is negative or too large
        """
        coordinate = axis.validate(coordinate)
        if not isinstance(amount, int) or isinstance(amount, bool):
            raise ValueError(f"invalid amount: {amount!r} is not an integer")
        if amount < 0 or amount > MAX_COORDINATE_VALUE:
            raise ValueError(f"invalid amount: {amount} (0..{MAX_COORDINATE_VALUE})")
        return cls(axis=axis, coordinate=coordinate, amount=amount, positive=positive)

    @classmethod
    def parse(cls, text: str) -> "Move":
        """
        Parse the short text form '<r|c><coordinate> [+|-]<amount>'.

        Coordinates are 1-indexed in the text form.

        Args:
            text: Text to parse, e.g. "r3 -1" or "c4 2"

        Returns:
            Move instance

        Raises:
            MoveParseError: If the text is not a valid move
        """
        args = text.split()
        if len(args) != 2:
            raise MoveParseError(
                text, MoveParseErrorKind.INVALID_FORMAT,
                "Needs to be '<r|c><coordinate> [+|-]<amount>'"
            )

        axis_arg, amount_arg = args
        axis = next((a for a in Axis if axis_arg.startswith(a.letter)), None)
        if axis is None:
            raise MoveParseError(
                text, MoveParseErrorKind.INVALID_AXIS,
                "Needs to be 'r' or 'c'"
            )

        number = _parse_number(axis_arg[1:], text, "coordinate")
        if number == 0:
            raise MoveParseError(
                text, MoveParseErrorKind.INVALID_COORDINATE,
                f"coordinates start at 1 (1..{axis.size})"
            )
        try:
            coordinate = axis.validate(number - 1)
        except ValueError as e:
            raise MoveParseError(text, MoveParseErrorKind.INVALID_COORDINATE, str(e)) from e

        positive = True
        if amount_arg.startswith(("+", "-")):
            positive = amount_arg[0] == "+"
            amount_arg = amount_arg[1:]
        amount = _parse_number(amount_arg, text, "amount")

        return cls(axis=axis, coordinate=coordinate, amount=amount, positive=positive)

    def normalized(self) -> "Move":
        """
        Get the canonical form of this move.

        Ring moves turn by the smallest amount. Slot moves prefer the lower
        half of the spokes, then the shorter push, then the positive
        direction when both directions reach the same place.

        Returns:
            Equivalent Move in canonical form
        """
        coordinate = self.coordinate
        amount = self.amount
        positive = self.positive

        if self.axis is Axis.RING:
            amount %= SLOT_COUNT
            if amount > SLOT_COUNT // 2:
                amount = SLOT_COUNT - amount
                positive = not positive
        else:
            if coordinate > SLOT_COUNT // 2:
                coordinate -= SLOT_COUNT // 2
                positive = not positive

            span = 2 * RING_COUNT
            amount %= span
            if amount > RING_COUNT:
                amount = span - amount
                positive = not positive
            if amount == RING_COUNT:
                positive = True

        return Move(axis=self.axis, coordinate=coordinate, amount=amount, positive=positive)

    def __str__(self) -> str:
        """Format the normalized move, e.g. 'r3 -1'."""
        move = self.normalized()
        sign = "" if move.positive else "-"
        return f"{move.axis.letter}{move.coordinate + 1} {sign}{move.amount}"
