"""
The two closed colour domains a game can be played with.

- BinaryColour: 2 symbols, used by Bulls and Cows
- MultiColour: 6 symbols, used by classic Mastermind

Scoring compares colours by their label, not by enum identity,
so BinaryColour.BLACK and MultiColour.BLUE are "the same colour" ("B").
"""

from enum import Enum
from typing import Tuple, Type, Union


class _LabelledColour(Enum):
    """Shared behaviour: the enum value is the one-letter label."""

    def label(self) -> str:
        return self.value

    @classmethod
    def colours(cls) -> Tuple["_LabelledColour", ...]:
        return tuple(cls)

    @classmethod
    def from_label(cls, label: str) -> "_LabelledColour":
        text = label.strip().upper()
        for colour in cls:
            if colour.value == text:
                return colour
        allowed = ", ".join(c.value for c in cls)
        raise ValueError(f"Invalid colour '{label}'. Allowed: {allowed}.")

    def __str__(self) -> str:
        return self.value


class BinaryColour(_LabelledColour):
    BLACK = "B"
    WHITE = "W"


class MultiColour(_LabelledColour):
    BLUE = "B"
    RED = "R"
    YELLOW = "Y"
    GREEN = "G"
    PINK = "P"
    ORANGE = "O"


Colour = Union[BinaryColour, MultiColour]
ColourDomain = Type[_LabelledColour]
