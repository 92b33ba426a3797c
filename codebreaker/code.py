"""
A code: the fixed-length row of colours used both for the secret and for guesses.

Codes never change after they are built. Two codes are equal when their
colour labels are equal position by position.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

from .colours import Colour, ColourDomain
from .types import Labels


@dataclass(frozen=True, eq=False)
class Code:
    colours: Tuple[Colour, ...]

    def __init__(self, colours: Iterable[Colour]):
        # frozen dataclass: go through object.__setattr__ to accept any iterable
        object.__setattr__(self, "colours", tuple(colours))

    @classmethod
    def from_labels(cls, labels: Labels, domain: ColourDomain) -> "Code":
        """
        Build a code from player input, e.g. ["R", "G", "B", "Y"].
        Raises ValueError on a label that is not part of the domain.
        """
        return cls(domain.from_label(label) for label in labels)

    def labels(self) -> Labels:
        return [colour.label() for colour in self.colours]

    def copy(self) -> "Code":
        return Code(self.colours)

    def __len__(self) -> int:
        return len(self.colours)

    def __getitem__(self, index: int) -> Colour:
        return self.colours[index]

    def __iter__(self) -> Iterator[Colour]:
        return iter(self.colours)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Code):
            return NotImplemented
        return self.labels() == other.labels()

    def __hash__(self) -> int:
        return hash(tuple(self.labels()))

    def __str__(self) -> str:
        return "[" + ", ".join(self.labels()) + "]"
