"""
The two built-in game variants.

A variant ties together the colour domain, the evaluator and the scoring
strategy, so the round engine itself stays the same for both.
"""

from dataclasses import dataclass
from typing import Callable, Dict

from .code import Code
from .colours import BinaryColour, ColourDomain, MultiColour
from .engine import Score, score_bulls_and_cows, score_classic
from .scoring import BullsAndCowsScoring, MultiColourScoring, ScoringStrategy
from .types import VariantId


@dataclass(frozen=True)
class Variant:
    id: VariantId
    title: str
    domain: ColourDomain
    evaluate: Callable[[Code, Code], Score]
    scoring: ScoringStrategy


BULLS_AND_COWS = Variant(
    id="bulls_and_cows",
    title="Bulls and Cows (binary colours)",
    domain=BinaryColour,
    evaluate=score_bulls_and_cows,
    scoring=BullsAndCowsScoring(),
)

MULTI_COLOUR = Variant(
    id="multi_colour",
    title="MultiColour Mastermind",
    domain=MultiColour,
    evaluate=score_classic,
    scoring=MultiColourScoring(),
)

VARIANTS: Dict[str, Variant] = {
    BULLS_AND_COWS.id: BULLS_AND_COWS,
    MULTI_COLOUR.id: MULTI_COLOUR,
}


def get_variant(variant_id: str) -> Variant:
    try:
        return VARIANTS[variant_id]
    except KeyError:
        allowed = ", ".join(VARIANTS)
        raise ValueError(f"Unknown variant '{variant_id}'. Allowed: {allowed}.") from None
