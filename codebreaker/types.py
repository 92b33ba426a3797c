"""
Labels for clarity.
"""

from typing import List, Literal

Label = str  # one-letter colour label, e.g. "R"
Labels = List[Label]  # a guess as sent by the player
VariantId = Literal["bulls_and_cows", "multi_colour"]
RoundStatus = Literal["in_progress", "revealed", "exhausted"]
