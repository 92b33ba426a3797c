"""
Per-variant scoring rules.

A strategy answers two questions for the round engine:
- on_reveal(trial_count, hints_used): how many points does cracking the code earn?
- on_hint(current_score): what does asking for a hint cost right now?

Strategies are only asked on_reveal when the secret is actually revealed,
never when a round runs out of trials.
"""

from typing import Protocol, Tuple


class ScoringStrategy(Protocol):
    def on_reveal(self, trial_count: int, hints_used: int) -> int: ...

    def on_hint(self, current_score: int) -> Tuple[int, bool]: ...


class BullsAndCowsScoring:
    """Flat bonus per cracked code; every hint halves the running score."""

    REVEAL_BONUS = 2000

    def on_reveal(self, trial_count: int, hints_used: int) -> int:
        return self.REVEAL_BONUS

    def on_hint(self, current_score: int) -> Tuple[int, bool]:
        return (current_score // 2, True)


class MultiColourScoring:
    """
    Tiered bonus by number of trials:
      1-2 trials -> 100
      3-5 trials -> 50
      6+  trials -> 20
    divided by (hints_used + 1). Hints cost nothing up front.
    """

    def on_reveal(self, trial_count: int, hints_used: int) -> int:
        if trial_count <= 2:
            base_points = 100
        elif trial_count <= 5:
            base_points = 50
        else:
            base_points = 20
        return base_points // (hints_used + 1)

    def on_hint(self, current_score: int) -> Tuple[int, bool]:
        return (current_score, False)
