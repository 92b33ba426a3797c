"""
Round engine: one game session, played as a sequence of rounds.

A round holds a secret code and the trials played against it. It ends when
a trial cracks the code (revealed) or when MAX_TRIALS trials have been
played without cracking it (exhausted). The running score belongs to the
session and carries over from round to round.

Scoring differs per variant and is delegated to the variant's strategy.
"""

import logging
import random
from dataclasses import dataclass, field
from time import time
from typing import List, Optional, Tuple

from .code import Code
from .colours import Colour
from .engine import Score
from .types import RoundStatus
from .variants import Variant, get_variant

logger = logging.getLogger(__name__)

MAX_TRIALS = 25
DEFAULT_CODE_LENGTH = 4


def feedback_message(score: Score) -> str:
    # Build a message without revealing which colours are correct
    if score.exact_matches == 0 and score.other_matches == 0:
        return "all incorrect"
    return (
        f"{score.exact_matches} exact match(es) and "
        f"{score.other_matches} colour match(es)"
    )


@dataclass(frozen=True)
class TrialEntry:
    code: Code
    score: Score
    message: str
    timestamp: float = field(default_factory=time)


class MastermindGame:
    def __init__(
        self,
        variant: Variant,
        code_length: int = DEFAULT_CODE_LENGTH,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        max_trials: int = MAX_TRIALS,
    ) -> None:
        if code_length <= 0:
            raise ValueError("Code length must be a positive number.")
        self.variant = variant
        self.code_length = code_length
        self.seed = seed
        self.max_trials = max_trials
        # One generator for the whole session, never reseeded between rounds
        self._rng = rng if rng is not None else random.Random(seed)
        self._score = 0
        self._secret: Code = Code(())
        self._trials: List[TrialEntry] = []
        self._revealed = False
        self._hints_used = 0
        self.start_new_round()

    # --- Round lifecycle ---

    def _generate_secret(self) -> Code:
        colours = self.variant.domain.colours()
        return Code(colours[self._rng.randrange(len(colours))] for _ in range(self.code_length))

    def start_new_round(self) -> None:
        self._secret = self._generate_secret()
        self._trials = []
        self._revealed = False
        self._hints_used = 0
        logger.debug("New %s round started (score %d)", self.variant.id, self._score)

    def play(self, guess: Code) -> None:
        # Extra guesses after the round ended are ignored
        if self.is_round_finished():
            return

        score = self.variant.evaluate(self._secret, guess)
        self._trials.append(TrialEntry(code=guess.copy(), score=score, message=feedback_message(score)))

        if score.exact_matches == self.code_length:
            self._revealed = True
            delta = self.variant.scoring.on_reveal(len(self._trials), self._hints_used)
            self._score += delta
            logger.info(
                "Secret revealed after %d trial(s), %d hint(s): +%d points",
                len(self._trials), self._hints_used, delta,
            )
        elif self.is_round_finished():
            logger.info("Round exhausted after %d trials", len(self._trials))

    def is_round_finished(self) -> bool:
        # A round without trials is never finished, whatever max_trials says
        if not self._trials:
            return False
        return self._revealed or len(self._trials) >= self.max_trials

    def hint(self) -> Colour:
        """
        Disclose one colour of the secret, picked uniformly at random
        (the same position may come up again on a later hint).
        The variant decides what the hint costs.
        """
        self._hints_used += 1
        new_score, penalty_applied = self.variant.scoring.on_hint(self._score)
        if penalty_applied:
            logger.debug("Hint penalty: score %d -> %d", self._score, new_score)
        self._score = new_score
        return self._secret[self._rng.randrange(len(self._secret))]

    def best_trial(self) -> Optional[Code]:
        if not self._trials:
            return None

        # Start from the most recent trial; only a strictly better one replaces it
        best_index = len(self._trials) - 1
        best = self._trials[best_index].score
        for i in range(len(self._trials) - 2, -1, -1):
            current = self._trials[i].score
            if current.exact_matches > best.exact_matches or (
                current.exact_matches == best.exact_matches
                and current.other_matches > best.other_matches
            ):
                best = current
                best_index = i
        return self._trials[best_index].code.copy()

    # --- Queries ---

    def was_secret_revealed(self) -> bool:
        return self._revealed

    def get_number_of_trials(self) -> int:
        return len(self._trials)

    def score(self) -> int:
        return self._score

    def hints_used(self) -> int:
        return self._hints_used

    def trials(self) -> Tuple[TrialEntry, ...]:
        return tuple(self._trials)

    def secret(self) -> Code:
        return self._secret.copy()

    @property
    def status(self) -> RoundStatus:
        if self._revealed:
            return "revealed"
        if self.is_round_finished():
            return "exhausted"
        return "in_progress"

    # --- Text rendering ---

    def _distinct_trials(self) -> List[TrialEntry]:
        seen: List[Tuple[Code, Score]] = []
        distinct = []
        for entry in self._trials:
            key = (entry.code, entry.score)
            if key in seen:
                continue
            seen.append(key)
            distinct.append(entry)
        return distinct

    def render_status(self) -> str:
        lines = [
            f"Number of Trials = {self.get_number_of_trials()}",
            f"Score = {self._score}",
        ]
        if self._revealed:
            lines.append(str(self._secret))
        else:
            lines.append("[" + ", ".join("?" for _ in range(self.code_length)) + "]")
        text = "\n".join(lines) + "\n"

        if self._trials:
            rows = [
                f"{entry.code}    {entry.score.exact_matches} {entry.score.other_matches}"
                for entry in self._distinct_trials()
            ]
            text += "\n" + "\n".join(rows)

        return text + "\n"

    def __str__(self) -> str:
        return self.render_status()


def new_game(
    variant_id: str,
    code_length: int = DEFAULT_CODE_LENGTH,
    seed: Optional[int] = None,
) -> MastermindGame:
    return MastermindGame(get_variant(variant_id), code_length=code_length, seed=seed)
