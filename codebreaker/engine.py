"""
Pure game logic (no HTTP, no storage).
We compute two feedback numbers for each guess:
- exact_matches: how many positions hold the same colour in secret and guess
- other_matches: how many more colours the guess shares with the secret once
  the exact positions are taken out

There are two ways of counting other_matches, one per variant:
- classic (multi colour Mastermind): greedy pairing, left to right
- bulls and cows (binary colours): per-colour counts, sum of the minimums

Colours are compared by label.
"""

from collections import Counter
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .code import Code
from .colours import Colour


@dataclass(frozen=True)
class Score:
    exact_matches: int
    other_matches: int

    def as_tuple(self) -> Tuple[int, int]:
        return (self.exact_matches, self.other_matches)


def _check_lengths(secret: Code, guess: Code) -> int:
    n = len(secret)
    if n == 0 or len(guess) != n:
        raise ValueError(
            f"Secret and guess must be the same non-zero length (got {n} and {len(guess)})."
        )
    return n


def _exact_pass(
    secret: Code, guess: Code
) -> Tuple[int, List[Optional[Colour]], List[Optional[Colour]]]:
    """
    Count exact matches and return copies of both codes with the
    matched positions blanked out (None = consumed).
    """
    remaining_secret: List[Optional[Colour]] = list(secret)
    remaining_guess: List[Optional[Colour]] = list(guess)
    exact = 0
    for i in range(len(remaining_secret)):
        if remaining_secret[i].label() == remaining_guess[i].label():
            exact += 1
            remaining_secret[i] = None
            remaining_guess[i] = None
    return exact, remaining_secret, remaining_guess


def score_classic(secret: Code, guess: Code) -> Score:
    """
    Example:
      secret = [R, G, B, B]
      guess  = [B, B, R, Y]
      exact_matches = 0  (no position agrees)
      other_matches = 3  (R pairs with R, each B pairs with a B)
    """
    _check_lengths(secret, guess)
    exact, remaining_secret, remaining_guess = _exact_pass(secret, guess)

    # Each leftover secret colour takes the first leftover guess colour with the same label
    other = 0
    for colour in remaining_secret:
        if colour is None:
            continue
        for j, candidate in enumerate(remaining_guess):
            if candidate is not None and candidate.label() == colour.label():
                other += 1
                remaining_guess[j] = None
                break

    return Score(exact, other)


def score_bulls_and_cows(secret: Code, guess: Code) -> Score:
    """
    Example:
      secret = [B, W, B, W]
      guess  = [W, W, B, B]
      exact_matches (bulls) = 2  (positions 1 and 2)
      other_matches (cows)  = 2  (leftover B, W against W, B)
    """
    _check_lengths(secret, guess)
    exact, remaining_secret, remaining_guess = _exact_pass(secret, guess)

    secret_counts = Counter(c.label() for c in remaining_secret if c is not None)
    guess_counts = Counter(c.label() for c in remaining_guess if c is not None)

    # Overlap is the sum of the smaller count for each colour
    other = sum(min(count, guess_counts[label]) for label, count in secret_counts.items())

    return Score(exact, other)


def is_win(secret: Code, guess: Code) -> bool:
    """
    Win = every position matches.
    Works for any length, as long as lengths match.
    """
    if len(secret) == 0 or len(guess) != len(secret):
        return False
    return secret == guess
