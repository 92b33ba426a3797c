"""
In-memory store
Holds the one live game session and a scoreboard of finished rounds.

The engine itself is single-threaded; the lock serialises calls coming in
from the HTTP worker threads.
"""

import logging
from dataclasses import dataclass
from threading import RLock
from typing import Optional

from .code import Code
from .colours import Colour
from .game import MastermindGame
from .random_client import fetch_seed
from .types import Labels
from .variants import get_variant

logger = logging.getLogger(__name__)


# Scoreboard structure
@dataclass
class Stats:
    rounds_started: int = 0
    rounds_revealed: int = 0
    rounds_exhausted: int = 0

    current_streak: int = 0
    best_streak: int = 0

    total_trials_in_reveals: int = 0
    fastest_reveal_trials: Optional[int] = None

    hints_requested: int = 0

    @property
    def average_trials_to_reveal(self) -> Optional[float]:
        if self.rounds_revealed == 0:
            return None
        return self.total_trials_in_reveals / self.rounds_revealed


class SessionStore:
    def __init__(self) -> None:
        self._game: Optional[MastermindGame] = None
        self._lock = RLock()
        self._stats = Stats()

    def start(self, variant_id: str, code_length: int, seed: Optional[int] = None) -> MastermindGame:
        """Replace the live session with a new one (first round already started)."""
        variant = get_variant(variant_id)
        if seed is None:
            seed = fetch_seed()
        game = MastermindGame(variant, code_length=code_length, seed=seed)
        with self._lock:
            self._game = game
            self._stats.rounds_started += 1
        logger.info("Session started: %s, length %d, seed %d", variant.id, code_length, seed)
        return game

    def get(self) -> Optional[MastermindGame]:
        with self._lock:
            return self._game

    def guess(self, labels: Labels) -> Optional[MastermindGame]:
        with self._lock:
            game = self._game
            if game is None:
                return None

            if game.is_round_finished():
                # If the round already ended, just return it (ignore extra guesses)
                return game

            # --- length guard ---
            if len(labels) != game.code_length:
                raise ValueError(f"Guess must have exactly {game.code_length} colours for this game.")

            code = Code.from_labels(labels, game.variant.domain)
            game.play(code)

            # Update scoreboard exactly once, on the transition to finished
            if game.is_round_finished():
                self._update_stats_on_end(game)

            return game

    def hint(self) -> Optional[Colour]:
        with self._lock:
            game = self._game
            if game is None:
                return None
            self._stats.hints_requested += 1
            return game.hint()

    def new_round(self) -> Optional[MastermindGame]:
        with self._lock:
            game = self._game
            if game is None:
                return None
            game.start_new_round()
            self._stats.rounds_started += 1
            return game

    def get_secret(self) -> Optional[Code]:
        """Return the secret code ONLY for finished rounds; else None."""
        with self._lock:
            if self._game is None or not self._game.is_round_finished():
                return None
            return self._game.secret()

    # Helper updates scoreboard exactly once per round
    def _update_stats_on_end(self, game: MastermindGame) -> None:
        if game.was_secret_revealed():
            self._stats.rounds_revealed += 1

            # streaks
            self._stats.current_streak += 1
            if self._stats.current_streak > self._stats.best_streak:
                self._stats.best_streak = self._stats.current_streak

            trials_used = game.get_number_of_trials()
            self._stats.total_trials_in_reveals += trials_used
            if self._stats.fastest_reveal_trials is None or trials_used < self._stats.fastest_reveal_trials:
                self._stats.fastest_reveal_trials = trials_used
        else:
            self._stats.rounds_exhausted += 1
            self._stats.current_streak = 0

    def get_stats(self) -> Stats:
        return self._stats

    def reset_stats(self) -> None:
        with self._lock:
            self._stats = Stats()
