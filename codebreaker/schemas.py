"""
Explicit validation & Pydantic models
- Models are used to validate and serialize/deserialize data
  exchanged between the player interface and the server.
- Defines the structure of API requests and responses.
"""

from typing import List, Optional
from pydantic import BaseModel, Field, field_validator

from .game import MastermindGame, TrialEntry
from .types import RoundStatus, VariantId


# 1. Validates a player's guess
class GuessRequest(BaseModel):
    guess: List[str] = Field(
        ..., description="Colour labels, one per position (e.g. R, G, B, Y)."
    )

    @field_validator("guess")
    @classmethod
    def normalize_labels(cls, guess_list: List[str]) -> List[str]:
        """
        We only check that each item is a single letter and upper-case it.
        Whether the letter is a colour of this game, and whether the length is right,
        depends on the live session, so the store checks that.
        """
        normalized = []
        for label in guess_list:
            text = label.strip().upper()
            if len(text) != 1:
                raise ValueError("Each colour must be a single letter.")
            normalized.append(text)
        return normalized

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"guess": ["R", "G", "B", "Y"]},  # multi colour
                {"guess": ["B", "W", "W", "B"]},  # bulls and cows
            ]
        }
    }


# 2. Describes the feedback for a single trial
class TrialOut(BaseModel):
    guess: List[str] = Field(..., description="The player's guess")
    exact_matches: int = Field(..., description="Colours in the right position")
    other_matches: int = Field(..., description="Right colours in another position")
    message: str = Field(..., description="Feedback message")
    timestamp: float = Field(..., description="When the guess was made")

    @classmethod
    def from_entry(cls, entry: TrialEntry) -> "TrialOut":
        return cls(
            guess=entry.code.labels(),
            exact_matches=entry.score.exact_matches,
            other_matches=entry.score.other_matches,
            message=entry.message,
            timestamp=entry.timestamp,
        )


# 3. Represents the overall state of the session and its current round
class SessionState(BaseModel):
    variant: VariantId = Field(..., description="Game variant")
    colours: List[str] = Field(..., description="Colour labels available in this variant")
    code_length: int = Field(..., description="Number of positions in the code")
    seed: Optional[int] = Field(None, description="Seed that reproduces this session")
    status: RoundStatus = Field(..., description="State of the current round")
    score: int = Field(..., description="Running score across rounds")
    trials: int = Field(..., description="Trials played this round")
    max_trials: int = Field(..., description="Trials allowed per round")
    hints_used: int = Field(..., description="Hints taken this round")
    history: List[TrialOut] = Field(..., description="All trials this round with feedback")
    secret: Optional[List[str]] = Field(None, description="The secret (only once the round is over)")

    @classmethod
    def from_game(cls, game: MastermindGame) -> "SessionState":
        return cls(
            variant=game.variant.id,
            colours=[c.label() for c in game.variant.domain.colours()],
            code_length=game.code_length,
            seed=game.seed,
            status=game.status,
            score=game.score(),
            trials=game.get_number_of_trials(),
            max_trials=game.max_trials,
            hints_used=game.hints_used(),
            history=[TrialOut.from_entry(t) for t in game.trials()],
            secret=game.secret().labels() if game.is_round_finished() else None,
        )


# 4. Result of a guess (or end of the round)
class GuessResponse(BaseModel):
    status: RoundStatus = Field(..., description="State of the current round")
    score: int = Field(..., description="Running score across rounds")
    trials: int = Field(..., description="Trials played this round")
    feedback: Optional[TrialOut] = Field(None, description="Feedback from the latest guess")
    secret: Optional[List[str]] = Field(None, description="The secret (only revealed if the round is over)")
    note: Optional[str] = Field(None, description="Extra note (ex. 'Round revealed. No more guesses.')")


# 5. Response schema for a hint
class HintOut(BaseModel):
    colour: str = Field(..., description="A colour that appears in the secret")
    score: int = Field(..., description="Running score after any hint penalty")
    hints_used: int = Field(..., description="Hints taken this round")


# 6. Response schema for the best trial of the round
class BestTrialOut(BaseModel):
    guess: Optional[List[str]] = Field(None, description="Best trial so far, or null if none")


# 7. Response schema for the scoreboard
class StatsOut(BaseModel):
    rounds_started: int = Field(..., description="Rounds started since the last reset")
    rounds_revealed: int = Field(..., description="Rounds where the secret was cracked")
    rounds_exhausted: int = Field(..., description="Rounds that ran out of trials")

    current_streak: int = Field(..., description="Current consecutive reveals")
    best_streak: int = Field(..., description="Best consecutive reveals")

    average_trials_to_reveal: Optional[float] = Field(
        None, description="Average number of trials used in revealed rounds"
    )
    fastest_reveal_trials: Optional[int] = Field(
        None, description="Fewest trials taken to crack a code"
    )

    hints_requested: int = Field(..., description="Hints asked for since the last reset")
