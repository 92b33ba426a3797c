'''
Single-session Codebreaker API

Endpoints:
POST /session              -> start a session (and its first round)
GET  /session              -> read state & history of the current round
POST /session/guess        -> submit a guess
GET  /session/hint         -> reveal one colour of the secret (costs points)
POST /session/rounds       -> start a new round, keeping the score
GET  /session/best         -> best trial of the current round
GET  /session/board        -> plain-text board

Extras:
GET  /stats                -> scoreboard
POST /stats/reset          -> reset scoreboard

One session lives in memory; starting a new one replaces it.
'''

import logging
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from .config import configure_logging, get_settings
from .game import MastermindGame
from .schemas import (
    BestTrialOut,
    GuessRequest,
    GuessResponse,
    HintOut,
    SessionState,
    StatsOut,
    TrialOut,
)
from .store import SessionStore

settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Codebreaker API", version="1.0.0")
logger.info(
    "Codebreaker API (%s): default variant %s, code length %d",
    settings.app_env, settings.variant, settings.code_length,
)

# Allow everything in dev so the docs and a local front-end work easily
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"]
)

_store = SessionStore()


# Routes get the process-wide store through a dependency so tests can swap it
def get_store() -> SessionStore:
    return _store


def _require_game(store: SessionStore) -> MastermindGame:
    game = store.get()
    if game is None:
        raise HTTPException(status_code=404, detail="No session. Start one with POST /session.")
    return game

# ---------------- Routes ----------------

@app.post("/session", response_model=SessionState, summary="Start a new session")
def start_session(
    variant: Optional[str] = None,
    code_length: Optional[int] = None,
    seed: Optional[int] = None,
    store: SessionStore = Depends(get_store),
) -> SessionState:
    """
    Variants:
      bulls_and_cows -> colours B, W; +2000 per cracked code, a hint halves the score
      multi_colour   -> colours B, R, Y, G, P, O; 100/50/20 points by trials, divided by hints + 1
    Missing parameters fall back to the configured defaults.
    """
    try:
        game = store.start(
            variant or settings.variant,
            code_length if code_length is not None else settings.code_length,
            seed if seed is not None else settings.seed,
        )
    except ValueError as ve:
        raise HTTPException(status_code=400, detail=str(ve))
    return SessionState.from_game(game)


@app.get("/session", response_model=SessionState, summary="Get current session state")
def get_session(store: SessionStore = Depends(get_store)) -> SessionState:
    return SessionState.from_game(_require_game(store))


@app.post("/session/guess", response_model=GuessResponse, summary="Submit a guess")
def submit_guess(
    payload: GuessRequest,
    store: SessionStore = Depends(get_store),
) -> GuessResponse:
    # store.guess() performs the length/colour checks & plays the trial
    try:
        updated = store.guess(payload.guess)
    except ValueError as ve:
        raise HTTPException(status_code=400, detail=str(ve))
    if updated is None:
        raise HTTPException(status_code=404, detail="No session. Start one with POST /session.")

    trials = updated.trials()
    feedback = TrialOut.from_entry(trials[-1]) if trials else None

    # When the round ends, include the secret in the response
    secret = store.get_secret()
    finished = updated.is_round_finished()

    return GuessResponse(
        status=updated.status,
        score=updated.score(),
        trials=updated.get_number_of_trials(),
        feedback=feedback,
        secret=secret.labels() if secret is not None else None,
        note=(f"Round {updated.status}. No more guesses allowed." if finished else None),
    )


@app.get("/session/hint", response_model=HintOut, summary="Get a hint: one colour of the secret")
def get_hint(store: SessionStore = Depends(get_store)) -> HintOut:
    colour = store.hint()
    if colour is None:
        raise HTTPException(status_code=404, detail="No session. Start one with POST /session.")
    game = _require_game(store)
    return HintOut(colour=colour.label(), score=game.score(), hints_used=game.hints_used())


@app.post("/session/rounds", response_model=SessionState, summary="Start a new round")
def start_round(store: SessionStore = Depends(get_store)) -> SessionState:
    game = store.new_round()
    if game is None:
        raise HTTPException(status_code=404, detail="No session. Start one with POST /session.")
    return SessionState.from_game(game)


@app.get("/session/best", response_model=BestTrialOut, summary="Best trial of the current round")
def get_best_trial(store: SessionStore = Depends(get_store)) -> BestTrialOut:
    best = _require_game(store).best_trial()
    return BestTrialOut(guess=best.labels() if best is not None else None)


@app.get("/session/board", response_class=PlainTextResponse, summary="Plain-text board")
def get_board(store: SessionStore = Depends(get_store)) -> str:
    return _require_game(store).render_status()


@app.get("/stats", response_model=StatsOut, summary="Get scoreboard")
def get_stats(store: SessionStore = Depends(get_store)) -> StatsOut:
    stats = store.get_stats()
    return StatsOut(
        rounds_started=stats.rounds_started,
        rounds_revealed=stats.rounds_revealed,
        rounds_exhausted=stats.rounds_exhausted,
        current_streak=stats.current_streak,
        best_streak=stats.best_streak,
        average_trials_to_reveal=stats.average_trials_to_reveal,
        fastest_reveal_trials=stats.fastest_reveal_trials,
        hints_requested=stats.hints_requested,
    )


@app.post("/stats/reset", summary="Reset the scoreboard")
def reset_stats(store: SessionStore = Depends(get_store)) -> dict:
    store.reset_stats()
    return {"message": "Stats reset."}
