"""
- Provide a scripted random source so secrets and hints are predictable
- Provide a make_game fixture that builds a game around a known secret
- Provide a client fixture (TestClient(app)) bound to a fresh in-memory store
- Keep random.org out of the test run
"""
import os
import pytest

from fastapi.testclient import TestClient

# Label the run before the app reads its settings
os.environ.setdefault("APP_ENV", "test")

from codebreaker import store as store_module
from codebreaker.game import MAX_TRIALS, MastermindGame
from codebreaker.main import app, get_store
from codebreaker.store import SessionStore
from codebreaker.variants import get_variant


class ScriptedRandom:
    """
    Stands in for random.Random: randrange() returns the queued values in order
    (0 once the queue runs dry). A secret of length N takes N values,
    a hint takes one.
    """

    def __init__(self, values=()):
        self.values = list(values)

    def push(self, *values):
        self.values.extend(values)

    def push_code(self, variant_id, labels):
        self.push(*draws_for(variant_id, labels))

    def randrange(self, stop):
        value = self.values.pop(0) if self.values else 0
        assert 0 <= value < stop
        return value


def draws_for(variant_id, labels):
    """Indices randrange() must return to draw exactly this secret."""
    domain = get_variant(variant_id).domain
    colours = domain.colours()
    return [colours.index(domain.from_label(label)) for label in labels]


@pytest.fixture
def make_game():
    """
    Returns a factory: make_game("multi_colour", ["R", "G", "B", "Y"]) -> (game, rng)
    The first round's secret is the given code; push more values on rng for later rounds/hints.
    """
    def _make(variant_id, secret, max_trials=MAX_TRIALS):
        rng = ScriptedRandom(draws_for(variant_id, secret))
        game = MastermindGame(
            get_variant(variant_id),
            code_length=len(secret),
            rng=rng,
            max_trials=max_trials,
        )
        return game, rng
    return _make


@pytest.fixture(autouse=True)
def _no_network(monkeypatch):
    """Sessions started without a seed get a fixed one instead of calling random.org."""
    monkeypatch.setattr(store_module, "fetch_seed", lambda: 1234)


@pytest.fixture
def session_store():
    return SessionStore()


@pytest.fixture
def client(session_store):
    # Every request uses our fresh store instead of the process-wide one
    app.dependency_overrides[get_store] = lambda: session_store
    yield TestClient(app)
    app.dependency_overrides.clear()
