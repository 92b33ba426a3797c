"""
- HTTP call with clear fallback
Get one random seed from random.org. If anything goes wrong (no internet,
timeout, bad response), we fall back to a local secure random generator so the game still works.

The seed feeds the session's own random.Random, so a session can always be
replayed from the seed it reports.
"""

import logging
from secrets import randbelow

import requests

logger = logging.getLogger(__name__)

RANDOM_URL = "https://www.random.org/integers/"
SEED_MAX = 1_000_000_000


def fetch_seed() -> int:
    # Parameters to send to random.org
    params = {
        "num": 1,          # one number is enough for a seed
        "min": 0,          # smallest allowed number
        "max": SEED_MAX,   # largest allowed number (random.org caps at 1e9)
        "col": 1,          # one number per line
        "base": 10,        # normal decimal numbers
        "format": "plain", # plain text response
        "rnd": "new",      # always generate new numbers
    }

    # keep network quick; if it takes too long, we will just fallback
    timeout_seconds = 3.0

    try:
        response = requests.get(RANDOM_URL, params=params, timeout=timeout_seconds)

        # If the response was not 200 OK, this will raise an error
        response.raise_for_status()

        # The body looks like:
        #   718230517\n
        values = [int(line) for line in response.text.splitlines() if line.strip() != ""]

        if len(values) != 1:
            raise ValueError(f"random.org returned {len(values)} values, expected 1.")
        if values[0] < 0 or values[0] > SEED_MAX:
            raise ValueError("random.org number out of range.")

        return values[0]

    except (requests.RequestException, ValueError) as exc:
        # Fallback: use Python's secure random
        logger.warning("random.org unavailable (%s); using local seed", exc)
        return randbelow(SEED_MAX + 1)
