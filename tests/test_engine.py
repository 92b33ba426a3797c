"""
Testing pure game logic: the two evaluators.
"""

from itertools import permutations, product

import pytest

from codebreaker.code import Code
from codebreaker.colours import BinaryColour, MultiColour
from codebreaker.engine import Score, is_win, score_bulls_and_cows, score_classic


def multi(labels):
    return Code.from_labels(list(labels), MultiColour)


def binary(labels):
    return Code.from_labels(list(labels), BinaryColour)


def test_classic_no_matches():
    result = score_classic(multi("RGBY"), multi("PPOO"))
    assert result == Score(0, 0)


def test_classic_all_colours_wrong_place():
    # secret has R, G, B, B; guess shares R and both Bs, none in place
    result = score_classic(multi("RGBB"), multi("BBRY"))

    assert result.exact_matches == 0
    assert result.other_matches == 3


def test_classic_exact_positions_are_not_counted_twice():
    secret = multi("RRGB")
    guess = multi("RGRR")

    result = score_classic(secret, guess)

    # Position 0 is exact; leftover secret R, G, B vs guess G, R, R
    assert result.exact_matches == 1
    assert result.other_matches == 2


def test_classic_duplicates_in_guess_only():
    result = score_classic(multi("RGBY"), multi("YYYY"))
    assert result.as_tuple() == (1, 0)


def test_bulls_and_cows_cross_match():
    result = score_bulls_and_cows(binary("BWBW"), binary("WWBB"))

    assert result.exact_matches == 2
    assert result.other_matches == 2


def test_bulls_and_cows_uneven_counts():
    # leftovers: secret B, B, B vs guess W, W, W -> nothing to pair
    result = score_bulls_and_cows(binary("BBBW"), binary("WWWW"))
    assert result.as_tuple() == (1, 0)


def test_label_equality_across_domains():
    # BLACK and BLUE are both "B"
    result = score_classic(binary("BBWW"), multi("BBRR"))
    assert result.as_tuple() == (2, 0)


@pytest.mark.parametrize("evaluate", [score_classic, score_bulls_and_cows])
def test_mismatched_lengths_raise(evaluate):
    with pytest.raises(ValueError, match="same non-zero length"):
        evaluate(multi("RGBY"), multi("RGB"))


@pytest.mark.parametrize("evaluate", [score_classic, score_bulls_and_cows])
def test_empty_codes_raise(evaluate):
    with pytest.raises(ValueError):
        evaluate(Code([]), Code([]))


@pytest.mark.parametrize("evaluate", [score_classic, score_bulls_and_cows])
def test_code_against_itself_is_all_exact(evaluate):
    for labels in product("BW", repeat=4):
        code = binary(labels)
        assert evaluate(code, code) == Score(4, 0)


@pytest.mark.parametrize("evaluate", [score_classic, score_bulls_and_cows])
def test_matches_never_exceed_code_length(evaluate):
    codes = [multi(labels) for labels in product("BRY", repeat=3)]
    for secret in codes:
        for guess in codes:
            result = evaluate(secret, guess)
            assert 0 <= result.exact_matches <= 3
            assert 0 <= result.exact_matches + result.other_matches <= 3


def _best_pairing(secret, guess):
    """Brute force: try every way to pair leftover positions, keep the largest match count."""
    left_secret = [c.label() for c, g in zip(secret, guess) if c.label() != g.label()]
    left_guess = [g.label() for c, g in zip(secret, guess) if c.label() != g.label()]
    best = 0
    for order in permutations(range(len(left_guess))):
        matched = sum(1 for i, j in enumerate(order) if left_secret[i] == left_guess[j])
        best = max(best, matched)
    return best


def test_bulls_and_cows_equals_optimal_matching():
    codes = [binary(labels) for labels in product("BW", repeat=4)]
    for secret in codes:
        for guess in codes:
            assert score_bulls_and_cows(secret, guess).other_matches == _best_pairing(secret, guess)


def test_evaluators_do_not_touch_their_inputs():
    secret = multi("RGBB")
    guess = multi("BBRY")
    score_classic(secret, guess)
    score_bulls_and_cows(secret, guess)
    assert secret.labels() == ["R", "G", "B", "B"]
    assert guess.labels() == ["B", "B", "R", "Y"]


def test_is_win_true_and_false():
    assert is_win(multi("RGBY"), multi("RGBY")) is True
    assert is_win(multi("RGBY"), multi("RGBO")) is False
    assert is_win(multi("RGBY"), multi("RGB")) is False
