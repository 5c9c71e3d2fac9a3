import pytest

from omaha.engine.resolver import resolve_board
from omaha.helpers.cards import parse_card_ids as ids
from omaha.helpers.errors import EvaluationError
from omaha.helpers.evaluator import OmahaHiLoEvaluator

HANDS = [(0, 1, 2, 3), (4, 5, 6, 7), (8, 9, 10, 11)]
BOARD = (40, 41, 42, 43, 44)


class FakeEvaluator:
    """Looks up a fixed (high, low) per hole tuple."""

    def __init__(self, values):
        self.values = {h: v for h, v in zip(HANDS, values)}

    def __call__(self, hole, board):
        return self.values[tuple(hole)]


def resolve(values):
    return resolve_board(HANDS, BOARD, FakeEvaluator(values))


def test_sole_high_no_low_takes_whole_pot():
    out = resolve([(9, None), (5, None), (3, None)])
    assert out.high_winners == (0,)
    assert out.low_winners == ()
    assert out.shares == (1.0, 0.0, 0.0)
    assert out.takes_whole_pot(0)


def test_two_way_high_tie_without_low_splits_evenly():
    out = resolve([(7, None), (3, None), (7, None)])
    assert out.high_winners == (0, 2)
    assert out.shares == (0.5, 0.0, 0.5)


def test_tie_keeps_prior_best_and_ascending_order():
    out = resolve([(5, None), (7, None), (7, None)])
    assert out.high_winners == (1, 2)


def test_high_and_low_split_between_players():
    out = resolve([(9, None), (5, (7, 5, 3, 2, 1)), (3, (8, 6, 4, 3, 2))])
    assert out.high_winners == (0,)
    assert out.low_winners == (1,)
    assert out.shares == (0.5, 0.5, 0.0)
    assert not out.takes_whole_pot(0)


def test_scoop_collects_both_halves():
    out = resolve([(9, (6, 4, 3, 2, 1)), (5, (7, 5, 3, 2, 1)), (3, None)])
    assert out.shares == (1.0, 0.0, 0.0)
    assert out.has_low
    assert not out.takes_whole_pot(0)


def test_three_way_high_tie_with_two_way_low_tie():
    low = (8, 5, 4, 2, 1)
    out = resolve([(4, low), (4, None), (4, low)])
    assert out.high_winners == (0, 1, 2)
    assert out.low_winners == (0, 2)
    assert out.shares[1] == pytest.approx(0.5 / 3)
    assert out.shares[0] == pytest.approx(0.5 / 3 + 0.25)
    assert sum(out.shares) == pytest.approx(1.0)


def test_players_without_low_never_take_part():
    out = resolve([(9, None), (5, None), (3, (8, 7, 6, 5, 4))])
    assert out.low_winners == (2,)
    assert out.shares == (0.5, 0.0, 0.5)


def test_evaluator_value_error_is_fatal():
    def broken(hole, board):
        raise ValueError("bad cards")

    with pytest.raises(EvaluationError):
        resolve_board(HANDS, BOARD, broken)


@pytest.mark.parametrize("exc", [KeyError("table"), IndexError("slot"), TypeError("bad hole")])
def test_evaluator_lookup_and_type_errors_are_fatal(exc):
    def broken(hole, board):
        raise exc

    with pytest.raises(EvaluationError) as info:
        resolve_board(HANDS, BOARD, broken)
    assert info.value.__cause__ is exc


def test_real_evaluator_on_a_river_board():
    hands = [ids("Ac 3d 9s 9h"), ids("Kc Ks 8d 8c")]
    out = resolve_board(hands, ids("2c 5d 7h Kd Qs"), OmahaHiLoEvaluator())
    assert out.high_winners == (1,)
    assert out.low_winners == (0,)
    assert out.shares == (0.5, 0.5)
