from math import comb

import pytest

from omaha.engine import RunConfig, TieCounting, run_equity
from omaha.helpers.cards import make_deck, parse_card_ids as ids
from omaha.helpers.errors import DegenerateRun, EvaluationError

HANDS = ["Ah Ad 2c 3c", "Kh Ks Qh Qs"]
FLOP = "7h 8h 2s"
TURN = "7h 8h 2s 4d"


def _counts(result):
    return [(p.counters.wins, p.counters.ties, p.counters.losses) for p in result.players]


def test_exhaustive_flop_visits_every_board():
    res = run_equity(RunConfig.from_cards(HANDS, board=FLOP))
    assert res.hand_count == comb(41, 2)
    assert sum(res.ev_pcts()) == pytest.approx(100.0)
    for p in res.players:
        c = p.counters
        assert c.wins + c.ties + c.losses == res.hand_count
        assert p.win_pct + p.tie_pct + p.loss_pct == pytest.approx(100.0)


def test_exhaustive_preflop_with_many_dead_cards():
    holes = [c for h in HANDS for c in ids(h)]
    dead = make_deck(exclude=holes)[:33]
    res = run_equity(RunConfig.from_cards(HANDS, dead=dead))
    assert res.hand_count == comb(52 - 8 - 33, 5)
    for p in res.players:
        c = p.counters
        assert 100.0 * (c.wins + c.ties) / res.hand_count == pytest.approx(p.win_pct + p.tie_pct)
    assert sum(res.ev_pcts()) == pytest.approx(100.0)


def test_river_board_is_a_single_evaluation():
    res = run_equity(RunConfig.from_cards(["Ac 3d 9s 9h", "Kc Ks 8d 8c"], board="2c 5d 7h Kd Qs"))
    assert res.hand_count == 1
    assert res.ev_pcts() == [50.0, 50.0]
    assert _counts(res) == [(0, 1, 0), (0, 1, 0)]


def test_monte_carlo_honours_iteration_count_on_complete_board():
    cfg = RunConfig.from_cards(["Ac 3d 9s 9h", "Kc Ks 8d 8c"], board="2c 5d 7h Kd Qs", iterations=5, seed=1)
    res = run_equity(cfg)
    assert res.hand_count == 5
    assert res.ev_pcts() == [50.0, 50.0]


def test_monte_carlo_converges_to_exhaustive():
    exact = run_equity(RunConfig.from_cards(HANDS, board=TURN))
    assert exact.hand_count == 40

    sampled = run_equity(RunConfig.from_cards(HANDS, board=TURN, iterations=10_000, seed=7))
    assert sampled.hand_count == 10_000
    for e, s in zip(exact.players, sampled.players):
        assert s.ev_pct == pytest.approx(e.ev_pct, abs=2.0)
        assert s.win_pct == pytest.approx(e.win_pct, abs=2.0)


def test_monte_carlo_same_seed_same_result():
    cfg = RunConfig.from_cards(HANDS, board=FLOP, iterations=300, seed=42)
    assert _counts(run_equity(cfg)) == _counts(run_equity(cfg))


def test_zero_iterations_is_degenerate():
    with pytest.raises(DegenerateRun):
        run_equity(RunConfig.from_cards(HANDS, board=FLOP, iterations=0))


def test_parallel_exhaustive_matches_single_worker():
    single = run_equity(RunConfig.from_cards(HANDS, board=FLOP))
    multi = run_equity(RunConfig.from_cards(HANDS, board=FLOP, workers=3))
    assert multi.hand_count == single.hand_count
    assert _counts(multi) == _counts(single)
    assert multi.ev_pcts() == pytest.approx(single.ev_pcts())


def test_parallel_monte_carlo_keeps_exact_count():
    res = run_equity(RunConfig.from_cards(HANDS, board=FLOP, iterations=301, seed=5, workers=2))
    assert res.hand_count == 301


def test_conflated_counting_can_exceed_board_count():
    res = run_equity(RunConfig.from_cards(HANDS, board=FLOP, tie_counting=TieCounting.CONFLATED))
    shared = run_equity(RunConfig.from_cards(HANDS, board=FLOP))
    assert res.hand_count == shared.hand_count
    assert res.ev_pcts() == pytest.approx(shared.ev_pcts())
    assert res.players[0].counters.ties >= shared.players[0].counters.ties


def test_high_only_never_splits_for_low():
    res = run_equity(RunConfig.from_cards(HANDS, board=FLOP, high_only=True))
    for p in res.players:
        assert p.counters.low_wins == 0
        assert p.counters.low_ties == 0


def test_evaluator_failure_aborts_run():
    def broken(hole, board):
        raise ValueError("lookup table corrupted")

    with pytest.raises(EvaluationError):
        run_equity(RunConfig.from_cards(HANDS, board=FLOP), evaluator=broken)


def test_custom_evaluator_is_used():
    calls = []

    def first_player_always_wins(hole, board):
        calls.append(hole)
        return (1 if hole == ids(HANDS[0]) else 0), None

    res = run_equity(RunConfig.from_cards(HANDS, board=TURN), evaluator=first_player_always_wins)
    assert res.players[0].win_pct == 100.0
    assert res.players[1].loss_pct == 100.0
    assert len(calls) == 2 * 40
