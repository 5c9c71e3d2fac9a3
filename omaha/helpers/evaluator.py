from __future__ import annotations
from itertools import combinations
from typing import Dict, List, Optional, Sequence, Tuple

from .cache import HandRankCache
from .cards import DECK_SIZE
from .errors import EvaluationError

CATEGORY = {
    "high_card": 0,
    "pair": 1,
    "two_pair": 2,
    "trips": 3,
    "straight": 4,
    "flush": 5,
    "full_house": 6,
    "quads": 7,
    "straight_flush": 8,
}

HOLE_CARDS = 4
BOARD_CARDS = 5

# (category, *tiebreak); higher wins
HighValue = Tuple[int, ...]
# five distinct ranks, descending, ace = 1; lower wins
LowValue = Tuple[int, int, int, int, int]

# compares below every real hand
HIGH_NOTHING: HighValue = (-1,)

LOW_QUALIFIER = 8


def _rank_counts(vals: List[int]) -> Dict[int, int]:
    d: Dict[int, int] = {}
    for v in vals:
        d[v] = d.get(v, 0) + 1
    return d


def straight_high(values: List[int]) -> Optional[int]:
    uniq = sorted(set(values), reverse=True)
    if 14 in uniq:
        uniq.append(1)  # ace low
    run = 1
    best = None
    for i in range(len(uniq) - 1):
        if uniq[i] - 1 == uniq[i + 1]:
            run += 1
            if run >= 5:
                high = uniq[i - (run - 2)]
                best = max(best or 0, high)
        else:
            run = 1
    if best == 1:
        return 5
    return best


def evaluate_5(cards5: Sequence[int]) -> Tuple[int, Tuple[int, ...], str]:
    """Rank exactly five card ids. Returns (category, tiebreak, name)."""
    if len(cards5) != 5:
        raise ValueError("evaluate_5 expects exactly 5 cards")

    vals = sorted([(c >> 2) + 2 for c in cards5], reverse=True)
    is_flush = len({c & 3 for c in cards5}) == 1

    counts = _rank_counts(vals)
    groups = sorted(counts.items(), key=lambda kv: (kv[1], kv[0]), reverse=True)
    count_pattern = sorted(counts.values(), reverse=True)

    sh = straight_high(vals) if len(counts) == 5 else None
    is_straight = sh is not None

    if is_straight and is_flush:
        return CATEGORY["straight_flush"], (sh,), "straight_flush"
    if count_pattern == [4, 1]:
        quad = groups[0][0]
        kicker = groups[1][0]
        return CATEGORY["quads"], (quad, kicker), "quads"
    if count_pattern == [3, 2]:
        return CATEGORY["full_house"], (groups[0][0], groups[1][0]), "full_house"
    if is_flush:
        return CATEGORY["flush"], tuple(vals), "flush"
    if is_straight:
        return CATEGORY["straight"], (sh,), "straight"
    if count_pattern == [3, 1, 1]:
        trips = groups[0][0]
        kickers = sorted([v for v in vals if v != trips], reverse=True)
        return CATEGORY["trips"], (trips, *kickers), "trips"
    if count_pattern == [2, 2, 1]:
        return CATEGORY["two_pair"], (groups[0][0], groups[1][0], groups[2][0]), "two_pair"
    if count_pattern == [2, 1, 1, 1]:
        pair = groups[0][0]
        kickers = sorted([v for v in vals if v != pair], reverse=True)
        return CATEGORY["pair"], (pair, *kickers), "pair"
    return CATEGORY["high_card"], tuple(vals), "high_card"


def _high_value(cards5: Tuple[int, ...]) -> HighValue:
    cat, tiebreak, _ = evaluate_5(cards5)
    return (cat, *tiebreak)


def _low_rank(cid: int) -> Optional[int]:
    v = (cid >> 2) + 2
    if v == 14:
        return 1
    return v if v <= LOW_QUALIFIER else None


def _distinct_lows(cards: Sequence[int]) -> Optional[frozenset]:
    lows = set()
    for c in cards:
        r = _low_rank(c)
        if r is None or r in lows:
            return None
        lows.add(r)
    return frozenset(lows)


def best_low(hole: Sequence[int], board: Sequence[int]) -> Optional[LowValue]:
    """8-or-better ace-to-five low using exactly two hole and three board cards."""
    hole_lows = {s for s in (_distinct_lows(p) for p in combinations(hole, 2)) if s is not None}
    if not hole_lows:
        return None
    board_lows = {s for s in (_distinct_lows(t) for t in combinations(board, 3)) if s is not None}

    best: Optional[LowValue] = None
    for h in hole_lows:
        for b in board_lows:
            if h & b:
                continue
            v = tuple(sorted(h | b, reverse=True))
            if best is None or v < best:
                best = v
    return best


def _check_cards(hole: Sequence[int], board: Sequence[int]) -> None:
    if len(hole) != HOLE_CARDS:
        raise EvaluationError(f"Omaha hand must be exactly {HOLE_CARDS} cards, got {len(hole)}")
    if len(board) != BOARD_CARDS:
        raise EvaluationError(f"Board must be exactly {BOARD_CARDS} cards, got {len(board)}")
    cards = list(hole) + list(board)
    if any(not (0 <= c < DECK_SIZE) for c in cards):
        raise EvaluationError(f"Card id out of range in {cards}")
    if len(set(cards)) != len(cards):
        raise EvaluationError("Duplicate cards detected")


class OmahaHiLoEvaluator:
    """
    Omaha hi/lo 8-or-better evaluator.

    Callable as evaluator(hole, board) -> (high, low) where low is None when
    no qualifying low exists (always None with high_only=True). Results do not
    depend on cache state, so instances are safe to copy into worker
    processes.
    """

    def __init__(self, high_only: bool = False, cache_capacity: int = 200_000):
        self.high_only = high_only
        self.cache: HandRankCache[Tuple[int, ...], HighValue] = HandRankCache(cache_capacity)

    def best_high(self, hole: Sequence[int], board: Sequence[int]) -> HighValue:
        best = HIGH_NOTHING
        triples = list(combinations(board, 3))
        for pair in combinations(hole, 2):
            for triple in triples:
                key = tuple(sorted(pair + triple))
                v = self.cache.get_or_compute(key, _high_value)
                if v > best:
                    best = v
        return best

    def __call__(
        self, hole: Sequence[int], board: Sequence[int]
    ) -> Tuple[HighValue, Optional[LowValue]]:
        _check_cards(hole, board)
        hole, board = tuple(hole), tuple(board)
        high = self.best_high(hole, board)
        low = None if self.high_only else best_low(hole, board)
        return high, low

    evaluate = __call__

