from __future__ import annotations

import random
from itertools import combinations, islice
from math import comb
from typing import Iterable, Iterator, List, Optional, Tuple

from omaha.helpers.cards import make_deck
from omaha.helpers.errors import InvalidInput

Board = Tuple[int, ...]

BOARD_CARDS = 5


def _missing_and_pool(known: Iterable[int], excluded: Iterable[int]) -> Tuple[Tuple[int, ...], int, List[int]]:
    known_t = tuple(known)
    excluded_s = set(excluded)
    if len(known_t) > BOARD_CARDS:
        raise InvalidInput(f"Board cannot exceed {BOARD_CARDS} cards, got {len(known_t)}")
    if len(set(known_t)) != len(known_t):
        raise InvalidInput("Duplicate cards on the board")
    overlap = excluded_s.intersection(known_t)
    if overlap:
        raise InvalidInput(f"Board cards overlap hole/dead cards: {sorted(overlap)}")

    pool = make_deck(exclude=excluded_s.union(known_t))
    missing = BOARD_CARDS - len(known_t)
    if missing > len(pool):
        raise InvalidInput(f"Need {missing} unseen cards but only {len(pool)} remain")
    return known_t, missing, pool


def unseen_pool(known: Iterable[int], excluded: Iterable[int]) -> List[int]:
    """Cards that can still land on the board, ascending by id."""
    return _missing_and_pool(known, excluded)[2]


def runout_count(known: Iterable[int], excluded: Iterable[int]) -> int:
    known_t, missing, pool = _missing_and_pool(known, excluded)
    return comb(len(pool), missing)


def exhaustive_runouts(
    known: Iterable[int],
    excluded: Iterable[int],
    start: int = 0,
    stop: Optional[int] = None,
) -> Iterator[Board]:
    """
    Every completion of the board, in combination order of the unseen pool.

    start/stop select a slice of that sequence so several workers can share
    one enumeration without overlap.
    """
    known_t, missing, pool = _missing_and_pool(known, excluded)
    if start < 0 or (stop is not None and stop < start):
        raise InvalidInput(f"Bad runout slice [{start}, {stop})")
    return _complete_each(known_t, islice(combinations(pool, missing), start, stop))


def _complete_each(known: Tuple[int, ...], completions: Iterable[Tuple[int, ...]]) -> Iterator[Board]:
    for extra in completions:
        yield known + extra


def monte_carlo_runouts(
    known: Iterable[int],
    excluded: Iterable[int],
    iterations: int,
    rng: random.Random,
) -> Iterator[Board]:
    """
    iterations random completions, each drawn without replacement from the
    unseen pool and independent of the others.

    A complete board is still yielded iterations times.
    """
    known_t, missing, pool = _missing_and_pool(known, excluded)
    if iterations < 0:
        raise InvalidInput(f"Monte Carlo iterations must be >= 0, got {iterations}")
    return _sample_each(known_t, pool, missing, iterations, rng)


def _sample_each(
    known: Tuple[int, ...], pool: List[int], missing: int, iterations: int, rng: random.Random
) -> Iterator[Board]:
    for _ in range(iterations):
        yield known + tuple(rng.sample(pool, missing))
