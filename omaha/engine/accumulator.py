from __future__ import annotations

from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import List, Tuple

from omaha.helpers.errors import DegenerateRun, InvalidInput

from .resolver import RoundOutcome


class TieCounting(str, Enum):
    """How a board's awards map onto the win and tie counters.

    SHARE: the sole high winner on a board with no qualifying low is a win,
    any other non-zero share (a hi/lo scoop included) is a tie, so
    win + tie + loss always equals the number of boards.

    CONFLATED: the classic omahacmpn tally. Only a sole high winner with no
    low is a win; a sole high winner facing a low, every high tie, an
    outright low win and every low tie each add a tie, so a player can pick
    up two ties on one board.
    """
    SHARE = "share"
    CONFLATED = "conflated"


@dataclass(slots=True)
class EquityCounters:
    wins: int = 0
    ties: int = 0
    losses: int = 0
    ev: float = 0.0

    # per-side tallies, independent of TieCounting
    high_wins: int = 0
    high_ties: int = 0
    low_wins: int = 0
    low_ties: int = 0

    def merge(self, other: "EquityCounters") -> None:
        for f in fields(self):
            setattr(self, f.name, getattr(self, f.name) + getattr(other, f.name))


@dataclass(frozen=True, slots=True)
class PlayerEquity:
    counters: EquityCounters
    win_pct: float
    tie_pct: float
    loss_pct: float
    ev_pct: float


@dataclass(frozen=True, slots=True)
class EquityResult:
    hand_count: int
    players: Tuple[PlayerEquity, ...]
    tie_counting: TieCounting

    def ev_pcts(self) -> List[float]:
        return [p.ev_pct for p in self.players]


class EquityAccumulator:
    """
    Running per-player totals over a stream of resolved boards.

    Each worker owns one; the parent folds them together with merge() and
    calls finalize() once every board has been added.
    """

    def __init__(self, n_players: int, tie_counting: TieCounting = TieCounting.SHARE):
        if n_players <= 0:
            raise InvalidInput("n_players must be positive")
        self.tie_counting = TieCounting(tie_counting)
        self.hand_count = 0
        self.counters = [EquityCounters() for _ in range(n_players)]

    @property
    def n_players(self) -> int:
        return len(self.counters)

    def add(self, outcome: RoundOutcome) -> None:
        if len(outcome.shares) != self.n_players:
            raise InvalidInput(f"Outcome has {len(outcome.shares)} shares, expected {self.n_players}")
        self.hand_count += 1

        high, low = outcome.high_winners, outcome.low_winners
        for i, c in enumerate(self.counters):
            share = outcome.shares[i]
            c.ev += share

            in_high = i in high
            in_low = i in low
            if in_high:
                if len(high) == 1:
                    c.high_wins += 1
                else:
                    c.high_ties += 1
            if in_low:
                if len(low) == 1:
                    c.low_wins += 1
                else:
                    c.low_ties += 1

            if share == 0.0:
                c.losses += 1

            if self.tie_counting is TieCounting.SHARE:
                if outcome.takes_whole_pot(i):
                    c.wins += 1
                elif share > 0.0:
                    c.ties += 1
            else:
                if in_high:
                    if outcome.takes_whole_pot(i):
                        c.wins += 1
                    else:
                        c.ties += 1
                if in_low:
                    c.ties += 1

    def merge(self, other: "EquityAccumulator") -> "EquityAccumulator":
        if other.n_players != self.n_players:
            raise InvalidInput("Cannot merge accumulators with different player counts")
        if other.tie_counting is not self.tie_counting:
            raise InvalidInput("Cannot merge accumulators with different tie counting")
        self.hand_count += other.hand_count
        for mine, theirs in zip(self.counters, other.counters):
            mine.merge(theirs)
        return self

    def finalize(self) -> EquityResult:
        if self.hand_count == 0:
            raise DegenerateRun("No boards were evaluated")
        n = self.hand_count
        players = tuple(
            PlayerEquity(
                counters=replace(c),
                win_pct=100.0 * c.wins / n,
                tie_pct=100.0 * c.ties / n,
                loss_pct=100.0 * c.losses / n,
                ev_pct=100.0 * c.ev / n,
            )
            for c in self.counters
        )
        return EquityResult(hand_count=n, players=players, tie_counting=self.tie_counting)
