from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import FrozenSet, Iterable, Optional, Tuple, Union

from omaha.helpers.cards import DECK_SIZE, CardLike, parse_card_ids
from omaha.helpers.errors import InvalidInput
from omaha.helpers.evaluator import BOARD_CARDS, HOLE_CARDS

from .accumulator import TieCounting

MIN_PLAYERS = 2
MAX_PLAYERS = 9

CardsIn = Union[str, Iterable[CardLike]]


@dataclass(frozen=True)
class RunConfig:
    """
    Everything one equity run needs, validated once up front.

    iterations=None selects exhaustive enumeration; an int selects Monte
    Carlo with that many boards.
    """
    hands: Tuple[Tuple[int, ...], ...]
    board: Tuple[int, ...] = ()
    dead: Tuple[int, ...] = ()
    iterations: Optional[int] = None
    seed: Optional[int] = None
    workers: int = 1
    tie_counting: TieCounting = TieCounting.SHARE
    high_only: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "hands", tuple(tuple(h) for h in self.hands))
        object.__setattr__(self, "board", tuple(self.board))
        object.__setattr__(self, "dead", tuple(self.dead))

        n = len(self.hands)
        if not (MIN_PLAYERS <= n <= MAX_PLAYERS):
            raise InvalidInput(f"bad number of players: {n} (expected {MIN_PLAYERS}..{MAX_PLAYERS})")
        for i, h in enumerate(self.hands):
            if len(h) != HOLE_CARDS:
                raise InvalidInput(f"player {i + 1} needs {HOLE_CARDS} hole cards, got {len(h)}")
        if len(self.board) > BOARD_CARDS:
            raise InvalidInput(f"bad number of common cards: {len(self.board)}")
        if self.iterations is not None and self.iterations < 0:
            raise InvalidInput(f"bad iteration count: {self.iterations}")
        if self.workers < 1:
            raise InvalidInput(f"workers must be >= 1, got {self.workers}")

        known = [c for h in self.hands for c in h] + list(self.board) + list(self.dead)
        bad = [c for c in known if not (0 <= c < DECK_SIZE)]
        if bad:
            raise InvalidInput(f"card ids out of range: {bad}")
        if len(set(known)) != len(known):
            dupes = sorted(c for c, k in Counter(known).items() if k > 1)
            raise InvalidInput(f"duplicate cards: {dupes}")

        try:
            object.__setattr__(self, "tie_counting", TieCounting(self.tie_counting))
        except ValueError as e:
            raise InvalidInput(str(e)) from e

    @classmethod
    def from_cards(
        cls,
        hands: Iterable[CardsIn],
        board: CardsIn = (),
        dead: CardsIn = (),
        **options,
    ) -> "RunConfig":
        try:
            hand_ids = tuple(parse_card_ids(h) for h in hands)
            board_ids = parse_card_ids(board)
            # a dead card listed twice is still one card
            dead_ids = tuple(dict.fromkeys(parse_card_ids(dead)))
        except ValueError as e:
            raise InvalidInput(str(e)) from e
        return cls(hands=hand_ids, board=board_ids, dead=dead_ids, **options)

    @property
    def monte_carlo(self) -> bool:
        return self.iterations is not None

    @property
    def n_players(self) -> int:
        return len(self.hands)

    @property
    def excluded(self) -> FrozenSet[int]:
        """Hole cards of every player plus dead cards."""
        return frozenset(c for h in self.hands for c in h).union(self.dead)

    @property
    def missing(self) -> int:
        return BOARD_CARDS - len(self.board)
