from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence, Tuple

from omaha.helpers.errors import EvaluationError
from omaha.helpers.evaluator import HIGH_NOTHING

# (hole, board) -> (high, low or None)
Evaluator = Callable[[Sequence[int], Sequence[int]], Tuple[Any, Optional[Any]]]

FULL_POT = 1.0
HALF_POT = 0.5


@dataclass(frozen=True, slots=True)
class RoundOutcome:
    """
    Who won what on one complete board.

    shares[i] is player i's fraction of the pot (high and low halves added).
    An empty low_winners means nobody qualified for low and the high side
    took the whole pot.
    """
    high_winners: Tuple[int, ...]
    low_winners: Tuple[int, ...]
    shares: Tuple[float, ...]

    @property
    def has_low(self) -> bool:
        return bool(self.low_winners)

    def takes_whole_pot(self, player: int) -> bool:
        """Sole high winner on a board where nobody qualified for low."""
        return self.high_winners == (player,) and not self.has_low


def resolve_board(hands: Sequence[Sequence[int]], board: Sequence[int], evaluate: Evaluator) -> RoundOutcome:
    best_high: Any = HIGH_NOTHING
    best_low: Any = None
    high_winners: List[int] = []
    low_winners: List[int] = []

    for i, hole in enumerate(hands):
        try:
            high, low = evaluate(hole, board)
        except EvaluationError:
            raise
        except (ValueError, LookupError, TypeError) as e:
            raise EvaluationError(f"Evaluator failed for player {i}: {e}") from e

        if not high_winners or high > best_high:
            best_high = high
            high_winners = [i]
        elif high == best_high:
            high_winners.append(i)

        if low is None:
            continue
        if best_low is None or low < best_low:
            best_low = low
            low_winners = [i]
        elif low == best_low:
            low_winners.append(i)

    if not high_winners:
        raise EvaluationError("No player produced a high hand")

    shares = [0.0] * len(hands)
    high_pot = HALF_POT if low_winners else FULL_POT
    for w in high_winners:
        shares[w] += high_pot / len(high_winners)
    for w in low_winners:
        shares[w] += HALF_POT / len(low_winners)

    return RoundOutcome(tuple(high_winners), tuple(low_winners), tuple(shares))
