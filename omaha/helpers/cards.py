from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Tuple, Union

RANKS = "23456789TJQKA"
SUITS = "cdhs"
RANK_TO_VAL = {r: i + 2 for i, r in enumerate(RANKS)}  # 2..14
VAL_TO_RANK = {v: r for r, v in RANK_TO_VAL.items()}

# ------------------------------------------------------------
# Card encoding: 0..51 (rank-major, suit-minor)
# rank 2..A => 0..12, suit c/d/h/s => 0..3
# ------------------------------------------------------------

_SUIT_TO_I = {s: i for i, s in enumerate(SUITS)}

DECK_SIZE = 52


@dataclass(frozen=True, order=True)
class Card:
    val: int
    suit: str

    def __str__(self) -> str:
        return f"{VAL_TO_RANK[self.val]}{self.suit}"

    @property
    def id(self) -> int:
        return (self.val - 2) * 4 + _SUIT_TO_I[self.suit]

    @staticmethod
    def from_str(s: str) -> "Card":
        s = s.strip()
        if s[:2] == "10":
            s = "T" + s[2:]
        if len(s) != 2:
            raise ValueError(f"Bad card string: {s!r}")
        r, su = s[0].upper(), s[1].lower()
        if r not in RANK_TO_VAL or su not in SUITS:
            raise ValueError(f"Bad card string: {s!r}")
        return Card(RANK_TO_VAL[r], su)

    @staticmethod
    def from_id(cid: int) -> "Card":
        if not (0 <= cid < DECK_SIZE):
            raise ValueError(f"Card id out of range: {cid}")
        return Card(cid // 4 + 2, SUITS[cid % 4])


CardLike = Union[str, int, Card]


def card_to_id(c: CardLike) -> int:
    if isinstance(c, int):
        if not (0 <= c < DECK_SIZE):
            raise ValueError(f"Card id out of range: {c}")
        return c
    c = c if isinstance(c, Card) else Card.from_str(c)
    return c.id


def id_to_card(cid: int) -> Card:
    return Card.from_id(cid)


def card_number(cid: int) -> int:
    """1..52 numbering used by the classic omaha tools (2c = 1 ... As = 52)."""
    return card_to_id(cid) + 1


def parse_cards(cards: Iterable[CardLike]) -> List[Card]:
    out: List[Card] = []
    for x in cards:
        if isinstance(x, Card):
            out.append(x)
        elif isinstance(x, int):
            out.append(Card.from_id(x))
        else:
            out.append(Card.from_str(x))
    return out


def parse_card_ids(cards: Union[str, Iterable[CardLike]]) -> Tuple[int, ...]:
    """Accepts an iterable of cards or a whitespace separated string ("Ah Kd 7c")."""
    if isinstance(cards, str):
        cards = cards.split()
    return tuple(card_to_id(c) for c in cards)


def format_cards(cids: Iterable[int]) -> str:
    return " ".join(str(id_to_card(c)) for c in cids)


def make_deck(exclude: Iterable[int] = ()) -> List[int]:
    dead = set(exclude)
    return [cid for cid in range(DECK_SIZE) if cid not in dead]
