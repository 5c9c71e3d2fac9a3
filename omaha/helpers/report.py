from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, TYPE_CHECKING

from .cards import format_cards

if TYPE_CHECKING:
    from omaha.engine.accumulator import EquityResult


def _summary_line(hand_count: int, board: Sequence[int], dead: Sequence[int]) -> str:
    line = f"{hand_count} boards"
    if board:
        line += f" containing {format_cards(board)} "
    if dead:
        line += f" with {format_cards(dead)} removed "
    return line


def format_report(
    result: "EquityResult",
    hands: Sequence[Sequence[int]],
    board: Sequence[int] = (),
    dead: Sequence[int] = (),
) -> str:
    """Text table in the layout of the classic omahacmpn tool."""
    lines: List[str] = [_summary_line(result.hand_count, board, dead)]
    lines.append("  cards            win  %win       loss  %lose       tie  %tie      EV")
    for hand, p in zip(hands, result.players):
        c = p.counters
        lines.append(
            f"  {format_cards(hand)}  {c.wins:7d} {p.win_pct:6.2f}   "
            f"{c.losses:7d} {p.loss_pct:6.2f}   "
            f"{c.ties:7d} {p.tie_pct:6.2f}     {p.ev_pct:6.2f}%"
        )
    return "\n".join(lines)


def report_dict(
    result: "EquityResult",
    hands: Sequence[Sequence[int]],
    board: Sequence[int] = (),
    dead: Sequence[int] = (),
    mode: str = "exhaustive",
    seed: Optional[int] = None,
) -> Dict[str, Any]:
    players = []
    for i, (hand, p) in enumerate(zip(hands, result.players)):
        c = p.counters
        players.append({
            "player": i + 1,
            "cards": format_cards(hand),
            "wins": c.wins,
            "ties": c.ties,
            "losses": c.losses,
            "high_wins": c.high_wins,
            "high_ties": c.high_ties,
            "low_wins": c.low_wins,
            "low_ties": c.low_ties,
            "ev_sum": round(c.ev, 6),
            "win_pct": round(p.win_pct, 4),
            "tie_pct": round(p.tie_pct, 4),
            "loss_pct": round(p.loss_pct, 4),
            "ev_pct": round(p.ev_pct, 4),
        })
    return {
        "mode": mode,
        "boards": result.hand_count,
        "board": format_cards(board),
        "dead": format_cards(dead),
        "seed": seed,
        "tie_counting": result.tie_counting.value,
        "players": players,
    }
