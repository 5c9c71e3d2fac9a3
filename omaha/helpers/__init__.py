# cards
from .cards import Card, card_number, card_to_id, format_cards, id_to_card, make_deck, parse_card_ids, parse_cards

# errors
from .errors import DegenerateRun, EquityError, EvaluationError, InvalidInput

# evaluation + caching
from .evaluator import CATEGORY, HIGH_NOTHING, OmahaHiLoEvaluator, best_low, evaluate_5
from .cache import HandRankCache

# reporting
from .report import format_report, report_dict

__all__ = [
    # cards
    "Card", "card_number", "card_to_id", "format_cards", "id_to_card",
    "make_deck", "parse_card_ids", "parse_cards",

    # errors
    "DegenerateRun", "EquityError", "EvaluationError", "InvalidInput",

    # evaluation
    "CATEGORY", "HIGH_NOTHING", "OmahaHiLoEvaluator", "best_low", "evaluate_5",
    "HandRankCache",

    # reporting
    "format_report", "report_dict",
]
