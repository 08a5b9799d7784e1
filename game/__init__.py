from .card import Card
from .config import EvaluatorConfig
from .evaluator import HandEvaluation, evaluate_hand
from .hand import Hand, best_hand, category_name, category_of, compare
from .parser import parse_hand

__all__ = [
    "Card",
    "EvaluatorConfig",
    "Hand",
    "HandEvaluation",
    "best_hand",
    "category_name",
    "category_of",
    "compare",
    "evaluate_hand",
    "parse_hand",
]
