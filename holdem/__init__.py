"""Hold'em hand evaluation and nut search, reused by the CLI and the host server."""

from .cards import Card, build_deck, cards_to_labels, deal, full_deck, parse_cards, parse_label
from .evaluator import Hand, best_hand, classify, hand_from_labels, parse_hand
from .exceptions import (
    CardParseError,
    HandParseError,
    HoldemError,
    IncompleteCardError,
    InsufficientCardsError,
    InvalidBoardError,
    InvalidHandError,
    InvalidRankError,
    InvalidSuitError,
    WrongCardCountError,
)
from .models import DealConfig, HandCategory, HandType, Rank, Street, Suit
from .nuts import NutResult, find_nuts

__all__ = [
    "Card",
    "build_deck",
    "cards_to_labels",
    "deal",
    "full_deck",
    "parse_cards",
    "parse_label",
    "Hand",
    "best_hand",
    "classify",
    "hand_from_labels",
    "parse_hand",
    "CardParseError",
    "HandParseError",
    "HoldemError",
    "IncompleteCardError",
    "InsufficientCardsError",
    "InvalidBoardError",
    "InvalidHandError",
    "InvalidRankError",
    "InvalidSuitError",
    "WrongCardCountError",
    "DealConfig",
    "HandCategory",
    "HandType",
    "Rank",
    "Street",
    "Suit",
    "NutResult",
    "find_nuts",
]
