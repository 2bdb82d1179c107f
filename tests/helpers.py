from __future__ import annotations

from typing import List

from holdem.cards import Card, parse_cards
from holdem.evaluator import Hand, parse_hand


def cards(text: str) -> List[Card]:
    """Parse a comma-separated list of labels such as ``"ah,10d,2c"``."""
    return parse_cards(text.split(","))


def hand(text: str) -> Hand:
    return parse_hand(text)
