from __future__ import annotations

import itertools
import random
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from .exceptions import IncompleteCardError, InvalidRankError, InvalidSuitError
from .models import RANK_SYMBOLS, SUIT_GLYPHS, SUIT_LETTERS, Rank, Suit

RANK_TOKENS = {symbol: rank for rank, symbol in RANK_SYMBOLS.items()}
SUIT_TOKENS = {glyph: suit for suit, glyph in SUIT_GLYPHS.items()}
SUIT_TOKENS.update({letter: suit for suit, letter in SUIT_LETTERS.items()})


@dataclass(frozen=True, order=True)
class Card:
    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        if not isinstance(self.rank, Rank):
            raise InvalidRankError(str(self.rank))
        if not isinstance(self.suit, Suit):
            raise InvalidSuitError(str(self.suit))

    @property
    def label(self) -> str:
        return f"{self.rank.symbol}{self.suit.letter}"

    def __str__(self) -> str:
        return f"{self.rank.symbol}{self.suit.glyph}"


def full_deck() -> List[Card]:
    """All 52 cards, rank ascending then suit in declaration order."""
    return [Card(rank, suit) for rank, suit in itertools.product(Rank, Suit)]


def build_deck(seed: Optional[int] = None) -> List[Card]:
    rng = random.Random(seed)
    deck = full_deck()
    rng.shuffle(deck)
    return deck


def deal(deck: List[Card], count: int) -> Optional[List[Card]]:
    """Take ``count`` cards off the end of the deck.

    Returns None and leaves the deck alone when fewer than ``count`` remain.
    """
    if count < 0:
        raise ValueError(f"Cannot deal a negative number of cards: {count}")
    if count > len(deck):
        return None
    if count == 0:
        return []
    cards = deck[-count:]
    del deck[-count:]
    return cards


def cards_to_labels(cards: Iterable[Card]) -> List[str]:
    return [card.label for card in cards]


def parse_rank(token: str) -> Rank:
    rank = RANK_TOKENS.get(token.upper())
    if rank is None:
        raise InvalidRankError(token)
    return rank


def parse_suit(token: str) -> Suit:
    suit = SUIT_TOKENS.get(token.lower())
    if suit is None:
        raise InvalidSuitError(token)
    return suit


def parse_label(label: str) -> Card:
    text = label.strip()
    if len(text) < 2:
        raise IncompleteCardError(text)
    split_at = 2 if text.startswith("10") else 1
    return Card(parse_rank(text[:split_at]), parse_suit(text[split_at:]))


def parse_cards(labels: Sequence[str]) -> List[Card]:
    return [parse_label(label) for label in labels]
