from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

from .cards import Card, parse_label
from .exceptions import InsufficientCardsError, InvalidHandError, WrongCardCountError
from .models import HandType, Rank

HAND_SIZE = 5
WHEEL = (Rank.ACE, Rank.FIVE, Rank.FOUR, Rank.THREE, Rank.TWO)


@dataclass(frozen=True, eq=False)
class Hand:
    """Exactly five distinct cards, kept sorted high to low.

    Two hands compare by poker strength, not by the cards they hold: the hand
    type decides first, then the five ranks in order.
    """

    cards: Tuple[Card, ...]
    hand_type: HandType = field(init=False, repr=False)

    def __post_init__(self) -> None:
        cards = tuple(sorted(self.cards, reverse=True))
        if len(cards) != HAND_SIZE:
            raise InvalidHandError(f"A hand needs exactly {HAND_SIZE} cards, got {len(cards)}")
        if len(set(cards)) != HAND_SIZE:
            raise InvalidHandError(f"Duplicate cards in hand: {', '.join(str(card) for card in cards)}")
        object.__setattr__(self, "cards", cards)
        object.__setattr__(self, "hand_type", classify_cards(cards))

    @property
    def ranks(self) -> Tuple[Rank, ...]:
        return tuple(card.rank for card in self.cards)

    def _key(self) -> Tuple[HandType, Tuple[Rank, ...]]:
        return self.hand_type, self.ranks

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: Hand) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: Hand) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: Hand) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: Hand) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return ", ".join(str(card) for card in self.cards)


def classify(hand: Hand) -> HandType:
    return hand.hand_type


def classify_cards(cards: Sequence[Card]) -> HandType:
    """Classify five cards that are already sorted high to low."""
    ranks = [card.rank for card in cards]
    straight_high = _straight_high(ranks)
    is_flush = len({card.suit for card in cards}) == 1

    if straight_high is not None:
        if is_flush:
            return HandType.straight_flush(straight_high)
        return HandType.straight(straight_high)
    if is_flush:
        return HandType.flush()

    # Sorted input means equal ranks sit next to each other.
    groups = sorted(((len(list(run)), rank) for rank, run in itertools.groupby(ranks)), reverse=True)
    top_count, top_rank = groups[0]
    second_count = groups[1][0]

    if top_count == 4:
        return HandType.four_of_a_kind(top_rank)
    if top_count == 3 and second_count == 2:
        return HandType.full_house(top_rank, groups[1][1])
    if top_count == 3:
        return HandType.three_of_a_kind(top_rank)
    if top_count == 2 and second_count == 2:
        return HandType.two_pair(top_rank, groups[1][1])
    if top_count == 2:
        return HandType.pair(top_rank)
    return HandType.high_card()


def _straight_high(ranks: List[Rank]) -> Optional[Rank]:
    # The wheel has to be caught before the run check: its Ace sits on top.
    if tuple(ranks) == WHEEL:
        return Rank.FIVE
    for current, following in zip(ranks, ranks[1:]):
        if following is Rank.ACE or following.successor() is not current:
            return None
    return ranks[0]


def best_hand(cards: Sequence[Card]) -> Hand:
    """Return the strongest five-card hand that can be built from ``cards``."""
    if len(cards) < HAND_SIZE:
        raise InsufficientCardsError(HAND_SIZE, len(cards))
    if len(set(cards)) != len(cards):
        raise InvalidHandError("Duplicate cards in pool")
    best: Optional[Hand] = None
    for combo in itertools.combinations(cards, HAND_SIZE):
        hand = Hand(combo)
        if best is None or hand > best:
            best = hand
    assert best is not None
    return best


def parse_hand(text: str) -> Hand:
    return hand_from_labels(text.split(","))


def hand_from_labels(labels: Iterable[str]) -> Hand:
    cards = [parse_label(label) for label in labels]
    if len(cards) != HAND_SIZE:
        raise WrongCardCountError(len(cards))
    return Hand(tuple(cards))
