from __future__ import annotations

import itertools
import logging
from typing import NamedTuple, Optional, Sequence, Tuple

from .cards import Card, full_deck
from .evaluator import Hand, best_hand
from .exceptions import InsufficientCardsError, InvalidBoardError

LOGGER = logging.getLogger("holdem")

MIN_BOARD = 3
MAX_BOARD = 4


class NutResult(NamedTuple):
    hand: Hand
    hole_cards: Tuple[Card, Card]


def find_nuts(community: Sequence[Card]) -> NutResult:
    """Find the two unseen cards that make the strongest hand with ``community``.

    Every pair from the rest of the deck is tried in canonical deck order; when
    several pairs reach the same strength the first one found is kept.
    """
    if len(community) < MIN_BOARD:
        raise InsufficientCardsError(MIN_BOARD, len(community))
    if len(community) > MAX_BOARD:
        raise InvalidBoardError(
            f"Board already has {len(community)} cards; nut search needs {MIN_BOARD} to {MAX_BOARD}"
        )
    board = list(community)
    if len(set(board)) != len(board):
        raise InvalidBoardError("Duplicate cards on board")

    seen = set(board)
    remaining = [card for card in full_deck() if card not in seen]
    LOGGER.debug("Searching nuts for %s-card board over %s unseen cards", len(board), len(remaining))

    best: Optional[NutResult] = None
    for first, second in itertools.combinations(remaining, 2):
        hand = best_hand(board + [first, second])
        if best is None or hand > best.hand:
            best = NutResult(hand, (first, second))
    assert best is not None

    LOGGER.debug("Nuts: %s with %s %s (%s)", best.hand, best.hole_cards[0], best.hole_cards[1], best.hand.hand_type)
    return best
