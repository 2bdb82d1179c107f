from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Tuple


class Rank(IntEnum):
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def symbol(self) -> str:
        return RANK_SYMBOLS[self]

    def successor(self) -> Rank:
        # Wraps Ace back to Two; only straight detection should call this.
        if self is Rank.ACE:
            return Rank.TWO
        return Rank(self + 1)


class Suit(IntEnum):
    # Declaration order only keeps sorting deterministic; it never scores.
    HEARTS = 0
    CLUBS = 1
    SPADES = 2
    DIAMONDS = 3

    @property
    def glyph(self) -> str:
        return SUIT_GLYPHS[self]

    @property
    def letter(self) -> str:
        return SUIT_LETTERS[self]


RANK_SYMBOLS = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}
SUIT_GLYPHS = {Suit.HEARTS: "♥", Suit.CLUBS: "♣", Suit.SPADES: "♠", Suit.DIAMONDS: "♦"}
SUIT_LETTERS = {Suit.HEARTS: "h", Suit.CLUBS: "c", Suit.SPADES: "s", Suit.DIAMONDS: "d"}


class HandCategory(IntEnum):
    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8

    def describe(self) -> str:
        return self.name.lower()

    @property
    def title(self) -> str:
        return "".join(part.capitalize() for part in self.name.split("_"))


@dataclass(frozen=True, order=True)
class HandType:
    """Category plus the ranks that break ties inside it.

    Ordering compares the category first, so any flush beats any straight
    regardless of the ranks carried along. Flush and HighCard carry no ranks;
    their kickers are settled by the hand itself.
    """

    category: HandCategory
    ranks: Tuple[Rank, ...] = ()

    @classmethod
    def high_card(cls) -> HandType:
        return cls(HandCategory.HIGH_CARD)

    @classmethod
    def pair(cls, rank: Rank) -> HandType:
        return cls(HandCategory.PAIR, (rank,))

    @classmethod
    def two_pair(cls, high: Rank, low: Rank) -> HandType:
        return cls(HandCategory.TWO_PAIR, (high, low))

    @classmethod
    def three_of_a_kind(cls, rank: Rank) -> HandType:
        return cls(HandCategory.THREE_OF_A_KIND, (rank,))

    @classmethod
    def straight(cls, high: Rank) -> HandType:
        return cls(HandCategory.STRAIGHT, (high,))

    @classmethod
    def flush(cls) -> HandType:
        return cls(HandCategory.FLUSH)

    @classmethod
    def full_house(cls, trips: Rank, pair: Rank) -> HandType:
        return cls(HandCategory.FULL_HOUSE, (trips, pair))

    @classmethod
    def four_of_a_kind(cls, rank: Rank) -> HandType:
        return cls(HandCategory.FOUR_OF_A_KIND, (rank,))

    @classmethod
    def straight_flush(cls, high: Rank) -> HandType:
        return cls(HandCategory.STRAIGHT_FLUSH, (high,))

    def describe(self) -> str:
        return self.category.describe()

    def __str__(self) -> str:
        if not self.ranks:
            return self.category.title
        inner = ",".join(rank.symbol for rank in self.ranks)
        return f"{self.category.title}({inner})"


class Street(str, Enum):
    FLOP = "FLOP"
    TURN = "TURN"

    @property
    def board_size(self) -> int:
        return 3 if self is Street.FLOP else 4


@dataclass
class DealConfig:
    street: Street = Street.FLOP
    seed: Optional[int] = None

