"""Error types raised by the card model, evaluator and nut search.

Everything derives from ValueError: every failure here is bad input, and
callers already guard engine calls with ``except ValueError``.
"""

from __future__ import annotations


class HoldemError(ValueError):
    """Base class for holdem input errors."""


class CardParseError(HoldemError):
    def __init__(self, message: str, token: str) -> None:
        super().__init__(message)
        self.token = token


class InvalidRankError(CardParseError):
    def __init__(self, token: str) -> None:
        super().__init__(f"Invalid rank: {token!r}", token)


class InvalidSuitError(CardParseError):
    def __init__(self, token: str) -> None:
        super().__init__(f"Invalid suit: {token!r}", token)


class IncompleteCardError(CardParseError):
    def __init__(self, token: str) -> None:
        super().__init__(f"Card label too short: {token!r}", token)


class HandParseError(HoldemError):
    pass


class WrongCardCountError(HandParseError):
    def __init__(self, count: int) -> None:
        super().__init__(f"Wrong number of cards: expected 5, got {count}")
        self.count = count


class InvalidHandError(HoldemError):
    pass


class InsufficientCardsError(HoldemError):
    def __init__(self, needed: int, got: int) -> None:
        super().__init__(f"Not enough cards: need at least {needed}, got {got}")
        self.needed = needed
        self.got = got


class InvalidBoardError(HoldemError):
    pass
