import argparse
import logging

from .cards import build_deck, deal, parse_cards
from .exceptions import HoldemError
from .models import DealConfig, Street
from .nuts import find_nuts

LOGGER = logging.getLogger("holdem")


def main() -> None:
    parser = argparse.ArgumentParser(description="Deal a hold'em board and find the nuts")
    parser.add_argument("--street", choices=[street.value.lower() for street in Street], default="flop")
    parser.add_argument("--board", help="Comma-separated board to use instead of dealing, e.g. 'Ah,Kd,2c'")
    parser.add_argument("--seed", type=int, default=None, help="Shuffle seed for a reproducible deal")
    parser.add_argument("--verbose", action="store_true", help="Log search details")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    config = DealConfig(street=Street(args.street.upper()), seed=args.seed)

    if args.board:
        try:
            board = parse_cards(args.board.split(","))
        except HoldemError as exc:
            parser.error(str(exc))
    else:
        deck = build_deck(config.seed)
        dealt = deal(deck, config.street.board_size)
        assert dealt is not None
        board = dealt
        LOGGER.debug("Dealt %s from a fresh deck (seed=%s)", config.street.value, config.seed)

    try:
        hand, hole = find_nuts(board)
    except HoldemError as exc:
        parser.error(str(exc))

    print(f"Board: {' '.join(str(card) for card in board)}")
    print(f"Nut cards: {hole[0]} {hole[1]}")
    print(f"Nut hand: {hand}")
    print(f"This is a {hand.hand_type}")


if __name__ == "__main__":
    main()
