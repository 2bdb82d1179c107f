import itertools

import pytest

from holdem.cards import build_deck
from holdem.evaluator import Hand, best_hand, classify, parse_hand
from holdem.exceptions import InsufficientCardsError, InvalidHandError, WrongCardCountError
from holdem.models import HandCategory, HandType, Rank

from .helpers import cards, hand


def test_classify_identifies_all_hand_categories():
    cases = [
        (HandType.straight_flush(Rank.ACE), "ah,kh,qh,jh,10h"),
        (HandType.four_of_a_kind(Rank.ACE), "as,ah,ad,ac,kd"),
        (HandType.full_house(Rank.QUEEN, Rank.NINE), "qc,qd,qs,9h,9s"),
        (HandType.flush(), "ah,jh,9h,6h,2h"),
        (HandType.straight(Rank.NINE), "9h,8d,7c,6s,5h"),
        (HandType.three_of_a_kind(Rank.EIGHT), "8h,8d,8s,qd,js"),
        (HandType.two_pair(Rank.SEVEN, Rank.FOUR), "7h,7d,4s,4c,as"),
        (HandType.pair(Rank.SIX), "6h,6s,qh,8d,4c"),
        (HandType.high_card(), "as,kd,jh,9c,4d"),
    ]

    for expected, labels in cases:
        assert classify(hand(labels)) == expected, f"labels={labels}"


def test_groups_follow_sorted_ranks():
    assert hand("2d,4d,4c,5d,6d").hand_type == HandType.pair(Rank.FOUR)
    assert hand("2d,4d,4c,5d,5s").hand_type == HandType.two_pair(Rank.FIVE, Rank.FOUR)
    assert hand("4h,4d,4c,5d,5s").hand_type == HandType.full_house(Rank.FOUR, Rank.FIVE)
    assert hand("4h,4d,4c,5d,as").hand_type == HandType.three_of_a_kind(Rank.FOUR)
    assert hand("2d,4d,3d,ad,ac").hand_type == HandType.pair(Rank.ACE)


def test_wheel_is_five_high():
    assert hand("2d,4d,3d,5d,ad").hand_type == HandType.straight_flush(Rank.FIVE)
    assert hand("ah,2d,3c,4s,5h").hand_type == HandType.straight(Rank.FIVE)
    assert hand("ad,qd,jd,kd,10d").hand_type == HandType.straight_flush(Rank.ACE)
    assert hand("6h,2d,3c,4s,5h") > hand("ah,2d,3c,4s,5h")


def test_no_straight_wraps_through_ace():
    assert hand("qd,kc,ah,2s,3d").hand_type == HandType.high_card()
    assert hand("kd,ac,2h,3s,4d").hand_type == HandType.high_card()


def test_straight_and_flush_combine():
    assert hand("2d,4d,3d,5d,6d").hand_type == HandType.straight_flush(Rank.SIX)
    assert hand("2d,4d,3d,5d,6c").hand_type == HandType.straight(Rank.SIX)
    assert hand("2d,4d,3d,kd,ad").hand_type == HandType.flush()
    assert hand("2d,8d,3d,kd,ad").hand_type == HandType.flush()


def test_classification_ignores_card_order():
    for labels in ("ah,2d,3c,4s,5h", "qc,qd,qs,9h,9s", "7h,7d,4s,4c,as", "ah,jh,9h,6h,2h"):
        pool = cards(labels)
        expected = Hand(tuple(pool)).hand_type
        for ordering in itertools.permutations(pool):
            assert Hand(ordering).hand_type == expected


def test_hand_is_stored_high_to_low():
    assert hand("2c,ah,10d,5s,jh").ranks == (Rank.ACE, Rank.JACK, Rank.TEN, Rank.FIVE, Rank.TWO)
    assert str(hand("10h,jh,qh,kh,ah")) == "A♥, K♥, Q♥, J♥, 10♥"


def test_category_dominates_embedded_ranks():
    ladder = [
        hand("ks,qd,jh,9c,7d"),  # high card
        hand("2h,2s,3h,4d,5c"),  # pair of twos beats king high
        hand("3h,3s,2h,2d,4c"),
        hand("2h,2s,2d,3c,4d"),
        hand("ah,2d,3c,4s,5h"),
        hand("2h,3h,4h,5h,7h"),
        hand("2h,2s,2d,3c,3d"),
        hand("2h,2s,2d,2c,3d"),
        hand("ah,2h,3h,4h,5h"),
    ]
    assert sorted(ladder) == ladder
    categories = [item.hand_type.category for item in ladder]
    assert categories == sorted(HandCategory)


def test_embedded_ranks_break_ties_within_a_category():
    assert HandType.pair(Rank.KING) > HandType.pair(Rank.TWO)
    assert HandType.two_pair(Rank.KING, Rank.QUEEN) > HandType.two_pair(Rank.KING, Rank.JACK)
    assert HandType.full_house(Rank.THREE, Rank.TWO) > HandType.full_house(Rank.TWO, Rank.ACE)
    assert HandType.flush() > HandType.straight(Rank.ACE)


def test_kickers_break_ties_after_hand_type():
    assert hand("ah,jh,9h,6h,2h") > hand("ks,qs,js,9s,7s")
    assert hand("ah,ad,kc,qs,9h") > hand("ah,ad,qc,js,8h")
    assert hand("as,kd,jh,9c,5d") > hand("as,kd,jh,9c,4d")


def test_equal_strength_hands_compare_equal():
    first = hand("as,kd,jh,9c,4d")
    second = hand("ac,kh,js,9d,4h")
    assert first == second
    assert hash(first) == hash(second)
    assert first.cards != second.cards


def test_hand_type_labels():
    assert str(HandType.two_pair(Rank.KING, Rank.QUEEN)) == "TwoPair(K,Q)"
    assert str(HandType.straight_flush(Rank.TEN)) == "StraightFlush(10)"
    assert str(HandType.flush()) == "Flush"
    assert HandType.three_of_a_kind(Rank.TWO).describe() == "three_of_a_kind"


def test_best_hand_picks_the_strongest_five():
    pool = cards("ah,2d,3c,4s,5h,9d,kd")
    assert best_hand(pool).hand_type == HandType.straight(Rank.FIVE)

    pool = cards("ah,kh,qh,jh,10h,9h,ad")
    assert best_hand(pool).hand_type == HandType.straight_flush(Rank.ACE)


def test_best_hand_beats_every_subset_of_seven_cards():
    deck = build_deck(seed=777)
    for idx in range(0, 49, 7):
        pool = deck[idx : idx + 7]
        best = best_hand(pool)
        subsets = [Hand(combo) for combo in itertools.combinations(pool, 5)]
        assert len(subsets) == 21
        assert all(best >= subset for subset in subsets)
        assert set(best.cards) <= set(pool)


def test_best_hand_of_exactly_five_is_that_hand():
    pool = cards("6h,6s,qh,8d,4c")
    assert set(best_hand(pool).cards) == set(pool)


def test_best_hand_requires_five_cards():
    with pytest.raises(InsufficientCardsError, match="at least 5, got 4"):
        best_hand(cards("ah,kh,qh,jh"))


def test_best_hand_rejects_duplicate_cards():
    with pytest.raises(InvalidHandError, match="Duplicate"):
        best_hand(cards("ah,kh,qh,jh,10h,ah"))


def test_hand_construction_enforces_five_distinct_cards():
    with pytest.raises(InvalidHandError, match="exactly 5"):
        Hand(tuple(cards("ah,kh,qh,jh")))
    with pytest.raises(InvalidHandError, match="Duplicate"):
        Hand(tuple(cards("ah,ah,qh,jh,10h")))


def test_parse_hand_reports_wrong_count():
    with pytest.raises(WrongCardCountError, match="got 2") as exc_info:
        parse_hand("ah,kh")
    assert exc_info.value.count == 2
    with pytest.raises(WrongCardCountError, match="got 6"):
        parse_hand("ah,kh,qh,jh,10h,9h")


def test_parse_hand_tolerates_spaces():
    assert parse_hand("ah, kh, qh, jh, 10h").hand_type == HandType.straight_flush(Rank.ACE)
