from collections import Counter

from aceyducey.common.deck import RankDeck
from aceyducey.common.rank import RANK_SYMBOLS, RankOrdering


def test_deck_initialization():
    deck = RankDeck()
    assert deck.cards == list(RANK_SYMBOLS)
    assert deck.size == 13


def test_deck_is_a_copy_of_the_ordering():
    ordering = RankOrdering()
    deck = RankDeck(ordering)
    deck.cards.append("X")
    assert ordering.symbols == RANK_SYMBOLS


def test_deal_returns_valid_rank():
    deck = RankDeck(seed=3)
    for _ in range(100):
        assert deck.deal() in RANK_SYMBOLS


def test_deal_does_not_remove_cards():
    deck = RankDeck(seed=3)
    for _ in range(200):
        deck.deal()
    assert deck.size == 13
    assert deck.cards == list(RANK_SYMBOLS)


def test_deal_multiple():
    deck = RankDeck(seed=3)
    cards = deck.deal(5)
    assert len(cards) == 5
    assert all(card in RANK_SYMBOLS for card in cards)


def test_deal_with_replacement_repeats_ranks():
    deck = RankDeck(seed=11)
    cards = deck.deal(500)
    assert any(a == b for a, b in zip(cards, cards[1:]))


def test_deal_covers_all_ranks():
    deck = RankDeck(seed=5)
    counts = Counter(deck.deal(2000))
    assert set(counts) == set(RANK_SYMBOLS)


def test_same_seed_same_deal():
    assert RankDeck(seed=42).deal(20) == RankDeck(seed=42).deal(20)


def test_deck_str():
    assert str(RankDeck()) == "Deck of 13 ranks"
