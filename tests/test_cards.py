import pytest

from drills.cards import (
    VALUE_ACE,
    VALUE_JACK,
    VALUE_KING,
    VALUE_QUEEN,
    Card,
    HandRanking,
    InvalidCardError,
    Suit,
    card_from_letters,
    card_from_num,
    descending_key,
    make_empty_card,
    ranking_to_string,
)


@pytest.mark.parametrize(
    "n, value, suit",
    [
        (0, 2, Suit.SPADES),
        (1, 3, Suit.SPADES),
        (12, VALUE_ACE, Suit.SPADES),
        (13, 2, Suit.HEARTS),
        (50, VALUE_KING, Suit.CLUBS),
        (51, VALUE_ACE, Suit.CLUBS),
    ],
)
def test_card_from_num(n, value, suit):
    card = card_from_num(n)
    assert (card.value, card.suit) == (value, suit)


@pytest.mark.parametrize("n", [-1, 52])
def test_card_from_num_out_of_range(n):
    with pytest.raises(InvalidCardError):
        card_from_num(n)


def test_num_round_trip():
    assert [card_from_num(n).num() for n in range(52)] == list(range(52))


def test_validate_accepts_bounds():
    Card(2, Suit.SPADES).validate()
    card = Card(VALUE_ACE, Suit.SPADES)
    card.validate()
    assert card.num() == 12


@pytest.mark.parametrize("value, suit", [(1, 0), (VALUE_ACE + 1, 0), (5, 4), (5, -1)])
def test_validate_rejects(value, suit):
    with pytest.raises(InvalidCardError):
        Card(value, suit).validate()


@pytest.mark.parametrize(
    "ranking, name",
    [
        (HandRanking.STRAIGHT_FLUSH, "STRAIGHT_FLUSH"),
        (HandRanking.FOUR_OF_A_KIND, "FOUR_OF_A_KIND"),
        (HandRanking.THREE_OF_A_KIND, "THREE_OF_A_KIND"),
        (HandRanking.TWO_PAIR, "TWO_PAIR"),
        (HandRanking.NOTHING, "NOTHING"),
    ],
)
def test_ranking_to_string(ranking, name):
    assert ranking_to_string(ranking) == name


@pytest.mark.parametrize("bad", [-1, 9])
def test_ranking_to_string_invalid(bad):
    with pytest.raises(ValueError):
        ranking_to_string(bad)


@pytest.mark.parametrize(
    "value, letter",
    [(2, "2"), (10, "0"), (VALUE_JACK, "J"), (VALUE_QUEEN, "Q"), (VALUE_KING, "K"), (VALUE_ACE, "A")],
)
def test_value_letter(value, letter):
    assert Card(value, Suit.SPADES).value_letter() == letter


@pytest.mark.parametrize(
    "suit, letter",
    [(Suit.SPADES, "s"), (Suit.HEARTS, "h"), (Suit.DIAMONDS, "d"), (Suit.CLUBS, "c")],
)
def test_suit_letter(suit, letter):
    assert Card(3, suit).suit_letter() == letter


def test_suit_letter_invalid():
    with pytest.raises(InvalidCardError):
        Card(3, 4).suit_letter()


@pytest.mark.parametrize(
    "value_let, suit_let, value, suit",
    [
        ("2", "s", 2, Suit.SPADES),
        ("0", "s", 10, Suit.SPADES),
        ("J", "s", VALUE_JACK, Suit.SPADES),
        ("Q", "s", VALUE_QUEEN, Suit.SPADES),
        ("K", "s", VALUE_KING, Suit.SPADES),
        ("A", "s", VALUE_ACE, Suit.SPADES),
        ("2", "h", 2, Suit.HEARTS),
        ("2", "d", 2, Suit.DIAMONDS),
        ("2", "c", 2, Suit.CLUBS),
    ],
)
def test_card_from_letters(value_let, suit_let, value, suit):
    card = card_from_letters(value_let, suit_let)
    assert (card.value, card.suit) == (value, suit)


@pytest.mark.parametrize("value_let, suit_let", [("1", "s"), ("X", "h"), ("A", "x"), ("a", "s")])
def test_card_from_letters_invalid(value_let, suit_let):
    with pytest.raises(InvalidCardError):
        card_from_letters(value_let, suit_let)


def test_str_round_trip():
    for n in range(52):
        card = card_from_num(n)
        text = str(card)
        assert card_from_letters(text[0], text[1]) == card


def test_str_format():
    assert str(card_from_letters("0", "h")) == "0h"


def test_empty_card():
    empty = make_empty_card()
    assert empty.is_empty()
    assert not card_from_num(0).is_empty()
    with pytest.raises(InvalidCardError):
        empty.validate()


def test_descending_key_orders_by_value_then_suit():
    cards = [card_from_letters(v, s) for v, s in ["7c", "0h", "Ac", "Jd", "Ah"]]
    ordered = sorted(cards, key=descending_key)
    values = [c.value for c in ordered]
    assert values == sorted(values, reverse=True)
    aces = [c for c in ordered if c.value == VALUE_ACE]
    assert [c.suit for c in aces] == sorted((c.suit for c in aces), reverse=True)