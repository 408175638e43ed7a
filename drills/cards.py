"""Playing cards: values, suits, letters and card numbers."""

from dataclasses import dataclass
from enum import IntEnum

VALUE_JACK = 11
VALUE_QUEEN = 12
VALUE_KING = 13
VALUE_ACE = 14

EMPTY_CARD_VALUE = 0
EMPTY_CARD_SUIT = 0

SUIT_LETTERS = "shdc"
VALUE_LETTERS = "234567890JQKA"

_LETTER_BY_VALUE = {
    10: "0",
    VALUE_JACK: "J",
    VALUE_QUEEN: "Q",
    VALUE_KING: "K",
    VALUE_ACE: "A",
}
_VALUE_BY_LETTER = {letter: value for value, letter in _LETTER_BY_VALUE.items()}


class InvalidCardError(ValueError):
    """Raised for a card value, suit, letter or number that is out of range."""


class Suit(IntEnum):
    """The four suits, in the order used for card numbers."""

    SPADES = 0
    HEARTS = 1
    DIAMONDS = 2
    CLUBS = 3


class HandRanking(IntEnum):
    """Poker hand rankings, best first."""

    STRAIGHT_FLUSH = 0
    FOUR_OF_A_KIND = 1
    FULL_HOUSE = 2
    FLUSH = 3
    STRAIGHT = 4
    THREE_OF_A_KIND = 5
    TWO_PAIR = 6
    PAIR = 7
    NOTHING = 8


def ranking_to_string(ranking):
    """Return the name of a hand ranking; raise ValueError for an unknown one."""
    try:
        return HandRanking(ranking).name
    except ValueError:
        raise ValueError(
            f"ranking_to_string: invalid hand ranking ({ranking})"
        ) from None


def _check_value(value):
    if not 2 <= value <= VALUE_ACE:
        raise InvalidCardError(f"invalid card value ({value})")


def _check_suit(suit):
    if not Suit.SPADES <= suit <= Suit.CLUBS:
        raise InvalidCardError(f"invalid card suit ({suit})")


@dataclass
class Card:
    """A card with a value from 2 to 14 (ace) and a suit."""

    value: int
    suit: int

    def validate(self):
        """Raise InvalidCardError unless value and suit are both valid."""
        _check_value(self.value)
        _check_suit(self.suit)

    def value_letter(self):
        """Return the letter of the value: '2'-'9', '0' for ten, 'J', 'Q', 'K', 'A'."""
        _check_value(self.value)
        if self.value <= 9:
            return str(self.value)
        return _LETTER_BY_VALUE[self.value]

    def suit_letter(self):
        """Return the letter of the suit: one of 's', 'h', 'd', 'c'."""
        _check_suit(self.suit)
        return SUIT_LETTERS[self.suit]

    def num(self):
        """Return the card's number from 0 to 51."""
        self.validate()
        return self.suit * 13 + self.value - 2

    def is_empty(self):
        """Return True for the placeholder card of value 0 and suit 0."""
        return self.value == EMPTY_CARD_VALUE and self.suit == EMPTY_CARD_SUIT

    def __str__(self):
        self.validate()
        return self.value_letter() + self.suit_letter()


def _value_from_letter(letter):
    if len(letter) != 1 or letter not in VALUE_LETTERS:
        raise InvalidCardError(f"invalid card value ({letter})")
    if "1" <= letter <= "9":
        return int(letter)
    return _VALUE_BY_LETTER[letter]


def _suit_from_letter(letter):
    if len(letter) != 1 or letter not in SUIT_LETTERS:
        raise InvalidCardError(f"invalid card suit ({letter})")
    return Suit(SUIT_LETTERS.index(letter))


def card_from_letters(value_let, suit_let):
    """Return the card named by a value letter and a suit letter."""
    card = Card(_value_from_letter(value_let), _suit_from_letter(suit_let))
    card.validate()
    return card


def card_from_num(n):
    """Return the card with number ``n`` from 0 to 51."""
    if not 0 <= n < 52:
        raise InvalidCardError(f"invalid card number ({n})")
    return Card(n % 13 + 2, Suit(n // 13))


def make_empty_card():
    """Return a new placeholder card for a card not yet known."""
    return Card(EMPTY_CARD_VALUE, EMPTY_CARD_SUIT)


def descending_key(card):
    """Sort key that puts higher values first, and higher suits first on a tie."""
    return (-card.value, -card.suit)