"""Decks and hands of cards."""

import random
from dataclasses import dataclass, field

from drills.cards import card_from_num, descending_key, make_empty_card

FULL_DECK_SIZE = 52


@dataclass
class Deck:
    """An ordered collection of cards; also used for a hand."""

    cards: list = field(default_factory=list)

    def __len__(self):
        return len(self.cards)

    def __iter__(self):
        return iter(self.cards)

    def add_card(self, card):
        """Append a copy of ``card`` and return the copy."""
        copy = type(card)(card.value, card.suit)
        self.cards.append(copy)
        return copy

    def add_empty_card(self):
        """Append a placeholder card and return it."""
        card = make_empty_card()
        self.cards.append(card)
        return card

    def __contains__(self, card):
        return any(
            c.value == card.value and c.suit == card.suit for c in self.cards
        )

    def shuffle(self, rng=None):
        """Shuffle in place, swapping each position with a random one."""
        rng = random.Random() if rng is None else rng
        n = len(self.cards)
        for i in range(n):
            j = rng.randrange(n)
            self.cards[i], self.cards[j] = self.cards[j], self.cards[i]

    def assert_full(self):
        """Raise ValueError unless this is exactly one full deck."""
        if len(self.cards) != FULL_DECK_SIZE:
            raise ValueError(
                f"deck has {len(self.cards)} cards, not {FULL_DECK_SIZE}"
            )
        for n in range(FULL_DECK_SIZE):
            card = card_from_num(n)
            if card not in self:
                raise ValueError(f"deck is missing {card}")

    def sort(self):
        """Sort in place, highest value first and higher suit first on a tie."""
        self.cards.sort(key=descending_key)

    def format(self):
        """Return each card followed by a space."""
        return "".join(f"{card} " for card in self.cards)


def make_deck_exclude(excluded):
    """Return a full deck without the cards found in ``excluded``."""
    deck = Deck()
    for n in range(FULL_DECK_SIZE):
        card = card_from_num(n)
        if card not in excluded:
            deck.add_card(card)
    return deck


def build_remaining_deck(hands):
    """Return the deck of cards that appear in none of ``hands``.

    Placeholder cards in the hands are ignored.
    """
    used = Deck()
    for hand in hands:
        for card in hand:
            if not card.is_empty():
                used.add_card(card)
    return make_deck_exclude(used)