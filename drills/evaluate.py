"""Poker hand evaluation: flushes, straights, matches and hand comparison."""

from dataclasses import dataclass, field

from drills.cards import VALUE_ACE, HandRanking

_HAND_SIZE = 5


@dataclass
class HandEval:
    """The ranking of a hand and the five cards that make it up, best first."""

    ranking: HandRanking
    cards: list = field(default_factory=list)


def _suit_ok(card, fs):
    return fs is None or card.suit == fs


def flush_suit(hand):
    """Return the first suit that reaches five cards in ``hand``, or None."""
    counts = {}
    for card in hand:
        counts[card.suit] = counts.get(card.suit, 0) + 1
        if counts[card.suit] >= _HAND_SIZE:
            return card.suit
    return None


def get_match_counts(hand):
    """Return, for each card of a sorted hand, how many cards share its value."""
    cards = list(hand)
    counts = []
    start = 0
    while start < len(cards):
        end = start + 1
        while end < len(cards) and cards[end].value == cards[start].value:
            end += 1
        counts.extend([end - start] * (end - start))
        start = end
    return counts


def _is_n_length_straight_at(cards, index, fs, n):
    if index < len(cards) - 1 and cards[index].value == cards[index + 1].value:
        return 0
    in_a_row = 0
    last_value = cards[index].value + 1
    for card in cards[index:]:
        if fs is None:
            if card.value != last_value:
                if card.value != last_value - 1:
                    return 0
                in_a_row += 1
                if in_a_row >= n:
                    return 1
                last_value = card.value
        elif card.suit == fs:
            if card.value != last_value - 1:
                return 0
            in_a_row += 1
            if in_a_row >= n:
                return 1
            last_value = card.value
    return 0


def _is_ace_low_straight_at(cards, index, fs):
    assert cards[index].value == VALUE_ACE and _suit_ok(cards[index], fs)
    i = index + 1
    while cards[i].value != 5 or not _suit_ok(cards[i], fs):
        i += 1
        if i > len(cards) - 4:
            return 0
    if _is_n_length_straight_at(cards, i, fs, 4):
        return -1
    return 0


def is_straight_at(hand, index, fs):
    """Check for a straight starting at ``index`` of a hand sorted high to low.

    ``fs`` is None to look for any straight, or a suit to look for a straight
    flush in that suit.  Returns 1 for a straight, -1 for an ace-low straight
    and 0 for none.  A straight is not seen at an index whose card has the
    same value as the next one.
    """
    cards = list(hand)
    if len(cards) - index < _HAND_SIZE:
        return 0
    if _is_n_length_straight_at(cards, index, fs, _HAND_SIZE) == 1:
        return 1
    i = index
    while cards[i].value == VALUE_ACE and i < len(cards) - 4:
        if _suit_ok(cards[i], fs):
            return _is_ace_low_straight_at(cards, i, fs)
        i += 1
    return 0


def _copy_straight(cards, ind, fs, count):
    assert _suit_ok(cards[ind], fs)
    next_value = cards[ind].value
    copied = []
    while count > 0:
        assert ind < len(cards)
        assert next_value >= 2
        card = cards[ind]
        if card.value == next_value and _suit_ok(card, fs):
            copied.append(card)
            count -= 1
            next_value -= 1
        ind += 1
    return copied


def find_straight(hand, fs):
    """Return the five cards of the first straight in a sorted hand, or None.

    ``fs`` is None for any straight or a suit for a straight flush.  An
    ace-low straight reported at an index holding a suitable ace ends the
    search with no straight.
    """
    cards = list(hand)
    if len(cards) < _HAND_SIZE:
        return None
    for i in range(len(cards) - _HAND_SIZE + 1):
        found = is_straight_at(cards, i, fs)
        if found == 0:
            continue
        if found > 0:
            return _copy_straight(cards, i, fs, _HAND_SIZE)
        if cards[i].value == VALUE_ACE and _suit_ok(cards[i], fs):
            return None
        start = i + 1
        while cards[start].value != 5 or not _suit_ok(cards[start], fs):
            start += 1
            assert start < len(cards)
        return _copy_straight(cards, start, fs, 4) + [cards[i]]
    return None


def _build_hand_from_match(cards, n, what, idx):
    chosen = cards[idx:idx + n] + cards[:idx] + cards[idx + n:]
    return HandEval(what, chosen[:_HAND_SIZE])


def _find_secondary_pair(cards, match_counts, match_idx):
    for index, (card, count) in enumerate(zip(cards, match_counts)):
        if count > 1 and card.value != cards[match_idx].value:
            return index
    return None


def evaluate_hand(hand):
    """Rank a hand sorted high to low and pick its five deciding cards."""
    cards = list(hand)
    fs = flush_suit(cards)
    if fs is not None:
        straight = find_straight(cards, fs)
        if straight is not None:
            return HandEval(HandRanking.STRAIGHT_FLUSH, straight)

    match_counts = get_match_counts(cards)
    n_of_a_kind = max(match_counts, default=0)
    if n_of_a_kind > 4:
        raise ValueError(f"hand has {n_of_a_kind} cards of one value")
    match_idx = next(
        (i for i, count in enumerate(match_counts) if count == n_of_a_kind),
        len(cards),
    )
    other = _find_secondary_pair(cards, match_counts, match_idx)

    if n_of_a_kind == 4:
        return _build_hand_from_match(cards, 4, HandRanking.FOUR_OF_A_KIND, match_idx)
    if n_of_a_kind == 3 and other is not None:
        ans = _build_hand_from_match(cards, 3, HandRanking.FULL_HOUSE, match_idx)
        ans.cards[3] = cards[other]
        ans.cards[4] = cards[other + 1]
        return ans
    if fs is not None:
        suited = [card for card in cards if card.suit == fs]
        return HandEval(HandRanking.FLUSH, suited[:_HAND_SIZE])
    straight = find_straight(cards, None)
    if straight is not None:
        return HandEval(HandRanking.STRAIGHT, straight)
    if n_of_a_kind == 3:
        return _build_hand_from_match(cards, 3, HandRanking.THREE_OF_A_KIND, match_idx)
    if other is not None:
        ans = _build_hand_from_match(cards, 2, HandRanking.TWO_PAIR, match_idx)
        ans.cards[2] = cards[other]
        ans.cards[3] = cards[other + 1]
        if match_idx > 0:
            ans.cards[4] = cards[0]
        elif other > 2:
            ans.cards[4] = cards[2]
        else:
            ans.cards[4] = cards[4]
        return ans
    if n_of_a_kind == 2:
        return _build_hand_from_match(cards, 2, HandRanking.PAIR, match_idx)
    return _build_hand_from_match(cards, 0, HandRanking.NOTHING, 0)


def compare_hands(hand1, hand2):
    """Sort both hands and compare them.

    Returns a positive number if ``hand1`` wins, a negative one if ``hand2``
    wins and 0 for a tie.
    """
    hand1.sort()
    hand2.sort()
    e1 = evaluate_hand(hand1)
    e2 = evaluate_hand(hand2)
    if e1.ranking != e2.ranking:
        return int(e2.ranking) - int(e1.ranking)
    for c1, c2 in zip(e1.cards, e2.cards):
        if c1.value != c2.value:
            return c1.value - c2.value
    return 0