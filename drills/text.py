"""String reversal with a bounded working buffer."""

MAX_SIZE = 100


def reverse(text):
    """Return ``text`` reversed.

    Only the first ``MAX_SIZE - 1`` characters fit in the working buffer;
    longer input is cut to that length before it is reversed.
    """
    if len(text) >= MAX_SIZE:
        text = text[: MAX_SIZE - 1]
    return text[::-1]