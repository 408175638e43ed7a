"""Queries over integer sequences."""


def array_max(values):
    """Return the largest value, or ``None`` for an empty sequence."""
    return max(values, default=None)


def max_seq(values):
    """Return the length of the longest strictly increasing run."""
    best = current = 0
    previous = None
    for value in values:
        current = current + 1 if previous is not None and value > previous else 1
        best = max(best, current)
        previous = value
    return best