"""Month-by-month savings balance while working and in retirement."""

import sys
from dataclasses import dataclass


@dataclass(frozen=True)
class RetireInfo:
    """Duration, monthly contribution and monthly rate of return of a phase."""

    months: int
    contribution: float
    rate_of_return: float

    def step(self, balance):
        """Return the balance after one month of this phase."""
        return balance + balance * self.rate_of_return + self.contribution


def format_balance(age, balance):
    """Format a balance line for an age given in months."""
    return f"Age {age // 12:3d} month {age % 12:2d} you have ${balance:.2f}"


def balance_history(start_age, balance, info):
    """Yield ``(age, balance)`` at the start of each month of the phase.

    The last pair yielded is the state after the final month, so
    ``info.months + 1`` pairs are produced in all.
    """
    age = start_age
    for _ in range(info.months):
        yield age, balance
        balance = info.step(balance)
        age += 1
    yield age, balance


def retirement(start_age, initial, working, retired):
    """Return the balance lines for a working phase followed by retirement."""
    lines = []
    state = (start_age, initial)
    for info in (working, retired):
        history = list(balance_history(state[0], state[1], info))
        lines.extend(format_balance(age, bal) for age, bal in history[:-1])
        state = history[-1]
    return lines


def main(argv=None):
    """Print the balance history for the standard example and return 0."""
    working = RetireInfo(months=489, contribution=1000.0, rate_of_return=0.045 / 12.0)
    retired = RetireInfo(months=384, contribution=-4000.0, rate_of_return=0.01 / 12.0)
    for line in retirement(327, 21345.0, working, retired):
        sys.stdout.write(line + "\n")
    return 0