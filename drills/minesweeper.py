"""Console minesweeper that marks every mine that can be deduced."""

import random
import re
import sys
from enum import IntEnum

KNOWN_MINE = -3
HAS_MINE = -2
UNKNOWN = -1

INT_MAX = (1 << 31) - 1
_LONG_MAX = (1 << 63) - 1

_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


class ClickResult(IntEnum):
    """Outcome of clicking a square."""

    KNOWN_MINE = -2
    INVALID = -1
    CONTINUE = 0
    LOSE = 1


def _is_mine(value):
    return value in (HAS_MINE, KNOWN_MINE)


class Board:
    """A minesweeper board.

    ``cells[y][x]`` holds a mine count for a revealed square, or one of
    ``UNKNOWN``, ``HAS_MINE`` and ``KNOWN_MINE``.
    """

    def __init__(self, width, height, num_mines, rng=None):
        self.width = width
        self.height = height
        self.total_mines = num_mines
        self.cells = [[UNKNOWN] * width for _ in range(height)]
        rng = random.Random() if rng is None else rng
        for _ in range(num_mines):
            self._add_random_mine(rng)

    def _add_random_mine(self, rng):
        for _ in range(self.width * self.height * 10):
            x = rng.randrange(self.width)
            y = rng.randrange(self.height)
            if self.cells[y][x] != HAS_MINE:
                self.cells[y][x] = HAS_MINE
                return
        raise ValueError("board is too small for the requested number of mines")

    def _around(self, x, y):
        """Yield the in-bounds squares of the 3x3 block centred on (x, y)."""
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                nx, ny = x + dx, y + dy
                if 0 <= nx < self.width and 0 <= ny < self.height:
                    yield nx, ny

    def _column_header(self):
        tens = "".join(str(x // 10) for x in range(self.width))
        ones = "".join(str(x % 10) for x in range(self.width))
        return f"    {tens}\n    {ones}"

    def render(self):
        """Return the board as text, mines hidden unless known."""
        found = 0
        rule = "----" + "-" * self.width
        parts = [self._column_header() + "\n" + rule + "\n"]
        for y, row in enumerate(self.cells):
            chars = []
            for value in row:
                if value == KNOWN_MINE:
                    chars.append("*")
                    found += 1
                elif value < 0:
                    chars.append("?")
                elif value == 0:
                    chars.append(" ")
                else:
                    chars.append(str(value))
            parts.append(f"{y % 100:2d}: " + "".join(chars) + "\n")
        parts.append("\n" + rule + "\n")
        parts.append(self._column_header())
        parts.append(f"\nFound {found} of {self.total_mines} mines\n")
        return "".join(parts)

    def count_mines(self, x, y):
        """Return the number of mines next to (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise ValueError(f"square ({x}, {y}) is off the board")
        return sum(
            1
            for nx, ny in self._around(x, y)
            if (nx, ny) != (x, y) and _is_mine(self.cells[ny][nx])
        )

    def click(self, x, y):
        """Reveal (x, y) and return what happened."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return ClickResult.INVALID
        value = self.cells[y][x]
        if value == KNOWN_MINE:
            return ClickResult.KNOWN_MINE
        if value == HAS_MINE:
            return ClickResult.LOSE
        if value == UNKNOWN:
            self.cells[y][x] = self.count_mines(x, y)
        return ClickResult.CONTINUE

    def check_win(self):
        """Return True once no safe square is left unrevealed."""
        return all(value != UNKNOWN for row in self.cells for value in row)

    def _do_reveal(self, x, y, reveal_mines):
        for nx, ny in self._around(x, y):
            value = self.cells[ny][nx]
            if reveal_mines:
                assert value != UNKNOWN
                if value == HAS_MINE:
                    self.cells[ny][nx] = KNOWN_MINE
            else:
                assert value != HAS_MINE
                if value == UNKNOWN:
                    self.cells[ny][nx] = self.count_mines(nx, ny)

    def _maybe_reveal(self, x, y):
        value = self.cells[y][x]
        unknown = known = 0
        for nx, ny in self._around(x, y):
            neighbour = self.cells[ny][nx]
            if neighbour in (UNKNOWN, HAS_MINE):
                unknown += 1
            elif neighbour == KNOWN_MINE:
                known += 1
        assert known + unknown >= value
        assert known <= value
        if unknown == 0:
            return False
        reveal_mines = known + unknown == value
        all_known = known == value
        if not (reveal_mines or all_known):
            return False
        self._do_reveal(x, y, reveal_mines)
        return True

    def determine_known_mines(self):
        """Repeatedly mark certain mines and reveal certain safe squares."""
        found_more = True
        while found_more:
            found_more = False
            for y in range(self.height):
                for x in range(self.width):
                    if self.cells[y][x] >= 0:
                        found_more = self._maybe_reveal(x, y) or found_more

    def reveal_mines(self):
        """Mark every mine on the board as known."""
        for row in self.cells:
            for x, value in enumerate(row):
                if value == HAS_MINE:
                    row[x] = KNOWN_MINE


def read_int(infile=None, outfile=None, errfile=None):
    """Read lines until one holds exactly one integer that fits an int.

    Raises EOFError when the input runs out.
    """
    infile = sys.stdin if infile is None else infile
    outfile = sys.stdout if outfile is None else outfile
    errfile = sys.stderr if errfile is None else errfile
    while True:
        line = infile.readline()
        if not line:
            raise EOFError("End of file from keyboard reading a number.  Quitting")
        match = _NUMBER.match(line)
        if match is None:
            errfile.write("You did not enter any valid number\n")
            outfile.write("Please try again\n")
            continue
        if not line[match.end():].startswith("\n"):
            errfile.write("Input was not entirely a number (junk at end)\n")
            outfile.write("Please try again\n")
            continue
        value = min(int(match.group(1)), _LONG_MAX)
        if value > INT_MAX:
            errfile.write(f"{value} is too big for an int!\n")
            outfile.write("Please try again\n")
            continue
        return value


def play_turn(board, infile=None, outfile=None, errfile=None):
    """Play one turn; return True when the game is over."""
    outfile = sys.stdout if outfile is None else outfile
    outfile.write("Current board:\n")
    outfile.write(board.render())
    outfile.write("x coordinate:\n")
    x = read_int(infile, outfile, errfile)
    outfile.write("y coordinate:\n")
    y = read_int(infile, outfile, errfile)
    result = board.click(x, y)
    board.determine_known_mines()
    if result == ClickResult.LOSE:
        outfile.write("Oh no! That square had a mine. You lose!\n")
        board.reveal_mines()
        outfile.write(board.render())
        return True
    if result == ClickResult.INVALID:
        outfile.write("That is not a valid square, please try again\n")
    elif result == ClickResult.KNOWN_MINE:
        outfile.write("You already know there is a mine there!\n")
    elif board.check_win():
        outfile.write(board.render())
        outfile.write("You win!\n")
        return True
    return False


def _atoi(text):
    match = _NUMBER.match(text)
    return int(match.group(1)) if match else 0


def main(argv=None):
    """Play games on the console.  Usage: ``minesweeper width height numMines``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 3:
        sys.stderr.write("Usage: minesweeper width height numMines\n")
        return 1
    width, height, num_mines = (_atoi(arg) for arg in args)
    if width <= 0 or height <= 0 or num_mines <= 0:
        sys.stderr.write("Width, height, and numMines must all be positive ints\n")
        return 1
    rng = random.Random()
    while True:
        try:
            board = Board(width, height, num_mines, rng)
        except ValueError as exc:
            sys.stderr.write(f"{exc}\n")
            return 1
        try:
            while not play_turn(board, sys.stdin, sys.stdout, sys.stderr):
                pass
        except EOFError as exc:
            sys.stderr.write(f"{exc}\n")
            return 1
        sys.stdout.write("Do you want to play again?\n")
        answer = sys.stdin.readline()
        if not answer or answer[0] not in "Yy":
            return 0