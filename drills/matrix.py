"""Loading a 10x10 character matrix and rotating it clockwise."""

import sys

SIZE = 10
LINE_SIZE = 12


class MatrixFormatError(ValueError):
    """Raised when matrix input is not ten lines of ten characters."""

    def __init__(self, message, detail=None):
        super().__init__(message)
        self.detail = detail


def rotate(matrix):
    """Return a square matrix of characters rotated 90 degrees clockwise."""
    rows = ["".join(row) for row in matrix]
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("matrix must be square")
    return ["".join(column) for column in zip(*reversed(rows))]


def load_matrix(lines):
    """Read ten lines of exactly ten characters each, newline included.

    ``lines`` is an iterable of lines that keep their newline.  Returns the
    rows as strings; raises :class:`MatrixFormatError` on bad input.
    """
    limit = LINE_SIZE - 1
    matrix = []
    for line in lines:
        count = len(matrix)
        chunk = line[:limit]
        if "\n" not in chunk:
            raise MatrixFormatError(
                f"Line {count + 1} is too long!",
                f"First {limit} chars in line {count + 1}: |{chunk}|",
            )
        if count > SIZE - 1:
            raise MatrixFormatError(f"Too many lines in the file ({count} lines)!")
        row = chunk[:SIZE]
        newline = row.find("\n")
        if newline != -1:
            raise MatrixFormatError(
                f"Line {count + 1} is too short!",
                f"First {newline} chars in line {count + 1}: |{row[:newline]}|",
            )
        matrix.append(row)
    if len(matrix) < SIZE:
        raise MatrixFormatError(f"Only {len(matrix)} lines were read!")
    return matrix


def _split_lines(text):
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def main(argv=None):
    """Read a matrix file, rotate it clockwise and print the result."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        sys.stderr.write("Usage: rotate-matrix <filename>\n")
        return 1
    try:
        with open(args[0], encoding="latin-1", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        sys.stderr.write(f"Failed to open the input file!: {exc.strerror}\n")
        return 1
    try:
        matrix = load_matrix(_split_lines(text))
    except MatrixFormatError as exc:
        sys.stderr.write(f"{exc}\n")
        if exc.detail:
            sys.stdout.write(f"{exc.detail}\n")
        return 1
    for row in rotate(matrix):
        sys.stdout.write(row + "\n")
    return 0