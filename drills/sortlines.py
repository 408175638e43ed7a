"""Sorting the lines of files or standard input."""

import string
import sys

_SPACE = " \t\n\v\f\r"
_LONG_MAX = (1 << 63) - 1
_LONG_MIN = -(1 << 63)


def sort_lines(lines):
    """Return the lines in ascending character order."""
    return sorted(lines)


def _strtol(text):
    s = text.lstrip(_SPACE)
    sign = 1
    if s and s[0] in "+-":
        sign = -1 if s[0] == "-" else 1
        s = s[1:]
    if s[:2].lower() == "0x" and len(s) > 2 and s[2] in string.hexdigits:
        base, s, allowed = 16, s[2:], string.hexdigits
    elif s.startswith("0"):
        base, allowed = 8, string.octdigits
    else:
        base, allowed = 10, string.digits
    digits = ""
    for ch in s:
        if ch not in allowed:
            break
        digits += ch
    value = sign * int(digits, base) if digits else 0
    return max(_LONG_MIN, min(_LONG_MAX, value))


def sort_numbers(lines):
    """Parse each line as an integer (decimal, 0x hex or 0 octal) and sort them."""
    return sorted(_strtol(line) for line in lines)


def _split_lines(text):
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def main(argv=None):
    """Print each named file's lines sorted, or standard input's if none are named.

    With ``-n`` first, lines are read as integers and printed in numeric order.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    numeric = bool(args) and args[0] == "-n"
    if numeric:
        args = args[1:]

    def emit(lines):
        if numeric:
            sys.stdout.write("".join(f"{n}\n" for n in sort_numbers(lines)))
        else:
            sys.stdout.write("".join(sort_lines(lines)))

    if not args:
        emit(_split_lines(sys.stdin.read()))
        return 0
    for path in args:
        try:
            with open(path, encoding="utf-8", newline="") as handle:
                text = handle.read()
        except OSError as exc:
            sys.stderr.write(f"Could not open file: {exc.strerror}\n")
            return 1
        emit(_split_lines(text))
    return 0