"""Reading ``key=value`` lines and looking values up by key."""

import sys
from dataclasses import dataclass, field


@dataclass(frozen=True)
class KVPair:
    """One key and its value."""

    key: str
    value: str


@dataclass
class KVArray:
    """Key/value pairs in the order they were read."""

    pairs: list = field(default_factory=list)

    def lookup(self, key):
        """Return the value of the first pair with ``key``, or None."""
        return next((pair.value for pair in self.pairs if pair.key == key), None)

    def format(self):
        """Return one ``key = '...' value = '...'`` line per pair."""
        return "".join(
            f"key = '{pair.key}' value = '{pair.value}'\n" for pair in self.pairs
        )


def parse_kv(line):
    """Split a line at its first ``=``; the value stops at a newline."""
    key, sep, rest = line.partition("=")
    if not sep:
        raise ValueError(f"Not a key=value pair: {line}")
    return KVPair(key, rest.split("\n", 1)[0])


def _split_lines(text):
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def read_kvs(fname):
    """Read pairs from a file, stopping at the first line that is not a pair.

    Raises OSError if the file cannot be opened.
    """
    with open(fname, encoding="utf-8", newline="") as handle:
        text = handle.read()
    array = KVArray()
    for line in _split_lines(text):
        try:
            array.pairs.append(parse_kv(line))
        except ValueError as exc:
            sys.stderr.write(str(exc))
            break
    return array