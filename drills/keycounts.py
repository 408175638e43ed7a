"""Counting the values that the keys listed in files map to."""

import sys

from drills.counts import Counts
from drills.kv import read_kvs
from drills.outname import compute_output_file_name


def _split_lines(text):
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def count_file(filename, kv):
    """Count the values of the keys listed one per line in ``filename``.

    Keys with no pair in ``kv`` are counted as unknown.  Raises OSError if
    the file cannot be opened.
    """
    with open(filename, encoding="utf-8", newline="") as handle:
        text = handle.read()
    counts = Counts()
    for line in _split_lines(text):
        counts.add(kv.lookup(line.split("\n", 1)[0]))
    return counts


def main(argv=None):
    """Usage: ``keycounts kvfile keyfile1 [keyfile2 ...]``.

    Writes the counts for each key file to that file's name plus ``.counts``.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        sys.stderr.write("Usage: keycounts kvfn kfn1 [kfn2 ...]\n")
        sys.stderr.write("\tkfn: name of file with key/value pairs\n")
        sys.stderr.write("\tkfn1, kfn2, etc.: name of files with keys\n")
        return 1
    try:
        kv = read_kvs(args[0])
    except OSError as exc:
        sys.stderr.write(f"Could not open file for reading: {exc.strerror}\n")
        return 1
    for name in args[1:]:
        try:
            counts = count_file(name, kv)
        except OSError as exc:
            sys.stderr.write(f"Could not open file for reading: {exc.strerror}\n")
            return 1
        out_name = compute_output_file_name(name)
        try:
            with open(out_name, "w", encoding="utf-8", newline="") as out:
                out.write(counts.format())
        except OSError as exc:
            sys.stderr.write(f"fopen: {exc.strerror}\nTrying to open {out_name}\n")
            return 1
    return 0