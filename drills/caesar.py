"""Caesar shift encryption of text and key recovery by letter frequency."""

import sys

ALPHABET_SIZE = 26
INDEX_OF_E = 4

_SPACE = " \t\n\v\f\r"


def _is_letter(ch):
    return ch.isascii() and ch.isalpha()


def _shift(ch, key):
    # The remainder keeps the sign of the dividend, so a negative key can
    # move a letter below 'a'.
    offset = ord(ch.lower()) - ord("a") + key
    remainder = abs(offset) % ALPHABET_SIZE
    if offset < 0:
        remainder = -remainder
    return chr(ord("a") + remainder)


def encrypt_text(text, key):
    """Return ``text`` with every ASCII letter lowered and shifted by ``key``."""
    return "".join(_shift(ch, key) if _is_letter(ch) else ch for ch in text)


def letter_frequencies(text):
    """Return 26 counts of the ASCII letters in ``text``, ignoring case."""
    counts = [0] * ALPHABET_SIZE
    for ch in text:
        if _is_letter(ch):
            counts[ord(ch.lower()) - ord("a")] += 1
    return counts


def index_of_max(values):
    """Return the index of the first largest positive value, or 0 if none is positive."""
    best_index = 0
    best = 0
    for index, value in enumerate(values):
        if value > best:
            best = value
            best_index = index
    return best_index


def max_to_key(index):
    """Return the shift that maps 'e' to the letter at ``index``."""
    key = index - INDEX_OF_E
    if key < 0:
        key += ALPHABET_SIZE
    return key


def break_key(text):
    """Guess the key of a shifted text, assuming its most common letter is 'e'."""
    return max_to_key(index_of_max(letter_frequencies(text)))


def _atoi(text):
    s = text.lstrip(_SPACE)
    sign = 1
    if s and s[0] in "+-":
        sign = -1 if s[0] == "-" else 1
        s = s[1:]
    digits = ""
    for ch in s:
        if not ("0" <= ch <= "9"):
            break
        digits += ch
    return sign * int(digits) if digits else 0


def _read(path):
    with open(path, encoding="latin-1", newline="") as handle:
        return handle.read()


def encrypt_main(argv=None):
    """Encrypt a file with a shift key.

    Usage: ``encrypt [-w] key inputFileName``.  The result goes to standard
    output, or with ``-w`` to ``inputFileName.enc``.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    to_file = bool(args) and args[0] == "-w"
    if to_file:
        args = args[1:]
    if len(args) != 2:
        sys.stderr.write("Usage: encrypt [-w] key inputFileName\n")
        return 1
    key = _atoi(args[0])
    if key == 0:
        sys.stderr.write(f"Invalid key ({args[0]}): must be a non-zero integer\n")
        return 1
    try:
        text = _read(args[1])
    except OSError as exc:
        sys.stderr.write(f"Could not open file: {exc.strerror}\n")
        return 1
    result = encrypt_text(text, key)
    if to_file:
        try:
            with open(args[1] + ".enc", "w", encoding="latin-1", newline="") as out:
                out.write(result)
        except OSError as exc:
            sys.stderr.write(f"Could not open output file: {exc.strerror}\n")
            return 1
    else:
        sys.stdout.write(result)
    return 0


def break_main(argv=None):
    """Print the guessed key of an encrypted file.  Usage: ``breaker filename``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        sys.stderr.write("Usage: breaker <filename>\n")
        return 1
    try:
        text = _read(args[0])
    except OSError as exc:
        sys.stderr.write(f"Failed to open the input file!: {exc.strerror}\n")
        return 1
    sys.stdout.write(f"{break_key(text)}\n")
    return 0