# drills

A collection of small, self-contained programs and helpers: a monthly
savings calculator, rectangle intersection, bit and string helpers, a
Caesar cipher and its frequency-based breaker, a 10×10 matrix rotator, a
line sorter, a terminal minesweeper game, key/value lookup and counting
tools, and a poker hand evaluator.

It needs only the Python standard library (3.10 or later).

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Commands

| Command | What it does |
| --- | --- |
| `drills-retirement` | Prints the month-by-month balance of a fixed sample plan: 489 working months, then 384 retired months. |
| `drills-rectangle` | Prints four sample rectangles and every pairwise intersection. |
| `drills-encrypt [-w] KEY FILE` | Lower-cases the ASCII letters of `FILE` and shifts them by `KEY` (a non-zero integer). Writes to standard output, or with `-w` to `FILE.enc`. |
| `drills-break FILE` | Prints the guessed shift key of `FILE`, assuming `e` is its most common letter. |
| `drills-rotate FILE` | Reads exactly ten lines of ten characters each and prints them rotated 90° clockwise. |
| `drills-sortlines [-n] [FILE ...]` | Prints the lines of each file (or of standard input) in sorted order. With `-n`, lines are read as integers (decimal, `0x` hex or leading-`0` octal) and printed in numeric order. |
| `drills-minesweeper WIDTH HEIGHT MINES` | Plays minesweeper in the terminal. |
| `drills-keycounts KVFILE KEYFILE [KEYFILE ...]` | Maps each key through `KVFILE` and writes value counts to `KEYFILE.counts`. |

Errors such as a missing file, a bad argument or malformed input are
reported on standard error and the command exits with status 1.

### Examples

```
drills-encrypt 3 message.txt > message.enc
drills-break message.enc
```

```
printf '0\n0\nno\n' | drills-minesweeper 1 1 1
```

In minesweeper, each turn asks for an x and then a y coordinate. After
every click the board marks all mines that can be deduced from the
revealed counts and reveals every square that is certainly safe. The game
ends when a mine is hit or no safe square is left hidden; then it asks
whether to play again (an answer starting with `y` or `Y` starts a new
game).

`drills-keycounts` expects the key/value file to hold one `key=value` pair
per line; reading stops at the first line without an `=`. Each key file
holds one key per line. Keys with no value are counted under `<unknown>`,
listed last.

## Library use

The modules can also be used directly:

- `drills.retirement`: `RetireInfo`, `format_balance`, `balance_history`, `retirement`
- `drills.sequences`: `array_max`, `max_seq`
- `drills.text`: `reverse`
- `drills.bits`: `get_nth_bit`, `num_to_bits`, `format_bits`
- `drills.rectangle`: `Rectangle` with `canonicalize`, `intersection`, `describe`
- `drills.caesar`: `encrypt_text`, `letter_frequencies`, `index_of_max`, `max_to_key`, `break_key`
- `drills.matrix`: `load_matrix`, `rotate`, `MatrixFormatError`
- `drills.sortlines`: `sort_lines`, `sort_numbers`
- `drills.minesweeper`: `Board`, `ClickResult`, `read_int`, `play_turn`
- `drills.kv`: `KVPair`, `KVArray` (`lookup`, `format`), `parse_kv`, `read_kvs`
- `drills.counts`: `Counts` (`add`, `format`)
- `drills.outname`: `compute_output_file_name`
- `drills.keycounts`: `count_file`
- `drills.cards`: `Card`, `Suit`, `HandRanking`, `InvalidCardError`, `card_from_letters`, `card_from_num`, `make_empty_card`, `ranking_to_string`, `descending_key`
- `drills.deck`: `Deck`, `make_deck_exclude`, `build_remaining_deck`
- `drills.evaluate`: `HandEval`, `flush_suit`, `get_match_counts`, `is_straight_at`, `find_straight`, `evaluate_hand`, `compare_hands`

```python
from drills.cards import card_from_letters
from drills.deck import Deck
from drills.evaluate import evaluate_hand

hand = Deck()
for letters in ["Kh", "Qh", "Jh", "0h", "9h"]:
    hand.add_card(card_from_letters(*letters))
hand.sort()
print(evaluate_hand(hand).ranking)  # HandRanking.STRAIGHT_FLUSH
```

Card values are written `2`–`9`, `0` for ten, then `J`, `Q`, `K`, `A`;
suits are `s`, `h`, `d`, `c`. `evaluate_hand` expects a hand sorted high
to low, as `Deck.sort` leaves it; `compare_hands` sorts both hands itself
and returns a positive number when the first hand wins.

## What it does not do

The poker modules evaluate and compare hands only: there is no command
for them, and nothing deals games or estimates winning odds. The
minesweeper game has no flags, no saved games and no way to choose the
random seed from the command line.