"""Conversion of 32-bit unsigned numbers to lists of bits."""

WORD_BITS = 32


def get_nth_bit(number, bit):
    """Return bit ``bit`` (0 is least significant) of a 32-bit number."""
    if not 0 <= bit < WORD_BITS:
        raise ValueError(f"Bit {bit} is invalid")
    return (number >> bit) & 1


def num_to_bits(nums, n_bits):
    """Return the bits of every number, most significant first.

    ``n_bits`` is the room available for the result and must hold 32 bits
    per number.
    """
    nums = list(nums)
    if n_bits < WORD_BITS * len(nums):
        raise ValueError(
            f"Invalid call to num_to_bits! n_bits is {n_bits}, n_nums is {len(nums)}"
        )
    return [
        get_nth_bit(number, bit)
        for number in nums
        for bit in range(WORD_BITS - 1, -1, -1)
    ]


def _signed(number):
    number &= 0xFFFFFFFF
    return number - (1 << WORD_BITS) if number & 0x80000000 else number


def format_bits(nums):
    """Return one line per number: decimal, hexadecimal and its 32 bits."""
    nums = list(nums)
    bits = num_to_bits(nums, WORD_BITS * len(nums))
    lines = []
    for index, number in enumerate(nums):
        word = "".join(str(b) for b in bits[index * WORD_BITS:(index + 1) * WORD_BITS])
        lines.append(f" {_signed(number):9d} ({number & 0xFFFFFFFF:8X}) => {word}")
    return "\n".join(lines) + ("\n" if lines else "")