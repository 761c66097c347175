"""RFC 1924 alphabet: digit values 0-84 and their characters."""

from typing import Dict, FrozenSet, Union

from base85.b85exceptions import InvalidCharacter

BASE85_CHARS = (
    "0123456789"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    "!#$%&()*+-;<=>?@^_`{|}~"
)

# Filler digit for short final groups on decode
PAD_DIGIT = len(BASE85_CHARS) - 1
PAD_CHAR = BASE85_CHARS[PAD_DIGIT]

# space, line feed, vertical tab, carriage return
WHITESPACE: FrozenSet[int] = frozenset((32, 10, 11, 13))

# Both tables are indexed by code point so str and bytes input share them.
ENCODE_TABLE = BASE85_CHARS.encode("ascii")
DECODE_TABLE: Dict[int, int] = {c: i for (i, c) in enumerate(ENCODE_TABLE)}


def digit_to_char(d: int) -> str:
    assert 0 <= d <= PAD_DIGIT, d
    return BASE85_CHARS[d]


def char_to_digit(c: Union[str, int]) -> int:
    """Returns the digit value of a single character or code point.

    Raises InvalidCharacter for anything outside the 85-symbol table.
    """
    code = c if isinstance(c, int) else ord(c)
    try:
        return DECODE_TABLE[code]
    except KeyError:
        raise InvalidCharacter(chr(code)) from None
