"""Base85 encoder/decoder, RFC 1924 variant.

Every four bytes are encoded with five characters from an 85-symbol
alphabet, as 256**4 < 85**5. Blocks are big-endian and the most
significant digit comes first. A trailing group of n (1-3) bytes is
padded with zero bytes and only its n+1 leading digits are kept; the
decoder restores the dropped digits as the highest digit (84) and keeps
m-1 bytes of a trailing group of m (2-4) symbols.

Unlike Adobe's ASCII85 there is no 'z' shorthand, no '<~ ~>' framing and
no line wrapping.
"""

import logging
import struct
from typing import List, Sequence, Union

from base85.alphabet import (
    DECODE_TABLE,
    ENCODE_TABLE,
    PAD_DIGIT,
    WHITESPACE,
    char_to_digit,
)
from base85.b85exceptions import (
    Base85TypeError,
    InvalidCharacter,
    UnexpectedEof,
)

log = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]

# Groups above this (e.g. "~~~~~") keep only their low 32 bits
BLOCK_MASK = 0xFFFFFFFF

_WHITESPACE_BYTES = bytes(sorted(WHITESPACE))


def encoded_length(n: int) -> int:
    """Number of characters encode() produces for n bytes."""
    full, rest = divmod(n, 4)
    return full * 5 + (rest + 1 if rest else 0)


def decoded_length(m: int) -> int:
    """Number of bytes decode() produces for m non-whitespace symbols.

    A lone trailing symbol (m % 5 == 1) cannot come from any encoding and
    raises UnexpectedEof.
    """
    full, rest = divmod(m, 5)
    if rest == 1:
        raise UnexpectedEof(
            f"Truncated base85 input: {m} symbols leave a lone trailing symbol"
        )
    return full * 4 + (rest - 1 if rest else 0)


def _put_digits(out: bytearray, pos: int, value: int, count: int) -> None:
    # Writes the `count` leading digits of the five that encode value.
    for i in range(4, -1, -1):
        value, digit = divmod(value, 85)
        if i < count:
            out[pos + i] = ENCODE_TABLE[digit]
    assert value == 0, value


def encode(data: BytesLike) -> str:
    """Encodes bytes into an RFC 1924 base85 string.

    >>> encode(b"aaaaa")
    'VPRomVE'
    """
    if isinstance(data, str):
        raise Base85TypeError("encode() expects a bytes-like object, not str")
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise Base85TypeError(
            f"encode() expects a bytes-like object, not {type(data).__name__}"
        )
    data = bytes(data)
    length = len(data)
    rest = length % 4
    full = length - rest

    out = bytearray(encoded_length(length))
    pos = 0
    for (value,) in struct.iter_unpack(">L", data[:full]):
        _put_digits(out, pos, value, 5)
        pos += 5
    if rest:
        value = int.from_bytes(data[full:].ljust(4, b"\x00"), "big")
        _put_digits(out, pos, value, rest + 1)
        pos += rest + 1
    assert pos == len(out), (pos, len(out))

    log.debug("encode: %d bytes -> %d characters", length, pos)
    return out.decode("ascii")


def _first_invalid(text: Union[str, bytes]) -> InvalidCharacter:
    for (pos, c) in enumerate(text):
        if (c if isinstance(c, int) else ord(c)) in WHITESPACE:
            continue
        try:
            char_to_digit(c)
        except InvalidCharacter as e:
            log.debug("decode: invalid character %r at position %d", e.char, pos)
            return InvalidCharacter(e.char, pos)
    raise AssertionError("no invalid character found")


def _block_value(digits: Sequence[int]) -> int:
    value = 0
    for d in digits:
        value = value * 85 + d
    return value & BLOCK_MASK


def decode(text: Union[str, BytesLike]) -> bytes:
    """Decodes an RFC 1924 base85 string into bytes.

    Space, line feed, vertical tab and carriage return are skipped
    anywhere in the input. The call fails as a whole on the first error:
    InvalidCharacter for a symbol outside the alphabet and UnexpectedEof
    for truncated input.

    >>> decode("VPRom VE")
    b'aaaaa'
    """
    if isinstance(text, str):
        try:
            raw = text.encode("ascii")
        except UnicodeEncodeError:
            raise _first_invalid(text) from None
    elif isinstance(text, (bytes, bytearray, memoryview)):
        raw = bytes(text)
    else:
        raise Base85TypeError(
            f"decode() expects str or a bytes-like object, not {type(text).__name__}"
        )

    symbols = raw.translate(None, _WHITESPACE_BYTES)
    try:
        digits: List[int] = [DECODE_TABLE[c] for c in symbols]
    except KeyError:
        raise _first_invalid(raw) from None

    count = len(digits)
    try:
        out = bytearray(decoded_length(count))
    except UnexpectedEof:
        log.debug("decode: %d symbols end with a lone trailing symbol", count)
        raise
    rest = count % 5
    full = count - rest

    pos = 0
    for off in range(0, full, 5):
        value = _block_value(digits[off : off + 5])
        out[pos : pos + 4] = value.to_bytes(4, "big")
        pos += 4
    if rest:
        padded = digits[full:] + [PAD_DIGIT] * (5 - rest)
        out[pos:] = _block_value(padded).to_bytes(4, "big")[: rest - 1]
        pos += rest - 1
    assert pos == len(out), (pos, len(out))

    log.debug("decode: %d symbols -> %d bytes", count, pos)
    return bytes(out)
