from importlib.metadata import PackageNotFoundError, version

from base85.alphabet import BASE85_CHARS
from base85.b85exceptions import (
    Base85Exception,
    Base85TypeError,
    InvalidCharacter,
    UnexpectedEof,
)
from base85.rfc1924 import decode, decoded_length, encode, encoded_length

__all__ = [
    "BASE85_CHARS",
    "Base85Exception",
    "Base85TypeError",
    "InvalidCharacter",
    "UnexpectedEof",
    "decode",
    "decoded_length",
    "encode",
    "encoded_length",
]

try:
    __version__ = version("base85")
except PackageNotFoundError:
    # package is not installed, return default
    __version__ = "0.0"

if __name__ == "__main__":
    print(__version__)
