from typing import Optional

__all__ = [
    "Base85Exception",
    "Base85TypeError",
    "InvalidCharacter",
    "UnexpectedEof",
]


class Base85Exception(Exception):
    """Base class for base85 codec exceptions."""


class Base85TypeError(Base85Exception, TypeError):
    """Raised when an argument has an unsupported type."""


class InvalidCharacter(Base85Exception, ValueError):
    """Raised when a character outside the alphabet is decoded."""

    def __init__(self, char: str, position: Optional[int] = None) -> None:
        self.char = char
        self.position = position
        if position is None:
            msg = f"Invalid base85 character {char!r}"
        else:
            msg = f"Invalid base85 character {char!r} at position {position}"
        super().__init__(msg)


class UnexpectedEof(Base85Exception, EOFError):
    """Raised when the symbol stream ends with a lone trailing symbol."""
