"""Exceptions raised while decoding base64 text."""


class DecodeError(ValueError):
    """Base exception for base64 decode failures."""


class InvalidSymbolError(DecodeError):
    """Raised when the input holds a symbol outside both alphabets."""

    def __init__(self, symbol: str, position: int):
        self.symbol = symbol
        self.position = position
        super().__init__(
            f"Invalid base64 character {symbol!r} at position {position}"
        )


class MalformedLengthError(DecodeError):
    """Raised when the input length is not a positive multiple of 4."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(
            f"Invalid base64 length {length}: must be a positive multiple of 4"
        )
