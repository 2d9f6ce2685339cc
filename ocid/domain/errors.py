class DecodeError(ValueError):
    """Raised when bytes or text cannot be decoded into a content ID."""


class LengthMismatchError(DecodeError):

    def __init__(self, expected: int, actual: int, unit: str = "bytes"):
        super().__init__(
            f"Expected {expected} {unit}, got {actual}"
        )
        self.expected = expected
        self.actual = actual
        self.unit = unit


class InvalidCharacterError(DecodeError):

    def __init__(self, position: int, character: str = ""):
        super().__init__(
            f"Invalid character {character!r} at position {position}"
        )
        self.position = position
        self.character = character
