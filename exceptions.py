from typing import Optional


class PokerHandError(Exception):
    """Base exception for poker hand errors."""

    pass


class ConfigurationError(PokerHandError, ValueError):
    """Raised when evaluator configuration is invalid."""

    pass


class ParseError(PokerHandError, ValueError):
    """Raised when hand text cannot be parsed into five valid cards.

    Attributes:
        text (Optional[str]): The offending input or token
    """

    def __init__(self, message: str, text: Optional[str] = None):
        super().__init__(message)
        self.text = text


class WrongCardCountError(ParseError):
    """Raised when a hand does not contain exactly five cards."""

    def __init__(self, count: int, text: Optional[str] = None):
        super().__init__(
            f"Hand must contain exactly 5 cards, got {count}", text=text
        )
        self.count = count


class MalformedTokenError(ParseError):
    """Raised when a card token is not exactly two characters."""

    def __init__(self, token: str):
        super().__init__(f"Invalid card format: {token!r}", text=token)


class InvalidRankError(ParseError):
    """Raised when a card token starts with an unknown rank character."""

    def __init__(self, token: str):
        super().__init__(f"Invalid rank {token[0]!r} in card {token!r}", text=token)


class InvalidSuitError(ParseError):
    """Raised when a card token ends with an unknown suit character."""

    def __init__(self, token: str):
        super().__init__(f"Invalid suit {token[1]!r} in card {token!r}", text=token)
