"""Lexical token of a source header."""

from dataclasses import dataclass
from enum import Enum, auto


class TokenKind(Enum):
    """Token kinds the header grammar distinguishes.

    Everything the header grammar has no use for is OTHER.
    """

    EOF = auto()
    IDENT = auto()
    STRING = auto()  # "interpreted" or `raw`
    LPAREN = auto()
    RPAREN = auto()
    SEMICOLON = auto()  # explicit or inserted at newline/EOF
    PERIOD = auto()
    OTHER = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """Single token with its raw source text.

    Attributes:
        kind: Token kind
        text: Raw source text ("\\n" for an inserted semicolon, "" for EOF)
        pos: Global position in the owning FileSet (>= 1)
    """

    kind: TokenKind
    text: str
    pos: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.kind, TokenKind):
            raise TypeError(f"kind must be TokenKind, got {type(self.kind).__name__}")
        if self.text is None:
            raise TypeError("text must not be None")
        if self.pos < 1:
            raise ValueError(f"pos must be >= 1, got {self.pos}")

    @property
    def is_inserted_semicolon(self) -> bool:
        """Semicolon produced by automatic insertion, not written in source."""
        return self.kind is TokenKind.SEMICOLON and self.text != ";"

    def describe(self) -> str:
        """Human-readable form for error messages."""
        if self.kind is TokenKind.EOF:
            return "EOF"
        if self.is_inserted_semicolon:
            return "newline"
        return f"'{self.text}'"
