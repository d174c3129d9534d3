"""Lazy tokenizer for Go / Go+ source headers.

Produces only the tokens the header grammar needs. Tokens are
scanned on demand, so the file body after the import declarations
is never tokenized.

Semicolons are inserted automatically (Go rules) when a line ends
after an identifier (other than most keywords), a string literal
or ')'. A line comment, or a general comment spanning lines, counts
as a line end. EOF also ends the final line.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from gopdeps.domain.exceptions.parsing import HeaderSyntaxError
from gopdeps.domain.model.token import Token, TokenKind
from gopdeps.infrastructure.analyzers.literal import unquote

if TYPE_CHECKING:
    from gopdeps.domain.model.fileset import SourceFile

KEYWORDS = frozenset(
    {
        "break",
        "case",
        "chan",
        "const",
        "continue",
        "default",
        "defer",
        "else",
        "fallthrough",
        "for",
        "func",
        "go",
        "goto",
        "if",
        "import",
        "interface",
        "map",
        "package",
        "range",
        "return",
        "select",
        "struct",
        "switch",
        "type",
        "var",
    },
)

# Keywords after which a newline still inserts a semicolon
_TERMINATING_KEYWORDS = frozenset({"break", "continue", "fallthrough", "return"})

_PUNCTUATION = {
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    ";": TokenKind.SEMICOLON,
    ".": TokenKind.PERIOD,
}

_BOM = "\ufeff"


def is_letter(ch: str) -> bool:
    """Identifier start character."""
    return ch == "_" or ch.isalpha()


def is_ident_char(ch: str) -> bool:
    """Identifier continuation character."""
    return is_letter(ch) or ch.isdecimal()


@dataclass(slots=True)
class Scanner:
    """Tokenizer over one registered source file.

    Mutable - each scan() call advances the read offset.

    Attributes:
        source: Full file content
        file: FileSet entry of the file (for positions and errors)
        _offset: Read offset into source
        _insert_semi: A line end here produces a SEMICOLON
    """

    source: str
    file: SourceFile
    _offset: int = 0
    _insert_semi: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.file is None:
            raise TypeError("file must not be None")
        if len(self.source) != self.file.size:
            raise ValueError(f"source length {len(self.source)} does not match file size {self.file.size}")

        if self.source.startswith(_BOM):
            self._offset = len(_BOM)

    def scan(self) -> Token:
        """Return the next token.

        Raises:
            HeaderSyntaxError: Unterminated literal or comment, bad escape
        """
        source = self.source
        size = len(source)

        while True:
            self._skip_whitespace()

            if self._offset >= size:
                if self._insert_semi:
                    self._insert_semi = False
                    return self._token(TokenKind.SEMICOLON, "\n", self._offset)
                return self._token(TokenKind.EOF, "", self._offset)

            start = self._offset
            ch = source[start]
            nxt = source[start + 1] if start + 1 < size else ""

            if ch == "\n":
                # only reached with _insert_semi set
                self._insert_semi = False
                self._offset += 1
                return self._token(TokenKind.SEMICOLON, "\n", start)

            if ch == "/" and nxt == "/":
                end = source.find("\n", start)
                self._offset = size if end < 0 else end
                continue

            if ch == "/" and nxt == "*":
                end = source.find("*/", start + 2)
                if end < 0:
                    raise self._error(start, "comment not terminated")
                self._offset = end + 2
                if self._insert_semi and "\n" in source[start : end + 2]:
                    self._insert_semi = False
                    return self._token(TokenKind.SEMICOLON, "\n", start)
                continue

            if is_letter(ch):
                return self._scan_identifier(start)

            if ch == '"':
                return self._scan_string(start)

            if ch == "`":
                return self._scan_raw_string(start)

            self._offset += 1
            kind = _PUNCTUATION.get(ch, TokenKind.OTHER)
            self._insert_semi = kind is TokenKind.RPAREN
            return self._token(kind, ch, start)

    def _skip_whitespace(self) -> None:
        source = self.source
        size = len(source)
        while self._offset < size:
            ch = source[self._offset]
            if ch in " \t\r" or (ch == "\n" and not self._insert_semi):
                self._offset += 1
            else:
                break

    def _scan_identifier(self, start: int) -> Token:
        source = self.source
        end = start + 1
        while end < len(source) and is_ident_char(source[end]):
            end += 1

        text = source[start:end]
        self._offset = end
        self._insert_semi = text not in KEYWORDS or text in _TERMINATING_KEYWORDS
        return self._token(TokenKind.IDENT, text, start)

    def _scan_string(self, start: int) -> Token:
        """Scan "..." and validate its escapes."""
        source = self.source
        size = len(source)
        end = start + 1

        while True:
            if end >= size or source[end] == "\n":
                raise self._error(start, "string literal not terminated")
            ch = source[end]
            end += 1
            if ch == "\\":
                if end < size and source[end] != "\n":
                    end += 1
            elif ch == '"':
                break

        text = source[start:end]
        try:
            unquote(text)
        except ValueError as e:
            raise self._error(start, str(e)) from e

        self._offset = end
        self._insert_semi = True
        return self._token(TokenKind.STRING, text, start)

    def _scan_raw_string(self, start: int) -> Token:
        end = self.source.find("`", start + 1)
        if end < 0:
            raise self._error(start, "raw string literal not terminated")

        self._offset = end + 1
        self._insert_semi = True
        return self._token(TokenKind.STRING, self.source[start : end + 1], start)

    def _token(self, kind: TokenKind, text: str, offset: int) -> Token:
        return Token(kind=kind, text=text, pos=self.file.pos(offset))

    def _error(self, offset: int, reason: str) -> HeaderSyntaxError:
        return HeaderSyntaxError(self.file.location(offset), reason)
