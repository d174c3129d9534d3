"""Import header parser adapter.

Implements SourceParserPort for Go / Go+ source files.
Parses the package clause and import declarations only:

    Header        = [ PackageClause ";" ] { ImportDecl ";" } .
    PackageClause = "package" identifier .
    ImportDecl    = "import" ( ImportSpec | "(" { ImportSpec ";" } ")" ) .
    ImportSpec    = [ "." | identifier ] ImportPath .

Parsing stops at the first token after the imports that is not
"import". FAIL-FIRST: the first syntax error raises HeaderSyntaxError.
"""

from __future__ import annotations

import unicodedata
from pathlib import Path
from typing import TYPE_CHECKING

from gopdeps.domain.exceptions.parsing import HeaderSyntaxError, ParsingError, SourceReadError
from gopdeps.domain.model.configuration import HeaderParserConfig
from gopdeps.domain.model.import_spec import ImportSpec
from gopdeps.domain.model.token import Token, TokenKind
from gopdeps.domain.ports.source_parser import SourceParserPort
from gopdeps.infrastructure.analyzers.lexer import KEYWORDS, Scanner
from gopdeps.infrastructure.analyzers.literal import unquote

if TYPE_CHECKING:
    from gopdeps.domain.model.fileset import FileSet, SourceFile
    from gopdeps.domain.model.location import Location

_ILLEGAL_IMPORT_CHARS = frozenset('!"#$%&\'()*,:;<=>?[\\]^{|}`\ufffd')


def is_valid_import_path(value: str) -> bool:
    """Check a decoded import path for characters the toolchain rejects.

    Valid: non-empty, only graphic non-space characters, none of
    !"#$%&'()*,:;<=>?[\\]^{|}` or U+FFFD.
    """
    if not value:
        return False
    for ch in value:
        if not _is_graphic(ch) or ch.isspace() or ch in _ILLEGAL_IMPORT_CHARS:
            return False
    return True


def _is_graphic(ch: str) -> bool:
    """Letters, marks, numbers, punctuation, symbols and spaces (Zs)."""
    category = unicodedata.category(ch)
    return category[0] in "LMNPS" or category == "Zs"


class GoHeaderParser(SourceParserPort):
    """Parser for the import header of .go / .gop files.

    Registers every file it reads in the shared FileSet, so positions
    of returned ImportSpecs and of errors resolve through that FileSet.

    Stateless between parse_imports() calls apart from the FileSet.
    """

    def __init__(self, fset: FileSet, config: HeaderParserConfig | None = None) -> None:
        """Initialize parser.

        Args:
            fset: Shared position context
            config: Parser configuration. Uses defaults if None.

        Raises:
            TypeError: If fset is None
        """
        if fset is None:
            raise TypeError("fset must not be None")

        self._fset = fset
        self._config = config or HeaderParserConfig()

    @property
    def config(self) -> HeaderParserConfig:
        """Active configuration."""
        return self._config

    def parse_imports(self, path: Path) -> tuple[ImportSpec, ...]:
        """Parse package clause and import declarations of one file.

        FAIL-FIRST: raises on read errors, encoding errors, syntax errors.

        Args:
            path: Source file path

        Returns:
            Import declarations in source order

        Raises:
            SourceReadError: If file cannot be read
            ParsingError: If file cannot be decoded
            HeaderSyntaxError: If the header is malformed
        """
        path = Path(path)
        source = self._read(path)

        source_file = self._fset.add_file(path, len(source))
        source_file.set_lines_for_content(source)

        parser = _HeaderParser(
            Scanner(source, source_file),
            source_file,
            require_package=self._config.requires_package_clause(path.suffix),
        )
        return parser.parse()

    def _read(self, path: Path) -> str:
        """Read and decode file - FAIL-FIRST on file errors."""
        try:
            data = path.read_bytes()
        except FileNotFoundError as e:
            raise SourceReadError(path, "file not found") from e
        except PermissionError as e:
            raise SourceReadError(path, "permission denied") from e
        except IsADirectoryError as e:
            raise SourceReadError(path, "is a directory") from e
        except OSError as e:
            raise SourceReadError(path, f"cannot read file: {e.strerror or e}") from e

        try:
            return data.decode(self._config.encoding)
        except UnicodeDecodeError as e:
            raise ParsingError(path, f"unsupported encoding: {e}") from e


class _HeaderParser:
    """Recursive descent over the header of one file.

    One instance per file; holds the current token.
    """

    def __init__(self, scanner: Scanner, source_file: SourceFile, *, require_package: bool) -> None:
        self._scanner = scanner
        self._file = source_file
        self._require_package = require_package
        self._tok: Token = scanner.scan()

    def parse(self) -> tuple[ImportSpec, ...]:
        """Parse package clause and all import declarations."""
        self._parse_package_clause()

        specs: list[ImportSpec] = []
        while self._at_keyword("import"):
            self._next()

            if self._tok.kind is TokenKind.LPAREN:
                self._next()
                while self._tok.kind not in (TokenKind.RPAREN, TokenKind.EOF):
                    specs.append(self._parse_import_spec())
                self._expect(TokenKind.RPAREN, "')'")
                self._expect_semi()
            else:
                specs.append(self._parse_import_spec())

        return tuple(specs)

    def _parse_package_clause(self) -> None:
        if not self._at_keyword("package"):
            if self._require_package:
                raise self._error_expected("'package'")
            return

        self._next()
        if self._tok.kind is not TokenKind.IDENT or self._tok.text in KEYWORDS:
            raise self._error_expected("package name")
        self._next()
        self._expect_semi()

    def _parse_import_spec(self) -> ImportSpec:
        """ImportSpec = [ "." | identifier ] ImportPath ."""
        name: str | None = None
        if self._tok.kind is TokenKind.PERIOD:
            name = "."
            self._next()
        elif self._tok.kind is TokenKind.IDENT and self._tok.text not in KEYWORDS:
            name = self._tok.text
            self._next()

        tok = self._tok
        if tok.kind is TokenKind.STRING:
            if not is_valid_import_path(unquote(tok.text)):
                raise self._error(tok.pos, f"invalid import path: {tok.text}")
            self._next()
        elif tok.kind is TokenKind.OTHER and (tok.text.isdigit() or tok.text == "'"):
            raise self._error(tok.pos, "import path must be a string")
        else:
            raise self._error(tok.pos, "missing import path")

        self._expect_semi()
        return ImportSpec(path=tok, name=name, location=self._location(tok.pos))

    def _next(self) -> None:
        self._tok = self._scanner.scan()

    def _at_keyword(self, keyword: str) -> bool:
        return self._tok.kind is TokenKind.IDENT and self._tok.text == keyword

    def _expect(self, kind: TokenKind, what: str) -> None:
        if self._tok.kind is not kind:
            raise self._error_expected(what)
        self._next()

    def _expect_semi(self) -> None:
        """Semicolon, or nothing before a closing ')'."""
        if self._tok.kind is TokenKind.RPAREN:
            return
        if self._tok.kind is not TokenKind.SEMICOLON:
            raise self._error_expected("';'")
        self._next()

    def _error_expected(self, what: str) -> HeaderSyntaxError:
        return self._error(self._tok.pos, f"expected {what}, found {self._tok.describe()}")

    def _location(self, pos: int) -> Location:
        return self._file.location(self._file.offset(pos))

    def _error(self, pos: int, reason: str) -> HeaderSyntaxError:
        return HeaderSyntaxError(self._location(pos), reason)
