"""Tests for application/services/imports_parser.py."""

from pathlib import Path

import pytest

from gopdeps.application.services.imports_parser import ImportsParser, merge_imports
from gopdeps.domain.exceptions.fault import LiteralDecodeFault
from gopdeps.domain.exceptions.parsing import HeaderSyntaxError, ParsingError, SourceReadError
from gopdeps.domain.model.configuration import HeaderParserConfig
from gopdeps.domain.model.fileset import FileSet
from gopdeps.domain.model.import_spec import ImportSpec
from gopdeps.domain.model.token import Token, TokenKind
from gopdeps.domain.ports.source_parser import SourceParserPort
from tests.factories import make_location, make_module, make_string_token, write_go_file, write_source


class StubSourceParser(SourceParserPort):
    """Returns canned specs per file name."""

    def __init__(self, specs: dict[str, tuple[ImportSpec, ...]]) -> None:
        self._specs = specs
        self.calls: list[Path] = []

    def parse_imports(self, path: Path) -> tuple[ImportSpec, ...]:
        self.calls.append(path)
        return self._specs[path.name]


def spec(literal: str) -> ImportSpec:
    return ImportSpec(path=make_string_token(literal), name=None, location=make_location())


@pytest.fixture
def parser() -> ImportsParser:
    return ImportsParser(FileSet(), make_module("example.com/app"))


class TestImportsParserInit:
    """Tests for construction."""

    def test_starts_empty(self, parser: ImportsParser) -> None:
        assert parser.imports == frozenset()
        assert len(parser) == 0

    def test_exposes_fset_and_module(self) -> None:
        fset = FileSet()
        module = make_module()
        parser = ImportsParser(fset, module)
        assert parser.fset is fset
        assert parser.module is module

    def test_none_fset_raises(self) -> None:
        with pytest.raises(TypeError, match="fset must not be None"):
            ImportsParser(None, make_module())  # type: ignore[arg-type]

    def test_none_module_raises(self) -> None:
        with pytest.raises(TypeError, match="module must not be None"):
            ImportsParser(FileSet(), None)  # type: ignore[arg-type]

    def test_module_without_path_raises(self) -> None:
        with pytest.raises(TypeError, match="'path' property"):
            ImportsParser(FileSet(), object())  # type: ignore[arg-type]

    def test_config_with_custom_parser_raises(self) -> None:
        with pytest.raises(ValueError, match="config applies to the default parser only"):
            ImportsParser(
                FileSet(),
                make_module(),
                source_parser=StubSourceParser({}),
                config=HeaderParserConfig(),
            )

    def test_repr(self, parser: ImportsParser) -> None:
        assert repr(parser) == "ImportsParser(module='example.com/app', imports=0)"


class TestParseImportsScenarios:
    """End-to-end scenarios through the real header parser."""

    def test_absolute_and_relative(self, parser: ImportsParser, tmp_path: Path) -> None:
        path = write_go_file(tmp_path, "main.go", "fmt", "./util")
        assert parser.parse_imports(path) == frozenset({"fmt", "example.com/app/util"})
        assert parser.imports == frozenset({"fmt", "example.com/app/util"})

    def test_syntax_error_leaves_set_unchanged(self, parser: ImportsParser, tmp_path: Path) -> None:
        parser.parse_imports(write_go_file(tmp_path, "ok.go", "os"))
        bad = write_source(tmp_path, "bad.go", 'package main\nimport (\n\t"fmt"\n\t"./util"\n\t42\n)\n')

        with pytest.raises(HeaderSyntaxError):
            parser.parse_imports(bad)

        assert parser.imports == frozenset({"os"})

    def test_overlapping_files_dedupe(self, parser: ImportsParser, tmp_path: Path) -> None:
        a = write_go_file(tmp_path, "a.go", "fmt", "github.com/pkg/errors", "./util")
        b = write_go_file(tmp_path, "b.go", "github.com/pkg/errors", "fmt", "os")

        parser.parse_imports(a)
        parser.parse_imports(b)

        assert parser.sorted_imports() == (
            "example.com/app/util",
            "fmt",
            "github.com/pkg/errors",
            "os",
        )

    def test_missing_file_propagates(self, parser: ImportsParser, tmp_path: Path) -> None:
        with pytest.raises(SourceReadError):
            parser.parse_imports(tmp_path / "absent.go")
        assert len(parser) == 0

    def test_accepts_str_path(self, parser: ImportsParser, tmp_path: Path) -> None:
        path = write_go_file(tmp_path, "main.go", "fmt")
        assert parser.parse_imports(str(path)) == frozenset({"fmt"})

    def test_parent_relative_import(self, tmp_path: Path) -> None:
        parser = ImportsParser(FileSet(), make_module("example.com/proj/pkg"))
        path = write_go_file(tmp_path, "main.go", "../sibling")
        assert parser.parse_imports(path) == frozenset({"example.com/proj/sibling"})

    def test_header_config_is_used(self, tmp_path: Path) -> None:
        config = HeaderParserConfig(optional_package_suffixes=frozenset({".go"}))
        parser = ImportsParser(FileSet(), make_module(), config=config)
        path = write_source(tmp_path, "main.go", 'import "fmt"\n')
        assert parser.parse_imports(path) == frozenset({"fmt"})

    def test_files_registered_in_fset(self, tmp_path: Path) -> None:
        fset = FileSet()
        parser = ImportsParser(fset, make_module())
        parser.parse_imports(write_go_file(tmp_path, "a.go", "fmt"))
        parser.parse_imports(write_go_file(tmp_path, "b.go", "os"))
        assert len(fset) == 2


class TestAccumulationProperties:
    """Set semantics of the accumulated dependency set."""

    def test_reparse_is_idempotent(self, parser: ImportsParser, tmp_path: Path) -> None:
        path = write_go_file(tmp_path, "main.go", "fmt", "./util")
        parser.parse_imports(path)
        once = parser.imports
        parser.parse_imports(path)
        assert parser.imports == once

    def test_order_independent(self, tmp_path: Path) -> None:
        a = write_go_file(tmp_path, "a.go", "fmt", "./x")
        b = write_go_file(tmp_path, "b.go", "os", "../y", "fmt")

        ab = ImportsParser(FileSet(), make_module())
        ab.parse_imports(a)
        ab.parse_imports(b)

        ba = ImportsParser(FileSet(), make_module())
        ba.parse_imports(b)
        ba.parse_imports(a)

        assert ab.imports == ba.imports

    def test_set_only_grows(self, parser: ImportsParser, tmp_path: Path) -> None:
        sizes = []
        for i, imports in enumerate([("fmt",), ("os", "fmt"), ("fmt",), ()]):
            parser.parse_imports(write_go_file(tmp_path, f"f{i}.go", *imports))
            sizes.append(len(parser))
        assert sizes == [1, 2, 2, 2]

    def test_snapshot_is_detached(self, parser: ImportsParser, tmp_path: Path) -> None:
        snapshot = parser.imports
        parser.parse_imports(write_go_file(tmp_path, "main.go", "fmt"))
        assert snapshot == frozenset()
        assert "fmt" in parser

    def test_returns_only_this_files_imports(self, parser: ImportsParser, tmp_path: Path) -> None:
        parser.parse_imports(write_go_file(tmp_path, "a.go", "fmt"))
        assert parser.parse_imports(write_go_file(tmp_path, "b.go", "os")) == frozenset({"os"})


class TestWithSourceParserPort:
    """ImportsParser against a stub parser."""

    def test_decodes_and_canonicalizes(self) -> None:
        stub = StubSourceParser({"main.go": (spec('"fmt"'), spec('"./a/../b"'), spec("`net/http`"))})
        parser = ImportsParser(FileSet(), make_module("example.com/app"), source_parser=stub)

        assert parser.parse_imports("main.go") == frozenset({"fmt", "example.com/app/b", "net/http"})
        assert stub.calls == [Path("main.go")]

    def test_decode_failure_is_fault_and_inserts_nothing(self) -> None:
        stub = StubSourceParser({"main.go": (spec('"fmt"'), spec(r'"\q"'))})
        parser = ImportsParser(FileSet(), make_module(), source_parser=stub)

        with pytest.raises(LiteralDecodeFault):
            parser.parse_imports("main.go")
        assert len(parser) == 0

    def test_non_string_token_is_fault(self) -> None:
        bad = ImportSpec(path=Token(kind=TokenKind.IDENT, text="fmt", pos=1), name=None, location=make_location())
        parser = ImportsParser(FileSet(), make_module(), source_parser=StubSourceParser({"main.go": (bad,)}))

        with pytest.raises(LiteralDecodeFault, match="not a string literal"):
            parser.parse_imports("main.go")

    def test_parsing_error_propagates_unchanged(self) -> None:
        error = ParsingError(Path("main.go"), "boom")

        class FailingParser(SourceParserPort):
            def parse_imports(self, path: Path) -> tuple[ImportSpec, ...]:
                raise error

        parser = ImportsParser(FileSet(), make_module(), source_parser=FailingParser())
        with pytest.raises(ParsingError) as exc_info:
            parser.parse_imports("main.go")
        assert exc_info.value is error


class TestParseDir:
    """Tests for ImportsParser.parse_dir()."""

    def test_union_of_package_files(self, parser: ImportsParser, tmp_path: Path) -> None:
        write_go_file(tmp_path, "a.go", "fmt")
        write_go_file(tmp_path, "b.gop", "os")
        write_go_file(tmp_path, "_skip.go", "unsafe")
        write_go_file(tmp_path, ".skip.go", "unsafe")
        write_go_file(tmp_path / "sub", "c.go", "io")
        write_source(tmp_path, "notes.txt", "not go")

        assert parser.parse_dir(tmp_path) == frozenset({"fmt", "os"})
        assert parser.imports == frozenset({"fmt", "os"})

    def test_extensions(self, parser: ImportsParser, tmp_path: Path) -> None:
        write_go_file(tmp_path, "a.go", "fmt")
        write_go_file(tmp_path, "b.gop", "os")
        assert parser.parse_dir(tmp_path, extensions=(".gop",)) == frozenset({"os"})

    def test_stops_at_first_failure(self, parser: ImportsParser, tmp_path: Path) -> None:
        write_go_file(tmp_path, "a.go", "fmt")
        write_source(tmp_path, "b.go", "package main\nimport 1\n")
        write_go_file(tmp_path, "c.go", "os")

        with pytest.raises(HeaderSyntaxError):
            parser.parse_dir(tmp_path)
        assert parser.imports == frozenset({"fmt"})

    def test_not_a_directory(self, parser: ImportsParser, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="must be a directory"):
            parser.parse_dir(tmp_path / "absent")


class TestMergeImports:
    """Tests for merge_imports()."""

    def test_union(self, tmp_path: Path) -> None:
        first = ImportsParser(FileSet(), make_module())
        second = ImportsParser(FileSet(), make_module())
        first.parse_imports(write_go_file(tmp_path, "a.go", "fmt", "os"))
        second.parse_imports(write_go_file(tmp_path, "b.go", "os", "io"))

        assert merge_imports(first, second) == frozenset({"fmt", "os", "io"})

    def test_no_parsers(self) -> None:
        assert merge_imports() == frozenset()
