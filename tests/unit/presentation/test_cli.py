"""Tests for presentation/cli.py."""

import json
import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from gopdeps.presentation.cli import EXIT_ERROR, EXIT_FILE_FAILURES, EXIT_OK, build_config, main, parse_args
from tests.factories import write_go_file, write_go_mod, write_source


@pytest.fixture
def module_root(tmp_path: Path) -> Path:
    write_go_mod(tmp_path, "example.com/app")
    write_go_file(tmp_path, "main.go", "fmt", "./util", "github.com/x/y")
    write_go_file(tmp_path, "main_test.go", "testing")
    write_go_file(tmp_path / "util", "util.go", "strings")
    return tmp_path


@pytest.fixture(autouse=True)
def _isolate_logging(restore_root_logger: logging.Logger, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GOPDEPS_LOG_LEVEL", raising=False)


class TestParseArgs:
    """Tests for argument parsing."""

    def test_defaults(self) -> None:
        parsed = parse_args([])
        assert parsed.root == "."
        assert parsed.format == "text"
        assert parsed.output is None
        assert parsed.log_level is None

    def test_log_level_case_insensitive(self) -> None:
        assert parse_args(["--log-level", "debug"]).log_level == "DEBUG"

    def test_unknown_format_exits(self) -> None:
        with pytest.raises(SystemExit):
            parse_args(["-f", "yaml"])


class TestBuildConfig:
    """Tests for ScanConfig construction from flags."""

    def test_defaults(self) -> None:
        config = build_config(parse_args([]))
        assert config.include_tests
        assert config.recursive
        assert not config.fail_fast

    def test_extensions_get_dot(self) -> None:
        config = build_config(parse_args(["--ext", "gop", ".go"]))
        assert config.extensions == frozenset({".gop", ".go"})

    def test_exclude_dirs_extend_defaults(self) -> None:
        config = build_config(parse_args(["--exclude-dir", "third_party"]))
        assert {"vendor", "third_party"} <= config.exclude_dirs

    def test_flags(self) -> None:
        config = build_config(parse_args(["--no-recursive", "--no-tests", "--fail-fast"]))
        assert not config.recursive
        assert not config.include_tests
        assert config.fail_fast


class TestMain:
    """Tests for main() output and exit codes."""

    def test_text_output(self, module_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(module_root)]) == EXIT_OK
        assert capsys.readouterr().out.splitlines() == [
            "example.com/app/util",
            "fmt",
            "github.com/x/y",
            "strings",
            "testing",
        ]

    def test_no_tests(self, module_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main([str(module_root), "--no-tests"])
        assert "testing" not in capsys.readouterr().out

    def test_group_by_kind(self, module_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main([str(module_root), "--group-by-kind"])
        out = capsys.readouterr().out
        assert out.startswith("# standard\n")
        assert "# module\nexample.com/app/util\n" in out

    def test_json_output(self, module_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(module_root), "-f", "json"]) == EXIT_OK
        data = json.loads(capsys.readouterr().out)
        assert data["module"]["path"] == "example.com/app"
        assert data["summary"]["passed"] is True

    def test_console_output(self, module_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(module_root), "-f", "console"]) == EXIT_OK
        assert "example.com/app/util" in capsys.readouterr().out

    def test_output_file(self, module_root: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        target = tmp_path / "deps.txt"
        assert main([str(module_root), "-o", str(target)]) == EXIT_OK
        assert capsys.readouterr().out == ""
        assert target.read_text(encoding="utf-8").endswith("testing\n")

    def test_explicit_module(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        write_go_file(tmp_path, "main.go", "./x")
        assert main([str(tmp_path), "--module", "example.com/given"]) == EXIT_OK
        assert capsys.readouterr().out.strip() == "example.com/given/x"

    def test_invalid_module_flag(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(tmp_path), "--module", "example.com/"]) == EXIT_ERROR
        assert "Error:" in capsys.readouterr().err

    def test_root_not_directory(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(tmp_path / "absent")]) == EXIT_ERROR
        assert "is not a directory" in capsys.readouterr().err

    def test_no_module(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        write_go_file(tmp_path, "main.go", "fmt")
        assert main([str(tmp_path)]) == EXIT_ERROR
        assert "Cannot resolve module" in capsys.readouterr().err

    def test_file_failures(self, module_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
        write_source(module_root, "broken.go", "package main\nimport\n")
        assert main([str(module_root)]) == EXIT_FILE_FAILURES
        captured = capsys.readouterr()
        assert "fmt" in captured.out
        assert "1 file(s) failed to parse" in captured.err

    def test_unreadable_directory_is_skipped(
        self,
        module_root: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        denied = module_root / "util"
        real_iterdir = Path.iterdir

        def iterdir(self: Path) -> Iterator[Path]:
            if self == denied:
                raise PermissionError(13, "Permission denied", str(self))
            return real_iterdir(self)

        monkeypatch.setattr(Path, "iterdir", iterdir)
        assert main([str(module_root)]) == EXIT_OK
        captured = capsys.readouterr()
        assert "strings" not in captured.out.splitlines()
        assert "fmt" in captured.out
        assert "skipping unreadable directory" in captured.err

    def test_fail_fast(self, module_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
        write_source(module_root, "broken.go", "package main\nimport\n")
        assert main([str(module_root), "--fail-fast"]) == EXIT_ERROR
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "missing import path" in captured.err

    def test_log_level_flag(self, module_root: Path, restore_root_logger: logging.Logger) -> None:
        main([str(module_root), "--log-level", "INFO"])
        assert restore_root_logger.level == logging.INFO

    def test_log_level_env(
        self,
        module_root: Path,
        restore_root_logger: logging.Logger,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("GOPDEPS_LOG_LEVEL", "debug")
        main([str(module_root)])
        assert restore_root_logger.level == logging.DEBUG
