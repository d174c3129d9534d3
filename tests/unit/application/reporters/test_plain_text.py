"""Tests for application/reporters/plain_text.py."""

from gopdeps.application.reporters.plain_text import PlainTextReporter
from gopdeps.domain.model.scan_result import ScanResult
from tests.factories import make_module, make_scan_result


class TestPlainTextReporter:
    """Tests for PlainTextReporter."""

    def test_sorted_lines(self) -> None:
        result = make_scan_result({"a.go": ("os", "fmt", "github.com/x/y")})
        assert PlainTextReporter().report(result) == "fmt\ngithub.com/x/y\nos"

    def test_empty(self) -> None:
        assert PlainTextReporter().report(ScanResult.empty(make_module())) == ""

    def test_failures_not_in_output(self) -> None:
        result = make_scan_result({"a.go": ("fmt",)}, failures=(("b.go", "boom"),))
        assert PlainTextReporter().report(result) == "fmt"

    def test_group_by_kind(self) -> None:
        result = make_scan_result(
            {"a.go": ("os", "fmt", "github.com/x/y", "example.com/app/util")},
        )
        output = PlainTextReporter(group_by_kind=True).report(result)
        assert output == (
            "# standard\nfmt\nos\n\n"
            "# module\nexample.com/app/util\n\n"
            "# external\ngithub.com/x/y"
        )

    def test_group_by_kind_skips_empty_groups(self) -> None:
        result = make_scan_result({"a.go": ("fmt",)})
        assert PlainTextReporter(group_by_kind=True).report(result) == "# standard\nfmt"
