"""Unit tests for module table column sizing."""

from buildreport.core import Module
from buildreport.reports import compute_module_columns

# pylint: disable=missing-function-docstring

MAIN = Module(path="example.com/app", version="v1.2.0", checksum="h1:main=")


class TestModuleColumnWidths:
    """Widths are the maximum over every value shown in a column."""

    def test_main_module_only(self) -> None:
        cols = compute_module_columns(MAIN, [], show_checksum=True)
        assert cols.widths == (15, 6, 8)

    def test_longer_dependency_widens_columns(self) -> None:
        dep = Module(path="example.com/a/much/longer/path", version="v10.20.30", checksum="h1:x")
        cols = compute_module_columns(MAIN, [dep], show_checksum=True)
        assert cols.widths == (30, 9, 8)

    def test_replacement_path_counts_indent(self) -> None:
        repl = Module(path="fork.org/replacement/lib", version="v1.0.0")
        dep = Module(path="a.org/lib", version="v1.0.0", replacement=repl)
        cols = compute_module_columns(MAIN, [dep], show_checksum=False)
        assert cols.path == 27

    def test_replacement_version_and_checksum_are_measured(self) -> None:
        repl = Module(path="b", version="v1.0.0-pre.20240101", checksum="h1:longchecksum=")
        dep = Module(path="a", version="v1", replacement=repl)
        cols = compute_module_columns(MAIN, [dep], show_checksum=True)
        assert (cols.version, cols.checksum) == (19, 16)

    def test_order_does_not_matter(self) -> None:
        deps = [Module(path="x" * n, version="v1") for n in (3, 20, 7)]
        forward = compute_module_columns(MAIN, deps, show_checksum=False)
        backward = compute_module_columns(MAIN, list(reversed(deps)), show_checksum=False)
        assert forward == backward


class TestChecksumColumn:
    """The checksum column is present only when checksums are shown."""

    def test_absent_when_disabled(self) -> None:
        cols = compute_module_columns(MAIN, [], show_checksum=False)
        assert cols.checksum is None

    def test_headers_without_checksum(self) -> None:
        cols = compute_module_columns(MAIN, [], show_checksum=False)
        assert cols.headers == ("Path", "Version")

    def test_headers_with_checksum(self) -> None:
        cols = compute_module_columns(MAIN, [], show_checksum=True)
        assert cols.headers == ("Path", "Version", "Checksum")

    def test_widths_match_headers(self) -> None:
        cols = compute_module_columns(MAIN, [], show_checksum=False)
        assert len(cols.widths) == len(cols.headers)
