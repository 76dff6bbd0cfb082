"""Tests for the collector module."""

from pathlib import Path

import pytest

from pwaforge.collector import CollectorError, collect_directory, copy_file
from pwaforge.hashing import content_hash
from pwaforge.models import Compilation


@pytest.fixture
def compilation() -> Compilation:
    return Compilation()


class TestCollectDirectory:
    """Tests for collect_directory()."""

    def test_hashes_matching_files(self, tmp_path: Path, compilation: Compilation) -> None:
        """Matching files are renamed with their content hash."""
        (tmp_path / "app.js").write_text("console.log(1)")

        assets = collect_directory(compilation, tmp_path, [".js"], "javascripts")

        assert len(assets) == 1
        assert assets[0].name == f"javascripts/app.{content_hash(b'console.log(1)')}.js"
        assert assets[0].source == b"console.log(1)"
        assert assets[0].size == len(b"console.log(1)")

    def test_skips_other_extensions(self, tmp_path: Path, compilation: Compilation) -> None:
        """Files outside the filter are passed over."""
        (tmp_path / "app.js").write_text("a")
        (tmp_path / "app.coffee").write_text("b")
        (tmp_path / "README").write_text("c")

        assets = collect_directory(compilation, tmp_path, [".js"], "javascripts")

        assert [a.name.split(".")[0] for a in assets] == ["javascripts/app"]
        assert len(compilation.file_dependencies) == 1

    def test_extension_match_is_case_insensitive(self, tmp_path: Path, compilation: Compilation) -> None:
        """Upper-case extensions still match and keep their case."""
        (tmp_path / "logo.PNG").write_bytes(b"\x89PNG")

        assets = collect_directory(compilation, tmp_path, [".png"], "images")

        assert assets[0].name.endswith(".PNG")

    def test_is_not_recursive(self, tmp_path: Path, compilation: Compilation) -> None:
        """Sub-directories are ignored."""
        (tmp_path / "vendor").mkdir()
        (tmp_path / "vendor" / "lib.js").write_text("x")

        assert collect_directory(compilation, tmp_path, [".js"], "javascripts") == []

    def test_registers_dependencies(self, tmp_path: Path, compilation: Compilation) -> None:
        """Every file read becomes an absolute build dependency."""
        (tmp_path / "a.css").write_text("a{}")
        (tmp_path / "b.css").write_text("b{}")

        collect_directory(compilation, tmp_path, [".css"], "stylesheets")

        assert compilation.file_dependencies == {
            str((tmp_path / "a.css").resolve()),
            str((tmp_path / "b.css").resolve()),
        }

    def test_missing_required_directory(self, tmp_path: Path, compilation: Compilation) -> None:
        """A missing required directory is an error."""
        with pytest.raises(CollectorError, match="Source directory not found"):
            collect_directory(compilation, tmp_path / "javascripts", [".js"], "javascripts")

    def test_missing_optional_directory(self, tmp_path: Path, compilation: Compilation) -> None:
        """A missing optional directory yields no assets."""
        assert collect_directory(compilation, tmp_path / "images", [".png"], "images", optional=True) == []

    def test_hash_stable_across_runs(self, tmp_path: Path) -> None:
        """Unchanged input gives the same names in separate builds."""
        (tmp_path / "app.js").write_text("console.log(1)")

        first = collect_directory(Compilation(), tmp_path, [".js"], "javascripts")
        second = collect_directory(Compilation(), tmp_path, [".js"], "javascripts")

        assert [a.name for a in first] == [a.name for a in second]


class TestCopyFile:
    """Tests for copy_file()."""

    def test_copies_without_renaming(self, tmp_path: Path, compilation: Compilation) -> None:
        """The output keeps the requested name."""
        (tmp_path / "favicon.ico").write_bytes(b"\x00\x00\x01\x00")

        asset = copy_file(compilation, tmp_path / "favicon.ico", "favicon.ico")

        assert asset is not None
        assert asset.name == "favicon.ico"
        assert asset.source == b"\x00\x00\x01\x00"
        assert str((tmp_path / "favicon.ico").resolve()) in compilation.file_dependencies

    def test_absent_optional_file(self, tmp_path: Path, compilation: Compilation) -> None:
        """An absent optional file returns None."""
        assert copy_file(compilation, tmp_path / "favicon.ico", "favicon.ico") is None
        assert compilation.file_dependencies == set()

    def test_absent_required_file(self, tmp_path: Path, compilation: Compilation) -> None:
        """An absent required file is an error."""
        with pytest.raises(CollectorError, match="Source file not found"):
            copy_file(compilation, tmp_path / "robots.txt", "robots.txt", optional=False)
