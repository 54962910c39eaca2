from __future__ import annotations

from pathlib import Path

from jccs.utils import safe_relpath


def test_safe_relpath_returns_relative_path_when_under_root(tmp_path: Path) -> None:
    path = tmp_path / "src" / "Example.java"
    assert safe_relpath(path, tmp_path) == "src/Example.java"


def test_safe_relpath_falls_back_when_not_under_root(tmp_path: Path) -> None:
    assert safe_relpath(Path("foo/Bar.java"), tmp_path) == "foo/Bar.java"


def test_safe_relpath_uses_file_name_for_file_root(tmp_path: Path) -> None:
    path = tmp_path / "Only.java"
    path.write_text("class Only {}\n", encoding="utf-8")
    assert safe_relpath(path, path) == "Only.java"


def test_safe_relpath_handles_resolve_oserror(tmp_path: Path, monkeypatch) -> None:
    path = tmp_path / "src" / "Example.java"

    def _boom(self: Path, strict: bool = False) -> Path:
        raise OSError("boom")

    monkeypatch.setattr(type(tmp_path), "resolve", _boom)
    assert safe_relpath(path, tmp_path) == "src/Example.java"
