from collections.abc import Iterator
import os
import pathlib

import pytest

import polypath
from polypath import PosixPath, SemanticPathType, WindowsPath
from polypath.registry import PathKindRegistry


class StubBackend:
    """A backend that reports fixed cwd and home directories and performs no I/O."""

    def __init__(self, cwd: str, home: str) -> None:
        self._cwd = cwd
        self._home = home

    def cwd(self, kind):
        return kind.parse(self._cwd)._with_semantics(SemanticPathType.DIRECTORY)

    def home(self, kind):
        return kind.parse(self._home)._with_semantics(SemanticPathType.DIRECTORY)


@pytest.fixture(scope="function")
def posix_env(monkeypatch: pytest.MonkeyPatch) -> StubBackend:
    backend = StubBackend(cwd="/foo/bar", home="/home/user")
    monkeypatch.setattr(PosixPath, "backend", backend)
    return backend


@pytest.fixture(scope="function")
def windows_env(monkeypatch: pytest.MonkeyPatch) -> StubBackend:
    backend = StubBackend(cwd="C:\\Users\\me\\project", home="C:\\Users\\me")
    monkeypatch.setattr(WindowsPath, "backend", backend)
    return backend


@pytest.fixture(scope="function")
def registry(monkeypatch: pytest.MonkeyPatch) -> PathKindRegistry:
    """A private copy of the default registry, installed as the process-wide one for the duration of a test."""
    fresh = polypath.get_registry().copy()
    monkeypatch.setattr(polypath.registry, "_registry", fresh)
    return fresh


@pytest.fixture(scope="function")
def mock_fs(tmp_path: pathlib.Path) -> Iterator[PosixPath]:
    root = tmp_path / "root"
    root.mkdir()

    (root / "a").mkdir()
    (root / "a" / "b").mkdir()
    (root / "a" / "b" / "file.txt").write_text("contents of b/file.txt")

    (root / "a" / "c").mkdir()
    (root / "a" / "c" / "file.txt").write_text("contents of c/file.txt")
    (root / "a" / "c" / "file2.log").write_text("contents of c/file2.log")
    (root / "a" / "c" / "d").mkdir()
    (root / "a" / "c" / "d" / "image.png").touch()

    (root / ".hidden-file").write_text("contents of .hidden-file")
    (root / "file.ext1.ext2.ext3").touch()

    os.symlink(root / "a" / "b" / "file.txt", root / "symlink-to-file")
    os.symlink(root / "a", root / "symlink-to-dir")
    os.symlink(root / "nonexistent-target", root / "broken-symlink")

    yield PosixPath.parse(str(root))._with_semantics(SemanticPathType.DIRECTORY)
