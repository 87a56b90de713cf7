import pytest

from polypath import IncompatiblePathsError, JoinPolicy, PosixPath, SemanticPathType, WindowsPath


def test_join_strings() -> None:
    assert str(PosixPath("/etc").join("app", "conf.yml")) == "/etc/app/conf.yml"


def test_join_operator() -> None:
    assert PosixPath("/foo/bar") / "baz.txt" == PosixPath("/foo/bar/baz.txt")
    assert PosixPath("/foo") / PosixPath("bar") / "baz" == PosixPath("/foo/bar/baz")


def test_reverse_join_operator() -> None:
    assert "/foo" / PosixPath("bar") == PosixPath("/foo/bar")


def test_join_operator_with_unsupported_type() -> None:
    with pytest.raises(TypeError):
        PosixPath("/foo") / 3  # type: ignore[operator]


def test_join_without_pieces() -> None:
    p = PosixPath("/foo")
    assert p.join() is p


def test_join_parses_multi_segment_strings() -> None:
    assert PosixPath("/a").join("b/c").segments == ("a", "b", "c")


def test_join_keeps_parent_segments() -> None:
    assert PosixPath("/a/b").join("../c").segments == ("a", "b", "..", "c")


def test_join_onto_current_directory() -> None:
    assert PosixPath(".").join("a") == PosixPath("a")
    assert PosixPath("a").join(".") == PosixPath("a")


def test_join_onto_empty_path() -> None:
    assert PosixPath().join("a", "b") == PosixPath("a/b")


def test_join_semantics_follow_last_piece() -> None:
    assert PosixPath("/a/").join("b").semantic_path_type is SemanticPathType.FILE
    assert PosixPath("/a").join("b/").semantic_path_type is SemanticPathType.DIRECTORY


def test_join_absolute_piece_resets_by_default() -> None:
    assert PosixPath("/etc").join("/var", "log") == PosixPath("/var/log")


def test_join_absolute_piece_append_policy() -> None:
    assert PosixPath("/etc").join("/var", "log", policy=JoinPolicy.APPEND) == PosixPath("/etc/var/log")


def test_join_policy_class_attribute(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(PosixPath, "join_policy", JoinPolicy.APPEND)
    assert PosixPath("/etc") / "/var" == PosixPath("/etc/var")


def test_join_different_kinds() -> None:
    with pytest.raises(IncompatiblePathsError):
        PosixPath("/etc").join(WindowsPath("foo"))


def test_join_result_kind_is_prefix_kind() -> None:
    assert isinstance(WindowsPath("C:\\a").join("b/c"), WindowsPath)


def test_join_windows_drive_piece_resets() -> None:
    assert WindowsPath("C:\\a").join("D:\\b") == WindowsPath("D:\\b")


def test_join_windows_root_piece_keeps_drive() -> None:
    assert WindowsPath("C:\\a").join("\\b") == WindowsPath("C:\\b")


def test_join_windows_drive_piece_append_policy() -> None:
    assert WindowsPath("C:\\a").join("D:\\b", policy=JoinPolicy.APPEND) == WindowsPath("C:\\a\\b")
