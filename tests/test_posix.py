import os

import pytest

from polypath import NoParentError, PathStructureError, PosixPath, SemanticPathType


@pytest.mark.parametrize(
    "raw, root, segments",
    [
        ("/", "/", ()),
        ("//", "/", ()),
        ("/etc/app", "/", ("etc", "app")),
        ("/etc//app/", "/", ("etc", "app")),
        ("etc/./app", "", ("etc", "app")),
        ("../etc", "", ("..", "etc")),
        ("", "", (".",)),
        (".", "", (".",)),
        ("./", "", (".",)),
    ],
)
def test_parse(raw: str, root: str, segments: tuple[str, ...]) -> None:
    p = PosixPath.parse(raw)
    assert p.root == root
    assert p.drive == ""
    assert p.segments == segments


def test_root_is_absolute_with_empty_segments() -> None:
    p = PosixPath.parse("/")
    assert p.is_absolute()
    assert p.segments == ()
    assert p.semantic_path_type is SemanticPathType.DIRECTORY


@pytest.mark.parametrize("raw", ["/etc/app/conf.yml", "a/b", "/", ".", "../x", "~/.config"])
def test_round_trip(raw: str) -> None:
    p = PosixPath.parse(raw)
    assert PosixPath.parse(p.to_text()) == p


def test_str_and_repr() -> None:
    p = PosixPath("/etc/app/")
    assert str(p) == "/etc/app"
    assert repr(p) == 'p"/etc/app"'


def test_fspath() -> None:
    assert os.fspath(PosixPath("/etc/app")) == "/etc/app"


def test_constructor_joins_pieces() -> None:
    assert PosixPath("/etc", "app", "conf.yml") == PosixPath.parse("/etc/app/conf.yml")


def test_empty_constructor() -> None:
    p = PosixPath()
    assert p.is_empty()
    assert p.to_text() == ""
    assert p != PosixPath(".")


def test_from_segments() -> None:
    p = PosixPath.from_segments(("etc", "app"), root="/")
    assert p == PosixPath("/etc/app")
    assert p.semantic_path_type is SemanticPathType.FILE


@pytest.mark.parametrize("segments", [("a", ""), ("a/b",)])
def test_from_segments_rejects_invalid_segments(segments: tuple[str, ...]) -> None:
    with pytest.raises(PathStructureError):
        PosixPath.from_segments(segments)


def test_semantic_path_type() -> None:
    assert PosixPath("/etc/app").semantic_path_type is SemanticPathType.FILE
    assert PosixPath("/etc/app/").semantic_path_type is SemanticPathType.DIRECTORY
    assert PosixPath("/etc/app/..").semantic_path_type is SemanticPathType.DIRECTORY


def test_semantic_path_type_ignored_by_equality() -> None:
    assert PosixPath("/etc/app") == PosixPath("/etc/app/")
    assert hash(PosixPath("/etc/app")) == hash(PosixPath("/etc/app/"))


def test_case_sensitive_equality() -> None:
    assert PosixPath("/Etc") != PosixPath("/etc")


def test_absolute_and_relative_differ() -> None:
    assert PosixPath("/etc") != PosixPath("etc")


def test_ordering() -> None:
    paths = [PosixPath("/b"), PosixPath("/a/c"), PosixPath("/a"), PosixPath("/a/b")]
    assert sorted(paths) == [PosixPath("/a"), PosixPath("/a/b"), PosixPath("/a/c"), PosixPath("/b")]


def test_ordering_is_consistent_with_equality() -> None:
    a, b = PosixPath("etc"), PosixPath("/etc")
    assert a != b
    assert (a < b) != (b < a)


def test_comparison_with_other_types() -> None:
    assert PosixPath("/a") != "/a"
    assert PosixPath("/a").__eq__(3) is NotImplemented
    assert PosixPath("/a").__lt__("/b") is NotImplemented
    with pytest.raises(TypeError):
        PosixPath("/a") < "/b"


def test_parent_of_home_relative() -> None:
    p = PosixPath.parse("~/.config/app")
    assert p.parent == PosixPath("~/.config")
    assert p.parent.semantic_path_type is SemanticPathType.DIRECTORY


def test_parents_are_root_first() -> None:
    assert PosixPath("/a/b/c").parents == (PosixPath("/"), PosixPath("/a"), PosixPath("/a/b"))
    assert PosixPath("a/b/c").parents == (PosixPath("a"), PosixPath("a/b"))


@pytest.mark.parametrize(
    "raw, parent",
    [
        ("/", "/"),
        (".", "."),
        ("foo", "."),
        ("/foo", "/"),
    ],
)
def test_parent_without_parent_component(raw: str, parent: str) -> None:
    assert PosixPath(raw).parent == PosixPath(parent)


def test_parent_of_root_does_not_raise() -> None:
    try:
        PosixPath("/").parent
    except NoParentError:
        pytest.fail("the root of a POSIX path is its own parent")


def test_has_parent() -> None:
    assert PosixPath("/a").has_parent()
    assert PosixPath("a/b").has_parent()
    assert not PosixPath("a").has_parent()
    assert not PosixPath("/").has_parent()


def test_descendant_and_ascendant() -> None:
    p = PosixPath("/etc/app/conf.yml")
    assert p.is_descendant("/etc")
    assert p.is_descendant(PosixPath("/"))
    assert p.is_descendant(p)
    assert not p.is_descendant("/var")
    assert PosixPath("/etc").is_ascendant(p)
    assert p in PosixPath("/etc/")
    assert PosixPath("/etc") not in p


def test_names_of_home_relative() -> None:
    p = PosixPath.parse("~/.config/app")
    assert p.basename == "app"
    assert p.filename == "app"
    assert p.extension == ""
    assert p.extensions == []


@pytest.mark.parametrize(
    "raw, filename, extension, extensions",
    [
        ("/foo/bar/baz.tar.gz", "baz.tar", "gz", ["tar", "gz"]),
        ("/foo/bar/baz.txt", "baz", "txt", ["txt"]),
        ("/foo/bar/baz", "baz", "", []),
        ("/foo/.bashrc", "", "bashrc", ["bashrc"]),
        ("/foo/.config.bak", ".config", "bak", ["config", "bak"]),
        ("/foo/..", "..", "", []),
        ("/foo/trailing.", "trailing", "", [""]),
        ("/", "", "", []),
    ],
)
def test_name_parts(raw: str, filename: str, extension: str, extensions: list[str]) -> None:
    p = PosixPath(raw)
    assert p.filename == filename
    assert p.extension == extension
    assert p.extensions == extensions


def test_splitext() -> None:
    assert PosixPath("/foo/bar/baz.tar.gz").splitext() == (PosixPath("/foo/bar/baz.tar"), ".gz")
    assert PosixPath("/foo/bar/baz").splitext() == (PosixPath("/foo/bar/baz"), "")
    assert PosixPath("foo.").splitext() == (PosixPath("foo"), ".")


def test_splitext_dotfile() -> None:
    stem, extension = PosixPath("/home/user/.bashrc").splitext()
    assert stem == PosixPath("/home/user")
    assert extension == ".bashrc"


def test_with_extension_dotfile() -> None:
    assert PosixPath("/a/.bashrc").with_extension("bak") == PosixPath("/a/.bak")


def test_with_name() -> None:
    assert PosixPath("/path/to/file.txt").with_name("file2.txt") == PosixPath("/path/to/file2.txt")


@pytest.mark.parametrize("raw, name", [("/", "x"), ("a/..", "x"), ("a", "b/c"), ("a", "")])
def test_with_name_invalid(raw: str, name: str) -> None:
    with pytest.raises(PathStructureError):
        PosixPath(raw).with_name(name)


def test_with_extension() -> None:
    assert PosixPath("/a/file.txt").with_extension("jpg") == PosixPath("/a/file.jpg")
    assert PosixPath("/a/file.txt").with_extension(".jpg") == PosixPath("/a/file.jpg")
    assert PosixPath("/a/file").with_extension("md") == PosixPath("/a/file.md")
    assert PosixPath("/a/file.tar.gz").with_extension("") == PosixPath("/a/file.tar")


def test_parts_and_anchor() -> None:
    assert PosixPath("/foo/bar").parts == ("/", "foo", "bar")
    assert PosixPath("foo/bar").parts == ("foo", "bar")
    assert PosixPath("/foo").anchor == "/"


def test_normalize() -> None:
    assert PosixPath("a/b/../c/./d").normalize().segments == ("a", "c", "d")


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("../a/../../b", "../../b"),
        ("a/..", "."),
        ("/../etc", "/etc"),
        ("/..", "/"),
        ("/a/b/../../..", "/"),
    ],
)
def test_normalize_edge_cases(raw: str, expected: str) -> None:
    assert PosixPath(raw).normalize() == PosixPath(expected)


def test_normalize_empty_path() -> None:
    assert PosixPath().normalize().is_empty()


def test_concat() -> None:
    assert PosixPath("foo") * "bar" == PosixPath("foobar")
    assert PosixPath("/a/file") * ".txt" == PosixPath("/a/file.txt")
    assert PosixPath("foo").concat("/", "bar") == PosixPath("foo/bar")


def test_as_uri() -> None:
    assert PosixPath("/foo foo/bar").as_uri() == "file:///foo%20foo/bar"


def test_as_uri_relative_path() -> None:
    with pytest.raises(PathStructureError):
        PosixPath("foo").as_uri()


def test_from_uri() -> None:
    assert PosixPath.from_uri("file:///foo%20foo/bar") == PosixPath("/foo foo/bar")
