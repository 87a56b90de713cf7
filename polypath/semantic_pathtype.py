from collections.abc import Iterable
from enum import Enum
from typing import Protocol, runtime_checkable


class SemanticPathType(Enum):
    """An enumeration of semantic path types: what a path *means*, regardless of what exists on disk."""

    FILE = "file"
    DIRECTORY = "directory"


def identify_semantic_path_type(path: str, separators: Iterable[str] = ("/",)) -> SemanticPathType:
    """Interpret the semantic meaning of the given raw path string.

    >>> identify_semantic_path_type("foo/bar")
    SemanticPathType.FILE
    >>> identify_semantic_path_type("foo/bar/")
    SemanticPathType.DIRECTORY

    :param path: The path string to interpret.
    :param separators: The separators recognized by the path kind doing the interpreting.
    :returns: The interpreted semantic path type.
    """
    if path in ("", ".", ".."):
        return SemanticPathType.DIRECTORY

    for sep in separators:
        if path.endswith(sep) or path.endswith(sep + ".") or path.endswith(sep + ".."):
            return SemanticPathType.DIRECTORY

    return SemanticPathType.FILE


@runtime_checkable
class SemanticPathLike(Protocol):
    """A protocol class for values that know their own semantic path type."""

    def __semantic_path_type__(self) -> SemanticPathType: ...
