from .backend import FilesystemBackend, LocalBackend
from .errors import (
    AmbiguousPathKindWarning,
    IncompatiblePathsError,
    NoParentError,
    PathError,
    PathParseError,
    PathStructureError,
)
from .path import AbstractPath, JoinPolicy
from .pathtype import PathType
from .posix import PosixPath
from .registry import get_registry, host_kind, p, Path, PathKindRegistry, register, try_path
from .semantic_pathtype import SemanticPathType
from .status import Status
from .unc import UNCPath
from .windows import WindowsPath

__all__ = [
    "AbstractPath",
    "AmbiguousPathKindWarning",
    "FilesystemBackend",
    "get_registry",
    "host_kind",
    "IncompatiblePathsError",
    "JoinPolicy",
    "LocalBackend",
    "NoParentError",
    "p",
    "Path",
    "PathError",
    "PathKindRegistry",
    "PathParseError",
    "PathStructureError",
    "PathType",
    "PosixPath",
    "register",
    "SemanticPathType",
    "Status",
    "try_path",
    "UNCPath",
    "WindowsPath",
]
