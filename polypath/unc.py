import re
from urllib.parse import quote

from .backend import LocalBackend
from .config import is_windows_host
from .errors import PathParseError
from .path import AbstractPath
from .segments import split_segments
from .semantic_pathtype import identify_semantic_path_type, SemanticPathType

_SHARE_PATTERN = re.compile(r"\\\\([^\\]+)\\([^\\]+)(.*)", re.DOTALL)


class UNCPath(AbstractPath):
    r"""A network path of the form "\\server\share\...", case-insensitive.

    The "\\server\share" prefix is the drive and the backslash after it is the root:
    >>> UNCPath("//fileserver/public/reports/q1.xlsx").drive
    '\\\\fileserver\\public'

    Text without the "\\" prefix is rejected, though bare relative segments can still be joined onto a UNC path. A
    share root has no parent, and asking for one raises :py:exc:`polypath.NoParentError`.
    """

    separator = "\\"
    alt_separators = ("/",)
    case_sensitive = False
    strict_parent = True
    backend = LocalBackend()

    @classmethod
    def recognize(cls, raw: str, *, force: bool = False) -> bool:
        return (force or is_windows_host()) and raw.startswith(("\\\\", "//"))

    @classmethod
    def _split(cls, raw: str) -> tuple[str, str, tuple[str, ...]]:
        text = raw.replace("/", "\\")
        if text.startswith(("\\\\?\\", "\\\\.\\")):
            raise PathParseError(f"{raw!r} is a device or long path, which is not supported")

        match = _SHARE_PATTERN.fullmatch(text)
        if match is None:
            raise PathParseError(f"{raw!r} is not formatted as \\\\server\\share")

        server, share, rest = match.groups()
        return f"\\\\{server}\\{share}", "\\", split_segments(rest, "\\")

    @classmethod
    def _parse_piece(cls, raw: str) -> "UNCPath":
        text = raw.replace("/", "\\")
        if text.startswith("\\"):
            return cls.parse(raw)

        segments = split_segments(text, "\\")
        semantics = identify_semantic_path_type(raw, cls._separators()) if segments else SemanticPathType.DIRECTORY
        return cls._from_parts("", "", segments, semantic_path_type=semantics)

    def __fspath__(self) -> str:
        return self.to_text()

    def _uri_path(self) -> str:
        return quote(self.to_text()[2:].replace("\\", "/"))

    @classmethod
    def _from_uri_path(cls, path: str) -> "UNCPath":
        return cls.parse("//" + path.lstrip("/"))
