import re
from urllib.parse import quote

from .backend import LocalBackend
from .config import is_windows_host
from .errors import PathParseError
from .path import AbstractPath
from .segments import split_segments

_URI_DRIVE_PATTERN = re.compile(r"/[A-Za-z]:")


class WindowsPath(AbstractPath):
    r"""A drive-letter path on Windows: "\" as the separator ("/" accepted), case-insensitive.

    >>> WindowsPath("C:/Users/me/Documents")
    p"C:\Users\me\Documents"
    >>> WindowsPath("C:\\Users\\ME") == WindowsPath("c:\\users\\me")
    True

    A path is absolute if it has either a drive or a root, so the drive-relative "C:foo" and the root-relative
    "\foo" both count as absolute. UNC and long paths ("\\server\share", "\\?\C:\...") are rejected; see
    :py:class:`polypath.UNCPath`.
    """

    separator = "\\"
    alt_separators = ("/",)
    case_sensitive = False
    backend = LocalBackend()

    @classmethod
    def recognize(cls, raw: str, *, force: bool = False) -> bool:
        return (force or is_windows_host()) and not raw.replace("/", "\\").startswith("\\\\")

    @classmethod
    def _split(cls, raw: str) -> tuple[str, str, tuple[str, ...]]:
        text = raw.replace("/", "\\")
        if text.startswith("\\\\"):
            raise PathParseError(f"{raw!r} is a UNC or long path; use UNCPath for \\\\server\\share paths")

        # the drive is everything up to the first ":", provided no separator comes before it
        head, colon, tail = text.partition(":")
        if colon and head and "\\" not in head:
            drive, rest = head + colon, tail
        else:
            drive, rest = "", text

        root = "\\" if rest.startswith("\\") else ""
        return drive, root, split_segments(rest, "\\")

    def is_absolute(self) -> bool:
        return bool(self._drive or self._root)

    def __fspath__(self) -> str:
        return self.to_text()

    def _uri_path(self) -> str:
        rest = quote(self._root.replace("\\", "/") + "/".join(self._segments))
        if self._drive:
            return f"/{self._drive}{rest}"

        return rest

    @classmethod
    def _from_uri_path(cls, path: str) -> "WindowsPath":
        if _URI_DRIVE_PATTERN.match(path):
            path = path[1:]

        return cls.parse(path)
