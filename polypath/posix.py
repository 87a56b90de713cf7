from .backend import LocalBackend
from .config import is_posix_host
from .path import AbstractPath
from .segments import split_segments


class PosixPath(AbstractPath):
    """A path on a POSIX filesystem: "/" as both the separator and the root, case-sensitive.

    >>> PosixPath("/home//user/./docs/")
    p"/home/user/docs"

    Unforced registry dispatch only selects this kind on POSIX hosts; :py:meth:`parse` works everywhere.
    """

    separator = "/"
    case_sensitive = True
    backend = LocalBackend()

    @classmethod
    def recognize(cls, raw: str, *, force: bool = False) -> bool:
        return force or is_posix_host()

    @classmethod
    def _split(cls, raw: str) -> tuple[str, str, tuple[str, ...]]:
        root = "/" if raw.startswith("/") else ""
        return "", root, split_segments(raw, "/")

    def __fspath__(self) -> str:
        return self.to_text()
