"""The narrow boundary between path values and a live filesystem.

Path values never perform I/O themselves: every operation that needs a filesystem goes through the
:py:class:`FilesystemBackend` attached to the path's kind. :py:class:`LocalBackend` serves the built-in host kinds by
delegating to :py:mod:`os` and :py:mod:`shutil`. Failures are the standard :py:class:`OSError` family and propagate
unchanged; retry policy belongs to the caller.
"""

from collections.abc import Callable
from contextlib import suppress
from functools import wraps
import logging
import os
import shutil
import sys
from typing import ParamSpec, Protocol, TYPE_CHECKING, TypeVar

from .semantic_pathtype import SemanticPathType
from .status import Status

if TYPE_CHECKING:
    from .path import AbstractPath

logger = logging.getLogger(__name__)

_P = TypeVar("_P", bound="AbstractPath")
_R = TypeVar("_R")
_S = ParamSpec("_S")


def access_error_handler(func: Callable[_S, _R]) -> Callable[_S, _R]:
    """Wrap backend methods so that filesystem failures record which operation failed on which path.

    The original exception object is re-raised: its type, errno and filename are left untouched.
    """

    @wraps(func)
    def wrapper(*args: _S.args, **kwargs: _S.kwargs) -> _R:
        try:
            return func(*args, **kwargs)
        except OSError as e:
            target = args[1] if len(args) > 1 else None
            logger.debug("%s failed for %s: %s", func.__name__, target, e)
            if sys.version_info >= (3, 11):
                e.add_note(f"Failed during {func.__name__} of {target}.")
            raise

    return wrapper


class FilesystemBackend(Protocol):
    """The operations a filesystem must offer so that path values can be resolved against it."""

    def exists(self, path: "AbstractPath") -> bool: ...

    def stat(self, path: "AbstractPath") -> Status: ...

    def lstat(self, path: "AbstractPath") -> Status: ...

    def read_bytes(self, path: "AbstractPath") -> bytes: ...

    def write_bytes(self, path: "AbstractPath", data: bytes, *, append: bool = False) -> int: ...

    def mkdir(self, path: "AbstractPath", *, recursive: bool = False, exist_ok: bool = False) -> None: ...

    def remove(self, path: "AbstractPath", *, recursive: bool = False, force: bool = False) -> None: ...

    def cwd(self, kind: type[_P]) -> _P: ...

    def home(self, kind: type[_P]) -> _P: ...

    def list_entries(self, path: _P) -> list[_P]: ...


class LocalBackend:
    """A filesystem backend for the machine the process runs on."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"

    def exists(self, path: "AbstractPath") -> bool:
        """Return whether the path points to an existing entry, following symlinks."""
        return os.path.exists(path.to_text())

    @access_error_handler
    def stat(self, path: "AbstractPath") -> Status:
        return Status.from_stat_result(os.stat(path.to_text()))

    @access_error_handler
    def lstat(self, path: "AbstractPath") -> Status:
        return Status.from_stat_result(os.lstat(path.to_text()))

    @access_error_handler
    def read_bytes(self, path: "AbstractPath") -> bytes:
        with open(path.to_text(), mode="rb") as f:
            return f.read()

    @access_error_handler
    def write_bytes(self, path: "AbstractPath", data: bytes, *, append: bool = False) -> int:
        """Write `data` to the file, replacing its contents unless `append` is True.

        :returns: The number of bytes written
        """
        with open(path.to_text(), mode="ab" if append else "wb") as f:
            return f.write(data)

    @access_error_handler
    def mkdir(self, path: "AbstractPath", *, recursive: bool = False, exist_ok: bool = False) -> None:
        """Create a directory.

        :param recursive: If True, create missing parent directories as well
        :param exist_ok: If True, an already existing directory is not an error

        :raises FileExistsError: If the path exists and `exist_ok` is False
        :raises FileNotFoundError: If a parent directory is missing and `recursive` is False
        """
        target = path.to_text()

        if recursive:
            os.makedirs(target, exist_ok=exist_ok)
            return

        try:
            os.mkdir(target)
        except FileExistsError:
            if not (exist_ok and os.path.isdir(target)):
                raise

    @access_error_handler
    def remove(self, path: "AbstractPath", *, recursive: bool = False, force: bool = False) -> None:
        """Remove a file, symlink, or directory.

        :param recursive: If True, remove a directory together with its contents
        :param force: If True, a missing path is not an error and failures during recursive removal are ignored

        :raises FileNotFoundError: If the path does not exist and `force` is False
        :raises OSError: If a nonempty directory is removed without `recursive`
        """
        target = path.to_text()

        if os.path.isdir(target) and not os.path.islink(target):
            if recursive:
                shutil.rmtree(target, ignore_errors=force)
            else:
                os.rmdir(target)
        elif force:
            with suppress(FileNotFoundError):
                os.unlink(target)
        else:
            os.unlink(target)

    def cwd(self, kind: type[_P]) -> _P:
        """Return the current working directory as a path of the given kind."""
        return kind.parse(os.getcwd())._with_semantics(SemanticPathType.DIRECTORY)

    def home(self, kind: type[_P]) -> _P:
        """Return the current user's home directory as a path of the given kind."""
        return kind.parse(os.path.expanduser("~"))._with_semantics(SemanticPathType.DIRECTORY)

    @access_error_handler
    def list_entries(self, path: _P) -> list[_P]:
        """Return the direct children of a directory, sorted by name.

        :raises FileNotFoundError: If the path does not exist
        :raises NotADirectoryError: If the path is not a directory
        """
        children = []
        for name in sorted(os.listdir(path.to_text())):
            child = path.join(name)
            if os.path.isdir(child.to_text()):
                child = child._with_semantics(SemanticPathType.DIRECTORY)
            children.append(child)

        return children
