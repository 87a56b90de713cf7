"""Registry of path kinds and the string-to-path dispatch built on it.

Kinds are consulted most-recently-registered first. Registration swaps in a new tuple under a lock, so a dispatch
running concurrently sees either the old or the new set of kinds, never a partial one.
"""

from collections.abc import Iterator
import logging
import threading
from typing import TypeVar
import warnings

from .config import debug_enabled, is_windows_host
from .errors import AmbiguousPathKindWarning, PathParseError
from .path import AbstractPath
from .posix import PosixPath
from .unc import UNCPath
from .windows import WindowsPath

logger = logging.getLogger(__name__)

_K = TypeVar("_K", bound=type[AbstractPath])


class PathKindRegistry:
    """An ordered collection of path kinds used to turn raw strings into path values."""

    def __init__(self, kinds: tuple[type[AbstractPath], ...] = ()) -> None:
        self._lock = threading.Lock()
        self._kinds = tuple(kinds)

    def __repr__(self) -> str:
        names = ", ".join(kind.__name__ for kind in self._kinds)
        return f"{self.__class__.__name__}([{names}])"

    @property
    def kinds(self) -> tuple[type[AbstractPath], ...]:
        """The registered kinds, in dispatch order."""
        return self._kinds

    def __iter__(self) -> Iterator[type[AbstractPath]]:
        return iter(self._kinds)

    def __len__(self) -> int:
        return len(self._kinds)

    def __contains__(self, kind: object) -> bool:
        return kind in self._kinds

    def copy(self) -> "PathKindRegistry":
        return PathKindRegistry(self._kinds)

    def register(self, kind: _K) -> _K:
        """Add a path kind so that it is consulted before every kind registered earlier.

        Kinds are not de-duplicated: registering a kind again makes it win over every kind registered in between. The
        kind is returned unchanged, so this can be used as a class decorator.

        :param kind: A concrete subclass of :py:class:`polypath.path.AbstractPath`
        :returns: The same kind
        :raises TypeError: If `kind` is not a subclass of AbstractPath
        """
        if not (isinstance(kind, type) and issubclass(kind, AbstractPath)):
            raise TypeError(f"expected a subclass of AbstractPath, not {kind!r}")

        with self._lock:
            self._kinds = (kind, *self._kinds)

        logger.debug("registered path kind %s", kind.__name__)
        return kind

    def resolve(self, raw: str, *, debug: bool | None = None, force: bool = False) -> AbstractPath:
        """Parse a raw string with the first registered kind that recognizes and parses it.

        >>> get_registry().resolve("/etc/app/conf.yml")  # on a POSIX host
        p"/etc/app/conf.yml"

        :param raw: The raw string
        :param debug:
            If True, try every kind and emit an :py:class:`polypath.AmbiguousPathKindWarning` when more than one
            parses the string; the first match is still returned. If None, use the ``POLYPATH_DEBUG`` setting.
        :param force: Passed to each kind's `recognize`, skipping host-environment checks
        :returns: The parsed path
        :raises PathParseError: If no registered kind parses the string
        """
        if debug is None:
            debug = debug_enabled()

        matches: list[AbstractPath] = []
        for kind in self._kinds:
            if not kind.recognize(raw, force=force):
                continue

            value = kind.try_parse(raw)
            if value is None:
                continue

            if not debug:
                logger.debug("parsed %r as %s", raw, kind.__name__)
                return value

            matches.append(value)

        if not matches:
            raise PathParseError(f"no registered path kind parses {raw!r}")

        if len(matches) > 1:
            names = ", ".join(type(m).__name__ for m in matches)
            logger.debug("%r is parsed by several path kinds: %s", raw, names)
            warnings.warn(
                f"{raw!r} is parsed by several path kinds ({names}); using {type(matches[0]).__name__}",
                AmbiguousPathKindWarning,
                stacklevel=3,
            )

        return matches[0]

    def try_resolve(self, raw: str, *, debug: bool | None = None, force: bool = False) -> AbstractPath | None:
        """Like :py:meth:`resolve`, but return None if no kind parses the string."""
        try:
            return self.resolve(raw, debug=debug, force=force)
        except PathParseError:
            return None


def host_kind() -> type[AbstractPath]:
    """Return the built-in kind used for paths on the current host."""
    return WindowsPath if is_windows_host() else PosixPath


def _default_kinds() -> tuple[type[AbstractPath], ...]:
    if is_windows_host():
        return (UNCPath, WindowsPath, PosixPath)

    return (PosixPath, WindowsPath, UNCPath)


_registry = PathKindRegistry(_default_kinds())


def get_registry() -> PathKindRegistry:
    """Return the process-wide registry used by :py:func:`Path`."""
    return _registry


def register(kind: _K) -> _K:
    """Register a path kind with the process-wide registry. See :py:meth:`PathKindRegistry.register`.

    >>> @register
    ... class MyPath(AbstractPath):
    ...     ...
    """
    return get_registry().register(kind)


def Path(
    *pieces: "str | AbstractPath | tuple[str, ...]",
    debug: bool | None = None,
    force: bool = False,
) -> AbstractPath:
    """Construct a path value, choosing its kind from the registry.

    >>> Path("/etc", "app", "conf.yml")  # on a POSIX host
    p"/etc/app/conf.yml"

    - With no arguments, return the empty path of the host kind.
    - A path value is used as-is.
    - A string is dispatched through the registry (see :py:meth:`PathKindRegistry.resolve`).
    - A tuple of strings is taken as the segments of a relative path of the host kind.

    Any further pieces are joined onto the first, using its kind.

    :raises PathParseError: If no registered kind parses the first piece
    """
    if not pieces:
        return host_kind()()

    head, *tail = pieces
    if isinstance(head, AbstractPath):
        value = head
    elif isinstance(head, str):
        value = get_registry().resolve(head, debug=debug, force=force)
    elif isinstance(head, tuple):
        value = host_kind().from_segments(head)
    else:
        raise TypeError(f"expected str, tuple, or AbstractPath, not {type(head)}")

    if tail:
        return value.join(*tail)  # type: ignore[arg-type]

    return value


p = Path


def try_path(raw: str, *, debug: bool | None = None, force: bool = False) -> AbstractPath | None:
    """Construct a path value from a raw string, returning None if no registered kind parses it."""
    return get_registry().try_resolve(raw, debug=debug, force=force)
