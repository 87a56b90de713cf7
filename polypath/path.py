from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator, Sequence
from enum import Enum
import errno
import fnmatch
from functools import total_ordering
import re
import sys
from typing import ClassVar, Literal, TYPE_CHECKING
from urllib.parse import quote, unquote

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from .errors import IncompatiblePathsError, NoParentError, PathParseError, PathStructureError
from .pathtype import PathType
from .segments import CURDIR, fold, fold_all, normalize_segments, PARDIR, relative_segments
from .semantic_pathtype import identify_semantic_path_type, SemanticPathType
from .status import Status

if TYPE_CHECKING:
    from datetime import datetime

    from .backend import FilesystemBackend

HOME_MARKER = "~"

_ABSENT_ERRNOS = (errno.ENOENT, errno.ENOTDIR, errno.EBADF, errno.ELOOP)


class JoinPolicy(Enum):
    """What :py:meth:`AbstractPath.join` does with a piece that carries its own drive or root."""

    RESET = "reset"
    """The anchored piece replaces everything accumulated so far, as in POSIX `cd`."""

    APPEND = "append"
    """The piece's segments are appended literally and its drive/root are ignored."""


@total_ordering
class AbstractPath(ABC):
    """A structured, immutable path value: a drive, a root, and an ordered tuple of segments.

    Concrete path kinds (:py:class:`polypath.PosixPath`, :py:class:`polypath.WindowsPath`,
    :py:class:`polypath.UNCPath`, or a user-defined kind) subclass this and provide two things:

    - :py:meth:`recognize`, a fast check used by the registry to decide whether the kind claims a raw string, and
    - :py:meth:`_split`, the kind's grammar, decomposing a raw string into ``(drive, root, segments)``.

    Everything else (equality, ordering, parents, joining, normalization, relativization...) is implemented once
    here against those pieces, parameterized by the kind's class attributes.
    """

    separator: ClassVar[str] = "/"
    """The string used to render segments back into text."""

    alt_separators: ClassVar[tuple[str, ...]] = ()
    """Other strings accepted as separators when parsing."""

    case_sensitive: ClassVar[bool] = True
    """Whether segments, drive and root compare case-sensitively."""

    strict_parent: ClassVar[bool] = False
    """If True, asking for the parent of a path without one raises :py:exc:`NoParentError`."""

    join_policy: ClassVar[JoinPolicy] = JoinPolicy.RESET
    """How :py:meth:`join` treats anchored pieces, unless overridden per call."""

    backend: ClassVar["FilesystemBackend | None"] = None
    """The filesystem this kind resolves against, or None for a purely syntactic kind."""

    _drive: str
    _root: str
    _segments: tuple[str, ...]
    _semantic_path_type: SemanticPathType

    def __init__(self, *pieces: "str | AbstractPath") -> None:
        """Construct a path of this kind by parsing the first piece and joining the rest.

        >>> PosixPath("/etc", "app", "conf.yml")
        p"/etc/app/conf.yml"

        With no pieces, this constructs the empty path (no drive, no root, no segments), which is distinct from ".".

        :param pieces: Raw strings (parsed with this kind's grammar) or paths of this kind
        :raises PathParseError: If a raw string is malformed for this kind
        :raises IncompatiblePathsError: If a piece is a path of another kind
        """
        if not pieces:
            self._drive, self._root, self._segments = "", "", ()
            self._semantic_path_type = SemanticPathType.DIRECTORY
            return

        head, *tail = pieces
        value = self._coerce(head)
        if tail:
            value = value.join(*tail)

        self._drive, self._root, self._segments = value._drive, value._root, value._segments
        self._semantic_path_type = value._semantic_path_type

    @classmethod
    @abstractmethod
    def recognize(cls, raw: str, *, force: bool = False) -> bool:
        """Return whether this kind claims the given raw string during registry dispatch.

        :param raw: The raw string
        :param force: If True, skip any host-environment check and only look at the syntax
        """

    @classmethod
    @abstractmethod
    def _split(cls, raw: str) -> tuple[str, str, tuple[str, ...]]:
        """Decompose a raw string into ``(drive, root, segments)`` according to this kind's grammar.

        Segments must not contain separators, empty strings, or "." components.

        :raises PathParseError: If the string violates this kind's grammar
        """

    @classmethod
    def _separators(cls) -> tuple[str, ...]:
        return (cls.separator, *cls.alt_separators)

    @classmethod
    def _from_parts(
        cls,
        drive: str,
        root: str,
        segments: tuple[str, ...],
        *,
        semantic_path_type: SemanticPathType,
    ) -> Self:
        """Return an instance of this class from already-validated parts, avoiding the parsing overhead.

        This should only be used internally.
        """
        inst = cls.__new__(cls)
        inst._drive = drive
        inst._root = root
        inst._segments = segments
        inst._semantic_path_type = semantic_path_type
        return inst

    @classmethod
    def parse(cls, raw: str) -> Self:
        """Parse a raw string with this kind's grammar, without any host-environment check.

        >>> PosixPath.parse("/etc/app/")
        p"/etc/app"

        The empty string parses to the current directory:
        >>> PosixPath.parse("")
        p"."

        :param raw: The raw string
        :returns: The parsed path
        :raises PathParseError: If the string violates this kind's grammar
        """
        if not isinstance(raw, str):
            raise TypeError(f"expected str, not {type(raw)}")

        drive, root, segments = cls._split(raw)

        if not segments:
            if not (drive or root):
                segments = (CURDIR,)
            semantics = SemanticPathType.DIRECTORY
        else:
            semantics = identify_semantic_path_type(raw, cls._separators())

        return cls._from_parts(drive, root, segments, semantic_path_type=semantics)

    @classmethod
    def try_parse(cls, raw: str) -> Self | None:
        """Parse a raw string with this kind's grammar, returning None instead of raising on malformed input.

        >>> WindowsPath.try_parse("\\\\\\\\server\\\\share") is None
        True
        """
        try:
            return cls.parse(raw)
        except PathParseError:
            return None

    @classmethod
    def from_segments(
        cls,
        segments: Sequence[str],
        *,
        root: str = "",
        drive: str = "",
        semantic_path_type: SemanticPathType | None = None,
    ) -> Self:
        """Build a path of this kind directly from its parts.

        >>> PosixPath.from_segments(("etc", "app"), root="/")
        p"/etc/app"

        :param segments: The segments, none of which may be empty or contain a separator
        :param root: The root marker ("" for relative paths)
        :param drive: The drive marker, for kinds that have one
        :param semantic_path_type: The semantic type; by default, FILE unless `segments` is empty
        :returns: The new path
        :raises PathStructureError: If a segment is empty or contains a separator
        """
        segments = tuple(segments)
        for segment in segments:
            if not segment or any(sep in segment for sep in cls._separators()):
                raise PathStructureError(f"invalid segment {segment!r} for {cls.__name__}")

        if semantic_path_type is None:
            semantic_path_type = SemanticPathType.FILE if segments else SemanticPathType.DIRECTORY

        return cls._from_parts(drive, root, segments, semantic_path_type=semantic_path_type)

    @classmethod
    def _coerce(cls, piece: "str | AbstractPath") -> Self:
        """Turn a raw string or a path into a path of this kind.

        :raises IncompatiblePathsError: If `piece` is a path of another kind
        :raises TypeError: If `piece` is neither a string nor a path
        """
        if isinstance(piece, cls):
            return piece

        if isinstance(piece, AbstractPath):
            raise IncompatiblePathsError(f"cannot combine {cls.__name__} with {type(piece).__name__} {piece!r}")

        if isinstance(piece, str):
            return cls.parse(piece)

        raise TypeError(f"expected str or {cls.__name__}, not {type(piece)}")

    @classmethod
    def _parse_piece(cls, raw: str) -> Self:
        """Parse a raw string passed to :py:meth:`join`. Kinds whose grammar only admits anchored paths override this
        to accept bare relative segments here.
        """
        return cls.parse(raw)

    def _replace(
        self,
        *,
        drive: str | None = None,
        root: str | None = None,
        segments: tuple[str, ...] | None = None,
        semantic_path_type: SemanticPathType | None = None,
    ) -> Self:
        return type(self)._from_parts(
            self._drive if drive is None else drive,
            self._root if root is None else root,
            self._segments if segments is None else segments,
            semantic_path_type=self._semantic_path_type if semantic_path_type is None else semantic_path_type,
        )

    def _with_semantics(self, semantic_path_type: SemanticPathType) -> Self:
        return self._replace(semantic_path_type=semantic_path_type)

    @property
    def segments(self) -> tuple[str, ...]:
        """The ordered segments of the path, excluding the drive and root.

        >>> PosixPath("/foo/bar/baz.txt").segments
        ('foo', 'bar', 'baz.txt')
        """
        return self._segments

    @property
    def root(self) -> str:
        """The root marker: empty for relative paths, the kind's root string for rooted ones."""
        return self._root

    @property
    def drive(self) -> str:
        """The drive marker (e.g., "C:"); always empty for kinds without drives."""
        return self._drive

    @property
    def anchor(self) -> str:
        """The concatenation of the drive and root.

        >>> WindowsPath("C:\\\\Users\\\\me").anchor
        'C:\\\\'
        """
        return self._drive + self._root

    @property
    def parts(self) -> tuple[str, ...]:
        """The anchor (if any) followed by the segments.

        >>> PosixPath("/foo/bar").parts
        ('/', 'foo', 'bar')
        """
        if self.anchor:
            return (self.anchor, *self._segments)

        return self._segments

    @property
    def semantic_path_type(self) -> SemanticPathType:
        """Whether the path was written as a directory or a file (this does not consult the filesystem)."""
        return self._semantic_path_type

    def __semantic_path_type__(self) -> SemanticPathType:
        return self._semantic_path_type

    def to_text(self) -> str:
        """Render the compact textual form: drive, root, and the segments joined by the kind's separator.

        >>> PosixPath("/etc/app/").to_text()
        '/etc/app'

        :returns: The compact textual form, which parses back to an equal path
        """
        return self.anchor + self.separator.join(self._segments)

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f'p"{self.to_text()}"'

    def _key(self) -> tuple[tuple[str, ...], str, str]:
        case_sensitive = self.case_sensitive
        return (
            fold_all(self._segments, case_sensitive=case_sensitive),
            fold(self._drive, case_sensitive=case_sensitive),
            fold(self._root, case_sensitive=case_sensitive),
        )

    def __eq__(self, other: object) -> bool:
        """Return whether two paths of the same kind have equal drive, root and segments under the kind's case policy.

        Paths of different kinds are never equal.
        """
        if not isinstance(other, AbstractPath) or type(other) is not type(self):
            return NotImplemented

        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        """Return whether this path sorts before another path of the same kind.

        Paths are ordered lexicographically by their segments, with drive and root as tie-breakers so that the order
        is consistent with equality.
        """
        if not isinstance(other, AbstractPath) or type(other) is not type(self):
            return NotImplemented

        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash((type(self), self._key()))

    def is_absolute(self) -> bool:
        """Return whether the path is absolute. By default, a path is absolute iff it has a root."""
        return bool(self._root)

    def is_relative(self) -> bool:
        return not self.is_absolute()

    def is_empty(self) -> bool:
        """Return whether the path has no segments.

        >>> PosixPath().is_empty()
        True
        >>> PosixPath("").is_empty()  # parses to "."
        False
        """
        return not self._segments

    def has_parent(self) -> bool:
        """Return whether the path has a parent component of its own.

        Anchored paths have a parent as long as they have a segment; relative paths need at least two segments.
        """
        return len(self._segments) > (0 if self.anchor else 1)

    @property
    def parents(self) -> tuple[Self, ...]:
        """Return the ancestors of this path, ordered from the outermost to the immediate parent.

        >>> PosixPath("~/.config/app/settings.toml").parents
        (p"~", p"~/.config", p"~/.config/app")

        >>> PosixPath("/etc").parents
        (p"/",)

        When the path has no parent, the result depends on the kind: anchored paths and "." are their own only
        parent, other relative paths have "." as their parent, and kinds with `strict_parent` return an empty tuple.

        >>> PosixPath("/").parents
        (p"/",)
        >>> PosixPath("etc").parents
        (p".",)

        :returns: A tuple of the path's parent directories
        """
        directory = SemanticPathType.DIRECTORY
        segments = self._segments

        if self.has_parent():
            start = 0 if self.anchor else 1
            return tuple(
                self._replace(segments=segments[:i], semantic_path_type=directory) for i in range(start, len(segments))
            )

        if self.strict_parent:
            return ()

        if self.anchor or segments == (CURDIR,):
            return (self._with_semantics(directory),)

        return (self._replace(segments=(CURDIR,), semantic_path_type=directory),)

    @property
    def parent(self) -> Self:
        """Return the path's immediate parent directory.

        >>> PosixPath("~/.config/app").parent
        p"~/.config"

        :returns: The path's immediate parent directory
        :raises NoParentError: If the path has no parent and its kind uses `strict_parent`
        """
        parents = self.parents
        if not parents:
            raise NoParentError(f"{self!r} has no parent")

        return parents[-1]

    def is_descendant(self, other: "str | AbstractPath") -> bool:
        """Return whether this path is `other` or lies within `other`'s tree, based on the parent chain alone.

        >>> PosixPath("/etc/app/conf.yml").is_descendant("/etc")
        True
        >>> PosixPath("/etc").is_descendant("/etc")
        True
        """
        ancestor = self._coerce(other)
        return self == ancestor or ancestor in self.parents

    def is_ascendant(self, other: "str | AbstractPath") -> bool:
        """Return whether this path is `other` or contains `other` in its tree."""
        return self._coerce(other).is_descendant(self)

    def __contains__(self, other: "str | AbstractPath") -> bool:
        """Determine whether the other path is this path or lies within its tree.

        >>> PosixPath("/path/to/file") in PosixPath("/path/")
        True
        """
        return self._coerce(other).is_descendant(self)

    @property
    def basename(self) -> str:
        """Return the last segment, or an empty string for a path without segments.

        >>> PosixPath("/foo/bar/baz.txt").basename
        'baz.txt'
        """
        return self._segments[-1] if self._segments else ""

    @property
    def name(self) -> str:
        """Return the last segment. This is an alias for basename."""
        return self.basename

    def _split_extensions(self) -> tuple[str, list[str]]:
        name = self.basename
        if name in (CURDIR, PARDIR):
            return name, []

        stem, *extensions = name.split(".")
        return stem, extensions

    @property
    def extension(self) -> str:
        """Return the text after the final "." of the basename, without the dot; empty if there is none.

        >>> PosixPath("/foo/bar/baz.tar.gz").extension
        'gz'
        >>> PosixPath("~/.bashrc").extension
        'bashrc'
        """
        _, extensions = self._split_extensions()
        return extensions[-1] if extensions else ""

    @property
    def extensions(self) -> list[str]:
        """Return every dot-separated suffix after the first "." of the basename.

        >>> PosixPath("/foo/bar/baz.tar.gz").extensions
        ['tar', 'gz']
        """
        _, extensions = self._split_extensions()
        return extensions

    @property
    def filename(self) -> str:
        """Return the basename without its final extension.

        >>> PosixPath("~/Downloads/julia-1.4.0-linux-x86_64.tar.gz").filename
        'julia-1.4.0-linux-x86_64.tar'
        """
        _, extensions = self._split_extensions()
        if not extensions:
            return self.basename

        return self.basename.rsplit(".", 1)[0]

    def splitext(self) -> tuple[Self, str]:
        """Split the final extension off the path.

        >>> PosixPath("/foo/bar/baz.tar.gz").splitext()
        (p"/foo/bar/baz.tar", '.gz')
        >>> PosixPath("/foo/bar/baz").splitext()
        (p"/foo/bar/baz", '')

        When nothing precedes the extension, the basename is dropped entirely:
        >>> PosixPath("~/.bashrc").splitext()
        (p"~", '.bashrc')

        :returns: The path without the final extension, and that extension including its leading dot
        """
        _, extensions = self._split_extensions()
        if not extensions:
            return self, ""

        extension = "." + extensions[-1]
        if not self.filename:
            parent = self._replace(segments=self._segments[:-1], semantic_path_type=SemanticPathType.DIRECTORY)
            return parent, extension

        return self.with_name(self.filename), extension

    def with_name(self, name: str) -> Self:
        """Return a path with the basename changed to `name`.

        >>> PosixPath("/path/to/file.txt").with_name("file2.txt")
        p"/path/to/file2.txt"

        :raises PathStructureError: If the path has no basename or `name` is not a valid single segment
        """
        if not self._segments or self.basename in (CURDIR, PARDIR):
            raise PathStructureError(f"{self!r} has an empty name")

        if not name or name in (CURDIR, PARDIR) or any(sep in name for sep in self._separators()):
            raise PathStructureError(f"invalid name {name!r}")

        return self._replace(segments=(*self._segments[:-1], name))

    def with_extension(self, extension: str) -> Self:
        """Return a path with the final extension replaced; an empty `extension` removes it.

        >>> PosixPath("/path/to/file.txt").with_extension("jpg")
        p"/path/to/file.jpg"
        >>> PosixPath("/path/to/file.tar.gz").with_extension("")
        p"/path/to/file.tar"
        """
        extension = extension.lstrip(".")
        stem = self.filename
        return self.with_name(f"{stem}.{extension}" if extension else stem)

    def join(self, *pieces: "str | AbstractPath", policy: JoinPolicy | None = None) -> Self:
        """Return a new path by appending the segments of each piece, in order.

        >>> PosixPath("/etc").join("app", "conf.yml")
        p"/etc/app/conf.yml"

        Raw strings are parsed with this path's own grammar; paths must be of the same kind. The result carries this
        path's kind and the semantic path type of the last piece.

        A piece with its own drive or root is handled according to `policy` (the kind's `join_policy` by default):
        >>> PosixPath("/etc").join("/var", "log")
        p"/var/log"
        >>> PosixPath("/etc").join("/var", "log", policy=JoinPolicy.APPEND)
        p"/etc/var/log"

        :param pieces: Raw strings or paths of this kind
        :param policy: Overrides how anchored pieces are treated
        :returns: The joined path
        :raises IncompatiblePathsError: If a piece is a path of another kind
        """
        if not pieces:
            return self

        policy = policy or self.join_policy
        drive, root = self._drive, self._root
        segments = list(self._segments)
        semantics = self._semantic_path_type

        for piece in pieces:
            value = self._parse_piece(piece) if isinstance(piece, str) else self._coerce(piece)

            if policy is JoinPolicy.RESET and value._drive:
                drive, root, segments = value._drive, value._root, list(value._segments)
            elif policy is JoinPolicy.RESET and value._root:
                root, segments = value._root, list(value._segments)
            else:
                segments.extend(value._segments)

            semantics = value._semantic_path_type

        joined = tuple(s for s in segments if s != CURDIR)
        if not joined and not (drive or root) and segments:
            joined = (CURDIR,)

        return type(self)._from_parts(drive, root, joined, semantic_path_type=semantics)

    def __truediv__(self, other: "str | AbstractPath") -> Self:
        """Return a new path by joining the given piece with this path. See :py:meth:`join`.

        >>> PosixPath("/foo/bar") / "baz.txt"
        p"/foo/bar/baz.txt"
        """
        if not isinstance(other, (str, AbstractPath)):
            return NotImplemented

        return self.join(other)

    def __rtruediv__(self, other: str) -> Self:
        if not isinstance(other, str):
            return NotImplemented

        return type(self).parse(other).join(self)

    def concat(self, *others: "str | AbstractPath") -> Self:
        """Concatenate the textual forms of this path and the others, then parse the result with this kind.

        Unlike :py:meth:`join`, no separator is inserted:
        >>> PosixPath("foo").concat("bar", ".txt")
        p"foobar.txt"
        """
        text = self.to_text() + "".join(self._coerce(o).to_text() if isinstance(o, AbstractPath) else o for o in others)
        return type(self).parse(text)

    def __mul__(self, other: "str | AbstractPath") -> Self:
        if not isinstance(other, (str, AbstractPath)):
            return NotImplemented

        return self.concat(other)

    def normalize(self) -> Self:
        """Return a new path with "." and ".." segments collapsed, without consulting the filesystem.

        >>> PosixPath("a/b/../c/./d").normalize()
        p"a/c/d"

        ".." segments that climb past the start of a relative path are kept; those that would climb above a root are
        dropped:
        >>> PosixPath("../a/../../b").normalize()
        p"../../b"
        >>> PosixPath("/../etc").normalize()
        p"/etc"

        :returns: The normalized path
        """
        if not self._segments:
            return self

        segments = normalize_segments(self._segments, rooted=bool(self._root))
        if not segments and not self.anchor:
            segments = (CURDIR,)

        return self._replace(segments=segments)

    @classmethod
    def _require_backend(cls) -> "FilesystemBackend":
        if cls.backend is None:
            raise NotImplementedError(f"{cls.__name__} has no filesystem backend")

        return cls.backend

    @classmethod
    def cwd(cls) -> Self:
        """Return a new path object for the current working directory, as reported by the kind's backend."""
        return cls._require_backend().cwd(cls)

    @classmethod
    def home(cls) -> Self:
        """Return a new path object for the user's home directory, as reported by the kind's backend."""
        return cls._require_backend().home(cls)

    def expand_user(self) -> Self:
        """Return a new path with a leading "~" segment replaced by the home directory.

        >>> PosixPath("~/foo/bar/baz.txt").expand_user()
        p"/home/user/foo/bar/baz.txt"
        """
        if self.anchor or not self._segments or self._segments[0] != HOME_MARKER:
            return self

        home = type(self).home()
        semantics = self._semantic_path_type if len(self._segments) > 1 else SemanticPathType.DIRECTORY
        return home._replace(segments=home._segments + self._segments[1:], semantic_path_type=semantics)

    def contract_user(self) -> Self:
        """Return a new path with the home directory prefix replaced by "~", if the path lies within it.

        >>> PosixPath("/home/user/foo").contract_user()
        p"~/foo"
        """
        home = type(self).home()
        if not self.is_descendant(home):
            return self

        remainder = self._segments[len(home._segments) :]
        return type(self)._from_parts("", "", (HOME_MARKER, *remainder), semantic_path_type=self._semantic_path_type)

    def absolute(self) -> Self:
        """Return a new, normalized, absolute path.

        A leading "~" is expanded first; a path that is still not absolute is then joined onto the current working
        directory. Symlinks are not resolved.

        >>> PosixPath("a/b/../c.txt").absolute()  # with the working directory at /foo/bar
        p"/foo/bar/a/c.txt"

        :returns: A new path with the path made absolute
        """
        result = self.expand_user()
        if not result.is_absolute():
            result = type(self).cwd().join(result, policy=JoinPolicy.APPEND)

        return result.normalize()

    def __abs__(self) -> Self:
        return self.absolute()

    def canonicalize(self) -> Self:
        """Return the absolute, normalized form of the path. Symlinks are not consulted."""
        return self.absolute()

    def relative(self, start: "str | AbstractPath | None" = None) -> Self:
        """Compute a relative path leading from `start` (the working directory by default) to this path.

        Both paths are made absolute first. Wherever they diverge, each remaining segment of `start` becomes a "..".

        >>> PosixPath("/a/b/c").relative("/a/x")
        p"../b/c"
        >>> PosixPath("/a/b").relative("/a/b")
        p"."

        :param start: The directory the result is relative to
        :returns: The relative path
        :raises IncompatiblePathsError: If `start` is of another kind, or the paths have different drives or roots
        """
        origin = type(self).cwd() if start is None else self._coerce(start)

        target = self.absolute()
        origin = origin.absolute()

        if target.anchor and origin.anchor and target._key()[1:] != origin._key()[1:]:
            raise IncompatiblePathsError(f"{self!r} and {origin!r} do not share a drive or root")

        segments = relative_segments(target._segments, origin._segments, case_sensitive=self.case_sensitive)
        semantics = SemanticPathType.DIRECTORY if segments == (CURDIR,) else self._semantic_path_type
        return type(self)._from_parts("", "", segments, semantic_path_type=semantics)

    def match(self, pattern: str | re.Pattern[str], *, full: bool = False, case_sensitive: bool | None = None) -> bool:
        """Match the textual form of this path against a regex pattern.

        >>> PosixPath("/path/to/logs/log-2025-01-01.txt").match(r"log-2025-\\d{2}-\\d{2}\\.txt")
        True

        :param pattern: The regex pattern to match against
        :param full: If True, the pattern must match the whole path (re.fullmatch); otherwise any part (re.search)
        :param case_sensitive: Overrides the kind's case policy
        :returns: True if the path matches the pattern, False otherwise
        """
        if case_sensitive is None:
            case_sensitive = self.case_sensitive

        match_func = re.fullmatch if full else re.search
        flags = 0 if case_sensitive else re.IGNORECASE
        return match_func(pattern, self.to_text(), flags=flags) is not None

    def glob_match(self, glob: str, *, full: bool = False, case_sensitive: bool | None = None) -> bool:
        """Match the textual form of this path against a glob pattern. See :py:meth:`match`.

        >>> PosixPath("/path/to/logs/log-2025-01-01.txt").glob_match("log-2025-*.txt")
        True
        """
        return self.match(fnmatch.translate(glob), full=full, case_sensitive=case_sensitive)

    def _uri_path(self) -> str:
        return quote(self.to_text().replace(self.separator, "/"))

    @classmethod
    def _from_uri_path(cls, path: str) -> Self:
        return cls.parse(path)

    def as_uri(self) -> str:
        """Return the path as a file URI.

        >>> PosixPath("/foo foo/bar").as_uri()
        'file:///foo%20foo/bar'

        :raises PathStructureError: If the path is not absolute
        """
        if not self.is_absolute():
            raise PathStructureError("relative path can't be expressed as a file URI")

        return "file://" + self._uri_path()

    @classmethod
    def from_uri(cls, uri: str) -> Self:
        """Return a new path of this kind from a file URI.

        >>> PosixPath.from_uri("file:///foo/bar/baz.txt")
        p"/foo/bar/baz.txt"

        :raises PathParseError: If the URI is not a file URI
        """
        if not (match := re.fullmatch(r"file://(.*)", uri)):
            raise PathParseError(f"invalid file URI: {uri}")

        return cls._from_uri_path(unquote(match.group(1)))

    def exists(self) -> bool:
        """Return whether the path points to an existing entry (following symlinks)."""
        return self._require_backend().exists(self)

    def stat(self, *, follow_symlinks: bool = True) -> Status:
        """Return a fresh :py:class:`polypath.Status` snapshot of the entry.

        :param follow_symlinks: If False and the path is a symlink, describe the link itself
        :raises FileNotFoundError: If the path does not exist
        """
        backend = self._require_backend()
        return backend.stat(self) if follow_symlinks else backend.lstat(self)

    def lstat(self) -> Status:
        return self.stat(follow_symlinks=False)

    def _status_or_none(self, *, follow_symlinks: bool) -> Status | None:
        try:
            return self.stat(follow_symlinks=follow_symlinks)
        except OSError as e:
            # missing entries and symlink loops count as absent
            if e.errno not in _ABSENT_ERRNOS:
                raise
            return None

    @property
    def type(self) -> PathType:
        """Return the physical type of the entry, without following symlinks.

        :returns: The type of the path (PathType.DOES_NOT_EXIST if the path doesn't exist)
        """
        status = self._status_or_none(follow_symlinks=False)
        return PathType.DOES_NOT_EXIST if status is None else status.type

    def is_directory(self, *, follow_symlinks: bool = True, must_exist: bool = False) -> bool:
        """Return True if the path is a directory. If the path does not exist, use semantic reasoning.

        >>> PosixPath("/path/to/nonexisting/directory/").is_directory()
        True
        >>> PosixPath("/path/to/nonexisting/directory/").is_directory(must_exist=True)
        False

        :param follow_symlinks: If False, a symlink to a directory is not a directory
        :param must_exist: If True, a missing path is never a directory
        """
        status = self._status_or_none(follow_symlinks=follow_symlinks)
        if status is None:
            return not must_exist and self._semantic_path_type is SemanticPathType.DIRECTORY

        return status.type is PathType.DIRECTORY

    def is_file(self, *, follow_symlinks: bool = True, must_exist: bool = False) -> bool:
        """Return True if the path is any non-directory entry. If the path does not exist, use semantic reasoning."""
        status = self._status_or_none(follow_symlinks=follow_symlinks)
        if status is None:
            return not must_exist and self._semantic_path_type is SemanticPathType.FILE

        return status.type not in (PathType.DIRECTORY, PathType.UNKNOWN)

    def is_symlink(self) -> bool:
        return self.type is PathType.SYMLINK

    def size(self) -> int:
        """Return the size of the entry in bytes."""
        return self.stat().size

    def modified(self) -> "datetime":
        return self.stat().modified

    def created(self) -> "datetime":
        return self.stat().created

    def read_bytes(self) -> bytes:
        return self._require_backend().read_bytes(self)

    def write_bytes(self, data: bytes, *, mode: Literal["w", "a"] = "w") -> int:
        """Write `data` to the file, overwriting it (`mode="w"`) or appending to it (`mode="a"`).

        :returns: The number of bytes written
        """
        return self._require_backend().write_bytes(self, data, append=mode == "a")

    def read_text(self, *, encoding: str = "utf-8", errors: str = "strict") -> str:
        return self.read_bytes().decode(encoding, errors)

    def write_text(
        self,
        data: str,
        *,
        mode: Literal["w", "a"] = "w",
        encoding: str = "utf-8",
        errors: str = "strict",
    ) -> int:
        """Encode `data` and write it to the file. See :py:meth:`write_bytes`."""
        return self.write_bytes(data.encode(encoding, errors), mode=mode)

    def touch(self) -> None:
        """Create the file if it does not exist, leaving any existing contents untouched."""
        self.write_bytes(b"", mode="a")

    def mkdir(self, *, recursive: bool = False, exist_ok: bool = False) -> None:
        """Create a directory at this path.

        :param recursive: If True, create missing parent directories as well
        :param exist_ok: If True, an already existing directory is not an error
        :raises FileExistsError: If the path exists and `exist_ok` is False
        :raises FileNotFoundError: If the parent does not exist and `recursive` is False
        """
        self._require_backend().mkdir(self, recursive=recursive, exist_ok=exist_ok)

    def remove(self, *, recursive: bool = False, force: bool = False) -> None:
        """Remove the file, symlink, or directory at this path.

        :param recursive: If True, remove a directory together with its contents
        :param force: If True, a missing path is not an error
        """
        self._require_backend().remove(self, recursive=recursive, force=force)

    def iterdir(self) -> Iterator[Self]:
        """Iterate over the direct children of the directory represented by this path.

        :raises FileNotFoundError: If this path does not exist
        :raises NotADirectoryError: If this path is not a directory
        """
        yield from self._require_backend().list_entries(self)

    def walk(
        self,
        *,
        topdown: bool = True,
        follow_symlinks: bool = False,
        on_error: Callable[[OSError], None] | None = None,
    ) -> Iterator[Self]:
        """Lazily yield every path in the tree below this directory, depth-first.

        For the file structure:
            /path/to/
            ├── subdir/
            │   └── subfile
            └── file

        >>> list(PosixPath("/path/to/").walk())
        [p"/path/to/file", p"/path/to/subdir", p"/path/to/subdir/subfile"]

        Each call starts a new traversal.

        :param topdown: If True, a directory is yielded before its children; otherwise after them
        :param follow_symlinks: If True, descend into symlinks pointing to directories
        :param on_error:
            Called with the :py:exc:`OSError` raised while listing a directory; the traversal then skips that
            directory. If None, the error propagates.
        :yields: Every descendant path
        """
        try:
            children = self._require_backend().list_entries(self)
        except OSError as e:
            if on_error is None:
                raise
            on_error(e)
            return

        for child in children:
            if topdown:
                yield child

            if child.is_directory(follow_symlinks=follow_symlinks, must_exist=True):
                yield from child.walk(topdown=topdown, follow_symlinks=follow_symlinks, on_error=on_error)

            if not topdown:
                yield child
