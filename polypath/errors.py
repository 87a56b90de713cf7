class PathError(Exception):
    """Base class for every error raised by polypath itself (not by the filesystem)."""


class PathParseError(PathError, ValueError):
    """A raw string does not match any registered path kind, or violates a kind's grammar."""


class PathStructureError(PathError, ValueError):
    """An operation's precondition on the structure of a path value is violated."""


class NoParentError(PathStructureError):
    """The path has no parent and its kind treats that as an error rather than returning the path itself."""


class IncompatiblePathsError(PathStructureError):
    """Two path values cannot be combined (e.g., different kinds, or different drives)."""


class AmbiguousPathKindWarning(UserWarning):
    """More than one registered path kind parses the same raw string."""
