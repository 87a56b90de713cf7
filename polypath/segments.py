"""Pure functions over ordered sequences of path segments.

Nothing in this module touches the filesystem or knows about path kinds; drive and root metadata are handled by the
callers in :py:mod:`polypath.path`. Every function takes and returns tuples of strings.
"""

from collections.abc import Iterable, Sequence

CURDIR = "."
PARDIR = ".."


def fold(segment: str, *, case_sensitive: bool) -> str:
    """Return the comparison key of a single segment under the given case policy.

    >>> fold("Users", case_sensitive=False)
    'users'

    :param segment: The segment to fold
    :param case_sensitive: Whether the owning path kind compares segments case-sensitively
    :returns: The segment itself, or its casefolded form for case-insensitive kinds
    """
    return segment if case_sensitive else segment.casefold()


def fold_all(segments: Iterable[str], *, case_sensitive: bool) -> tuple[str, ...]:
    """Fold every segment of a sequence under the given case policy."""
    return tuple(fold(s, case_sensitive=case_sensitive) for s in segments)


def split_segments(text: str, separator: str) -> tuple[str, ...]:
    """Split raw text on a separator, collapsing empty components and dropping "." components.

    >>> split_segments("a//b/./c/", "/")
    ('a', 'b', 'c')

    >>> split_segments("../a", "/")
    ('..', 'a')

    :param text: The text to split (without any drive or root marker)
    :param separator: The separator of the path kind
    :returns: The non-empty, non-"." segments, in order
    """
    return tuple(s for s in text.split(separator) if s and s != CURDIR)


def normalize_segments(segments: Sequence[str], *, rooted: bool = False) -> tuple[str, ...]:
    """Collapse "." and ".." segments without consulting the filesystem.

    The segments are walked from the end backward with a counter of pending deletions: ".." increments it, "." is
    dropped, and any other segment is dropped while the counter is positive (decrementing it) or kept otherwise.
    Whatever remains in the counter becomes leading ".." segments, unless the path is rooted, in which case there is
    nothing above the root to climb to and they are discarded.

    >>> normalize_segments(("a", "b", "..", "c", ".", "d"))
    ('a', 'c', 'd')

    >>> normalize_segments(("..", "a", "..", ".."))
    ('..', '..')

    >>> normalize_segments(("..", "a"), rooted=True)
    ('a',)

    :param segments: The segments to normalize
    :param rooted: Whether the segments hang below a root marker
    :returns: The normalized segments
    """
    kept: list[str] = []
    pending = 0

    for segment in reversed(segments):
        if segment == PARDIR:
            pending += 1
        elif segment == CURDIR:
            continue
        elif pending:
            pending -= 1
        else:
            kept.append(segment)

    kept.reverse()

    if rooted:
        return tuple(kept)

    return (PARDIR,) * pending + tuple(kept)


def common_prefix_length(a: Sequence[str], b: Sequence[str], *, case_sensitive: bool = True) -> int:
    """Return the number of leading segments shared by two segment sequences.

    >>> common_prefix_length(("a", "b", "c"), ("a", "x"))
    1

    >>> common_prefix_length(("Users", "me"), ("users", "you"), case_sensitive=False)
    1
    """
    i = 0
    for left, right in zip(a, b):
        if fold(left, case_sensitive=case_sensitive) != fold(right, case_sensitive=case_sensitive):
            break
        i += 1

    return i


def relative_segments(path: Sequence[str], start: Sequence[str], *, case_sensitive: bool = True) -> tuple[str, ...]:
    """Compute the segments leading from `start` to `path`.

    Both sequences are expected to be normalized and anchored at the same root. At the first index where they
    diverge, every remaining segment of `start` becomes a "..", followed by the remaining segments of `path`.

    >>> relative_segments(("a", "b", "c"), ("a", "x"))
    ('..', 'b', 'c')

    >>> relative_segments(("a", "b"), ("a", "b"))
    ('.',)

    :param path: The target segments
    :param start: The segments of the starting directory
    :param case_sensitive: Whether segments are compared case-sensitively
    :returns: The relative segments, or ``(".",)`` if the sequences are equal
    """
    i = common_prefix_length(path, start, case_sensitive=case_sensitive)
    result = (PARDIR,) * (len(start) - i) + tuple(path[i:])

    return result or (CURDIR,)

