from enum import auto, Enum
import stat


class PathType(Enum):
    """An enumeration of the physical types a filesystem entry can have."""

    REGULAR_FILE = auto()
    DIRECTORY = auto()
    SYMLINK = auto()
    PIPE = auto()
    CHAR_DEVICE = auto()
    BLOCK_DEVICE = auto()
    SOCKET = auto()
    UNKNOWN = auto()
    DOES_NOT_EXIST = auto()


_MODE_CHECKS = (
    (stat.S_ISREG, PathType.REGULAR_FILE),
    (stat.S_ISDIR, PathType.DIRECTORY),
    (stat.S_ISLNK, PathType.SYMLINK),
    (stat.S_ISFIFO, PathType.PIPE),
    (stat.S_ISCHR, PathType.CHAR_DEVICE),
    (stat.S_ISBLK, PathType.BLOCK_DEVICE),
    (stat.S_ISSOCK, PathType.SOCKET),
)


def identify_st_mode(mode: int) -> PathType:
    """Identify the physical path type from a raw ``st_mode`` value.

    :param mode: The mode of the path, as found in :py:attr:`polypath.Status.mode`.
    :returns: The path type, or ``PathType.UNKNOWN`` if no file type bits are recognized
    """
    for check, pathtype in _MODE_CHECKS:
        if check(mode):
            return pathtype

    return PathType.UNKNOWN
