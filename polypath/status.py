from dataclasses import dataclass
from datetime import datetime
import os
import stat

from .pathtype import identify_st_mode, PathType

_BINARY_SUFFIXES = ("B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB")


def _datasize(nbytes: int) -> str:
    """Render a byte count using binary unit prefixes (e.g. ``4096`` -> ``'4.0KiB'``)."""
    size = float(nbytes)
    for suffix in _BINARY_SUFFIXES[:-1]:
        if size < 1024:
            return f"{size:.1f}{suffix}"
        size /= 1024

    return f"{size:.1f}{_BINARY_SUFFIXES[-1]}"


def _created_timestamp(st: os.stat_result) -> float:
    # st_birthtime is not available everywhere; st_ctime is the creation time on Windows
    # and the closest approximation elsewhere
    return getattr(st, "st_birthtime", st.st_ctime)


@dataclass(frozen=True)
class Status:
    """A read-only snapshot of the metadata of a filesystem entry.

    Instances are produced by a filesystem backend once per query and never updated: call
    :py:meth:`polypath.path.AbstractPath.stat` again to observe later changes.
    """

    device: int
    inode: int
    mode: int
    nlink: int
    uid: int
    gid: int
    rdev: int
    size: int
    blksize: int
    blocks: int
    modified: datetime
    created: datetime

    @classmethod
    def from_stat_result(cls, st: os.stat_result) -> "Status":
        """Build a snapshot from the result of :py:func:`os.stat` or :py:func:`os.lstat`.

        Fields that the platform does not report (e.g. ``st_blocks`` on Windows) are set to 0.

        :param st: The raw stat result
        :returns: The equivalent snapshot
        """
        return cls(
            device=st.st_dev,
            inode=st.st_ino,
            mode=st.st_mode,
            nlink=st.st_nlink,
            uid=st.st_uid,
            gid=st.st_gid,
            rdev=getattr(st, "st_rdev", 0),
            size=st.st_size,
            blksize=getattr(st, "st_blksize", 0),
            blocks=getattr(st, "st_blocks", 0),
            modified=datetime.fromtimestamp(st.st_mtime),
            created=datetime.fromtimestamp(_created_timestamp(st)),
        )

    @property
    def type(self) -> PathType:
        """The physical type of the entry (regular file, directory, symlink, ...)."""
        return identify_st_mode(self.mode)

    @property
    def permissions(self) -> str:
        """The symbolic permission string, including the file type character.

        >>> Path("/path/to/file/with/mode/0o755").stat().permissions
        '-rwxr-xr-x'
        """
        return stat.filemode(self.mode)

    def __str__(self) -> str:
        return (
            "Status(\n"
            f"  device = {self.device},\n"
            f"  inode = {self.inode},\n"
            f"  mode = {self.permissions},\n"
            f"  nlink = {self.nlink},\n"
            f"  uid = {self.uid},\n"
            f"  gid = {self.gid},\n"
            f"  rdev = {self.rdev},\n"
            f"  size = {self.size} ({_datasize(self.size)}),\n"
            f"  blksize = {self.blksize} ({_datasize(self.blksize)}),\n"
            f"  blocks = {self.blocks},\n"
            f"  modified = {self.modified.isoformat()},\n"
            f"  created = {self.created.isoformat()},\n"
            ")"
        )
