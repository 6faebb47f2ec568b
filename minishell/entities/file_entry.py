"""
File entry domain entity.
"""

import os
import stat
import time

from minishell.exceptions import FileSystemError

_PERMISSION_BITS = (
    (stat.S_IRUSR, "r"),
    (stat.S_IWUSR, "w"),
    (stat.S_IXUSR, "x"),
    (stat.S_IRGRP, "r"),
    (stat.S_IWGRP, "w"),
    (stat.S_IXGRP, "x"),
    (stat.S_IROTH, "r"),
    (stat.S_IWOTH, "w"),
    (stat.S_IXOTH, "x"),
)


class FileEntry:
    """
    Read-only view of a filesystem entry (file or directory).

    Attributes are captured from a single stat call when the entry is built and
    are never refreshed.
    """

    def __init__(self, path: str):
        """
        Initialize the FileEntry entity.

        Args:
            path: Path to the entry

        Raises:
            FileSystemError: If path is empty or cannot be stat'ed
        """
        if not path or not isinstance(path, str):
            raise FileSystemError("Path must be a non-empty string")

        self.path = os.path.abspath(path)
        self.name = os.path.basename(self.path) or self.path

        try:
            st = os.stat(self.path)
        except OSError as e:
            raise FileSystemError(f"Cannot stat {path}: {e.strerror or e}")

        self.mode: int = st.st_mode
        self.is_dir: bool = stat.S_ISDIR(st.st_mode)
        self.is_file: bool = stat.S_ISREG(st.st_mode)
        self.size: int = 0 if self.is_dir else st.st_size
        self.mtime: float = st.st_mtime

    def permission_string(self) -> str:
        """
        Owner, group and other read/write/execute bits as a 9-character string.

        Returns:
            e.g. "rw-r--r--", with "-" for each absent bit
        """
        return "".join(char if self.mode & bit else "-" for bit, char in _PERMISSION_BITS)

    def modified_display(self) -> str:
        """Last-write time in the locale's date and time representation."""
        return time.strftime("%c", time.localtime(self.mtime))

    def __str__(self) -> str:
        return f"FileEntry(name='{self.name}', size={self.size}, is_dir={self.is_dir})"

    def __repr__(self) -> str:
        return f"FileEntry(path='{self.path}')"
