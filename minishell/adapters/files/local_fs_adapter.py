"""
Local file system adapter implementation for the shell's filesystem operations.
"""

import logging
import os
import shutil

from typing_extensions import override

from minishell.entities.file_entry import FileEntry
from minishell.exceptions import FileSystemError
from minishell.ports.files.file_system_port import FileSystemPort


def _reason(error: OSError) -> str:
    return error.strerror or str(error)


class LocalFileSystemAdapter(FileSystemPort):
    """Local file system implementation of the filesystem port."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    def _validate_directory(self, directory: str) -> None:
        """
        Validate that a directory exists and is indeed a directory.

        Raises:
            FileSystemError: If directory does not exist or is not a directory
        """
        if not os.path.exists(directory):
            raise FileSystemError(f"Directory does not exist: {directory}")

        if not os.path.isdir(directory):
            raise FileSystemError(f"Path is not a directory: {directory}")

    def _scan_sorted(self, directory: str) -> list[os.DirEntry]:
        with os.scandir(directory) as it:
            return sorted(it, key=lambda entry: entry.name)

    @override
    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    @override
    def is_dir(self, path: str) -> bool:
        return os.path.isdir(path)

    @override
    def is_file(self, path: str) -> bool:
        return os.path.isfile(path)

    @override
    def is_empty_dir(self, path: str) -> bool:
        if not os.path.isdir(path):
            return False
        try:
            with os.scandir(path) as it:
                return next(it, None) is None
        except OSError as e:
            raise FileSystemError(f"cannot read directory {path}: {_reason(e)}")

    @override
    def list_dir(self, directory: str) -> list[str]:
        try:
            self._validate_directory(directory)
            return [entry.path for entry in self._scan_sorted(directory)]
        except FileSystemError:
            raise
        except OSError as e:
            raise FileSystemError(f"cannot read directory {directory}: {_reason(e)}")

    @override
    def walk(self, directory: str) -> list[str]:
        self._validate_directory(directory)
        paths: list[str] = []
        self._walk_into(directory, paths)
        return paths

    def _walk_into(self, directory: str, paths: list[str]) -> None:
        try:
            entries = self._scan_sorted(directory)
        except OSError as e:
            raise FileSystemError(f"cannot read directory {directory}: {_reason(e)}")
        for entry in entries:
            paths.append(entry.path)
            # Symlinked directories are listed but not descended into
            if entry.is_dir(follow_symlinks=False):
                self._walk_into(entry.path, paths)

    @override
    def stat(self, path: str) -> FileEntry:
        return FileEntry(path)

    @override
    def rename(self, source: str, destination: str) -> None:
        try:
            os.replace(source, destination)
        except OSError as e:
            raise FileSystemError(
                f"cannot rename {source} to {destination}: {_reason(e)}"
            )
        self._logger.debug(f"Renamed {source} -> {destination}")

    @override
    def copy_tree(self, source: str, destination: str) -> None:
        try:
            shutil.copytree(source, destination, dirs_exist_ok=True)
        except (shutil.Error, OSError) as e:
            raise FileSystemError(f"cannot copy {source} to {destination}: {e}")
        self._logger.debug(f"Copied tree {source} -> {destination}")

    @override
    def remove_tree(self, path: str) -> None:
        try:
            # A symlink to a directory is removed itself, not its target
            if os.path.islink(path):
                os.unlink(path)
            else:
                shutil.rmtree(path)
        except OSError as e:
            raise FileSystemError(f"cannot remove {path}: {_reason(e)}")
        self._logger.debug(f"Removed tree {path}")

    @override
    def remove(self, path: str) -> None:
        try:
            os.remove(path)
        except OSError as e:
            raise FileSystemError(f"cannot remove {path}: {_reason(e)}")
        self._logger.debug(f"Removed {path}")

    @override
    def remove_dir(self, path: str) -> None:
        try:
            os.rmdir(path)
        except OSError as e:
            raise FileSystemError(f"cannot remove {path}: {_reason(e)}")
        self._logger.debug(f"Removed directory {path}")

    @override
    def copy_file(self, source: str, destination: str, overwrite: bool = True) -> None:
        if os.path.exists(destination) and not overwrite:
            raise FileSystemError(f"cannot copy {source} to {destination}: File exists")
        if os.path.isdir(destination):
            raise FileSystemError(
                f"cannot copy {source} to {destination}: Is a directory"
            )
        try:
            shutil.copyfile(source, destination)
            shutil.copymode(source, destination)
        except OSError as e:
            raise FileSystemError(
                f"cannot copy {source} to {destination}: {_reason(e)}"
            )
        self._logger.debug(f"Copied {source} -> {destination}")

    @override
    def mkdir(self, path: str, exist_ok: bool = True) -> None:
        if exist_ok and os.path.isdir(path):
            return
        try:
            os.mkdir(path)
        except OSError as e:
            raise FileSystemError(f"cannot create directory {path}: {_reason(e)}")
        self._logger.debug(f"Created directory {path}")

    @override
    def root_of(self, path: str) -> str:
        drive, _ = os.path.splitdrive(os.path.abspath(path))
        return drive + os.sep

    @override
    def parent_of(self, path: str) -> str:
        return os.path.dirname(os.path.normpath(os.path.abspath(path)))
