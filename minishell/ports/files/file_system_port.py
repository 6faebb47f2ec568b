"""
Filesystem port interface defining the contract the command handlers rely on.
"""

from abc import ABC, abstractmethod

from minishell.entities.file_entry import FileEntry


class FileSystemPort(ABC):
    """
    Port interface for filesystem queries and mutations.

    All paths are absolute. Mutating operations raise FileSystemError on failure.
    """

    @abstractmethod
    def exists(self, path: str) -> bool:
        pass

    @abstractmethod
    def is_dir(self, path: str) -> bool:
        pass

    @abstractmethod
    def is_file(self, path: str) -> bool:
        pass

    @abstractmethod
    def is_empty_dir(self, path: str) -> bool:
        pass

    @abstractmethod
    def list_dir(self, directory: str) -> list[str]:
        """
        List the direct children of a directory.

        Args:
            directory: Directory to enumerate

        Returns:
            Absolute child paths, sorted by name

        Raises:
            FileSystemError: If the directory cannot be read
        """
        pass

    @abstractmethod
    def walk(self, directory: str) -> list[str]:
        """
        List every entry below a directory, depth first.

        Args:
            directory: Directory to traverse

        Returns:
            Absolute paths in pre-order (a directory before its contents),
            siblings sorted by name

        Raises:
            FileSystemError: If any directory cannot be read
        """
        pass

    @abstractmethod
    def stat(self, path: str) -> FileEntry:
        pass

    @abstractmethod
    def rename(self, source: str, destination: str) -> None:
        pass

    @abstractmethod
    def copy_tree(self, source: str, destination: str) -> None:
        """
        Copy a directory tree, merging into destination if it already exists.

        Raises:
            FileSystemError: If copying fails
        """
        pass

    @abstractmethod
    def remove_tree(self, path: str) -> None:
        pass

    @abstractmethod
    def remove(self, path: str) -> None:
        """Remove a single file."""
        pass

    @abstractmethod
    def remove_dir(self, path: str) -> None:
        """Remove an empty directory."""
        pass

    @abstractmethod
    def copy_file(self, source: str, destination: str, overwrite: bool = True) -> None:
        """
        Copy a regular file.

        Args:
            source: File to copy
            destination: Target file path
            overwrite: Replace destination if it already exists

        Raises:
            FileSystemError: If destination exists and overwrite is False, or copying fails
        """
        pass

    @abstractmethod
    def mkdir(self, path: str, exist_ok: bool = True) -> None:
        pass

    @abstractmethod
    def root_of(self, path: str) -> str:
        pass

    @abstractmethod
    def parent_of(self, path: str) -> str:
        pass
