"""
Dependency injection container for managing shell dependencies.
"""

import logging

from minishell.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from minishell.ports.files.file_system_port import FileSystemPort
from minishell.use_cases.commands.cd import CdCommandUseCase
from minishell.use_cases.commands.cp import CpCommandUseCase
from minishell.use_cases.commands.ls import LsCommandUseCase
from minishell.use_cases.commands.mv import MvCommandUseCase
from minishell.use_cases.commands.rm import RmCommandUseCase
from minishell.use_cases.shell.dispatcher import ShellDispatcher


class DependencyContainer:
    """
    Container for managing shell dependencies using dependency injection.
    """

    def __init__(self):
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def get_file_system(self) -> FileSystemPort:
        """
        Get file system adapter instance.

        Returns:
            FileSystemPort implementation
        """
        if "file_system" not in self._instances:
            self._instances["file_system"] = LocalFileSystemAdapter(self._logger)
        return self._instances["file_system"]

    def get_cd_use_case(self) -> CdCommandUseCase:
        if "cd_use_case" not in self._instances:
            self._instances["cd_use_case"] = CdCommandUseCase(
                self.get_file_system(), self._logger
            )
        return self._instances["cd_use_case"]

    def get_mv_use_case(self) -> MvCommandUseCase:
        if "mv_use_case" not in self._instances:
            self._instances["mv_use_case"] = MvCommandUseCase(
                self.get_file_system(), self._logger
            )
        return self._instances["mv_use_case"]

    def get_rm_use_case(self) -> RmCommandUseCase:
        if "rm_use_case" not in self._instances:
            self._instances["rm_use_case"] = RmCommandUseCase(
                self.get_file_system(), self._logger
            )
        return self._instances["rm_use_case"]

    def get_ls_use_case(self) -> LsCommandUseCase:
        if "ls_use_case" not in self._instances:
            self._instances["ls_use_case"] = LsCommandUseCase(
                self.get_file_system(), self._logger
            )
        return self._instances["ls_use_case"]

    def get_cp_use_case(self) -> CpCommandUseCase:
        if "cp_use_case" not in self._instances:
            self._instances["cp_use_case"] = CpCommandUseCase(
                self.get_file_system(), self._logger
            )
        return self._instances["cp_use_case"]

    def get_dispatcher(self) -> ShellDispatcher:
        """
        Get the dispatcher wired to every verb handler.

        Returns:
            Configured ShellDispatcher
        """
        if "dispatcher" not in self._instances:
            self._instances["dispatcher"] = ShellDispatcher(
                cd=self.get_cd_use_case(),
                mv=self.get_mv_use_case(),
                rm=self.get_rm_use_case(),
                ls=self.get_ls_use_case(),
                cp=self.get_cp_use_case(),
                logger=self._logger,
            )
        return self._instances["dispatcher"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
