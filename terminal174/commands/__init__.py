"""Shell command execution for terminal174."""

from .executor import CommandExecutor, CommandResult, build_shell_argv, create_command_executor

__all__ = [
    "CommandExecutor",
    "CommandResult",
    "build_shell_argv",
    "create_command_executor",
]
