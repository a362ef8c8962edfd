"""Command execution utilities for terminal174."""

import subprocess
import sys
import threading
from typing import IO, Callable, List, Optional

from ..constants import CLR_RED, CLR_RESET
from ..utils.logging import logger


class CommandResult:
    """Represents the result of a command execution."""

    def __init__(self,
                 command: str,
                 stdout_lines: Optional[List[str]] = None,
                 stderr_lines: Optional[List[str]] = None,
                 exit_code: Optional[int] = None):
        self.command = command
        self.stdout_lines = stdout_lines or []
        self.stderr_lines = stderr_lines or []
        self.exit_code = exit_code

    @property
    def combined_output(self) -> str:
        """Stdout lines, then stderr lines, plus a note for a non-zero exit."""
        output = "".join(f"{line}\n" for line in self.stdout_lines + self.stderr_lines)
        if self.exit_code:
            output += f"\nProcess exited with code: {self.exit_code}"
        return output

    @property
    def success(self) -> bool:
        """Whether the command exited with status 0."""
        return self.exit_code == 0

    def __str__(self) -> str:
        return self.combined_output


def build_shell_argv(command: str) -> List[str]:
    """Wrap a command line in the platform shell."""
    if sys.platform.startswith("win"):
        return ["cmd", "/C", command]
    return ["sh", "-c", command]


def _echo_stdout(line: str) -> None:
    print(line, flush=True)


def _echo_stderr(line: str) -> None:
    print(f"{CLR_RED}{line}{CLR_RESET}", file=sys.stderr, flush=True)


class CommandExecutor:
    """Runs shell commands, echoing and capturing their output line by line."""

    def execute(self, command: str) -> CommandResult:
        """Execute a shell command and wait for it to finish.

        Standard input is inherited so interactive programs can read from the
        terminal. Stdout and stderr are drained at the same time; each line is
        echoed as it arrives.

        Args:
            command: Shell command to execute

        Returns:
            CommandResult with the captured lines and exit code

        Raises:
            OSError: If the shell cannot be spawned
        """
        logger.debug(f"Executing command: {command}")

        process = subprocess.Popen(
            build_shell_argv(command),
            stdin=None,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="replace",
        )

        stdout_lines: List[str] = []
        stderr_lines: List[str] = []
        readers = [
            threading.Thread(target=_drain, args=(process.stdout, stdout_lines, _echo_stdout), daemon=True),
            threading.Thread(target=_drain, args=(process.stderr, stderr_lines, _echo_stderr), daemon=True),
        ]
        for reader in readers:
            reader.start()
        for reader in readers:
            reader.join()

        returncode = process.wait()
        # Negative codes mean the process was killed by a signal and has no exit status
        exit_code = returncode if returncode >= 0 else None

        result = CommandResult(command, stdout_lines, stderr_lines, exit_code)
        logger.debug(f"Command finished with exit code {exit_code} "
                     f"({len(stdout_lines)} stdout / {len(stderr_lines)} stderr lines)")
        return result


def _drain(stream: IO[str], sink: List[str], echo: Callable[[str], None]) -> None:
    """Read a pipe to EOF, echoing and collecting each line."""
    with stream:
        for line in iter(stream.readline, ""):
            line = line.rstrip("\r\n")
            echo(line)
            sink.append(line)


def create_command_executor() -> CommandExecutor:
    """Create a command executor."""
    return CommandExecutor()
