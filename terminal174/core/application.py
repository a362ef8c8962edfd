"""Main application class for terminal174."""

import signal
import sys
from typing import Dict, Optional
from pathlib import Path

from ..config.manager import create_config_manager
from ..commands import create_command_executor
from ..llm import create_llm_client
from ..utils.logging import logger
from ..constants import (
    APP_TITLE, EXIT_COMMAND, CLR_BLUE, CLR_BOLD_GREEN, CLR_YELLOW, CLR_RESET
)
from .chain import ChainOutcome, create_command_chain
from .conversation import Conversation


def confirm_command(command: str) -> bool:
    """Ask the user whether a model-requested command may run."""
    try:
        answer = input(f"{CLR_YELLOW}Run `{command}`? [y/N]: {CLR_RESET}")
    except EOFError:
        return False
    return answer.strip().lower() == "y"


class Terminal174:
    """Interactive session relaying the user, the model and the shell."""

    def __init__(self, config_dir: Optional[str] = None, debug: bool = False,
                 max_steps: Optional[int] = None, confirm_commands: bool = False):
        """Initialize the application.

        Args:
            config_dir: Custom configuration directory path
            debug: Enable debug logging
            max_steps: Most commands a single chain may run
            confirm_commands: Ask before running each command
        """
        logger.set_debug(debug)

        config_path = Path(config_dir) if config_dir else None
        self.config_manager = create_config_manager(config_path)
        self.config = self.config_manager.config

        self.conversation = Conversation(self.config.system_prompt)
        self.llm_client = create_llm_client(self.config)
        self.executor = create_command_executor()
        self.chain = create_command_chain(
            self.conversation,
            self.llm_client,
            self.executor,
            max_steps=max_steps,
            confirm=confirm_command if confirm_commands else None,
        )

        logger.debug(f"Session {self.conversation.id} initialized")

    def handle_input(self, user_input: str) -> bool:
        """Run one user turn and the command chain it starts.

        Returns:
            False if a model error was not recovered and the session should end
        """
        outcome = self.chain.submit(user_input)
        return self._settle(outcome)

    def _settle(self, outcome: ChainOutcome) -> bool:
        """Offer to retry until the chain finishes or the user gives up."""
        while not outcome.ok:
            logger.error(str(outcome.error))
            if not self._ask_retry():
                return False
            outcome = self.chain.resume(outcome)
        return True

    def _ask_retry(self) -> bool:
        try:
            answer = input(f"{CLR_YELLOW}Retry the model request? [y/N]: {CLR_RESET}")
        except EOFError:
            return False
        return answer.strip().lower() == "y"

    def run_interactive_mode(self) -> int:
        """Read user lines until 'exit' or EOF.

        Returns:
            Process exit status
        """
        print(f"{CLR_BOLD_GREEN}{APP_TITLE}{CLR_RESET}")
        print(f"Type '{EXIT_COMMAND}' to quit. Press Ctrl+C to interrupt AI or command execution.\n")
        logger.model(f"Using {self.config.model} at {self.config.endpoint}")

        while True:
            try:
                user_input = input(f"{CLR_BLUE}>{CLR_RESET} ").strip()
            except EOFError:
                logger.system("EOF received, exiting.")
                return 0

            if user_input == EXIT_COMMAND:
                return 0

            if not self.handle_input(user_input):
                logger.error("Model request failed; ending session.")
                return 1

    def run_single_task(self, task: str) -> bool:
        """Run one prompt and its command chain, then return."""
        return self.handle_input(task)

    def install_signal_handlers(self) -> None:
        """Terminate the whole process on interrupt or termination signals."""
        def signal_handler(sig, frame):
            logger.system(f"Received signal {sig}, shutting down.")
            sys.exit(128 + sig)

        signal.signal(signal.SIGINT, signal_handler)
        signal.signal(signal.SIGTERM, signal_handler)
        if hasattr(signal, 'SIGHUP'):
            signal.signal(signal.SIGHUP, signal_handler)

    def get_config_summary(self) -> Dict[str, str]:
        summary = self.config_manager.get_summary()
        summary["session_id"] = self.conversation.id
        return summary

    def print_config_summary(self) -> None:
        """Print a summary of the current configuration."""
        logger.system("Configuration Summary:")
        for key, value in self.get_config_summary().items():
            logger.system(f"  {key}: {value}")


def create_application(config_dir: Optional[str] = None, debug: bool = False,
                       max_steps: Optional[int] = None,
                       confirm_commands: bool = False) -> Terminal174:
    """Create and initialize a Terminal174 application instance."""
    return Terminal174(config_dir, debug, max_steps=max_steps, confirm_commands=confirm_commands)
