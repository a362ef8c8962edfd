"""Command-line interface for terminal174."""

import argparse
import sys
from typing import List, Optional

from colorama import init as colorama_init

from .config.manager import ConfigError
from .core.application import create_application
from .utils.logging import logger
from . import __version__


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser."""
    parser = argparse.ArgumentParser(
        description="terminal174: an AI-powered terminal that talks and runs commands for you.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  terminal174                                  # Interactive mode
  terminal174 "show me the largest files here" # Run one request and exit
  terminal174 --confirm                        # Ask before each command runs
  terminal174 --max-steps 10                   # Stop a chain after 10 commands
        """
    )

    parser.add_argument(
        'task_prompt',
        nargs='*',
        help="Initial request. If empty, enters interactive mode."
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'terminal174 {__version__}'
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help="Enable debug logging output"
    )

    parser.add_argument(
        '--config-dir',
        type=str,
        help="Custom configuration directory path"
    )

    parser.add_argument(
        '--config-summary',
        action='store_true',
        help="Show configuration summary and exit"
    )

    parser.add_argument(
        '--confirm',
        action='store_true',
        help="Ask for confirmation before running each command"
    )

    parser.add_argument(
        '--max-steps',
        type=positive_int,
        default=None,
        help="Maximum number of commands a single chain may run"
    )

    return parser


def main(args: Optional[List[str]] = None) -> None:
    """Main entry point for the CLI."""
    colorama_init(autoreset=True)

    parser = create_parser()
    parsed_args = parser.parse_args(args)

    try:
        app = create_application(
            config_dir=parsed_args.config_dir,
            debug=parsed_args.debug,
            max_steps=parsed_args.max_steps,
            confirm_commands=parsed_args.confirm,
        )
    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)

    if parsed_args.config_summary:
        app.print_config_summary()
        return

    app.install_signal_handlers()

    if parsed_args.task_prompt:
        user_task = " ".join(parsed_args.task_prompt)
        success = app.run_single_task(user_task)
        sys.exit(0 if success else 1)

    sys.exit(app.run_interactive_mode())


if __name__ == "__main__":
    main()
