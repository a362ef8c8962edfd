"""Command chain orchestration for terminal174.

A chain starts from a user turn (or a list of commands) and keeps going until
the model replies without asking for another command:

    run command -> append <command_result> -> ask model -> print talk
                -> push the reply's commands -> repeat

Commands wait on a LIFO stack. Each reply's commands are pushed in reverse,
so a command's follow-ups run before its later siblings (depth first, in the
order the model wrote them).
"""

from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional

from ..constants import COMMAND_RESULT_TAG, CLR_GREEN, CLR_RED, CLR_YELLOW, CLR_RESET
from ..llm import LLMError, iter_talk_segments, iter_run_commands, parse_directives
from ..utils.helpers import format_system_information
from ..utils.logging import logger
from .conversation import Conversation

DECLINED_RESULT = "Command not executed: declined by user"


@dataclass
class ChainOutcome:
    """How a chain ended.

    ``pending`` holds the commands still waiting on the stack (the next one to
    run is last). When ``error`` is set the transcript ends with an unanswered
    user message and ``awaiting_response`` is True; pass the outcome to
    ``CommandChain.resume`` to retry.
    """
    pending: List[str] = field(default_factory=list)
    error: Optional[LLMError] = None
    awaiting_response: bool = False
    steps: int = 0
    truncated: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None


def wrap_command_result(content: str) -> str:
    return f"<{COMMAND_RESULT_TAG}>{content}</{COMMAND_RESULT_TAG}>"


class CommandChain:
    """Runs model-requested commands and feeds their results back to the model."""

    def __init__(self, conversation: Conversation, llm_client, executor,
                 max_steps: Optional[int] = None,
                 confirm: Optional[Callable[[str], bool]] = None):
        """Initialize the chain.

        Args:
            conversation: Transcript owned by this session
            llm_client: Object with ``chat(messages) -> str``
            executor: Object with ``execute(command) -> CommandResult``
            max_steps: Most commands one chain may run; None means no limit
            confirm: Called with each command before it runs; False skips it
        """
        self.conversation = conversation
        self.llm_client = llm_client
        self.executor = executor
        self.max_steps = max_steps
        self.confirm = confirm

    def submit(self, user_text: str) -> ChainOutcome:
        """Start a chain from a line the user typed."""
        self.conversation.add_user(f"{user_text}\n{format_system_information()}")
        return self._drive([], awaiting_response=True)

    def run(self, commands: Iterable[str]) -> ChainOutcome:
        """Start a chain from commands already extracted from a reply."""
        return self._drive(list(reversed(list(commands))), awaiting_response=False)

    def resume(self, outcome: ChainOutcome) -> ChainOutcome:
        """Continue a chain that stopped on a model error."""
        return self._drive(list(outcome.pending), outcome.awaiting_response, steps=outcome.steps)

    def _drive(self, stack: List[str], awaiting_response: bool, steps: int = 0) -> ChainOutcome:
        while True:
            if awaiting_response:
                try:
                    reply = self._request_reply()
                except LLMError as e:
                    logger.debug(f"Chain interrupted after {steps} command(s): {e}")
                    return ChainOutcome(pending=stack, error=e, awaiting_response=True, steps=steps)
                stack.extend(reversed(list(iter_run_commands(reply))))
                awaiting_response = False

            if not stack:
                return ChainOutcome(steps=steps)

            if self.max_steps is not None and steps >= self.max_steps:
                logger.warning(f"Stopped after {steps} command(s); "
                               f"dropping {len(stack)} pending command(s).")
                return ChainOutcome(steps=steps, truncated=True)

            self._execute_step(stack.pop())
            steps += 1
            awaiting_response = True

    def _request_reply(self) -> str:
        """Ask the model to answer the transcript and show its talk segments."""
        reply = self.llm_client.chat(self.conversation.to_payload())
        self.conversation.add_assistant(reply)

        logger.debug(f"Reply contained {len(parse_directives(reply))} directive(s); "
                     f"transcript now has {len(self.conversation)} messages")
        for talk in iter_talk_segments(reply):
            print(f"{CLR_YELLOW}{talk}{CLR_RESET}")
        return reply

    def _execute_step(self, command: str) -> None:
        """Run one command and append its result to the transcript."""
        if self.confirm is not None and not self.confirm(command):
            logger.command(f"Skipped: {command}")
            self.conversation.add_user(wrap_command_result(DECLINED_RESULT))
            return

        print(f"{CLR_GREEN}Running:{CLR_RESET} {command}")

        try:
            result = self.executor.execute(command)
            content = result.combined_output
        except OSError as e:
            error = f"Error executing command: {e}"
            print(f"{CLR_RED}{error}{CLR_RESET}")
            content = f"ERROR: {error}"

        self.conversation.add_user(wrap_command_result(content))


def create_command_chain(conversation: Conversation, llm_client, executor,
                         max_steps: Optional[int] = None,
                         confirm: Optional[Callable[[str], bool]] = None) -> CommandChain:
    """Create a command chain bound to one conversation."""
    return CommandChain(conversation, llm_client, executor, max_steps=max_steps, confirm=confirm)
