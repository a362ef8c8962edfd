"""Directive parsing for model output in terminal174.

The model is asked to wrap narration in ``<talk>`` tags and shell commands in
``<run_command>`` tags. Each tag is matched independently and its interior is
returned verbatim. Unterminated or mismatched tags simply produce nothing.
"""

import re
from dataclasses import dataclass
from typing import Iterator, List

from ..constants import TALK_TAG, RUN_COMMAND_TAG

TALK_PATTERN = re.compile(rf"<{TALK_TAG}>(.*?)</{TALK_TAG}>", re.DOTALL)
RUN_COMMAND_PATTERN = re.compile(rf"<{RUN_COMMAND_TAG}>(.*?)</{RUN_COMMAND_TAG}>", re.DOTALL)

DIRECTIVE_TALK = "talk"
DIRECTIVE_COMMAND = "command"


@dataclass(frozen=True)
class Directive:
    """A talk or command instruction extracted from model output."""
    kind: str
    text: str

    @property
    def is_command(self) -> bool:
        return self.kind == DIRECTIVE_COMMAND


def iter_talk_segments(llm_output: str) -> Iterator[str]:
    """Yield the interior of every <talk> tag, left to right."""
    for match in TALK_PATTERN.finditer(llm_output):
        yield match.group(1)


def iter_run_commands(llm_output: str) -> Iterator[str]:
    """Yield the interior of every <run_command> tag, left to right."""
    for match in RUN_COMMAND_PATTERN.finditer(llm_output):
        yield match.group(1)


def parse_directives(llm_output: str) -> List[Directive]:
    """Extract all directives from model output in order of appearance."""
    found = [
        (match.start(), Directive(DIRECTIVE_TALK, match.group(1)))
        for match in TALK_PATTERN.finditer(llm_output)
    ]
    found.extend(
        (match.start(), Directive(DIRECTIVE_COMMAND, match.group(1)))
        for match in RUN_COMMAND_PATTERN.finditer(llm_output)
    )
    found.sort(key=lambda item: item[0])
    return [directive for _, directive in found]
