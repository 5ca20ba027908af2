"""Prompter reading answers from standard input."""

import logging
from typing import Callable

from tf_lock_checker.domain.interfaces import Prompter

logger = logging.getLogger(__name__)


class ConsolePrompter(Prompter):
    """Prompter backed by the built-in ``input``."""

    def __init__(self, read_line: Callable[[str], str] = input):
        self._read_line = read_line

    def ask(self, question: str) -> str:
        # Closed stdin reads as an empty answer, which every prompt treats as "no".
        try:
            answer = self._read_line(question)
        except EOFError:
            logger.debug("End of input while asking: %s", question)
            print()
            return ""
        return answer.strip()
