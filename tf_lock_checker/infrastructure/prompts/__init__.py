"""Operator prompt implementations."""

from tf_lock_checker.infrastructure.prompts.console_prompter import ConsolePrompter

__all__ = [
    "ConsolePrompter",
]
