"""Prompt I/O configuration for interactive variable collection."""

import sys
from dataclasses import dataclass, field
from typing import Callable, TextIO

import click


def click_input(message: str, default: str | None) -> str:
    """Ask for a line of input, offering *default* when it is not empty."""
    if not default:
        return click.prompt(message, default="", show_default=False)
    return click.prompt(message, default=default)


@dataclass
class PromptConfig:
    """I/O configuration for prompts and the generation trace."""

    input_fn: Callable[[str, str | None], str] = field(default_factory=lambda: click_input)
    output: TextIO = field(default_factory=lambda: sys.stdout)
    non_interactive: bool = False
