"""Options dataclass for the add-module command."""

from dataclasses import dataclass


@dataclass
class AddModuleOpts:
    """All options for the add-module command."""

    template_path: str
    non_interactive: bool = False
    dry_run: bool = False
