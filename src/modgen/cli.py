"""Top-level Click group for the modgen CLI."""

import click

from modgen.add_module.cli import add_module_cmd
from modgen.add_module.template_loader import ADD_MODULE_COMMAND
from modgen.init_cmd.cli import init_cmd


class DefaultCommandGroup(click.Group):
    """Group that runs a default command when the first argument is not a command.

    ``modgen`` and ``modgen path/to/template.yaml`` both dispatch to
    ``modgen add-module [...]``.
    """

    def __init__(self, *args, default_command=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.default_command = default_command

    def parse_args(self, ctx, args):
        if self.default_command and _needs_default(args, self.commands, ctx.help_option_names):
            args = [self.default_command, *args]
        return super().parse_args(ctx, args)


def _needs_default(args, commands, help_options):
    if not args:
        return True
    return args[0] not in commands and args[0] not in help_options


@click.group(cls=DefaultCommandGroup, default_command=ADD_MODULE_COMMAND)
def main():
    """modgen - generate modules from YAML template descriptions."""


main.add_command(add_module_cmd)
main.add_command(init_cmd)
