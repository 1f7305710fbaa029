"""Click command for generating a module from a template description."""

import click

from modgen.add_module.add_module_command import AddModuleCommand
from modgen.add_module.add_module_opts import AddModuleOpts
from modgen.add_module.template_loader import ADD_MODULE_COMMAND, resolve_template_path
from modgen.error_handling import with_error_handling


@click.command(ADD_MODULE_COMMAND)
@click.argument("template", required=False, envvar="MODGEN_TEMPLATE")
@click.option("--non-interactive", is_flag=True, help="Use configured defaults instead of prompting.")
@click.option("--dry-run", is_flag=True, help="Show what would be created without writing anything.")
def add_module_cmd(template, non_interactive, dry_run):
    """Generate a module from TEMPLATE (default: ./mgrc.yaml)."""
    opts = AddModuleOpts(
        template_path=resolve_template_path(ADD_MODULE_COMMAND, template),
        non_interactive=non_interactive,
        dry_run=dry_run,
    )
    with with_error_handling():
        AddModuleCommand(opts).execute()
