"""Click command for creating a starter template description."""

import click

from modgen.error_handling import with_error_handling
from modgen.init_cmd.starter import write_starter_template


@click.command("init")
@click.argument("template", required=False)
@click.option("--root-dir", default="./src/modules", show_default=True,
              help="Output root directory written into the template.")
@click.option("--templates-dir", default=None, help="Directory holding content template files.")
@click.option("--force", is_flag=True, help="Overwrite an existing template file.")
def init_cmd(template, root_dir, templates_dir, force):
    """Write a starter template description to TEMPLATE (default: ./mgrc.yaml)."""
    with with_error_handling():
        path = write_starter_template(
            template, root_dir=root_dir, templates_dir=templates_dir, force=force,
        )
    click.echo(f"Created template: {path}")
