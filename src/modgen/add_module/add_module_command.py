"""AddModuleCommand encapsulates the module generation workflow."""

import dataclasses
import os

import click

from modgen.add_module.prompts import PromptConfig
from modgen.add_module.template_loader import load_template
from modgen.add_module.tree_materializer import TreeMaterializer
from modgen.add_module.variable_resolver import VariableResolver


class AddModuleCommand:
    """Generates a module from a template description.

    Loads the template, resolves every variable, then materializes each
    top-level folder under the configured root directory. Errors propagate
    as ModgenError subclasses; nothing here terminates the process.
    """

    def __init__(self, opts, cwd=None, *, prompt_config=None):
        self.opts = opts
        self.cwd = cwd or os.getcwd()
        self.prompt_config = dataclasses.replace(
            prompt_config or PromptConfig(), non_interactive=opts.non_interactive,
        )

    def execute(self) -> str:
        """Run the generation and return the output root directory."""
        template = load_template(self.opts.template_path)
        configs = template.configs

        root_dir = os.path.abspath(os.path.join(self.cwd, configs.root_dir or self.cwd))
        templates_dir = (
            os.path.abspath(os.path.join(self.cwd, configs.templates_dir))
            if configs.templates_dir else None
        )

        resolver = VariableResolver(templates_dir, self.cwd, config=self.prompt_config)
        variables = resolver.resolve(template.variables, configs.defaults)

        materializer = TreeMaterializer(
            variables, templates_dir, self.cwd,
            output=self.prompt_config.output, dry_run=self.opts.dry_run,
        )
        materializer.ensure_directory(root_dir)
        for folder in template.folders:
            materializer.materialize(folder, root_dir)

        click.echo(f"Module generation complete in directory: {root_dir}",
                   file=self.prompt_config.output)
        return root_dir
