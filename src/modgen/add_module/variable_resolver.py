"""Variable resolver: collects the value of every declared variable before generation."""

import os

from modgen.add_module.content_loader import read_text_file, resolve_template_file
from modgen.add_module.prompts import PromptConfig
from modgen.errors import MissingFileError, TemplateError
from modgen.template_domain.variables import Defaults, VariableSpec


class VariableResolver:
    """Builds the name -> value mapping used for placeholder substitution.

    Filepath variables are asked for first, then value variables, each in
    declaration order. A filepath variable is bound to the full text of the
    file the operator points at; a value variable to the typed-in string.
    """

    def __init__(self, templates_dir: str | None = None, cwd: str | None = None, *, config=None):
        self._templates_dir = templates_dir
        self._cwd = cwd
        self._config = config or PromptConfig()

    def resolve(self, variables: VariableSpec, defaults: Defaults) -> dict[str, str]:
        resolved: dict[str, str] = {}
        for name in variables.filepath_names:
            resolved[name] = self.resolve_filepath_variable(name, defaults.filepaths.get(name))
        for name in variables.value_names:
            resolved[name] = self.resolve_value_variable(name, defaults.values.get(name))
        return resolved

    def resolve_filepath_variable(self, name: str, default_path: str | None = None) -> str:
        """Ask for a file path and return the contents of that file.

        Raises:
            MissingFileError: If the resolved path does not exist.
        """
        answer = self._ask(f"Please provide a file path for {name}", name, default_path)
        path = resolve_template_file(answer, self._templates_dir, self._cwd)
        if not os.path.exists(path):
            raise MissingFileError(f"File not found at path: {path}", path)
        return read_text_file(path, f"Error reading file for {name}")

    def resolve_value_variable(self, name: str, default: str | None = None) -> str:
        return self._ask(f"Please provide a value for {name}", name, default)

    def _ask(self, message: str, name: str, default: str | None) -> str:
        if self._config.non_interactive:
            if default is None:
                raise TemplateError(f"No default for variable '{name}' in non-interactive mode")
            return default
        return self._config.input_fn(message, default)
