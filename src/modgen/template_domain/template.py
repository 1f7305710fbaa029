"""Template aggregate root: configuration, variable declaration and folder tree."""

from dataclasses import dataclass, field

from modgen.template_domain.folder_spec import FolderSpec
from modgen.template_domain.variables import Defaults, FlatVariables, VariableSpec


@dataclass(frozen=True)
class Configs:
    root_dir: str | None = None
    templates_dir: str | None = None
    defaults: Defaults = field(default_factory=Defaults)


@dataclass(frozen=True)
class Template:
    folders: tuple[FolderSpec, ...]
    configs: Configs = field(default_factory=Configs)
    variables: VariableSpec = field(default_factory=FlatVariables)
