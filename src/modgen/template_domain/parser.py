"""Parse a loaded template description (nested dicts/lists) into domain objects."""

from modgen.errors import TemplateError
from modgen.template_domain.file_spec import FileSpec
from modgen.template_domain.folder_spec import FolderSpec
from modgen.template_domain.template import Configs, Template
from modgen.template_domain.variables import (
    Defaults,
    FlatVariables,
    SplitVariables,
    VariableSpec,
)


def parse(data) -> Template:
    """Build a Template from the mapping produced by the YAML loader.

    Raises:
        TemplateError: If a section does not have the expected shape, or a
            name is declared both as a filepath and as a value variable.
    """
    if not isinstance(data, dict):
        raise TemplateError("Template description must be a mapping")
    if "folders" not in data:
        raise TemplateError("Template description has no 'folders' section")

    variables = _parse_variables(data.get("variables"))
    _reject_duplicate_names(variables)

    return Template(
        folders=_parse_folder_list(data["folders"], "folders"),
        configs=_parse_configs(data.get("configs"), variables),
        variables=variables,
    )


def _parse_variables(raw) -> VariableSpec:
    if raw is None:
        return FlatVariables()
    if isinstance(raw, list):
        return FlatVariables(names=_names(raw, "variables"))
    if isinstance(raw, dict):
        return SplitVariables(
            filepaths=_names(raw.get("filepaths") or [], "variables.filepaths"),
            values=_names(raw.get("value") or [], "variables.value"),
        )
    raise TemplateError("'variables' must be a list of names or a mapping")


def _names(raw, where: str) -> tuple[str, ...]:
    if not isinstance(raw, list):
        raise TemplateError(f"'{where}' must be a list of names")
    if any(name is None or name == "" for name in raw):
        raise TemplateError(f"'{where}' contains an empty name")
    return tuple(_as_str(name) for name in raw)


def _reject_duplicate_names(variables: VariableSpec) -> None:
    duplicates = sorted(set(variables.filepath_names) & set(variables.value_names))
    if duplicates:
        raise TemplateError(
            f"Variables declared as both filepaths and value: {', '.join(duplicates)}"
        )


def _parse_configs(raw, variables: VariableSpec) -> Configs:
    if raw is None:
        return Configs()
    if not isinstance(raw, dict):
        raise TemplateError("'configs' must be a mapping")
    return Configs(
        root_dir=_optional_str(raw.get("rootDir")),
        templates_dir=_optional_str(raw.get("templatesDir")),
        defaults=_parse_defaults(raw.get("defaults"), variables),
    )


def _parse_defaults(raw, variables: VariableSpec) -> Defaults:
    """Read defaults in the shape matching the variable declaration.

    A flat variable list takes a flat ``name: default`` mapping; a split
    declaration takes ``filepaths`` and ``value`` sub-mappings.
    """
    if raw is None:
        return Defaults()
    if isinstance(variables, FlatVariables):
        return Defaults(values=_string_mapping(raw, "configs.defaults"))
    if not isinstance(raw, dict):
        raise TemplateError("'configs.defaults' must be a mapping")
    return Defaults(
        filepaths=_string_mapping(raw.get("filepaths") or {}, "configs.defaults.filepaths"),
        values=_string_mapping(raw.get("value") or {}, "configs.defaults.value"),
    )


def _string_mapping(raw, where: str) -> dict[str, str]:
    if not isinstance(raw, dict):
        raise TemplateError(f"'{where}' must be a mapping")
    return {str(key): _as_str(value) for key, value in raw.items() if value is not None}


def _parse_folder_list(raw, where: str) -> tuple[FolderSpec, ...]:
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise TemplateError(f"'{where}' must be a list of folders")
    return tuple(
        _parse_folder(item, f"{where}[{i}]") for i, item in enumerate(raw)
    )


def _parse_folder(raw, where: str) -> FolderSpec:
    if not isinstance(raw, dict):
        raise TemplateError(f"'{where}' must be a mapping")
    return FolderSpec(
        name=_optional_str(raw.get("name")),
        files=_parse_file_list(raw.get("files"), f"{where}.files"),
        folders=_parse_folder_list(raw.get("folders"), f"{where}.folders"),
    )


def _parse_file_list(raw, where: str) -> tuple[FileSpec, ...]:
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise TemplateError(f"'{where}' must be a list of files")
    return tuple(_parse_file(item, f"{where}[{i}]") for i, item in enumerate(raw))


def _parse_file(raw, where: str) -> FileSpec:
    if not isinstance(raw, dict) or raw.get("name") in (None, ""):
        raise TemplateError(f"'{where}' must be a mapping with a 'name'")
    return FileSpec(
        name=_as_str(raw["name"]),
        content=_optional_str(raw.get("content")),
        file_path=_optional_str(raw.get("filePath")),
    )


def _optional_str(value) -> str | None:
    if value is None or value == "":
        return None
    return _as_str(value)


def _as_str(value) -> str:
    return value if isinstance(value, str) else str(value)
