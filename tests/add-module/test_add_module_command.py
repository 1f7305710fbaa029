"""Tests for AddModuleCommand: the end-to-end generation workflow."""

import textwrap

import pytest

from modgen.add_module.add_module_command import AddModuleCommand
from modgen.add_module.add_module_opts import AddModuleOpts
from modgen.errors import MissingFileError

SPLIT_TEMPLATE = textwrap.dedent("""\
    configs:
      rootDir: ./generated
      templatesDir: ./template-module
      defaults:
        filepaths:
          entityTypeDef: ./types/user.ts
        value:
          entityName: User
          moduleName: user
    variables:
      filepaths: [entityTypeDef]
      value: [entityName, moduleName]
    folders:
      - name: $moduleName
        files:
          - name: types.ts
            filePath: types-template.ts
        folders:
          - name: internal
            files:
              - name: $moduleName-reader.ts
                filePath: internal/reader-template.ts
      - files:
          - name: $moduleName.md
            content: "# $entityName"
""")


def _write_project(tmp_path, template_text=SPLIT_TEMPLATE):
    module_dir = tmp_path / "template-module"
    (module_dir / "internal").mkdir(parents=True)
    (module_dir / "types").mkdir()
    (module_dir / "types-template.ts").write_text("export $entityTypeDef\n", encoding="utf-8")
    (module_dir / "internal" / "reader-template.ts").write_text(
        "import $entityNameRepository from \"./store/$moduleName-repository\";\n",
        encoding="utf-8",
    )
    (module_dir / "types" / "user.ts").write_text("type User = { id: string };", encoding="utf-8")
    template_path = tmp_path / "mgrc.yaml"
    template_path.write_text(template_text, encoding="utf-8")
    return str(template_path)


class TestAddModuleCommand:

    def test_generates_tree_with_defaults(self, tmp_path, prompt_config_for):
        template_path = _write_project(tmp_path)
        config, _ = prompt_config_for(accept_defaults=True)

        root = AddModuleCommand(
            AddModuleOpts(template_path=template_path), cwd=str(tmp_path), prompt_config=config,
        ).execute()

        generated = tmp_path / "generated"
        assert root == str(generated)
        assert (generated / "user" / "types.ts").read_text(encoding="utf-8") == (
            "export type User = { id: string };\n"
        )
        assert (generated / "user" / "internal" / "user-reader.ts").read_text(encoding="utf-8") == (
            "import UserRepository from \"./store/user-repository\";\n"
        )
        assert (generated / "user.md").read_text(encoding="utf-8") == "# User"

    def test_typed_answers_override_defaults(self, tmp_path, prompt_config_for):
        template_path = _write_project(tmp_path)
        config, _ = prompt_config_for(["./types/user.ts", "Order", "order"])

        AddModuleCommand(
            AddModuleOpts(template_path=template_path), cwd=str(tmp_path), prompt_config=config,
        ).execute()

        assert (tmp_path / "generated" / "order" / "internal" / "order-reader.ts").is_file()

    def test_prints_completion_message(self, tmp_path, prompt_config_for, output):
        template_path = _write_project(tmp_path)
        config, _ = prompt_config_for(accept_defaults=True)

        AddModuleCommand(
            AddModuleOpts(template_path=template_path), cwd=str(tmp_path), prompt_config=config,
        ).execute()

        last_line = output.getvalue().splitlines()[-1]
        assert last_line == f"Module generation complete in directory: {tmp_path / 'generated'}"

    def test_root_dir_defaults_to_cwd(self, tmp_path, prompt_config_for):
        template_path = tmp_path / "mgrc.yaml"
        template_path.write_text(
            "variables: [x]\nfolders:\n  - name: out\n    files:\n"
            "      - name: $x.txt\n        content: hello $x\n",
            encoding="utf-8",
        )
        config, _ = prompt_config_for(["world"])

        AddModuleCommand(
            AddModuleOpts(template_path=str(template_path)), cwd=str(tmp_path),
            prompt_config=config,
        ).execute()

        assert (tmp_path / "out" / "world.txt").read_text(encoding="utf-8") == "hello world"

    def test_missing_filepath_variable_writes_nothing(self, tmp_path, prompt_config_for):
        template_path = _write_project(tmp_path)
        config, _ = prompt_config_for(["./types/missing.ts", "User", "user"])

        with pytest.raises(MissingFileError):
            AddModuleCommand(
                AddModuleOpts(template_path=template_path), cwd=str(tmp_path),
                prompt_config=config,
            ).execute()

        assert not (tmp_path / "generated").exists()

    def test_dry_run_writes_nothing(self, tmp_path, prompt_config_for, output):
        template_path = _write_project(tmp_path)
        config, _ = prompt_config_for(accept_defaults=True)

        AddModuleCommand(
            AddModuleOpts(template_path=template_path, dry_run=True), cwd=str(tmp_path),
            prompt_config=config,
        ).execute()

        assert not (tmp_path / "generated").exists()
        assert "Would create file:" in output.getvalue()

    def test_non_interactive_option_applies_to_injected_config(self, tmp_path, prompt_config_for):
        template_path = _write_project(tmp_path)
        config, scripted = prompt_config_for([])

        command = AddModuleCommand(
            AddModuleOpts(template_path=template_path, non_interactive=True), cwd=str(tmp_path),
            prompt_config=config,
        )
        command.execute()

        assert command.prompt_config.non_interactive is True
        assert scripted.prompts == []
        assert (tmp_path / "generated" / "user.md").read_text(encoding="utf-8") == "# User"
