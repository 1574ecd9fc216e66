"""Unit tests for the generate command boundary (src.generate).

Tests cover:
- generate_file: config gate before any mutation, plan selection scenarios
- main: argument parsing, env/CLI precedence, exit statuses
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from src.errors import ConfigMissingError, IncompatibleTemplateError, PromptAbortedError
from src.generate import generate_file, main
from src.scaffolder.plans import ClientComponent, GenerationChoice, ServerCRUD, ServerGraphQL


def _snapshot(root: Path) -> set[str]:
    return {p.relative_to(root).as_posix() for p in root.rglob("*")}


# ---------------------------------------------------------------------------
# generate_file
# ---------------------------------------------------------------------------


class TestGenerateFile:
    @pytest.mark.unit
    async def test_missing_config_stops_before_mutation(self, tmp_path, config_for, failing_choose):
        (tmp_path / "server").mkdir()
        before = _snapshot(tmp_path)
        ask = MagicMock()

        with pytest.raises(ConfigMissingError):
            await generate_file(config_for(tmp_path), choose=failing_choose, ask=ask)

        assert _snapshot(tmp_path) == before
        ask.assert_not_called()

    @pytest.mark.unit
    async def test_no_server_generates_component(self, tmp_project_dir, config_for, failing_choose):
        with patch("src.generate.ComponentGenerator.generate", new_callable=AsyncMock) as gen, \
                patch("src.scaffolder.executor.copy_dir") as copy:
            plan = await generate_file(config_for(tmp_project_dir), choose=failing_choose)

        assert plan == ClientComponent()
        gen.assert_awaited_once()
        copy.assert_not_called()

    @pytest.mark.unit
    async def test_no_server_ignores_missing_template(self, tmp_path, config_for, failing_choose):
        (tmp_path / "mevn.json").write_text('{"name": "app"}', encoding="utf-8")
        ask = MagicMock(return_value="Card")

        plan = await generate_file(config_for(tmp_path), choose=failing_choose, ask=ask)

        assert plan == ClientComponent()
        assert (tmp_path / "client" / "src" / "components" / "Card.vue").is_file()

    @pytest.mark.unit
    @pytest.mark.parametrize("template", ["graphql", "rest"])
    async def test_scaffolded_server_generates_component(
        self, server_project_dir, config_for, failing_choose, write_config, template
    ):
        write_config(server_project_dir, template=template)
        (server_project_dir / "server" / "models").mkdir()

        with patch("src.generate.ComponentGenerator.generate", new_callable=AsyncMock) as gen, \
                patch("src.scaffolder.executor.copy_dir") as copy:
            plan = await generate_file(config_for(server_project_dir), choose=failing_choose)

        assert plan == ClientComponent()
        gen.assert_awaited_once()
        copy.assert_not_called()

    @pytest.mark.unit
    async def test_crud_scenario(self, server_project_dir, config_for, scripted_choose, write_config):
        write_config(server_project_dir, template="rest")
        choose = scripted_choose("CRUD Template (server)")

        with patch("src.messages.which", return_value="/usr/bin/npm"), \
                patch("src.scaffolder.executor.PackageInstaller.install", new_callable=AsyncMock) as install:
            plan = await generate_file(config_for(server_project_dir), choose=choose)

        assert isinstance(plan, ServerCRUD)
        server = server_project_dir / "server"
        assert (server / "routes" / "api.js").is_file()
        assert (server / "controllers").is_dir()
        assert (server / "models").is_dir()
        assert (server / ".env").read_text(encoding="utf-8") == "DB_URL=mongodb://localhost:27017"
        install.assert_awaited_once()
        assert install.call_args.args[0] == "mongoose"

    @pytest.mark.unit
    async def test_graphql_scenario(self, graphql_project_dir, config_for, failing_choose):
        with patch("src.scaffolder.executor.PackageInstaller.install", new_callable=AsyncMock) as install:
            plan = await generate_file(
                config_for(graphql_project_dir),
                GenerationChoice.SERVER_FILE,
                choose=failing_choose,
            )

        assert isinstance(plan, ServerGraphQL)
        server = graphql_project_dir / "server"
        assert (server / "graphql").is_dir()
        assert (server / "models").is_dir()
        assert not (server / "routes").exists()
        assert not (server / ".env").exists()
        install.assert_not_called()

    @pytest.mark.unit
    async def test_component_choice_uses_ask(self, server_project_dir, config_for, scripted_choose):
        ask = MagicMock(return_value="TodoList")

        plan = await generate_file(
            config_for(server_project_dir),
            choose=scripted_choose("Component (client)"),
            ask=ask,
        )

        assert plan == ClientComponent()
        assert (server_project_dir / "client" / "src" / "components" / "TodoList.vue").is_file()
        assert not (server_project_dir / "server" / "models").exists()

    @pytest.mark.unit
    async def test_banner_shown_when_enabled(self, tmp_path, config_for, capsys):
        config = config_for(tmp_path, show_banner=True)
        with pytest.raises(ConfigMissingError):
            await generate_file(config)
        assert "MEVN CLI" in capsys.readouterr().out


# ---------------------------------------------------------------------------
# main
# ---------------------------------------------------------------------------


class TestMain:
    @pytest.mark.unit
    def test_success_exits_normally(self, tmp_project_dir):
        with patch("src.generate.generate_file", new_callable=AsyncMock) as run, \
                patch.dict("os.environ", {}, clear=True):
            main(["--project-dir", str(tmp_project_dir), "--no-banner"])

        config, choice = run.call_args.args
        assert config.project_dir == tmp_project_dir
        assert config.show_banner is False
        assert choice is None

    @pytest.mark.unit
    def test_type_flag(self, tmp_project_dir):
        with patch("src.generate.generate_file", new_callable=AsyncMock) as run:
            main(["-d", str(tmp_project_dir), "--type", "crud"])

        assert run.call_args.args[1] is GenerationChoice.SERVER_FILE

    @pytest.mark.unit
    def test_invalid_type_flag(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["--type", "mvc"])
        assert exc_info.value.code == 2

    @pytest.mark.unit
    def test_env_project_dir_overridden_by_flag(self, tmp_path):
        env = {"MEVN_PROJECT_DIR": str(tmp_path / "from-env")}
        with patch("src.generate.generate_file", new_callable=AsyncMock) as run, \
                patch.dict("os.environ", env, clear=True):
            main(["--project-dir", str(tmp_path / "from-flag")])
        assert run.call_args.args[0].project_dir == tmp_path / "from-flag"

    @pytest.mark.unit
    def test_env_project_dir_used(self, tmp_path):
        env = {"MEVN_PROJECT_DIR": str(tmp_path / "from-env")}
        with patch("src.generate.generate_file", new_callable=AsyncMock) as run, \
                patch.dict("os.environ", env, clear=True):
            main([])
        assert run.call_args.args[0].project_dir == tmp_path / "from-env"

    @pytest.mark.unit
    def test_missing_config_exits_1(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--project-dir", str(tmp_path), "--no-banner"])

        assert exc_info.value.code == 1
        assert "No mevn.json file found" in capsys.readouterr().out

    @pytest.mark.unit
    def test_invalid_env_setting_exits_1(self, capsys):
        with patch("src.generate.generate_file", new_callable=AsyncMock) as run, \
                patch.dict("os.environ", {"MEVN_INSTALL_TIMEOUT": "abc"}, clear=True):
            with pytest.raises(SystemExit) as exc_info:
                main(["--no-banner"])

        assert exc_info.value.code == 1
        assert "MEVN_INSTALL_TIMEOUT" in capsys.readouterr().out
        run.assert_not_called()

    @pytest.mark.unit
    def test_incompatible_template_exits_1(self):
        with patch(
            "src.generate.generate_file",
            new_callable=AsyncMock,
            side_effect=IncompatibleTemplateError("graphql"),
        ):
            with pytest.raises(SystemExit) as exc_info:
                main(["--no-banner"])
        assert exc_info.value.code == 1

    @pytest.mark.unit
    def test_prompt_abort_exits_130(self):
        with patch(
            "src.generate.generate_file",
            new_callable=AsyncMock,
            side_effect=PromptAbortedError(),
        ):
            with pytest.raises(SystemExit) as exc_info:
                main(["--no-banner"])
        assert exc_info.value.code == 130
