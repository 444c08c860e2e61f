"""Tests for config CLI commands."""

from conftest import TEST_TOKEN
from typer.testing import CliRunner

from upbank.cli.main import app
from upbank.cli.state import CLIState


class TestConfigSet:
    def test_set_token(self, runner: CliRunner, unconfigured_state: CLIState):
        result = runner.invoke(
            app, ["config", "set", "--token", "up:yeah:new"], obj=unconfigured_state
        )

        assert result.exit_code == 0
        assert "API token set" in result.output
        assert unconfigured_state.store.get("api_token") == "up:yeah:new"
        assert unconfigured_state.store.is_configured()

    def test_set_replaces_existing_token(
        self, runner: CliRunner, cli_state: CLIState
    ):
        result = runner.invoke(
            app, ["config", "set", "--token", "up:yeah:rotated"], obj=cli_state
        )

        assert result.exit_code == 0
        assert cli_state.store.get("api_token") == "up:yeah:rotated"

    def test_set_without_token_fails(
        self, runner: CliRunner, unconfigured_state: CLIState
    ):
        result = runner.invoke(app, ["config", "set"], obj=unconfigured_state)

        assert result.exit_code == 1
        assert "No token provided" in result.output
        assert not unconfigured_state.store.path.exists()


    def test_set_over_corrupt_config_suggests_clear(
        self, runner: CliRunner, unconfigured_state: CLIState
    ):
        path = unconfigured_state.store.path
        path.parent.mkdir(parents=True)
        path.write_text("api_token: [unterminated\n")

        result = runner.invoke(
            app, ["config", "set", "--token", "up:yeah:new"], obj=unconfigured_state
        )

        assert result.exit_code == 1
        assert "upbank config clear" in result.output

        runner.invoke(app, ["config", "clear", "--yes"], obj=unconfigured_state)
        result = runner.invoke(
            app, ["config", "set", "--token", "up:yeah:new"], obj=unconfigured_state
        )

        assert result.exit_code == 0
        assert unconfigured_state.store.get("api_token") == "up:yeah:new"


class TestConfigShow:
    def test_show_masks_token(self, runner: CliRunner, cli_state: CLIState):
        result = runner.invoke(app, ["config", "show"], obj=cli_state)

        assert result.exit_code == 0
        assert TEST_TOKEN not in result.output
        assert "*" * 20 in result.output
        assert "not set" not in result.output

    def test_show_not_set(self, runner: CliRunner, unconfigured_state: CLIState):
        result = runner.invoke(app, ["config", "show"], obj=unconfigured_state)

        assert result.exit_code == 0
        assert "not set" in result.output
        assert "*" * 20 not in result.output

    def test_show_corrupt_config(
        self, runner: CliRunner, unconfigured_state: CLIState
    ):
        path = unconfigured_state.store.path
        path.parent.mkdir(parents=True)
        path.write_text("[not, a, mapping]\n")

        result = runner.invoke(app, ["config", "show"], obj=unconfigured_state)

        assert result.exit_code == 1
        assert "expected a mapping" in result.output


class TestConfigClear:
    def test_clear_with_yes(self, runner: CliRunner, cli_state: CLIState):
        result = runner.invoke(app, ["config", "clear", "--yes"], obj=cli_state)

        assert result.exit_code == 0
        assert "Configuration cleared" in result.output
        assert not cli_state.store.is_configured()

    def test_clear_prompts_and_can_be_cancelled(
        self, runner: CliRunner, cli_state: CLIState
    ):
        result = runner.invoke(app, ["config", "clear"], obj=cli_state, input="n\n")

        assert result.exit_code == 0
        assert "Cancelled" in result.output
        assert cli_state.store.is_configured()

    def test_clear_prompt_confirmed(self, runner: CliRunner, cli_state: CLIState):
        result = runner.invoke(app, ["config", "clear"], obj=cli_state, input="y\n")

        assert result.exit_code == 0
        assert not cli_state.store.is_configured()


def test_config_path(runner: CliRunner, cli_state: CLIState):
    result = runner.invoke(app, ["config", "path"], obj=cli_state)

    assert result.exit_code == 0
    assert result.output.strip() == str(cli_state.store.path)
