"""Tests for the command line entry points."""

import os
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from mcp_jira_confluence import confluence_main, jira_main, main

JIRA_ENV = {
    "JIRA_INSTANCE_URL": "https://test.atlassian.net",
    "JIRA_USER_EMAIL": "test@example.com",
    "JIRA_API_KEY": "test_token",
}


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def no_dotenv():
    """Keep a developer's .env file out of the tests."""
    with patch("mcp_jira_confluence.load_dotenv") as mock_load:
        yield mock_load


@pytest.fixture
def mock_serve():
    with patch("mcp_jira_confluence._serve") as serve:
        yield serve


class TestJiraCommand:
    @pytest.mark.parametrize("missing", sorted(JIRA_ENV))
    def test_missing_env_exits_before_serving(self, runner, mock_serve, missing):
        env = {k: v for k, v in JIRA_ENV.items() if k != missing}

        with patch.dict(os.environ, env, clear=True):
            result = runner.invoke(jira_main, [])

        assert result.exit_code == 1
        assert (
            "Error: JIRA_INSTANCE_URL, JIRA_USER_EMAIL, and JIRA_API_KEY "
            "must be set in the environment." in result.output
        )
        mock_serve.assert_not_called()

    def test_missing_env_does_not_report_startup_operation(self, runner, mock_serve):
        with patch.dict(os.environ, {}, clear=True), patch(
            "mcp_jira_confluence.log_operation"
        ) as mock_operation:
            result = runner.invoke(jira_main, [])

        assert result.exit_code == 1
        mock_operation.assert_not_called()

    def test_serves_jira_server(self, runner, mock_serve):
        with patch.dict(os.environ, JIRA_ENV, clear=True):
            result = runner.invoke(jira_main, [])

        assert result.exit_code == 0, result.output
        mock_serve.assert_called_once()
        app = mock_serve.call_args.args[0]
        assert app.name == "jira-mcp"

    def test_cli_options_override_env(self, runner, mock_serve):
        with patch.dict(os.environ, {}, clear=True):
            result = runner.invoke(
                jira_main,
                [
                    "--jira-url",
                    "https://cli.atlassian.net",
                    "--jira-username",
                    "cli@example.com",
                    "--jira-token",
                    "cli_token",
                    "--read-only",
                ],
            )
            assert os.environ["JIRA_INSTANCE_URL"] == "https://cli.atlassian.net"
            assert os.environ["READ_ONLY_MODE"] == "true"

        assert result.exit_code == 0, result.output
        mock_serve.assert_called_once()

    def test_env_file_is_loaded(self, runner, mock_serve, no_dotenv, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("JIRA_INSTANCE_URL=https://file.atlassian.net\n")

        with patch.dict(os.environ, JIRA_ENV, clear=True):
            runner.invoke(jira_main, ["--env-file", str(env_file)])

        no_dotenv.assert_called_once_with(str(env_file))


class TestConfluenceCommand:
    def test_missing_token_exits_before_serving(self, runner, mock_serve):
        with patch.dict(os.environ, {}, clear=True):
            result = runner.invoke(confluence_main, [])

        assert result.exit_code == 1
        assert "Missing CONFLUENCE_PAT env var" in result.output
        mock_serve.assert_not_called()

    def test_missing_token_does_not_report_startup_operation(self, runner, mock_serve):
        with patch.dict(os.environ, {}, clear=True), patch(
            "mcp_jira_confluence.log_operation"
        ) as mock_operation:
            result = runner.invoke(confluence_main, [])

        assert result.exit_code == 1
        mock_operation.assert_not_called()

    def test_base_url_has_default(self, runner, mock_serve):
        with patch.dict(os.environ, {"CONFLUENCE_PAT": "pat"}, clear=True):
            result = runner.invoke(confluence_main, [])

        assert result.exit_code == 0, result.output
        app = mock_serve.call_args.args[0]
        assert app.name == "Confluence MCP"


class TestGroup:
    def test_group_lists_both_adapters(self, runner):
        result = runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "jira" in result.output
        assert "confluence" in result.output

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])

        assert "1.0.0" in result.output
