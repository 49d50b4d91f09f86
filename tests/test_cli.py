"""Tests for the command-line interface"""
from argparse import Namespace
from unittest.mock import patch

import pytest

from workhere.cli.args import parse_args
from workhere.cli.main import main
from workhere.config import Config
from workhere.models.options import CreateOptions, RemoveOptions


class TestParseArgs:
    """Test argument parsing."""

    def test_add_defaults(self):
        args = parse_args(["add"])
        assert args.command == "add"
        assert args.branch is None
        assert args.script is None
        assert args.prefix is False
        assert args.dir is None

    def test_add_with_options(self):
        args = parse_args(["add", "feature", "-s", "make setup", "--prefix", "--dir", "trees"])
        assert args.branch == "feature"
        assert args.script == "make setup"
        assert args.prefix is True
        assert args.dir == "trees"

    @pytest.mark.parametrize("command", ["remove", "rm"])
    def test_remove_and_alias(self, command):
        args = parse_args([command, "feature", "-f"])
        assert args.command == command
        assert args.branch == "feature"
        assert args.force is True

    def test_remove_requires_branch(self):
        with pytest.raises(SystemExit):
            parse_args(["remove"])

    def test_reset(self):
        args = parse_args(["reset", "--force"])
        assert args.command == "reset"
        assert args.force is True

    @pytest.mark.parametrize("command", ["list", "ls"])
    def test_list_and_alias(self, command):
        assert parse_args([command]).command == command

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            parse_args(["--version"])
        assert exc_info.value.code == 0
        assert "workhere" in capsys.readouterr().out


class TestMain:
    """Test main dispatch."""

    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch):
        monkeypatch.delenv("WORKHERE_DIR", raising=False)
        monkeypatch.delenv("WORKHERE_LOG_LEVEL", raising=False)

    @patch("workhere.cli.main.WorktreeManager")
    def test_add(self, mock_manager_cls):
        mock_manager_cls.return_value.add.return_value = 0

        assert main(["add", "feature", "-s", "make", "-p"]) == 0

        mock_manager_cls.return_value.add.assert_called_once_with(
            "feature", CreateOptions(script="make", prefix=True, dir=None)
        )

    @patch("workhere.cli.main.WorktreeManager")
    def test_rm_alias(self, mock_manager_cls):
        mock_manager_cls.return_value.remove.return_value = 1

        assert main(["rm", "feature", "--force"]) == 1

        mock_manager_cls.return_value.remove.assert_called_once_with(
            "feature", RemoveOptions(force=True, dir=None)
        )

    @patch("workhere.cli.main.WorktreeManager")
    def test_reset(self, mock_manager_cls):
        mock_manager_cls.return_value.reset.return_value = 0

        assert main(["reset"]) == 0
        mock_manager_cls.return_value.reset.assert_called_once_with(RemoveOptions())

    @patch("workhere.cli.main.WorktreeManager")
    def test_ls_uses_env_dir(self, mock_manager_cls, monkeypatch):
        monkeypatch.setenv("WORKHERE_DIR", "/trees")
        mock_manager_cls.return_value.list_worktrees.return_value = 0

        assert main(["ls"]) == 0
        mock_manager_cls.return_value.list_worktrees.assert_called_once_with("/trees")

    @pytest.mark.parametrize("argv", [["remove"], ["rm"], ["add", "--bogus"], ["frobnicate"]])
    def test_usage_error_exits_one(self, argv, capsys):
        assert main(argv) == 1
        assert "usage" in capsys.readouterr().err

    def test_version_exits_zero(self, capsys):
        assert main(["--version"]) == 0
        assert "workhere" in capsys.readouterr().out

    def test_no_command(self, capsys):
        assert main([]) == 1
        assert "usage" in capsys.readouterr().err

    @patch("workhere.cli.main.WorktreeManager")
    def test_unexpected_error(self, mock_manager_cls, capsys):
        mock_manager_cls.return_value.list_worktrees.side_effect = RuntimeError("boom")

        assert main(["list"]) == 1
        assert "Unexpected error: boom" in capsys.readouterr().err

    @patch("workhere.cli.main.WorktreeManager")
    def test_keyboard_interrupt(self, mock_manager_cls, capsys):
        mock_manager_cls.return_value.reset.side_effect = KeyboardInterrupt

        assert main(["reset"]) == 1
        assert "Operation cancelled by user" in capsys.readouterr().err

    def test_invalid_log_level(self, monkeypatch, capsys):
        monkeypatch.setenv("WORKHERE_LOG_LEVEL", "loud")

        assert main(["list"]) == 1
        assert "log_level" in capsys.readouterr().err


class TestConfig:
    """Test Config validation and construction."""

    def test_defaults(self):
        config = Config()
        assert config.to_create_options() == CreateOptions()
        assert config.to_remove_options() == RemoveOptions()
        assert config.debug is False

    def test_empty_script_rejected(self):
        with pytest.raises(ValueError, match="script"):
            Config(script="  ")

    def test_empty_dir_rejected(self):
        with pytest.raises(ValueError, match="dir"):
            Config(dir=" ")

    def test_log_level_normalized(self):
        assert Config(log_level="DEBUG").debug is True

    def test_from_args_prefers_command_line_dir(self):
        args = Namespace(command="list", dir="cli-dir")
        config = Config.from_args(args, environ={"WORKHERE_DIR": "env-dir"})
        assert config.dir == "cli-dir"

    def test_from_args_environment(self):
        args = Namespace(command="reset", force=True, dir=None)
        config = Config.from_args(
            args, environ={"WORKHERE_DIR": "env-dir", "WORKHERE_LOG_LEVEL": "info"}
        )
        assert config.to_remove_options() == RemoveOptions(force=True, dir="env-dir")
        assert config.log_level == "info"
