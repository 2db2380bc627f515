"""
Tests for the plugctl CLI.

This test suite covers:
1. Argument parsing
2. Offline commands (info, config)
3. Lifecycle commands against an in-memory host
"""

import tomllib
from unittest.mock import patch

import psycopg
import pytest

from myplugin.host.memory import create_memory_host
from myplugin.host.postgres import ACTIVE_PLUGINS_OPTION, LocalEnvironment
from plugctl.cli import create_parser, main


def memory_host(host_version="6.4", uninstalling=False):
    host = create_memory_host()
    host.environment = LocalEnvironment(
        host.options,
        host_version=host_version,
        plugins_url="https://example.test/wp-content/plugins",
        is_cli=True,
        uninstalling=uninstalling,
    )
    return host


class TestParser:
    """Test argument parsing."""

    def test_host_options(self):
        args = create_parser().parse_args(
            ["uninstall", "--yes", "--table-prefix", "wp_2_", "--multisite"]
        )

        assert args.command == "uninstall"
        assert args.yes is True
        assert args.table_prefix == "wp_2_"
        assert args.multisite is True
        assert args.base_prefix is None

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "plugctl" in capsys.readouterr().out


class TestOfflineCommands:
    """Test commands that need no database."""

    def test_config(self, capsys):
        assert main(["config"]) == 0

        out = capsys.readouterr().out
        assert "[app]" in out
        assert 'capability = "manage_options"' in out

    def test_config_output(self, tmp_path, capsys):
        path = tmp_path / "app.toml"

        assert main(["config", "--output", str(path)]) == 0

        assert "Wrote" in capsys.readouterr().out
        assert tomllib.loads(path.read_text())["app"]["capability"] == "manage_options"

    def test_config_output_unwritable(self, tmp_path, capsys):
        blocker = tmp_path / "blocker"
        blocker.write_text("")

        assert main(["config", "-o", str(blocker / "app.toml")]) == 1

        assert "Failed to write" in capsys.readouterr().err

    def test_info(self, capsys):
        assert main(["info", "--table-prefix", "wp_5_", "--base-prefix", "wp_"]) == 0

        out = capsys.readouterr().out
        assert "myplugin_version" in out
        assert "myplugin_daily_cleanup" in out
        assert "wp_5_myplugin_example" in out
        assert "wp_myplugin_example" in out


class TestLifecycleCommands:
    """Test lifecycle commands with the host builder replaced."""

    def test_activate(self):
        host = memory_host()

        with patch("plugctl.commands.lifecycle.build_host", return_value=host):
            assert main(["activate"]) == 0

        assert host.options.get("myplugin_version") is not None
        assert host.options.get(ACTIVE_PLUGINS_OPTION) == ["myplugin/plugin.py"]

    def test_activate_unsupported_host(self, capsys):
        host = memory_host(host_version="5.0")

        with patch("plugctl.commands.lifecycle.build_host", return_value=host):
            assert main(["activate"]) == 1

        assert "Plugin Activation Error" in capsys.readouterr().err
        assert host.options.get("myplugin_version") is None

    def test_deactivate(self):
        host = memory_host()
        host.environment.activate_plugin("myplugin/plugin.py")

        with patch("plugctl.commands.lifecycle.build_host", return_value=host):
            assert main(["deactivate"]) == 0

        assert host.environment.active_plugins() == []

    def test_uninstall_requires_confirmation(self, capsys):
        with patch("plugctl.commands.lifecycle.build_host") as build_host:
            assert main(["uninstall"]) == 1

        build_host.assert_not_called()
        assert "Refusing to uninstall" in capsys.readouterr().err

    def test_uninstall_keeps_data_by_default(self, capsys):
        host = memory_host(uninstalling=True)

        with patch("plugctl.commands.lifecycle.build_host", return_value=host):
            assert main(["uninstall", "--yes"]) == 0

        assert "Data kept" in capsys.readouterr().out
        assert host.database.statements == []

    def test_uninstall(self, capsys):
        host = memory_host(uninstalling=True)
        host.options.update("myplugin_keep_data_on_uninstall", False)

        with patch("plugctl.commands.lifecycle.build_host", return_value=host):
            assert main(["uninstall", "--yes"]) == 0

        assert "options: 1 removed" in capsys.readouterr().out
        assert host.options.get("myplugin_keep_data_on_uninstall") is None

    @pytest.mark.parametrize("command", ["activate", "deactivate"])
    def test_unreachable_database(self, command, capsys):
        with patch("psycopg.connect", side_effect=psycopg.OperationalError("refused")):
            assert main([command]) == 1

        assert "Error" in capsys.readouterr().err
