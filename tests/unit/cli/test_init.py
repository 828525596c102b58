"""Unit tests for the init CLI command."""

import tomllib
from pathlib import Path

import pytest
from osutil.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


class TestInitCommand:
    """Tests for osutil init."""

    def test_writes_config(self, tmp_path: Path) -> None:
        """Credentials are written to the given path."""
        target = tmp_path / "osutil.conf"

        result = runner.invoke(
            app, ["init", "-u", "jdoe", "--password", "secret", "--config", str(target)]
        )

        assert result.exit_code == 0
        assert "Config written" in result.stdout
        assert tomllib.loads(target.read_text()) == {"username": "jdoe", "password": "secret"}

    def test_prompts_for_password(self, tmp_path: Path) -> None:
        """The password is prompted for when not given."""
        target = tmp_path / "osutil.conf"

        result = runner.invoke(
            app, ["init", "-u", "jdoe", "--config", str(target)], input="secret\nsecret\n"
        )

        assert result.exit_code == 0
        assert tomllib.loads(target.read_text())["password"] == "secret"

    def test_refuses_overwrite(self, tmp_path: Path) -> None:
        """An existing file is kept without --force."""
        target = tmp_path / "osutil.conf"
        target.write_text('username = "old"\npassword = "old"\n')

        result = runner.invoke(
            app, ["init", "-u", "jdoe", "-p", "secret", "--config", str(target)]
        )

        assert result.exit_code == 1
        assert "already exists" in result.output
        assert "old" in target.read_text()

    def test_force_overwrites(self, tmp_path: Path) -> None:
        """--force replaces an existing file."""
        target = tmp_path / "osutil.conf"
        target.write_text('username = "old"\npassword = "old"\n')

        result = runner.invoke(
            app, ["init", "-u", "jdoe", "-p", "secret", "-c", str(target), "--force"]
        )

        assert result.exit_code == 0
        assert tomllib.loads(target.read_text())["username"] == "jdoe"

    def test_default_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without --config the XDG config file is written."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        result = runner.invoke(app, ["init", "-u", "jdoe", "-p", "secret"])

        assert result.exit_code == 0
        assert (tmp_path / "osutil" / "osutil.conf").exists()
