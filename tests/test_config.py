# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# tests/test_config.py

from pathlib import Path

import pytest

from sgit.config.manager import UserConfig, load_user_config
from sgit.system.exceptions import ConfigError


class TestUserConfig:
    def test_defaults_without_any_file(self):
        config = load_user_config()
        assert config.git_executable == "git"
        assert config.log_short_limit == 20
        assert config.log_full_limit == 40
        assert config.show_hints is True
        assert config.local_log is None

    def test_explicit_override(self, sgit_config_dir):
        (sgit_config_dir / "sgit.yml").write_text("git_executable: /usr/local/bin/git\nlog_short_limit: 5\n")
        config = load_user_config()
        assert config.git_executable == "/usr/local/bin/git"
        assert config.log_short_limit == 5
        assert config.log_full_limit == 40

    def test_later_locations_win(self, isolated_config, sgit_config_dir, tmp_path, monkeypatch):
        user_dir = isolated_config / ".config" / "sgit"
        user_dir.mkdir(parents=True)
        (user_dir / "sgit.yml").write_text("show_hints: false\nlog_full_limit: 10\n")

        xdg = tmp_path / "xdg"
        (xdg / "sgit").mkdir(parents=True)
        (xdg / "sgit" / "sgit.yml").write_text("log_full_limit: 15\n")
        monkeypatch.setenv("XDG_CONFIG_HOME", str(xdg))

        (sgit_config_dir / "sgit.yml").write_text("log_short_limit: 3\n")

        config = load_user_config()
        assert config.show_hints is False
        assert config.log_full_limit == 15
        assert config.log_short_limit == 3

    def test_empty_file_uses_defaults(self, sgit_config_dir):
        (sgit_config_dir / "sgit.yml").write_text("")
        assert load_user_config() == UserConfig()

    def test_invalid_yaml(self, sgit_config_dir):
        (sgit_config_dir / "sgit.yml").write_text("log_short_limit: [unclosed\n")
        with pytest.raises(ConfigError, match="Failed to read"):
            load_user_config()

    def test_not_a_mapping(self, sgit_config_dir):
        (sgit_config_dir / "sgit.yml").write_text("- just\n- a list\n")
        with pytest.raises(ConfigError, match="YAML mapping"):
            load_user_config()

    @pytest.mark.parametrize("content", ["log_short_limit: 0\n", "log_full_limit: lots\n"])
    def test_invalid_values(self, sgit_config_dir, content):
        (sgit_config_dir / "sgit.yml").write_text(content)
        with pytest.raises(ConfigError, match="Invalid sgit configuration"):
            load_user_config()

    def test_local_log_is_a_path(self, sgit_config_dir):
        (sgit_config_dir / "sgit.yml").write_text("local_log: /tmp/sgit-logs\n")
        assert load_user_config().local_log == Path("/tmp/sgit-logs")
