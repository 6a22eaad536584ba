# ghquick Config Tests
# Tests for configuration loading and validation

from pathlib import Path

import pytest
import yaml

from ghquick.config.defaults import DEFAULT_CONFIG, generate_default_config
from ghquick.config.loader import (
    ConfigError,
    get_config_path,
    load_config,
    save_config,
    write_default_config,
)
from ghquick.config.schema import GhQuickConfig, IdentityConfig, RemoteConfig


class TestGhQuickConfig:
    """Tests for GhQuickConfig schema."""

    def test_defaults(self):
        config = GhQuickConfig()
        assert config.remote.name == "origin"
        assert config.remote.branch == "main"
        assert config.remote.url_template == "https://github.com/{account}/{repo}.git"
        assert config.git.executable == "git"
        assert config.git.timeout is None
        assert config.output.debug is False

    def test_defaults_match_default_dict(self):
        assert GhQuickConfig.model_validate(DEFAULT_CONFIG) == GhQuickConfig()

    def test_user_name_falls_back_to_account(self):
        assert IdentityConfig(account="octocat").get_user_name() == "octocat"
        assert IdentityConfig(account="octocat", user_name="Mona").get_user_name() == "Mona"

    def test_url_template_requires_placeholders(self):
        with pytest.raises(ValueError, match="{repo}"):
            RemoteConfig(url_template="https://github.com/{account}/fixed.git")

    def test_url_template_rejects_unknown_placeholders(self):
        with pytest.raises(ValueError, match="unknown placeholders: host"):
            RemoteConfig(url_template="https://{host}/{account}/{repo}.git")

    def test_url_template_rejects_broken_braces(self):
        with pytest.raises(ValueError, match="not a valid template"):
            RemoteConfig(url_template="https://github.com/{account}/{repo.git")

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValueError):
            GhQuickConfig(git={"timeout": 0})


class TestLoadConfig:
    """Tests for load_config."""

    def test_missing_file_gives_defaults(self, temp_dir: Path):
        config = load_config(temp_dir / "missing.yaml", environ={})
        assert config == GhQuickConfig()

    def test_load_from_file(self, temp_dir: Path):
        path = temp_dir / "config.yaml"
        path.write_text(
            yaml.dump({"identity": {"account": "octocat"}, "remote": {"branch": "dev"}}),
            encoding="utf-8",
        )
        config = load_config(path, environ={})
        assert config.identity.account == "octocat"
        assert config.remote.branch == "dev"
        assert config.remote.name == "origin"

    def test_environment_overrides_account(self, temp_dir: Path):
        path = temp_dir / "config.yaml"
        path.write_text(yaml.dump({"identity": {"account": "from-file"}}), encoding="utf-8")
        config = load_config(path, environ={"GITHUB_USERNAME": "from-env"})
        assert config.identity.account == "from-env"

    def test_empty_file(self, temp_dir: Path):
        path = temp_dir / "config.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path, environ={}) == GhQuickConfig()

    def test_invalid_yaml(self, temp_dir: Path):
        path = temp_dir / "config.yaml"
        path.write_text("identity: [unclosed", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(path, environ={})

    def test_not_a_mapping(self, temp_dir: Path):
        path = temp_dir / "config.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(path, environ={})

    def test_empty_section_with_environment_account(self, temp_dir: Path):
        path = temp_dir / "config.yaml"
        path.write_text("identity:\nremote:\n  branch: dev\n", encoding="utf-8")
        config = load_config(path, environ={"GITHUB_USERNAME": "octocat"})
        assert config.identity.account == "octocat"
        assert config.remote.branch == "dev"
        assert config.remote.name == "origin"

    def test_section_not_a_mapping(self, temp_dir: Path):
        path = temp_dir / "config.yaml"
        path.write_text("identity: foo\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="identity"):
            load_config(path, environ={"GITHUB_USERNAME": "octocat"})

    def test_unknown_url_placeholder_in_file(self, temp_dir: Path):
        path = temp_dir / "config.yaml"
        path.write_text(yaml.dump({"remote": {"url_template": "https://{host}/{account}/{repo}.git"}}), encoding="utf-8")
        with pytest.raises(ConfigError, match="unknown placeholders"):
            load_config(path, environ={})

    def test_invalid_values(self, temp_dir: Path):
        path = temp_dir / "config.yaml"
        path.write_text(yaml.dump({"git": {"timeout": "soon"}}), encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_config(path, environ={})


class TestConfigFiles:
    """Tests for config path, save and default file generation."""

    def test_default_path(self, temp_home: Path):
        assert get_config_path() == temp_home / ".config" / "ghquick" / "config.yaml"

    def test_path_override(self, temp_home: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("GHQUICK_CONFIG", str(temp_home / "custom.yaml"))
        assert get_config_path() == temp_home / "custom.yaml"

    def test_save_and_load(self, temp_dir: Path):
        path = temp_dir / "nested" / "config.yaml"
        config = GhQuickConfig(identity={"account": "octocat"}, git={"timeout": 30})
        save_config(config, path)
        assert load_config(path, environ={}) == config

    def test_generate_default_config(self):
        text = generate_default_config("octocat")
        assert text.startswith("# ghquick Configuration")
        data = yaml.safe_load(text)
        assert data["identity"]["account"] == "octocat"
        assert DEFAULT_CONFIG["identity"]["account"] == ""

    def test_write_default_config(self, temp_dir: Path):
        path = temp_dir / "config.yaml"
        assert write_default_config(path, account="octocat") == (path, True)
        assert load_config(path, environ={}).identity.account == "octocat"

    def test_write_keeps_existing(self, temp_dir: Path):
        path = temp_dir / "config.yaml"
        path.write_text("identity:\n  account: mine\n", encoding="utf-8")
        assert write_default_config(path) == (path, False)
        assert "mine" in path.read_text(encoding="utf-8")

    def test_write_force(self, temp_dir: Path):
        path = temp_dir / "config.yaml"
        path.write_text("identity:\n  account: mine\n", encoding="utf-8")
        assert write_default_config(path, force=True) == (path, True)
        assert "mine" not in path.read_text(encoding="utf-8")
