"""Tests for rci.core.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from rci.core.config import (
    CONFIG_ENV_VAR,
    BuildConfig,
    Config,
    ImageConfig,
    find_config_path,
    load_config,
    load_config_or_default,
)
from rci.core.result import Err, Ok


class TestConfig:
    def test_defaults(self) -> None:
        config = Config()
        assert config.image == ImageConfig(suffix="", registry=None)
        assert config.build == BuildConfig(host=None, force_cross=False)

    def test_frozen(self) -> None:
        config = ImageConfig()
        with pytest.raises(AttributeError):
            config.suffix = "-x"  # type: ignore[misc]

    def test_from_dict_empty(self) -> None:
        assert Config.from_dict({}) == Config()

    def test_from_dict_full(self) -> None:
        config = Config.from_dict(
            {
                "image": {"suffix": "-distroless", "registry": " ghcr.io "},
                "build": {"host": "aarch64-apple-darwin", "force_cross": True},
            }
        )
        assert config.image.suffix == "-distroless"
        assert config.image.registry == "ghcr.io"
        assert config.build.host == "aarch64-apple-darwin"
        assert config.build.force_cross is True

    def test_from_dict_ignores_wrong_types(self) -> None:
        config = Config.from_dict({"image": {"suffix": 3}, "build": {"force_cross": "yes"}})
        assert config.image.suffix == ""
        assert config.build.force_cross is False

    def test_from_dict_ignores_non_table_sections(self) -> None:
        assert Config.from_dict({"image": "ghcr.io"}) == Config()


class TestLoadConfig:
    def test_load_valid_config(self, tmp_path: Path) -> None:
        config_file = tmp_path / "rci.toml"
        config_file.write_text(
            '[image]\nsuffix = "-slim"\nregistry = "ghcr.io"\n\n[build]\nforce_cross = true\n',
            encoding="utf-8",
        )
        result = load_config(config_file)
        assert isinstance(result, Ok)
        assert result.value.image.suffix == "-slim"
        assert result.value.build.force_cross is True

    def test_load_empty_config(self, tmp_path: Path) -> None:
        config_file = tmp_path / "rci.toml"
        config_file.write_text("", encoding="utf-8")
        assert load_config(config_file) == Ok(Config())

    def test_load_missing_file(self, tmp_path: Path) -> None:
        result = load_config(tmp_path / "missing.toml")
        assert isinstance(result, Err)
        assert "not found" in result.error.message

    def test_load_invalid_toml(self, tmp_path: Path) -> None:
        config_file = tmp_path / "rci.toml"
        config_file.write_text("[image\nsuffix = ", encoding="utf-8")
        result = load_config(config_file)
        assert isinstance(result, Err)
        assert "Invalid TOML" in result.error.message
        assert result.error.path == config_file

    def test_load_or_default(self, tmp_path: Path) -> None:
        assert load_config_or_default(tmp_path / "missing.toml") == Config()


class TestFindConfigPath:
    def test_explicit_path_is_required(self, tmp_path: Path) -> None:
        path = tmp_path / "custom.toml"
        assert find_config_path(path, env={}, cwd=tmp_path) == (path, True)

    def test_env_var_is_required(self, tmp_path: Path) -> None:
        env = {CONFIG_ENV_VAR: str(tmp_path / "env.toml")}
        assert find_config_path(None, env=env, cwd=tmp_path) == (tmp_path / "env.toml", True)

    def test_cwd_file_is_optional(self, tmp_path: Path) -> None:
        (tmp_path / "rci.toml").write_text("", encoding="utf-8")
        assert find_config_path(None, env={}, cwd=tmp_path) == (tmp_path / "rci.toml", False)

    def test_nothing_found(self, tmp_path: Path) -> None:
        assert find_config_path(None, env={}, cwd=tmp_path) == (None, False)
