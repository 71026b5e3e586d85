"""Tests for nowctl.toml discovery."""

from __future__ import annotations

from pathlib import Path

import pytest

from nowctl.config.discovery import (
    CONFIG_ENV_VAR,
    CONFIG_FILENAME,
    find_config,
    find_project_config,
    user_config_path,
)


@pytest.fixture(autouse=True)
def _no_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


class TestFindConfig:
    def test_in_start_dir(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        assert find_config(tmp_path) == (tmp_path / CONFIG_FILENAME).resolve()

    def test_walks_up(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config(nested) == (tmp_path / CONFIG_FILENAME).resolve()

    def test_env_var_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        custom = tmp_path / "custom.toml"
        custom.write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(custom))
        assert find_config(tmp_path) == custom

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.toml"))
        assert find_config(tmp_path) is None


class TestUserConfig:
    def _write_user_config(self, tmp_path: Path) -> Path:
        path = tmp_path / "xdg" / "nowctl" / CONFIG_FILENAME
        path.parent.mkdir(parents=True)
        path.write_text('token = "user"\n')
        return path

    def test_user_config_path_follows_xdg(self, tmp_path: Path) -> None:
        assert user_config_path() == tmp_path / "xdg" / "nowctl" / CONFIG_FILENAME

    def test_user_config_path_defaults_to_home(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("XDG_CONFIG_HOME")
        monkeypatch.setenv("HOME", str(tmp_path))
        assert user_config_path() == tmp_path / ".config" / "nowctl" / CONFIG_FILENAME

    def test_falls_back_to_user_config(self, tmp_path: Path) -> None:
        user = self._write_user_config(tmp_path)
        project_dir = tmp_path / "project"
        project_dir.mkdir()
        assert find_config(project_dir) == user

    def test_project_config_wins(self, tmp_path: Path) -> None:
        self._write_user_config(tmp_path)
        project_dir = tmp_path / "project"
        project_dir.mkdir()
        (project_dir / CONFIG_FILENAME).write_text("")
        assert find_config(project_dir) == (project_dir / CONFIG_FILENAME).resolve()

    def test_nothing_found(self, tmp_path: Path) -> None:
        project_dir = tmp_path / "project"
        project_dir.mkdir()
        assert find_project_config(project_dir) is None
        assert find_config(project_dir) is None
