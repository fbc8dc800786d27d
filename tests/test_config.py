"""Tests for moneyjar.config."""

import stat
from pathlib import Path

import pytest

from moneyjar.config import (
    DEFAULT_USERS,
    add_user,
    create_default_config,
    get_config_path,
    get_users,
    load_config,
)


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    path = tmp_path / "moneyjar" / "config.toml"
    create_default_config(path)
    return path


class TestConfigPath:
    """Tests for get_config_path."""

    def test_follows_xdg(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should place the config under XDG_CONFIG_HOME."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        assert get_config_path() == tmp_path / "moneyjar" / "config.toml"


class TestDefaultConfig:
    """Tests for create_default_config."""

    def test_contains_default_users(self, config_path: Path) -> None:
        """Should write the built-in users directory."""
        assert load_config(config_path) == {"users": DEFAULT_USERS}

    def test_secure_permissions(self, config_path: Path) -> None:
        """Should only be readable by the owner."""
        assert stat.S_IMODE(config_path.stat().st_mode) == 0o600


class TestUsers:
    """Tests for get_users and add_user."""

    def test_missing_config_falls_back_to_defaults(self, tmp_path: Path) -> None:
        """Should return the built-in users without a config file."""
        assert get_users(tmp_path / "missing.toml") == DEFAULT_USERS

    def test_add_new_user(self, config_path: Path) -> None:
        """Should append a user with a new email."""
        add_user({"id": 2, "username": "Ann", "email": "ann@example.com"}, config_path)

        assert [user["email"] for user in get_users(config_path)] == ["test@test.com", "ann@example.com"]

    def test_replace_existing_user(self, config_path: Path) -> None:
        """Should replace the user with the same email."""
        add_user({"id": 1, "username": "Tester", "email": "test@test.com"}, config_path)

        assert get_users(config_path) == [{"id": 1, "username": "Tester", "email": "test@test.com"}]

    def test_add_without_config_raises(self, tmp_path: Path) -> None:
        """Should require an existing config file."""
        with pytest.raises(FileNotFoundError):
            add_user({"id": 2, "username": "Ann", "email": "ann@example.com"}, tmp_path / "missing.toml")
