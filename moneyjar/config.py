"""Configuration file management for moneyjar."""

import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

DEFAULT_USERS: list[dict[str, Any]] = [
    {"id": 1, "username": "Test", "email": "test@test.com"},
]


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "moneyjar" / "config.toml"


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    default_config: dict[str, Any] = {
        "users": [dict(user) for user in DEFAULT_USERS],
    }

    save_config(default_config, config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If config file doesn't exist.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "rb") as f:
        return tomllib.load(f)


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def get_users(config_path: Path | None = None) -> list[dict[str, Any]]:
    """Get the users directory.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        List of user dictionaries. Falls back to the built-in users when no
        config file exists.
    """
    try:
        config = load_config(config_path)
    except FileNotFoundError:
        return [dict(user) for user in DEFAULT_USERS]

    return [user for user in config.get("users", []) if isinstance(user, dict)]


def add_user(user: dict[str, Any], config_path: Path | None = None) -> None:
    """Add or update a user, matched by email.

    Args:
        user: User dictionary with id, username and email.
        config_path: Path to config file. If None, uses default location.
    """
    config = load_config(config_path)

    users = config.get("users", [])
    email = user.get("email")

    for i, existing_user in enumerate(users):
        if existing_user.get("email") == email:
            users[i] = user
            break
    else:
        users.append(user)

    config["users"] = users
    save_config(config, config_path)
