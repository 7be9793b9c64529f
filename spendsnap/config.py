"""Configuration file management for spendsnap."""

import os
import tomllib
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

import tomli_w

from spendsnap.domain.trend import DEFAULT_TREND_MONTHS


@dataclass(frozen=True)
class Settings:
    """Immutable application settings."""

    currency_symbol: str = "$"
    trend_months: int = DEFAULT_TREND_MONTHS
    load_sample_data: bool = True
    expenses_file: str = ""


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
    return get_xdg_config_home() / "spendsnap" / "config.toml"


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(asdict(Settings()), f)

    os.chmod(config_path, 0o600)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If the file is not valid TOML.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "rb") as f:
        return tomllib.load(f)


def parse_settings(config: dict[str, Any]) -> Settings:
    """Build settings from a configuration dictionary.

    Unknown keys are ignored; missing keys take their default.

    Args:
        config: Configuration dictionary.

    Returns:
        Validated Settings.

    Raises:
        ValueError: If a value has the wrong type or is out of range.
    """
    defaults = Settings()

    currency_symbol = config.get("currency_symbol", defaults.currency_symbol)
    if not isinstance(currency_symbol, str):
        raise ValueError("currency_symbol must be a string")

    trend_months = config.get("trend_months", defaults.trend_months)
    if isinstance(trend_months, bool) or not isinstance(trend_months, int) or trend_months < 1:
        raise ValueError("trend_months must be a whole number of at least 1")

    load_sample_data = config.get("load_sample_data", defaults.load_sample_data)
    if not isinstance(load_sample_data, bool):
        raise ValueError("load_sample_data must be true or false")

    expenses_file = config.get("expenses_file", defaults.expenses_file)
    if not isinstance(expenses_file, str):
        raise ValueError("expenses_file must be a string")

    return Settings(
        currency_symbol=currency_symbol,
        trend_months=trend_months,
        load_sample_data=load_sample_data,
        expenses_file=expenses_file,
    )


def load_settings(config_path: Path | None = None) -> Settings:
    """Load settings, falling back to defaults if there is no config file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Validated Settings.

    Raises:
        ValueError: If the config file is invalid.
    """
    try:
        config = load_config(config_path)
    except FileNotFoundError:
        return Settings()
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid config file: {e}") from e

    return parse_settings(config)
