# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/sgit/config/manager.py

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Final

import yaml
from loguru import logger
from pydantic import BaseModel, Field, ValidationError

from sgit.system.exceptions import ConfigError


# ---- Constants ----

USER_CFG: Final = "sgit.yml"


def _get_user_config_search_paths() -> tuple[Path, ...]:
    """Get config file search paths (ordered by priority: lowest to highest).

    Dynamic function to ensure environment variables are evaluated at runtime,
    not at module import time (important for test isolation).
    """
    return (
        Path("/etc/sgit") / USER_CFG,  # System defaults
        Path.home() / ".config" / "sgit" / USER_CFG,  # User config
        Path(os.getenv("XDG_CONFIG_HOME", "")) / "sgit" / USER_CFG,  # XDG override
        Path(os.getenv("SGIT_CONFIG_HOME", "")) / USER_CFG,  # Explicit override (highest priority)
    )


def _load_merged_config_data(candidates: tuple[Path, ...]) -> dict:
    """Load and merge config data from candidate paths.

    Missing files are skipped; later files override earlier ones.

    Raises:
        ConfigError: If a config file exists but is not a YAML mapping
    """
    merged_data: dict = {}
    found_configs = []

    for candidate in candidates:
        # Unset env vars collapse to a bare relative filename
        if candidate == Path(USER_CFG) or candidate == Path("sgit") / USER_CFG:
            continue
        if not candidate.is_file():
            continue
        try:
            with candidate.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to read {candidate}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"{candidate} must contain a YAML mapping")

        merged_data.update(data)
        found_configs.append(str(candidate))
        logger.debug(f"Loaded config from {candidate}")

    if found_configs:
        logger.debug(f"Merged config from: {', '.join(found_configs)}")
    else:
        logger.debug("No sgit.yml found, using defaults")
    return merged_data


class UserConfig(BaseModel):
    """User-level settings. Every field has a default, so no file is required."""
    git_executable: str = "git"

    # History views
    log_short_limit: int = Field(default=20, ge=1, description="Entries shown by 'sgit log --short'")
    log_full_limit: int = Field(default=40, ge=1, description="Entries shown by 'sgit log'")

    # Diagnostics
    show_hints: bool = True
    local_log: Optional[Path] = None


def load_user_config() -> UserConfig:
    """Load and merge user config from all locations (system defaults + user overrides).

    Raises:
        ConfigError: If a config file is unreadable or fails validation
    """
    merged_data = _load_merged_config_data(_get_user_config_search_paths())
    try:
        return UserConfig.model_validate(merged_data)
    except ValidationError as e:
        raise ConfigError(f"Invalid sgit configuration: {e}") from e
