"""
Configuration utilities for the converter.
"""

import os
from pathlib import Path
from typing import FrozenSet, Optional

from dotenv import load_dotenv

ENV_FILE_NAME = ".wrike2clickup.env"

EXCLUDE_TAGS_ENV = "WRIKE2CLICKUP_EXCLUDE_TAGS"
LIST_NAMES_ENV = "WRIKE2CLICKUP_LIST_NAMES"
LOG_LEVEL_ENV = "WRIKE2CLICKUP_LOG_LEVEL"


def load_env_vars() -> None:
    """
    Load environment variables from .env files in the following order:
    1. .wrike2clickup.env in the current directory
    2. .wrike2clickup.env in the user's home directory

    Variables already present in the environment are never overridden.
    """
    if os.path.exists(ENV_FILE_NAME):
        load_dotenv(ENV_FILE_NAME)

    home_env = Path.home() / ENV_FILE_NAME
    if home_env.exists():
        load_dotenv(home_env)


def get_config(key: str, default: Optional[str] = None) -> Optional[str]:
    """Get configuration value from environment variables."""
    return os.getenv(key, default)


def parse_title_list(value: Optional[str]) -> FrozenSet[str]:
    """
    Split a comma-separated list of folder titles.

    The split is literal: titles are not stripped, and an empty string
    gives ``{""}``, which matches no real folder title.
    """
    return frozenset((value or "").split(","))
