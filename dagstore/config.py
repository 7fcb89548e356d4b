"""Configuration helpers for loading environment variables.

Variables defined in a project-level ``.env`` file are loaded before they
are looked up. Consumers should rely on :func:`get_env` instead of
:func:`os.getenv` so that the file is read in a single place.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

ENV_FILE = Path(__file__).resolve().parents[1] / ".env"


@lru_cache(maxsize=1)
def _load_environment() -> None:
    """Load environment variables from :data:`ENV_FILE`.

    When the file does not exist :func:`load_dotenv` still runs with its
    default discovery. Values already present in the process environment
    win. Subsequent calls are cached so the file is only read once per
    process.
    """

    if ENV_FILE.exists():
        load_dotenv(ENV_FILE, override=False)
    else:
        load_dotenv(override=False)


def get_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """Return the value for ``key`` from the environment.

    Parameters
    ----------
    key:
        The name of the environment variable to look up.
    default:
        The value to return when ``key`` is not present.
    """

    _load_environment()
    return os.environ.get(key, default)


__all__ = ["ENV_FILE", "get_env"]
