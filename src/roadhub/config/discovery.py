"""Config file discovery.

Walk-up finder locates roadhub.toml the way git finds .git/.
``ROADHUB_CONFIG`` in the environment pins a specific file instead.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "roadhub.toml"
CONFIG_ENV_VAR = "ROADHUB_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest roadhub.toml at or above *start* (default: cwd).

    A ``ROADHUB_CONFIG`` env var wins over the walk-up; if it names a file
    that does not exist, no config is used at all.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    directory = (start or Path.cwd()).resolve()
    for candidate_dir in (directory, *directory.parents):
        candidate = candidate_dir / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
