"""CLI helper functions."""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn

from staticblog.cli.types import AppEnv
from staticblog.config import PATH_KEYS, SiteConfig, load_config
from staticblog.paths import resolve_under


def fail(command: str, message: str) -> NoReturn:
    raise SystemExit(f"{command}: {message}")


def load_effective_config(env: AppEnv, **overrides: object) -> SiteConfig:
    """Load the config file, apply CLI overrides and anchor directories.

    Directories from the config file resolve against the file's folder, or
    the working directory when no config file is in use. Directories given
    as flags always resolve against the working directory.
    """
    cwd = Path.cwd()
    config = load_config(env.config_path, root=cwd)
    root = config.path.parent if config.path else cwd
    for key in PATH_KEYS:
        value = overrides.get(key)
        if value is not None:
            overrides[key] = resolve_under(cwd, value)  # type: ignore[arg-type]
    return config.resolved(root).with_overrides(**overrides)
