from __future__ import annotations

import json
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Iterable, Optional

from .errors import ConfigError
from .paths import (
    CONFIG_FILENAME,
    OUTPUT_DIRNAME,
    SOURCE_DIRNAME,
    TEMPLATE_DIRNAME,
    resolve_under,
)

DEFAULT_CONVERTER = "pandoc"
DEFAULT_INPUT_FORMAT = "markdown"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000

_ALLOWED_KEYS = {
    "source_dir",
    "output_dir",
    "template_dir",
    "converter",
    "input_format",
    "converter_timeout",
    "host",
    "port",
}
PATH_KEYS = frozenset({"source_dir", "output_dir", "template_dir"})
_STRING_KEYS = {"converter", "input_format", "host"}


@dataclass
class SiteConfig:
    source_dir: Path = Path(SOURCE_DIRNAME)
    output_dir: Path = Path(OUTPUT_DIRNAME)
    template_dir: Path = Path(TEMPLATE_DIRNAME)
    converter: str = DEFAULT_CONVERTER
    input_format: str = DEFAULT_INPUT_FORMAT
    converter_timeout: Optional[float] = None
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    path: Optional[Path] = field(default=None, compare=False)

    def resolved(self, root: Path) -> "SiteConfig":
        """Return a copy whose directories are anchored at ``root``."""
        return replace(
            self,
            source_dir=resolve_under(root, self.source_dir),
            output_dir=resolve_under(root, self.output_dir),
            template_dir=resolve_under(root, self.template_dir),
        )

    def with_overrides(self, **overrides: Any) -> "SiteConfig":
        """Apply CLI overrides, ignoring options the user did not pass."""
        values = {key: value for key, value in overrides.items() if value is not None}
        unknown = set(values) - {f.name for f in fields(self)}
        if unknown:
            raise ConfigError(f"Unknown override(s): {', '.join(sorted(unknown))}")
        for key in PATH_KEYS & set(values):
            values[key] = Path(values[key])
        return replace(self, **values)

    def as_dict(self) -> dict:
        return {
            "source_dir": str(self.source_dir),
            "output_dir": str(self.output_dir),
            "template_dir": str(self.template_dir),
            "converter": self.converter,
            "input_format": self.input_format,
            "converter_timeout": self.converter_timeout,
            "host": self.host,
            "port": self.port,
        }


def _ensure_keys(data: dict, *, allowed: Iterable[str], context: str) -> None:
    unknown = set(data.keys()) - set(allowed)
    if unknown:
        keys = ", ".join(sorted(unknown))
        raise ConfigError(f"Unknown {context} key(s): {keys}")


def _parse_config(raw: Any, path: Path) -> SiteConfig:
    if not isinstance(raw, dict):
        raise ConfigError(f"Config {path} must be a JSON object")
    _ensure_keys(raw, allowed=_ALLOWED_KEYS, context="config")

    values: dict[str, Any] = {}
    for key in PATH_KEYS | _STRING_KEYS:
        if key not in raw:
            continue
        value = raw[key]
        if not isinstance(value, str) or not value.strip():
            raise ConfigError(f"Config '{key}' must be a non-empty string")
        values[key] = Path(value) if key in PATH_KEYS else value.strip()

    if "port" in raw:
        port = raw["port"]
        if isinstance(port, bool) or not isinstance(port, int) or not 0 < port < 65536:
            raise ConfigError(f"Config 'port' must be an integer between 1 and 65535, got {port!r}")
        values["port"] = port

    if "converter_timeout" in raw:
        timeout = raw["converter_timeout"]
        if timeout is not None:
            if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
                raise ConfigError(f"Config 'converter_timeout' must be a positive number, got {timeout!r}")
            timeout = float(timeout)
        values["converter_timeout"] = timeout

    return SiteConfig(path=path, **values)


def config_path(root: Path, explicit: Optional[Path] = None) -> Path:
    if explicit:
        return explicit.expanduser()
    return root / CONFIG_FILENAME


def load_config(path: Optional[Path] = None, *, root: Optional[Path] = None) -> SiteConfig:
    """Load the site config.

    An explicitly given ``path`` must exist. Without one, ``staticblog.json``
    in ``root`` is read when present and built-in defaults are used otherwise.
    Relative directories in the result are left relative; call
    :meth:`SiteConfig.resolved` to anchor them.
    """
    root = root or Path.cwd()
    target = config_path(root, path)
    if not target.exists():
        if path is not None:
            raise ConfigError(f"Config file not found: {target}")
        return SiteConfig()
    try:
        raw = json.loads(target.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in {target}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Cannot read config {target}: {exc}") from exc
    return _parse_config(raw, target)


__all__ = [
    "SiteConfig",
    "PATH_KEYS",
    "ConfigError",
    "DEFAULT_CONVERTER",
    "DEFAULT_INPUT_FORMAT",
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "config_path",
    "load_config",
]
