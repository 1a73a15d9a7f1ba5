"""staticblog error hierarchy.

All project exceptions inherit from StaticBlogError, enabling:
- ``except StaticBlogError`` at the CLI command boundary
- Fine-grained catches deeper in the stack (``except ConverterError``)

Hierarchy:
    StaticBlogError
    ├── ConfigError
    ├── BuildError
    │   ├── ConverterError
    │   ├── TemplateError
    │   └── OutputError
    └── ServeError
"""

from __future__ import annotations


class StaticBlogError(Exception):
    """Base class for all staticblog errors."""


class ConfigError(StaticBlogError):
    """Config file is unreadable, malformed or holds invalid values."""


class BuildError(StaticBlogError):
    """A site build failed and was aborted."""


class ConverterError(BuildError):
    """The external document converter failed for a document."""

    def __init__(self, message: str, *, source: object = None, returncode: int | None = None) -> None:
        super().__init__(message)
        self.source = source
        self.returncode = returncode


class TemplateError(BuildError):
    """A page template could not be loaded or rendered."""


class OutputError(BuildError):
    """A generated file or directory could not be written."""


class ServeError(StaticBlogError):
    """The static server cannot start."""


__all__ = [
    "StaticBlogError",
    "ConfigError",
    "BuildError",
    "ConverterError",
    "TemplateError",
    "OutputError",
    "ServeError",
]
