"""External document converter.

The builder only depends on the narrow :class:`Converter` protocol, so tests
can swap in a fake instead of shelling out to pandoc.
"""

from __future__ import annotations

import shutil
import subprocess
import tempfile
from pathlib import Path
from typing import Optional, Protocol

from staticblog.config import DEFAULT_CONVERTER, DEFAULT_INPUT_FORMAT
from staticblog.errors import ConverterError
from staticblog.lib.log import get_logger

logger = get_logger(__name__)


class Converter(Protocol):
    def convert(self, source: Path) -> str:
        """Return the HTML fragment for ``source`` or raise ConverterError."""
        ...


class PandocConverter:
    """Run a pandoc-compatible command line converter.

    Invoked as ``<command> -f <input_format> <input> -o <tmp-output>``. Each
    call gets its own temporary directory, so output left over from an
    earlier document is never read back.
    """

    def __init__(
        self,
        command: str = DEFAULT_CONVERTER,
        input_format: str = DEFAULT_INPUT_FORMAT,
        timeout: Optional[float] = None,
    ) -> None:
        self.command = command
        self.input_format = input_format
        self.timeout = timeout

    def _executable(self) -> str:
        executable = shutil.which(self.command)
        if executable is None:
            raise ConverterError(f"Converter '{self.command}' not found in PATH")
        return executable

    def convert(self, source: Path) -> str:
        executable = self._executable()
        with tempfile.TemporaryDirectory(prefix="staticblog-") as tmp:
            target = Path(tmp) / "post.html"
            cmd = [executable, "-f", self.input_format, str(source), "-o", str(target)]
            logger.debug("Running converter", cmd=cmd)
            try:
                proc = subprocess.run(
                    cmd,
                    capture_output=True,
                    encoding="utf-8",
                    errors="replace",
                    timeout=self.timeout,
                    check=False,
                )
            except subprocess.TimeoutExpired as exc:
                raise ConverterError(
                    f"Converter timed out after {self.timeout}s on {source}",
                    source=source,
                ) from exc
            except OSError as exc:
                raise ConverterError(f"Cannot run converter '{self.command}': {exc}", source=source) from exc

            if proc.returncode != 0:
                stderr = (proc.stderr or "").strip()
                message = f"Converter exited with status {proc.returncode} on {source}"
                if stderr:
                    message = f"{message}: {stderr}"
                raise ConverterError(message, source=source, returncode=proc.returncode)

            try:
                return target.read_text(encoding="utf-8")
            except FileNotFoundError as exc:
                raise ConverterError(f"Converter produced no output for {source}", source=source) from exc
            except UnicodeDecodeError as exc:
                raise ConverterError(f"Converter output for {source} is not valid UTF-8: {exc}", source=source) from exc


__all__ = ["Converter", "PandocConverter"]
