"""
Division loader for local files.
"""

import asyncio
from pathlib import Path

from .base import DivisionLoader, DivisionNotFoundError, LoaderError


class FileDivisionLoader(DivisionLoader):
    """Reads a division from a text file on disk."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    @property
    def source_type(self) -> str:
        return "file"

    def _read(self, path: Path) -> str:
        try:
            return path.read_text(encoding=self.encoding)
        except FileNotFoundError:
            raise DivisionNotFoundError(f"Division file not found: {path}")
        except (OSError, UnicodeDecodeError) as e:
            raise LoaderError(f"Could not read {path}: {e}")

    async def fetch_text(self, source: str) -> str:
        path = Path(source)
        if path.is_dir():
            raise LoaderError(f"{path} is a directory")
        return await asyncio.to_thread(self._read, path)
