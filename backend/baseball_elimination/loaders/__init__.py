"""
Division loaders.

Provides a unified interface for reading divisions from local files or URLs.
"""

from .base import (
    DivisionLoader,
    DivisionNotFoundError,
    LoaderError,
    parse_division
)
from .file import FileDivisionLoader
from .remote import RemoteDivisionLoader


def get_loader(source: str) -> DivisionLoader:
    """
    Get the appropriate loader for a division source.

    Args:
        source: A file path or an http(s) URL

    Returns:
        Loader instance
    """
    if source.lower().startswith(("http://", "https://")):
        return RemoteDivisionLoader()
    return FileDivisionLoader()


__all__ = [
    "DivisionLoader",
    "DivisionNotFoundError",
    "LoaderError",
    "parse_division",
    "FileDivisionLoader",
    "RemoteDivisionLoader",
    "get_loader",
]
