"""
Division loader for files served over HTTP(S).
"""

import httpx

from .base import DivisionLoader, DivisionNotFoundError, LoaderError
from ..core.config import LOADER_TIMEOUT


class RemoteDivisionLoader(DivisionLoader):
    """Downloads a division text file, e.g. a course data set."""

    def __init__(self, timeout: float = LOADER_TIMEOUT):
        """
        Initialize the remote loader.

        Args:
            timeout: HTTP request timeout in seconds
        """
        self.timeout = timeout

    @property
    def source_type(self) -> str:
        return "url"

    async def fetch_text(self, source: str) -> str:
        """
        Fetch the division text from a URL.

        Raises:
            DivisionNotFoundError: If the server answers 404
            LoaderError: If there's an HTTP or network error
        """
        async with httpx.AsyncClient(timeout=self.timeout, follow_redirects=True) as client:
            try:
                response = await client.get(source)

                if response.status_code == 404:
                    raise DivisionNotFoundError(f"Division not found: {source}")

                response.raise_for_status()
                return response.text

            except httpx.HTTPStatusError as e:
                raise LoaderError(f"HTTP error fetching {source}: {e}")
            except httpx.RequestError as e:
                raise LoaderError(f"Network error: {e}")
