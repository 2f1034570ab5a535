"""Adapter reading keymap and layout sources from files or URLs."""

import json
import logging
from pathlib import Path
from typing import Any, Protocol, runtime_checkable
from urllib.parse import urlparse

import requests

from typonaut.core.errors import SourceLoadError


logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


def is_url(source: str | Path) -> bool:
    """Return True when *source* is an http(s) URL."""
    if isinstance(source, Path):
        return False
    return urlparse(source).scheme in ("http", "https")


@runtime_checkable
class SourceAdapterProtocol(Protocol):
    """Protocol for reading text sources."""

    def read_text(self, source: str | Path) -> str:
        """Read a file or URL as text.

        Raises:
            SourceLoadError: If the source cannot be read
        """
        ...

    def read_json(self, source: str | Path) -> Any:
        """Read a file or URL and decode it as JSON.

        Raises:
            SourceLoadError: If the source cannot be read or decoded
        """
        ...


class SourceAdapter:
    """Reads sources from the local file system or over HTTP."""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        self.timeout = timeout
        self.session = session or requests.Session()

    def read_text(self, source: str | Path) -> str:
        if is_url(source):
            return self._fetch_text(str(source))
        return self._read_file(Path(source))

    def read_json(self, source: str | Path) -> Any:
        content = self.read_text(source)
        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            raise SourceLoadError(
                f"Failed to parse JSON from {source}: {e}", source=str(source)
            ) from e

    def _read_file(self, path: Path) -> str:
        logger.debug("Reading %s", path)
        if not path.exists():
            raise SourceLoadError(f"File not found: {path}", source=str(path))
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise SourceLoadError(
                f"File content is not text: {path}", source=str(path)
            ) from e
        except OSError as e:
            raise SourceLoadError(
                f"Failed to read file {path}: {e}", source=str(path)
            ) from e

    def _fetch_text(self, url: str) -> str:
        logger.debug("Fetching %s (timeout %.1fs)", url, self.timeout)
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise SourceLoadError(
                f"Failed to load from URL: {e}", source=url
            ) from e

        if not response.ok:
            raise SourceLoadError(
                f"Failed to load from URL: HTTP {response.status_code}: {response.reason}",
                source=url,
            )
        return response.text


def create_source_adapter(
    timeout: float = DEFAULT_TIMEOUT,
    session: requests.Session | None = None,
) -> SourceAdapter:
    """Create a source adapter.

    Args:
        timeout: Timeout in seconds for URL requests
        session: Optional requests session, mainly for testing

    Returns:
        Configured SourceAdapter instance
    """
    return SourceAdapter(timeout=timeout, session=session)
