"""Keymap loading service: acquire text, parse it and validate the result."""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import Field

from typonaut.adapters import SourceAdapterProtocol, create_source_adapter
from typonaut.core.errors import SourceLoadError
from typonaut.models.base import TyponautBaseModel

from .models import ParsedKeymap
from .scanner import KeymapScanner
from .validator import validate


if TYPE_CHECKING:
    from typonaut.config import UserConfig


logger = logging.getLogger(__name__)


class KeymapParseResult(TyponautBaseModel):
    """Outcome of loading a keymap.

    ``keymap`` is kept even when validation failed so callers can show
    what was found.
    """

    success: bool
    source: str
    keymap: ParsedKeymap | None = None
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class KeymapService:
    """Loads keymaps from text, files or URLs."""

    def __init__(
        self,
        source_adapter: SourceAdapterProtocol,
        scanner: KeymapScanner | None = None,
    ) -> None:
        self.source_adapter = source_adapter
        self.scanner = scanner or KeymapScanner()

    def parse_text(self, content: str, source: str = "<string>") -> KeymapParseResult:
        """Parse and validate keymap text.

        Args:
            content: Keymap file content
            source: Description of where the content came from

        Returns:
            Result that is successful only if validation found no errors
        """
        keymap = self.scanner.scan(content)
        errors = validate(keymap)
        warnings = [
            f'Layer "{layer.name}" has {len(layer.bindings)} bindings, '
            f"expected {len(keymap.layers[0].bindings)}"
            for layer in keymap.layers[1:]
            if layer.bindings and len(layer.bindings) != len(keymap.layers[0].bindings)
        ]

        if errors:
            logger.info("Keymap from %s failed validation: %s", source, errors)
        else:
            logger.info("Loaded %d layers from %s", len(keymap.layers), source)

        return KeymapParseResult(
            success=not errors,
            source=source,
            keymap=keymap,
            errors=errors,
            warnings=warnings,
        )

    def load(self, source: str | Path) -> KeymapParseResult:
        """Read a keymap file or URL, then parse and validate it.

        Read failures are reported in the result instead of being raised.
        """
        try:
            content = self.source_adapter.read_text(source)
        except SourceLoadError as e:
            exc_info = logger.isEnabledFor(logging.DEBUG)
            logger.error("Failed to read keymap %s: %s", source, e, exc_info=exc_info)
            return KeymapParseResult(success=False, source=str(source), errors=[str(e)])

        return self.parse_text(content, source=str(source))


def create_keymap_service(
    source_adapter: SourceAdapterProtocol | None = None,
    user_config: "UserConfig | None" = None,
) -> KeymapService:
    """Create a keymap service with its dependencies.

    Args:
        source_adapter: Optional adapter; created from the user config timeout
            when omitted
        user_config: Optional user configuration

    Returns:
        Configured KeymapService instance
    """
    if source_adapter is None:
        timeout = user_config.data.request_timeout if user_config else 10.0
        source_adapter = create_source_adapter(timeout=timeout)
    return KeymapService(source_adapter=source_adapter)
