"""Adapters for external resources."""

from .source_adapter import (
    SourceAdapter,
    SourceAdapterProtocol,
    create_source_adapter,
    is_url,
)


__all__ = [
    "SourceAdapter",
    "SourceAdapterProtocol",
    "create_source_adapter",
    "is_url",
]
