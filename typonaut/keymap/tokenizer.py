"""Tokenizer for the contents of a ``bindings = < ... >`` property."""

from collections.abc import Iterable, Iterator

from .behaviors import BEHAVIOR_MARKER, interpret_binding


def iter_binding_groups(fragments: Iterable[str]) -> Iterator[str]:
    """Split raw binding text into one expression per binding.

    A binding starts at a token beginning with ``&`` and runs until the next
    such token. Tokens found before the first ``&`` form a group of their own.

    Args:
        fragments: Text between ``<`` and ``>``, possibly one item per line

    Yields:
        Binding expressions with their tokens joined by single spaces
    """
    tokens = " ".join(fragments).split()

    group: list[str] = []
    for token in tokens:
        if token.startswith(BEHAVIOR_MARKER) and group:
            yield " ".join(group)
            group = []
        group.append(token)

    if group:
        yield " ".join(group)


def tokenize_bindings(fragments: Iterable[str]) -> list[str]:
    """Return the binding expressions found in the given fragments."""
    return list(iter_binding_groups(fragments))


def interpret_bindings(fragments: Iterable[str]) -> list[str]:
    """Return one label per binding, leaving out bindings with an empty label.

    ``&none`` is the behavior that produces an empty label, so it does not
    occupy a position in the result.
    """
    labels = []
    for expression in iter_binding_groups(fragments):
        label = interpret_binding(expression)
        if label:
            labels.append(label)
    return labels
