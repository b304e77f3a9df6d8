"""Command line tokenizer."""

from __future__ import annotations

PART_SEPARATOR = " "
SHORT_PREFIX = "-"
LONG_PREFIX = "--"

Tokens = tuple[str, ...]


def tokenize(line: str) -> Tokens:
    """Split LINE into tokens, expanding merged short options.

    ``-abc x`` yields the same tokens as ``-a -b -c x``.
    """
    parts = line.split(PART_SEPARATOR)
    while parts and parts[-1] == "":
        parts.pop()

    tokens: list[str] = []
    for part in parts:
        if is_short_option(part):
            tokens.extend(_expand_short(part))
        else:
            tokens.append(part)
    return tuple(tokens)


def is_long_option(token: str) -> bool:
    return token.startswith(LONG_PREFIX)


def is_short_option(token: str) -> bool:
    return token.startswith(SHORT_PREFIX) and not token.startswith(LONG_PREFIX)


def strip_prefix(token: str) -> str:
    """Return TOKEN without its option prefix."""
    if is_long_option(token):
        return token[len(LONG_PREFIX) :]
    if is_short_option(token):
        return token[len(SHORT_PREFIX) :]
    return token


def format_tokens(tokens: Tokens) -> str:
    return PART_SEPARATOR.join(tokens)


def _expand_short(part: str) -> list[str]:
    cluster = part[len(SHORT_PREFIX) :]
    if len(cluster) <= 1:
        return [part]
    return [SHORT_PREFIX + char for char in cluster]
