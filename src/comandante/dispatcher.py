"""Resolve command lines against the command tree and run them."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .errors import CommandNotFoundError
from .register import CommandRegister
from .tokenizer import Tokens, format_tokens, is_long_option, is_short_option, strip_prefix, tokenize
from .tree import Node, children_of, executor_of, find_by_alias, node_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Resolution:
    """Node reached by a command line and the values collected on the way."""

    node: Node
    values: tuple[str, ...]


class Dispatcher:
    """Tokenize, resolve and invoke one command line at a time."""

    def __init__(self, register: CommandRegister | None = None) -> None:
        self.register = register or CommandRegister()

    def dispatch(self, line: str) -> object:
        """Run LINE and return what its executor returns.

        Raises CommandNotFoundError when LINE matches no invokable command.
        Exceptions raised by the executor propagate unchanged.
        """
        tokens = tokenize(line)
        resolution = self.resolve(tokens, line=line)
        return self.invoke(resolution, line=line)

    def resolve(self, tokens: Tokens, *, line: str | None = None) -> Resolution:
        if not tokens:
            raise CommandNotFoundError(f"Command: {line or ''} not found.", line)

        node: Node = self.register.root
        in_option = False
        values: list[str] = []

        for token in tokens:
            if in_option and not is_short_option(token) and not is_long_option(token):
                values.append(token)
                name = node_name(node)
                found = None if name is None else _child(node, name)
            elif is_long_option(token):
                in_option = True
                found = _child(node, strip_prefix(token))
            elif is_short_option(token):
                in_option = True
                found = find_by_alias(node, strip_prefix(token))
            else:
                found = _child(node, token)

            if found is None:
                raise CommandNotFoundError(
                    f"No command definition found for {token!r} in: {format_tokens(tokens)}",
                    line,
                )
            node = found

        logger.debug("resolved %s to %r with values %s", format_tokens(tokens), node_name(node), values)
        return Resolution(node=node, values=tuple(values))

    def invoke(self, resolution: Resolution, *, line: str | None = None) -> object:
        executor = executor_of(resolution.node)
        if executor is None:
            raise CommandNotFoundError("No executor bound with this command.", line)
        return executor(list(resolution.values))


def _child(node: Node, name: str) -> Node | None:
    children = children_of(node)
    if children is None:
        return None
    return children.get(name)
