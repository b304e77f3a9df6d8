"""Command registration API."""

from __future__ import annotations

import logging

from .tokenizer import LONG_PREFIX, PART_SEPARATOR
from .tree import (
    ActionNode,
    ArgumentNode,
    ExecutionNode,
    Executor,
    Node,
    OptionNode,
    RootNode,
    RoutingNode,
    children_of,
)

logger = logging.getLogger(__name__)


class CommandRegister:
    """Owner of one command tree."""

    def __init__(self) -> None:
        self.root = RootNode()

    def builder(self) -> CommandBuilder:
        """Start a new command at the root of the tree."""
        return CommandBuilder(self)

    def list_execution_commands(self) -> set[str]:
        return set(self.root.executions.keys())

    def get_execution(self, name: str) -> ExecutionNode | None:
        return self.root.executions.get(name)


class CommandBuilder:
    """Fluent path builder; each step descends into a get-or-created node.

    Commands sharing a prefix share its nodes::

        register.builder().action("add").option("value", "v").argument().executor(fn)
    """

    def __init__(self, register: CommandRegister, node: Node | None = None, path: tuple[str, ...] = ()) -> None:
        self._register = register
        self._node: Node = node if node is not None else register.root
        self._path = path

    @property
    def node(self) -> Node:
        return self._node

    def action(self, name: str, *, sub_action: bool = False) -> CommandBuilder:
        _check_name(name)
        node = self._attach(ActionNode(name=name, is_sub_action=sub_action))
        return self._descend(node, name)

    def option(self, name: str, alias: str) -> CommandBuilder:
        _check_name(name)
        node = self._attach(OptionNode(name=name, alias=alias))
        if node.alias != alias:
            raise ValueError(f"option {name} already registered with alias {node.alias}")
        return self._descend(node, LONG_PREFIX + name)

    def argument(self, name: str | None = None) -> CommandBuilder:
        """Bind a value node; it takes the enclosing option's name by default."""
        if name is None:
            if not isinstance(self._node, (OptionNode, ArgumentNode)):
                raise ValueError("argument name required outside an option")
            name = self._node.name
        _check_name(name)
        node = self._attach(ArgumentNode(name=name))
        return self._descend(node, f"<{name}>")

    def executor(self, fn: Executor, *, name: str | None = None) -> ExecutionNode:
        """Bind FN as the executor of the current path and return the leaf."""
        target = self._node
        if not isinstance(target, (ActionNode, OptionNode, ArgumentNode)):
            raise ValueError("executor must be bound below an action")

        command_name = name or PART_SEPARATOR.join(self._path)
        leaf = ExecutionNode(name=command_name, executor=fn)
        previous = target.execution
        if previous is not None:
            self._register.root.executions.pop(previous.name, previous)
        target.execution = leaf
        self._register.root.executions.put(command_name, leaf)
        logger.debug("registered command %s", command_name)
        return leaf

    def _attach(self, node: RoutingNode) -> RoutingNode:
        children = children_of(self._node)
        if children is None:
            raise ValueError("cannot attach below an execution node")
        existing = children.setdefault(node.name, node)
        if type(existing) is not type(node):
            raise ValueError(
                f"{node.name} already registered as {type(existing).__name__}"
            )
        return existing

    def _descend(self, node: Node, part: str) -> CommandBuilder:
        return CommandBuilder(self._register, node, (*self._path, part))


def _check_name(name: str) -> None:
    if not name or PART_SEPARATOR in name:
        raise ValueError(f"invalid command name: {name!r}")
