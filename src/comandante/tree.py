"""Command tree data model."""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar, Union

Executor = Callable[[Sequence[str]], object]

K = TypeVar("K")
V = TypeVar("V")


class ChildMap(Generic[K, V]):
    """Name-keyed mapping that tolerates writes from other threads.

    Every single read or write is atomic. Nothing is promised across several
    calls, so a dispatch may or may not see a node registered while it runs.
    """

    def __init__(self) -> None:
        self._items: dict[K, V] = {}
        self._lock = threading.RLock()

    def get(self, key: K) -> V | None:
        with self._lock:
            return self._items.get(key)

    def put(self, key: K, value: V) -> None:
        with self._lock:
            self._items[key] = value

    def setdefault(self, key: K, value: V) -> V:
        with self._lock:
            return self._items.setdefault(key, value)

    def pop(self, key: K, value: V | None = None) -> V | None:
        """Remove KEY; when VALUE is given, only while KEY still maps to it."""
        with self._lock:
            current = self._items.get(key)
            if current is None or (value is not None and current is not value):
                return None
            return self._items.pop(key)

    def keys(self) -> tuple[K, ...]:
        with self._lock:
            return tuple(self._items)

    def values(self) -> tuple[V, ...]:
        with self._lock:
            return tuple(self._items.values())

    def items(self) -> tuple[tuple[K, V], ...]:
        with self._lock:
            return tuple(self._items.items())

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._items

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __iter__(self) -> Iterator[K]:
        return iter(self.keys())


@dataclass(eq=False)
class ExecutionNode:
    """Terminal leaf carrying the executor of one command."""

    name: str
    executor: Executor


@dataclass(eq=False)
class RootNode:
    """Unnamed top of the tree."""

    children: ChildMap[str, Node] = field(default_factory=ChildMap)
    executions: ChildMap[str, ExecutionNode] = field(default_factory=ChildMap)


@dataclass(eq=False)
class ActionNode:
    """Routing node matched by its plain name."""

    name: str
    is_sub_action: bool = False
    children: ChildMap[str, Node] = field(default_factory=ChildMap)
    execution: ExecutionNode | None = None

    def sub_actions(self) -> dict[str, ActionNode] | None:
        # Sub actions never expose their own nested actions.
        if self.is_sub_action:
            return None
        return {
            name: child
            for name, child in self.children.items()
            if isinstance(child, ActionNode)
        }


@dataclass(eq=False)
class OptionNode:
    """Routing node matched by ``--name`` or ``-alias``."""

    name: str
    alias: str
    children: ChildMap[str, Node] = field(default_factory=ChildMap)
    execution: ExecutionNode | None = None

    def __post_init__(self) -> None:
        if len(self.alias) != 1:
            raise ValueError(f"option alias must be one character: {self.alias!r}")


@dataclass(eq=False)
class ArgumentNode:
    """Value node bound to the option of the same name."""

    name: str
    children: ChildMap[str, Node] = field(default_factory=ChildMap)
    execution: ExecutionNode | None = None


Node = Union[RootNode, ActionNode, OptionNode, ArgumentNode, ExecutionNode]
RoutingNode = Union[ActionNode, OptionNode, ArgumentNode]


def node_name(node: Node) -> str | None:
    match node:
        case RootNode():
            return None
        case ActionNode(name=name) | OptionNode(name=name) | ArgumentNode(name=name):
            return name
        case ExecutionNode(name=name):
            return name
    raise TypeError(f"not a command node: {node!r}")


def children_of(node: Node) -> ChildMap[str, Node] | None:
    """Return the child mapping of NODE, or None for a leaf."""
    match node:
        case ExecutionNode():
            return None
        case RootNode(children=children):
            return children
        case ActionNode(children=children) | OptionNode(children=children):
            return children
        case ArgumentNode(children=children):
            return children
    raise TypeError(f"not a command node: {node!r}")


def executor_of(node: Node) -> Executor | None:
    """Return the executor that runs when a command line ends at NODE."""
    match node:
        case ExecutionNode(executor=executor):
            return executor
        case RootNode():
            return None
        case ActionNode(execution=leaf) | OptionNode(execution=leaf) | ArgumentNode(execution=leaf):
            return None if leaf is None else leaf.executor
    raise TypeError(f"not a command node: {node!r}")


def find_by_alias(node: Node, alias: str) -> OptionNode | None:
    """Return the first option child of NODE whose alias is ALIAS."""
    children = children_of(node)
    if children is None:
        return None
    for child in children.values():
        match child:
            case OptionNode() if child.alias == alias:
                return child
    return None
