import threading

import pytest

from comandante.tree import (
    ActionNode,
    ArgumentNode,
    ChildMap,
    ExecutionNode,
    OptionNode,
    RootNode,
    executor_of,
    find_by_alias,
)


def test_sub_actions_listed_when_flag_unset() -> None:
    action = ActionNode("remote")
    child = ActionNode("add")
    action.children.put("add", child)
    action.children.put("verbose", OptionNode("verbose", "v"))

    assert action.sub_actions() == {"add": child}


def test_sub_actions_absent_when_flag_set() -> None:
    action = ActionNode("remote", is_sub_action=True)
    action.children.put("add", ActionNode("add"))

    assert action.sub_actions() is None


def test_option_alias_must_be_one_character() -> None:
    with pytest.raises(ValueError, match="one character"):
        OptionNode("value", "vv")
    with pytest.raises(ValueError, match="one character"):
        OptionNode("value", "")


def test_executor_of_each_node_kind() -> None:
    def run(values):
        return values

    leaf = ExecutionNode("greet", run)
    action = ActionNode("greet", execution=leaf)

    assert executor_of(leaf) is run
    assert executor_of(action) is run
    assert executor_of(ActionNode("bare")) is None
    assert executor_of(OptionNode("value", "v")) is None
    assert executor_of(ArgumentNode("value")) is None
    assert executor_of(RootNode()) is None


def test_find_by_alias_ignores_non_options() -> None:
    action = ActionNode("add")
    action.children.put("v", ActionNode("v"))
    option = OptionNode("value", "v")
    action.children.put("value", option)

    assert find_by_alias(action, "v") is option
    assert find_by_alias(action, "x") is None
    assert find_by_alias(ExecutionNode("leaf", lambda _v: None), "v") is None


def test_child_map_tolerates_concurrent_writes() -> None:
    children: ChildMap[str, int] = ChildMap()
    children.put("k0", 0)
    stop = threading.Event()

    def writer() -> None:
        i = 0
        while not stop.is_set():
            children.put(f"k{i}", i)
            i += 1

    thread = threading.Thread(target=writer)
    thread.start()
    try:
        for _ in range(200):
            values = children.values()
            assert len(values) <= len(children)
    finally:
        stop.set()
        thread.join()

    assert "k0" in children
    assert list(children)[0] == "k0"
