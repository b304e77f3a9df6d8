"""Built-in self-describing commands."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console

from .register import CommandRegister

BUILTIN_ACTION = "comandante"


def register_builtin_commands(register: CommandRegister, console: Console) -> None:
    """Register ``comandante list`` and ``comandante help --command NAME``."""

    def list_commands(_values: Sequence[str]) -> list[str]:
        """Print every registered command."""
        names = sorted(register.list_execution_commands())
        for name in names:
            console.print(name, markup=False, highlight=False)
        return names

    def describe_command(values: Sequence[str]) -> list[str]:
        """Print the usage of every command starting with NAME."""
        name = _values_to_arg(values)
        usages = sorted(
            usage
            for usage in register.list_execution_commands()
            if usage.split(" ", 1)[0] == name
        )
        if not usages:
            console.print(f"{name} is not a registered command.", markup=False, highlight=False)
        for usage in usages:
            console.print(usage, markup=False, highlight=False)
        return usages

    base = register.builder().action(BUILTIN_ACTION)
    base.action("list", sub_action=True).executor(list_commands)
    (
        base.action("help", sub_action=True)
        .option("command", "c")
        .argument()
        .executor(describe_command)
    )


def _values_to_arg(values: Sequence[str]) -> str:
    return " ".join(values).strip()
