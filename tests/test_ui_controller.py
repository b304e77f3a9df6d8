import io

from rich.console import Console

from comandante.context import CommandContext
from comandante.sources import QueueInputSource
from comandante.ui.controller import ShellController


def _new_controller() -> ShellController:
    context = CommandContext(QueueInputSource(), console=Console(file=io.StringIO(), width=120))
    context.install_builtins()
    context.builder().action("add").option("value", "v").argument().executor(
        lambda values: int(values[0]) + 1
    )
    return ShellController(context)


def test_snapshot_starts_empty() -> None:
    controller = _new_controller()

    snap = controller.snapshot()
    assert snap.transcript == ()
    assert snap.status == "ready"
    assert "add --value <value>" in snap.commands


def test_submit_records_result() -> None:
    controller = _new_controller()

    assert controller.submit("add -v 41") == "ok"
    assert controller.snapshot().transcript == ("> add -v 41", "42")


def test_submit_records_console_output() -> None:
    controller = _new_controller()

    assert controller.submit("comandante help --command add") == "ok"
    assert controller.snapshot().transcript == (
        "> comandante help --command add",
        "add --value <value>",
    )


def test_submit_error_paths() -> None:
    controller = _new_controller()

    assert controller.submit("") == "empty command"
    assert controller.snapshot().transcript == ()

    assert controller.submit("add") == "command not found"
    assert controller.snapshot().transcript[-1] == "error: No executor bound with this command."

    assert controller.submit("add -v x") == "command failed"
    assert controller.snapshot().transcript[-1].startswith("command error: invalid literal")
