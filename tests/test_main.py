import pytest

from comandante import main as main_module
from comandante.config import ShellConfig


def test_main_dispatches_to_tui_by_default(monkeypatch) -> None:
    calls: list[object] = []
    monkeypatch.setattr(main_module, "run_tui", lambda config: calls.append(config))

    main_module.main([])

    assert len(calls) == 1
    assert isinstance(calls[0], ShellConfig)


def test_main_plain_flag_runs_console_shell(monkeypatch) -> None:
    calls: list[object] = []
    monkeypatch.setattr(main_module.cli, "main", lambda config: calls.append(config))
    monkeypatch.setattr(main_module, "run_tui", lambda config: pytest.fail("tui started"))

    main_module.main(["--plain"])

    assert len(calls) == 1


def test_main_rejects_unknown_flag() -> None:
    with pytest.raises(SystemExit):
        main_module.main(["--shell"])
