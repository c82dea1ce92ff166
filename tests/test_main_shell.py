# SPDX-License-Identifier: GPL-3.0-or-later
"""交互式入口的单元测试。"""
from __future__ import annotations

import main
from tunaddr import command_line_interface as cli


def test_invoke_cli_survives_unexpected_error(monkeypatch, capsys):
    def broken_app(*args, **kwargs):
        raise OSError("logs 目录不可写")

    monkeypatch.setenv("TUNADDR_LANG", "en")
    monkeypatch.setattr(cli, "app", broken_app)

    main._invoke_cli(["lookup", "0"])

    assert "Command failed: logs 目录不可写" in capsys.readouterr().out


def test_invoke_cli_reports_nonzero_exit(monkeypatch, capsys):
    def exiting_app(*args, **kwargs):
        raise SystemExit(2)

    monkeypatch.setenv("TUNADDR_LANG", "en")
    monkeypatch.setattr(cli, "app", exiting_app)

    main._invoke_cli(["bogus"])

    assert "exited with code 2" in capsys.readouterr().out


def test_shell_keeps_running_after_failure(monkeypatch, capsys):
    calls = []

    def flaky_app(*args, **kwargs):
        calls.append(kwargs.get("args"))
        if len(calls) == 1:
            raise RuntimeError("boom")

    commands = iter(["lookup 0", "lookup 6", "exit"])
    monkeypatch.setenv("TUNADDR_LANG", "en")
    monkeypatch.setattr(cli, "app", flaky_app)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(commands))

    main.run_shell()

    assert calls == [["lookup", "0"], ["lookup", "6"]]
    assert "Command failed: boom" in capsys.readouterr().out
