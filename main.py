# SPDX-License-Identifier: GPL-3.0-or-later
# This file is part of TunAddr.
#
# TunAddr is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# TunAddr is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with TunAddr.  If not, see <https://www.gnu.org/licenses/>.

"""交互式入口：循环读取命令并交给 TunAddr CLI 执行。"""
from __future__ import annotations

import os
import shlex
import sys


def _is_en() -> bool:
    lang = os.environ.get("TUNADDR_LANG", "").lower()
    return lang.startswith("en")


def _t(cn: str, en: str) -> str:
    return en if _is_en() else cn


def _invoke_cli(args: list[str]) -> None:
    from tunaddr.command_line_interface import app as cli_app

    try:
        cli_app(prog_name="tunaddr", args=args)
    except SystemExit as exc:  # Typer/Click 会抛出 SystemExit
        if exc.code not in (0, None):
            print(_t(f"命令以退出码 {exc.code} 结束", f"Command exited with code {exc.code}"))
    except Exception as exc:  # noqa: BLE001 - 交互模式下不因单条命令失败而退出
        print(_t(f"执行命令失败: {exc}", f"Command failed: {exc}"))


def run_shell() -> None:
    print(_t("欢迎使用 TunAddr CLI。请输入命令（例如: lookup 0），输入 exit 退出。",
             "Welcome to TunAddr CLI. Type commands (e.g., lookup 0); type exit to quit."))
    print(_t("输入 help 查看指令列表。", "Type help to list commands."))
    while True:
        try:
            command = input("tunaddr> ").strip()
        except EOFError:
            break
        except KeyboardInterrupt:
            print(_t("\n已取消当前命令。", "\nCommand canceled."))
            continue

        if not command:
            continue
        normalized = command.lower()
        if normalized in {"exit", "quit", "q"}:
            break
        if normalized in {"help", "?"}:
            _invoke_cli(["--help"])
            continue

        try:
            args = shlex.split(command)
        except ValueError as exc:
            print(_t(f"无法解析命令: {exc}", f"Cannot parse command: {exc}"))
            continue

        _invoke_cli(args)

    print(_t("再见！", "Goodbye!"))


def main() -> None:
    # 带参数时直接执行单条命令，否则进入交互模式
    if len(sys.argv) > 1:
        _invoke_cli(sys.argv[1:])
        return
    run_shell()


if __name__ == "__main__":  # pragma: no cover
    main()
