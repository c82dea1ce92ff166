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

"""命令行接口。"""
from __future__ import annotations

import os
from pathlib import Path
import typer
from rich.console import Console
from rich.table import Table
from .common.config import Config, load_config
from .common.ip_utils import InvalidAddressFormat, format_address
from .common.logging_config import setup_logging_from_config
from .core.address_catalog import ADDRESS_OPTIONS, configure_default_catalog, get_config_by_index
from .core.subnet_allocator import PoolExhausted, SubnetAllocator


def _is_en() -> bool:
    lang = os.environ.get("TUNADDR_LANG", "").lower()
    return lang.startswith("en")


def _t(cn: str, en: str) -> str:
    return en if _is_en() else cn


app = typer.Typer(help=_t("TUN 接口地址分配 CLI", "TUN interface address CLI"))
console = Console()


def _prepare(config: Path | None, seed: int | None = None) -> Config:
    cfg = load_config(config)
    if seed is not None:
        cfg["allocator"]["seed"] = seed
    setup_logging_from_config(cfg)
    return cfg


@app.command(help=_t("列出预定义的地址对选项。", "List predefined address pair options."))
def options():
    table = Table(title=_t("预定义地址对", "Predefined address pairs"))
    for column in ("#", "display", "ipv4 client", "ipv4 router", "ipv6 client", "ipv6 router"):
        table.add_column(column)
    for idx, opt in enumerate(ADDRESS_OPTIONS):
        table.add_row(
            str(idx),
            opt.display_name,
            opt.ipv4_client,
            opt.ipv4_router,
            opt.ipv6_client,
            opt.ipv6_router,
        )
    console.print(table)


@app.command(help=_t("显示保留地址池边界与 /30 子网数量。", "Show reserved pool bounds and /30 subnet count."))
def pool(config: Path | None = typer.Option(None, help=_t("配置文件路径", "Config file path"))):
    try:
        allocator = SubnetAllocator.from_config(_prepare(config))
    except InvalidAddressFormat as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1)
    console.print_json(data={
        "start": format_address(allocator.pool.start_address),
        "end": format_address(allocator.pool.end_address),
        "total_subnets": allocator.total_subnets,
    })


@app.command(help=_t("从保留地址池随机抽取 /30 地址对。", "Draw random /30 pairs from the reserved pool."))
def allocate(
    count: int = typer.Option(1, min=1, help=_t("抽取数量", "Number of pairs")),
    config: Path | None = typer.Option(None, help=_t("配置文件路径", "Config file path")),
    seed: int | None = typer.Option(None, help=_t("随机种子，便于复现", "Random seed for reproducible draws")),
):
    try:
        allocator = SubnetAllocator.from_config(_prepare(config, seed))
        pairs = [allocator.allocate() for _ in range(count)]
    except (InvalidAddressFormat, PoolExhausted) as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1)
    console.print_json(data=[{"client": client, "router": router} for client, router in pairs])


# "-1" 等负数序号按位置参数解析
@app.command(
    help=_t("按序号查询 TUN 接口地址对（同一进程内始终返回同一地址对）。",
            "Look up the TUN interface address pair by index (same pair for the whole process)."),
    context_settings={"ignore_unknown_options": True},
)
def lookup(
    index: int = typer.Argument(0, help=_t("选项序号", "Option index")),
    config: Path | None = typer.Option(None, help=_t("配置文件路径", "Config file path")),
):
    try:
        configure_default_catalog(_prepare(config))
        result = get_config_by_index(index)
    except (InvalidAddressFormat, PoolExhausted) as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1)
    console.print_json(data=result.to_dict())


if __name__ == "__main__":  # pragma: no cover
    app()
