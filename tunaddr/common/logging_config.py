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

"""日志初始化模块。

日志同时输出到控制台与轮转文件；文件位置与轮转参数可由配置
``logging`` 段（或 TUNADDR_LOG_FILE 环境变量）指定。
"""
from __future__ import annotations
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Mapping
from .system_constants import LOG_DIR

DEFAULT_LOG_FILE = LOG_DIR / "tunaddr.log"
DEFAULT_MAX_BYTES = 2 * 1024 * 1024
DEFAULT_BACKUP_COUNT = 5

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(level: Any) -> int:
    if isinstance(level, int):
        return level
    resolved = getattr(logging, str(level).upper(), None)
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(
    level: Any = "INFO",
    log_file: Path | str | None = None,
    *,
    max_bytes: int = DEFAULT_MAX_BYTES,
    backup_count: int = DEFAULT_BACKUP_COUNT,
) -> Path:
    """初始化日志配置，返回实际使用的日志文件路径。

    Args:
        level: 日志级别，字符串或 logging 常量；无法识别时回退到 INFO。
        log_file: 日志文件路径，缺省为 ``logs/tunaddr.log``。
        max_bytes: 单个日志文件的轮转阈值。
        backup_count: 保留的轮转文件数量。
    """
    log_level = _resolve_level(level)
    target = Path(log_file) if log_file else DEFAULT_LOG_FILE

    # force 会移除根日志器上已有的处理器（含上一次的文件处理器）
    logging.basicConfig(level=log_level, format=LOG_FORMAT, datefmt=DATE_FORMAT, force=True)
    root = logging.getLogger()
    root.setLevel(log_level)

    target.parent.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(
        target,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    file_handler.setLevel(log_level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    root.addHandler(file_handler)

    logging.getLogger(__name__).debug("日志系统初始化完成，文件: %s", target)
    return target


def setup_logging_from_config(cfg: Mapping[str, Any]) -> Path:
    """按配置中的 ``logging`` 段初始化日志。"""
    log_cfg = cfg.get("logging", {}) or {}
    return setup_logging(
        log_cfg.get("level", "INFO"),
        log_cfg.get("file"),
        max_bytes=int(log_cfg.get("max_bytes") or DEFAULT_MAX_BYTES),
        backup_count=int(log_cfg.get("backup_count") or DEFAULT_BACKUP_COUNT),
    )
