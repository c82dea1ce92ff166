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

"""配置加载模块。"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import os
import yaml

from ..system_constants import (
    DEFAULT_CONFIG_FILE,
    DEFAULT_POOL_END,
    DEFAULT_POOL_START,
    FALLBACK_IPV6_CLIENT,
    FALLBACK_IPV6_ROUTER,
)


class Config(dict):
    """配置对象，dict子类，支持点式访问（简单实现）。"""

    def __getattr__(self, item):  # noqa: D401
        try:
            return self[item]
        except KeyError as exc:
            raise AttributeError(item) from exc


def load_config(path: Path | None = None) -> Config:
    """加载YAML配置，叠加环境变量覆盖后返回Config对象。"""

    cfg_path = path or DEFAULT_CONFIG_FILE
    data: Dict[str, Any] = {}
    if cfg_path.exists():
        with cfg_path.open("r", encoding="utf-8") as file:
            data = yaml.safe_load(file) or {}

    env_overrides = _load_env_overrides()
    if env_overrides:
        data = _deep_merge_dicts(data, env_overrides)

    data = _apply_defaults(data)

    return Config(data)


def _load_env_overrides() -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}

    def _pick_env(*keys: str) -> str | None:
        for key in keys:
            value = os.getenv(key)
            if value:
                return value.strip()
        return None

    start = _pick_env("TUNADDR_POOL_START")
    if start:
        overrides.setdefault("pool", {})["start"] = start

    end = _pick_env("TUNADDR_POOL_END")
    if end:
        overrides.setdefault("pool", {})["end"] = end

    v6_client = _pick_env("TUNADDR_IPV6_CLIENT")
    if v6_client:
        overrides.setdefault("ipv6_fallback", {})["client"] = v6_client

    v6_router = _pick_env("TUNADDR_IPV6_ROUTER")
    if v6_router:
        overrides.setdefault("ipv6_fallback", {})["router"] = v6_router

    seed_raw = _pick_env("TUNADDR_SEED")
    if seed_raw:
        try:
            overrides.setdefault("allocator", {})["seed"] = int(seed_raw)
        except ValueError:
            pass

    level = _pick_env("TUNADDR_LOG_LEVEL")
    if level:
        overrides.setdefault("logging", {})["level"] = level.upper()

    log_file = _pick_env("TUNADDR_LOG_FILE")
    if log_file:
        overrides.setdefault("logging", {})["file"] = log_file

    return overrides


def _deep_merge_dicts(original: Dict[str, Any], updates: Dict[str, Any]) -> Dict[str, Any]:
    result = dict(original)
    for key, value in updates.items():
        if (
            key in result
            and isinstance(result[key], dict)
            and isinstance(value, dict)
        ):
            result[key] = _deep_merge_dicts(result[key], value)
        else:
            result[key] = value
    return result


def _apply_defaults(data: Dict[str, Any] | None) -> Dict[str, Any]:
    result = dict(data or {})

    pool_cfg = dict(result.get("pool", {}) or {})
    pool_cfg.setdefault("start", DEFAULT_POOL_START)
    pool_cfg.setdefault("end", DEFAULT_POOL_END)
    result["pool"] = pool_cfg

    v6_cfg = dict(result.get("ipv6_fallback", {}) or {})
    v6_cfg.setdefault("client", FALLBACK_IPV6_CLIENT)
    v6_cfg.setdefault("router", FALLBACK_IPV6_ROUTER)
    result["ipv6_fallback"] = v6_cfg

    allocator_cfg = dict(result.get("allocator", {}) or {})
    allocator_cfg.setdefault("seed", None)
    result["allocator"] = allocator_cfg

    logging_cfg = dict(result.get("logging", {}) or {})
    logging_cfg.setdefault("level", "INFO")
    logging_cfg.setdefault("file", None)
    result["logging"] = logging_cfg

    return result
