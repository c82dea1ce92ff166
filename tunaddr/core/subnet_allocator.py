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

"""从保留地址池中随机选取 /30 子网。

地址池以起止地址（含两端）描述，按 4 地址一组从起始地址开始切分：
``start``, ``start + 4``, ... 每组依次为网络、客户端、路由器、广播地址。
分配时均匀抽取一组，返回其第 2、3 个地址。

不做冲突检测：重复调用或多个隧道实例可能得到相同的地址对。
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple

from tunaddr.common.ip_utils import format_address, parse_address
from tunaddr.common.system_constants import (
    CLIENT_OFFSET,
    DEFAULT_POOL_END,
    DEFAULT_POOL_START,
    ROUTER_OFFSET,
    SUBNET_BLOCK_SIZE,
)
from tunaddr.models.address_models import AllocatedPair

logger = logging.getLogger(__name__)


class PoolExhausted(RuntimeError):
    """保留地址池内没有可用的 /30 子网。"""


@dataclass(frozen=True)
class ReservedPool:
    """保留地址池，起止地址均为 32 位整数（含两端）。"""

    start_address: int
    end_address: int

    @classmethod
    def from_text(cls, start: str, end: str) -> ReservedPool:
        return cls(start_address=parse_address(start), end_address=parse_address(end))

    @classmethod
    def default(cls) -> ReservedPool:
        return cls.from_text(DEFAULT_POOL_START, DEFAULT_POOL_END)

    @classmethod
    def from_config(cls, cfg: Mapping[str, Any]) -> ReservedPool:
        pool_cfg = cfg.get("pool", {}) or {}
        start = str(pool_cfg.get("start") or DEFAULT_POOL_START)
        end = str(pool_cfg.get("end") or DEFAULT_POOL_END)
        return cls.from_text(start, end)

    @property
    def total_subnets(self) -> int:
        """从起始地址开始可切分出的 4 地址块数量（整除）。"""
        return (self.end_address - self.start_address) // SUBNET_BLOCK_SIZE

    def contains(self, value: int) -> bool:
        return self.start_address <= value <= self.end_address

    def subnet_base(self, index: int) -> int:
        if not 0 <= index < self.total_subnets:
            raise IndexError(f"子网序号超出范围: {index} (共 {self.total_subnets} 个)")
        return self.start_address + index * SUBNET_BLOCK_SIZE

    def __str__(self) -> str:
        return f"{format_address(self.start_address)}-{format_address(self.end_address)}"


class SubnetAllocator:
    """在保留地址池中均匀抽取 /30 子网并给出客户端/路由器地址。

    Args:
        pool: 保留地址池，缺省使用 10.250.0.0-10.255.255.252。
        rng: 可选随机源；缺省使用 ``random`` 模块的进程级随机源。
    """

    def __init__(self, pool: ReservedPool | None = None, rng: Optional[random.Random] = None):
        self.pool = pool or ReservedPool.default()
        self._rng = rng

    @classmethod
    def from_config(cls, cfg: Mapping[str, Any]) -> SubnetAllocator:
        seed = (cfg.get("allocator", {}) or {}).get("seed")
        rng = random.Random(seed) if seed is not None else None
        return cls(ReservedPool.from_config(cfg), rng=rng)

    @property
    def total_subnets(self) -> int:
        return self.pool.total_subnets

    def _draw_index(self, total: int) -> int:
        if self._rng is not None:
            return self._rng.randrange(total)
        return random.randrange(total)

    def allocate(self) -> Tuple[str, str]:
        """抽取一个 /30 子网，返回 (客户端地址, 路由器地址)。"""
        total = self.pool.total_subnets
        if total <= 0:
            logger.error("保留地址池 %s 无可用 /30 子网", self.pool)
            raise PoolExhausted(f"保留地址池 {self.pool} 无可用 /30 子网")

        index = self._draw_index(total)
        subnet_base = self.pool.subnet_base(index)
        client = format_address(subnet_base + CLIENT_OFFSET)
        router = format_address(subnet_base + ROUTER_OFFSET)
        logger.debug("分配子网 #%d/%d: client=%s router=%s", index, total, client, router)
        return client, router

    def allocate_pair(self, ipv6_client: str, ipv6_router: str) -> AllocatedPair:
        client, router = self.allocate()
        return AllocatedPair(
            client_address=client,
            router_address=router,
            ipv6_client=ipv6_client,
            ipv6_router=ipv6_router,
        )
