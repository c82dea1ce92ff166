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

"""TUN 接口预定义地址对与按序号查询入口。"""
from __future__ import annotations

import logging
import threading
from typing import Any, Mapping, Optional, Tuple

from tunaddr.common.system_constants import FALLBACK_IPV6_CLIENT, FALLBACK_IPV6_ROUTER
from tunaddr.core.subnet_allocator import SubnetAllocator
from tunaddr.models.address_models import AddressLookupResult, AddressPairOption, AllocatedPair

logger = logging.getLogger(__name__)


def _option(display: str, v4_client: str, v4_router: str, v6_client: str, v6_router: str) -> AddressPairOption:
    return AddressPairOption(
        display_name=display,
        ipv4_client=v4_client,
        ipv4_router=v4_router,
        ipv6_client=v6_client,
        ipv6_router=v6_router,
    )


# 顺序有意义：序号 0-6 对应界面中的选项顺序
ADDRESS_OPTIONS: Tuple[AddressPairOption, ...] = (
    _option("10.10.14.x", "10.10.14.1", "10.10.14.2", "fc00::10:10:14:1", "fc00::10:10:14:2"),
    _option("10.1.0.x", "10.1.0.1", "10.1.0.2", "fc00::10:1:0:1", "fc00::10:1:0:2"),
    _option("10.0.0.x", "10.0.0.1", "10.0.0.2", "fc00::10:0:0:1", "fc00::10:0:0:2"),
    _option("172.31.0.x", "172.31.0.1", "172.31.0.2", "fc00::172:31:0:1", "fc00::172:31:0:2"),
    _option("172.20.0.x", "172.20.0.1", "172.20.0.2", "fc00::172:20:0:1", "fc00::172:20:0:2"),
    _option("172.16.0.x", "172.16.0.1", "172.16.0.2", "fc00::172:16:0:1", "fc00::172:16:0:2"),
    _option("192.168.100.x", "192.168.100.1", "192.168.100.2", "fc00::192:168:100:1", "fc00::192:168:100:2"),
)


class AddressCatalog:
    """预定义地址对与一次性随机分配结果的持有者。

    首次查询时调用 SubnetAllocator 生成一个地址对并缓存，之后所有查询
    （无论序号）都返回该地址对。缓存一经写入不再改变。
    """

    def __init__(
        self,
        allocator: SubnetAllocator | None = None,
        *,
        ipv6_client: str = FALLBACK_IPV6_CLIENT,
        ipv6_router: str = FALLBACK_IPV6_ROUTER,
        options: Tuple[AddressPairOption, ...] = ADDRESS_OPTIONS,
    ):
        self.allocator = allocator or SubnetAllocator()
        self.ipv6_client = ipv6_client
        self.ipv6_router = ipv6_router
        self._options = tuple(options)
        self._allocated: Optional[AllocatedPair] = None
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, cfg: Mapping[str, Any]) -> AddressCatalog:
        v6_cfg = cfg.get("ipv6_fallback", {}) or {}
        return cls(
            SubnetAllocator.from_config(cfg),
            ipv6_client=v6_cfg.get("client") or FALLBACK_IPV6_CLIENT,
            ipv6_router=v6_cfg.get("router") or FALLBACK_IPV6_ROUTER,
        )

    @property
    def options(self) -> Tuple[AddressPairOption, ...]:
        return self._options

    @property
    def is_initialized(self) -> bool:
        return self._allocated is not None

    def get_option(self, index: int) -> AddressPairOption:
        """返回预定义选项；序号越界时抛出 IndexError。"""
        if not 0 <= index < len(self._options):
            raise IndexError(f"选项序号超出范围: {index} (共 {len(self._options)} 个)")
        return self._options[index]

    def allocated_pair(self) -> AllocatedPair:
        pair = self._allocated
        if pair is not None:
            return pair
        with self._lock:
            if self._allocated is None:
                self._allocated = self.allocator.allocate_pair(self.ipv6_client, self.ipv6_router)
                logger.info(
                    "TUN 接口地址已分配: client=%s router=%s",
                    self._allocated.client_address,
                    self._allocated.router_address,
                )
            return self._allocated

    def get_config_by_index(self, index: int) -> AddressLookupResult:
        """返回缓存的随机分配地址对。

        ``index`` 当前不参与查询，也不会返回预定义选项；越界序号同样不报错。
        """
        # TODO: 与产品确认 index 是否应映射到 ADDRESS_OPTIONS，确认前保持忽略
        return self.allocated_pair().to_lookup_result()


_default_catalog = AddressCatalog()
_default_lock = threading.Lock()


def default_catalog() -> AddressCatalog:
    return _default_catalog


def configure_default_catalog(cfg: Mapping[str, Any]) -> AddressCatalog:
    """按配置重建进程级目录。

    进程级地址对一旦分配即固定，此后再次配置直接返回现有目录。
    """
    global _default_catalog
    with _default_lock:
        if not _default_catalog.is_initialized:
            _default_catalog = AddressCatalog.from_config(cfg)
        return _default_catalog


def get_config_by_index(index: int) -> AddressLookupResult:
    """进程级查询入口，供隧道建立流程调用。"""
    return _default_catalog.get_config_by_index(index)
