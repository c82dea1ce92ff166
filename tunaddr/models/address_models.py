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

"""TUN 接口地址对相关数据模型。"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict
from pydantic import BaseModel, ConfigDict, Field, field_validator

from tunaddr.common.ip_utils import is_ipv4, is_ipv6


class _AddressPair(BaseModel):
    """五字段地址对，字段别名即对外接口中的字段名。"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    display_name: str = Field(..., alias="displayName", description="展示名称")
    ipv4_client: str = Field(..., alias="ipv4Client")
    ipv4_router: str = Field(..., alias="ipv4Router")
    ipv6_client: str = Field(..., alias="ipv6Client")
    ipv6_router: str = Field(..., alias="ipv6Router")

    @field_validator("ipv4_client", "ipv4_router")
    @classmethod
    def _check_ipv4(cls, value: str) -> str:
        if not is_ipv4(value):
            raise ValueError(f"不是合法的 IPv4 地址: {value}")
        return value

    @field_validator("ipv6_client", "ipv6_router")
    @classmethod
    def _check_ipv6(cls, value: str) -> str:
        if not is_ipv6(value):
            raise ValueError(f"不是合法的 IPv6 地址: {value}")
        return value

    def to_dict(self) -> Dict[str, str]:
        return self.model_dump(by_alias=True)


class AddressPairOption(_AddressPair):
    """预定义的地址对选项。"""


class AddressLookupResult(_AddressPair):
    """按序号查询返回给调用方的地址对。"""


@dataclass(frozen=True)
class AllocatedPair:
    """一次随机分配的结果：IPv4 客户端/路由器地址加固定的 IPv6 回退地址。"""

    client_address: str
    router_address: str
    ipv6_client: str
    ipv6_router: str

    def to_lookup_result(self) -> AddressLookupResult:
        # 当前行为：展示名称直接复用客户端地址
        return AddressLookupResult(
            display_name=self.client_address,
            ipv4_client=self.client_address,
            ipv4_router=self.router_address,
            ipv6_client=self.ipv6_client,
            ipv6_router=self.ipv6_router,
        )
