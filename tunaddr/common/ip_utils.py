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

"""IPv4 地址编解码与地址类型判断。

提供：
* parse_address -> 点分十进制文本转 32 位无符号整数
* format_address -> 32 位整数转点分十进制文本
* is_ipv4 / is_ipv6
"""
from __future__ import annotations
from ipaddress import ip_address, IPv4Address, IPv6Address

MAX_IPV4 = 0xFFFFFFFF


class InvalidAddressFormat(ValueError):
    """点分十进制文本或整数值不是合法的 IPv4 地址。"""


def parse_address(text: str) -> int:
    """将 ``a.b.c.d`` 按高位在前折叠为 32 位整数。

    要求恰好 4 段，每段为 0-255 的十进制数字，否则抛出 InvalidAddressFormat。
    """
    if not isinstance(text, str):
        raise InvalidAddressFormat(f"地址必须是字符串: {text!r}")
    parts = text.split(".")
    if len(parts) != 4:
        raise InvalidAddressFormat(f"地址必须包含 4 段: {text!r}")
    value = 0
    for part in parts:
        # 仅接受 ASCII 数字，排除 "+1"、" 1" 等 int() 能接受的写法
        if not (part.isascii() and part.isdigit()):
            raise InvalidAddressFormat(f"非法地址段 {part!r}: {text!r}")
        octet = int(part)
        if octet > 255:
            raise InvalidAddressFormat(f"地址段超出 0-255 范围 {part!r}: {text!r}")
        value = (value << 8) | octet
    return value


def format_address(value: int) -> str:
    """将 32 位整数渲染为点分十进制文本。"""
    if not 0 <= value <= MAX_IPV4:
        raise InvalidAddressFormat(f"整数超出 32 位地址范围: {value}")
    return ".".join(
        str((value >> shift) & 0xFF) for shift in (24, 16, 8, 0)
    )


def is_ipv4(val: str) -> bool:
    try:
        return isinstance(ip_address(val), IPv4Address)
    except ValueError:
        return False


def is_ipv6(val: str) -> bool:
    try:
        return isinstance(ip_address(val), IPv6Address)
    except ValueError:
        return False
