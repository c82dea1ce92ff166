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

"""全局常量与魔法字符串集中管理。"""
from pathlib import Path

# 动态分配使用的保留地址池（含两端）
DEFAULT_POOL_START = "10.250.0.0"
DEFAULT_POOL_END = "10.255.255.252"

# 每个 /30 子网占用 4 个地址：网络、客户端、路由器、广播
SUBNET_BLOCK_SIZE = 4
CLIENT_OFFSET = 1
ROUTER_OFFSET = 2

# IPv6 不做随机分配，固定回退地址
FALLBACK_IPV6_CLIENT = "fc00::10:0:0:1"
FALLBACK_IPV6_ROUTER = "fc00::10:0:0:2"

# 日志与配置目录
PACKAGE_DIR = Path(__file__).resolve().parent.parent
PROJECT_ROOT = PACKAGE_DIR.parent
CONFIG_DIR = PACKAGE_DIR / "config"
LOG_DIR = PROJECT_ROOT / "logs"

DEFAULT_CONFIG_FILE = CONFIG_DIR / "default.yml"
