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

"""TUN 接口地址分配工具包。

提供：
- IPv4 地址编解码
- 保留地址池内 /30 子网随机分配
- 预定义地址对与按序号查询入口
- CLI 接口
"""
from .application_version import __version__  # noqa: F401
