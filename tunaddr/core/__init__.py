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

"""地址分配核心：子网抽取与预定义地址对。"""
from .subnet_allocator import PoolExhausted, ReservedPool, SubnetAllocator  # noqa: F401
from .address_catalog import (  # noqa: F401
    ADDRESS_OPTIONS,
    AddressCatalog,
    configure_default_catalog,
    default_catalog,
    get_config_by_index,
)
