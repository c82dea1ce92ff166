# SPDX-License-Identifier: GPL-3.0-or-later
from tunaddr import __version__
from tunaddr.common import format_address, parse_address


def test_version():
    assert __version__.count('.') == 2


def test_package_exports():
    assert format_address(parse_address("10.10.14.1")) == "10.10.14.1"
