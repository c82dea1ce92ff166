# SPDX-License-Identifier: GPL-3.0-or-later
"""命令行接口测试。"""
from __future__ import annotations

import json
import random

import pytest
from rich.console import Console
from typer.testing import CliRunner

from tunaddr import command_line_interface as cli
from tunaddr.common import logging_config
from tunaddr.common.ip_utils import parse_address
from tunaddr.core import address_catalog
from tunaddr.core.address_catalog import AddressCatalog

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_logs(tmp_path, monkeypatch):
    monkeypatch.setattr(logging_config, "DEFAULT_LOG_FILE", tmp_path / "tunaddr.log", raising=False)
    monkeypatch.setattr(cli, "console", Console(color_system=None, width=200))
    monkeypatch.setattr(address_catalog, "_default_catalog", AddressCatalog())
    for key in ("TUNADDR_POOL_START", "TUNADDR_POOL_END", "TUNADDR_SEED", "TUNADDR_LOG_LEVEL", "TUNADDR_LOG_FILE"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("TUNADDR_LANG", "en")


def _write_config(tmp_path, body: str):
    path = tmp_path / "conf.yml"
    path.write_text(body, encoding="utf-8")
    return path


def test_options_lists_catalog():
    result = runner.invoke(cli.app, ["options"])

    assert result.exit_code == 0
    assert "192.168.100.x" in result.stdout
    assert "10.10.14.1" in result.stdout


def test_pool_reports_subnet_count():
    result = runner.invoke(cli.app, ["pool"])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data == {"start": "10.250.0.0", "end": "10.255.255.252", "total_subnets": 98303}


def test_allocate_with_seed_is_reproducible():
    result = runner.invoke(cli.app, ["allocate", "--count", "3", "--seed", "21"])

    assert result.exit_code == 0
    pairs = json.loads(result.stdout)
    rng = random.Random(21)
    start = parse_address("10.250.0.0")
    assert len(pairs) == 3
    for pair in pairs:
        base = start + rng.randrange(98303) * 4
        assert parse_address(pair["client"]) == base + 1
        assert parse_address(pair["router"]) == base + 2


def test_lookup_prints_boundary_fields(tmp_path):
    cfg = _write_config(tmp_path, "allocator:\n  seed: 4\n")

    result = runner.invoke(cli.app, ["lookup", "5", "--config", str(cfg)])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert set(data) == {"displayName", "ipv4Client", "ipv4Router", "ipv6Client", "ipv6Router"}
    assert data["displayName"] == data["ipv4Client"]
    assert data["ipv6Client"] == "fc00::10:0:0:1"


def test_lookup_reports_exhausted_pool(tmp_path):
    cfg = _write_config(tmp_path, "pool:\n  start: 10.0.0.0\n  end: 10.0.0.3\n")

    result = runner.invoke(cli.app, ["lookup", "0", "--config", str(cfg)])

    assert result.exit_code == 1


def test_pool_reports_malformed_address(tmp_path):
    cfg = _write_config(tmp_path, "pool:\n  start: 10.0.0\n  end: 10.0.0.3\n")

    result = runner.invoke(cli.app, ["pool", "--config", str(cfg)])

    assert result.exit_code == 1


def test_lookup_returns_same_pair_within_process():
    first = runner.invoke(cli.app, ["lookup", "0"])
    second = runner.invoke(cli.app, ["lookup", "6"])

    assert first.exit_code == 0
    assert second.exit_code == 0
    assert json.loads(first.stdout) == json.loads(second.stdout)
    assert address_catalog.default_catalog().get_config_by_index(3).to_dict() == json.loads(first.stdout)


def test_lookup_keeps_pair_when_config_changes_later(tmp_path):
    first = runner.invoke(cli.app, ["lookup", "1"])
    cfg = _write_config(tmp_path, "allocator:\n  seed: 8\n")
    second = runner.invoke(cli.app, ["lookup", "2", "--config", str(cfg)])

    assert json.loads(first.stdout) == json.loads(second.stdout)


def test_lookup_recovers_after_exhausted_pool(tmp_path):
    bad = _write_config(tmp_path, "pool:\n  start: 10.0.0.0\n  end: 10.0.0.3\n")
    assert runner.invoke(cli.app, ["lookup", "0", "--config", str(bad)]).exit_code == 1

    result = runner.invoke(cli.app, ["lookup", "0"])

    assert result.exit_code == 0
    assert json.loads(result.stdout)["ipv4Client"].startswith("10.2")


def test_lookup_accepts_negative_index():
    negative = runner.invoke(cli.app, ["lookup", "-1"])
    positive = runner.invoke(cli.app, ["lookup", "4"])

    assert negative.exit_code == 0
    assert json.loads(negative.stdout) == json.loads(positive.stdout)


def test_log_file_from_config(tmp_path):
    log_path = tmp_path / "custom" / "cli.log"
    cfg = _write_config(tmp_path, f"logging:\n  level: DEBUG\n  file: {log_path.as_posix()}\n")

    result = runner.invoke(cli.app, ["pool", "--config", str(cfg)])

    assert result.exit_code == 0
    assert log_path.exists()
