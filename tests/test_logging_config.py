import logging

from tunaddr.common import logging_config


def test_setup_logging_updates_level(tmp_path, monkeypatch):
    log_path = tmp_path / "logs" / "tunaddr.log"
    monkeypatch.setattr(logging_config, "DEFAULT_LOG_FILE", log_path, raising=False)

    logging_config.setup_logging("INFO")
    logging_config.setup_logging("DEBUG")

    logger = logging.getLogger("tunaddr.tests.logging")
    logger.debug("debug-entry")

    for handler in logging.getLogger().handlers:
        handler.flush()

    assert log_path.exists()
    assert "debug-entry" in log_path.read_text(encoding="utf-8")


def test_unknown_level_falls_back_to_info(tmp_path, monkeypatch):
    monkeypatch.setattr(logging_config, "DEFAULT_LOG_FILE", tmp_path / "t.log", raising=False)

    logging_config.setup_logging("verbose")

    assert logging.getLogger().level == logging.INFO


def test_explicit_log_file_and_non_string_level(tmp_path):
    target = tmp_path / "nested" / "run.log"

    used = logging_config.setup_logging(10, target, max_bytes=1024, backup_count=1)
    logging.getLogger("tunaddr.tests.logging").debug("explicit-entry")

    for handler in logging.getLogger().handlers:
        handler.flush()

    assert used == target
    assert logging.getLogger().level == logging.DEBUG
    assert "explicit-entry" in target.read_text(encoding="utf-8")


def test_setup_from_config_section(tmp_path):
    target = tmp_path / "from_cfg.log"
    cfg = {"logging": {"level": "warning", "file": str(target), "max_bytes": 4096, "backup_count": 2}}

    used = logging_config.setup_logging_from_config(cfg)

    assert used == target
    assert logging.getLogger().level == logging.WARNING
    handler = next(h for h in logging.getLogger().handlers if isinstance(h, logging_config.RotatingFileHandler))
    assert handler.maxBytes == 4096
    assert handler.backupCount == 2


def test_setup_from_config_ignores_unknown_level_type(tmp_path):
    cfg = {"logging": {"level": ["DEBUG"], "file": str(tmp_path / "x.log")}}

    logging_config.setup_logging_from_config(cfg)

    assert logging.getLogger().level == logging.INFO
