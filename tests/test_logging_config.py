import json
from pathlib import Path

from loguru import logger

from presence.config import LoggingConfig, __version__
from presence.logging_config import configure_logging


def test_config_defaults(monkeypatch):
    for name in ("PRESENCE_LOG_LEVEL", "PRESENCE_LOG_DIR", "PRESENCE_ENV", "PRESENCE_VERSION", "PRESENCE_DISABLE_LOGS"):
        monkeypatch.delenv(name, raising=False)
    config = LoggingConfig.from_env()
    assert config.level == "WARNING"
    assert config.log_dir is None
    assert config.environment == "dev"
    assert config.version == __version__
    assert not config.disabled

def test_config_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("PRESENCE_LOG_LEVEL", "debug")
    monkeypatch.setenv("PRESENCE_LOG_DIR", str(tmp_path))
    monkeypatch.setenv("PRESENCE_ENV", "ci")
    monkeypatch.setenv("PRESENCE_DISABLE_LOGS", "1")
    config = LoggingConfig.from_env()
    assert config.level == "DEBUG"
    assert config.log_dir == Path(tmp_path)
    assert config.environment == "ci"
    assert config.disabled

def test_file_sinks_are_created(tmp_path):
    configure_logging(LoggingConfig(level="DEBUG", log_dir=tmp_path, environment="ci"), force=True)
    logger.info("presence logging check")
    logger.complete()
    logger.remove()
    day_dirs = list(tmp_path.iterdir())
    assert len(day_dirs) == 1
    assert day_dirs[0].is_dir()

    lines = (day_dirs[0] / "info.json").read_text().splitlines()
    assert len(lines) == 1
    record = json.loads(lines[0])["record"]
    assert record["message"] == "presence logging check"
    assert record["extra"]["service"] == "presence"
    assert record["extra"]["env"] == "ci"
    assert (day_dirs[0] / "debug.json").read_text() == ""

def test_configure_is_idempotent_without_force(tmp_path):
    configure_logging(LoggingConfig(disabled=True), force=True)
    configure_logging(LoggingConfig(log_dir=tmp_path))
    assert list(tmp_path.iterdir()) == []
