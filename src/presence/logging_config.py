from __future__ import annotations

import sys
from datetime import datetime, timezone
from typing import Callable, Optional

from loguru import logger

from presence.config import LoggingConfig

_CONFIGURED = False


def _level_filter(level: str) -> Callable[[dict], bool]:
    def _filter(record: dict) -> bool:
        return record["level"].name == level

    return _filter


def configure_logging(config: Optional[LoggingConfig] = None, force: bool = False) -> None:
    """
    Configure Loguru sinks:
      • stderr at config.level
      • when config.log_dir is set, JSON lines per level under
        <log_dir>/YYYY-MM-DD/{debug,info,error}.json
    Every record carries service, version and env extras.
    """
    global _CONFIGURED
    if _CONFIGURED and not force:
        return

    config = config or LoggingConfig.from_env()
    logger.remove()

    if config.disabled:
        _CONFIGURED = True
        return

    logger.add(sys.stderr, level=config.level, colorize=sys.stderr.isatty(), enqueue=False)

    if config.log_dir is not None:
        day_dir = config.log_dir / datetime.now(timezone.utc).strftime("%Y-%m-%d")
        day_dir.mkdir(parents=True, exist_ok=True)

        common_kwargs = {
            "serialize": True,
            "rotation": "10 MB",
            "retention": "30 days",
            "enqueue": True,
        }
        for level in ("DEBUG", "INFO", "ERROR"):
            logger.add(
                day_dir / f"{level.lower()}.json",
                level=level,
                filter=_level_filter(level),
                **common_kwargs,
            )

    logger.configure(
        extra={
            "service": config.service,
            "version": config.version,
            "env": config.environment,
        }
    )

    _CONFIGURED = True
