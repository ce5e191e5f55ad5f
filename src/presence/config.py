from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

__version__ = "0.1.0"


@dataclass(frozen=True)
class LoggingConfig:
    service: str = "presence"
    version: str = __version__
    environment: str = "dev"
    level: str = "WARNING"
    log_dir: Optional[Path] = None
    disabled: bool = False

    @classmethod
    def from_env(cls) -> LoggingConfig:
        """
        Read settings from the environment:
          • PRESENCE_LOG_LEVEL   stderr sink level (default WARNING)
          • PRESENCE_LOG_DIR     enables JSON file sinks under this directory
          • PRESENCE_ENV         deployment tag bound on every record
          • PRESENCE_VERSION     version tag bound on every record
          • PRESENCE_DISABLE_LOGS=1 removes every sink
        """
        log_dir = os.getenv("PRESENCE_LOG_DIR")
        return cls(
            version=os.getenv("PRESENCE_VERSION", __version__),
            environment=os.getenv("PRESENCE_ENV", "dev"),
            level=os.getenv("PRESENCE_LOG_LEVEL", "WARNING").upper(),
            log_dir=Path(log_dir) if log_dir else None,
            disabled=os.getenv("PRESENCE_DISABLE_LOGS") == "1",
        )
