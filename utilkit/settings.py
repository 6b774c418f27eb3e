from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import tzinfo
from functools import lru_cache
from pathlib import Path

from dateutil import tz
from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    """Process-wide knobs read from the environment (or a .env file).

    - UTILKIT_TZ: IANA zone used for the "local" date view. Empty means host local.
    - UTILKIT_FILES_DIR: default base directory for create_file().
    """

    tz_name: str | None = None
    files_dir: Path | None = None

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()
        tz_name = os.environ.get("UTILKIT_TZ", "").strip() or None
        files_dir = os.environ.get("UTILKIT_FILES_DIR", "").strip()
        return cls(tz_name=tz_name, files_dir=Path(files_dir) if files_dir else None)

    def zone(self) -> tzinfo:
        if not self.tz_name:
            return tz.tzlocal()
        z = tz.gettz(self.tz_name)
        if z is None:
            raise ValueError(f"Unknown time zone in UTILKIT_TZ: {self.tz_name}")
        return z


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()


def local_zone() -> tzinfo:
    return get_settings().zone()
