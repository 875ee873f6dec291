import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List


def _split_origins(value: str) -> List[str]:
    return [origin.strip() for origin in value.split(",") if origin.strip()]


@dataclass
class Settings:
    data_dir: Path = field(default_factory=lambda: Path(os.environ.get("PCM_DATA_DIR", ".")))
    rooms_file: str = field(default_factory=lambda: os.environ.get("PCM_ROOMS_FILE", "quartos-data.json"))
    users_file: str = field(default_factory=lambda: os.environ.get("PCM_USERS_FILE", "users-data.json"))
    host: str = field(default_factory=lambda: os.environ.get("PCM_HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.environ.get("PCM_PORT", "3001")))
    cors_origins: List[str] = field(
        default_factory=lambda: _split_origins(os.environ.get("PCM_CORS_ORIGINS", "*"))
    )
    log_level: str = field(default_factory=lambda: os.environ.get("PCM_LOG_LEVEL", "INFO").upper())

    @property
    def rooms_path(self) -> Path:
        return Path(self.data_dir) / self.rooms_file

    @property
    def users_path(self) -> Path:
        return Path(self.data_dir) / self.users_file
