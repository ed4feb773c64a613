from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

# Mounted as a volume when running in a container
CONTAINER_DATA_DIR = Path("/app/data")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="WEBMONITOR_", env_file=".env", extra="ignore")

    data_dir: Optional[Path] = None
    services_file: str = "services.json"

    host: str = "0.0.0.0"

    check_timeout: float = 10.0
    check_workers: int = 1

    log_level: str = "INFO"

    @property
    def services_path(self) -> Path:
        if self.data_dir is not None:
            return self.data_dir / self.services_file
        if CONTAINER_DATA_DIR.is_dir():
            return CONTAINER_DATA_DIR / self.services_file
        return Path(self.services_file)
