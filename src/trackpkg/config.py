"""Application configuration."""

from pathlib import Path
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "TrackPkg"
    debug: bool = False
    log_level: str = "INFO"

    # Paths
    carriers_dir: Path = Path(__file__).parent / "carriers"

    class Config:
        env_prefix = "TRACKPKG_"
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
