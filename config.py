import os
from typing import List
from pydantic_settings import BaseSettings
from pydantic import Field
import platformdirs

APP_NAME = "Musicat"
APP_AUTHOR = "MusicatDev"

class Settings(BaseSettings):
    # App Info
    APP_NAME: str = APP_NAME
    APP_AUTHOR: str = APP_AUTHOR
    ENV: str = "prod"

    # Paths
    # platformdirs by default, DB_PATH from the environment wins
    USER_DATA_DIR: str = Field(default_factory=lambda: platformdirs.user_data_dir(APP_NAME, APP_AUTHOR))
    DB_PATH: str | None = None
    MUS_DIR: str = "/music_data"

    # Library scan
    ALLOWED_EXTENSIONS: List[str] = ["ogg", "flac", "mp3", "wav"]
    SCAN_ON_STARTUP: bool = True

    # Network
    WEB_ADDR: str = "127.0.0.1"
    WEB_PORT: int = 8080

    # Logging
    MUSICAT_LOG_DIR: str | None = None
    MUSICAT_LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"

    def model_post_init(self, __context):
        if not self.DB_PATH:
            self.DB_PATH = os.path.join(self.USER_DATA_DIR, "musicat.duckdb")

        if not self.MUSICAT_LOG_DIR:
            self.MUSICAT_LOG_DIR = os.path.join(self.USER_DATA_DIR, "logs")

    def setup_environment(self):
        """Export the variables other modules read at import time."""
        if self.MUSICAT_LOG_DIR:
            os.environ["MUSICAT_LOG_DIR"] = self.MUSICAT_LOG_DIR
        os.environ["MUSICAT_LOG_LEVEL"] = self.MUSICAT_LOG_LEVEL

settings = Settings()
