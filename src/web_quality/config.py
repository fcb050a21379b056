from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    data_dir: str = Field(default="data", alias="WQA_DATA_DIR")
    crawler_timeout: int = Field(default=30, alias="WQA_CRAWLER_TIMEOUT")
    user_agent: str = Field(
        default=(
            "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
            "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
        ),
        alias="WQA_USER_AGENT",
    )
    use_playwright: bool = Field(default=False, alias="WQA_USE_PLAYWRIGHT")
    api_host: str = Field(default="127.0.0.1", alias="WQA_API_HOST")
    api_port: int = Field(default=8000, alias="WQA_API_PORT")
    slack_webhook_url: Optional[str] = Field(default=None, alias="SLACK_WEBHOOK_URL")
    log_level: str = Field(default="INFO", alias="WQA_LOG_LEVEL")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


_settings = get_settings()

DATA_DIR = Path(_settings.data_dir)
CRAWLER_TIMEOUT = _settings.crawler_timeout
CRAWLER_USER_AGENT = _settings.user_agent
USE_PLAYWRIGHT = _settings.use_playwright
API_HOST = _settings.api_host
API_PORT = _settings.api_port
SLACK_WEBHOOK_URL = _settings.slack_webhook_url
LOG_LEVEL = _settings.log_level


def ensure_data_dir(path: Optional[Path] = None) -> Path:
    """Create the data directory if needed and return it."""
    directory = Path(path) if path is not None else DATA_DIR
    directory.mkdir(parents=True, exist_ok=True)
    return directory
