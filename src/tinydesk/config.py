from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0 Safari/537.36"
)


class Settings(BaseSettings):
    # Page structure
    container_selector: str = "#storytext"

    # Fetching
    fetch_backend: Literal["playwright", "http"] = "playwright"
    wait_timeout_ms: int = 10_000
    headless: bool = True
    http_timeout_s: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT

    # Logging (LOG_LEVEL in the environment still wins)
    log_level: str = "INFO"

    # Output
    output_dir: str = "."

    model_config = SettingsConfigDict(
        env_prefix="TINYDESK_",
        env_file=".env",
        extra="ignore",
    )
