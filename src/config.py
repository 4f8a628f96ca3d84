"""Pydantic Settings — loads configuration from environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "extra": "ignore"}

    host: str = "0.0.0.0"
    port: int = 2000
    log_level: str = "INFO"
    service_name: str = "scrape-service"
    cors_allow_origins: str = "*"

    navigation_timeout_seconds: float = 60.0
    wait_until: str = "networkidle"

    browser_type: str = "chromium"
    headless: bool = True
    browser_args: str = "--no-sandbox,--disable-setuid-sandbox"
    user_agent: str = ""

    @property
    def browser_arg_list(self) -> list[str]:
        return [a.strip() for a in self.browser_args.split(",") if a.strip()]

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_allow_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
