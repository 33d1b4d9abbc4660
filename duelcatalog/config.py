from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env")

    app_name: str = "DuelCatalog"
    debug: bool = False

    database_url: str = "sqlite+aiosqlite:///./duelcatalog.db"

    wiki_base_url: str = "https://duelmasters.fandom.com/wiki"
    user_agent: str = "DuelCatalog/1.0"

    # Seconds before a wiki page fetch is abandoned
    fetch_timeout: float = 30.0


settings = Settings()
