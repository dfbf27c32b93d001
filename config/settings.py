from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Redis (defaults match docker-compose.yml for local dev)
    REDIS_URL: str = "redis://localhost:6379/0"

    # Key-value layout: one key for the score table, one for the wager collection
    SCORES_KEY: str = "playerScores"
    BETS_KEY: str = "bets"

    # Course used when a request names a tee box without a course
    DEFAULT_COURSE_ID: str = "bayou-desiard"

    # App
    APP_NAME: str = "Golf Wager Settlement"
    DEBUG: bool = False  # Safe default for production; set DEBUG=True in .env for local dev


settings = Settings()
