from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_ENV: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    # Simulated network latency for article fetches (seconds)
    FETCH_DELAY_SECONDS: float = 1.0

    # Avatar used for commenters who have none of their own
    DEFAULT_AVATAR_URL: str = (
        "https://images.pexels.com/photos/614810/pexels-photo-614810.jpeg"
        "?auto=compress&cs=tinysrgb&w=50&h=50&fit=crop"
    )

    # Load the mock article catalogue when the app starts
    SEED_ON_STARTUP: bool = True

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
