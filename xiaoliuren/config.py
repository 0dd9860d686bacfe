from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="XLR_")

    random_min: int = 1
    random_max: int = 60
    simulate_rounds: int = 10000
    log_level: str = "WARNING"
    api_key: str | None = None


settings = Settings()
