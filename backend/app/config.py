from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "Legal AI Backend"
    host: str = "0.0.0.0"
    port: int = 3000
    allowed_origins: list[str] = ["*"]
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
