from decimal import Decimal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "VROOM_"}

    # App
    app_name: str = "VROOM Loans"
    debug: bool = False
    log_level: str = "INFO"
    cors_allow_origins: list[str] = ["*"]

    # A live balance at or below this is treated as paid off
    paid_off_threshold: Decimal = Decimal("0.01")


settings = Settings()
