from decimal import Decimal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "FA_"}

    # App
    debug: bool = False
    log_level: str = "INFO"

    # Money
    money_places: Decimal = Decimal("0.01")

    # Pro-rata depreciation uses a fixed-length year
    days_in_year: int = 365

    # Form 4562 Part I
    section_179_limit: Decimal = Decimal("1000000")

    # Bonus depreciation by placed-in-service year (Congress changes these)
    bonus_depreciation_rate: dict[int, float] = {
        2022: 1.0,
        2023: 0.80,
        2024: 0.60,
        2025: 1.0,
        2026: 1.0,
        2027: 0.80,
    }


settings = Settings()
