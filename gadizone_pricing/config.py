"""Configuration management using Pydantic Settings"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "gadizone-pricing"
    log_level: str = "INFO"

    # EMI calculator defaults (20% down, 8% p.a., 7 years)
    emi_down_payment_fraction: float = 0.2
    emi_annual_rate_percent: float = 8.0
    emi_tenure_months: int = 84

    # Nearby cities lookup
    nearby_radius_km: float = 250.0
    nearby_max_results: int = 8
    fallback_metro_slugs: List[str] = [
        "mumbai",
        "delhi",
        "bangalore",
        "chennai",
        "hyderabad",
        "pune",
        "kolkata",
        "ahmedabad",
    ]

    # On-road price breakup
    default_state: str = "Maharashtra"
    default_fuel_type: str = "Petrol"
    fee_policy: str = "ex_showroom"  # ex_showroom | rate_table


settings = Settings()
