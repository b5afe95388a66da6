from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    API_TITLE: str = "TumaFast Pricing Service"
    API_DESCRIPTION: str = "Delivery quotes and arrival estimates for the TumaFast marketplace"
    API_VERSION: str = "1.0.0"

    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False

    TIMEZONE: str = "Africa/Nairobi"
    CURRENCY: str = "KES"

    # Reject unknown vehicle classes / service tiers instead of falling back
    PRICING_STRICT_MODE: bool = False


settings = Settings()
