"""
Application settings for the WiFi billing service.
"""
from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Database
    DATABASE_URL: str = "sqlite:///./data/billing.db"

    # Environment
    DEBUG: bool = False

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    # Files
    PUBLIC_DIR: str = "./public"

    # Billing
    PAYMENT_NUMBER: str = "0700000000"  # M-Pesa number shown in payment instructions
    CURRENCY: str = "KSh"
    WIFI_SSID: str = "FreeWiFi-Packages"
    USERNAME_PREFIX: str = "user"
    RECENT_LIMIT: int = 100

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
