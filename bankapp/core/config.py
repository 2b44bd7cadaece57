"""
Configuration settings for the banking API.
Loads environment variables and provides application settings.
"""

from decimal import Decimal
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    """

    # Database
    DATABASE_URL: str = "sqlite:///./bank.db"
    DB_ECHO: bool = False
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20

    # API
    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "Retail Banking API"
    VERSION: str = "1.0.0"
    DESCRIPTION: str = "Accounts, transfers, bill payments and loan decisions over a transactional ledger"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"  # text or json

    # Lending rules
    LOAN_MIN_AMOUNT: Decimal = Decimal("1000.00")
    LOAN_MAX_AMOUNT: Decimal = Decimal("100000.00")
    LOAN_TERMS_MONTHS: List[int] = [12, 24, 36, 48, 60]
    LOAN_INTEREST_RATE: Decimal = Decimal("5.50")

    # Ledger listings
    TRANSACTION_HISTORY_LIMIT: int = 10

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


# Create global settings instance
settings = Settings()
