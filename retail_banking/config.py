"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class BankingConfig(BaseSettings):
    """Retail banking ledger configuration"""

    model_config = SettingsConfigDict(
        env_prefix="RETAIL_BANKING_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Bank identity
    bank_name: str = "Community Savings Bank"
    bank_code: str = "CSB001"

    # Identifier numbering (first issued value is start + 1)
    account_number_start: int = 100000
    customer_id_prefix: str = "CUST"
    customer_id_start: int = 1000
    transaction_id_prefix: str = "TXN"
    transaction_id_start: int = 1000

    # Product defaults
    default_overdraft_protection: bool = True

    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"  # json or text

    # API configuration
    api_host: str = "0.0.0.0"
    api_port: int = 8090


# Global configuration instance
config = BankingConfig()


def get_config() -> BankingConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> BankingConfig:
    """Reload configuration from environment"""
    global config
    config = BankingConfig()
    return config
