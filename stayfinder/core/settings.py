import logging
from functools import lru_cache
from typing import List, Optional
from pydantic_settings import BaseSettings
from pydantic import validator


class Settings(BaseSettings):
    # API Configuration
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    ALLOWED_ORIGINS: str = "*"

    # Catalog generation
    CATALOG_SIZE: int = 100
    CATALOG_SEED: Optional[int] = None
    FAKER_LOCALE: str = "pl_PL"

    LOG_LEVEL: str = "INFO"

    # Environment name
    ENVIRONMENT: str = "development"

    @validator("CATALOG_SIZE")
    def catalog_size_must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("CATALOG_SIZE must be greater than 0")
        return v

    @validator("LOG_LEVEL")
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]

    class Config:
        case_sensitive = True  # Variables are case-sensitive
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
