import os
import pathlib
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Project root (config.py lives in catalog/core/)
BASE_DIR = pathlib.Path(__file__).resolve().parent.parent.parent


class Settings(BaseSettings):
    # App
    APP_NAME: str = Field(default='Catalog Backend', description='Application name')
    APP_VERSION: str = Field(default='1.0.0', description='Application version')
    ENVIRONMENT: Literal['development', 'staging', 'production'] = Field(default='development', description='Runtime environment')
    DEBUG: bool = Field(default=False, description='Debug mode')

    # Server
    HOST: str = Field(default='0.0.0.0', description='Server host')
    PORT: int = Field(default=8000, description='Server port')

    # Database. Leave DATABASE_URL unset to run on the in-memory store.
    DATABASE_URL: Optional[str] = Field(default=None, description='Database connection URL')
    DATABASE_POOL_SIZE: int = Field(default=20, description='Connection pool size')
    DATABASE_MAX_OVERFLOW: int = Field(default=10, description='Connection pool overflow')
    SEED_SAMPLE_DATA: bool = Field(default=True, description='Seed the in-memory store with demo data')

    # Admin auth
    ADMIN_USERNAME: str = Field(default='admin', description='Back office login name')
    ADMIN_PASSWORD: str = Field(default='change-me', description='Back office password')
    SECRET_KEY: str = Field(default="your-secret-key-change-in-production", description='JWT secret')
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 12  # 12 hours

    API_PREFIX: str = Field("/api", description="API path prefix")

    # Logging
    BASE_DIR: pathlib.Path = BASE_DIR
    LOG_DIR: str = Field(default='logs', description='Log directory, relative to BASE_DIR')
    LOG_LEVEL: str = Field(default='INFO', description='Log level')
    LOG_JSON_FORMAT: bool = Field(default=False, description='Emit JSON log lines')
    LOG_MAX_BYTES: int = Field(default=10 * 1024 * 1024, description='Rotate log files at this size')
    LOG_BACKUP_COUNT: int = Field(default=5, description='Rotated files to keep')

    model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', case_sensitive=True, extra='ignore')

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == 'development'

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == 'production'

    @property
    def use_database(self) -> bool:
        """Whether the persistent backend is configured"""
        return bool(self.DATABASE_URL)

    @property
    def database_url_sync(self) -> str:
        """Synchronous database URL (used by Alembic)"""
        return str(self.DATABASE_URL).replace('+asyncpg', '')


def get_settings() -> Settings:
    """Load settings from the dotenv file matching ENVIRONMENT."""
    env = os.getenv('ENVIRONMENT', 'development')

    env_file_map = {
        'development': BASE_DIR / '.env.dev',
        'staging': BASE_DIR / '.env.staging',
        'production': BASE_DIR / '.env.prod',
    }
    env_file = env_file_map.get(env, BASE_DIR / '.env')

    return Settings(_env_file=env_file)


settings = get_settings()
