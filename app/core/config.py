from pydantic_settings import BaseSettings
from typing import List, Union
from pydantic import ValidationInfo, field_validator
from urllib.parse import quote_plus
import json


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # API Settings
    PROJECT_NAME: str = "Job Application Tracker API"
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # Logging
    LOG_LEVEL: str = "INFO"
    JSON_LOGS: bool = True

    # Database Settings
    DB_HOST: str = "localhost"
    DB_PORT: str = "5434"
    DB_USER: str = "jobtrackr"
    DB_PASSWORD: str = "jobtrackr_password"
    DB_NAME: str = "jobtrackr"
    DB_SSLMODE: str = "disable"

    @field_validator("DB_HOST", "DB_PORT", "DB_USER", "DB_PASSWORD", "DB_NAME", "DB_SSLMODE", mode="before")
    @classmethod
    def empty_db_value_uses_default(cls, v, info: ValidationInfo):
        """A variable that is set but empty falls back to its default"""
        if v == "":
            return cls.model_fields[info.field_name].default
        return v

    @property
    def DATABASE_URL(self) -> str:
        user = quote_plus(self.DB_USER)
        password = quote_plus(self.DB_PASSWORD)
        return f"postgresql+psycopg2://{user}:{password}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}?sslmode={self.DB_SSLMODE}"

    # Connection pool
    DB_MAX_OPEN_CONNS: int = 10
    DB_MAX_IDLE_CONNS: int = 5
    DB_CONN_MAX_LIFETIME: int = 1800  # seconds

    # Health probe
    DB_HEALTH_TIMEOUT: float = 2.0
    DB_INIT_ON_STARTUP: bool = True
    DB_STARTUP_TIMEOUT: float = 5.0

    # CORS Settings - can be set as JSON string in .env
    BACKEND_CORS_ORIGINS: Union[List[str], str] = ["http://localhost:3000"]

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: Union[List[str], str]) -> List[str]:
        """Parse CORS origins from JSON string or list"""
        if isinstance(v, str):
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                # If not valid JSON, split by comma
                return [origin.strip() for origin in v.split(",")]
        return v

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
