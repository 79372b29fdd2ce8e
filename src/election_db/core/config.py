"""Application configuration via Pydantic Settings.

Every setting has a default matching the fixed local layout, so the tool runs
without any environment. Values may be overridden from environment variables
or a ``.env`` file in the working directory.
"""

import re

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # MongoDB
    mongodb_uri: str = Field(
        default="mongodb://127.0.0.1:27017",
        description="MongoDB connection string",
    )
    mongodb_timeout_ms: int = Field(
        default=5000,
        description="Server selection timeout in milliseconds for the startup ping",
        gt=0,
    )
    collection_name: str = Field(
        default="area",
        description="Collection that receives the decoded area documents",
    )

    @field_validator("mongodb_uri")
    @classmethod
    def validate_mongodb_uri(cls, v: str) -> str:
        if not v.startswith(("mongodb://", "mongodb+srv://")):
            msg = "mongodb_uri must use the mongodb:// or mongodb+srv:// scheme"
            raise ValueError(msg)
        return v

    @field_validator("collection_name")
    @classmethod
    def validate_collection_name(cls, v: str) -> str:
        if not re.match(r"^[A-Za-z_][A-Za-z0-9_.]{0,119}$", v):
            msg = "Invalid collection_name: must match ^[A-Za-z_][A-Za-z0-9_.]{0,119}$"
            raise ValueError(msg)
        return v

    # Input layout
    constituencies_dir: str = Field(
        default="constituencies",
        description="Name of the sub-directory of the working directory holding constituency folders",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_dir: str | None = Field(
        default=None,
        description="Directory for log files (enables file logging with 24h rotation when set)",
    )


def get_settings() -> Settings:
    """Create and return application settings."""
    return Settings()
