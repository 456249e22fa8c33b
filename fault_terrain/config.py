"""Configuration management."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings pulled from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FAULT_TERRAIN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Terrain defaults
    default_width: int = Field(default=512, ge=5, description="Default terrain width")
    default_height: int = Field(default=512, ge=5, description="Default terrain height")
    default_threads: int = Field(default=1, ge=1, description="Default generator thread count")
    default_faults: int = Field(default=1000, ge=1, description="Default number of faults")
    random_seed: Optional[int] = Field(default=None, description="Seed for the random source")

    # Output
    output_path: str = Field(default="terrain.png", description="Rendered image path")
    open_image: bool = Field(default=False, description="Open the image after rendering")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="plain", description="Logging format (plain or json)")


# Instantiate singleton settings object
settings = Settings()
