"""
==============================================================================
Application Settings Module
==============================================================================

Configuration management using Pydantic Settings.

A single cached Settings instance is shared by the application factory
and the API dependencies; tests build their own instances directly.

Features:
---------
- Environment variable loading with type validation (WONDERTRACK_ prefix)
- .env file support for local development
- Computed paths for the category and product files
- Layout defaults for the product card grid

Configuration Priority (highest to lowest):
------------------------------------------
1. Environment variables
2. .env file
3. Default values

==============================================================================
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Module logger
logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        app_name: Display name for the application
        app_env: Environment mode (development/staging/production)
        debug: Enable debug mode for verbose logging
        host: Server bind address
        port: Server port number
        data_directory: Directory holding the editable catalog files
        categories_filename: Name of the category list file
        products_filename: Name of the product records file
        layout_available_width: Width of the card grid container
        layout_gap: Horizontal gap between cards
        layout_min_card_width: Minimum width of a single card
        layout_card_height: Fixed height of a single card

    Example:
        >>> settings = Settings(data_directory="/tmp/wondertrack")
        >>> settings.products_path
        PosixPath('/tmp/wondertrack/products.txt')
    """

    # =========================================================================
    # PYDANTIC SETTINGS CONFIGURATION
    # =========================================================================
    model_config = SettingsConfigDict(
        env_prefix="WONDERTRACK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================
    app_name: str = Field(
        default="WonderTrack Catalog",
        description="Display name for the application"
    )

    app_env: str = Field(
        default="development",
        description="Environment mode: development, staging, production"
    )

    debug: bool = Field(
        default=True,
        description="Enable debug mode for verbose logging"
    )

    # =========================================================================
    # SERVER SETTINGS
    # =========================================================================
    host: str = Field(
        default="127.0.0.1",
        description="Server bind address"
    )

    port: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Server port number"
    )

    # =========================================================================
    # CATALOG FILE SETTINGS
    # =========================================================================
    data_directory: str = Field(
        default="storage/txtFiles",
        description="Directory holding categories.txt and products.txt"
    )

    categories_filename: str = Field(
        default="categories.txt",
        description="Category list file name"
    )

    products_filename: str = Field(
        default="products.txt",
        description="Product records file name"
    )

    # =========================================================================
    # LAYOUT SETTINGS
    # =========================================================================
    # 1200 window - 265 sidebar - 30 page padding - 30 section padding
    layout_available_width: float = Field(
        default=875.0,
        gt=0,
        description="Width available to a category's card grid"
    )

    layout_gap: float = Field(
        default=15.0,
        ge=0,
        description="Horizontal gap between cards"
    )

    layout_min_card_width: float = Field(
        default=280.0,
        ge=0,
        description="Minimum card width"
    )

    layout_card_height: float = Field(
        default=120.0,
        gt=0,
        description="Fixed card height"
    )

    # =========================================================================
    # VALIDATORS
    # =========================================================================
    @field_validator("app_env")
    @classmethod
    def validate_app_env(cls, value: str) -> str:
        """
        Validate and normalize application environment.

        Unknown values fall back to 'development' with a warning.
        """
        valid_envs = {"development", "staging", "production"}
        normalized = value.lower().strip()

        if normalized not in valid_envs:
            logger.warning(
                f"Unknown environment '{value}', defaulting to 'development'"
            )
            return "development"

        return normalized

    @field_validator("categories_filename", "products_filename")
    @classmethod
    def validate_filename(cls, value: str) -> str:
        """File names must be bare names, not paths."""
        value = value.strip()
        if not value or Path(value).name != value:
            raise ValueError(f"Invalid catalog file name: {value!r}")
        return value

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================
    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_env == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.app_env == "production"

    @property
    def data_path(self) -> Path:
        """Data directory as a Path (not created here)."""
        return Path(self.data_directory)

    @property
    def categories_path(self) -> Path:
        """Primary location of the category list."""
        return self.data_path / self.categories_filename

    @property
    def products_path(self) -> Path:
        """Primary location of the product records."""
        return self.data_path / self.products_filename

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"Settings(app_name={self.app_name!r}, "
            f"app_env={self.app_env!r}, "
            f"data_directory={self.data_directory!r}, "
            f"debug={self.debug})"
        )


# =============================================================================
# SINGLETON INSTANCE MANAGEMENT
# =============================================================================

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get the global Settings instance.

    Uses lru_cache so the environment is read once per process.

    Returns:
        Global Settings instance
    """
    settings = Settings()

    if settings.debug:
        logger.info(f"Configuration loaded: {settings}")

    return settings
