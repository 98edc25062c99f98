"""Configuration Management."""

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Engine settings from environment."""

    model_config = SettingsConfigDict(
        env_prefix="PAGECRAFT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=False, description="Use JSON log format")

    # Persistence slots
    document_key: str = Field(
        default="web-editor-components", description="Storage slot for the live document"
    )
    templates_key: str = Field(
        default="web-editor-templates", description="Storage slot for saved templates"
    )
    storage_dir: str = Field(
        default=".pagecraft", description="Directory used by the JSON file store"
    )

    # Editor
    default_output_type: str = Field(default="tailwind", description="Initial HTML output mode")
    history_limit: int = Field(default=0, ge=0, description="Max undo entries (0 = unlimited)")

    # Serialization
    json_indent: int = Field(default=2, ge=0, le=8, description="Indent for JSON export")
    max_import_size: int = Field(default=5 * 1024 * 1024, gt=0, description="Max import size (bytes)")
    max_json_depth: int = Field(default=64, gt=0, description="Max nesting depth on import")

    # HTML export
    tailwind_cdn_url: str = Field(
        default="https://cdn.tailwindcss.com", description="Utility CSS engine script"
    )
    page_title: str = Field(default="Exported Landing Page", description="Exported <title>")

    # Caching
    enable_cache: bool = Field(default=True, description="Enable HTML render caching")
    cache_size: int = Field(default=32, gt=0, description="Render cache max size")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
