"""Core utilities and infrastructure."""

from .config import Settings, get_settings
from .validate import (
    ValidationError,
    ValidationResult,
    TemplateNameRequest,
    DocumentPayloadValidator,
    validate_template_name,
)
from .logging_config import configure_logging, configure_from_settings, get_logger, LogContext
from .json import (
    parse_json,
    safe_json_dumps,
    JSONParseError,
    validate_json_size,
    validate_json_depth,
)
from .hash import Algorithm, hash_string, hash_json
from .cache import LRUCache, Stats
from .id import new_component_id, new_template_id


def create_container(settings: Settings | None = None, storage=None):
    """Create dependency injection container (lazy import to avoid circular deps)."""
    from .container import create_container as _create_container

    return _create_container(settings, storage)


__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Validation
    "ValidationError",
    "ValidationResult",
    "TemplateNameRequest",
    "DocumentPayloadValidator",
    "validate_template_name",
    # Logging
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    "LogContext",
    # JSON
    "parse_json",
    "safe_json_dumps",
    "JSONParseError",
    "validate_json_size",
    "validate_json_depth",
    # DI
    "create_container",
    # Hashing
    "Algorithm",
    "hash_string",
    "hash_json",
    # Caching
    "LRUCache",
    "Stats",
    # IDs
    "new_component_id",
    "new_template_id",
]
