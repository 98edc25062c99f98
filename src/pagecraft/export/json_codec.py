"""JSON import/export of whole documents."""

from collections.abc import Iterable

from pydantic import ValidationError as PydanticValidationError
from returns.result import Failure, Result, Success

from ..core import (
    DocumentPayloadValidator,
    JSONParseError,
    ValidationError,
    get_logger,
    parse_json,
    safe_json_dumps,
)
from ..document.models import ComponentNode, Document
from ..document.tree import dump_document, duplicate_ids, load_document

logger = get_logger(__name__)

DEFAULT_MAX_SIZE = 5 * 1024 * 1024
DEFAULT_MAX_DEPTH = 64


def export_to_json(document: Iterable[ComponentNode], indent: int = 2) -> str:
    """Indented JSON text of the document; the exact input of :func:`parse_document`."""
    return safe_json_dumps(dump_document(document), indent=indent)


def parse_document(
    text: str,
    max_size: int = DEFAULT_MAX_SIZE,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> Result[Document, str]:
    """
    Decode and validate a document payload.

    Nothing is repaired or partially accepted: the whole payload is a valid
    array of nodes with unique ids, or the call fails.

    Args:
        text: JSON text
        max_size: Maximum payload size in bytes
        max_depth: Maximum nesting depth of the decoded value

    Returns:
        Success with fresh nodes, or Failure with a reason
    """
    try:
        DocumentPayloadValidator.validate_text(text, max_size)
        data = parse_json(text)
    except ValidationError as e:
        return Failure(str(e))
    except JSONParseError as e:
        logger.debug("json_decode_failed", error=str(e.original or e))
        return Failure(f"Failed to parse JSON: {e}")

    try:
        payload = DocumentPayloadValidator.validate(data, max_depth)
        document = load_document(payload)
    except ValidationError as e:
        return Failure(str(e))
    except PydanticValidationError as e:
        return Failure(f"Invalid component: {e.errors()[0]['msg']}")

    duplicates = duplicate_ids(document)
    if duplicates:
        return Failure(f"Duplicate component ids: {', '.join(sorted(duplicates))}")

    return Success(document)
