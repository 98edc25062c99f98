"""Document serializers: HTML and JSON."""

from .html import HTMLExporter, RENDERERS, render_document
from .json_codec import export_to_json, parse_document

__all__ = ["HTMLExporter", "RENDERERS", "render_document", "export_to_json", "parse_document"]
