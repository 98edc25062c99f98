"""Saved templates and the built-in presets."""

from .presets import BLANK_TEMPLATE_ID, LANDING_PAGE_TEMPLATE_ID, SEED_TEMPLATES
from .registry import Template, TemplateRegistry

__all__ = [
    "Template",
    "TemplateRegistry",
    "SEED_TEMPLATES",
    "BLANK_TEMPLATE_ID",
    "LANDING_PAGE_TEMPLATE_ID",
]
