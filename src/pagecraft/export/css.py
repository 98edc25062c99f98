"""CSS helpers for the HTML exporter."""

import re
from collections.abc import Mapping
from typing import Any

_UPPER = re.compile(r"([A-Z])")


def kebab_case(name: str) -> str:
    """``backgroundColor`` -> ``background-color``."""
    return _UPPER.sub(r"-\1", name).lower()


def declarations(styles: Mapping[str, Any] | None) -> list[str]:
    """``kebab-key: value`` pairs in mapping order."""
    if not styles:
        return []
    return [f"{kebab_case(key)}: {value}" for key, value in styles.items()]


def inline_style(styles: Mapping[str, Any] | None) -> str:
    return "; ".join(declarations(styles))


def css_rule(selector: str, styles: Mapping[str, Any], indent: str = "    ") -> list[str]:
    """One rule block, declarations indented one step deeper than the selector."""
    lines = [f"{indent}{selector} {{"]
    lines.extend(f"{indent}  {declaration};" for declaration in declarations(styles))
    lines.append(f"{indent}}}")
    return lines


# Appended when the utility CSS engine is not loaded
BASELINE_CSS = (
    "  <style>",
    "    /* Basic responsive styles */",
    "    .container { width: 100%; max-width: 1200px; margin: 0 auto; padding: 0 15px; }",
    "    img { max-width: 100%; height: auto; }",
    "    table { border-collapse: collapse; width: 100%; }",
    "    th, td { border: 1px solid #ccc; padding: 8px; text-align: left; }",
    "    th { background-color: #f4f4f4; font-weight: bold; }",
    "    .form-group { margin-bottom: 1rem; }",
    "    .form-group label { display: block; margin-bottom: 0.5rem; font-weight: bold; }",
    "    .form-group input, .form-group textarea, .form-group select { width: 100%; padding: 0.5rem; border: 1px solid #ccc; border-radius: 4px; }",
    "    .card-content { padding: 1rem; }",
    "    .nav-container { display: flex; justify-content: space-between; align-items: center; }",
    "    .nav-menu { list-style: none; display: flex; gap: 1rem; margin: 0; padding: 0; }",
    "    .nav-menu a { text-decoration: none; color: inherit; }",
    "    .grid-item { background-color: #f0f0f0; padding: 1rem; border-radius: 4px; }",
    "    @media (min-width: 768px) {",
    "      .hero-content { display: flex; align-items: center; }",
    "      .hero-text, .hero-image { width: 50%; }",
    "      .feature-item { display: inline-block; width: calc(33.333% - 20px); margin: 10px; vertical-align: top; }",
    "    }",
    "    @media (max-width: 767px) {",
    "      .feature-item { margin-bottom: 20px; }",
    "      .nav-container { flex-direction: column; }",
    "      .nav-menu { margin-top: 1rem; }",
    "      table, th, td { font-size: 0.9rem; }",
    "    }",
    "  </style>",
)
