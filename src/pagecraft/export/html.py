"""HTML export with three styling strategies.

Each component kind has its own renderer, registered by type tag. Rendering is
recursive and total: a kind without a renderer becomes an HTML comment.
"""

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from ..core import LRUCache, Settings, get_logger, get_settings, hash_json
from ..document.models import ComponentNode, OutputMode
from ..document.tree import dump_document, walk
from ..monitoring import metrics_collector
from .css import BASELINE_CSS, css_rule, inline_style

logger = get_logger(__name__)

INDENT = "  "

Renderer = Callable[[ComponentNode, "RenderContext", "Markup"], None]
RENDERERS: dict[str, Renderer] = {}


def renderer(*kinds: str) -> Callable[[Renderer], Renderer]:
    """Register a renderer for one or more component kinds."""

    def register(fn: Renderer) -> Renderer:
        for kind in kinds:
            RENDERERS[kind] = fn
        return fn

    return register


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _field(item: Any, key: str, default: str = "") -> str:
    if isinstance(item, Mapping):
        value = item.get(key)
        return default if value is None else str(value)
    return default


def _cell(value: Any) -> str:
    """Table cells, headers and list items: plain values or ``{content}`` objects."""
    if isinstance(value, Mapping):
        return _text(value.get("content"))
    return _text(value)


def _entries(node: ComponentNode, key: str) -> list[Any]:
    value = node.get(key)
    return list(value) if isinstance(value, (list, tuple)) else []


def _bounded_int(value: Any, default: int, low: int, high: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return max(low, min(high, number))


def _required(flag: Any) -> str:
    return " required" if flag else ""


class Markup:
    """Line buffer for one node, indented relative to the node's depth."""

    def __init__(self, depth: int) -> None:
        self.depth = depth
        self.lines: list[str] = []

    def line(self, text: str, level: int = 0) -> None:
        self.lines.append(INDENT * (self.depth + 1 + level) + text)


class RenderContext:
    """Per-export state: the styling strategy."""

    def __init__(self, mode: OutputMode) -> None:
        self.mode = mode

    def attributes(self, node: ComponentNode) -> str:
        """The class/style attributes of a node's opening tag."""
        if self.mode is OutputMode.UTILITY_CLASSES:
            return f' class="{node.classes}"' if node.classes else ""
        if self.mode is OutputMode.CSS_CLASSES:
            return f' class="component-{node.id}"'
        style = inline_style(node.custom_styles)
        return f' style="{style}"' if style else ""

    def render(self, node: ComponentNode, depth: int = 0) -> list[str]:
        out = Markup(depth)
        RENDERERS.get(node.type, _unknown)(node, self, out)
        return out.lines

    def children(self, node: ComponentNode, out: Markup, level: int = 1) -> bool:
        """Render nested nodes ``level`` steps deeper; False when there are none."""
        for child in node.children or []:
            out.lines.extend(self.render(child, out.depth + level))
        return bool(node.children)


def _unknown(node: ComponentNode, ctx: RenderContext, out: Markup) -> None:
    out.line(f"<!-- Unknown component type: {node.type} -->")
    ctx.children(node, out, level=0)


def _text_element(tag: str, node: ComponentNode, ctx: RenderContext, out: Markup, extra: str = "") -> None:
    opening = f"<{tag}{extra}{ctx.attributes(node)}>"
    content = _text(node.get("content"))
    if not node.children:
        out.line(f"{opening}{content}</{tag}>")
        return
    out.line(opening)
    if content:
        out.line(content, 1)
    ctx.children(node, out)
    out.line(f"</{tag}>")


# ============================================================================
# Basic elements
# ============================================================================


@renderer("header")
def render_header(node: ComponentNode, ctx: RenderContext, out: Markup) -> None:
    _text_element("header", node, ctx, out)


@renderer("paragraph")
def render_paragraph(node: ComponentNode, ctx: RenderContext, out: Markup) -> None:
    _text_element("p", node, ctx, out)


@renderer("heading")
def render_heading(node: ComponentNode, ctx: RenderContext, out: Markup) -> None:
    level = _bounded_int(node.get("level", 1), 1, 1, 6)
    _text_element(f"h{level}", node, ctx, out)


@renderer("button")
def render_button(node: ComponentNode, ctx: RenderContext, out: Markup) -> None:
    _text_element("button", node, ctx, out)


@renderer("image")
def render_image(node: ComponentNode, ctx: RenderContext, out: Markup) -> None:
    # void element, children are never rendered
    src = _text(node.get("src"))
    alt = _text(node.get("alt"))
    out.line(f'<img src="{src}" alt="{alt}"{ctx.attributes(node)}>')


@renderer("link")
def render_link(node: ComponentNode, ctx: RenderContext, out: Markup) -> None:
    target = ' target="_blank"' if node.get("target") == "_blank" else ""
    _text_element("a", node, ctx, out, extra=f' href="{_text(node.get("href"))}"{target}')


# ============================================================================
# Sections
# ============================================================================


@renderer("hero")
def render_hero(node: ComponentNode, ctx: RenderContext, out: Markup) -> None:
    out.line(f"<section{ctx.attributes(node)}>")
    out.line('<div class="container">', 1)
    out.line(f"<h2>{_text(node.get('heading'))}</h2>", 2)
    out.line(f"<p>{_text(node.get('subheading'))}</p>", 2)
    out.line('<div class="hero-content">', 2)
    out.line('<div class="hero-text">', 3)
    out.line(f"<p>{_text(node.get('content'))}</p>", 4)
    out.line("</div>", 3)
    out.line('<div class="hero-image">', 3)
    out.line(f'<img src="{_text(node.get("imageUrl"))}" alt="Hero image">', 4)
    out.line("</div>", 3)
    out.line("</div>", 2)
    out.line("</div>", 1)
    ctx.children(node, out)
    out.line("</section>")


@renderer("features")
def render_features(node: ComponentNode, ctx: RenderContext, out: Markup) -> None:
    out.line(f"<section{ctx.attributes(node)}>")
    out.line('<div class="container">', 1)
    for item in _entries(node, "items"):
        out.line('<div class="feature-item">', 2)
        out.line(f"<h3>{_field(item, 'title')}</h3>", 3)
        out.line(f"<p>{_field(item, 'description')}</p>", 3)
        out.line("</div>", 2)
    out.line("</div>", 1)
    ctx.children(node, out)
    out.line("</section>")


@renderer("cta")
def render_cta(node: ComponentNode, ctx: RenderContext, out: Markup) -> None:
    out.line(f"<section{ctx.attributes(node)}>")
    out.line('<div class="container">', 1)
    out.line(f"<h2>{_text(node.get('heading'))}</h2>", 2)
    out.line(f"<button>{_text(node.get('buttonText'))}</button>", 2)
    out.line("</div>", 1)
    ctx.children(node, out)
    out.line("</section>")


# ============================================================================
# Layout containers
# ============================================================================


@renderer("container")
def render_container(node: ComponentNode, ctx: RenderContext, out: Markup) -> None:
    out.line(f"<div{ctx.attributes(node)}>")
    if not ctx.children(node, out):
        out.line("<!-- Empty Container -->", 1)
    out.line("</div>")


@renderer("grid")
def render_grid(node: ComponentNode, ctx: RenderContext, out: Markup) -> None:
    out.line(f"<div{ctx.attributes(node)}>")
    if not ctx.children(node, out):
        items = _entries(node, "items")
        if items:
            for item in items:
                out.line(f'<div class="grid-item">{_cell(item)}</div>', 1)
        else:
            for i in range(1, _bounded_int(node.get("columns", 3), 3, 1, 12) + 1):
                out.line(f'<div class="grid-item">Grid Item {i}</div>', 1)
    out.line("</div>")


@renderer("flexbox")
def render_flexbox(node: ComponentNode, ctx: RenderContext, out: Markup) -> None:
    out.line(f"<div{ctx.attributes(node)}>")
    if not ctx.children(node, out):
        out.line('<div class="flex-item">Flex Item 1</div>', 1)
        out.line('<div class="flex-item">Flex Item 2</div>', 1)
    out.line("</div>")


@renderer("section")
def render_section(node: ComponentNode, ctx: RenderContext, out: Markup) -> None:
    out.line(f"<section{ctx.attributes(node)}>")
    ctx.children(node, out)
    out.line("</section>")


# ============================================================================
# Data display
# ============================================================================


@renderer("table")
def render_table(node: ComponentNode, ctx: RenderContext, out: Markup) -> None:
    out.line(f"<table{ctx.attributes(node)}>")
    headers = _entries(node, "headers")
    if headers:
        out.line("<thead>", 1)
        out.line("<tr>", 2)
        for header in headers:
            out.line(f"<th>{_cell(header)}</th>", 3)
        out.line("</tr>", 2)
        out.line("</thead>", 1)
    rows = _entries(node, "rows")
    if rows:
        out.line("<tbody>", 1)
        for row in rows:
            cells = row.get("cells") if isinstance(row, Mapping) else row
            out.line("<tr>", 2)
            for cell in cells if isinstance(cells, (list, tuple)) else []:
                out.line(f"<td>{_cell(cell)}</td>", 3)
            out.line("</tr>", 2)
        out.line("</tbody>", 1)
    ctx.children(node, out)
    out.line("</table>")


@renderer("list")
def render_list(node: ComponentNode, ctx: RenderContext, out: Markup) -> None:
    tag = "ol" if node.get("listType") == "ol" else "ul"
    out.line(f"<{tag}{ctx.attributes(node)}>")
    for item in _entries(node, "items"):
        out.line(f"<li>{_cell(item)}</li>", 1)
    ctx.children(node, out)
    out.line(f"</{tag}>")


@renderer("card")
def render_card(node: ComponentNode, ctx: RenderContext, out: Markup) -> None:
    out.line(f"<div{ctx.attributes(node)}>")
    if node.get("imageUrl"):
        out.line(f'<img src="{_text(node.get("imageUrl"))}" alt="Card image">', 1)
    out.line('<div class="card-content">', 1)
    out.line(f"<h3>{_text(node.get('title'))}</h3>", 2)
    out.line(f"<p>{_text(node.get('content'))}</p>", 2)
    if node.get("buttonText"):
        out.line(f"<button>{_text(node.get('buttonText'))}</button>", 2)
    out.line("</div>", 1)
    ctx.children(node, out)
    out.line("</div>")


@renderer("testimonial")
def render_testimonial(node: ComponentNode, ctx: RenderContext, out: Markup) -> None:
    out.line(f"<div{ctx.attributes(node)}>")
    if node.get("avatar"):
        out.line(f'<img src="{_text(node.get("avatar"))}" alt="Avatar" class="testimonial-avatar">', 1)
    out.line(f'<blockquote>"{_text(node.get("quote"))}"</blockquote>', 1)
    out.line('<div class="testimonial-author">', 1)
    out.line(f'<div class="author-name">{_text(node.get("author"))}</div>', 2)
    out.line(f'<div class="author-position">{_text(node.get("position"))}</div>', 2)
    if node.get("rating"):
        stars = _bounded_int(node.get("rating"), 0, 0, 5)
        out.line(f'<div class="rating">{"★" * stars}{"☆" * (5 - stars)}</div>', 2)
    out.line("</div>", 1)
    ctx.children(node, out)
    out.line("</div>")


# ============================================================================
# Form controls
# ============================================================================


def _labelled(node: ComponentNode, ctx: RenderContext, out: Markup, control: Callable[[], None]) -> None:
    out.line(f"<div{ctx.attributes(node)}>")
    if node.get("label"):
        out.line(f"<label>{_text(node.get('label'))}</label>", 1)
    control()
    ctx.children(node, out)
    out.line("</div>")


@renderer("input")
def render_input(node: ComponentNode, ctx: RenderContext, out: Markup) -> None:
    def control() -> None:
        input_type = _text(node.get("inputType", "text"))
        placeholder = _text(node.get("placeholder"))
        out.line(f'<input type="{input_type}" placeholder="{placeholder}"{_required(node.get("required"))}>', 1)

    _labelled(node, ctx, out, control)


@renderer("textarea")
def render_textarea(node: ComponentNode, ctx: RenderContext, out: Markup) -> None:
    def control() -> None:
        placeholder = _text(node.get("placeholder"))
        rows = _text(node.get("rows", 4))
        out.line(f'<textarea placeholder="{placeholder}" rows="{rows}"{_required(node.get("required"))}></textarea>', 1)

    _labelled(node, ctx, out, control)


def _options(options: list[Any], out: Markup, level: int) -> None:
    for option in options:
        out.line(f'<option value="{_field(option, "value")}">{_field(option, "label")}</option>', level)


@renderer("select")
def render_select(node: ComponentNode, ctx: RenderContext, out: Markup) -> None:
    def control() -> None:
        out.line("<select>", 1)
        out.line(f'<option value="">{_text(node.get("placeholder", "Choose an option"))}</option>', 2)
        _options(_entries(node, "options"), out, 2)
        out.line("</select>", 1)

    _labelled(node, ctx, out, control)


@renderer("dropdown")
def render_dropdown(node: ComponentNode, ctx: RenderContext, out: Markup) -> None:
    out.line(f"<select{ctx.attributes(node)}>")
    out.line(f'<option value="">{_text(node.get("label"))}</option>', 1)
    _options(_entries(node, "options"), out, 1)
    ctx.children(node, out)
    out.line("</select>")


def _form_fields(fields: list[Any], out: Markup, level: int, mark_required: bool) -> None:
    for field in fields:
        name = _field(field, "name")
        placeholder = _field(field, "placeholder")
        required = isinstance(field, Mapping) and bool(field.get("required"))
        marker = " *" if mark_required and required else ""
        flag = _required(required) if mark_required else ""
        out.line('<div class="form-group">', level)
        out.line(f'<label for="{name}">{_field(field, "label")}{marker}</label>', level + 1)
        if _field(field, "type") == "textarea":
            out.line(
                f'<textarea id="{name}" name="{name}" placeholder="{placeholder}"{flag}></textarea>',
                level + 1,
            )
        else:
            out.line(
                f'<input type="{_field(field, "type")}" id="{name}" name="{name}" placeholder="{placeholder}"{flag}>',
                level + 1,
            )
        out.line("</div>", level)


@renderer("contact")
def render_contact(node: ComponentNode, ctx: RenderContext, out: Markup) -> None:
    out.line(f"<div{ctx.attributes(node)}>")
    out.line(f"<h2>{_text(node.get('title'))}</h2>", 1)
    out.line(f"<p>{_text(node.get('subtitle'))}</p>", 1)
    out.line("<form>", 1)
    _form_fields(_entries(node, "fields"), out, 2, mark_required=True)
    out.line(f'<button type="submit">{_text(node.get("submitText"))}</button>', 2)
    out.line("</form>", 1)
    ctx.children(node, out)
    out.line("</div>")


@renderer("form")
def render_form(node: ComponentNode, ctx: RenderContext, out: Markup) -> None:
    out.line(f"<form{ctx.attributes(node)}>")
    if node.get("title"):
        out.line(f"<h3>{_text(node.get('title'))}</h3>", 1)
    _form_fields(_entries(node, "fields"), out, 1, mark_required=False)
    out.line(f'<button type="submit">{_text(node.get("submitText"))}</button>', 1)
    ctx.children(node, out)
    out.line("</form>")


# ============================================================================
# Navigation
# ============================================================================


@renderer("navbar", "navigation")
def render_navbar(node: ComponentNode, ctx: RenderContext, out: Markup) -> None:
    out.line(f"<nav{ctx.attributes(node)}>")
    out.line('<div class="nav-container">', 1)
    out.line(f'<div class="nav-brand">{_text(node.get("brand"))}</div>', 2)
    items = _entries(node, "items")
    if items:
        out.line('<ul class="nav-menu">', 2)
        for item in items:
            out.line(f'<li><a href="{_field(item, "href")}">{_field(item, "label")}</a></li>', 3)
        out.line("</ul>", 2)
    out.line("</div>", 1)
    ctx.children(node, out)
    out.line("</nav>")


@renderer("footer")
def render_footer(node: ComponentNode, ctx: RenderContext, out: Markup) -> None:
    out.line(f"<footer{ctx.attributes(node)}>")
    out.line('<div class="footer-container">', 1)
    out.line(f'<div class="footer-brand">{_text(node.get("brand"))}</div>', 2)
    for column in _entries(node, "columns"):
        out.line('<div class="footer-column">', 2)
        out.line(f"<h4>{_field(column, 'title')}</h4>", 3)
        links = column.get("links") if isinstance(column, Mapping) else None
        if links:
            out.line("<ul>", 3)
            for link in links:
                out.line(f'<li><a href="{_field(link, "href")}">{_field(link, "label")}</a></li>', 4)
            out.line("</ul>", 3)
        out.line("</div>", 2)
    out.line(f'<div class="footer-copyright">{_text(node.get("copyright"))}</div>', 2)
    out.line("</div>", 1)
    ctx.children(node, out)
    out.line("</footer>")


# ============================================================================
# Document assembly
# ============================================================================


def render_document(
    document: Sequence[ComponentNode],
    mode: OutputMode,
    title: str = "Exported Landing Page",
    cdn_url: str = "https://cdn.tailwindcss.com",
) -> str:
    """
    Build a complete HTML page for a document.

    Args:
        document: Root nodes, rendered in order
        mode: Styling strategy
        title: Page title
        cdn_url: Utility CSS engine script, used in utility-classes mode

    Returns:
        HTML text without a trailing newline
    """
    lines = [
        "<!DOCTYPE html>",
        '<html lang="en">',
        "<head>",
        '  <meta charset="UTF-8">',
        '  <meta name="viewport" content="width=device-width, initial-scale=1.0">',
        f"  <title>{title}</title>",
    ]

    if mode is OutputMode.UTILITY_CLASSES:
        lines.append(f'  <script src="{cdn_url}"></script>')
    elif mode is OutputMode.CSS_CLASSES:
        lines.append("  <style>")
        for location in walk(list(document)):
            node = location.node
            if node.custom_styles:
                lines.extend(css_rule(f".component-{node.id}", node.custom_styles))
        lines.append("  </style>")

    lines.extend(["</head>", "<body>"])

    ctx = RenderContext(mode)
    for node in document:
        lines.extend(ctx.render(node))

    if mode is not OutputMode.UTILITY_CLASSES:
        lines.extend(BASELINE_CSS)

    lines.extend(["</body>", "</html>"])
    return "\n".join(lines)


class HTMLExporter:
    """Renders documents to HTML, caching by content digest and mode."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self.cache: LRUCache[str] | None = (
            LRUCache(max_size=self.settings.cache_size) if self.settings.enable_cache else None
        )

    def export(self, document: Sequence[ComponentNode], mode: OutputMode) -> str:
        with metrics_collector.measure_duration(lambda d: metrics_collector.record_export("html", d)):
            key = None
            if self.cache is not None:
                key = f"{mode.value}:{hash_json(dump_document(document), sort_keys=False)}"
                cached = self.cache.get(key)
                metrics_collector.record_render_cache(cached is not None)
                if cached is not None:
                    return cached

            html = render_document(
                document,
                mode,
                title=self.settings.page_title,
                cdn_url=self.settings.tailwind_cdn_url,
            )
            if key is not None:
                self.cache.set(key, html)

        logger.debug("html_exported", mode=mode.value, roots=len(document), size=len(html))
        return html
