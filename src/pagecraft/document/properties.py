"""Stylable CSS property metadata.

Static lookup of the property names a property panel offers, with labels and
suggested values. The engine only reads it.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict


class ElementProperty(BaseModel):
    """One stylable property."""

    model_config = ConfigDict(frozen=True)

    label: str
    options: tuple[str, ...]
    css_property: str
    type: str | None = None


_SPACING = ("0", "1px", "2px", "4px", "8px", "16px", "24px", "32px", "48px", "64px")
_OFFSETS = ("auto", "0", "50%", "100%", "10px", "20px", "30px")
_PALETTE = (
    "#000000", "#ffffff", "#f44336", "#e91e63", "#9c27b0", "#673ab7",
    "#3f51b5", "#2196f3", "#03a9f4", "#00bcd4", "#009688", "#4caf50",
    "#8bc34a", "#cddc39", "#ffeb3b", "#ffc107", "#ff9800", "#ff5722",
    "#795548", "#9e9e9e", "#607d8b",
)


def _prop(name: str, label: str, options: tuple[str, ...], type: str | None = None) -> tuple[str, ElementProperty]:
    return name, ElementProperty(label=label, options=options, css_property=name, type=type)


ELEMENT_PROPERTIES: Mapping[str, ElementProperty] = dict(
    [
        # Layout
        _prop("margin", "Margin", _SPACING),
        _prop("marginTop", "Margin Top", _SPACING),
        _prop("marginBottom", "Margin Bottom", _SPACING),
        _prop("marginLeft", "Margin Left", _SPACING),
        _prop("marginRight", "Margin Right", _SPACING),
        _prop("padding", "Padding", _SPACING),
        _prop("paddingTop", "Padding Top", _SPACING),
        _prop("paddingBottom", "Padding Bottom", _SPACING),
        _prop("paddingLeft", "Padding Left", _SPACING),
        _prop("paddingRight", "Padding Right", _SPACING),
        _prop("width", "Width", (
            "auto", "25%", "50%", "75%", "100%", "200px", "300px", "400px", "500px", "600px",
            "fit-content", "max-content", "min-content",
        )),
        _prop("height", "Height", (
            "auto", "100px", "200px", "300px", "400px", "500px", "100%",
            "fit-content", "max-content", "min-content",
        )),
        _prop("maxWidth", "Max Width", ("none", "100%", "300px", "500px", "800px", "1000px", "1200px")),
        _prop("minWidth", "Min Width", ("0", "100px", "200px", "300px", "400px", "500px")),
        # Typography
        _prop("fontSize", "Font Size", (
            "12px", "14px", "16px", "18px", "20px", "24px", "28px", "32px", "36px", "48px", "64px",
        )),
        _prop("fontWeight", "Font Weight", (
            "normal", "bold", "100", "200", "300", "400", "500", "600", "700", "800", "900",
        )),
        _prop("textAlign", "Text Align", ("left", "center", "right", "justify")),
        _prop("lineHeight", "Line Height", ("1", "1.25", "1.5", "1.75", "2", "2.5")),
        _prop("letterSpacing", "Letter Spacing", ("normal", "0.05em", "0.1em", "-0.05em")),
        _prop("textDecoration", "Text Decoration", ("none", "underline", "overline", "line-through")),
        _prop("textTransform", "Text Transform", ("none", "uppercase", "lowercase", "capitalize")),
        _prop("fontStyle", "Font Style", ("normal", "italic", "oblique")),
        # Colors
        _prop("color", "Text Color", _PALETTE, type="color"),
        _prop("backgroundColor", "Background Color", _PALETTE + ("transparent",), type="color"),
        _prop("backgroundImage", "Background Image", (
            "none",
            'url("https://via.placeholder.com/1200x800")',
            "linear-gradient(to right, #4facfe 0%, #00f2fe 100%)",
        )),
        _prop("backgroundSize", "Background Size", ("auto", "cover", "contain", "100% 100%")),
        _prop("backgroundPosition", "Background Position", (
            "center", "top", "bottom", "left", "right", "top left", "top right", "bottom left", "bottom right",
        )),
        _prop("backgroundRepeat", "Background Repeat", ("repeat", "no-repeat", "repeat-x", "repeat-y")),
        # Borders
        _prop("borderWidth", "Border Width", ("0", "1px", "2px", "4px", "8px")),
        _prop("borderStyle", "Border Style", ("none", "solid", "dashed", "dotted", "double")),
        _prop("borderColor", "Border Color", _PALETTE, type="color"),
        _prop("borderRadius", "Border Radius", ("0", "2px", "4px", "8px", "16px", "24px", "32px", "50%")),
        # Display & Position
        _prop("display", "Display", ("block", "inline", "inline-block", "flex", "inline-flex", "grid", "none")),
        _prop("position", "Position", ("static", "relative", "absolute", "fixed", "sticky")),
        _prop("top", "Top", _OFFSETS),
        _prop("right", "Right", _OFFSETS),
        _prop("bottom", "Bottom", _OFFSETS),
        _prop("left", "Left", _OFFSETS),
        _prop("zIndex", "Z-Index", ("auto", "0", "1", "10", "100", "1000")),
        _prop("flexDirection", "Flex Direction", ("row", "row-reverse", "column", "column-reverse")),
        _prop("flexWrap", "Flex Wrap", ("nowrap", "wrap", "wrap-reverse")),
        _prop("justifyContent", "Justify Content", (
            "flex-start", "flex-end", "center", "space-between", "space-around", "space-evenly",
        )),
        _prop("alignItems", "Align Items", ("stretch", "flex-start", "flex-end", "center", "baseline")),
        _prop("alignSelf", "Align Self", ("auto", "flex-start", "flex-end", "center", "baseline", "stretch")),
        _prop("gap", "Gap", ("0", "4px", "8px", "16px", "24px", "32px", "48px")),
        # Effects
        _prop("opacity", "Opacity", ("0", "0.25", "0.5", "0.75", "1")),
        _prop("boxShadow", "Box Shadow", (
            "none",
            "0 1px 3px rgba(0,0,0,0.12), 0 1px 2px rgba(0,0,0,0.24)",
            "0 3px 6px rgba(0,0,0,0.16), 0 3px 6px rgba(0,0,0,0.23)",
            "0 10px 20px rgba(0,0,0,0.19), 0 6px 6px rgba(0,0,0,0.23)",
            "0 14px 28px rgba(0,0,0,0.25), 0 10px 10px rgba(0,0,0,0.22)",
            "0 19px 38px rgba(0,0,0,0.30), 0 15px 12px rgba(0,0,0,0.22)",
        )),
        _prop("transform", "Transform", (
            "none", "translateX(10px)", "translateY(10px)", "scale(1.1)", "rotate(5deg)", "skew(5deg)",
        )),
        _prop("filter", "Filter", (
            "none", "blur(5px)", "brightness(1.2)", "contrast(1.2)", "grayscale(50%)",
            "hue-rotate(90deg)", "invert(75%)", "sepia(50%)",
        )),
        # Animation
        _prop("transition", "Transition", (
            "none", "all 0.3s ease", "all 0.5s ease", "opacity 0.3s ease", "transform 0.3s ease",
        )),
        _prop("animation", "Animation", (
            "none", "fadeIn 1s ease", "slideIn 0.5s ease", "pulse 2s infinite", "bounce 1s infinite",
        )),
        # Other
        _prop("cursor", "Cursor", (
            "auto", "default", "pointer", "help", "text", "not-allowed", "zoom-in", "zoom-out", "grab",
        )),
        _prop("overflow", "Overflow", ("visible", "hidden", "scroll", "auto")),
        _prop("userSelect", "User Select", ("auto", "none", "text", "all")),
    ]
)

PROPERTY_GROUPS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Layout", (
        "margin", "marginTop", "marginBottom", "marginLeft", "marginRight",
        "padding", "paddingTop", "paddingBottom", "paddingLeft", "paddingRight",
        "width", "height", "maxWidth", "minWidth",
    )),
    ("Typography", (
        "fontSize", "fontWeight", "textAlign", "lineHeight", "letterSpacing",
        "textDecoration", "textTransform", "fontStyle",
    )),
    ("Colors", (
        "color", "backgroundColor", "backgroundImage", "backgroundSize", "backgroundPosition", "backgroundRepeat",
    )),
    ("Borders", ("borderWidth", "borderStyle", "borderColor", "borderRadius")),
    ("Display & Position", (
        "display", "position", "top", "right", "bottom", "left", "zIndex", "flexDirection",
        "flexWrap", "justifyContent", "alignItems", "alignSelf", "gap",
    )),
    ("Effects", ("opacity", "boxShadow", "transform", "filter", "transition", "animation")),
    ("Other", ("cursor", "overflow", "userSelect")),
)


def is_known_property(name: str) -> bool:
    return name in ELEMENT_PROPERTIES


def unknown_properties(styles: Mapping[str, Any]) -> list[str]:
    """Style keys the property table does not describe."""
    return [name for name in styles if name not in ELEMENT_PROPERTIES]


def generate_css_from_properties(styles: Mapping[str, Any]) -> str:
    """
    Render known, non-empty properties as ``property: value;`` lines.

    Names are emitted as the table's camelCase property, one per line,
    matching what the property panel previews.
    """
    css = ""
    for key, value in styles.items():
        if value and key in ELEMENT_PROPERTIES:
            css += f"{ELEMENT_PROPERTIES[key].css_property}: {value};\n"
    return css
