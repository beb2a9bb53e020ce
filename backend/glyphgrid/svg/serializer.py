"""Write SVG markup from element dictionaries (groups nest via "children")."""

from __future__ import annotations

from html import escape
from typing import Any


def _attr_str(elem: dict[str, Any]) -> str:
    attrs = {k: v for k, v in elem.items() if k not in ("tag", "children")}
    return " ".join(f'{k}="{escape(str(v), quote=True)}"' for k, v in attrs.items())


def _write_element(elem: dict[str, Any], lines: list[str], depth: int) -> None:
    indent = "  " * depth
    tag = elem.get("tag", "path")
    attr_str = _attr_str(elem)
    head = f"{indent}<{tag} {attr_str}" if attr_str else f"{indent}<{tag}"

    if tag == "g":
        children = elem.get("children") or []
        if not children:
            return
        lines.append(f"{head}>")
        for child in children:
            _write_element(child, lines, depth + 1)
        lines.append(f"{indent}</g>")
    else:
        lines.append(f"{head} />")


def serialize_svg(
    elements: list[dict[str, Any]],
    canvas_w: float,
    canvas_h: float,
    title: str = "",
    description: str = "",
) -> str:
    """Generate SVG markup from element definitions. Empty groups are dropped."""
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg width="{canvas_w:g}" height="{canvas_h:g}" viewBox="0 0 {canvas_w:g} {canvas_h:g}"'
        f' xmlns="http://www.w3.org/2000/svg" role="img">',
    ]

    if title:
        lines.append(f"  <title>{escape(title)}</title>")
    if description:
        lines.append(f"  <desc>{escape(description)}</desc>")

    for elem in elements:
        _write_element(elem, lines, 1)

    lines.append("</svg>")
    return "\n".join(lines)
