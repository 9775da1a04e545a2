"""CSS selector helpers shared by the backends and the assertions."""

from __future__ import annotations


def css_string(value: str) -> str:
    """Quote `value` as a CSS string literal."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def attr_contains(attr: str, fragment: str) -> str:
    """`[attr*="fragment"]`"""
    return f"[{attr}*={css_string(fragment)}]"


def attr_equals(attr: str, value: str, *, tag: str = "") -> str:
    """`tag[attr="value"]`"""
    return f"{tag}[{attr}={css_string(value)}]"
