"""Inline CSS helpers for customizer-driven colors."""

from __future__ import annotations

import re

# Applied in order; later substitutions rely on the whitespace collapsing
# done by the earlier ones.
_MINIFY_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\s+"), " "),
    (re.compile(r"(\s+)(/\*(.*?)\*/)(\s+)"), r"\2"),
    (re.compile(r"/\*(?![\!|\*])(.*?)\*/"), ""),
    (re.compile(r";(?=\s*})"), ""),
    (re.compile(r"(,|:|;|\{|}|\*/|>) "), r"\1"),
    (re.compile(r" (,|;|\{|}|\(|\)|>)"), r"\1"),
    (re.compile(r"(:| )0\.([0-9]+)(%|em|ex|px|in|cm|mm|pt|pc)", re.IGNORECASE), r"\1.\2\3"),
    (re.compile(r"(:| )(\.?)0(%|em|ex|px|in|cm|mm|pt|pc)", re.IGNORECASE), r"\g<1>0"),
    (re.compile(r"0 0 0 0"), "0"),
    (re.compile(r"#([a-f0-9])\1([a-f0-9])\2([a-f0-9])\3", re.IGNORECASE), r"#\1\2\3"),
)


def minify_css(css: str) -> str:
    """Minify a CSS string with a fixed chain of regex substitutions.

    Collapses whitespace, drops non-important comments and the last
    semicolon of each block, strips zero units and leading zeros, and
    shortens six-digit hex colors made of repeated pairs.

    Note that ``0 0 0 0`` collapses to ``0`` regardless of the property.

    Example:
        >>> minify_css("a { color: #ffffff; margin: 0px; }")
        'a{color:#fff;margin:0}'
    """
    for pattern, replacement in _MINIFY_RULES:
        css = pattern.sub(replacement, css)
    return css.strip()


_HEX_COLOR = re.compile(r"^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def hex_to_rgb(color: str) -> str:
    """Convert ``#rrggbb`` or ``#rgb`` to a comma separated decimal triple.

    Example:
        >>> hex_to_rgb("#ff8000")
        '255,128,0'
        >>> hex_to_rgb("#f80")
        '255,136,0'

    Raises:
        ValueError: If ``color`` is not a hex color.
    """
    match = _HEX_COLOR.match(color)
    if match is None:
        raise ValueError(f"Not a hex color: {color!r}")
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(digit * 2 for digit in digits)
    return ",".join(str(int(digits[i : i + 2], 16)) for i in (0, 2, 4))


def color_rule(elements: list[str], properties: dict[str, str], color: str) -> str:
    """Build one rule block applying ``color`` to each property pattern.

    Each pattern holds a single ``%s`` placeholder. Patterns mentioning
    ``rgba`` receive the decimal triple instead of the hex value; colors
    that are not hex are substituted unchanged.

    Args:
        elements: Selectors the rule applies to.
        properties: Mapping of CSS property to value pattern.
        color: Hex color string.

    Returns:
        The unminified rule, e.g. ``a,.b{color:#ff0000;}``.
    """
    declarations = ""
    for prop, pattern in properties.items():
        value = color
        if "rgba" in pattern and _HEX_COLOR.match(color):
            value = hex_to_rgb(color)
        declarations += f"{prop}:{pattern.replace('%s', value, 1)};"
    return ",".join(elements) + "{" + declarations + "}"
