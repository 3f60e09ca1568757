"""Pure helper services used by theme components."""

from .css import color_rule, hex_to_rgb, minify_css
from .markup import attributes, markup
from .merge import replace_recursive
from .text import esc_attr, esc_html, humanize, slugify

__all__ = [
    "attributes",
    "color_rule",
    "esc_attr",
    "esc_html",
    "hex_to_rgb",
    "humanize",
    "markup",
    "minify_css",
    "replace_recursive",
    "slugify",
]
