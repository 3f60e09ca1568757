"""Small text helpers for labels, handles and escaping."""

from __future__ import annotations

import html
import re
import unicodedata


def slugify(title: str) -> str:
    """Turn a title into a lowercase, dash separated handle.

    Example:
        >>> slugify("My Child Theme 2.0")
        'my-child-theme-2-0'
    """
    text = unicodedata.normalize("NFKD", title).encode("ascii", "ignore").decode("ascii")
    text = re.sub(r"[^a-z0-9\s_-]", " ", text.lower())
    return re.sub(r"[\s_-]+", "-", text).strip("-")


def humanize(identifier: str) -> str:
    """Turn ``snake_case`` ids into capitalized words.

    Example:
        >>> humanize("featured_image")
        'Featured Image'
    """
    return " ".join(word[:1].upper() + word[1:] for word in identifier.replace("_", " ").split(" "))


def esc_attr(value: object) -> str:
    return html.escape(str(value), quote=True)


def esc_html(value: object) -> str:
    return html.escape(str(value), quote=False)
