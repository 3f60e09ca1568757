"""Genesis-style contextual markup rendering."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .text import esc_attr

if TYPE_CHECKING:
    from themecore.contracts.host import Host


def attributes(host: Host, context: str) -> str:
    """Build the attribute string for a markup context.

    The defaults (``class=<context>``) pass through the
    ``genesis_attr_<context>`` filter, so components can add attributes.
    """
    atts: dict[str, Any] = host.apply_filters(f"genesis_attr_{context}", {"class": context})
    return " ".join(f'{key}="{esc_attr(value)}"' for key, value in atts.items() if value is not None)


def markup(
    host: Host,
    *,
    context: str,
    open: str = "",
    close: str = "",
    content: str = "",
) -> None:
    """Write ``open`` + ``content`` + ``close`` to the host output.

    A ``%s`` in the opening tag receives the context attributes. Each
    part can be suppressed by returning False from the
    ``genesis_markup_<context>_open|content|close`` filters.
    """
    parts = {
        "open": open % attributes(host, context) if "%s" in open else open,
        "content": content,
        "close": close,
    }
    rendered = ""
    for part, text in parts.items():
        if not text:
            continue
        filtered = host.apply_filters(f"genesis_markup_{context}_{part}", text)
        if filtered is not False and filtered is not None:
            rendered += str(filtered)
    if rendered:
        host.output(rendered)
