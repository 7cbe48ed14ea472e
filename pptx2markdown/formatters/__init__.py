"""
Slide formatters
================

A formatter turns one `Slide` into markup through `render(slide,
resource_path)`. Formatters are looked up by name so callers (and the CLI)
can select one without importing it.

Available formatters:
    - reveal: Markdown for reveal.js (default)
"""

from typing import Dict, List, Type

from pptx2markdown.formatters.base import SlideFormatter
from pptx2markdown.formatters.reveal_markdown import RevealMarkdownFormatter

DEFAULT_FORMATTER = "reveal"

_FORMATTERS: Dict[str, Type[SlideFormatter]] = {
    RevealMarkdownFormatter.name: RevealMarkdownFormatter,
}


def available_formatters() -> List[str]:
    return sorted(_FORMATTERS)


def get_formatter(name: str = DEFAULT_FORMATTER) -> SlideFormatter:
    """Return a formatter instance by name.

    :raises ValueError: No formatter is registered under `name`
    """
    try:
        return _FORMATTERS[name.lower()]()
    except KeyError:
        raise ValueError(
            f"Unknown formatter [{name}], available: {', '.join(available_formatters())}"
        ) from None


__all__ = [
    "DEFAULT_FORMATTER",
    "RevealMarkdownFormatter",
    "SlideFormatter",
    "available_formatters",
    "get_formatter",
]
