"""
pptx2markdown: PowerPoint to Markdown conversion.

Reads the slides of a PowerPoint package into format-agnostic slide records
(titles, subtitles, nested bullets, images, speaker notes) and renders them
as reveal.js Markdown.
"""

import io
from pathlib import Path
from typing import Any, Generator

from pptx2markdown.converter import RenderedSlide, convert, convert_file
from pptx2markdown.extractors.data_types import (
    Bullet,
    PresentationContent,
    Slide,
    SlideImage,
)
from pptx2markdown.formatters import get_formatter
from pptx2markdown.router import get_extractor, is_supported_file
from pptx2markdown.writer import write_output

__version__ = "0.1.0"


def read_pptx(
    file_like: io.BytesIO, path: str | None = None, **kwargs
) -> Generator[PresentationContent, Any, None]:
    """Extract content from a PPTX file. Keyword arguments (`limits`) are passed on."""
    from pptx2markdown.extractors.pptx_extractor import read_pptx as _read_pptx

    return _read_pptx(file_like, path, **kwargs)


def read_file(
    path: str | Path,
) -> Generator[PresentationContent, Any, None]:
    """
    Read and extract the slides of a presentation file.

    The file type is checked from the file name before the file is read.

    Args:
        path: Path to the file to read.

    Yields:
        PresentationContent with the slides in presentation order.

    Raises:
        UnsupportedFormatError: If the file type is not supported.
        FileNotFoundError: If the file does not exist.

    Example:
        >>> import pptx2markdown
        >>> for deck in pptx2markdown.read_file("slides.pptx"):
        ...     print(len(deck.slides))
    """
    path = Path(path)
    extractor = get_extractor(str(path))
    with open(path, "rb") as f:
        yield from extractor(io.BytesIO(f.read()), str(path))


__all__ = [
    # Version
    "__version__",
    # Main functions
    "read_file",
    "read_pptx",
    "convert",
    "convert_file",
    "write_output",
    "is_supported_file",
    "get_extractor",
    "get_formatter",
    # Model
    "Bullet",
    "PresentationContent",
    "RenderedSlide",
    "Slide",
    "SlideImage",
]
