"""
Conversion pipeline: extract every slide, scrub blank entries once, render.

Nothing is rendered until the whole deck has been extracted, so a failing
slide leaves no partial output behind.
"""

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List

from pptx2markdown.extractors.data_types import Slide
from pptx2markdown.extractors.normalization import scrub_blank_entries
from pptx2markdown.formatters import DEFAULT_FORMATTER, SlideFormatter, get_formatter
from pptx2markdown.router import get_extractor

logger = logging.getLogger(__name__)

DEFAULT_RESOURCE_PATH = "./img"


@dataclass
class RenderedSlide:
    slide: Slide
    markup: str


def render_slides(
    slides: List[Slide],
    formatter: SlideFormatter,
    resource_path: str = DEFAULT_RESOURCE_PATH,
) -> List[RenderedSlide]:
    return [
        RenderedSlide(slide=slide, markup=formatter.render(slide, resource_path))
        for slide in slides
    ]


def _resolve_formatter(formatter: str | SlideFormatter) -> SlideFormatter:
    if isinstance(formatter, str):
        return get_formatter(formatter)
    return formatter


def convert(
    file_like: io.BytesIO,
    path: str | None = None,
    *,
    formatter: str | SlideFormatter = DEFAULT_FORMATTER,
    resource_path: str = DEFAULT_RESOURCE_PATH,
) -> List[RenderedSlide]:
    """
    Convert a presentation held in memory.

    `path` selects the extractor by file name; without it the stream is read
    as a PPTX package.
    """
    slide_formatter = _resolve_formatter(formatter)
    if path is None:
        from pptx2markdown.extractors.pptx_extractor import read_pptx

        extractor = read_pptx
    else:
        extractor = get_extractor(str(path))

    slides: List[Slide] = []
    for content in extractor(file_like, path):
        slides.extend(content.slides)

    scrub_blank_entries(slides)
    rendered = render_slides(slides, slide_formatter, resource_path)
    logger.debug(f"Rendered {len(rendered)} slides")
    return rendered


def convert_file(
    path: str | Path,
    *,
    formatter: str | SlideFormatter = DEFAULT_FORMATTER,
    resource_path: str = DEFAULT_RESOURCE_PATH,
) -> List[RenderedSlide]:
    """Convert a presentation file. The format is checked before the file is read."""
    path = Path(path)
    get_extractor(str(path))
    with open(path, "rb") as f:
        file_like = io.BytesIO(f.read())
    return convert(
        file_like, str(path), formatter=formatter, resource_path=resource_path
    )
