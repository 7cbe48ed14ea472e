"""
Persists rendered slides.

    output is None      -> all slides concatenated to the stream, no image files
    output ends in .md  -> all slides in that file, images in <parent>/img/
    anything else       -> a directory with slide1.md, slide2.md, ... and img/

Image files are named by `Slide.image_resource_name`, the same name the
formatter puts into the markup, and hold the embedded bytes unchanged.
"""

import logging
import sys
from pathlib import Path
from typing import List, TextIO

from pptx2markdown.converter import RenderedSlide

logger = logging.getLogger(__name__)

IMAGE_DIRECTORY = "img"
SINGLE_FILE_SUFFIX = ".md"


def is_single_file_output(output: str | Path) -> bool:
    return str(output).lower().endswith(SINGLE_FILE_SUFFIX)


def write_images(rendered: List[RenderedSlide], directory: Path) -> List[Path]:
    directory.mkdir(parents=True, exist_ok=True)
    written: List[Path] = []
    for item in rendered:
        slide = item.slide
        for index, image in enumerate(slide.images, start=1):
            target = directory / slide.image_resource_name(index)
            target.write_bytes(image.data)
            written.append(target)
    logger.debug(f"Wrote {len(written)} images to {directory}")
    return written


def write_output(
    rendered: List[RenderedSlide],
    output: str | Path | None = None,
    stream: TextIO | None = None,
) -> List[Path]:
    """
    Write the markup and images of a conversion.

    Returns the paths of all files written (empty for stream output).
    """
    if output is None:
        stream = stream if stream is not None else sys.stdout
        stream.write("".join(item.markup for item in rendered))
        return []

    output = Path(output)
    if is_single_file_output(output):
        output_directory = output.parent
    else:
        output_directory = output
    output_directory.mkdir(parents=True, exist_ok=True)

    written = write_images(rendered, output_directory / IMAGE_DIRECTORY)

    if is_single_file_output(output):
        output.write_text("".join(item.markup for item in rendered), encoding="utf-8")
        written.append(output)
    else:
        for slide_number, item in enumerate(rendered, start=1):
            target = output_directory / f"slide{slide_number}{SINGLE_FILE_SUFFIX}"
            target.write_text(item.markup, encoding="utf-8")
            written.append(target)

    logger.info("Wrote %d files to %s", len(written), output_directory)
    return written
