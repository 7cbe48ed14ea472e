"""
Markdown for reveal.js (https://revealjs.com/markdown/).

    # Title
    ## Subtitle

    * Bullet
      * Nested bullet, two spaces per level

    ![Image](./img/<slide id>-img1.png)

    Notes: speaker notes

Every slide ends with three newlines so that concatenated slides stay apart.
"""

from typing import List

from pptx2markdown.extractors.data_types import Slide
from pptx2markdown.formatters.base import SlideFormatter

INDENT = "  "
NOTES_MARKER = "Notes:"
SLIDE_SEPARATOR = "\n\n\n"


class RevealMarkdownFormatter(SlideFormatter):
    name = "reveal"

    def render(self, slide: Slide, resource_path: str) -> str:
        parts: List[str] = []

        for title in slide.titles:
            parts.append(f"# {title}\n")

        for subtitle in slide.subtitles:
            parts.append(f"## {subtitle}\n")

        if slide.bullets:
            parts.append("\n")
        for bullet in slide.bullets:
            parts.append(f"{INDENT * bullet.level}* {bullet.text}\n")

        if slide.images:
            parts.append("\n")
        for index in range(1, len(slide.images) + 1):
            parts.append(
                f"![Image]({resource_path}/{slide.image_resource_name(index)})\n"
            )

        if slide.notes and slide.notes.strip():
            parts.append("\n")
            parts.append(f"{NOTES_MARKER} {slide.notes}\n")

        parts.append(SLIDE_SEPARATOR)
        return "".join(parts)
