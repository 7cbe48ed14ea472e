from typing import List

from pptx2markdown.extractors.data_types import Slide


def _is_blank(text: str | None) -> bool:
    return text is None or not text.strip()


def scrub_blank_entries(slides: List[Slide]) -> List[Slide]:
    """
    Drop empty or whitespace-only titles, subtitles and bullets, in place.

    Placeholders left empty in the source deck would otherwise render as bare
    heading and list markers. Running it again is a no-op. Returns `slides`.
    """
    for slide in slides:
        slide.titles[:] = [title for title in slide.titles if not _is_blank(title)]
        slide.subtitles[:] = [
            subtitle for subtitle in slide.subtitles if not _is_blank(subtitle)
        ]
        slide.bullets[:] = [
            bullet for bullet in slide.bullets if not _is_blank(bullet.text)
        ]
    return slides
