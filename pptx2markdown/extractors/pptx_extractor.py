"""
PPTX Presentation Extractor
===========================

Reads a PowerPoint package (.pptx, .pptm, .ppsx, .potx) with python-pptx and
produces one `Slide` model per slide, in presentation order.

Slide Ordering
--------------
The order of `p:sldIdLst` in ppt/presentation.xml is the presentation order.
Part names (slide1.xml, slide2.xml, ...) say nothing about it: a slide moved
in PowerPoint keeps its part name. python-pptx's `Presentation.slides`
follows the id list, so slides are extracted in that order.

Before Opening
--------------
    - OLE containers holding an encrypted package are rejected
    - Anything that is not a ZIP archive is rejected
    - The archive is checked against the zip bomb limits

Usage
-----
    >>> import io
    >>> from pptx2markdown.extractors.pptx_extractor import read_pptx
    >>>
    >>> with open("slides.pptx", "rb") as f:
    ...     for deck in read_pptx(io.BytesIO(f.read()), path="slides.pptx"):
    ...         for slide in deck.slides:
    ...             print(slide.slide_number, slide.titles)
"""

import io
import logging
import zipfile
from datetime import datetime
from typing import Any, Generator, List

from pptx import Presentation
from pptx.exc import PackageNotFoundError

from pptx2markdown.exceptions import (
    ExtractionError,
    ExtractionFileEncryptedError,
    InvalidInputError,
    UnsupportedFormatError,
)
from pptx2markdown.extractors.data_types import (
    PresentationContent,
    PresentationMetadata,
    Slide,
)
from pptx2markdown.extractors.slide_extractor import extract_slide
from pptx2markdown.extractors.util.encryption import is_ooxml_encrypted
from pptx2markdown.extractors.util.zip_bomb import (
    DEFAULT_ZIP_BOMB_LIMITS,
    ZipBombLimits,
    validate_zip_bytesio,
)

logger = logging.getLogger(__name__)


def _dt_to_iso(dt: datetime | None) -> str:
    return dt.isoformat() if dt else ""


def _extract_metadata(prs) -> PresentationMetadata:
    cp = prs.core_properties
    return PresentationMetadata(
        title=cp.title or "",
        subject=cp.subject or "",
        author=cp.author or "",
        last_modified_by=cp.last_modified_by or "",
        created=_dt_to_iso(cp.created),
        modified=_dt_to_iso(cp.modified),
        keywords=cp.keywords or "",
        category=cp.category or "",
        revision=cp.revision,
    )


def _open_presentation(
    file_like: io.BytesIO, path: str | None, limits: ZipBombLimits
):
    file_like.seek(0)
    if is_ooxml_encrypted(file_like):
        raise ExtractionFileEncryptedError(
            "Presentation is encrypted or password-protected"
        )

    file_like.seek(0)
    if not zipfile.is_zipfile(file_like):
        raise InvalidInputError(
            f"Not a presentation package (no ZIP container): {path or '<stream>'}"
        )
    validate_zip_bytesio(file_like, limits=limits, source=path or "read_pptx")

    file_like.seek(0)
    try:
        return Presentation(file_like)
    except PackageNotFoundError as exc:
        raise InvalidInputError(
            f"Package could not be opened: {path or '<stream>'}", cause=exc
        ) from exc
    except ValueError as exc:
        # python-pptx refuses packages whose main part is not a presentation
        raise UnsupportedFormatError(path or "<stream>", str(exc), cause=exc) from exc


def read_pptx(
    file_like: io.BytesIO,
    path: str | None = None,
    *,
    limits: ZipBombLimits = DEFAULT_ZIP_BOMB_LIMITS,
) -> Generator[PresentationContent, Any, None]:
    """
    Extract the slides of a PowerPoint package.

    Args:
        file_like: BytesIO object containing the complete package.
        path: Optional file path, used for file metadata and messages.
        limits: Zip bomb ceilings applied before the package is opened.

    Yields:
        A single PresentationContent with the slides in presentation order.
        A deck without slides yields an empty `slides` list.

    Raises:
        InvalidInputError: The package cannot be opened or a slide reference
            does not resolve to a slide part.
        UnsupportedFormatError: The package is not a presentation.
        MalformedShapeError: A text-bearing shape has no text body.
        UnresolvedResourceError: A picture cannot be resolved to image data.
    """
    try:
        logger.debug("Reading pptx")
        prs = _open_presentation(file_like, path, limits)
        metadata = _extract_metadata(prs)

        slides_result: List[Slide] = []
        for slide_index, slide in enumerate(prs.slides, start=1):
            logger.debug(f"Processing slide [{slide_index}]")
            slides_result.append(extract_slide(slide, slide_number=slide_index))

        metadata.populate_from_path(path)

        total_images = sum(len(slide.images) for slide in slides_result)
        logger.info(
            "Extracted PPTX: %d slides, %d images",
            len(slides_result),
            total_images,
        )
    except ExtractionError:
        raise
    except KeyError as exc:
        raise InvalidInputError(
            f"Slide reference does not resolve to a slide part: {exc}", cause=exc
        ) from exc
    except Exception as exc:
        raise InvalidInputError("Failed to extract PPTX file", cause=exc) from exc

    yield PresentationContent(metadata=metadata, slides=slides_result)
