"""
Slide extractor: turns one python-pptx slide into a `Slide` model.

Text shapes are classified by their placeholder metadata and accumulated in
document order. Pictures are collected in a separate pass, also in document
order, and the speaker notes come from the body placeholder of the notes
slide when there is one.
"""

import logging
from typing import Iterator, Optional

from pptx.oxml.ns import qn
from pptx.shapes.group import GroupShape

from pptx2markdown.exceptions import MalformedShapeError, UnresolvedResourceError
from pptx2markdown.extractors.data_types import Bullet, Slide, SlideImage
from pptx2markdown.extractors.shape_classifier import (
    BODY_TYPE,
    ShapeRole,
    classify_shape,
    declared_placeholder_type,
)

logger = logging.getLogger(__name__)

P_SP = qn("p:sp")
P_PIC = qn("p:pic")

# python-pptx reports a soft line break (<a:br>) as a vertical tab
SOFT_BREAK = "\x0b"


def _iter_shapes(shapes) -> Iterator:
    """Depth-first walk over a shape collection, descending into groups."""
    for shape in shapes:
        if isinstance(shape, GroupShape):
            yield from _iter_shapes(shape.shapes)
        else:
            yield shape


def _plain_text(text: str) -> str:
    return text.replace(SOFT_BREAK, "\n")


def _require_text_frame(shape, slide_number: int):
    if shape.element.txBody is None:
        raise MalformedShapeError(slide_number=slide_number, shape_name=shape.name)
    return shape.text_frame


def _extract_text_shapes(slide, model: Slide) -> None:
    for shape in _iter_shapes(slide.shapes):
        if shape.element.tag != P_SP:
            continue

        role = classify_shape(shape)
        if role is ShapeRole.IGNORE:
            logger.debug(f"Skipping placeholder shape [{shape.name}]")
            continue

        text_frame = _require_text_frame(shape, model.slide_number)
        if role is ShapeRole.TITLE:
            model.titles.append(_plain_text(text_frame.text))
        elif role is ShapeRole.SUBTITLE:
            model.subtitles.append(_plain_text(text_frame.text))
        else:
            for paragraph in text_frame.paragraphs:
                model.bullets.append(
                    Bullet(
                        text=_plain_text(paragraph.text), level=paragraph.level or 0
                    )
                )


def _resolve_image(slide, shape, slide_number: int) -> SlideImage:
    rId = shape.element.blip_rId
    if rId is None:
        raise UnresolvedResourceError(slide_number=slide_number, relationship_id=None)
    try:
        image_part = slide.part.related_part(rId)
    except (KeyError, ValueError) as exc:
        # KeyError: dangling rId, ValueError: external (linked) target
        raise UnresolvedResourceError(
            slide_number=slide_number, relationship_id=rId, cause=exc
        ) from exc

    return SlideImage(
        filename=image_part.partname.filename,
        content_type=image_part.content_type,
        data=image_part.blob,
    )


def _extract_images(slide, model: Slide) -> None:
    for shape in _iter_shapes(slide.shapes):
        if shape.element.tag != P_PIC:
            continue
        model.images.append(_resolve_image(slide, shape, model.slide_number))


def _extract_notes(slide, slide_number: int) -> Optional[str]:
    if not slide.has_notes_slide:
        return None

    for shape in _iter_shapes(slide.notes_slide.shapes):
        if declared_placeholder_type(shape) != BODY_TYPE:
            continue
        return _plain_text(_require_text_frame(shape, slide_number).text)

    logger.debug(f"Notes slide of slide [{slide_number}] has no body placeholder")
    return None


def extract_slide(slide, slide_number: int = 0) -> Slide:
    """
    Build the `Slide` model for one python-pptx slide.

    Args:
        slide: A `pptx.slide.Slide`.
        slide_number: 1-based position in the deck, used in logs and errors.

    Raises:
        MalformedShapeError: A title, subtitle or body text shape has no text body.
        UnresolvedResourceError: A picture does not resolve to an embedded image part.
    """
    model = Slide(slide_number=slide_number)

    _extract_text_shapes(slide, model)
    _extract_images(slide, model)
    model.notes = _extract_notes(slide, slide_number)

    logger.debug(
        f"Slide [{slide_number}]: {len(model.titles)} titles, "
        f"{len(model.bullets)} bullets, {len(model.images)} images"
    )
    return model
