"""
Semantic role of a slide shape, decided from its placeholder metadata.

Placeholder types are compared as the raw `p:ph/@type` strings. A shape only
carries a placeholder role if the attribute is present: python-pptx reports a
missing type as `PP_PLACEHOLDER.OBJECT`, which would hide content placeholders
and ad-hoc text boxes alike.
"""

import enum
from typing import Optional

TITLE_TYPES = frozenset({"title", "ctrTitle"})
SUBTITLE_TYPES = frozenset({"subTitle"})
BODY_TYPE = "body"


class ShapeRole(enum.Enum):
    TITLE = "title"
    SUBTITLE = "subtitle"
    BODY_TEXT = "body_text"
    IGNORE = "ignore"


def classify_placeholder(ph_type: Optional[str]) -> ShapeRole:
    """Map a declared placeholder type (or None) onto a ShapeRole."""
    if ph_type is None or ph_type == BODY_TYPE:
        # Text boxes without placeholder metadata still hold slide content
        return ShapeRole.BODY_TEXT
    if ph_type in TITLE_TYPES:
        return ShapeRole.TITLE
    if ph_type in SUBTITLE_TYPES:
        return ShapeRole.SUBTITLE
    # sldNum, dt, ftr, obj, pic, ...
    return ShapeRole.IGNORE


def declared_placeholder_type(shape) -> Optional[str]:
    """Raw placeholder type declared on a python-pptx shape, None if undeclared."""
    if not shape.is_placeholder:
        return None
    return shape.placeholder_format.element.get("type")


def classify_shape(shape) -> ShapeRole:
    return classify_placeholder(declared_placeholder_type(shape))
