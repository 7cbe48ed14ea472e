import io
import logging
import mimetypes
import os
from typing import Any, Callable, Generator

from pptx2markdown.exceptions import UnsupportedFormatError
from pptx2markdown.extractors.data_types import PresentationContent
from pptx2markdown.mime_types import (
    FILE_EXTENSION_FALLBACK,
    MIME_TYPE_MAPPING,
    is_supported_mime_type,
)

logger = logging.getLogger(__name__)

Extractor = Callable[
    [io.BytesIO, str | None], Generator[PresentationContent, Any, None]
]


def _get_extractor(file_type: str) -> Extractor:
    """Return the extractor function for a file type (lazy import)."""
    if file_type in ("pptx", "pptm", "ppsx", "potx"):
        from pptx2markdown.extractors.pptx_extractor import read_pptx

        return read_pptx
    raise UnsupportedFormatError(file_type, f"No extractor for file type: {file_type}")


def _detect_file_type(path: str) -> str | None:
    path = path.lower()
    mime_type, _ = mimetypes.guess_type(path)
    if is_supported_mime_type(mime_type):
        logger.debug(f"Detected file type (MIME: {mime_type}) for file: {path}")
        return MIME_TYPE_MAPPING[mime_type]
    _, extension = os.path.splitext(path)
    if extension in FILE_EXTENSION_FALLBACK:
        logger.debug(f"Detected file type by extension {extension} for file: {path}")
        return FILE_EXTENSION_FALLBACK[extension]
    logger.debug(f"File [{path}] with mime type [{mime_type}] is not supported")
    return None


def is_supported_file(path: str) -> bool:
    """Checks if the path is a supported file"""
    return _detect_file_type(path) is not None


def get_extractor(path: str) -> Extractor:
    """Analyses the path of a file and returns a suited extractor.
       The file need not exist (yet). The path or filename alone suffices to
       return an extractor.

    :returns a function of an extractor. All extractors take a file-like object as parameter
    :raises UnsupportedFormatError: File is not covered by any extractor
    """
    file_type = _detect_file_type(path)
    if file_type is None:
        raise UnsupportedFormatError(
            path, f"Unrecognized file type, only PowerPoint packages are supported: {path}"
        )
    return _get_extractor(file_type)
