import mimetypes

MIME_TYPE_MAPPING = {
    "application/vnd.openxmlformats-officedocument.presentationml.presentation": "pptx",
    "application/vnd.ms-powerpoint.presentation.macroEnabled.12": "pptm",
    "application/vnd.openxmlformats-officedocument.presentationml.slideshow": "ppsx",
    "application/vnd.openxmlformats-officedocument.presentationml.template": "potx",
}

# mimetypes does not know every OOXML variant on every platform
FILE_EXTENSION_FALLBACK = {
    ".pptx": "pptx",
    ".pptm": "pptm",
    ".ppsx": "ppsx",
    ".potx": "potx",
}

IMAGE_EXTENSION_MAPPING = {
    "image/jpeg": "jpg",
    "image/jpg": "jpg",
    "image/pjpeg": "jpg",
    "image/png": "png",
    "image/gif": "gif",
    "image/bmp": "bmp",
    "image/x-ms-bmp": "bmp",
    "image/tiff": "tiff",
    "image/svg+xml": "svg",
    "image/webp": "webp",
    "image/x-emf": "emf",
    "image/emf": "emf",
    "image/x-wmf": "wmf",
    "image/wmf": "wmf",
}

DEFAULT_IMAGE_EXTENSION = "bin"


def is_supported_mime_type(mime_type: str | None) -> bool:
    if not mime_type:
        return False
    return mime_type in MIME_TYPE_MAPPING


def extension_for_content_type(content_type: str | None) -> str:
    """File extension (without dot) for an image content type."""
    if not content_type:
        return DEFAULT_IMAGE_EXTENSION
    content_type = content_type.split(";")[0].strip().lower()
    if content_type in IMAGE_EXTENSION_MAPPING:
        return IMAGE_EXTENSION_MAPPING[content_type]
    guessed = mimetypes.guess_extension(content_type)
    if guessed:
        return guessed.lstrip(".")
    return DEFAULT_IMAGE_EXTENSION
