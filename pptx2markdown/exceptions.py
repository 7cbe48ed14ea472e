class ExtractionError(Exception):
    """Base class for every failure raised while converting a presentation."""

    def __init__(self, message: str, *, cause: Exception = None):
        super().__init__(message)
        # Optional chaining for debugging
        self.__cause__ = cause


class InvalidInputError(ExtractionError):
    """Raised when the package cannot be opened or a slide resolves to no content."""


class ExtractionFileEncryptedError(InvalidInputError):
    """Raised when the package is encrypted or password-protected."""


class ExtractionZipBombError(InvalidInputError):
    """Raised when the ZIP container trips the zip bomb heuristics."""


class MalformedShapeError(ExtractionError):
    """Raised when a text-bearing shape has no text body."""

    def __init__(
        self,
        message: str = None,
        *,
        slide_number: int = 0,
        shape_name: str = "",
        cause: Exception = None,
    ):
        self.slide_number = slide_number
        self.shape_name = shape_name
        if message is None:
            message = (
                f"Shape [{shape_name}] on slide {slide_number} has no text body"
            )
        super().__init__(message, cause=cause)


class UnresolvedResourceError(ExtractionError):
    """Raised when a picture relationship does not lead to an embedded resource."""

    def __init__(
        self,
        message: str = None,
        *,
        slide_number: int = 0,
        relationship_id: str | None = None,
        cause: Exception = None,
    ):
        self.slide_number = slide_number
        self.relationship_id = relationship_id
        if message is None:
            message = (
                f"Picture relationship [{relationship_id}] on slide {slide_number} "
                "could not be resolved"
            )
        super().__init__(message, cause=cause)


class UnsupportedFormatError(ExtractionError):
    """Raised when the file is not a presentation package."""

    def __init__(self, file_path: str, message: str = None, *, cause: Exception = None):
        self.file_path = file_path
        if message is None:
            message = f"File format not supported: {file_path}"
        super().__init__(message, cause=cause)
