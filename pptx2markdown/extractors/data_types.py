import io
import uuid
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import List, Optional

from pptx2markdown.mime_types import extension_for_content_type


@dataclass
class FileMetadataInterface:
    filename: str | None = None
    file_extension: str | None = None
    file_path: str | None = None
    folder_path: str | None = None

    def populate_from_path(self, path: str | Path | None) -> None:
        """Populate file metadata fields from a path."""
        if path is None:
            return
        p = Path(path)
        self.filename = p.name
        self.file_extension = p.suffix
        self.file_path = str(p.resolve()) if p.exists() else str(p)
        self.folder_path = (
            str(p.parent.resolve()) if p.parent.exists() else str(p.parent)
        )

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class PresentationMetadata(FileMetadataInterface):
    title: str = ""
    subject: str = ""
    author: str = ""
    last_modified_by: str = ""
    created: str = ""
    modified: str = ""
    keywords: str = ""
    category: str = ""
    revision: Optional[int] = None


@dataclass
class Bullet:
    """One paragraph of free-form slide text. `level` is the declared indentation."""

    text: str = ""
    level: int = 0


@dataclass
class SlideImage:
    filename: str = ""  # name of the media part inside the package
    content_type: str = ""
    data: bytes = b""

    @property
    def extension(self) -> str:
        return extension_for_content_type(self.content_type)

    def get_bytes(self) -> io.BytesIO:
        fl = io.BytesIO(self.data)
        fl.seek(0)
        return fl


@dataclass
class Slide:
    """
    Format-agnostic content of one slide.

    `id` is assigned once at construction and cannot be re-assigned. Resource
    names for images are derived from it, see `image_resource_name`.
    """

    slide_number: int = 0
    titles: List[str] = field(default_factory=list)
    subtitles: List[str] = field(default_factory=list)
    bullets: List[Bullet] = field(default_factory=list)
    images: List[SlideImage] = field(default_factory=list)
    notes: Optional[str] = None
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def __setattr__(self, name, value):
        if name == "id" and "id" in self.__dict__:
            raise AttributeError("Slide id is assigned once and cannot be changed")
        super().__setattr__(name, value)

    def image_resource_name(self, index: int) -> str:
        """File name of the image at 1-based `index`, e.g. `<id>-img1.png`."""
        if index < 1 or index > len(self.images):
            raise IndexError(
                f"Image index {index} out of range for slide with {len(self.images)} images"
            )
        extension = self.images[index - 1].extension
        return f"{self.id}-img{index}.{extension}"


@dataclass
class PresentationContent:
    metadata: PresentationMetadata = field(default_factory=PresentationMetadata)
    slides: List[Slide] = field(default_factory=list)

    def get_metadata(self) -> PresentationMetadata:
        """Returns the metadata of the extracted file."""
        return self.metadata
