import io
import struct
from pathlib import Path
from typing import List, Sequence, Tuple

import pytest
from PIL import Image
from pptx import Presentation
from pptx.oxml.ns import qn
from pptx.util import Inches

TITLE_SLIDE_LAYOUT = 0
TITLE_AND_CONTENT_LAYOUT = 1
BLANK_LAYOUT = 6


def make_image_bytes(color=(255, 0, 0), fmt: str = "PNG") -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (8, 8), color).save(buffer, format=fmt)
    return buffer.getvalue()


_FREESECT = 0xFFFFFFFF
_ENDOFCHAIN = 0xFFFFFFFE
_FATSECT = 0xFFFFFFFD
_NOSTREAM = 0xFFFFFFFF


def _directory_entry(
    name: str, entry_type: int, child: int = _NOSTREAM, start: int = _ENDOFCHAIN
) -> bytes:
    encoded = name.encode("utf-16-le") + b"\x00\x00" if name else b""
    return struct.pack(
        "<64sHBBIII16sIQQIII",
        encoded,
        len(encoded),
        entry_type,
        1 if name else 0,
        _NOSTREAM,
        _NOSTREAM,
        child,
        b"\x00" * 16,
        0,
        0,
        0,
        start if name else 0,
        0,
        0,
    )


def make_encrypted_package() -> io.BytesIO:
    """
    Smallest compound file that looks like a password-protected OOXML package:
    header, one FAT sector and one directory sector holding the root entry
    and an empty `EncryptionInfo` stream.
    """
    header = struct.pack(
        "<8s16sHHHHHHIIIIIIIIII",
        b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1",
        b"\x00" * 16,
        0x003E,
        3,
        0xFFFE,
        9,
        6,
        0,
        0,
        0,
        1,
        1,
        0,
        4096,
        _ENDOFCHAIN,
        0,
        _ENDOFCHAIN,
        0,
    )
    header += struct.pack("<109I", 0, *([_FREESECT] * 108))
    fat = struct.pack("<128I", _FATSECT, _ENDOFCHAIN, *([_FREESECT] * 126))
    directory = (
        _directory_entry("Root Entry", 5, child=1)
        + _directory_entry("EncryptionInfo", 2)
        + _directory_entry("", 0)
        + _directory_entry("", 0)
    )
    return io.BytesIO(header + fat + directory)


def _fill_paragraphs(text_frame, paragraphs: Sequence[Tuple[str, int]]) -> None:
    for i, (text, level) in enumerate(paragraphs):
        paragraph = text_frame.paragraphs[0] if i == 0 else text_frame.add_paragraph()
        paragraph.text = text
        paragraph.level = level


class DeckBuilder:
    """Builds small decks in memory with the default python-pptx template."""

    def __init__(self):
        self.prs = Presentation()

    def title_slide(self, title: str, subtitle: str):
        slide = self.prs.slides.add_slide(self.prs.slide_layouts[TITLE_SLIDE_LAYOUT])
        slide.shapes.title.text = title
        slide.placeholders[1].text = subtitle
        return slide

    def content_slide(self, title: str, paragraphs: Sequence[Tuple[str, int]]):
        slide = self.prs.slides.add_slide(
            self.prs.slide_layouts[TITLE_AND_CONTENT_LAYOUT]
        )
        slide.shapes.title.text = title
        _fill_paragraphs(slide.placeholders[1].text_frame, paragraphs)
        return slide

    def blank_slide(self):
        return self.prs.slides.add_slide(self.prs.slide_layouts[BLANK_LAYOUT])

    def add_textbox(self, slide_or_group, paragraphs: Sequence[Tuple[str, int]]):
        textbox = slide_or_group.shapes.add_textbox(
            Inches(1), Inches(1), Inches(4), Inches(1)
        )
        _fill_paragraphs(textbox.text_frame, paragraphs)
        return textbox

    def add_picture(self, slide, data: bytes | None = None):
        data = data if data is not None else make_image_bytes()
        return slide.shapes.add_picture(io.BytesIO(data), Inches(1), Inches(2))

    def set_notes(self, slide, text: str) -> None:
        slide.notes_slide.notes_text_frame.text = text

    def move_first_slide_to_end(self) -> None:
        sld_id_lst = self.prs.slides._sldIdLst
        sld_ids: List = list(sld_id_lst)
        sld_id_lst.remove(sld_ids[0])
        sld_id_lst.append(sld_ids[0])

    def point_first_slide_at(self, rId: str) -> None:
        sld_id_lst = self.prs.slides._sldIdLst
        sld_id_lst[0].set(qn("r:id"), rId)

    def to_bytesio(self) -> io.BytesIO:
        buffer = io.BytesIO()
        self.prs.save(buffer)
        buffer.seek(0)
        return buffer

    def save(self, path: Path) -> Path:
        self.prs.save(str(path))
        return path


@pytest.fixture
def deck() -> DeckBuilder:
    return DeckBuilder()


@pytest.fixture
def png_bytes() -> bytes:
    return make_image_bytes()


@pytest.fixture
def jpeg_bytes() -> bytes:
    return make_image_bytes(color=(0, 0, 255), fmt="JPEG")


@pytest.fixture
def sample_deck_path(tmp_path, deck) -> Path:
    """Two slides: a title slide and a content slide with a picture and notes."""
    deck.title_slide("Intro", "A short deck")
    slide = deck.content_slide("Agenda", [("Point A", 0), ("Sub point", 1)])
    deck.add_picture(slide)
    deck.set_notes(slide, "Say hello")
    return deck.save(tmp_path / "sample.pptx")


@pytest.fixture
def encrypted_package() -> io.BytesIO:
    return make_encrypted_package()
