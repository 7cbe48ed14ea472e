import io
import re
from unittest import TestCase

import pytest

from pptx2markdown import convert, convert_file, read_file, read_pptx, write_output
from pptx2markdown.converter import RenderedSlide
from pptx2markdown.exceptions import (
    ExtractionZipBombError,
    InvalidInputError,
    UnsupportedFormatError,
)
from pptx2markdown.extractors.data_types import Slide, SlideImage
from pptx2markdown.extractors.util.zip_bomb import ZipBombLimits

tc = TestCase()
tc.maxDiff = None

IMAGE_LINK = re.compile(r"!\[Image\]\(\./img/([^)]+)\)")


#############
# Pipeline #
#############


def test_convert_sample_deck(sample_deck_path) -> None:
    rendered = convert_file(sample_deck_path)

    tc.assertEqual(2, len(rendered))
    tc.assertEqual("# Intro\n## A short deck\n\n\n\n", rendered[0].markup)

    second = rendered[1]
    image_name = second.slide.image_resource_name(1)
    tc.assertEqual(
        "# Agenda\n"
        "\n"
        "* Point A\n"
        "  * Sub point\n"
        "\n"
        f"![Image](./img/{image_name})\n"
        "\n"
        "Notes: Say hello\n"
        "\n\n\n",
        second.markup,
    )


def test_convert_scrubs_blank_entries(deck) -> None:
    deck.content_slide("", [("   ", 0), ("real", 0)])

    rendered = convert(deck.to_bytesio())

    tc.assertListEqual([], rendered[0].slide.titles)
    tc.assertListEqual(["real"], [b.text for b in rendered[0].slide.bullets])
    tc.assertEqual("\n* real\n\n\n\n", rendered[0].markup)


def test_convert_soft_line_breaks(deck) -> None:
    slide = deck.content_slide("Hello\vWorld", [("a\vb", 0)])
    deck.set_notes(slide, "n1\vn2")

    markup = convert(deck.to_bytesio())[0].markup

    tc.assertNotIn("\v", markup)
    tc.assertEqual("# Hello\nWorld\n\n* a\nb\n\nNotes: n1\nn2\n\n\n\n", markup)


def test_convert_empty_deck(deck) -> None:
    tc.assertListEqual([], convert(deck.to_bytesio()))


def test_convert_custom_resource_path(deck) -> None:
    slide = deck.blank_slide()
    deck.add_picture(slide)
    deck.add_picture(slide)

    rendered = convert(deck.to_bytesio(), resource_path="/static/img")[0]

    lines = [line for line in rendered.markup.splitlines() if line.startswith("![")]
    tc.assertListEqual(
        [
            f"![Image](/static/img/{rendered.slide.id}-img1.png)",
            f"![Image](/static/img/{rendered.slide.id}-img2.png)",
        ],
        lines,
    )


def test_convert_file_rejects_unsupported_extension(tmp_path) -> None:
    path = tmp_path / "notes.txt"
    path.write_text("hello")

    with pytest.raises(UnsupportedFormatError):
        convert_file(path)


def test_convert_rejects_garbage() -> None:
    with pytest.raises(InvalidInputError):
        convert(io.BytesIO(b"garbage"), "deck.pptx")


def test_read_file(sample_deck_path) -> None:
    contents = list(read_file(sample_deck_path))

    tc.assertEqual(1, len(contents))
    tc.assertEqual(2, len(contents[0].slides))
    tc.assertEqual("sample.pptx", contents[0].metadata.filename)


##########
# Writer #
##########


def _rendered_with_images() -> list[RenderedSlide]:
    slide = Slide(
        titles=["With images"],
        images=[
            SlideImage(filename="image1.png", content_type="image/png", data=b"png"),
            SlideImage(filename="image2.jpeg", content_type="image/jpeg", data=b"jpg"),
        ],
    )
    plain = Slide(titles=["Plain"])
    return [
        RenderedSlide(slide=slide, markup="first\n"),
        RenderedSlide(slide=plain, markup="second\n"),
    ]


def test_write_output_to_stream() -> None:
    stream = io.StringIO()

    written = write_output(_rendered_with_images(), stream=stream)

    tc.assertListEqual([], written)
    tc.assertEqual("first\nsecond\n", stream.getvalue())


def test_write_output_single_file(tmp_path) -> None:
    rendered = _rendered_with_images()
    output = tmp_path / "out" / "deck.MD"

    write_output(rendered, output)

    tc.assertEqual("first\nsecond\n", output.read_text(encoding="utf-8"))
    slide = rendered[0].slide
    image_dir = tmp_path / "out" / "img"
    tc.assertEqual(b"png", (image_dir / slide.image_resource_name(1)).read_bytes())
    tc.assertEqual(b"jpg", (image_dir / slide.image_resource_name(2)).read_bytes())
    tc.assertEqual(2, len(list(image_dir.iterdir())))


def test_write_output_directory(tmp_path) -> None:
    rendered = _rendered_with_images()
    output = tmp_path / "slides"

    written = write_output(rendered, output)

    tc.assertEqual("first\n", (output / "slide1.md").read_text(encoding="utf-8"))
    tc.assertEqual("second\n", (output / "slide2.md").read_text(encoding="utf-8"))
    tc.assertEqual(4, len(written))
    tc.assertTrue((output / "img" / rendered[0].slide.image_resource_name(1)).exists())


def test_written_images_match_markup(tmp_path, sample_deck_path) -> None:
    output = tmp_path / "site"

    write_output(convert_file(sample_deck_path), output)

    markup = (output / "slide2.md").read_text(encoding="utf-8")
    names = IMAGE_LINK.findall(markup)
    tc.assertEqual(1, len(names))
    tc.assertTrue((output / "img" / names[0]).is_file())


def test_public_read_pptx_accepts_zip_bomb_limits(deck) -> None:
    deck.title_slide("Title", "Subtitle")

    with pytest.raises(ExtractionZipBombError):
        next(read_pptx(deck.to_bytesio(), limits=ZipBombLimits(max_entries=3)))

    content = next(read_pptx(deck.to_bytesio(), limits=ZipBombLimits()))
    tc.assertListEqual(["Title"], content.slides[0].titles)
