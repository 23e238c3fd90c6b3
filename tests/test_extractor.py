import fitz
import pytest
from PIL import Image

from pdf_page_images.core import DocumentSession, ImageBlock, PageExtractionError, PageImageExtractor
from pdf_page_images.core.extractor import image_name, write_png

from conftest import image_rect, solid_pixmap


@pytest.fixture
def session(make_pdf):
    with DocumentSession(str(make_pdf([0, 3, 1]))) as session:
        yield session


def test_image_name_format():
    assert image_name(2, 1) == "page-002-img-0001"
    assert image_name(123, 4567) == "page-123-img-4567"


def test_image_blocks_in_content_order(session):
    page = session.load_page(1)
    textpage = page.get_textpage(flags=fitz.TEXT_PRESERVE_IMAGES)

    blocks = list(ImageBlock.from_textpage(textpage))

    assert len(blocks) == 3
    for img_index, block in enumerate(blocks):
        assert block.bbox.x0 == pytest.approx(image_rect(img_index).x0, abs=0.5)
        assert block.width == 16 and block.height == 16


def test_image_block_to_pixmap(session):
    page = session.load_page(2)
    textpage = page.get_textpage(flags=fitz.TEXT_PRESERVE_IMAGES)
    block = next(ImageBlock.from_textpage(textpage))

    pix = block.to_pixmap()

    assert (pix.width, pix.height) == (16, 16)


def test_image_block_repr_shows_colorspace():
    block = ImageBlock({'type': 1, 'number': 2, 'bbox': (0, 0, 1, 1), 'width': 4,
                        'height': 4, 'ext': 'png', 'colorspace': 3, 'image': b''})
    assert "colorspace=3" in repr(block)
    assert "size=(4x4)" in repr(block)


def test_image_block_without_data():
    block = ImageBlock({'type': 1, 'number': 0, 'bbox': (0, 0, 1, 1), 'image': b''})
    with pytest.raises(ValueError):
        block.to_pixmap()


def test_extract_writes_and_emits_names(session, out_dir):
    out_dir.mkdir()
    emitted = []
    extractor = PageImageExtractor(session, output_dir=str(out_dir), emit=emitted.append)

    result = extractor.extract(2)

    assert result.ok
    assert result.names == ["page-002-img-0001", "page-002-img-0002", "page-002-img-0003"]
    assert emitted == result.names
    for name in result.names:
        with Image.open(out_dir / f"{name}.png") as img:
            assert img.size == (16, 16)


def test_counter_restarts_on_every_page(session, out_dir):
    out_dir.mkdir()
    extractor = PageImageExtractor(session, output_dir=str(out_dir), emit=lambda name: None)

    assert extractor.extract(2).names[-1] == "page-002-img-0003"
    assert extractor.extract(3).names == ["page-003-img-0001"]


def test_page_without_images(session, out_dir):
    out_dir.mkdir()
    emitted = []
    extractor = PageImageExtractor(session, output_dir=str(out_dir), emit=emitted.append)

    result = extractor.extract(1)

    assert result.ok
    assert result.names == []
    assert emitted == []
    assert list(out_dir.iterdir()) == []


def test_missing_page_is_a_page_error(session, out_dir):
    extractor = PageImageExtractor(session, output_dir=str(out_dir), emit=lambda name: None)

    result = extractor.extract(99)

    assert not result.ok
    assert isinstance(result.error, PageExtractionError)
    assert result.error.page_number == 99
    assert "page 99" in str(result.error)


def test_unwritable_output_is_a_page_error(session, tmp_path):
    emitted = []
    extractor = PageImageExtractor(session, output_dir=str(tmp_path / "missing"),
                                   emit=emitted.append)

    result = extractor.extract(2)

    assert not result.ok
    assert result.names == []
    assert emitted == []


def test_write_png_converts_cmyk(tmp_path):
    path = tmp_path / "cmyk.png"
    write_png(solid_pixmap(0, colorspace=fitz.csCMYK), str(path))

    with Image.open(path) as img:
        assert img.format == "PNG"
        assert img.mode == "RGB"


def test_write_png_keeps_gray(tmp_path):
    path = tmp_path / "gray.png"
    write_png(solid_pixmap(128, colorspace=fitz.csGRAY), str(path))

    with Image.open(path) as img:
        assert img.mode == "L"


def test_write_png_rejects_alpha_only_pixmaps(tmp_path):
    alpha_only = fitz.Pixmap(None, fitz.Pixmap(fitz.csRGB, fitz.IRect(0, 0, 4, 4), True))
    assert alpha_only.colorspace is None

    with pytest.raises(ValueError, match="no colorspace"):
        write_png(alpha_only, str(tmp_path / "mask.png"))
