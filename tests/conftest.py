import fitz
import pytest

PAGE_SIZE = 300
IMAGE_SIZE = 16


def solid_pixmap(value, colorspace=fitz.csRGB, size=IMAGE_SIZE):
    pix = fitz.Pixmap(colorspace, fitz.IRect(0, 0, size, size), False)
    pix.clear_with(value)
    return pix


def image_rect(img_index):
    x0 = 20 + img_index * 60
    return fitz.Rect(x0, 50, x0 + 50, 100)


@pytest.fixture
def make_pdf(tmp_path):
    """
    Build a PDF where page i holds image_counts[i] images.

    Every page also carries a line of text so that it yields text blocks.
    Extra keyword arguments go to ``Document.save`` (e.g. encryption).
    """
    def _make(image_counts, name="doc.pdf", **save_kwargs):
        doc = fitz.open()
        for page_index, count in enumerate(image_counts):
            page = doc.new_page(width=PAGE_SIZE, height=PAGE_SIZE)
            page.insert_text((20, 30), f"page {page_index + 1}")
            for img_index in range(count):
                value = (40 * page_index + 10 * img_index + 20) % 256
                page.insert_image(image_rect(img_index), pixmap=solid_pixmap(value))
        path = tmp_path / name
        doc.save(str(path), **save_kwargs)
        doc.close()
        return path
    return _make


@pytest.fixture
def encrypted_pdf(make_pdf):
    return make_pdf(
        [1, 1],
        name="locked.pdf",
        encryption=fitz.PDF_ENCRYPT_AES_256,
        owner_pw="owner",
        user_pw="secret",
    )


@pytest.fixture
def out_dir(tmp_path):
    return tmp_path / "out"
