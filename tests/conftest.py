"""Shared pytest fixtures for PDF Nup tests."""
import fitz
import pytest

LETTER = (612, 792)
A4 = (595.28, 841.89)


@pytest.fixture
def make_pdf(tmp_path):
    """Factory fixture: make_pdf(name, sizes) -> path of a PDF with one labelled page per size."""
    def _make(name="source.pdf", sizes=(LETTER, LETTER)):
        path = tmp_path / name
        doc = fitz.open()
        for number, (width, height) in enumerate(sizes, start=1):
            page = doc.new_page(width=width, height=height)
            page.insert_text((72, 72), f"Page {number}", fontsize=24)
        doc.save(str(path))
        doc.close()
        return path
    return _make


@pytest.fixture
def letter_pdf(make_pdf):
    """Two Letter-sized pages labelled 'Page 1' and 'Page 2'."""
    return make_pdf()
