import io
from collections.abc import Callable

import docx
import pytest
from PIL import Image
from reportlab.lib.pagesizes import letter
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

RESUME_LINES = [
    "Jane Doe",
    "jane.doe@example.com",
    "Experienced software engineer with five years of Python",
    "University of Example, BSc Computer Science, 2016 - 2020",
]


def build_pdf(content_stream: bytes) -> bytes:
    """Wrap a raw content stream in a minimal PDF object layout."""
    length = str(len(content_stream)).encode("ascii")
    return b"".join(
        [
            b"%PDF-1.4\n",
            b"1 0 obj\n<< /Type /Catalog /Pages 2 0 R >>\nendobj\n",
            b"2 0 obj\n<< /Length " + length + b" >>\nstream\n",
            content_stream,
            b"\nendstream\nendobj\ntrailer\n<< /Root 1 0 R >>\n%%EOF\n",
        ]
    )


def build_docx(paragraphs: list[str], header: str = "") -> bytes:
    document = docx.Document()
    for text in paragraphs:
        document.add_paragraph(text)
    if header:
        document.sections[0].header.paragraphs[0].text = header
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


@pytest.fixture()
def resume_pdf_bytes() -> bytes:
    """Hand-built PDF whose text objects hold a short resume."""
    stream = (
        b"BT /F1 12 Tf 72 720 Td (Jane Doe) Tj ET\n"
        b"BT 72 700 Td (jane.doe@example.com) Tj ET\n"
        b"BT 72 680 Td [(Soft)-20(ware)( Engineer)] TJ ET\n"
        b"BT 72 660 Td (Experienced in Python and distributed systems) Tj ET\n"
    )
    return build_pdf(stream)


@pytest.fixture()
def image_only_pdf_bytes() -> bytes:
    """A real scanned-style PDF: one page holding a single raster image."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter, pageCompression=1)
    scan = Image.new("RGB", (64, 64), (200, 30, 30))
    c.drawImage(ImageReader(scan), 72, 600, width=128, height=128)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def rendered_pdf_bytes() -> bytes:
    """A real single-page PDF that PyMuPDF can rasterize."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter, pageCompression=1)
    for offset, line in enumerate(RESUME_LINES):
        c.drawString(72, 720 - offset * 20, line)
    c.save()
    return buf.getvalue()


@pytest.fixture()
def resume_docx_bytes() -> bytes:
    return build_docx(RESUME_LINES)


@pytest.fixture()
def header_only_docx_bytes() -> bytes:
    """DOCX whose only text lives in the page header."""
    return build_docx(
        [],
        header=(
            "Jane Doe | jane.doe@example.com | +1 555 0100 | "
            "Senior backend engineer, Berlin"
        ),
    )


@pytest.fixture()
def make_pdf() -> Callable[[bytes], bytes]:
    return build_pdf


@pytest.fixture()
def make_docx() -> Callable[..., bytes]:
    return build_docx
