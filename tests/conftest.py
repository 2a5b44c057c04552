import io

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "ONTARIO SUPERIOR COURT OF JUSTICE")
    c.drawString(72, 700, "Financial Statement (Form 13.1)")
    c.save()
    return buf.getvalue()
