import base64
import io
import json

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

ENCRYPTION_KEY = bytes(range(32))


def make_workspace_secret(encryption_key: bytes = ENCRYPTION_KEY) -> str:
    payload = {
        "account_id": "0b7c1f7e-7f5c-4d8e-9a55-3f1f4c2d9b10",
        "subaccount": None,
        "workspace_id": "5a3e2c1d-8b7f-4e6a-9c0d-1e2f3a4b5c6d",
        "encryption_key": base64.b64encode(encryption_key).decode("ascii"),
    }
    raw = b"\x01" * 64 + json.dumps(payload).encode("utf-8")
    return base64.b64encode(raw).decode("ascii")


@pytest.fixture()
def workspace_secret() -> str:
    return make_workspace_secret()


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Hello PDF World")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def rotated_two_page_pdf_bytes() -> bytes:
    """Two-page PDF whose first page text runs sideways, as if scanned at 90 degrees."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.saveState()
    c.translate(300, 400)
    c.rotate(90)
    c.drawString(0, 0, "Page one, scanned sideways")
    c.restoreState()
    c.showPage()
    c.drawString(72, 720, "Page two, upright")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_jpeg_bytes() -> bytes:
    # SOI, APP0/JFIF header, EOI: enough for an opaque upload.
    return bytes.fromhex("ffd8ffe000104a46494600010100000100010000ffd9")
