"""Shared fixtures for the plagiarism checker tests."""

import io

import pytest
from PyPDF2 import PdfWriter


@pytest.fixture
def write_text(tmp_path):
    """Write a text file under tmp_path and return its path as a string."""

    def _write(name, content):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def blank_pdf_bytes():
    writer = PdfWriter()
    writer.add_blank_page(width=200, height=200)
    buf = io.BytesIO()
    writer.write(buf)
    return buf.getvalue()
