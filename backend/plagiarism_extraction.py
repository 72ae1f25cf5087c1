# plagiarism_extraction.py - Turn uploaded/local files into raw text for the core
import os
from PyPDF2 import PdfReader

from plagiarism_config import SUPPORTED_EXTENSIONS, MAX_PDF_PAGES, TEXT_ENCODING
from plagiarism_core import make_document


class ExtractionError(Exception):
    """A single file could not be turned into text."""

    def __init__(self, file_name, message):
        self.file_name = file_name
        self.message = message
        super().__init__(f"{file_name}: {message}")

    def to_dict(self):
        return {"file_name": self.file_name, "error": self.message}


def _read_bytes(source):
    if hasattr(source, "read"):
        return source.read()
    with open(source, "rb") as f:
        return f.read()


def extract_text_from_txt(source):
    return _read_bytes(source).decode(TEXT_ENCODING, errors="replace")


def extract_text_from_pdf(source, max_pages=MAX_PDF_PAGES):
    """Concatenate page text, one space between pages."""
    reader = PdfReader(source)
    text = ""
    for page in reader.pages[:max_pages]:
        page_text = page.extract_text()
        if page_text:
            text += page_text + " "
    return text


def extract_text(source, filename):
    """
    Extract raw text from a path or binary stream, dispatching on the
    filename extension. Raises ExtractionError on any failure.
    """
    ext = os.path.splitext(filename)[1].lower()
    if ext not in SUPPORTED_EXTENSIONS:
        raise ExtractionError(filename, f"unsupported file type '{ext or filename}'")
    try:
        if ext == ".pdf":
            return extract_text_from_pdf(source)
        return extract_text_from_txt(source)
    except Exception as e:
        raise ExtractionError(filename, str(e) or e.__class__.__name__) from e


def load_documents(sources):
    """
    Build core documents from (filename, source) pairs.
    Returns (documents, failures); a failing file never stops the batch.
    """
    documents = []
    failures = []
    for filename, source in sources:
        try:
            text = extract_text(source, filename)
        except ExtractionError as e:
            print(f"⚠️ Could not read {filename}: {e.message}")
            failures.append(e.to_dict())
            continue
        documents.append(make_document(filename, text))
    return documents, failures


def list_corpus(folder):
    """(filename, path) pairs for every supported file in a folder, sorted by name."""
    return [
        (name, os.path.join(folder, name))
        for name in sorted(os.listdir(folder))
        if os.path.splitext(name)[1].lower() in SUPPORTED_EXTENSIONS
    ]
